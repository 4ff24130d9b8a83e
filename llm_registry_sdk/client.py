"""
LLM Registry SDK Client

Async client for the LLM Registry API.

Every request carries the current execution context as
X-Execution-Id / X-Parent-Span-Id headers so the registry can attach its
spans to the caller's execution.

Example:
    config = LLMRegistryConfig(
        base_url="http://localhost:8080",
        api_token="your-api-token",
        execution_context=ExecutionContext(execution_id="exec-001", parent_span_id="01HQWX..."),
    )
    async with LLMRegistryClient(config) as client:
        models = await client.list_models()
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from llm_registry_sdk.exceptions import LLMRegistryError
from llm_registry_sdk.types import (
    Asset,
    CreateModelRequest,
    ErrorResponse,
    ExecutionContext,
    ExecutionResult,
    LLMRegistryConfig,
    Model,
    SearchFilters,
    UpdateModelRequest,
    UploadAssetRequest,
)


logger = logging.getLogger(__name__)

MODELS_PATH = "/api/v1/models"


class LLMRegistryClient:
    """
    Thin typed wrapper over httpx.AsyncClient.

    Owns its HTTP client; close it with aclose() or use `async with`.
    """

    def __init__(self, config: LLMRegistryConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            config: Connection settings and default execution context
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._config = config
        self._execution_context: Optional[ExecutionContext] = config.execution_context
        self._last_execution: Optional[ExecutionResult] = None

        headers: Dict[str, str] = {"Accept": "application/json"}
        if config.api_token:
            headers["Authorization"] = f"Bearer {config.api_token}"
        headers.update(config.headers)

        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=headers,
            transport=transport,
            event_hooks={"request": [self._inject_execution_headers]},
        )

    async def __aenter__(self) -> "LLMRegistryClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ============================================================
    # EXECUTION CONTEXT
    # ============================================================

    @property
    def execution_context(self) -> Optional[ExecutionContext]:
        return self._execution_context

    def set_execution_context(self, ctx: ExecutionContext) -> None:
        """Update the execution context for subsequent requests."""
        self._execution_context = ctx

    @property
    def last_execution(self) -> Optional[ExecutionResult]:
        """Execution spans from the most recent enveloped response."""
        return self._last_execution

    async def _inject_execution_headers(self, request: httpx.Request) -> None:
        ctx = self._execution_context
        if ctx:
            request.headers.update(ctx.to_headers())

    # ============================================================
    # LOW-LEVEL HTTP
    # ============================================================

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        response = await self._client.request(method, url, **kwargs)
        if response.is_error:
            raise self._to_error(response)
        return response

    @staticmethod
    def _to_error(response: httpx.Response) -> LLMRegistryError:
        try:
            error = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            message = response.text or response.reason_phrase
            return LLMRegistryError(response.status_code, message)
        return LLMRegistryError(response.status_code, error.error, code=error.code, response=error)

    def _unwrap(self, payload: Any) -> Any:
        """
        Strip the execution envelope, keeping its spans in last_execution.

        {data, execution} -> data; {items, pagination, execution} -> items.
        Bare payloads pass through untouched.
        """
        if not isinstance(payload, dict) or "execution" not in payload:
            return payload

        try:
            self._last_execution = ExecutionResult.model_validate(payload["execution"])
        except ValidationError as e:
            logger.warning(f"Ignoring malformed execution result: {e}")

        if "data" in payload:
            return payload["data"]
        if "items" in payload:
            return payload["items"]
        return payload

    async def _json(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._request(method, url, **kwargs)
        if not response.content:
            return None
        return self._unwrap(response.json())

    # ============================================================
    # MODELS API
    # ============================================================

    async def list_models(self, filters: Optional[SearchFilters] = None) -> List[Model]:
        params = filters.to_params() if filters else None
        data = await self._json("GET", MODELS_PATH, params=params)
        return [Model.model_validate(item) for item in data or []]

    async def get_model(self, model_id: str) -> Model:
        data = await self._json("GET", f"{MODELS_PATH}/{model_id}")
        return Model.model_validate(data)

    async def create_model(self, request: CreateModelRequest) -> Model:
        data = await self._json("POST", MODELS_PATH, json=request.model_dump(exclude_none=True))
        return Model.model_validate(data)

    async def update_model(self, model_id: str, updates: Union[UpdateModelRequest, Dict[str, Any]]) -> Model:
        """Partial update: only fields explicitly set are sent."""
        if isinstance(updates, UpdateModelRequest):
            body = updates.model_dump(exclude_unset=True)
        else:
            body = dict(updates)
        data = await self._json("PATCH", f"{MODELS_PATH}/{model_id}", json=body)
        return Model.model_validate(data)

    async def delete_model(self, model_id: str) -> None:
        await self._request("DELETE", f"{MODELS_PATH}/{model_id}")

    async def search_models(self, filters: SearchFilters) -> List[Model]:
        data = await self._json("GET", f"{MODELS_PATH}/search", params=filters.to_params())
        return [Model.model_validate(item) for item in data or []]

    # ============================================================
    # ASSETS API
    # ============================================================

    async def list_assets(self, model_id: str) -> List[Asset]:
        data = await self._json("GET", f"{MODELS_PATH}/{model_id}/assets")
        return [Asset.model_validate(item) for item in data or []]

    async def get_asset(self, model_id: str, asset_id: str) -> Asset:
        data = await self._json("GET", f"{MODELS_PATH}/{model_id}/assets/{asset_id}")
        return Asset.model_validate(data)

    async def upload_asset(self, request: UploadAssetRequest) -> Asset:
        """Upload an asset as multipart/form-data."""
        form: Dict[str, str] = {
            "name": request.name,
            "version": request.version,
            "content_type": request.content_type,
        }
        if request.metadata:
            form["metadata"] = json.dumps(request.metadata)

        files = {"file": (request.filename or request.name, request.file, request.content_type)}
        data = await self._json("POST", f"{MODELS_PATH}/{request.model_id}/assets", data=form, files=files)
        return Asset.model_validate(data)

    async def download_asset(self, model_id: str, asset_id: str) -> bytes:
        response = await self._request("GET", f"{MODELS_PATH}/{model_id}/assets/{asset_id}/download")
        return response.content

    async def delete_asset(self, model_id: str, asset_id: str) -> None:
        await self._request("DELETE", f"{MODELS_PATH}/{model_id}/assets/{asset_id}")

    # ============================================================
    # HEALTH & STATUS
    # ============================================================

    async def health(self) -> Dict[str, Any]:
        """API health status, e.g. {"status": "healthy", "version": "..."}."""
        return await self._json("GET", "/health")

    async def version(self) -> Dict[str, Any]:
        return await self._json("GET", "/version")
