"""
Registry Router

The single entry point for every inbound HTTP request.

FLOW:
Request → CORS → Path Resolution → Method Gate → Contract Validation
        → AgentExecutor → Response Envelope

ENVELOPE GUARANTEES:
1. Every response carries the CORS headers
2. Every non-204 body carries execution_metadata and layers_executed
3. layers_executed[0] is always the routing layer
4. An agent layer, when present, is second and records success/failure
5. Failures are reported to the caller, never swallowed
"""

import logging
from typing import Any, Dict, List, Optional

from app.core.config import settings
from observability.sink import LoggingTraceSink, TraceSink
from observability.trace import ExecutionMetadata, LayerEntry, RequestTrace
from orchestration.executor import AgentExecutor
from schemas.contracts import get_contract_schemas
from schemas.request import InboundRequest
from schemas.response import OutboundResponse
from schemas.result import ROUTING_LAYER, agent_layer_name
from validation.contract_validator import validate_request_body, validate_request_strict


logger = logging.getLogger(__name__)


CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Correlation-Id",
    "Access-Control-Max-Age": "3600",
}

CORRELATION_HEADER = "X-Correlation-Id"

HEALTH_PATHS = ("/health", "/")
CONTRACTS_PATH = "/contracts"

AGENT_ROUTES: Dict[str, str] = {
    "/v1/registry/index": "index",
    "/v1/registry/reputation": "reputation",
    "/v1/registry/bootstrap": "bootstrap",
}

AVAILABLE_ROUTES: List[str] = ["/health", CONTRACTS_PATH, *AGENT_ROUTES.keys()]

METHOD_NOT_ALLOWED = "Method not allowed. Use POST."
INTERNAL_AGENT_ERROR = "Internal agent error"


class RegistryRouter:
    """
    Routes a request to health, contracts, or one of the registry agents
    and wraps the outcome in the standard envelope.

    This is the glue, not the brain: agents own the payloads, the router
    owns status codes, metadata and layers.
    """

    def __init__(
        self,
        executor: Optional[AgentExecutor] = None,
        sink: Optional[TraceSink] = None,
        service_name: Optional[str] = None,
        strict_validation: Optional[bool] = None,
        trace_enabled: Optional[bool] = None,
    ):
        """
        Initialize the router with injected dependencies.

        Args:
            executor: Agent dispatcher (defaults to the three registry agents)
            sink: Where per-request traces go (defaults to LoggingTraceSink)
            service_name: Reported in execution_metadata.service
            strict_validation: Enforce enums/ranges/types on request bodies
            trace_enabled: Emit a RequestTrace per handled request
        """
        self._executor = executor or AgentExecutor()
        self._sink = sink or LoggingTraceSink()
        self._service_name = service_name or settings.service_name
        self._strict = settings.strict_validation if strict_validation is None else strict_validation
        self._trace_enabled = settings.trace_enabled if trace_enabled is None else trace_enabled

    @property
    def agent_names(self) -> List[str]:
        return self._executor.registry.names()

    async def handle(self, request: InboundRequest) -> OutboundResponse:
        """
        Handle one request end to end.

        Args:
            request: Transport-neutral request

        Returns:
            OutboundResponse: status, headers (CORS included) and JSON envelope
        """
        if request.method == "OPTIONS":
            return OutboundResponse.empty(204, headers=CORS_HEADERS)

        path = request.resolve_path()
        metadata = ExecutionMetadata.create(
            service=self._service_name,
            correlation_id=request.header(CORRELATION_HEADER),
        )

        # Handlers append to layers; the same entries feed the envelope and the trace
        layers: List[LayerEntry] = []

        if path in HEALTH_PATHS:
            response = self._health(metadata, layers)
        elif path == CONTRACTS_PATH:
            response = self._contracts(metadata, layers)
        elif path in AGENT_ROUTES:
            response = await self._agent(AGENT_ROUTES[path], request, metadata, layers)
        else:
            response = self._not_found(path, metadata, layers)

        self._emit_trace(request, path, metadata, response, layers)
        return response

    # =====================================================
    # META ROUTES
    # =====================================================

    def _health(self, metadata: ExecutionMetadata, layers: List[LayerEntry]) -> OutboundResponse:
        layers.append(LayerEntry.completed(ROUTING_LAYER))
        return self._envelope(200, metadata, layers, {
            "status": "healthy",
            "agents": self.agent_names,
        })

    def _contracts(self, metadata: ExecutionMetadata, layers: List[LayerEntry]) -> OutboundResponse:
        layers.append(LayerEntry.completed(ROUTING_LAYER))
        return self._envelope(200, metadata, layers, {
            "contracts": get_contract_schemas(),
        })

    def _not_found(self, path: str, metadata: ExecutionMetadata, layers: List[LayerEntry]) -> OutboundResponse:
        layers.append(LayerEntry.failed(ROUTING_LAYER))
        return self._envelope(404, metadata, layers, {
            "error": f"Route not found: {path}",
            "available_routes": list(AVAILABLE_ROUTES),
        })

    # =====================================================
    # AGENT ROUTES
    # =====================================================

    async def _agent(
        self,
        agent_name: str,
        request: InboundRequest,
        metadata: ExecutionMetadata,
        layers: List[LayerEntry],
    ) -> OutboundResponse:
        layers.append(LayerEntry.completed(ROUTING_LAYER))
        trace_id = metadata.trace_id

        if request.method != "POST":
            return self._envelope(405, metadata, layers, {"error": METHOD_NOT_ALLOWED})

        validate = validate_request_strict if self._strict else validate_request_body
        validation_error = validate(request.body, agent_name)
        if validation_error:
            logger.info(f"[{trace_id}] Rejected {agent_name} request: {validation_error}")
            layers.append(LayerEntry.failed(agent_layer_name(agent_name), duration_ms=0))
            return self._envelope(400, metadata, layers, {"error": validation_error})

        try:
            result = await self._executor.run(agent_name, request.body)
        except Exception as e:
            logger.exception(f"[{trace_id}] Agent {agent_name} failed")
            layers.append(LayerEntry.failed(agent_layer_name(agent_name), duration_ms=0))
            return self._envelope(500, metadata, layers, {"error": str(e) or INTERNAL_AGENT_ERROR})

        layers.append(LayerEntry.completed(result.agent_layer, duration_ms=result.duration_ms))
        return self._envelope(200, metadata, layers, {"data": result.data})

    # =====================================================
    # ASSEMBLY
    # =====================================================

    @staticmethod
    def _envelope(
        status_code: int,
        metadata: ExecutionMetadata,
        layers: List[LayerEntry],
        payload: Dict[str, Any],
    ) -> OutboundResponse:
        body = dict(payload)
        body["execution_metadata"] = metadata.to_dict()
        body["layers_executed"] = [layer.to_dict() for layer in layers]
        return OutboundResponse.json_body(status_code, body, headers=CORS_HEADERS)

    def _emit_trace(
        self,
        request: InboundRequest,
        path: str,
        metadata: ExecutionMetadata,
        response: OutboundResponse,
        layers: List[LayerEntry],
    ) -> None:
        """Forward a RequestTrace to the sink. Never throws."""
        if not self._trace_enabled:
            return

        try:
            body = response.body or {}
            trace = RequestTrace(
                execution_id=metadata.execution_id,
                trace_id=metadata.trace_id,
                method=request.method,
                path=path,
                status_code=response.status_code,
                layers=list(layers),
                error=body.get("error"),
            )
            self._sink.emit(trace)
        except Exception as e:
            logger.warning(f"[{metadata.trace_id}] Failed to emit request trace: {e}")
