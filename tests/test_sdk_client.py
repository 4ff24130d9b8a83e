import json

import httpx
import pytest

from llm_registry_sdk import (
    CreateModelRequest,
    ExecutionContext,
    LLMRegistryClient,
    LLMRegistryConfig,
    LLMRegistryError,
    SearchFilters,
    UpdateModelRequest,
    UploadAssetRequest,
)

MODEL = {
    "id": "m-1",
    "name": "gpt-small",
    "version": "1.0.0",
    "created_at": "2026-01-01T00:00:00Z",
    "updated_at": "2026-01-02T00:00:00Z",
}

ASSET = {
    "id": "a-1",
    "model_id": "m-1",
    "name": "weights",
    "version": "1.0.0",
    "content_type": "application/octet-stream",
    "size": 4,
    "checksum": "sha256:abcd",
    "storage_path": "s3://bucket/weights",
    "created_at": "2026-01-01T00:00:00Z",
}

EXECUTION = {
    "execution_id": "exec-001",
    "spans": [{
        "span_id": "01HQWX0000000000000000000A",
        "parent_span_id": "01HQWX0000000000000000000P",
        "span_type": "repo",
        "name": "llm-registry",
        "started_at": "2026-01-01T00:00:00Z",
        "status": "ok",
        "artifacts": [],
        "attributes": {},
    }],
}


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, responder):
        self.requests = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


def make_client(responder, **config):
    recorder = Recorder(responder)
    config.setdefault("base_url", "http://registry.test")
    client = LLMRegistryClient(LLMRegistryConfig(**config), transport=httpx.MockTransport(recorder))
    return client, recorder


@pytest.mark.asyncio
async def test_injects_execution_and_auth_headers():
    ctx = ExecutionContext(execution_id="exec-001", parent_span_id="span-parent")
    client, recorder = make_client(lambda r: httpx.Response(200, json=[MODEL]), api_token="secret", execution_context=ctx)

    async with client:
        models = await client.list_models()

    request = recorder.requests[0]
    assert request.url.path == "/api/v1/models"
    assert request.headers["X-Execution-Id"] == "exec-001"
    assert request.headers["X-Parent-Span-Id"] == "span-parent"
    assert request.headers["Authorization"] == "Bearer secret"
    assert models[0].id == "m-1"


@pytest.mark.asyncio
async def test_set_execution_context_applies_to_next_request():
    client, recorder = make_client(lambda r: httpx.Response(200, json={"status": "healthy"}))

    async with client:
        await client.health()
        client.set_execution_context(ExecutionContext(execution_id="exec-002", parent_span_id="p-2"))
        await client.health()

    assert "X-Execution-Id" not in recorder.requests[0].headers
    assert "Authorization" not in recorder.requests[0].headers
    assert recorder.requests[1].headers["X-Execution-Id"] == "exec-002"


@pytest.mark.asyncio
async def test_unwraps_execution_envelope():
    client, _ = make_client(lambda r: httpx.Response(200, json={"data": MODEL, "execution": EXECUTION}))

    async with client:
        model = await client.get_model("m-1")

    assert model.name == "gpt-small"
    assert client.last_execution.execution_id == "exec-001"
    assert client.last_execution.spans[0].span_type == "repo"


@pytest.mark.asyncio
async def test_unwraps_paginated_envelope():
    payload = {
        "items": [ASSET],
        "pagination": {"total": 1, "offset": 0, "limit": 20, "has_more": False},
        "execution": EXECUTION,
    }
    client, recorder = make_client(lambda r: httpx.Response(200, json=payload))

    async with client:
        assets = await client.list_assets("m-1")

    assert recorder.requests[0].url.path == "/api/v1/models/m-1/assets"
    assert [asset.id for asset in assets] == ["a-1"]


@pytest.mark.asyncio
async def test_search_filters_become_query_params():
    client, recorder = make_client(lambda r: httpx.Response(200, json=[]))

    async with client:
        result = await client.search_models(SearchFilters(query="llama", tags=["chat", "small"], limit=5))

    params = recorder.requests[0].url.params
    assert recorder.requests[0].url.path == "/api/v1/models/search"
    assert params["query"] == "llama"
    assert params.get_list("tags") == ["chat", "small"]
    assert params["limit"] == "5"
    assert "provider" not in params
    assert result == []


@pytest.mark.asyncio
async def test_create_and_update_model_bodies():
    client, recorder = make_client(lambda r: httpx.Response(200, json=MODEL))

    async with client:
        await client.create_model(CreateModelRequest(name="gpt-small", version="1.0.0"))
        await client.update_model("m-1", UpdateModelRequest(description="tuned"))

    create, update = recorder.requests
    assert create.method == "POST"
    assert json.loads(create.content) == {"name": "gpt-small", "version": "1.0.0"}
    assert update.method == "PATCH"
    assert update.url.path == "/api/v1/models/m-1"
    assert json.loads(update.content) == {"description": "tuned"}


@pytest.mark.asyncio
async def test_delete_endpoints():
    client, recorder = make_client(lambda r: httpx.Response(204))

    async with client:
        assert await client.delete_model("m-1") is None
        assert await client.delete_asset("m-1", "a-1") is None

    assert [(r.method, r.url.path) for r in recorder.requests] == [
        ("DELETE", "/api/v1/models/m-1"),
        ("DELETE", "/api/v1/models/m-1/assets/a-1"),
    ]


@pytest.mark.asyncio
async def test_upload_asset_is_multipart():
    client, recorder = make_client(lambda r: httpx.Response(201, json={"data": ASSET, "execution": EXECUTION}))

    async with client:
        asset = await client.upload_asset(UploadAssetRequest(
            model_id="m-1",
            name="weights",
            version="1.0.0",
            content_type="application/octet-stream",
            file=b"\x00\x01\x02\x03",
            metadata={"quantized": True},
        ))

    request = recorder.requests[0]
    assert request.url.path == "/api/v1/models/m-1/assets"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="metadata"' in request.content
    assert b'{"quantized": true}' in request.content
    assert asset.checksum == "sha256:abcd"


@pytest.mark.asyncio
async def test_download_asset_returns_bytes():
    client, recorder = make_client(lambda r: httpx.Response(200, content=b"\x00\x01"))

    async with client:
        content = await client.download_asset("m-1", "a-1")

    assert content == b"\x00\x01"
    assert recorder.requests[0].url.path == "/api/v1/models/m-1/assets/a-1/download"


@pytest.mark.asyncio
async def test_error_body_raises_registry_error():
    error = {
        "status": 404,
        "error": "Model not found",
        "code": "NOT_FOUND",
        "timestamp": "2026-01-01T00:00:00Z",
    }
    client, _ = make_client(lambda r: httpx.Response(404, json=error))

    async with client:
        with pytest.raises(LLMRegistryError) as exc_info:
            await client.get_model("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Model not found"
    assert exc_info.value.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_non_json_error_uses_text():
    client, _ = make_client(lambda r: httpx.Response(502, text="bad gateway"))

    async with client:
        with pytest.raises(LLMRegistryError) as exc_info:
            await client.version()

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "bad gateway"
    assert exc_info.value.code is None
