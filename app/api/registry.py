"""
Registry API Route

Thin transport adapter: turns a Starlette request into an InboundRequest,
hands it to RegistryRouter, and writes the OutboundResponse back.

Contains NO routing, validation, or agent-specific code. Path matching,
CORS and the response envelope all live in orchestration.router so the
same handler can sit behind any HTTP runtime.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response

from app.dependencies import get_registry_router
from orchestration.router import RegistryRouter
from schemas.request import InboundRequest


logger = logging.getLogger(__name__)

router = APIRouter()

HANDLED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


async def _read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when the body is empty or not valid JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        logger.debug(f"Ignoring non-JSON body on {request.method} {request.url.path}")
        return None


async def to_inbound_request(request: Request) -> InboundRequest:
    """Adapt a Starlette request to the router's transport-neutral shape."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    return InboundRequest(
        method=request.method,
        path=request.url.path,
        url=url,
        headers={key: request.headers.get(key) for key in request.headers.keys()},
        body=await _read_json_body(request),
    )


@router.api_route("/{full_path:path}", methods=HANDLED_METHODS, include_in_schema=False)
async def handle_registry_request(
    request: Request,
    registry_router: RegistryRouter = Depends(get_registry_router),
) -> Response:
    """
    Single function endpoint for every path and method.

    Delegates to RegistryRouter.handle(); no business logic here.
    """
    inbound = await to_inbound_request(request)
    outbound = await registry_router.handle(inbound)

    return Response(
        content=outbound.render(),
        status_code=outbound.status_code,
        headers=outbound.headers,
    )
