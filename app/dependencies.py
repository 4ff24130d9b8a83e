"""
FastAPI Dependencies

All object creation happens here, not per request.

RULE: FastAPI routes call exactly one entry point: RegistryRouter.handle()
"""

from functools import lru_cache

from agents.registry import build_default_registry
from app.core.config import settings
from observability.sink import LoggingTraceSink
from orchestration.executor import AgentExecutor
from orchestration.router import RegistryRouter


@lru_cache(maxsize=1)
def get_registry_router() -> RegistryRouter:
    """
    Create and cache the RegistryRouter singleton.

    Components wired here:
    - AgentRegistry: index, reputation and bootstrap agents
    - AgentExecutor: timed dispatch to a registered agent
    - LoggingTraceSink: one log line per handled request

    Returns:
        RegistryRouter: The single entry point for request handling.
    """
    registry = build_default_registry(base_url=settings.function_base_url)

    return RegistryRouter(
        executor=AgentExecutor(registry=registry),
        sink=LoggingTraceSink(verbose=settings.log_level.upper() == "DEBUG"),
    )
