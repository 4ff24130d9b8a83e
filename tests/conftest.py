import pytest

from agents.registry import build_default_registry
from observability.sink import MemoryTraceSink
from orchestration.executor import AgentExecutor
from orchestration.router import RegistryRouter

TEST_BASE_URL = "https://agents.example.test/registry-agents"


@pytest.fixture
def trace_sink():
    return MemoryTraceSink()


@pytest.fixture
def registry_router(trace_sink):
    executor = AgentExecutor(registry=build_default_registry(base_url=TEST_BASE_URL))
    return RegistryRouter(
        executor=executor,
        sink=trace_sink,
        service_name="registry-agents",
        strict_validation=False,
        trace_enabled=True,
    )


@pytest.fixture
def strict_router(trace_sink):
    executor = AgentExecutor(registry=build_default_registry(base_url=TEST_BASE_URL))
    return RegistryRouter(executor=executor, sink=trace_sink, strict_validation=True)
