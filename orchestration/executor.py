import logging
import time
from typing import Any, Dict, Optional

from pydantic import BaseModel

from agents.registry import AgentRegistry, build_default_registry
from schemas.result import AgentResult

logger = logging.getLogger(__name__)


class AgentExecutor:
    """
    Invokes one registry agent and times it.

    Exceptions raised by an agent propagate to the caller unchanged;
    the router turns them into the 500 envelope.
    """

    def __init__(self, registry: Optional[AgentRegistry] = None):
        """
        Args:
            registry: Agents to dispatch to. Defaults to the three registry agents.
        """
        self._registry = registry or build_default_registry()

    @property
    def registry(self) -> AgentRegistry:
        return self._registry

    async def run(self, agent_name: str, body: Dict[str, Any]) -> AgentResult:
        """
        Dispatch a validated body to the named agent.

        Raises:
            AgentNotFound: if no agent is registered under agent_name
        """
        agent = self._registry.require(agent_name)

        start = time.perf_counter()
        output = await agent.execute(body)
        duration_ms = round((time.perf_counter() - start) * 1000)

        data = output.model_dump(mode="json") if isinstance(output, BaseModel) else output
        logger.debug(f"Agent {agent_name} completed in {duration_ms}ms")

        return AgentResult(data=data, agent_layer=agent.layer, duration_ms=duration_ms)
