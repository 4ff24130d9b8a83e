"""
Agent Registry

Explicit agent registration keyed by agent name.
No auto-discovery - all agents must be registered explicitly.

DESIGN RULES:
- One agent per name
- Registration order is the order reported by /health
- Registry is the single source of truth for dispatch
"""

from typing import Dict, List, Optional

from agents.base import BaseAgent


class AgentNotFound(LookupError):
    """Raised when dispatch targets a name with no registered agent."""

    def __init__(self, agent_name: str):
        super().__init__(f"Unknown agent: {agent_name}")
        self.agent_name = agent_name


class AgentRegistry:
    """
    Central registry for registry agents.
    """

    def __init__(self):
        self._agents: Dict[str, BaseAgent] = {}

    def register(self, agent: BaseAgent) -> None:
        """
        Register an agent under its AGENT_NAME.

        Raises:
            ValueError: if the name is empty or already taken
        """
        if not agent.name:
            raise ValueError(f"{type(agent).__name__} has no AGENT_NAME")
        if agent.name in self._agents:
            raise ValueError(f"Agent already registered: {agent.name}")
        self._agents[agent.name] = agent

    def get(self, name: str) -> Optional[BaseAgent]:
        """Get an agent by name."""
        return self._agents.get(name)

    def require(self, name: str) -> BaseAgent:
        """Get an agent by name or raise AgentNotFound."""
        agent = self._agents.get(name)
        if agent is None:
            raise AgentNotFound(name)
        return agent

    def names(self) -> List[str]:
        """Registered agent names in registration order."""
        return list(self._agents.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._agents


# --- Agent Registration Bootstrap ---

def build_default_registry(base_url: Optional[str] = None) -> AgentRegistry:
    """
    Register the three registry agents.

    Args:
        base_url: Passed to BootstrapAgent for endpoint links
    """
    from agents.index_agent import IndexAgent
    from agents.reputation_agent import ReputationAgent
    from agents.bootstrap_agent import BootstrapAgent

    registry = AgentRegistry()
    registry.register(IndexAgent())
    registry.register(ReputationAgent())
    registry.register(BootstrapAgent(base_url=base_url))
    return registry
