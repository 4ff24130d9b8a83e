from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import BaseModel

from schemas.result import agent_layer_name


class BaseAgent(ABC):
    """
    Contract every registry agent implements.

    Agents receive a body that already passed contract validation and
    return a typed response model. They do not call each other and hold
    no per-request state.
    """

    AGENT_NAME: str = ""

    @property
    def name(self) -> str:
        return self.AGENT_NAME

    @property
    def layer(self) -> str:
        """Layer label recorded in layers_executed."""
        return agent_layer_name(self.name)

    @abstractmethod
    async def execute(self, body: Dict[str, Any]) -> BaseModel:
        """
        Handle one validated request.

        Args:
            body: Request body that passed contract validation

        Returns:
            The agent's response model
        """
        pass
