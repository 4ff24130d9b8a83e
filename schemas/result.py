from typing import Any
from pydantic import BaseModel, Field


ROUTING_LAYER = "AGENT_ROUTING"


def agent_layer_name(agent_name: str) -> str:
    """Layer label recorded for an agent, e.g. 'index' -> 'REGISTRY_INDEX'."""
    return f"REGISTRY_{agent_name.upper()}"


# --- Agent Result Schema ---

class AgentResult(BaseModel):
    """
    Transient result of one agent invocation.

    Only used to assemble the response envelope; never persisted.
    """
    data: Any = Field(..., description="JSON-ready agent output")
    agent_layer: str = Field(..., description="Layer label, e.g. REGISTRY_INDEX")
    duration_ms: int = Field(default=0, ge=0, description="Wall-clock handler time in milliseconds")
