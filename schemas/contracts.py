"""
Registry Agent Contracts

Request/response contracts for the three registry agents.

Two representations live here:
- CONTRACT_SCHEMAS: JSON-Schema-shaped tables used for request validation
  and served verbatim by GET /contracts
- Pydantic models: typed request/response shapes used by the agents and
  by strict validation

The schema tables are process-wide constants. Never mutate them; use
get_contract_schemas() when handing them to callers.
"""

import copy
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# JSON SCHEMA TABLES
# ============================================================

CONTRACT_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "index": {
        "request": {
            "type": "object",
            "required": ["mode"],
            "properties": {
                "asset_ids": {"type": "array", "items": {"type": "string"}},
                "mode": {"type": "string", "enum": ["full", "incremental", "rebuild"]},
                "asset_type": {
                    "type": "string",
                    "enum": ["MODEL", "PIPELINE", "TEST_SUITE", "POLICY", "DATASET"],
                },
            },
            "additionalProperties": False,
        },
        "response": {
            "type": "object",
            "required": ["indexed_count", "failed_count", "mode", "errors"],
            "properties": {
                "indexed_count": {"type": "number"},
                "failed_count": {"type": "number"},
                "mode": {"type": "string"},
                "errors": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "asset_id": {"type": "string"},
                            "error": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
    "reputation": {
        "request": {
            "type": "object",
            "required": ["agent_id", "operation"],
            "properties": {
                "agent_id": {"type": "string"},
                "operation": {"type": "string", "enum": ["query", "record"]},
                "signal": {
                    "type": "object",
                    "properties": {
                        "score": {"type": "number", "minimum": 0, "maximum": 1},
                        "category": {
                            "type": "string",
                            "enum": ["reliability", "accuracy", "latency", "compliance"],
                        },
                        "evidence": {"type": "string"},
                    },
                    "required": ["score", "category"],
                },
            },
            "additionalProperties": False,
        },
        "response": {
            "type": "object",
            "required": ["agent_id", "overall_score", "category_scores", "signal_count", "last_updated"],
            "properties": {
                "agent_id": {"type": "string"},
                "overall_score": {"type": "number"},
                "category_scores": {"type": "object"},
                "signal_count": {"type": "number"},
                "last_updated": {"type": "string", "format": "date-time"},
            },
        },
    },
    "bootstrap": {
        "request": {
            "type": "object",
            "required": ["template_id", "agent_name"],
            "properties": {
                "template_id": {"type": "string"},
                "agent_name": {"type": "string"},
                "config_overrides": {"type": "object"},
            },
            "additionalProperties": False,
        },
        "response": {
            "type": "object",
            "required": ["agent_id", "agent_name", "template_id", "status", "config_applied", "endpoints"],
            "properties": {
                "agent_id": {"type": "string"},
                "agent_name": {"type": "string"},
                "template_id": {"type": "string"},
                "status": {"type": "string", "enum": ["created", "pending", "failed"]},
                "config_applied": {"type": "object"},
                "endpoints": {
                    "type": "object",
                    "properties": {
                        "health": {"type": "string"},
                        "invoke": {"type": "string"},
                    },
                },
            },
        },
    },
}

AGENT_NAMES: List[str] = list(CONTRACT_SCHEMAS.keys())


def get_contract_schemas() -> Dict[str, Dict[str, Any]]:
    """Return a private copy of all schema pairs (safe to serialize or mutate)."""
    return copy.deepcopy(CONTRACT_SCHEMAS)


def get_request_schema(agent_name: str) -> Dict[str, Any]:
    """Look up the request schema for an agent. Raises KeyError if unknown."""
    return CONTRACT_SCHEMAS[agent_name]["request"]


# ============================================================
# TAXONOMY
# ============================================================

class IndexMode(str, Enum):
    """Index operation mode."""
    FULL = "full"
    INCREMENTAL = "incremental"
    REBUILD = "rebuild"


class AssetType(str, Enum):
    """Registry asset kinds that can be indexed."""
    MODEL = "MODEL"
    PIPELINE = "PIPELINE"
    TEST_SUITE = "TEST_SUITE"
    POLICY = "POLICY"
    DATASET = "DATASET"


class ReputationOperation(str, Enum):
    """'query' reads reputation, 'record' submits a new signal."""
    QUERY = "query"
    RECORD = "record"


class ReputationCategory(str, Enum):
    RELIABILITY = "reliability"
    ACCURACY = "accuracy"
    LATENCY = "latency"
    COMPLIANCE = "compliance"


# --- Index ---

class IndexRequest(BaseModel):
    """Index request. Empty asset_ids means a full re-index."""
    model_config = ConfigDict(extra="forbid")

    mode: IndexMode = Field(..., description="Index operation mode")
    asset_ids: Optional[List[str]] = Field(default=None, description="Asset IDs to index")
    asset_type: Optional[AssetType] = Field(default=None, description="Optional filter by asset type")


class IndexFailure(BaseModel):
    asset_id: str
    error: str


class IndexResponse(BaseModel):
    indexed_count: int
    failed_count: int
    mode: Any = Field(..., description="Echoed from the request as sent")
    errors: List[IndexFailure] = Field(default_factory=list)


# --- Reputation ---

class ReputationSignal(BaseModel):
    """Signal to record (expected when operation is 'record')."""
    score: float = Field(..., ge=0.0, le=1.0)
    category: ReputationCategory
    evidence: Optional[str] = None


class ReputationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    agent_id: str = Field(..., description="Agent to query or update reputation for")
    operation: ReputationOperation
    signal: Optional[ReputationSignal] = None


class ReputationResponse(BaseModel):
    agent_id: Any = Field(..., description="Echoed from the request as sent")
    overall_score: Union[int, float]
    category_scores: Dict[str, Union[int, float]]
    signal_count: int
    last_updated: str = Field(..., description="ISO-8601 timestamp")


# --- Bootstrap ---

class BootstrapRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    template_id: str = Field(..., description="Template identifier to bootstrap from")
    agent_name: str = Field(..., description="Name for the new agent instance")
    config_overrides: Optional[Dict[str, Any]] = Field(
        default=None, description="Configuration overrides for the bootstrapped agent"
    )


class BootstrapEndpoints(BaseModel):
    health: str
    invoke: str


class BootstrapResponse(BaseModel):
    """agent_name, template_id and config_applied are echoed from the request as sent."""
    agent_id: str
    agent_name: Any
    template_id: Any
    status: Literal["created", "pending", "failed"]
    config_applied: Any = Field(default_factory=dict)
    endpoints: BootstrapEndpoints


REQUEST_MODELS: Dict[str, type] = {
    "index": IndexRequest,
    "reputation": ReputationRequest,
    "bootstrap": BootstrapRequest,
}
