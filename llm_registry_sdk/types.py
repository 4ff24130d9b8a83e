"""
LLM Registry SDK Types

Wire models for the LLM Registry API and its execution envelopes.
"""

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


# ============================================================
# EXECUTION SYSTEM
# ============================================================

class ExecutionContext(BaseModel):
    """
    Execution context for agentics tracing.

    Sent as X-Execution-Id / X-Parent-Span-Id on every request.
    """
    execution_id: str = Field(..., description="Execution identifier assigned by the Core")
    parent_span_id: str = Field(..., description="Span ID of the calling entity")

    def to_headers(self) -> Dict[str, str]:
        return {
            "X-Execution-Id": self.execution_id,
            "X-Parent-Span-Id": self.parent_span_id,
        }


class SpanType(str, Enum):
    REPO = "repo"
    AGENT = "agent"


class SpanStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"


class SpanArtifact(BaseModel):
    """An artifact attached to an agent-level span."""
    name: str
    content_type: Optional[str] = None
    data: Any = None


class ExecutionSpan(BaseModel):
    """A single execution span (repo or agent level)."""
    span_id: str
    parent_span_id: str
    span_type: SpanType
    name: str
    started_at: str
    ended_at: Optional[str] = None
    status: SpanStatus
    artifacts: List[SpanArtifact] = Field(default_factory=list)
    attributes: Dict[str, Any] = Field(default_factory=dict)


class ExecutionResult(BaseModel):
    """Execution spans returned with every /v1/* response."""
    execution_id: str
    spans: List[ExecutionSpan] = Field(default_factory=list)


class ExecutionEnvelope(BaseModel, Generic[T]):
    """Response envelope wrapping data alongside execution spans."""
    data: T
    execution: ExecutionResult
    meta: Optional[Dict[str, Any]] = None


class Pagination(BaseModel):
    total: int
    offset: int
    limit: int
    has_more: bool


class PaginatedExecutionEnvelope(BaseModel, Generic[T]):
    """Paginated response with execution spans."""
    items: List[T]
    pagination: Pagination
    execution: ExecutionResult


class ErrorResponse(BaseModel):
    """Error body returned by the registry, possibly with spans."""
    status: int
    error: str
    code: Optional[str] = None
    timestamp: Optional[str] = None
    execution: Optional[ExecutionResult] = None


# ============================================================
# DOMAIN
# ============================================================

class Model(BaseModel):
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    id: str
    name: str
    version: str
    description: Optional[str] = None
    provider: Optional[str] = None
    created_at: str
    updated_at: str
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class Asset(BaseModel):
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    id: str
    model_id: str
    name: str
    version: str
    content_type: str
    size: int
    checksum: str
    storage_path: str
    created_at: str
    metadata: Optional[Dict[str, Any]] = None


class CreateModelRequest(BaseModel):
    name: str
    version: str
    description: Optional[str] = None
    provider: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateModelRequest(BaseModel):
    """Partial update; only fields that are set are sent."""
    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    provider: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class UploadAssetRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    name: str
    version: str
    content_type: str
    file: Any = Field(..., description="Raw bytes or a binary file object")
    filename: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class SearchFilters(BaseModel):
    query: Optional[str] = None
    provider: Optional[str] = None
    tags: Optional[List[str]] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        """Query params with unset fields dropped; tags become repeated params."""
        return self.model_dump(exclude_none=True)


class LLMRegistryConfig(BaseModel):
    """Configuration for LLMRegistryClient."""
    base_url: str = Field(..., description="Base URL of the LLM Registry API")
    api_token: Optional[str] = Field(default=None, description="Bearer token (optional)")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    execution_context: Optional[ExecutionContext] = None
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra default headers")
