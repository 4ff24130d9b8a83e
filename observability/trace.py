"""
Execution Trace Model

Per-request observability records.
Pure data containers - no routing or agent logic.

DESIGN RULES:
- Immutable after creation
- No dependencies on agents
- Serialize to plain dicts for the response envelope and sinks
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


LAYER_COMPLETED = "completed"
LAYER_FAILED = "failed"


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class ExecutionMetadata:
    """
    Tracing envelope attached to every response.

    trace_id comes from the caller's correlation id when one is sent;
    execution_id is always fresh.
    """

    trace_id: str
    timestamp: str
    service: str
    execution_id: str

    @classmethod
    def create(cls, service: str, correlation_id: Optional[str] = None) -> "ExecutionMetadata":
        return cls(
            trace_id=correlation_id or str(uuid.uuid4()),
            timestamp=utc_now_iso(),
            service=service,
            execution_id=str(uuid.uuid4()),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "trace_id": self.trace_id,
            "timestamp": self.timestamp,
            "service": self.service,
            "execution_id": self.execution_id,
        }


@dataclass(frozen=True)
class LayerEntry:
    """One processing stage recorded in layers_executed."""

    layer: str
    status: str
    duration_ms: Optional[int] = None

    @classmethod
    def completed(cls, layer: str, duration_ms: Optional[int] = None) -> "LayerEntry":
        return cls(layer=layer, status=LAYER_COMPLETED, duration_ms=duration_ms)

    @classmethod
    def failed(cls, layer: str, duration_ms: Optional[int] = None) -> "LayerEntry":
        return cls(layer=layer, status=LAYER_FAILED, duration_ms=duration_ms)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"layer": self.layer, "status": self.status}
        if self.duration_ms is not None:
            data["duration_ms"] = self.duration_ms
        return data


@dataclass(frozen=True)
class RequestTrace:
    """
    Summary of one handled request, emitted to a TraceSink.
    """

    execution_id: str
    trace_id: str
    method: str
    path: str
    status_code: int
    layers: List[LayerEntry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status_code < 400

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for logging/export."""
        return {
            "execution_id": self.execution_id,
            "trace_id": self.trace_id,
            "method": self.method,
            "path": self.path,
            "status_code": self.status_code,
            "success": self.success,
            "layers": [layer.to_dict() for layer in self.layers],
            "error": self.error,
        }
