# Observability Package
from observability.trace import ExecutionMetadata, LayerEntry, RequestTrace
from observability.sink import TraceSink, LoggingTraceSink, JsonTraceSink, MemoryTraceSink

__all__ = [
    "ExecutionMetadata",
    "LayerEntry",
    "RequestTrace",
    "TraceSink",
    "LoggingTraceSink",
    "JsonTraceSink",
    "MemoryTraceSink",
]
