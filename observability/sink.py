"""
Trace Sink Interface

Abstract sink for per-request traces.
Storage-agnostic - implementations can write to logs, memory, cloud, etc.

DESIGN RULES:
- Side-effect only
- Never throw exceptions
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import List

from observability.trace import RequestTrace


logger = logging.getLogger(__name__)


class TraceSink(ABC):
    """
    Abstract base for trace output destinations.

    Implementations:
    - LoggingTraceSink (default)
    - JsonTraceSink
    - MemoryTraceSink (tests, local debugging)
    """

    @abstractmethod
    def emit(self, trace: RequestTrace) -> None:
        """
        Emit a trace to the sink.

        Must not throw - failures should be logged and ignored.
        """
        pass


class LoggingTraceSink(TraceSink):
    """
    Default sink: one summary line per request on the service logger.
    """

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: If True, also log each layer at DEBUG level.
        """
        self._verbose = verbose

    def emit(self, trace: RequestTrace) -> None:
        try:
            layers = " -> ".join(f"{layer.layer}:{layer.status}" for layer in trace.layers)
            line = f"[{trace.trace_id}] {trace.method} {trace.path} -> {trace.status_code} ({layers})"
            if trace.error:
                line += f" error={trace.error!r}"

            if trace.status_code >= 500:
                logger.error(line)
            elif trace.status_code >= 400:
                logger.warning(line)
            else:
                logger.info(line)

            if self._verbose:
                for layer in trace.layers:
                    logger.debug(f"[{trace.trace_id}]   {layer.to_dict()}")

        except Exception as e:
            logger.warning(f"[TRACE] Failed to emit trace: {e}")


class JsonTraceSink(TraceSink):
    """
    Sink that logs traces as JSON lines.

    Useful for log aggregation systems.
    """

    def emit(self, trace: RequestTrace) -> None:
        try:
            logger.info(json.dumps(trace.to_dict()))
        except Exception as e:
            logger.warning(f"[TRACE] Failed to emit JSON trace: {e}")


class MemoryTraceSink(TraceSink):
    """Keeps traces in a list."""

    def __init__(self):
        self.traces: List[RequestTrace] = []

    def emit(self, trace: RequestTrace) -> None:
        self.traces.append(trace)
