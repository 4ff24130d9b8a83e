# LLM Registry SDK
from llm_registry_sdk.client import LLMRegistryClient
from llm_registry_sdk.exceptions import LLMRegistryError
from llm_registry_sdk.types import (
    Asset,
    CreateModelRequest,
    ErrorResponse,
    ExecutionContext,
    ExecutionEnvelope,
    ExecutionResult,
    ExecutionSpan,
    LLMRegistryConfig,
    Model,
    PaginatedExecutionEnvelope,
    Pagination,
    SearchFilters,
    SpanArtifact,
    UpdateModelRequest,
    UploadAssetRequest,
)

__all__ = [
    "LLMRegistryClient",
    "LLMRegistryError",
    "Asset",
    "CreateModelRequest",
    "ErrorResponse",
    "ExecutionContext",
    "ExecutionEnvelope",
    "ExecutionResult",
    "ExecutionSpan",
    "LLMRegistryConfig",
    "Model",
    "PaginatedExecutionEnvelope",
    "Pagination",
    "SearchFilters",
    "SpanArtifact",
    "UpdateModelRequest",
    "UploadAssetRequest",
]
