from typing import Optional

from llm_registry_sdk.types import ErrorResponse


class LLMRegistryError(Exception):
    """Non-2xx response from the LLM Registry API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        response: Optional[ErrorResponse] = None,
    ):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code
        self.response = response
