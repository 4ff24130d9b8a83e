import json
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class OutboundResponse(BaseModel):
    """
    Transport-neutral HTTP response produced by RegistryRouter.

    body is None only for 204 preflight answers.
    """
    status_code: int = Field(..., description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[Dict[str, Any]] = Field(default=None, description="JSON envelope")

    @classmethod
    def json_body(
        cls,
        status_code: int,
        body: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> "OutboundResponse":
        merged = dict(headers or {})
        merged["Content-Type"] = "application/json"
        return cls(status_code=status_code, headers=merged, body=body)

    @classmethod
    def empty(cls, status_code: int, headers: Optional[Dict[str, str]] = None) -> "OutboundResponse":
        return cls(status_code=status_code, headers=dict(headers or {}), body=None)

    def render(self) -> bytes:
        """Serialize the body for the wire (b'' when empty)."""
        if self.body is None:
            return b""
        return json.dumps(self.body).encode("utf-8")
