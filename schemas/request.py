from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator


class InboundRequest(BaseModel):
    """
    Transport-neutral view of an HTTP request.

    The FastAPI adapter (and tests) build this; RegistryRouter only ever
    sees this shape, never a framework request object.
    """
    method: str = Field(default="GET", description="HTTP method, upper-cased")
    path: Optional[str] = Field(default=None, description="Routed path if the transport resolved one")
    url: str = Field(default="/", description="Raw request URL or path+query")
    headers: Dict[str, str] = Field(default_factory=dict, description="Header map, keys lower-cased")
    body: Any = Field(default=None, description="Decoded JSON body, None when absent or not JSON")

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return (value or "GET").upper()

    @field_validator("headers")
    @classmethod
    def _lower_header_names(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {str(k).lower(): v for k, v in value.items()}

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    def resolve_path(self) -> str:
        """
        Logical path for routing.

        Uses the explicit path when present, otherwise parses the raw URL
        against http://<host or localhost>.
        """
        if self.path:
            return self.path
        host = self.headers.get("host") or "localhost"
        base = f"http://{host}"
        raw = self.url or "/"
        parsed = urlsplit(raw if "://" in raw else base + (raw if raw.startswith("/") else "/" + raw))
        return parsed.path or "/"
