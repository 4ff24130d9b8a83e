"""
Agent Reputation Agent

Reputation scoring for agents in the registry: query the current
reputation or record a new signal.

Scores are owned by the registry reputation service. Until that is wired
in, every agent reports a neutral zero reputation and recorded signals
are not retained.
"""

from typing import Any, Dict

from agents.base import BaseAgent
from observability.trace import utc_now_iso
from schemas.contracts import ReputationCategory, ReputationResponse


class ReputationAgent(BaseAgent):

    AGENT_NAME = "reputation"

    async def execute(self, body: Dict[str, Any]) -> ReputationResponse:
        return ReputationResponse(
            agent_id=body["agent_id"],
            overall_score=0,
            category_scores={category.value: 0 for category in ReputationCategory},
            signal_count=0,
            last_updated=utc_now_iso(),
        )
