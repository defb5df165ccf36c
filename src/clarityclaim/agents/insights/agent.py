"""Risk insights agent for AI-assisted denial risk scoring."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from clarityclaim.core.agent import Agent
from clarityclaim.core.models import AIInsights
from clarityclaim.core.response import AgentResponse, LLMResponse
from clarityclaim.core.types import AgentRole
from clarityclaim.core.utils import format_amount, strip_code_fences


if TYPE_CHECKING:
    from collections.abc import Sequence

    from clarityclaim.core.llm import LLMClient
    from clarityclaim.core.models import Claim, RiskFactor

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert healthcare claims analyst.
Assess the likelihood that a payer will deny a claim and respond ONLY with valid JSON."""

RESPONSE_SCHEMA = (
    '{"additionalFactors": [{"factor": "factor name", "impact": "low", "description": "description"}], '
    '"adjustedScore": 50, "insights": "brief insight", "specificRecommendations": ["recommendation 1"]}'
)


class RiskInsightsAgent(Agent):
    """Agent that asks the hosted model for a second opinion on denial risk."""

    def __init__(self, llm: LLMClient) -> None:
        super().__init__(llm=llm)

    @property
    def role(self) -> AgentRole:
        return AgentRole.RISK_ANALYST

    @property
    def system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def format_input(self, input_data: Any) -> str:
        claim: Claim = input_data["claim"]
        factors: Sequence[RiskFactor] = input_data["factors"]
        found = "\n".join(f"- {f.factor}: {f.description}" for f in factors) or "- None"
        return f"""Analyze this claim for denial risk and respond ONLY with valid JSON.

Claim Details:
- Patient: {claim.patient_name or 'Unknown'}
- Payer: {claim.payer_name or 'Unknown'} ({claim.plan_type or 'Unknown'})
- Billed Amount: ${format_amount(claim.billed_amount)}
- Service Date: {claim.service_date.isoformat() if claim.service_date else 'Not specified'}
- Procedure Codes: {', '.join(claim.procedure_codes) or 'None'}
- Diagnosis Codes: {', '.join(claim.diagnosis_codes) or 'None'}
- Provider NPI: {claim.provider_npi or 'Not specified'}

Already identified risk factors:
{found}

Respond with this exact JSON structure (no markdown, no code blocks):
{RESPONSE_SCHEMA}"""

    def process_output(self, response: LLMResponse, total_tokens: int) -> AgentResponse:
        try:
            insights = self._parse_insights(response.content)
            return AgentResponse(success=True, output=insights, model=self.model_name, total_tokens=total_tokens)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning("Could not parse risk insights from %s: %s", self.model_name, e)
            return AgentResponse(success=False, error=f"Failed to parse insights: {e}",
                model=self.model_name, total_tokens=total_tokens)

    def _parse_insights(self, content: str) -> AIInsights:
        data = json.loads(strip_code_fences(content))
        if not isinstance(data, dict):
            msg = f"expected a JSON object, got {type(data).__name__}"
            raise TypeError(msg)
        return AIInsights.model_validate(data)

    async def get_insights(self, claim: Claim, factors: Sequence[RiskFactor]) -> AgentResponse:
        logger.debug("Requesting risk insights for claim %s", claim.id)
        return await self.run({"claim": claim, "factors": factors})
