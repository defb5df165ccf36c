"""Appeal writer agent for drafting denial appeal letters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from clarityclaim.core.agent import Agent
from clarityclaim.core.response import AgentResponse, LLMResponse
from clarityclaim.core.types import AgentRole
from clarityclaim.core.utils import format_amount


if TYPE_CHECKING:
    from clarityclaim.core.llm import LLMClient
    from clarityclaim.core.models import Claim, DenialInfo

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert healthcare appeals specialist.
You write persuasive, professional appeal letters for denied insurance claims.
Write plain text business letters only. Never use markdown formatting."""

DEFAULT_DENIAL_REASON = "The claim was denied"


class AppealWriterAgent(Agent):
    """Agent for drafting appeal letters with the hosted model."""

    def __init__(self, llm: LLMClient) -> None:
        super().__init__(llm=llm, temperature=0.3)

    @property
    def role(self) -> AgentRole:
        return AgentRole.APPEAL_WRITER

    @property
    def system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def format_input(self, input_data: Any) -> str:
        claim: Claim = input_data["claim"]
        denial: DenialInfo = input_data["denial"]
        return f"""Generate a professional appeal letter for this denied claim.

CLAIM INFORMATION:
- Claim Number: {claim.claim_number or 'N/A'}
- Patient Name: {claim.patient_name or 'N/A'}
- Patient ID: {claim.patient_id or 'N/A'}
- Service Date: {claim.service_date.isoformat() if claim.service_date else 'N/A'}
- Provider: {claim.provider_name or 'N/A'}
- Provider NPI: {claim.provider_npi or 'N/A'}
- Facility: {claim.facility_name or 'N/A'}
- Payer: {claim.payer_name or 'N/A'}
- Billed Amount: ${format_amount(claim.billed_amount)}
- Procedure Codes: {', '.join(claim.procedure_codes) or 'N/A'}
- Diagnosis Codes: {', '.join(claim.diagnosis_codes) or 'N/A'}

DENIAL INFORMATION:
- Denial Reason: {denial.denial_reason or DEFAULT_DENIAL_REASON}
- Denial Code: {denial.denial_code or ''}
- Additional Context: {denial.additional_context or ''}

Generate a professional, persuasive appeal letter that:
1. References the specific claim and denial
2. Argues for medical necessity
3. Cites relevant clinical guidelines if applicable
4. Requests reconsideration with specific supporting points
5. Maintains a professional but firm tone

Format the letter with proper business letter formatting. Do not include any markdown formatting, just plain text."""

    def process_output(self, response: LLMResponse, total_tokens: int) -> AgentResponse:
        letter = response.content.strip()
        if not letter:
            return AgentResponse(success=False, error="Empty letter returned",
                model=response.model or self.model_name, total_tokens=total_tokens)
        return AgentResponse(success=True, output=letter, model=response.model or self.model_name,
            total_tokens=total_tokens)

    async def write(self, claim: Claim, denial: DenialInfo) -> AgentResponse:
        logger.info("Drafting appeal letter for claim %s", claim.claim_number)
        return await self.run({"claim": claim, "denial": denial})
