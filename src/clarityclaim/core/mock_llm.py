"""Mock LLM clients for testing without API keys."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING

from clarityclaim.core.llm import LLMClient
from clarityclaim.core.response import LLMResponse, TokenUsage


if TYPE_CHECKING:
    from clarityclaim.core.types import JSON


class MockLLMClient(LLMClient):
    """Mock LLM client that returns predefined responses for testing."""

    def __init__(self, adjusted_score: float = 50, model: str = "mock-llm") -> None:
        self.adjusted_score = adjusted_score
        self.model = model
        self.prompts: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        last_msg = ""
        for msg in reversed(messages):
            if msg.get("role") == "user":
                last_msg = str(msg.get("content", ""))
                break
        self.prompts.append(last_msg)
        if "Analyze this claim for denial risk" in last_msg:
            return self._insights_response(last_msg)
        elif "Generate a professional appeal letter" in last_msg:
            return self._appeal_response(last_msg)
        return LLMResponse(content="Mock response", model=self.model,
                          usage=TokenUsage(prompt_tokens=100, completion_tokens=50, total_tokens=150))

    def _insights_response(self, msg: str) -> LLMResponse:
        payer = re.search(r"- Payer: (.+?) \(", msg)
        insights = {
            "additionalFactors": [{"factor": "Payer edit history", "impact": "low",
                "description": f"{payer.group(1) if payer else 'Payer'} frequently requests records for this service"}],
            "adjustedScore": self.adjusted_score,
            "insights": "Documentation gaps are the main driver of denial risk for this claim.",
            "specificRecommendations": ["Attach the operative report before submission"],
        }
        return LLMResponse(content=f"```json\n{json.dumps(insights, indent=2)}\n```", model=self.model,
                          usage=TokenUsage(prompt_tokens=400, completion_tokens=120, total_tokens=520))

    def _appeal_response(self, msg: str) -> LLMResponse:
        claim = re.search(r"- Claim Number: (.+)", msg)
        claim_number = claim.group(1).strip() if claim else "N/A"
        letter = (
            "\nAppeals Department\n\n"
            f"RE: Request for Reconsideration of Claim {claim_number}\n\n"
            "Dear Appeals Committee,\n\n"
            "The services billed on this claim were medically necessary and fully documented. "
            "We respectfully request that the denial be overturned.\n\n"
            "Sincerely,\nBilling Department\n"
        )
        return LLMResponse(content=letter, model=self.model,
                          usage=TokenUsage(prompt_tokens=600, completion_tokens=300, total_tokens=900))
