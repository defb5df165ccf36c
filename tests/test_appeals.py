"""Tests for appeal letter generation."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from clarityclaim.agents.appeal import AppealWriterAgent
from clarityclaim.appeals.generator import AppealLetterGenerator, format_letter_date, render_template_letter
from clarityclaim.core.mock_llm import MockLLMClient
from clarityclaim.core.models import DenialInfo
from clarityclaim.core.types import LetterType


if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from clarityclaim.core.models import Claim
    from conftest import FailingLLMClient, StaticLLMClient


def test_format_letter_date() -> None:
    assert format_letter_date(date(2026, 10, 17)) == "October 17, 2026"
    assert format_letter_date(date(2026, 3, 5)) == "March 5, 2026"


class TestTemplateLetter:
    def test_fills_claim_fields(self, make_claim: Callable[..., Claim]) -> None:
        claim = make_claim(billed_amount=1250.5, service_date=date(2026, 9, 1))
        denial = DenialInfo(denial_reason="Not medically necessary", denial_code="CO-50")
        letter = render_template_letter(claim, denial, date(2026, 10, 17))

        assert "October 17, 2026" in letter
        assert "Blue Cross" in letter
        assert "CLM-2026-0042" in letter
        assert "Jane Doe" in letter
        assert "2026-09-01" in letter
        assert "$1,250.5" in letter
        assert "Not medically necessary" in letter
        assert "Denial Code: CO-50" in letter
        assert "99213" in letter
        assert "E11.9" in letter
        assert "NPI: 1234567890" in letter
        assert "Lakeside Clinic" in letter

    def test_missing_identity_fields_become_placeholders(self, make_claim: Callable[..., Claim]) -> None:
        claim = make_claim(provider_name=None, provider_npi=None, facility_name=None, payer_name=None)
        letter = render_template_letter(claim, None, date(2026, 10, 17))
        assert "[Provider Name]" in letter
        assert "[Provider NPI]" in letter
        assert "[Facility Name]" in letter
        assert "[Payer Name]" in letter
        assert "None" not in letter

    def test_defaults_without_denial_details(self, make_claim: Callable[..., Claim]) -> None:
        claim = make_claim(diagnosis_codes=[], procedure_codes=[])
        letter = render_template_letter(claim, DenialInfo(), date(2026, 10, 17))
        assert "The claim was denied without specific reason provided." in letter
        assert "Denial Code:" not in letter
        assert "as documented" in letter


class TestAppealLetterGenerator:
    async def test_template_when_ai_disabled(
        self, make_claim: Callable[..., Claim], clock: Callable[[], datetime], now: datetime
    ) -> None:
        generator = AppealLetterGenerator(clock=clock)
        appeal = await generator.generate(make_claim(provider_name=None))
        assert not generator.ai_enabled
        assert appeal.type == LetterType.TEMPLATE
        assert appeal.model is None
        assert appeal.generated_at == now
        assert "[Provider Name]" in appeal.letter
        assert "model" not in appeal.to_payload()

    async def test_ai_letter(
        self, make_claim: Callable[..., Claim], mock_llm: MockLLMClient, clock: Callable[[], datetime]
    ) -> None:
        generator = AppealLetterGenerator(AppealWriterAgent(mock_llm), clock=clock)
        appeal = await generator.generate(make_claim(), DenialInfo(denial_reason="Missing records"))

        assert appeal.type == LetterType.AI_GENERATED
        assert appeal.model == "mock-llm"
        assert "RE: Request for Reconsideration of Claim CLM-2026-0042" in appeal.letter
        assert appeal.letter == appeal.letter.strip()
        payload = appeal.to_payload()
        assert payload["type"] == "ai-generated"
        assert payload["model"] == "mock-llm"

    async def test_prompt_contents(self, make_claim: Callable[..., Claim], mock_llm: MockLLMClient) -> None:
        await AppealWriterAgent(mock_llm).write(make_claim(), DenialInfo(denial_code="CO-197"))
        prompt = mock_llm.prompts[-1]
        assert prompt.startswith("Generate a professional appeal letter for this denied claim.")
        assert "- Claim Number: CLM-2026-0042" in prompt
        assert "- Denial Reason: The claim was denied" in prompt
        assert "- Denial Code: CO-197" in prompt

    async def test_prompt_uses_na_for_missing_fields(
        self, make_claim: Callable[..., Claim], mock_llm: MockLLMClient
    ) -> None:
        await AppealWriterAgent(mock_llm).write(make_claim(provider_name=None, facility_name=None), DenialInfo())
        prompt = mock_llm.prompts[-1]
        assert "- Provider: N/A" in prompt
        assert "- Facility: N/A" in prompt

    async def test_falls_back_to_template_on_error(
        self, make_claim: Callable[..., Claim], clock: Callable[[], datetime],
        failing_llm: FailingLLMClient,
    ) -> None:
        generator = AppealLetterGenerator(AppealWriterAgent(failing_llm), clock=clock)
        appeal = await generator.generate(make_claim(facility_name=None))
        assert failing_llm.call_count == 1
        assert appeal.type == LetterType.TEMPLATE
        assert "[Facility Name]" in appeal.letter

    async def test_empty_reply_falls_back_to_template(
        self, make_claim: Callable[..., Claim], clock: Callable[[], datetime],
        static_llm: Callable[[str], StaticLLMClient],
    ) -> None:
        generator = AppealLetterGenerator(AppealWriterAgent(static_llm("   \n")), clock=clock)
        appeal = await generator.generate(make_claim())
        assert appeal.type == LetterType.TEMPLATE
        assert "CLM-2026-0042" in appeal.letter
