"""Appeal letter generation with template fallback."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from jinja2 import Environment, StrictUndefined

from clarityclaim.core.models import AppealLetter, DenialInfo
from clarityclaim.core.types import LetterType
from clarityclaim.core.utils import format_amount
from clarityclaim.templates.appeal_template import APPEAL_TEMPLATE


if TYPE_CHECKING:
    from collections.abc import Callable

    from clarityclaim.agents.appeal import AppealWriterAgent
    from clarityclaim.core.models import Claim

logger = logging.getLogger(__name__)

_env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=False)
_template = _env.from_string(APPEAL_TEMPLATE)


def format_letter_date(today: date) -> str:
    """Format a date the way it appears in a letter heading, e.g. ``October 17, 2026``."""
    return f"{today:%B} {today.day}, {today.year}"


def render_template_letter(claim: Claim, denial: DenialInfo | None, today: date) -> str:
    """Fill the plain-text appeal template for a claim.

    Identity fields the claim does not carry are rendered as bracketed
    placeholders such as ``[Provider Name]``.
    """
    denial = denial or DenialInfo()
    return _template.render(
        today=format_letter_date(today),
        payer_name=claim.payer_name or "[Payer Name]",
        claim_number=claim.claim_number or "[Claim Number]",
        patient_name=claim.patient_name or "[Patient Name]",
        patient_id=claim.patient_id or "[Patient ID]",
        service_date=claim.service_date.isoformat() if claim.service_date else "[Service Date]",
        billed_amount=format_amount(claim.billed_amount),
        denial_reason=denial.denial_reason or "The claim was denied without specific reason provided.",
        denial_code=denial.denial_code or "",
        procedure_codes=", ".join(claim.procedure_codes) or "as documented",
        diagnosis_codes=", ".join(claim.diagnosis_codes) or "as documented",
        provider_name=claim.provider_name or "[Provider Name]",
        provider_npi=f"NPI: {claim.provider_npi}" if claim.provider_npi else "[Provider NPI]",
        facility_name=claim.facility_name or "[Facility Name]",
    )


class AppealLetterGenerator:
    """Drafts appeal letters, preferring the hosted model over the template."""

    def __init__(
        self,
        writer: AppealWriterAgent | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.writer = writer
        self.clock = clock or (lambda: datetime.now(UTC))

    @property
    def ai_enabled(self) -> bool:
        return self.writer is not None

    async def generate(self, claim: Claim, denial: DenialInfo | None = None) -> AppealLetter:
        """Generate an appeal letter for a denied claim.

        Args:
            claim: The denied claim.
            denial: Denial reason, code and extra context, if known.

        Returns:
            AppealLetter tagged ``ai-generated`` or ``template``.
        """
        denial = denial or DenialInfo()
        if self.writer is not None:
            response = await self.writer.write(claim, denial)
            if response.success:
                return AppealLetter(
                    letter=str(response.output),
                    generated_at=self.clock(),
                    type=LetterType.AI_GENERATED,
                    model=response.model,
                )
            logger.warning("Falling back to template letter for claim %s: %s", claim.claim_number, response.error)

        now = self.clock()
        return AppealLetter(
            letter=render_template_letter(claim, denial, now.date()),
            generated_at=now,
            type=LetterType.TEMPLATE,
        )
