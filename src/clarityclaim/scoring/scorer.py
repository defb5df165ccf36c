"""Rule-based denial risk scorer with optional AI blending."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, time
from typing import TYPE_CHECKING

from clarityclaim.core.models import AIInsights, RiskAssessment
from clarityclaim.core.types import RiskLevel
from clarityclaim.core.utils import format_amount, round_half_up
from clarityclaim.scoring import catalog
from clarityclaim.scoring.recommendations import build_recommendations


if TYPE_CHECKING:
    from collections.abc import Callable

    from clarityclaim.agents.insights import RiskInsightsAgent
    from clarityclaim.core.models import Claim, RiskFactor

logger = logging.getLogger(__name__)

MAX_SCORE = 100
HIGH_AMOUNT_THRESHOLD = 10000
TIMELY_FILING_DAYS = 90
HIGH_RISK_THRESHOLD = 60
MEDIUM_RISK_THRESHOLD = 30
RULE_WEIGHT = 0.6
AI_WEIGHT = 0.4


def utc_now() -> datetime:
    return datetime.now(UTC)


def level_for_score(score: float) -> RiskLevel:
    """Map a score onto its risk tier."""
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def blend_scores(rule_score: int, ai_score: float) -> int:
    """Weighted average of the rule score and the model's suggested score.

    The result is clamped to 0..100 because the model's number is not
    trusted to stay in range.
    """
    blended = round_half_up(rule_score * RULE_WEIGHT + ai_score * AI_WEIGHT)
    return max(0, min(blended, MAX_SCORE))


class RiskScorer:
    """Scores a claim's denial risk from a fixed checklist of conditions.

    When constructed with a RiskInsightsAgent the rule score is blended
    with the hosted model's suggestion. Without one, or whenever the model
    call fails, the rule score is returned unchanged.
    """

    def __init__(
        self,
        insights_agent: RiskInsightsAgent | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the scorer.

        Args:
            insights_agent: Agent for AI augmentation, or None to disable it.
            clock: Returns the current aware datetime. Defaults to UTC now.
        """
        self.insights_agent = insights_agent
        self.clock = clock or utc_now

    @property
    def ai_enabled(self) -> bool:
        return self.insights_agent is not None

    def evaluate_rules(self, claim: Claim) -> tuple[int, list[RiskFactor]]:
        """Run the rule checklist against a claim.

        Args:
            claim: Claim to inspect.

        Returns:
            The capped rule score and the matched factors in check order.
        """
        factors: list[RiskFactor] = []

        if not claim.diagnosis_codes:
            factors.append(catalog.get("missing_diagnosis").instantiate("No ICD-10 diagnosis codes provided"))

        if not claim.procedure_codes:
            factors.append(catalog.get("missing_procedure").instantiate("No CPT procedure codes provided"))

        if not claim.provider_npi:
            factors.append(catalog.get("missing_provider_info").instantiate("Provider NPI not specified"))

        if claim.billed_amount > HIGH_AMOUNT_THRESHOLD:
            factors.append(catalog.get("high_amount").instantiate(
                f"High billed amount of ${format_amount(claim.billed_amount)} may trigger additional review"
            ))

        # Exact match: compound plan names such as "Medicare Advantage" do not qualify.
        if claim.plan_type == "Medicare":
            factors.append(catalog.get("medicare_strict").instantiate(
                "Medicare claims require strict adherence to coverage guidelines"
            ))
        elif claim.plan_type == "Medicaid":
            factors.append(catalog.get("medicaid_strict").instantiate(
                "Medicaid claims require state-specific documentation"
            ))

        if claim.service_date is None:
            factors.append(catalog.MISSING_SERVICE_DATE.instantiate("Service date is required for claim processing"))
        else:
            days = self.days_since_service(claim)
            if days > TIMELY_FILING_DAYS:
                factors.append(catalog.get("timely_filing").instantiate(
                    f"{days} days since service date - check payer timely filing limits"
                ))

        score = min(sum(f.weight for f in factors), MAX_SCORE)
        return score, factors

    def days_since_service(self, claim: Claim) -> int:
        """Whole days elapsed since the start of the service date (UTC)."""
        if claim.service_date is None:
            msg = "claim has no service date"
            raise ValueError(msg)
        start = datetime.combine(claim.service_date, time.min, tzinfo=UTC)
        return (self.clock() - start).days

    async def assess(self, claim: Claim) -> RiskAssessment:
        """Score a claim, optionally blending in the hosted model's view.

        Args:
            claim: Claim to assess.

        Returns:
            RiskAssessment with score, level, factors and recommendations.
        """
        score, factors = self.evaluate_rules(claim)

        ai_insights: AIInsights | None = None
        if self.insights_agent is not None:
            response = await self.insights_agent.get_insights(claim, factors)
            if response.success and isinstance(response.output, AIInsights):
                ai_insights = response.output
                if ai_insights.adjusted_score is not None:
                    score = blend_scores(score, ai_insights.adjusted_score)
            else:
                logger.warning("AI enhancement skipped for claim %s: %s", claim.id, response.error)

        assessment = RiskAssessment(
            score=score,
            level=level_for_score(score),
            factors=factors,
            recommendations=build_recommendations(factors, claim),
            ai_insights=ai_insights,
            analyzed_at=self.clock(),
        )
        logger.info("Claim %s scored %d (%s), %d factors", claim.id, assessment.score,
                    assessment.level.value, len(factors))
        return assessment
