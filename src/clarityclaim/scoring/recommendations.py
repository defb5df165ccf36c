"""Recommendation builder for risk assessments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clarityclaim.core.models import Recommendation
from clarityclaim.core.types import Impact


if TYPE_CHECKING:
    from collections.abc import Sequence

    from clarityclaim.core.models import Claim, RiskFactor

FACTOR_CONFIDENCE = 0.85


def build_recommendations(factors: Sequence[RiskFactor], claim: Claim) -> list[Recommendation]:
    """Turn matched factors and claim state into remediation steps.

    One entry per factor that carries a recommendation, followed by a
    workflow reminder for drafts and a documentation reminder when the
    claim has no clinical notes. Order is append order; nothing is merged.
    """
    recommendations = [
        Recommendation(
            type=factor.category.value,
            recommendation=factor.recommendation,
            priority=factor.impact,
            confidence=FACTOR_CONFIDENCE,
        )
        for factor in factors
        if factor.recommendation
    ]

    if claim.status == "draft":
        recommendations.append(Recommendation(
            type="Workflow",
            recommendation="Complete all required fields before submitting",
            priority=Impact.MEDIUM,
            confidence=0.9,
        ))

    if not claim.notes:
        recommendations.append(Recommendation(
            type="Documentation",
            recommendation="Add clinical notes to support medical necessity",
            priority=Impact.LOW,
            confidence=0.7,
        ))

    return recommendations
