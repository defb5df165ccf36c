"""Denial risk scoring - catalog, rule checklist and recommendations."""

from __future__ import annotations

from clarityclaim.scoring.catalog import get_all as risk_factor_definitions
from clarityclaim.scoring.recommendations import build_recommendations
from clarityclaim.scoring.scorer import RiskScorer, blend_scores, level_for_score


__all__ = [
    "RiskScorer",
    "blend_scores",
    "build_recommendations",
    "level_for_score",
    "risk_factor_definitions",
]
