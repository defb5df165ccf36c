"""ClarityClaim - denial risk scoring and appeal drafting for healthcare claims.

This package provides:
- A rule-based denial risk scorer with optional hosted-LLM blending
- Prioritized remediation recommendations
- Appeal letter drafting with a plain-text template fallback
- Denial pattern analysis across claims
"""

from __future__ import annotations

from clarityclaim.appeals.generator import AppealLetterGenerator
from clarityclaim.config.settings import Settings
from clarityclaim.core.models import (
    AppealLetter,
    Claim,
    DenialInfo,
    Recommendation,
    RiskAssessment,
    RiskFactor,
    RiskFactorDefinition,
)
from clarityclaim.core.types import LetterType, RiskLevel
from clarityclaim.orchestrator.service import ClaimsService
from clarityclaim.scoring.scorer import RiskScorer


__version__ = "0.1.0"

__all__ = [
    "AppealLetter",
    "AppealLetterGenerator",
    "Claim",
    "ClaimsService",
    "DenialInfo",
    "LetterType",
    "Recommendation",
    "RiskAssessment",
    "RiskFactor",
    "RiskFactorDefinition",
    "RiskLevel",
    "RiskScorer",
    "Settings",
]
