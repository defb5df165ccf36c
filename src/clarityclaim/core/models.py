"""Data models for claims, risk assessments and appeals."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clarityclaim.core.types import FactorCategory, Impact, LetterType, RiskLevel  # noqa: TC001 - Pydantic needs at runtime


class Claim(BaseModel):
    """A claim record as read from the claims store."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    claim_number: str | None = None
    patient_name: str | None = None
    patient_id: str | None = None
    payer_name: str | None = None
    plan_type: str | None = None
    provider_name: str | None = None
    provider_npi: str | None = None
    facility_name: str | None = None
    diagnosis_codes: list[str] = Field(default_factory=list)
    procedure_codes: list[str] = Field(default_factory=list)
    billed_amount: float = 0.0
    paid_amount: float | None = None
    service_date: date | None = None
    status: str | None = None
    notes: str | None = None
    denial_reason: str | None = None
    denial_category: str | None = None
    denial_risk_score: float | None = None

    @field_validator("diagnosis_codes", "procedure_codes", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("billed_amount", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("service_date", mode="before")
    @classmethod
    def _blank_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            # Timestamps keep only their calendar date.
            return value.replace("T", " ", 1).split(" ", 1)[0]
        return value


class DenialInfo(BaseModel):
    """Payer denial details supplied when drafting an appeal."""

    denial_reason: str | None = None
    denial_code: str | None = None
    additional_context: str | None = None


class RiskFactorDefinition(BaseModel):
    """A catalog entry describing a weighted denial risk condition."""

    model_config = ConfigDict(frozen=True)

    id: str
    category: FactorCategory
    factor: str
    impact: Impact
    weight: int
    recommendation: str

    def instantiate(self, description: str) -> RiskFactor:
        """Create the claim-specific instance of this factor."""
        return RiskFactor(**self.model_dump(), description=description)


class RiskFactor(RiskFactorDefinition):
    """A risk factor matched on one claim."""

    description: str


class Recommendation(BaseModel):
    """A prioritized remediation step."""

    type: str
    recommendation: str
    priority: Impact
    confidence: float = Field(ge=0.0, le=1.0)


class AIInsights(BaseModel):
    """Structured reply of the hosted model for a risk assessment."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    additional_factors: list[dict[str, Any]] = Field(default_factory=list, alias="additionalFactors")
    adjusted_score: float | None = Field(default=None, alias="adjustedScore")
    insights: str = ""
    specific_recommendations: list[str] = Field(default_factory=list, alias="specificRecommendations")


class RiskAssessment(BaseModel):
    """Denial risk result for a single claim."""

    score: int
    level: RiskLevel
    factors: list[RiskFactor] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    ai_insights: AIInsights | None = None
    analyzed_at: datetime

    def to_payload(self) -> dict[str, Any]:
        """Convert to the JSON contract returned to API callers."""
        return {
            "score": self.score,
            "level": self.level.value,
            "factors": [f.model_dump(mode="json") for f in self.factors],
            "recommendations": [r.model_dump(mode="json") for r in self.recommendations],
            "aiInsights": self.ai_insights.model_dump(mode="json", by_alias=True) if self.ai_insights else None,
            "analyzedAt": self.analyzed_at.isoformat(),
        }


class AppealLetter(BaseModel):
    """An appeal letter drafted for a denied claim."""

    letter: str
    generated_at: datetime
    type: LetterType
    model: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "letter": self.letter,
            "generatedAt": self.generated_at.isoformat(),
            "type": self.type.value,
        }
        if self.model:
            payload["model"] = self.model
        return payload


class AppealRecord(BaseModel):
    """An appeal stored in the claims database."""
    id: int
    claim_id: str
    appeal_number: str
    denial_reason: str | None = None
    letter_content: str
    status: str = "draft"
    ai_generated: bool = False
    model: str | None = None
    deadline_date: date
    created_at: datetime


class PayerStats(BaseModel):
    """Claim counts and billing totals for one payer."""
    count: int = 0
    denied: int = 0
    total_billed: float = 0.0


class ClaimStats(BaseModel):
    """Aggregate statistics over a set of claims."""
    total: int = 0
    by_status: dict[str, int] = Field(default_factory=dict)
    by_payer: dict[str, PayerStats] = Field(default_factory=dict)
    by_denial_category: dict[str, int] = Field(default_factory=dict)
    avg_billed_amount: float = 0.0
    avg_risk_score: float = 0.0
    total_billed: float = 0.0
    total_paid: float = 0.0
    denial_rate: float = 0.0


class PatternFinding(BaseModel):
    """A denial pattern detected across claims."""
    type: str
    severity: Impact
    title: str
    description: str
    recommendation: str
    data: dict[str, Any] = Field(default_factory=dict)


class PatternReport(BaseModel):
    """Result of a cross-claim pattern analysis."""
    patterns: list[PatternFinding] = Field(default_factory=list)
    summary: str | None = None
    stats: ClaimStats | None = None
    analyzed_at: datetime | None = None
    claims_analyzed: int = 0
