"""Claims service orchestrating scoring, appeals and analytics."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from clarityclaim.agents.appeal import AppealWriterAgent
from clarityclaim.agents.insights import RiskInsightsAgent
from clarityclaim.analytics.patterns import analyze_patterns
from clarityclaim.appeals.generator import AppealLetterGenerator
from clarityclaim.config.settings import Settings
from clarityclaim.core.llm import LLMClient
from clarityclaim.core.models import DenialInfo
from clarityclaim.scoring import catalog
from clarityclaim.scoring.scorer import RiskScorer
from clarityclaim.storage.claims_db import ClaimsDatabase


if TYPE_CHECKING:
    from collections.abc import Callable

    from clarityclaim.core.models import (
        AppealRecord,
        Claim,
        PatternReport,
        RiskAssessment,
        RiskFactorDefinition,
    )

logger = logging.getLogger(__name__)


class ClaimsService:
    """Loads claims, runs the scoring and appeal flows, and stores results.

    The LLM client is built once from settings and shared by both agents.
    When no API key is configured the client is None and both flows run
    rule-only / template-only.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        mock: bool = False,
        claims_db: ClaimsDatabase | None = None,
        llm: LLMClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        self._clock = clock or (lambda: datetime.now(UTC))
        self._llm = llm if llm is not None else LLMClient.create(settings, mock=mock)
        self._claims_db = claims_db or ClaimsDatabase(settings.storage.claims_db)

        insights = RiskInsightsAgent(self._llm) if self._llm else None
        writer = AppealWriterAgent(self._llm) if self._llm else None
        self._scorer = RiskScorer(insights, clock=self._clock)
        self._generator = AppealLetterGenerator(writer, clock=self._clock)

    @property
    def ai_configured(self) -> bool:
        return self._llm is not None

    @property
    def claims_db(self) -> ClaimsDatabase:
        return self._claims_db

    async def assess(self, claim: Claim) -> RiskAssessment:
        """Score a claim without loading or storing anything."""
        return await self._scorer.assess(claim)

    async def assess_claim(self, claim_id: str) -> RiskAssessment:
        """Load a stored claim, score it and record the assessment.

        Raises:
            ClaimNotFoundError: If the claim does not exist.
        """
        claim = self._claims_db.get_claim(claim_id)
        assessment = await self._scorer.assess(claim)
        self._claims_db.save_assessment(claim_id, assessment)
        return assessment

    async def generate_appeal(self, claim_id: str, denial: DenialInfo | None = None) -> AppealRecord:
        """Draft an appeal letter for a stored claim and record it as a draft appeal.

        Raises:
            ClaimNotFoundError: If the claim does not exist.
        """
        claim = self._claims_db.get_claim(claim_id)
        denial = denial or DenialInfo()
        if not denial.denial_reason and claim.denial_reason:
            denial = denial.model_copy(update={"denial_reason": claim.denial_reason})
        letter = await self._generator.generate(claim, denial)
        appeal = self._claims_db.save_appeal(claim, letter, denial, self.settings.appeals.deadline_days)
        logger.info("Appeal %s created for claim %s (%s)", appeal.appeal_number, claim_id, letter.type.value)
        return appeal

    def analyze_patterns(self, status: str | None = None) -> PatternReport:
        return analyze_patterns(self._claims_db.list_claims(status), now=self._clock())

    def risk_factor_definitions(self) -> list[RiskFactorDefinition]:
        return list(catalog.get_all())
