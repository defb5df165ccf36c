"""Tests for the SQLite claims store."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from clarityclaim.core.models import AppealLetter, DenialInfo
from clarityclaim.core.types import LetterType
from clarityclaim.scoring.scorer import RiskScorer
from clarityclaim.storage.claims_db import ClaimNotFoundError, ClaimsDatabase


if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from clarityclaim.core.models import Claim


class TestClaims:
    def test_round_trip(self, claims_db: ClaimsDatabase, make_claim: Callable[..., Claim]) -> None:
        claim = make_claim(service_date=date(2026, 9, 1), paid_amount=150.0)
        claims_db.save_claim(claim)
        assert claims_db.get_claim(claim.id) == claim

    def test_upsert(self, claims_db: ClaimsDatabase, make_claim: Callable[..., Claim]) -> None:
        claims_db.save_claim(make_claim(status="draft"))
        claims_db.save_claim(make_claim(status="submitted", diagnosis_codes=["I10", "E78.5"]))
        stored = claims_db.get_claim("CLM-T1")
        assert stored.status == "submitted"
        assert stored.diagnosis_codes == ["I10", "E78.5"]
        assert claims_db.get_stats()["claims"] == 1

    def test_save_requires_id(self, claims_db: ClaimsDatabase, make_claim: Callable[..., Claim]) -> None:
        with pytest.raises(ValueError, match="claim id is required"):
            claims_db.save_claim(make_claim(id=None))

    def test_missing_claim(self, claims_db: ClaimsDatabase) -> None:
        with pytest.raises(ClaimNotFoundError, match="Claim not found: NOPE") as exc_info:
            claims_db.get_claim("NOPE")
        assert exc_info.value.claim_id == "NOPE"
        assert isinstance(exc_info.value, LookupError)

    def test_list_by_status(self, seeded_db: ClaimsDatabase) -> None:
        assert [c.id for c in seeded_db.list_claims()] == [
            "CLM001", "CLM002", "CLM003", "CLM004", "CLM005", "CLM006",
        ]
        assert [c.id for c in seeded_db.list_claims("denied")] == ["CLM003", "CLM004", "CLM005"]


class TestSampleData:
    def test_loads_once(self, claims_db: ClaimsDatabase) -> None:
        assert claims_db.load_sample_data(today=date(2026, 10, 17)) == 6
        assert claims_db.load_sample_data(today=date(2026, 10, 17)) == 0
        assert claims_db.get_stats() == {"claims": 6, "assessments": 0, "appeals": 0}

    def test_sample_dates_are_relative(self, seeded_db: ClaimsDatabase) -> None:
        assert seeded_db.get_claim("CLM003").service_date == date(2026, 6, 19)
        assert seeded_db.get_claim("CLM002").service_date is None


class TestAssessments:
    async def test_save_assessment_updates_claim(
        self, seeded_db: ClaimsDatabase, clock: Callable[[], datetime]
    ) -> None:
        claim = seeded_db.get_claim("CLM002")
        assessment = await RiskScorer(clock=clock).assess(claim)
        row_id = seeded_db.save_assessment("CLM002", assessment)

        assert row_id > 0
        assert seeded_db.get_claim("CLM002").denial_risk_score == assessment.score
        latest = seeded_db.latest_assessment("CLM002")
        assert latest == assessment.to_payload()

    def test_no_assessment(self, seeded_db: ClaimsDatabase) -> None:
        assert seeded_db.latest_assessment("CLM001") is None


class TestAppeals:
    def test_save_appeal(self, seeded_db: ClaimsDatabase, now: datetime) -> None:
        claim = seeded_db.get_claim("CLM004")
        letter = AppealLetter(letter="Dear Appeals Committee", generated_at=now, type=LetterType.AI_GENERATED,
                              model="mock-llm")
        appeal = seeded_db.save_appeal(claim, letter, DenialInfo(denial_reason="Auth on file"), deadline_days=30)

        assert appeal.claim_id == "CLM004"
        assert appeal.appeal_number.startswith("APL-")
        assert appeal.status == "draft"
        assert appeal.ai_generated
        assert appeal.model == "mock-llm"
        assert appeal.denial_reason == "Auth on file"
        assert appeal.deadline_date == date(2026, 11, 16)
        assert appeal.created_at == now
        assert seeded_db.list_appeals("CLM004") == [appeal]

    def test_denial_reason_defaults_to_claim(self, seeded_db: ClaimsDatabase, now: datetime) -> None:
        claim = seeded_db.get_claim("CLM005")
        letter = AppealLetter(letter="text", generated_at=now, type=LetterType.TEMPLATE)
        appeal = seeded_db.save_appeal(claim, letter)
        assert appeal.denial_reason == "Prior authorization required"
        assert not appeal.ai_generated
        assert appeal.deadline_date == date(2026, 12, 16)

    def test_same_instant_appeals_are_both_stored(self, seeded_db: ClaimsDatabase, now: datetime) -> None:
        claim = seeded_db.get_claim("CLM004")
        letter = AppealLetter(letter="text", generated_at=now, type=LetterType.TEMPLATE)
        seeded_db.save_appeal(claim, letter)
        seeded_db.save_appeal(claim, letter)
        assert len(seeded_db.list_appeals()) == 2
