"""SQLite claims store for claims, risk assessments and appeals."""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any

from clarityclaim.appeals.deadlines import calculate_deadline, new_appeal_number
from clarityclaim.core.models import AppealRecord, Claim
from clarityclaim.core.types import LetterType
from clarityclaim.storage.converters import claim_to_row, row_to_appeal, row_to_claim
from clarityclaim.storage.schema import CLAIM_COLUMNS, INIT_SCHEMA


if TYPE_CHECKING:
    from collections.abc import Iterator

    from clarityclaim.core.models import AppealLetter, DenialInfo, RiskAssessment

logger = logging.getLogger(__name__)


class ClaimNotFoundError(LookupError):
    """Raised when a claim id is not in the store."""

    def __init__(self, claim_id: str) -> None:
        super().__init__(f"Claim not found: {claim_id}")
        self.claim_id = claim_id


class ClaimsDatabase:
    """SQLite store standing in for the managed claims database."""

    def __init__(self, db_path: str | Path = "claims.db") -> None:
        self.db_path = Path(db_path)
        self._init_db()

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._connection() as conn:
            conn.executescript(INIT_SCHEMA)

    def save_claim(self, claim: Claim) -> str:
        """Insert or replace a claim. The claim must carry an id."""
        if not claim.id:
            msg = "claim id is required to store a claim"
            raise ValueError(msg)
        placeholders = ", ".join("?" * len(CLAIM_COLUMNS))
        with self._connection() as conn:
            conn.execute(
                f"""INSERT INTO claims ({', '.join(CLAIM_COLUMNS)}) VALUES ({placeholders})
                ON CONFLICT(id) DO UPDATE SET {', '.join(f'{c} = excluded.{c}' for c in CLAIM_COLUMNS[1:])},
                updated_at = CURRENT_TIMESTAMP""",
                claim_to_row(claim),
            )
        return claim.id

    def save_claims(self, claims: list[Claim]) -> list[str]:
        return [self.save_claim(c) for c in claims]

    def get_claim(self, claim_id: str) -> Claim:
        """Load a claim by id.

        Raises:
            ClaimNotFoundError: If the claim does not exist.
        """
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM claims WHERE id = ?", (claim_id,)).fetchone()
        if row is None:
            raise ClaimNotFoundError(claim_id)
        return row_to_claim(row)

    def list_claims(self, status: str | None = None) -> list[Claim]:
        with self._connection() as conn:
            if status:
                rows = conn.execute("SELECT * FROM claims WHERE status = ? ORDER BY id", (status,)).fetchall()
            else:
                rows = conn.execute("SELECT * FROM claims ORDER BY id").fetchall()
        return [row_to_claim(r) for r in rows]

    def save_assessment(self, claim_id: str, assessment: RiskAssessment) -> int:
        """Record an assessment and copy its score onto the claim."""
        with self._connection() as conn:
            cursor = conn.execute(
                """INSERT INTO risk_assessments (claim_id, score, level, ai_assisted, payload, analyzed_at)
                VALUES (?, ?, ?, ?, ?, ?)""",
                (claim_id, assessment.score, assessment.level.value, int(assessment.ai_insights is not None),
                 json.dumps(assessment.to_payload()), assessment.analyzed_at.isoformat()),
            )
            conn.execute(
                "UPDATE claims SET denial_risk_score = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (assessment.score, claim_id),
            )
            return int(cursor.lastrowid or 0)

    def latest_assessment(self, claim_id: str) -> dict[str, Any] | None:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT payload FROM risk_assessments WHERE claim_id = ? ORDER BY id DESC LIMIT 1", (claim_id,)
            ).fetchone()
        return json.loads(row["payload"]) if row else None

    def save_appeal(
        self,
        claim: Claim,
        letter: AppealLetter,
        denial: DenialInfo | None = None,
        deadline_days: int | None = None,
    ) -> AppealRecord:
        """Store a drafted appeal letter for a claim."""
        if not claim.id:
            msg = "claim id is required to store an appeal"
            raise ValueError(msg)
        created_at = letter.generated_at
        denial_reason = (denial.denial_reason if denial else None) or claim.denial_reason
        with self._connection() as conn:
            cursor = conn.execute(
                """INSERT INTO appeals
                (claim_id, appeal_number, denial_reason, letter_content, status, ai_generated, model,
                 deadline_date, created_at)
                VALUES (?, ?, ?, ?, 'draft', ?, ?, ?, ?)""",
                (claim.id, new_appeal_number(created_at), denial_reason, letter.letter,
                 int(letter.type == LetterType.AI_GENERATED), letter.model,
                 calculate_deadline(created_at.date(), deadline_days).isoformat(), created_at.isoformat()),
            )
            row = conn.execute("SELECT * FROM appeals WHERE id = ?", (cursor.lastrowid,)).fetchone()
        appeal = row_to_appeal(row)
        logger.info("Stored appeal %s for claim %s", appeal.appeal_number, claim.id)
        return appeal

    def list_appeals(self, claim_id: str | None = None) -> list[AppealRecord]:
        with self._connection() as conn:
            if claim_id:
                rows = conn.execute("SELECT * FROM appeals WHERE claim_id = ? ORDER BY id", (claim_id,)).fetchall()
            else:
                rows = conn.execute("SELECT * FROM appeals ORDER BY id").fetchall()
        return [row_to_appeal(r) for r in rows]

    def load_sample_data(self, today: date | None = None) -> int:
        """Load sample claims for demos and tests.

        Returns:
            Number of claims inserted; 0 if the store already holds claims.
        """
        with self._connection() as conn:
            count = conn.execute("SELECT COUNT(*) FROM claims").fetchone()[0]
        if count > 0:
            return 0
        claims = sample_claims(today or datetime.now(UTC).date())
        self.save_claims(claims)
        return len(claims)

    def get_stats(self) -> dict[str, int]:
        """Get database statistics."""
        with self._connection() as conn:
            return {
                "claims": conn.execute("SELECT COUNT(*) FROM claims").fetchone()[0],
                "assessments": conn.execute("SELECT COUNT(*) FROM risk_assessments").fetchone()[0],
                "appeals": conn.execute("SELECT COUNT(*) FROM appeals").fetchone()[0],
            }


def sample_claims(today: date) -> list[Claim]:
    """Sample claims spanning clean, risky and denied states."""
    def days_ago(n: int) -> date:
        return today - timedelta(days=n)

    return [
        # Clean commercial claim
        Claim(id="CLM001", claim_number="CLM-2024-0001", patient_name="Maria Lopez", patient_id="P001",
              payer_name="Blue Cross", plan_type="Commercial", provider_name="Dr. Alan Chen",
              provider_npi="1234567890", facility_name="Riverside Clinic", diagnosis_codes=["E11.9"],
              procedure_codes=["99213"], billed_amount=200, paid_amount=180, service_date=days_ago(10),
              status="paid", notes="Follow-up visit for type 2 diabetes"),
        # Draft Medicare claim missing codes and NPI
        Claim(id="CLM002", claim_number="CLM-2024-0002", patient_name="James Carter", patient_id="P002",
              payer_name="Medicare", plan_type="Medicare", billed_amount=5000, status="draft"),
        # High-dollar Medicaid claim past timely filing window
        Claim(id="CLM003", claim_number="CLM-2024-0003", patient_name="Aisha Khan", patient_id="P003",
              payer_name="State Medicaid", plan_type="Medicaid", provider_name="Dr. Priya Patel",
              provider_npi="0987654321", facility_name="Mercy General", diagnosis_codes=["M17.11"],
              procedure_codes=["27447"], billed_amount=32500, paid_amount=0, service_date=days_ago(120),
              status="denied", notes="Total knee arthroplasty", denial_reason="Timely filing limit exceeded",
              denial_category="Timely Filing"),
        # Denied claims with a recurring category for one payer
        Claim(id="CLM004", claim_number="CLM-2024-0004", patient_name="Tom Reed", patient_id="P004",
              payer_name="Aetna", plan_type="Commercial", provider_name="Dr. Alan Chen",
              provider_npi="1234567890", diagnosis_codes=["J06.9"], procedure_codes=["99214"],
              billed_amount=250, paid_amount=0, service_date=days_ago(30), status="denied",
              denial_reason="Prior authorization required", denial_category="Authorization"),
        Claim(id="CLM005", claim_number="CLM-2024-0005", patient_name="Nina Park", patient_id="P005",
              payer_name="Aetna", plan_type="Commercial", provider_name="Dr. Alan Chen",
              provider_npi="1234567890", diagnosis_codes=["M54.5"], procedure_codes=["72148"],
              billed_amount=1800, paid_amount=0, service_date=days_ago(45), status="denied",
              notes="MRI lumbar spine", denial_reason="Prior authorization required",
              denial_category="Authorization"),
        Claim(id="CLM006", claim_number="CLM-2024-0006", patient_name="Leo Grant", patient_id="P006",
              payer_name="Aetna", plan_type="Commercial", provider_name="Dr. Priya Patel",
              provider_npi="0987654321", diagnosis_codes=["I10"], procedure_codes=["99213"],
              billed_amount=180, paid_amount=150, service_date=days_ago(20), status="paid",
              notes="Hypertension follow-up"),
    ]
