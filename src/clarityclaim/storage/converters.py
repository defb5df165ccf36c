"""Converters between database rows and model objects."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from clarityclaim.core.models import AppealRecord, Claim
from clarityclaim.storage.schema import CLAIM_COLUMNS


if TYPE_CHECKING:
    import sqlite3


def claim_to_row(claim: Claim) -> tuple[Any, ...]:
    """Convert a Claim into values ordered like CLAIM_COLUMNS."""
    data = claim.model_dump()
    data["diagnosis_codes"] = json.dumps(claim.diagnosis_codes)
    data["procedure_codes"] = json.dumps(claim.procedure_codes)
    data["service_date"] = claim.service_date.isoformat() if claim.service_date else None
    return tuple(data[column] for column in CLAIM_COLUMNS)


def row_to_claim(row: sqlite3.Row) -> Claim:
    """Convert database row to Claim object."""
    data = {column: row[column] for column in CLAIM_COLUMNS}
    data["diagnosis_codes"] = json.loads(row["diagnosis_codes"] or "[]")
    data["procedure_codes"] = json.loads(row["procedure_codes"] or "[]")
    return Claim.model_validate(data)


def row_to_appeal(row: sqlite3.Row) -> AppealRecord:
    """Convert database row to AppealRecord object."""
    return AppealRecord(
        id=row["id"],
        claim_id=row["claim_id"],
        appeal_number=row["appeal_number"],
        denial_reason=row["denial_reason"],
        letter_content=row["letter_content"],
        status=row["status"],
        ai_generated=bool(row["ai_generated"]),
        model=row["model"],
        deadline_date=row["deadline_date"],
        created_at=row["created_at"],
    )
