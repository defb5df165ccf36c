"""Storage layer for claims, assessments and appeals."""

from clarityclaim.storage.claims_db import ClaimNotFoundError, ClaimsDatabase, sample_claims

__all__ = ["ClaimNotFoundError", "ClaimsDatabase", "sample_claims"]
