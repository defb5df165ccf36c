"""Database schema initialization for the claims store."""

from __future__ import annotations


INIT_SCHEMA = """
-- Claims
CREATE TABLE IF NOT EXISTS claims (
    id TEXT PRIMARY KEY,
    claim_number TEXT,
    patient_name TEXT,
    patient_id TEXT,
    payer_name TEXT,
    plan_type TEXT,
    provider_name TEXT,
    provider_npi TEXT,
    facility_name TEXT,
    diagnosis_codes TEXT,                 -- JSON array
    procedure_codes TEXT,                 -- JSON array
    billed_amount REAL DEFAULT 0,
    paid_amount REAL,
    service_date DATE,
    status TEXT,
    notes TEXT,
    denial_reason TEXT,
    denial_category TEXT,
    denial_risk_score REAL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Risk assessments (one row per run)
CREATE TABLE IF NOT EXISTS risk_assessments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    claim_id TEXT NOT NULL,
    score INTEGER NOT NULL,
    level TEXT NOT NULL,
    ai_assisted INTEGER NOT NULL DEFAULT 0,
    payload TEXT NOT NULL,                -- JSON assessment
    analyzed_at TIMESTAMP NOT NULL,
    FOREIGN KEY (claim_id) REFERENCES claims(id) ON DELETE CASCADE
);

-- Appeals
CREATE TABLE IF NOT EXISTS appeals (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    claim_id TEXT NOT NULL,
    appeal_number TEXT NOT NULL,
    denial_reason TEXT,
    letter_content TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'draft',
    ai_generated INTEGER NOT NULL DEFAULT 0,
    model TEXT,
    deadline_date DATE NOT NULL,
    created_at TIMESTAMP NOT NULL,
    FOREIGN KEY (claim_id) REFERENCES claims(id) ON DELETE CASCADE
);

-- Indexes
CREATE INDEX IF NOT EXISTS idx_claims_status ON claims(status);
CREATE INDEX IF NOT EXISTS idx_claims_payer ON claims(payer_name);
CREATE INDEX IF NOT EXISTS idx_assessments_claim ON risk_assessments(claim_id);
CREATE INDEX IF NOT EXISTS idx_appeals_claim ON appeals(claim_id);
"""

CLAIM_COLUMNS = (
    "id", "claim_number", "patient_name", "patient_id", "payer_name", "plan_type",
    "provider_name", "provider_npi", "facility_name", "diagnosis_codes", "procedure_codes",
    "billed_amount", "paid_amount", "service_date", "status", "notes", "denial_reason",
    "denial_category", "denial_risk_score",
)
