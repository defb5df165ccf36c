"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from clarityclaim.core.llm import LLMClient
from clarityclaim.core.mock_llm import MockLLMClient
from clarityclaim.core.models import Claim
from clarityclaim.core.response import LLMResponse
from clarityclaim.storage.claims_db import ClaimsDatabase


if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from clarityclaim.core.types import JSON

FIXED_NOW = datetime(2026, 10, 17, 12, 0, tzinfo=UTC)

_ENV_VARS = (
    "LLM_PROVIDER",
    "GOOGLE_AI_API_KEY",
    "GEMINI_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "CLAIMS_DB_PATH",
    "APPEAL_DEADLINE_DAYS",
    "LOG_LEVEL",
)


class FailingLLMClient(LLMClient):
    """LLM client whose every call raises."""

    def __init__(self, error: Exception | None = None, model: str = "failing-llm") -> None:
        self.error = error or ConnectionError("hosted model unreachable")
        self.model = model
        self.call_count = 0

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        self.call_count += 1
        raise self.error


class StaticLLMClient(LLMClient):
    """LLM client that always replies with the same text."""

    def __init__(self, content: str, model: str = "static-llm") -> None:
        self.content = content
        self.model = model
        self.call_count = 0

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        self.call_count += 1
        return LLMResponse(content=self.content, model=self.model)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Isolate tests from real API keys and any local .env file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_claim() -> Callable[..., Claim]:
    """Build a complete, low-risk claim with field overrides."""

    def _make(**overrides: Any) -> Claim:
        data: dict[str, Any] = {
            "id": "CLM-T1",
            "claim_number": "CLM-2026-0042",
            "patient_name": "Jane Doe",
            "patient_id": "P-100",
            "payer_name": "Blue Cross",
            "plan_type": "Commercial",
            "provider_name": "Dr. Sam Rivera",
            "provider_npi": "1234567890",
            "facility_name": "Lakeside Clinic",
            "diagnosis_codes": ["E11.9"],
            "procedure_codes": ["99213"],
            "billed_amount": 200,
            "service_date": FIXED_NOW.date() - timedelta(days=10),
            "status": "submitted",
            "notes": "Routine follow-up",
        }
        data.update(overrides)
        return Claim(**data)

    return _make


@pytest.fixture
def risky_claim(make_claim: Callable[..., Claim]) -> Claim:
    """Medicare claim missing codes, NPI and service date."""
    return make_claim(
        diagnosis_codes=[],
        procedure_codes=[],
        provider_npi=None,
        billed_amount=5000,
        plan_type="Medicare",
        service_date=None,
    )


@pytest.fixture
def mock_llm() -> MockLLMClient:
    return MockLLMClient()


@pytest.fixture
def failing_llm() -> FailingLLMClient:
    return FailingLLMClient()


@pytest.fixture
def static_llm() -> Callable[[str], StaticLLMClient]:
    """Build a client that always replies with the given text."""
    return StaticLLMClient


@pytest.fixture
def claims_db(tmp_path: Path) -> ClaimsDatabase:
    return ClaimsDatabase(tmp_path / "claims.db")


@pytest.fixture
def seeded_db(claims_db: ClaimsDatabase) -> ClaimsDatabase:
    claims_db.load_sample_data(today=date(2026, 10, 17))
    return claims_db
