"""Tests for the command-line interface."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from clarityclaim.cli import main


if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "cli.db")
    main(["init-claims", "--db", path])
    return path


def _json_output(capsys: pytest.CaptureFixture[str]) -> object:
    return json.loads(capsys.readouterr().out)


def _text_output(capsys: pytest.CaptureFixture[str]) -> str:
    """Captured output with rich line wrapping collapsed."""
    return " ".join(capsys.readouterr().out.split())


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 0
    assert "init-claims" in capsys.readouterr().out


def test_init_claims(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = str(tmp_path / "fresh.db")
    main(["init-claims", "--db", path])
    assert "6 sample claims" in _text_output(capsys)
    main(["init-claims", "--db", path])
    assert "already has data" in _text_output(capsys)


def test_assess_json(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()
    main(["assess", "CLM002", "--db", db_path, "--json"])
    payload = _json_output(capsys)
    assert payload["score"] == 80
    assert payload["level"] == "high"
    assert payload["aiInsights"] is None


def test_assess_mock_json(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()
    main(["assess", "CLM002", "--db", db_path, "--mock", "--json"])
    payload = _json_output(capsys)
    assert payload["score"] == 68
    assert payload["aiInsights"]["adjustedScore"] == 50


def test_assess_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    claim_file = tmp_path / "claim.json"
    claim_file.write_text(json.dumps({
        "claim_number": "EXT-1",
        "diagnosis_codes": ["E11.9"],
        "procedure_codes": ["99213"],
        "provider_npi": "1234567890",
        "billed_amount": 12500,
        "plan_type": "Medicaid",
        "notes": "visit",
    }), encoding="utf-8")
    main(["assess", "--file", str(claim_file), "--db", str(tmp_path / "x.db"), "--json"])
    payload = _json_output(capsys)
    assert [f["id"] for f in payload["factors"]] == ["high_amount", "medicaid_strict", "missing_service_date"]
    assert payload["score"] == 40


def test_assess_table_output(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()
    main(["assess", "CLM002", "--db", db_path])
    out = capsys.readouterr().out
    assert "Denial Risk" in out
    assert "HIGH" in out


def test_assess_requires_claim(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["assess"])
    assert exc_info.value.code == 2


def test_assess_unknown_claim(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["assess", "CLM999", "--db", db_path])
    assert exc_info.value.code == 1
    assert "Claim not found: CLM999" in _text_output(capsys)


def test_appeal_template_json(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()
    main(["appeal", "CLM004", "--db", db_path, "--code", "CO-197", "--json"])
    payload = _json_output(capsys)
    assert payload["claim_id"] == "CLM004"
    assert payload["ai_generated"] is False
    assert payload["appeal_number"].startswith("APL-")
    assert "Denial Code: CO-197" in payload["letter_content"]


def test_appeal_mock(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()
    main(["appeal", "CLM005", "--db", db_path, "--mock", "--json"])
    payload = _json_output(capsys)
    assert payload["ai_generated"] is True
    assert payload["model"] == "mock-llm"


def test_patterns_json(db_path: str, capsys: pytest.CaptureFixture[str]) -> None:
    capsys.readouterr()
    main(["patterns", "--db", db_path, "--json"])
    payload = _json_output(capsys)
    assert payload["claims_analyzed"] == 6
    assert len(payload["patterns"]) == 4


def test_factors_json(capsys: pytest.CaptureFixture[str]) -> None:
    main(["factors", "--json"])
    payload = _json_output(capsys)
    assert len(payload) == 14
    assert payload[0]["id"] == "missing_prior_auth"
