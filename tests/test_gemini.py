"""Tests for the Gemini client's request and response translation."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest

from clarityclaim.agents.insights import RiskInsightsAgent
from clarityclaim.config.settings import Settings
from clarityclaim.core.providers.gemini import GeminiClient


if TYPE_CHECKING:
    from collections.abc import Callable

    from clarityclaim.core.models import Claim


class FakeGenerativeModel:
    """Stands in for ``genai.GenerativeModel`` and records each request."""

    calls: list[dict[str, Any]] = []
    reply = SimpleNamespace(
        text="ok",
        usage_metadata=SimpleNamespace(prompt_token_count=120, candidates_token_count=30, total_token_count=150),
        candidates=[SimpleNamespace(finish_reason=SimpleNamespace(name="STOP"))],
    )

    def __init__(self, model_name: str, **kwargs: Any) -> None:
        self.model_name = model_name
        self.kwargs = kwargs

    async def generate_content_async(self, contents: list[dict[str, Any]], generation_config: Any = None) -> Any:
        FakeGenerativeModel.calls.append({
            "model": self.model_name,
            "kwargs": self.kwargs,
            "contents": contents,
            "generation_config": generation_config,
        })
        return FakeGenerativeModel.reply


@pytest.fixture
def fake_genai() -> SimpleNamespace:
    FakeGenerativeModel.calls = []
    return SimpleNamespace(
        GenerativeModel=FakeGenerativeModel,
        types=SimpleNamespace(GenerationConfig=lambda **kw: kw),
    )


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, fake_genai: SimpleNamespace) -> GeminiClient:
    monkeypatch.setenv("GOOGLE_AI_API_KEY", "g-key")
    gemini = GeminiClient(Settings())
    gemini._genai = fake_genai
    return gemini


async def test_roles_and_system_instruction(client: GeminiClient) -> None:
    await client.chat(
        [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "Hello"},
            {"role": "assistant", "content": "Hi"},
            {"role": "user", "content": "Score this claim"},
        ],
        temperature=0.3,
    )

    call = FakeGenerativeModel.calls[-1]
    assert call["model"] == "gemini-1.5-flash"
    assert call["kwargs"] == {"system_instruction": "Be brief."}
    assert call["contents"] == [
        {"role": "user", "parts": ["Hello"]},
        {"role": "model", "parts": ["Hi"]},
        {"role": "user", "parts": ["Score this claim"]},
    ]
    assert call["generation_config"] == {"temperature": 0.3}


async def test_no_system_instruction_without_system_message(client: GeminiClient) -> None:
    await client.chat([{"role": "user", "content": "Hello"}])
    assert FakeGenerativeModel.calls[-1]["kwargs"] == {}


async def test_response_translation(client: GeminiClient) -> None:
    response = await client.chat([{"role": "user", "content": "Hello"}])
    assert response.content == "ok"
    assert response.model == "gemini-1.5-flash"
    assert response.finish_reason == "stop"
    assert response.usage is not None
    assert response.usage.prompt_tokens == 120
    assert response.usage.completion_tokens == 30
    assert response.usage.total_tokens == 150


async def test_missing_usage_and_candidates(client: GeminiClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(FakeGenerativeModel, "reply", SimpleNamespace(text="bare", candidates=[]))
    response = await client.chat([{"role": "user", "content": "Hello"}])
    assert response.content == "bare"
    assert response.usage is None
    assert response.finish_reason == "stop"


async def test_insights_round_trip(
    client: GeminiClient, monkeypatch: pytest.MonkeyPatch, make_claim: Callable[..., Claim]
) -> None:
    payload = {"adjustedScore": 40, "insights": "Payer often requests records"}
    reply = SimpleNamespace(text=f"```json\n{json.dumps(payload)}\n```", usage_metadata=None, candidates=[])
    monkeypatch.setattr(FakeGenerativeModel, "reply", reply)

    response = await RiskInsightsAgent(client).get_insights(make_claim(), [])

    assert response.success
    assert response.output.adjusted_score == 40
    call = FakeGenerativeModel.calls[-1]
    assert [c["role"] for c in call["contents"]] == ["user"]
    assert "expert healthcare claims analyst" in call["kwargs"]["system_instruction"]
