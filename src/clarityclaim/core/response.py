"""Response models for LLM and agent outputs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class TokenUsage(BaseModel):
    """Token usage information."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class LLMResponse(BaseModel):
    """Response from an LLM call."""

    content: str = ""
    finish_reason: str = "stop"
    model: str = ""
    usage: TokenUsage | None = None


class AgentResponse(BaseModel):
    """Outcome of an agent run.

    ``success`` is False whenever the hosted model could not be reached or
    its reply could not be used; callers take their fallback path on that
    branch instead of handling exceptions.
    """

    success: bool
    output: Any = None
    error: str | None = None
    model: str | None = None
    total_tokens: int = 0
