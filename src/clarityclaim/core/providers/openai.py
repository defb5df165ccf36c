"""OpenAI LLM client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clarityclaim.core.llm import LLMClient
from clarityclaim.core.response import LLMResponse, TokenUsage


if TYPE_CHECKING:
    from clarityclaim.config.settings import Settings
    from clarityclaim.core.types import JSON


class OpenAIClient(LLMClient):
    """OpenAI API client."""

    def __init__(self, settings: Settings) -> None:
        from openai import AsyncOpenAI  # noqa: PLC0415
        self.client = AsyncOpenAI(api_key=settings.llm.openai_api_key)
        self.model = settings.llm.openai_model

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        kwargs: dict[str, Any] = {"model": self.model, "messages": messages, "temperature": temperature}
        response = await self.client.chat.completions.create(**kwargs)
        message = response.choices[0].message
        usage = None
        if response.usage:
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            )
        return LLMResponse(
            content=message.content or "", finish_reason=response.choices[0].finish_reason or "stop",
            model=response.model or self.model, usage=usage,
        )
