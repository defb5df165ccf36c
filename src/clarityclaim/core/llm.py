"""LLM client abstraction for multiple providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from clarityclaim.config.settings import LLMProviderEnum, Settings


if TYPE_CHECKING:
    from clarityclaim.core.response import LLMResponse
    from clarityclaim.core.types import JSON

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    model: str

    @abstractmethod
    async def chat(
        self,
        messages: list[JSON],
        temperature: float = 0.0,
    ) -> LLMResponse:
        """Send a chat completion request."""
        ...

    @classmethod
    def create(cls, settings: Settings | None = None, mock: bool = False) -> LLMClient | None:
        """Factory method to create the appropriate LLM client.

        Returns None when the active provider has no API key, which turns
        off every AI-assisted feature.
        """
        if mock:
            from clarityclaim.core.mock_llm import MockLLMClient

            return MockLLMClient()
        if settings is None:
            settings = Settings()
        if not settings.llm.is_configured:
            logger.info("No API key for %s; AI features disabled", settings.llm.provider.value)
            return None
        if settings.llm.provider == LLMProviderEnum.GEMINI:
            from clarityclaim.core.providers.gemini import GeminiClient

            return GeminiClient(settings)
        elif settings.llm.provider == LLMProviderEnum.OPENAI:
            from clarityclaim.core.providers.openai import OpenAIClient

            return OpenAIClient(settings)
        elif settings.llm.provider == LLMProviderEnum.ANTHROPIC:
            from clarityclaim.core.providers.anthropic import AnthropicClient

            return AnthropicClient(settings)
        else:
            msg = f"Unknown LLM provider: {settings.llm.provider}"
            raise ValueError(msg)
