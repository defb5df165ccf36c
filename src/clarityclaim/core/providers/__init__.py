"""LLM provider implementations."""

from clarityclaim.core.providers.anthropic import AnthropicClient
from clarityclaim.core.providers.gemini import GeminiClient
from clarityclaim.core.providers.openai import OpenAIClient


__all__ = ["AnthropicClient", "GeminiClient", "OpenAIClient"]
