"""Google Gemini LLM client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clarityclaim.core.llm import LLMClient
from clarityclaim.core.response import LLMResponse, TokenUsage


if TYPE_CHECKING:
    from clarityclaim.config.settings import Settings
    from clarityclaim.core.types import JSON


class GeminiClient(LLMClient):
    """Google Generative AI client."""

    def __init__(self, settings: Settings) -> None:
        import google.generativeai as genai  # noqa: PLC0415

        genai.configure(api_key=settings.llm.gemini_api_key)
        self._genai = genai
        self.model = settings.llm.gemini_model

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        system_content, contents = "", []
        for msg in messages:
            role, content = msg.get("role", ""), str(msg.get("content", ""))
            if role == "system":
                system_content += content + "\n"
            else:
                contents.append({"role": "model" if role == "assistant" else "user", "parts": [content]})

        kwargs: dict[str, Any] = {}
        if system_content:
            kwargs["system_instruction"] = system_content.strip()
        model = self._genai.GenerativeModel(self.model, **kwargs)
        response = await model.generate_content_async(
            contents,
            generation_config=self._genai.types.GenerationConfig(temperature=temperature),
        )

        usage = None
        metadata = getattr(response, "usage_metadata", None)
        if metadata is not None:
            usage = TokenUsage(
                prompt_tokens=metadata.prompt_token_count,
                completion_tokens=metadata.candidates_token_count,
                total_tokens=metadata.total_token_count,
            )
        finish_reason = "stop"
        if response.candidates:
            finish_reason = str(getattr(response.candidates[0].finish_reason, "name", "STOP")).lower()
        return LLMResponse(content=response.text, finish_reason=finish_reason, model=self.model, usage=usage)
