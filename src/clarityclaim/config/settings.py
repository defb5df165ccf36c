"""Application settings and configuration."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMProviderEnum(str, Enum):
    """Supported LLM providers."""

    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class LLMSettings(BaseModel):
    """LLM provider configuration."""

    provider: LLMProviderEnum = LLMProviderEnum.GEMINI
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"

    @property
    def api_key(self) -> str:
        """API key of the active provider."""
        return {
            LLMProviderEnum.GEMINI: self.gemini_api_key,
            LLMProviderEnum.OPENAI: self.openai_api_key,
            LLMProviderEnum.ANTHROPIC: self.anthropic_api_key,
        }[self.provider]

    @property
    def model(self) -> str:
        """Model name of the active provider."""
        return {
            LLMProviderEnum.GEMINI: self.gemini_model,
            LLMProviderEnum.OPENAI: self.openai_model,
            LLMProviderEnum.ANTHROPIC: self.anthropic_model,
        }[self.provider]

    @property
    def is_configured(self) -> bool:
        """Whether hosted AI features are enabled."""
        return bool(self.api_key)


class StorageSettings(BaseModel):
    """Claims store configuration."""

    claims_db: str = "claims.db"


class AppealSettings(BaseModel):
    """Appeal workflow configuration."""

    deadline_days: int = 60


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # LLM Configuration
    llm: LLMSettings = Field(default_factory=LLMSettings)

    # Storage Configuration
    storage: StorageSettings = Field(default_factory=StorageSettings)

    # Appeals Configuration
    appeals: AppealSettings = Field(default_factory=AppealSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load environment variable overrides for nested settings."""
        # LLM overrides
        if provider := os.getenv("LLM_PROVIDER"):
            self.llm.provider = LLMProviderEnum(provider.lower())
        if key := os.getenv("GOOGLE_AI_API_KEY"):
            self.llm.gemini_api_key = key
        if model := os.getenv("GEMINI_MODEL"):
            self.llm.gemini_model = model
        if key := os.getenv("OPENAI_API_KEY"):
            self.llm.openai_api_key = key
        if model := os.getenv("OPENAI_MODEL"):
            self.llm.openai_model = model
        if key := os.getenv("ANTHROPIC_API_KEY"):
            self.llm.anthropic_api_key = key
        if model := os.getenv("ANTHROPIC_MODEL"):
            self.llm.anthropic_model = model

        # Storage overrides
        if db_path := os.getenv("CLAIMS_DB_PATH"):
            self.storage.claims_db = db_path

        # Appeal overrides
        if days := os.getenv("APPEAL_DEADLINE_DAYS"):
            self.appeals.deadline_days = int(days)
