from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "builder-onramp"
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )

    # LLM integration (OpenAI)
    # Credentials are read per request and never logged.
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
        description="OpenAI API key (required for /api/first-call).",
    )
    openai_project_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_PROJECT_ID", "openai_project_id"),
        description="OpenAI project identifier sent as the OpenAI-Project header.",
    )
    openai_default_model: str = Field(
        default="gpt-4o-mini",
        validation_alias=AliasChoices("OPENAI_DEFAULT_MODEL", "openai_default_model"),
        description="Model used when a request does not name one.",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        validation_alias=AliasChoices("OPENAI_BASE_URL", "openai_base_url"),
        description="Base URL for OpenAI API (override for proxies/emulators).",
    )
    openai_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("OPENAI_TIMEOUT_SECONDS", "openai_timeout_seconds"),
        description="Optional request timeout (seconds). Unset keeps the httpx default.",
    )

    @property
    def missing_openai_setting(self) -> str | None:
        """Name of the first required OpenAI variable that is not configured."""
        if not self.openai_api_key:
            return "OPENAI_API_KEY"
        if not self.openai_project_id:
            return "OPENAI_PROJECT_ID"
        return None


@lru_cache
def get_settings() -> Settings:
    return Settings()
