"""Application-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    environment: Literal["local", "dev", "prod"] = Field(default="local")
    log_level: str = Field(default="INFO")

    # Twilio account (REST API for placing/ending calls)
    twilio_account_sid: str | None = Field(default=None)
    twilio_auth_token: str | None = Field(default=None)

    # Twilio API key used to sign browser access tokens
    twilio_api_key_sid: str | None = Field(default=None)
    twilio_api_key_secret: str | None = Field(default=None)
    twiml_app_sid: str | None = Field(
        default=None,
        description="TwiML App whose voice URL points at /api/voice.",
    )
    voice_token_ttl_seconds: int = Field(default=3600, ge=60, le=24 * 3600)

    # Numbers
    twilio_number: str | None = Field(
        default=None,
        description="E.164 number presented as caller id on PSTN legs.",
    )
    target_number: str | None = Field(
        default=None,
        description="Fallback PSTN destination when a dial instruction has no number.",
    )
    default_country_code: str = Field(default="+91")
    outbound_call_twiml_url: str = Field(default="https://demo.twilio.com/welcome/voice/")

    # OpenAI (chat + speech synthesis)
    openai_api_key: str | None = Field(default=None)
    openai_base_url: str | None = Field(default=None)
    chat_model: str = Field(default="gpt-4o-mini")
    tts_model: str = Field(default="tts-1")
    tts_voice: str = Field(default="alloy")

    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("default_country_code")
    @classmethod
    def ensure_plus_prefix(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith("+"):
            value = "+" + value
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
