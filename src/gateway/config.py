from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gateway.credentials import SigningConfig

if TYPE_CHECKING:  # pragma: no cover
    from config.settings import Settings


@dataclass(frozen=True)
class GatewayConfig:
    """Read-only gateway configuration, built once from settings at start-up."""

    signing: SigningConfig
    outbound_caller_id: str | None
    fallback_number: str | None
    target_number: str | None

    @classmethod
    def from_settings(cls, settings: Settings) -> GatewayConfig:
        return cls(
            signing=SigningConfig(
                account_sid=settings.twilio_account_sid,
                api_key_sid=settings.twilio_api_key_sid,
                api_key_secret=settings.twilio_api_key_secret,
                outgoing_application_sid=settings.twiml_app_sid,
                ttl_seconds=settings.voice_token_ttl_seconds,
            ),
            outbound_caller_id=settings.twilio_number,
            fallback_number=settings.target_number or settings.twilio_number,
            target_number=settings.target_number,
        )
