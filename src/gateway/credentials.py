"""Access token issuance for browser softphone sessions.

Each token binds one identity to exactly one voice grant. The grant always
permits both placing calls (through the configured TwiML App) and receiving
calls addressed to the identity. Validity is carried entirely by the token's
signature and expiry, which the provider checks; nothing is stored here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from twilio.jwt.access_token import AccessToken
from twilio.jwt.access_token.grants import VoiceGrant

from gateway.errors import CredentialSigningError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SigningConfig:
    account_sid: str | None
    api_key_sid: str | None
    api_key_secret: str | None
    outgoing_application_sid: str | None
    ttl_seconds: int = 3600

    def missing_fields(self) -> list[str]:
        required = {
            "account_sid": self.account_sid,
            "api_key_sid": self.api_key_sid,
            "api_key_secret": self.api_key_secret,
            "outgoing_application_sid": self.outgoing_application_sid,
        }
        return [name for name, value in required.items() if not value]


@dataclass(frozen=True)
class CapabilityGrant:
    """Voice signaling capability. Both directions are always enabled."""

    outbound_allowed: bool = field(default=True, init=False)
    inbound_allowed: bool = field(default=True, init=False)

    def to_voice_grant(self, outgoing_application_sid: str) -> VoiceGrant:
        return VoiceGrant(
            outgoing_application_sid=outgoing_application_sid if self.outbound_allowed else None,
            incoming_allow=self.inbound_allowed,
        )


@dataclass(frozen=True)
class SessionCredential:
    token: str
    identity: str
    grant: CapabilityGrant


class CredentialIssuer:
    """Mints signed access tokens scoped to a single voice grant."""

    def __init__(self, signing_config: SigningConfig) -> None:
        self._config = signing_config

    def issue(self, identity: str) -> SessionCredential:
        missing = self._config.missing_fields()
        if missing:
            raise CredentialSigningError(
                f"Token signing is not configured (missing: {', '.join(missing)})"
            )

        grant = CapabilityGrant()
        try:
            token = AccessToken(
                self._config.account_sid,
                self._config.api_key_sid,
                self._config.api_key_secret,
                identity=identity,
                ttl=self._config.ttl_seconds,
            )
            token.add_grant(grant.to_voice_grant(self._config.outgoing_application_sid))
            jwt = token.to_jwt()
        except Exception as exc:
            LOGGER.exception("Access token signing failed: %s", exc)
            raise CredentialSigningError(str(exc)) from exc

        LOGGER.info("Issued access token for identity %s", identity)
        return SessionCredential(
            token=jwt.decode("utf-8") if isinstance(jwt, bytes) else str(jwt),
            identity=identity,
            grant=grant,
        )
