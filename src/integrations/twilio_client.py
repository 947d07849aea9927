"""Thin wrapper around the Twilio REST API for PSTN call control."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gateway.errors import UpstreamError

if TYPE_CHECKING:  # pragma: no cover
    from config.settings import Settings

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwilioConfig:
    account_sid: str
    auth_token: str
    from_number: str
    twiml_url: str
    default_country_code: str

    @classmethod
    def from_settings(cls, settings: Settings) -> TwilioConfig:
        if not settings.twilio_account_sid or not settings.twilio_auth_token:
            raise UpstreamError("Twilio credentials are not configured")
        if not settings.twilio_number:
            raise UpstreamError("Twilio number is not configured")

        return cls(
            account_sid=settings.twilio_account_sid,
            auth_token=settings.twilio_auth_token,
            from_number=settings.twilio_number,
            twiml_url=settings.outbound_call_twiml_url,
            default_country_code=settings.default_country_code,
        )


def build_twilio_client(cfg: TwilioConfig):
    from twilio.rest import Client

    return Client(cfg.account_sid, cfg.auth_token)


def normalize_phone(phone: str, default_country_code: str) -> str:
    """Prefix numbers lacking a ``+`` with the default country code."""

    phone = phone.strip()
    if phone.startswith("+"):
        return phone
    return default_country_code + phone


class CallController:
    """Places and terminates PSTN calls.

    Configuration and the REST client are resolved on first use so that a
    missing Twilio setup only fails the request that needs it.
    """

    def __init__(self, config_loader: Callable[[], TwilioConfig], client=None) -> None:
        self._config_loader = config_loader
        self._cfg: TwilioConfig | None = None
        self._client = client

    def _connect(self):
        if self._cfg is None:
            self._cfg = self._config_loader()
        if self._client is None:
            self._client = build_twilio_client(self._cfg)
        return self._client, self._cfg

    def place_call(self, phone: str) -> str:
        client, cfg = self._connect()
        to_number = normalize_phone(phone, cfg.default_country_code)
        try:
            call = client.calls.create(
                to=to_number,
                from_=cfg.from_number,
                url=cfg.twiml_url,
            )
        except Exception as exc:
            LOGGER.exception("Placing call failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        LOGGER.info("Placed call %s to %s", call.sid, to_number)
        return str(call.sid)

    def end_call(self, call_sid: str) -> str:
        client, _ = self._connect()
        try:
            call = client.calls(call_sid).update(status="completed")
        except Exception as exc:
            LOGGER.exception("Ending call failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        LOGGER.info("Ended call %s", call_sid)
        return str(call.status)
