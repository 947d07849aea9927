"""Shared FastAPI dependencies.

Separated to avoid circular imports between route modules. Every factory
derives from the cached settings, so configuration is read once and then
passed into the components that need it.
"""

from __future__ import annotations

from functools import lru_cache, partial

from config.settings import get_settings
from gateway.config import GatewayConfig
from gateway.credentials import CredentialIssuer
from gateway.identity import IdentityAllocator
from integrations.twilio_client import CallController, TwilioConfig
from llm.openai_client import ChatClient, build_async_openai
from speech.tts import BaseSynthesizer, OpenAISynthesizer


@lru_cache(maxsize=1)
def get_gateway_config() -> GatewayConfig:
    return GatewayConfig.from_settings(get_settings())


@lru_cache(maxsize=1)
def _identity_allocator() -> IdentityAllocator:
    return IdentityAllocator()


def get_identity_allocator() -> IdentityAllocator:
    return _identity_allocator()


def get_credential_issuer() -> CredentialIssuer:
    return CredentialIssuer(get_gateway_config().signing)


def get_call_controller() -> CallController:
    return CallController(partial(TwilioConfig.from_settings, get_settings()))


def get_chat_client() -> ChatClient:
    settings = get_settings()
    return ChatClient(
        partial(build_async_openai, settings.openai_api_key, settings.openai_base_url),
        model=settings.chat_model,
    )


def get_synthesizer() -> BaseSynthesizer:
    settings = get_settings()
    return OpenAISynthesizer(
        partial(build_async_openai, settings.openai_api_key, settings.openai_base_url),
        model=settings.tts_model,
        voice=settings.tts_voice,
    )
