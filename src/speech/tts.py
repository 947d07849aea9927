"""Text-to-speech synthesis through the OpenAI speech endpoint."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from openai import AsyncOpenAI

from gateway.errors import UpstreamError

LOGGER = logging.getLogger(__name__)

AUDIO_MIME = "audio/mpeg"


class BaseSynthesizer(ABC):
    """Interface for all text-to-speech synthesizers."""

    @abstractmethod
    async def synthesize(self, text: str, voice: str | None = None) -> bytes:
        """Synthesize speech for the given text."""


class OpenAISynthesizer(BaseSynthesizer):
    """Returns MP3 audio from OpenAI's ``/audio/speech`` endpoint."""

    def __init__(
        self,
        client_factory: Callable[[], AsyncOpenAI],
        *,
        model: str,
        voice: str,
    ) -> None:
        self._client_factory = client_factory
        self._model = model
        self._voice = voice

    async def synthesize(self, text: str, voice: str | None = None) -> bytes:
        client = self._client_factory()
        try:
            response = await client.audio.speech.create(
                model=self._model,
                voice=voice or self._voice,
                input=text,
                response_format="mp3",
            )
        except Exception as exc:
            LOGGER.exception("Speech synthesis failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        return response.content
