"""OpenAI chat completion wrapper."""

from __future__ import annotations

import logging
from collections.abc import Callable

from openai import AsyncOpenAI

from gateway.errors import UpstreamError

LOGGER = logging.getLogger(__name__)


def build_async_openai(api_key: str | None, base_url: str | None = None) -> AsyncOpenAI:
    if not api_key:
        raise UpstreamError("OpenAI API key is not configured")

    return AsyncOpenAI(
        api_key=api_key,
        base_url=base_url or None,
    )


class ChatClient:
    """Forwards a single user message and returns the assistant reply."""

    def __init__(self, client_factory: Callable[[], AsyncOpenAI], model: str) -> None:
        # Built lazily so a missing API key fails the request, not start-up.
        self._client_factory = client_factory
        self._model = model

    async def reply(self, message: str) -> str:
        client = self._client_factory()
        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": message}],
            )
        except Exception as exc:
            LOGGER.exception("Chat completion failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        return response.choices[0].message.content or ""
