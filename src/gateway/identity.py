"""Client identity allocation for browser softphone sessions."""

from __future__ import annotations

import logging
import random
from typing import Final, Protocol

LOGGER = logging.getLogger(__name__)

UNKNOWN_IDENTITY: Final = "unknown"
GENERATED_PREFIX: Final = "web-"
GENERATED_RANGE: Final = 100_000


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol stub
        ...


class IdentityAllocator:
    """Hands out the identity a browser session registers under.

    Caller-supplied identities are trusted verbatim. Anything empty or equal
    to ``"unknown"`` gets a generated ``web-<n>`` identity instead; collisions
    between generated identities are possible and accepted.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng or random.Random()

    def allocate(self, requested: str | None = None) -> str:
        if requested and requested != UNKNOWN_IDENTITY:
            return requested

        identity = f"{GENERATED_PREFIX}{self._rng.randrange(GENERATED_RANGE)}"
        LOGGER.debug("Generated identity %s", identity)
        return identity
