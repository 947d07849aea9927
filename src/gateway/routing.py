"""Classification of call-setup targets into routing decisions.

The provider's call-setup callback always carries a ``To`` value. Without any
other context the gateway defaults to a software client: any target that is
not explicitly ``client:``-prefixed gets the prefix added, so a bare phone
number is routed to a client of that name rather than to the PSTN.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

CLIENT_PREFIX: Final = "client:"


@dataclass(frozen=True)
class ToClient:
    identity: str


@dataclass(frozen=True)
class ToNumber:
    number: str


RoutingDecision = Union[ToClient, ToNumber]


def _has_client_prefix(descriptor: str) -> bool:
    return descriptor[: len(CLIENT_PREFIX)].lower() == CLIENT_PREFIX


def normalize_descriptor(descriptor: str) -> str:
    """Ensure the descriptor carries a ``client:`` prefix."""

    if _has_client_prefix(descriptor):
        return descriptor
    return CLIENT_PREFIX + descriptor


def resolve_destination(descriptor: str | None) -> RoutingDecision:
    """Classify a raw ``To`` value. Never raises."""

    normalized = normalize_descriptor(descriptor or "")
    if _has_client_prefix(normalized):
        _, _, identity = normalized.partition(":")
        return ToClient(identity=identity)
    # Unreachable while normalization forces the client prefix.
    return ToNumber(number=descriptor or "")
