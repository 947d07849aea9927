"""Dial instructions and their TwiML rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from twilio.twiml.voice_response import VoiceResponse

from gateway.routing import RoutingDecision, ToClient

TargetKind = Literal["client", "number"]


@dataclass(frozen=True)
class DialInstruction:
    target_kind: TargetKind
    target: str
    # Client-to-client legs are not PSTN legs and carry no caller id.
    caller_id: str | None = None


def build_dial_instruction(
    decision: RoutingDecision,
    outbound_caller_id: str,
    fallback_number: str,
) -> DialInstruction:
    if isinstance(decision, ToClient):
        return DialInstruction(target_kind="client", target=decision.identity)

    return DialInstruction(
        target_kind="number",
        target=decision.number or fallback_number,
        caller_id=outbound_caller_id,
    )


def render_twiml(instruction: DialInstruction) -> str:
    """Render a single ``<Dial>`` verb for the provider's call-control interpreter."""

    response = VoiceResponse()
    if instruction.target_kind == "client":
        dial = response.dial()
        dial.client(instruction.target)
    else:
        dial = response.dial(caller_id=instruction.caller_id)
        dial.number(instruction.target)
    return str(response)
