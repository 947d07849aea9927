"""Twilio Voice integration.

This module provides:
- Call-setup webhook (TwiML) invoked by the TwiML App when a browser client
  places a call.
- Access token endpoint used by browser clients to register an identity.
- PSTN call placement and termination through the REST API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from api.dependencies import (
    get_call_controller,
    get_credential_issuer,
    get_gateway_config,
    get_identity_allocator,
)
from api.schemas import (
    CallRequest,
    CallResponse,
    ConfigResponse,
    EndCallRequest,
    EndCallResponse,
    TokenResponse,
)
from gateway.config import GatewayConfig
from gateway.credentials import CredentialIssuer
from gateway.dial import build_dial_instruction, render_twiml
from gateway.errors import ValidationError
from gateway.identity import IdentityAllocator
from gateway.routing import resolve_destination
from integrations.twilio_client import CallController

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["twilio"])


def _twiml_response(xml: str) -> Response:
    return Response(content=xml, media_type="text/xml")


@router.post("/voice")
async def twilio_voice_webhook(
    request: Request,
    cfg: GatewayConfig = Depends(get_gateway_config),
) -> Response:
    form = await request.form()
    to_param = str(form.get("To") or form.get("to") or "")

    decision = resolve_destination(to_param)
    instruction = build_dial_instruction(
        decision,
        outbound_caller_id=cfg.outbound_caller_id or "",
        fallback_number=cfg.fallback_number or "",
    )
    LOGGER.info("TwiML: dialing %s %s", instruction.target_kind, instruction.target)
    return _twiml_response(render_twiml(instruction))


@router.get("/token", response_model=TokenResponse)
async def issue_token(
    identity: str | None = None,
    # Accepted for client compatibility; inbound delivery is always enabled.
    incoming: str | None = None,
    allocator: IdentityAllocator = Depends(get_identity_allocator),
    issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> TokenResponse:
    resolved = allocator.allocate(identity)
    LOGGER.info("Issuing token for identity %s", resolved)
    credential = issuer.issue(resolved)
    return TokenResponse(
        token=credential.token,
        identity=credential.identity,
        incoming_allowed=credential.grant.inbound_allowed,
    )


@router.get("/config", response_model=ConfigResponse)
async def gateway_numbers(
    cfg: GatewayConfig = Depends(get_gateway_config),
) -> ConfigResponse:
    return ConfigResponse(
        twilio_number=cfg.outbound_caller_id or None,
        target_number=cfg.target_number or None,
    )


@router.post("/call", response_model=CallResponse)
def place_call(
    payload: CallRequest | None = None,
    controller: CallController = Depends(get_call_controller),
) -> CallResponse:
    payload = payload or CallRequest()
    if not payload.phone or not payload.phone.strip():
        raise ValidationError("Phone number required")

    call_sid = controller.place_call(payload.phone)
    return CallResponse(call_sid=call_sid)


@router.post("/end-call", response_model=EndCallResponse)
def end_call(
    payload: EndCallRequest | None = None,
    controller: CallController = Depends(get_call_controller),
) -> EndCallResponse:
    payload = payload or EndCallRequest()
    if not payload.call_sid:
        raise ValidationError("Call SID required")

    status = controller.end_call(payload.call_sid)
    return EndCallResponse(call_sid=payload.call_sid, status=status)
