"""API-facing Pydantic models.

Field aliases keep the camelCase wire names the browser client expects.
Request fields are optional so that missing values surface as a 400 with an
``error`` body rather than FastAPI's 422.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TokenResponse(_WireModel):
    token: str
    identity: str
    incoming_allowed: bool = Field(alias="incomingAllowed")


class ConfigResponse(_WireModel):
    twilio_number: str | None = Field(alias="twilioNumber")
    target_number: str | None = Field(alias="targetNumber")


class CallRequest(_WireModel):
    phone: str | None = None


class CallResponse(_WireModel):
    success: bool = True
    call_sid: str = Field(alias="callSid")


class EndCallRequest(_WireModel):
    call_sid: str | None = Field(default=None, alias="callSid")


class EndCallResponse(_WireModel):
    success: bool = True
    call_sid: str = Field(alias="callSid")
    status: str


class ChatRequest(_WireModel):
    message: str | None = None


class ChatResponse(_WireModel):
    reply: str


class SpeechRequest(_WireModel):
    text: str | None = None
    voice: str | None = None
