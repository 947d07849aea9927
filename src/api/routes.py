"""FastAPI routes proxying chat and speech synthesis to OpenAI."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_chat_client, get_synthesizer
from api.schemas import ChatRequest, ChatResponse, SpeechRequest
from gateway.errors import ValidationError
from llm.openai_client import ChatClient
from speech.tts import AUDIO_MIME, BaseSynthesizer

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["assist"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest | None = None,
    chat_client: ChatClient = Depends(get_chat_client),
) -> ChatResponse:
    payload = payload or ChatRequest()
    if not payload.message or not payload.message.strip():
        raise ValidationError("Message required")

    reply = await chat_client.reply(payload.message)
    return ChatResponse(reply=reply)


@router.post("/tts")
async def synthesize_speech(
    payload: SpeechRequest | None = None,
    synthesizer: BaseSynthesizer = Depends(get_synthesizer),
) -> Response:
    payload = payload or SpeechRequest()
    if not payload.text or not payload.text.strip():
        raise ValidationError("Text required")

    # Fully synthesized before responding; a failure never yields a partial body.
    audio = await synthesizer.synthesize(payload.text, voice=payload.voice)
    LOGGER.debug("Synthesized %d bytes of audio", len(audio))
    return Response(content=audio, media_type=AUDIO_MIME)
