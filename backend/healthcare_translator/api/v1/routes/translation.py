"""Translation API routes."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from healthcare_translator.api.dependencies import TranslationServiceDep
from healthcare_translator.core.translation import TranslationOrigin

logger = logging.getLogger(__name__)

router = APIRouter()


class TranslateRequest(BaseModel):
    """Request to translate a phrase."""
    text: str
    source_lang: str = Field(..., min_length=2, max_length=8)
    target_lang: str = Field(..., min_length=2, max_length=8)
    context: Optional[str] = None  # Defaults to the configured context ("healthcare")


class TranslateResponse(BaseModel):
    """Translation response."""
    translated_text: str
    source_lang: str
    target_lang: str
    origin: TranslationOrigin
    cancelled: bool = False
    error: Optional[str] = None
    latency_ms: int = 0


@router.post("/translate")
async def translate(
    request: TranslateRequest,
    service: TranslationServiceDep,
) -> TranslateResponse:
    """Translate text with domain context.

    Always answers with a usable translation: when the LLM backend is not
    configured or fails, the offline phrase-table result is returned and
    ``origin`` is ``fallback``.
    """
    for code in (request.source_lang, request.target_lang):
        if not service.is_supported(code):
            raise HTTPException(status_code=400, detail=f"Unsupported language: {code}")

    outcome = await service.translate_detailed(
        request.text,
        request.source_lang,
        request.target_lang,
        context=request.context,
    )

    if outcome.is_fallback:
        logger.info(f"Served fallback translation ({outcome.error})")

    return TranslateResponse(
        translated_text=outcome.text,
        source_lang=request.source_lang,
        target_lang=request.target_lang,
        origin=outcome.origin,
        cancelled=outcome.cancelled,
        error=outcome.error,
        latency_ms=outcome.latency_ms,
    )
