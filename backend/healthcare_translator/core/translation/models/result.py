"""Translation outcome models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TranslationOrigin(str, Enum):
    """Where the returned text came from."""

    CACHE = "cache"
    BACKEND = "backend"
    FALLBACK = "fallback"
    SKIPPED = "skipped"  # Blank input, nothing was done


class TranslationOutcome(BaseModel):
    """Detailed result of a translation request.

    ``text`` is always usable; it is what ``translate_with_context`` returns.
    The remaining fields let callers tell an offline fallback apart from a
    backend answer or a superseded (cancelled) request.
    """

    text: str = Field(..., description="Translated text")
    origin: TranslationOrigin = Field(..., description="Source of the text")
    cancelled: bool = Field(
        default=False, description="Whether the caller's token fired mid-request"
    )
    error: Optional[str] = Field(
        default=None, description="Failure kind that triggered the fallback"
    )
    latency_ms: int = Field(default=0, description="Wall time spent on the request")

    @property
    def is_fallback(self) -> bool:
        return self.origin == TranslationOrigin.FALLBACK
