"""Translation data models.

This module provides structured data models for the translation service,
ensuring type safety and clear contracts between components.
"""

from .context import DEFAULT_CONTEXT, TranslationRequest
from .prompt import Message, PromptBundle
from .response import TokenUsage, LLMResponse
from .result import TranslationOrigin, TranslationOutcome

__all__ = [
    # Request models
    "DEFAULT_CONTEXT",
    "TranslationRequest",
    # Prompt models
    "Message",
    "PromptBundle",
    # Response models
    "TokenUsage",
    "LLMResponse",
    # Result models
    "TranslationOrigin",
    "TranslationOutcome",
]
