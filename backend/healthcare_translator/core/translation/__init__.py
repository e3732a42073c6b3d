"""Translation package.

Architecture:
- models/: Data models (TranslationRequest, PromptBundle, TranslationOutcome, ...)
- pipeline/: Backend call components (PromptEngine, LLMGateway, OutputProcessor)
- cache.py: Exact-match in-memory cache
- fallback.py: Offline phrase-table translator
- service.py: TranslationService orchestrator
"""

from .cache import CacheKey, TranslationCache
from .cancellation import CancellationToken
from .errors import (
    BackendHttpError,
    BackendUnavailableError,
    MalformedBackendResponseError,
    RequestCancelledError,
    TranslationError,
    UnconfiguredBackendError,
)
from .fallback import FallbackTranslator, fallback_translate
from .models import (
    DEFAULT_CONTEXT,
    TranslationRequest,
    Message,
    PromptBundle,
    TokenUsage,
    LLMResponse,
    TranslationOrigin,
    TranslationOutcome,
)
from .pipeline import LLMGateway, LiteLLMGateway, OutputProcessor, PromptEngine
from .service import TranslationService

__all__ = [
    # Service
    "TranslationService",
    # Cache and cancellation
    "CacheKey",
    "TranslationCache",
    "CancellationToken",
    # Errors
    "TranslationError",
    "UnconfiguredBackendError",
    "BackendHttpError",
    "BackendUnavailableError",
    "MalformedBackendResponseError",
    "RequestCancelledError",
    # Fallback
    "FallbackTranslator",
    "fallback_translate",
    # Models
    "DEFAULT_CONTEXT",
    "TranslationRequest",
    "Message",
    "PromptBundle",
    "TokenUsage",
    "LLMResponse",
    "TranslationOrigin",
    "TranslationOutcome",
    # Pipeline
    "PromptEngine",
    "LLMGateway",
    "LiteLLMGateway",
    "OutputProcessor",
]
