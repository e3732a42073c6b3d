"""Context-aware translation service.

This module provides the TranslationService class, which owns the language
registry, the response cache, the backend gateway and the offline fallback
translator, and runs the request lifecycle:

    blank input -> no-op
    cache hit   -> cached string
    no API key  -> fallback translator
    backend     -> success: cache + return / any failure: fallback translator

Callers always get a string back. Backend failures are logged and resolved
through the fallback translator, never raised.
"""

import asyncio
import logging
import time
from typing import Optional

from .cache import TranslationCache
from .cancellation import CancellationToken
from .errors import (
    RequestCancelledError,
    TranslationError,
    UnconfiguredBackendError,
)
from .fallback import FallbackTranslator
from .models.context import DEFAULT_CONTEXT, TranslationRequest
from .models.prompt import PromptBundle
from .models.response import LLMResponse
from .models.result import TranslationOrigin, TranslationOutcome
from .pipeline.llm_gateway import DEFAULT_BASE_URL, DEFAULT_MODEL, LiteLLMGateway, LLMGateway
from .pipeline.output_processor import OutputProcessor
from .pipeline.prompt_engine import PromptEngine
from ..languages import LanguageRegistry, SupportedLanguage
from ...utils.text import log_preview

logger = logging.getLogger(__name__)


class TranslationService:
    """Translation service for healthcare communication.

    One instance is constructed at startup and shared by every caller, so
    all callers see the same cache. Configuration is read once here and not
    re-read per call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        *,
        gateway: Optional[LLMGateway] = None,
        registry: Optional[LanguageRegistry] = None,
        cache: Optional[TranslationCache] = None,
        fallback: Optional[FallbackTranslator] = None,
        temperature: float = 0.1,
        max_tokens: int = 1024,
        default_context: str = DEFAULT_CONTEXT,
    ):
        """Initialize the translation service.

        Args:
            api_key: Backend credential; None or blank enables offline mode
            base_url: OpenAI-compatible endpoint base URL
            model: Backend model identifier
            gateway: Gateway override (defaults to LiteLLMGateway when a key is set)
            registry: Language registry override
            cache: Cache override
            fallback: Offline translator override
            temperature: Sampling temperature for backend calls
            max_tokens: Completion length bound for backend calls
            default_context: Domain context used when a request omits one
        """
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self.default_context = default_context

        self.registry = registry if registry is not None else LanguageRegistry()
        self.cache = cache if cache is not None else TranslationCache()
        self.fallback = fallback if fallback is not None else FallbackTranslator()
        self.prompt_engine = PromptEngine(
            registry=self.registry,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        self.output_processor = OutputProcessor()

        if gateway is None and self.backend_configured:
            gateway = LiteLLMGateway(api_key=api_key, model=model, base_url=base_url)
        self._gateway = gateway

        if self.backend_configured:
            logger.info(f"Translation service ready: model={model}, base_url={base_url}")
        else:
            logger.warning("API key is missing. Translations will use the offline phrase table.")

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "TranslationService":
        """Build a service from application settings."""
        return cls(
            api_key=settings.groq_api_key,
            base_url=settings.llm_base_url,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            default_context=settings.default_context,
            **kwargs,
        )

    @property
    def backend_configured(self) -> bool:
        """Whether a backend credential is available."""
        return bool(self._api_key and self._api_key.strip())

    @property
    def model(self) -> str:
        return self._model

    # ------------------------------------------------------------------
    # Language registry
    # ------------------------------------------------------------------

    def list_languages(self) -> tuple[SupportedLanguage, ...]:
        return self.registry.list_languages()

    def is_supported(self, code: str) -> bool:
        return self.registry.is_supported(code)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    async def translate_with_context(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        context: Optional[str] = None,
        signal: Optional[CancellationToken] = None,
    ) -> str:
        """Translate text using a domain context.

        Args:
            text: The text to translate
            source_lang: Source language code (e.g. 'en')
            target_lang: Target language code (e.g. 'es')
            context: Domain context, defaults to "healthcare"
            signal: Optional token that aborts the in-flight backend call

        Returns:
            The translated text. Blank input yields an empty string.
        """
        outcome = await self.translate_detailed(
            text, source_lang, target_lang, context=context, signal=signal
        )
        return outcome.text

    async def translate_detailed(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        context: Optional[str] = None,
        signal: Optional[CancellationToken] = None,
    ) -> TranslationOutcome:
        """Translate text and report where the result came from.

        Same lifecycle as ``translate_with_context``. A request whose token
        fired mid-call resolves to the fallback text with ``cancelled=True``.
        """
        start_time = time.time()
        request = TranslationRequest(
            text=text,
            source_lang=source_lang,
            target_lang=target_lang,
            context=context if context is not None else self.default_context,
        )

        if request.is_blank:
            logger.debug("Empty input, nothing to translate")
            return TranslationOutcome(text="", origin=TranslationOrigin.SKIPPED)

        key = self.cache.make_key(
            request.text, request.source_lang, request.target_lang, request.context
        )
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Returning translation from cache.")
            return TranslationOutcome(
                text=cached,
                origin=TranslationOrigin.CACHE,
                latency_ms=self._elapsed_ms(start_time),
            )

        try:
            translation = await self._translate_remote(request, signal)
        except UnconfiguredBackendError as e:
            logger.debug(f"Backend not configured, using fallback for {request.language_pair}")
            return self._fallback_outcome(request, e, start_time)
        except RequestCancelledError as e:
            logger.info("Translation request was cancelled.")
            return self._fallback_outcome(request, e, start_time, cancelled=True)
        except TranslationError as e:
            logger.error(f"Translation API error: {e}")
            logger.error("Falling back to offline translation due to API error.")
            return self._fallback_outcome(request, e, start_time)
        except Exception as e:
            logger.exception(f"Unexpected translation failure: {e}")
            return self._fallback_outcome(request, e, start_time)

        self.cache.put(key, translation)
        logger.info(
            f"Translated {request.language_pair} ({request.context}): "
            f"'{log_preview(request.text)}'"
        )
        return TranslationOutcome(
            text=translation,
            origin=TranslationOrigin.BACKEND,
            latency_ms=self._elapsed_ms(start_time),
        )

    def clear_cache(self) -> int:
        """Clear the translation cache.

        Returns:
            Number of entries removed
        """
        return self.cache.clear()

    def cache_stats(self) -> dict:
        return self.cache.stats()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _translate_remote(
        self,
        request: TranslationRequest,
        signal: Optional[CancellationToken],
    ) -> str:
        """Run one backend call and validate its output."""
        if not self.backend_configured or self._gateway is None:
            raise UnconfiguredBackendError("No API key configured")

        if signal is not None and signal.cancelled:
            raise RequestCancelledError(signal.reason or "Cancelled before the backend call")

        bundle = self.prompt_engine.build(request)
        response = await self._call_gateway(bundle, signal)
        return self.output_processor.process(response)

    async def _call_gateway(
        self,
        bundle: PromptBundle,
        signal: Optional[CancellationToken],
    ) -> LLMResponse:
        """Call the gateway, aborting the call if the token fires first."""
        if signal is None:
            return await self._gateway.call(bundle)

        call_task = asyncio.ensure_future(self._gateway.call(bundle))
        cancel_task = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait(
                {call_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (call_task, cancel_task):
                if not task.done():
                    task.cancel()

        if call_task in done:
            return call_task.result()

        # Let the aborted call unwind before reporting the cancellation
        await asyncio.gather(call_task, return_exceptions=True)
        raise RequestCancelledError(signal.reason or "Cancelled during the backend call")

    def _fallback_outcome(
        self,
        request: TranslationRequest,
        error: Exception,
        start_time: float,
        cancelled: bool = False,
    ) -> TranslationOutcome:
        text = self.fallback.translate(request.text, request.source_lang, request.target_lang)
        return TranslationOutcome(
            text=text,
            origin=TranslationOrigin.FALLBACK,
            cancelled=cancelled,
            error=getattr(error, "kind", type(error).__name__),
            latency_ms=self._elapsed_ms(start_time),
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.time() - start_time) * 1000)
