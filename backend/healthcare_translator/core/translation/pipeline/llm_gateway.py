"""LLM Gateway for backend access.

This module provides an abstract gateway interface for the translation
backend, along with the LiteLLM implementation that talks to any
OpenAI-compatible chat completions endpoint.
"""

import json
import logging
import re
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from litellm import APIConnectionError, Timeout, acompletion

from ..errors import BackendHttpError, BackendUnavailableError
from ..models.prompt import PromptBundle
from ..models.response import LLMResponse, TokenUsage

logger = logging.getLogger(__name__)

# Groq's OpenAI-compatible endpoint and the model served by default
DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama3-8b-8192"

# "litellm.RateLimitError: OpenAIException - <provider message>"
_LITELLM_PREFIX_RE = re.compile(r"^litellm\.\w+:\s*")
_PROVIDER_PREFIX_RE = re.compile(r"^\w+Exception\s*-\s*")


def extract_error_message(error: Exception) -> Optional[str]:
    """Get the endpoint's own error message out of a LiteLLM exception.

    Drops the ``litellm.<ErrorClass>:`` and provider exception prefixes, and
    unwraps an OpenAI-style ``{"error": {"message": ...}}`` body when the
    remainder is JSON.

    Returns:
        The message, or None when nothing is left
    """
    message = getattr(error, "message", None) or str(error)
    message = _LITELLM_PREFIX_RE.sub("", message.strip())
    message = _PROVIDER_PREFIX_RE.sub("", message).strip()

    if message.startswith("{"):
        try:
            body = json.loads(message)
        except ValueError:
            return message
        detail = body.get("error") if isinstance(body, dict) else None
        if isinstance(detail, dict):
            detail = detail.get("message")
        if isinstance(detail, str) and detail.strip():
            return detail.strip()

    return message or None


class LLMGateway(ABC):
    """Abstract gateway for LLM providers.

    Implementations make exactly one backend call per ``call`` and raise
    ``BackendHttpError`` or ``BackendUnavailableError`` on failure.
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """Get provider name."""
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        """Get model identifier."""
        pass

    @abstractmethod
    async def call(self, bundle: PromptBundle) -> LLMResponse:
        """Make a single non-streaming LLM call.

        Args:
            bundle: Prompt bundle with messages and configuration

        Returns:
            LLMResponse with the first choice content and metadata
        """
        pass


class LiteLLMGateway(LLMGateway):
    """Gateway for OpenAI-compatible endpoints (Groq, OpenAI, ...) via LiteLLM."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        provider_name: str = "openai",
    ):
        """Initialize LiteLLM gateway.

        Args:
            api_key: Bearer credential for the endpoint
            model: Model identifier
            base_url: Custom base URL; requests go to {base_url}/chat/completions
            provider_name: Provider name for logging
        """
        self._api_key = api_key
        self._model = model
        self._base_url = base_url
        self._provider = provider_name

        # Route through LiteLLM's OpenAI-compatible client
        if model.startswith("openai/"):
            self._litellm_model = model
        else:
            self._litellm_model = f"openai/{model}"

        logger.info(
            f"[LLM Gateway] Initialized: provider={provider_name}, model={model}, "
            f"litellm_model={self._litellm_model}, base_url={base_url}"
        )

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    def build_kwargs(self, bundle: PromptBundle) -> Dict[str, Any]:
        """Build the litellm.acompletion() arguments for a bundle."""
        kwargs: Dict[str, Any] = {
            "model": self._litellm_model,
            "messages": bundle.to_openai_format(),
            "temperature": bundle.temperature,
            "max_tokens": bundle.max_tokens,
            "stream": False,
            "api_key": self._api_key,
        }
        if self._base_url:
            kwargs["api_base"] = self._base_url
        return kwargs

    async def call(self, bundle: PromptBundle) -> LLMResponse:
        """Make LLM API call using LiteLLM.

        Args:
            bundle: Prompt bundle

        Returns:
            LLMResponse with the first choice content, or None content when
            the payload carried no choices

        Raises:
            BackendHttpError: Endpoint answered with a non-success status
            BackendUnavailableError: Endpoint could not be reached
        """
        start_time = time.time()
        kwargs = self.build_kwargs(bundle)

        logger.debug(
            f"[LLM Gateway] Calling LiteLLM: model={self._litellm_model}, "
            f"provider={self._provider}, base_url={self._base_url}, "
            f"prompt={bundle.template_variables}"
        )

        try:
            response = await acompletion(**kwargs)
        except (APIConnectionError, Timeout) as e:
            # LiteLLM attaches a synthetic status (500, 408) to these; no response came back
            raise BackendUnavailableError(extract_error_message(e) or "Backend unreachable") from e
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            message = extract_error_message(e)
            if isinstance(status_code, int) and status_code >= 400:
                raise BackendHttpError(status_code, message) from e
            raise BackendUnavailableError(message or type(e).__name__) from e

        latency_ms = int((time.time() - start_time) * 1000)

        choices = getattr(response, "choices", None) or []
        content = None
        if choices:
            first_message = getattr(choices[0], "message", None)
            content = getattr(first_message, "content", None) if first_message is not None else None

        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=content,
            provider=self._provider,
            model=self._model,
            usage=TokenUsage(
                prompt_tokens=usage.prompt_tokens if usage else 0,
                completion_tokens=usage.completion_tokens if usage else 0,
                total_tokens=usage.total_tokens if usage else 0,
            ),
            latency_ms=latency_ms,
            raw_response=response.model_dump() if hasattr(response, "model_dump") else None,
        )
