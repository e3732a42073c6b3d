"""Context-shaping prompt construction.

This module provides the PromptEngine class that turns a translation
request into the chat messages sent to the backend.
"""

from typing import Dict, Optional

from ..models.context import TranslationRequest
from ..models.prompt import Message, PromptBundle
from ...languages import LanguageRegistry

SYSTEM_PROMPT_TEMPLATE = (
    "You are an expert translator specializing in {context} terminology. "
    "Translate the user's text from {source_language} to {target_language}. "
    "Provide only the direct translation, with no additional explanations, "
    "introductions, or commentary."
)


class PromptEngine:
    """Builds prompt bundles for context-aware translation.

    The system message fixes the translator role, the domain expertise taken
    from the request context, and the language direction. The user message is
    the raw input text, unchanged.
    """

    def __init__(
        self,
        registry: Optional[LanguageRegistry] = None,
        temperature: float = 0.1,
        max_tokens: int = 1024,
    ):
        self.registry = registry
        self.temperature = temperature
        self.max_tokens = max_tokens

    def build(self, request: TranslationRequest) -> PromptBundle:
        """Build prompt bundle for the given request.

        Args:
            request: Translation request

        Returns:
            PromptBundle ready for LLM call
        """
        variables = self.get_template_variables(request)
        system_prompt = SYSTEM_PROMPT_TEMPLATE.format(**variables)

        return PromptBundle(
            messages=[
                Message(role="system", content=system_prompt),
                Message(role="user", content=request.text),
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            stream=False,
            template_variables=variables,
        )

    def get_template_variables(self, request: TranslationRequest) -> Dict[str, str]:
        return {
            "context": request.context,
            "source_language": self._describe_language(request.source_lang),
            "target_language": self._describe_language(request.target_lang),
        }

    def _describe_language(self, code: str) -> str:
        """Render a code as "Name (code)" when the registry knows it."""
        if self.registry is not None:
            language = self.registry.get(code)
            if language is not None:
                return f"{language.name} ({code})"
        return code
