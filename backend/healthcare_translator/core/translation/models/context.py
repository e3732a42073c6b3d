"""Translation request model.

This module defines the input contract of the translation service.
"""

from pydantic import BaseModel, Field

DEFAULT_CONTEXT = "healthcare"


class TranslationRequest(BaseModel):
    """A single translation request.

    Language codes are passed through as given; checking them against the
    registry is the caller's responsibility.
    """

    text: str = Field(..., description="Text to translate, used verbatim")
    source_lang: str = Field(..., description="Source language code")
    target_lang: str = Field(..., description="Target language code")
    context: str = Field(
        default=DEFAULT_CONTEXT,
        description="Domain label used to bias terminology and register",
    )

    @property
    def is_blank(self) -> bool:
        """Whether the text is empty after trimming."""
        return not self.text.strip()

    @property
    def language_pair(self) -> str:
        return f"{self.source_lang}-{self.target_lang}"
