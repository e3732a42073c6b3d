"""Supported language registry.

The registry is built once when the translation service starts and is
read-only afterwards, so it can be shared freely between requests.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class SupportedLanguage(BaseModel):
    """A language offered in the source/target pickers."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO 639-1 style language code")
    name: str = Field(..., description="Display name")
    flag: str = Field(default="", description="Flag emoji shown next to the name")


DEFAULT_LANGUAGES: tuple[SupportedLanguage, ...] = (
    SupportedLanguage(code="en", name="English", flag="\U0001F1FA\U0001F1F8"),
    SupportedLanguage(code="es", name="Spanish", flag="\U0001F1EA\U0001F1F8"),
    SupportedLanguage(code="fr", name="French", flag="\U0001F1EB\U0001F1F7"),
    SupportedLanguage(code="de", name="German", flag="\U0001F1E9\U0001F1EA"),
    SupportedLanguage(code="it", name="Italian", flag="\U0001F1EE\U0001F1F9"),
    SupportedLanguage(code="pt", name="Portuguese", flag="\U0001F1F5\U0001F1F9"),
    SupportedLanguage(code="ru", name="Russian", flag="\U0001F1F7\U0001F1FA"),
    SupportedLanguage(code="zh", name="Chinese", flag="\U0001F1E8\U0001F1F3"),
    SupportedLanguage(code="ja", name="Japanese", flag="\U0001F1EF\U0001F1F5"),
    SupportedLanguage(code="ko", name="Korean", flag="\U0001F1F0\U0001F1F7"),
    SupportedLanguage(code="ar", name="Arabic", flag="\U0001F1F8\U0001F1E6"),
    SupportedLanguage(code="hi", name="Hindi", flag="\U0001F1EE\U0001F1F3"),
    SupportedLanguage(code="yo", name="Yoruba", flag="\U0001F1F3\U0001F1EC"),
    SupportedLanguage(code="ig", name="Igbo", flag="\U0001F1F3\U0001F1EC"),
    SupportedLanguage(code="ha", name="Hausa", flag="\U0001F1F3\U0001F1EC"),
)


class LanguageRegistry:
    """Immutable, ordered collection of supported languages."""

    def __init__(self, languages: Optional[Iterable[SupportedLanguage]] = None):
        self._languages = tuple(languages if languages is not None else DEFAULT_LANGUAGES)
        self._by_code = {lang.code: lang for lang in self._languages}
        if len(self._by_code) != len(self._languages):
            raise ValueError("Language codes must be unique")
        self._codes = frozenset(self._by_code)

    def list_languages(self) -> tuple[SupportedLanguage, ...]:
        """Return all languages in display order."""
        return self._languages

    def is_supported(self, code: str) -> bool:
        """Check whether a language code is registered."""
        return code in self._codes

    def get(self, code: str) -> Optional[SupportedLanguage]:
        return self._by_code.get(code)

    def display_name(self, code: str) -> str:
        """Get the display name for a code, or the code itself if unknown."""
        language = self._by_code.get(code)
        return language.name if language else code

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, code: object) -> bool:
        return code in self._codes
