"""Offline phrase-table translator.

Used whenever the LLM backend is unconfigured, unreachable or misbehaving.
It is deterministic, never raises, and never touches the cache or network.
Words it does not know are returned wrapped in brackets so the reader can
see exactly which parts were left untranslated.
"""

from typing import Dict, Mapping, Optional, Tuple

PhraseTable = Mapping[str, str]

# (source, target) -> lower-cased phrase -> translation
DEFAULT_PHRASE_TABLES: Dict[Tuple[str, str], Dict[str, str]] = {
    ("en", "es"): {
        "hello": "hola",
        "how are you": "¿cómo estás?",
        "pain": "dolor",
        "headache": "dolor de cabeza",
        "fever": "fiebre",
        "medicine": "medicina",
        "doctor": "médico",
        "patient": "paciente",
    },
    ("es", "en"): {
        "hola": "hello",
        "¿cómo estás?": "how are you",
        "dolor": "pain",
        "dolor de cabeza": "headache",
        "fiebre": "fever",
        "medicina": "medicine",
        "médico": "doctor",
        "paciente": "patient",
    },
    ("en", "fr"): {
        "hello": "bonjour",
        "pain": "douleur",
        "headache": "mal de tête",
        "fever": "fièvre",
    },
    ("fr", "en"): {
        "bonjour": "hello",
        "douleur": "pain",
        "mal de tête": "headache",
        "fièvre": "fever",
    },
}

UNAVAILABLE_TEMPLATE = "(Offline) Translation for {source} to {target} is not available."


class FallbackTranslator:
    """Phrase-table translator for offline operation."""

    def __init__(self, tables: Optional[Mapping[Tuple[str, str], PhraseTable]] = None):
        self._tables = dict(tables if tables is not None else DEFAULT_PHRASE_TABLES)

    def supports(self, source_lang: str, target_lang: str) -> bool:
        return (source_lang, target_lang) in self._tables

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate using the phrase table for the language pair.

        A whole-phrase match wins; otherwise each whitespace-separated word is
        looked up on its own and unknown words are rendered as ``[word]``.
        """
        table = self._tables.get((source_lang, target_lang))
        if table is None:
            return UNAVAILABLE_TEMPLATE.format(source=source_lang, target=target_lang)

        normalized = text.lower().strip()
        phrase = table.get(normalized)
        if phrase is not None:
            return phrase

        return " ".join(table.get(word, f"[{word}]") for word in normalized.split())


def fallback_translate(text: str, source_lang: str, target_lang: str) -> str:
    """Translate with the default phrase tables."""
    return _default_translator.translate(text, source_lang, target_lang)


_default_translator = FallbackTranslator()
