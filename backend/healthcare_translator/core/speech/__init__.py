"""Speech collaborator interfaces and the voice session controller."""

from .interfaces import SpeechRecognizer, SpeechSynthesizer
from .session import HistoryItem, TranslatorSession

__all__ = [
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "HistoryItem",
    "TranslatorSession",
]
