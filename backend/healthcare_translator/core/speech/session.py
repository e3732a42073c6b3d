"""Voice translation session controller.

Connects a speech recognizer and a speech synthesizer to the translation
service: finalized transcripts are translated, translations are recorded in
a short history and spoken back unless the session is muted.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from .interfaces import SpeechRecognizer, SpeechSynthesizer
from ..translation.cancellation import CancellationToken
from ..translation.models.result import TranslationOutcome
from ..translation.service import TranslationService

logger = logging.getLogger(__name__)

SPEECH_RATE = 0.9
SPEECH_PITCH = 1.0


class HistoryItem(BaseModel):
    """A completed translation shown in the recent translations list."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    original: str
    translated: str
    source_lang: str
    target_lang: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TranslatorSession:
    """State and behavior of one interactive translation session.

    Only one translation is in flight at a time: starting a new one cancels
    the previous request's token, and a cancelled request never overwrites
    the displayed translation or the history.
    """

    def __init__(
        self,
        service: TranslationService,
        recognizer: Optional[SpeechRecognizer] = None,
        synthesizer: Optional[SpeechSynthesizer] = None,
        source_lang: str = "en",
        target_lang: str = "es",
        context: Optional[str] = None,
        history_limit: int = 10,
        auto_speak: bool = True,
    ):
        self.service = service
        self.recognizer = recognizer
        self.synthesizer = synthesizer
        self.context = context
        self.history_limit = history_limit
        self.auto_speak = auto_speak

        self.source_lang = source_lang
        self.target_lang = target_lang

        self.original_text = ""
        self.translated_text = ""
        self.error = ""
        self.history: List[HistoryItem] = []

        self.is_listening = False
        self.is_translating = False
        self.is_speaking = False
        self.is_muted = False

        self._pending: Optional[CancellationToken] = None

        if recognizer is not None:
            recognizer.language = source_lang
            recognizer.bind(self.handle_result, self.handle_error, self.handle_end)

    @classmethod
    def from_settings(cls, service: TranslationService, settings, **kwargs) -> "TranslatorSession":
        """Build a session using the configured history size and context."""
        kwargs.setdefault("history_limit", settings.history_limit)
        kwargs.setdefault("context", settings.default_context)
        return cls(service, **kwargs)

    # ------------------------------------------------------------------
    # Languages
    # ------------------------------------------------------------------

    def set_languages(self, source_lang: str, target_lang: str) -> None:
        """Switch the language pair.

        Raises:
            ValueError: If either code is not in the registry
        """
        for code in (source_lang, target_lang):
            if not self.service.is_supported(code):
                raise ValueError(f"Unsupported language code: {code}")

        self.source_lang = source_lang
        self.target_lang = target_lang
        if self.recognizer is not None:
            self.recognizer.language = source_lang

    # ------------------------------------------------------------------
    # Speech capture
    # ------------------------------------------------------------------

    def toggle_listening(self) -> None:
        if self.recognizer is None:
            self.error = "Speech recognition not available"
            return

        if self.is_listening:
            self.recognizer.stop()
            self.is_listening = False
            return

        self.error = ""
        self.original_text = ""
        self.translated_text = ""
        self.recognizer.language = self.source_lang
        self.recognizer.start()
        self.is_listening = True

    async def handle_result(self, final_text: str, interim_text: str = "") -> None:
        """Recognizer result signal; final text triggers a translation."""
        self.original_text = final_text or interim_text
        if final_text:
            await self.translate_text(final_text)

    def handle_error(self, code: str) -> None:
        logger.error(f"Speech recognition error: {code}")
        self.error = f"Speech recognition error: {code}"
        self.is_listening = False

    def handle_end(self) -> None:
        self.is_listening = False

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    async def translate_text(self, text: str) -> Optional[TranslationOutcome]:
        """Translate text with the session's language pair.

        Returns:
            The outcome, or None for blank text
        """
        if not text.strip():
            return None

        if self._pending is not None:
            self._pending.cancel("Superseded by a newer translation")

        token = CancellationToken()
        self._pending = token
        source_lang, target_lang = self.source_lang, self.target_lang

        self.is_translating = True
        self.error = ""
        try:
            outcome = await self.service.translate_detailed(
                text, source_lang, target_lang, context=self.context, signal=token
            )
        finally:
            if self._pending is token:
                self._pending = None
                self.is_translating = False

        if outcome.cancelled:
            logger.debug("Discarding result of a superseded translation")
            return outcome

        self.translated_text = outcome.text
        self._record(text, outcome.text, source_lang, target_lang)

        if self.auto_speak:
            self.speak_translation()
        return outcome

    async def translate_current(self) -> Optional[TranslationOutcome]:
        """Translate whatever is in the original text box (manual trigger)."""
        return await self.translate_text(self.original_text)

    def clear_history(self) -> None:
        self.history = []

    def _record(self, original: str, translated: str, source_lang: str, target_lang: str) -> None:
        item = HistoryItem(
            original=original,
            translated=translated,
            source_lang=source_lang,
            target_lang=target_lang,
        )
        self.history = [item, *self.history][: self.history_limit]

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def speak_translation(self) -> bool:
        """Speak the current translation.

        Returns:
            True if speech was started
        """
        if self.synthesizer is None or not self.translated_text or self.is_muted:
            return False

        self.synthesizer.cancel()
        self.synthesizer.speak(
            self.translated_text,
            self.target_lang,
            rate=SPEECH_RATE,
            pitch=SPEECH_PITCH,
            on_start=self._on_speech_start,
            on_end=self._on_speech_end,
            on_error=self._on_speech_error,
        )
        return True

    def stop_speaking(self) -> None:
        if self.synthesizer is not None:
            self.synthesizer.cancel()
        self.is_speaking = False

    def toggle_mute(self) -> bool:
        """Flip the mute state; muting also stops current speech."""
        self.is_muted = not self.is_muted
        if self.is_muted and self.is_speaking:
            self.stop_speaking()
        return self.is_muted

    def _on_speech_start(self) -> None:
        self.is_speaking = True

    def _on_speech_end(self) -> None:
        self.is_speaking = False

    def _on_speech_error(self, code: str) -> None:
        logger.warning(f"Speech synthesis error: {code}")
        self.is_speaking = False
