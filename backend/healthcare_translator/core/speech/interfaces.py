"""Speech capture and playback collaborator interfaces.

Concrete recognizers and synthesizers live outside this package (browser
speech APIs, desktop engines, ...). The session controller only relies on
the signaling contract defined here.
"""

from typing import Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

ResultCallback = Callable[[str, str], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[str], None]
EndCallback = Callable[[], None]


@runtime_checkable
class SpeechRecognizer(Protocol):
    """Speech-to-text capture.

    The recognizer reports ``on_result(final_text, interim_text)`` as speech
    is transcribed, ``on_error(code)`` on failure and ``on_end()`` when
    capture stops.
    """

    language: str

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def bind(
        self,
        on_result: ResultCallback,
        on_error: ErrorCallback,
        on_end: EndCallback,
    ) -> None:
        ...


@runtime_checkable
class SpeechSynthesizer(Protocol):
    """Text-to-speech playback."""

    def speak(
        self,
        text: str,
        lang: str,
        rate: float = 1.0,
        pitch: float = 1.0,
        on_start: Optional[Callable[[], None]] = None,
        on_end: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        ...

    def cancel(self) -> None:
        """Stop any ongoing speech."""
        ...
