"""Cancellation token for in-flight translation requests."""

import asyncio
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class CancellationToken:
    """Explicit cancellation signal passed alongside a translation request.

    The orchestrator observes the token at its single suspension point (the
    remote backend call). Cancelling has no effect on work that has already
    settled.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: Optional[str] = None) -> None:
        """Fire the token. Idempotent."""
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()
        logger.debug(f"Cancellation requested: {reason or 'no reason given'}")

    async def wait(self) -> None:
        """Block until the token fires."""
        await self._event.wait()
