"""In-memory translation cache.

Entries are keyed on the exact (source, target, context, text) tuple. The
text is deliberately not normalized: "Hello" and "hello " are different
entries, so only identical phrases are served from the cache. There is no
eviction or TTL; entries live until ``clear()`` or process exit.
"""

import logging
from typing import Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)


class CacheKey(NamedTuple):
    """Exact-match key for a cached translation."""

    source_lang: str
    target_lang: str
    context: str
    text: str


class TranslationCache:
    """Unbounded exact-match cache of backend translations.

    Reads and writes are single dict operations, so interleaved coroutines
    never observe a partially updated entry. Concurrent misses for the same
    key both write; the last write wins.
    """

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, str] = {}
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(text: str, source_lang: str, target_lang: str, context: str) -> CacheKey:
        return CacheKey(source_lang, target_lang, context, text)

    def get(self, key: CacheKey) -> Optional[str]:
        """Look up a cached translation, or None on a miss."""
        cached = self._entries.get(key)
        if cached is None:
            self._misses += 1
        else:
            self._hits += 1
        return cached

    def put(self, key: CacheKey, translation: str) -> None:
        self._entries[key] = translation

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        count = len(self._entries)
        self._entries.clear()
        logger.info(f"Translation cache cleared ({count} entries)")
        return count

    def stats(self) -> Dict[str, int]:
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
