"""API v1 route modules."""

from . import cache, languages, translation

__all__ = ["cache", "languages", "translation"]
