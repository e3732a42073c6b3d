"""Utility helpers."""

from .text import log_preview, safe_truncate

__all__ = ["log_preview", "safe_truncate"]
