"""Text utilities for safe string handling.

Patient phrases should not end up in logs in full; these helpers produce
short, single-line previews for log messages.
"""

import re

_WHITESPACE_RE = re.compile(r"\s+")


def safe_truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    """Truncate text, preferring a word boundary near the cut.

    Args:
        text: Text to truncate
        max_chars: Maximum characters (excluding suffix)
        suffix: Suffix to append if truncated (default "...")

    Returns:
        Truncated text with suffix if needed
    """
    if not text or len(text) <= max_chars:
        return text

    truncated = text[:max_chars]

    # Look back up to 20 characters for a good break point
    break_chars = {' ', '\n', '\t', ',', '.', '!', '?', ';', ':', '-', '。', '，', '、'}
    for i in range(1, min(20, max_chars - 1) + 1):
        if truncated[-i] in break_chars:
            truncated = truncated[:-i].rstrip()
            break

    return truncated + suffix


def log_preview(text: str, max_chars: int = 40) -> str:
    """Collapse whitespace and truncate text for a log line."""
    return safe_truncate(_WHITESPACE_RE.sub(" ", text).strip(), max_chars)
