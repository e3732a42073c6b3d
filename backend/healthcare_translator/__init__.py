"""Healthcare Translator backend.

Context-aware translation service with caching and an offline fallback,
plus the voice session controller that drives it from speech capture.
"""

__version__ = "0.1.0"
