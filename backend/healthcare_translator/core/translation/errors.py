"""Translation error taxonomy.

None of these errors reach callers of ``TranslationService``: the
orchestrator catches every ``TranslationError`` and resolves the request
through the offline fallback translator. They exist so that the gateway,
output processor and orchestrator agree on what went wrong, and so the
failure kind can be reported in ``TranslationOutcome.error``.
"""

from http import HTTPStatus
from typing import Optional


class TranslationError(Exception):
    """Base class for translation failures."""

    kind = "translation_error"


class UnconfiguredBackendError(TranslationError):
    """No backend credential is configured (offline mode)."""

    kind = "unconfigured_backend"


class BackendHttpError(TranslationError):
    """Backend answered with a non-success status."""

    kind = "backend_http_error"

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message or _status_phrase(status_code)
        super().__init__(
            f"API request failed with status {status_code}: {self.message}"
        )


class BackendUnavailableError(TranslationError):
    """Backend could not be reached (connection error, timeout)."""

    kind = "backend_unavailable"


class MalformedBackendResponseError(TranslationError):
    """Backend call succeeded but carried no usable translation."""

    kind = "malformed_backend_response"


class RequestCancelledError(TranslationError):
    """The caller's cancellation token fired before the backend answered."""

    kind = "request_cancelled"


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown error"
