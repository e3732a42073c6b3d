"""Output processor for backend responses.

A call that nominally succeeded but carries no text is not a translation;
this module is where that distinction is made.
"""

from ..errors import MalformedBackendResponseError
from ..models.response import LLMResponse


class OutputProcessor:
    """Turns a raw LLM response into the final translation string."""

    def process(self, response: LLMResponse) -> str:
        """Extract the translation from a response.

        Args:
            response: Raw response from the gateway

        Returns:
            Trimmed, non-empty translation

        Raises:
            MalformedBackendResponseError: Content missing or blank
        """
        content = response.content
        if not isinstance(content, str):
            raise MalformedBackendResponseError(
                "Received an empty or malformed translation from the API."
            )

        translation = content.strip()
        if not translation:
            raise MalformedBackendResponseError(
                "Received an empty or malformed translation from the API."
            )
        return translation
