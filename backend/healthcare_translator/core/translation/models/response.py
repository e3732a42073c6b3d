"""LLM response models.

Provider-agnostic representation of what came back from the backend.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class TokenUsage(BaseModel):
    """Token consumption details."""

    prompt_tokens: int = Field(default=0, description="Tokens in the prompt")
    completion_tokens: int = Field(default=0, description="Tokens in the completion")
    total_tokens: int = Field(default=0, description="Total tokens used")

    def model_post_init(self, __context: Any) -> None:
        """Calculate total if not provided."""
        if not self.total_tokens and (self.prompt_tokens or self.completion_tokens):
            self.total_tokens = self.prompt_tokens + self.completion_tokens


class LLMResponse(BaseModel):
    """Raw response from the LLM backend.

    ``content`` is the first completion choice as returned, or ``None`` when
    the payload had no choices or no message content.
    """

    content: Optional[str] = Field(default=None, description="First choice content")

    provider: str = Field(..., description="LLM provider name")
    model: str = Field(..., description="Model identifier used")

    usage: TokenUsage = Field(
        default_factory=TokenUsage, description="Token usage details"
    )

    latency_ms: int = Field(default=0, description="Response latency in milliseconds")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response timestamp",
    )

    raw_response: Optional[Dict[str, Any]] = Field(
        default=None, description="Raw provider response for debugging"
    )
