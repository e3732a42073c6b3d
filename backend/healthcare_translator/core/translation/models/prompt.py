"""Chat-completion request models.

A translation is one two-turn chat completion: a system turn that sets the
translator role, domain and language direction, and a user turn holding the
text to translate.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One chat turn."""

    role: Literal["system", "user"]
    content: str


class PromptBundle(BaseModel):
    """Everything the gateway sends for one translation.

    Built by ``PromptEngine``; the generation parameters are fixed per
    service so the same request always produces the same bundle.
    """

    messages: List[Message] = Field(..., min_length=1)

    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, gt=0)
    stream: bool = False

    # Values rendered into the system prompt
    template_variables: Dict[str, str] = Field(default_factory=dict)

    @property
    def system_prompt(self) -> Optional[str]:
        return self._content_for("system")

    @property
    def user_prompt(self) -> Optional[str]:
        """The text being translated."""
        return self._content_for("user")

    def to_openai_format(self) -> List[Dict[str, str]]:
        """Messages as ``{"role", "content"}`` dicts for the completions API."""
        return [message.model_dump() for message in self.messages]

    def _content_for(self, role: str) -> Optional[str]:
        return next((m.content for m in self.messages if m.role == role), None)
