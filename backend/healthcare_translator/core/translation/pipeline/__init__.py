"""Translation pipeline components.

This module provides the pipeline components used for a backend call:
- PromptEngine: Builds context-aware prompts
- LLMGateway: Interface for the LLM backend (LiteLLMGateway implementation)
- OutputProcessor: Validates raw LLM responses
"""

from .prompt_engine import PromptEngine
from .llm_gateway import LLMGateway, LiteLLMGateway
from .output_processor import OutputProcessor

__all__ = [
    "PromptEngine",
    "LLMGateway",
    "LiteLLMGateway",
    "OutputProcessor",
]
