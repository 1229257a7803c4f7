"""LLM provider abstraction."""

from .provider import LLMProvider, LLMResponse, AnthropicProvider, create_llm_provider
from .litellm_provider import LiteLLMProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "AnthropicProvider",
    "LiteLLMProvider",
    "create_llm_provider",
]
