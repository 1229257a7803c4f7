"""Abstract LLM provider interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from pydantic import BaseModel
from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage, SystemMessage

from ..config import Config
from ..exceptions import ConfigurationError, UpstreamError


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    content: str
    model: str
    tokens_used: Optional[int] = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model_name: str

    @abstractmethod
    def generate(
        self, prompt: str, system: Optional[str] = None, max_tokens: Optional[int] = None
    ) -> LLMResponse:
        """Generate a response from the LLM.

        Args:
            prompt: The user prompt
            system: Optional system prompt
            max_tokens: Optional cap on output tokens for this call

        Returns:
            LLMResponse containing the generated text
        """
        pass


class AnthropicProvider(LLMProvider):
    """Anthropic Claude LLM provider using LangChain."""

    def __init__(
        self,
        model_name: str,
        api_key: str,
        max_retries: int = 3,
        timeout: int = 60,
        max_output_tokens: int = 4000,
    ):
        """Initialize the Anthropic provider.

        Args:
            model_name: Name of the Claude model to use
            api_key: Anthropic API key
            max_retries: Maximum retry attempts for API calls
            timeout: Request timeout in seconds
            max_output_tokens: Default output token cap
        """
        self.model_name = model_name
        self.api_key = api_key
        self.max_retries = max_retries
        self.timeout = timeout
        self.max_output_tokens = max_output_tokens

        self.client = ChatAnthropic(
            model=model_name,
            anthropic_api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
            max_tokens=max_output_tokens,
        )

    def generate(
        self, prompt: str, system: Optional[str] = None, max_tokens: Optional[int] = None
    ) -> LLMResponse:
        """Generate a response using Claude."""
        messages = []

        if system:
            messages.append(SystemMessage(content=system))

        messages.append(HumanMessage(content=prompt))

        client = self.client.bind(max_tokens=max_tokens) if max_tokens else self.client

        try:
            response = client.invoke(messages)
        except Exception as e:
            raise UpstreamError(f"LLM generation failed: {str(e)}", operation="llm") from e

        usage = getattr(response, "usage_metadata", None) or {}
        return LLMResponse(
            content=coerce_content(response.content),
            model=self.model_name,
            tokens_used=usage.get("total_tokens"),
        )


def coerce_content(content: Any) -> str:
    """Ensure LangChain responses are flattened into plain text."""
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
                continue

            text = getattr(block, "text", None)
            if text:
                parts.append(text)
                continue

            if isinstance(block, dict):
                text = block.get("text")
                if text:
                    parts.append(text)
                continue
        return "".join(parts).strip()

    return str(content)


def create_llm_provider(config: Config) -> LLMProvider:
    """Build the provider selected by configuration.

    Raises:
        ConfigurationError: If the selected provider has no API key
    """
    if config.llm_provider == "anthropic":
        if not config.api_key:
            raise ConfigurationError(
                "ANTHROPIC_API_KEY environment variable is required"
            )
        return AnthropicProvider(
            config.model_name,
            config.api_key,
            max_retries=config.max_retries,
            timeout=config.timeout,
            max_output_tokens=config.max_output_tokens,
        )

    from .litellm_provider import LiteLLMProvider

    return LiteLLMProvider(
        model_name=config.model_name,
        api_key=config.llm_api_key,
        base_url=config.llm_base_url,
        max_retries=config.max_retries,
        timeout=config.timeout,
        max_output_tokens=config.max_output_tokens,
    )
