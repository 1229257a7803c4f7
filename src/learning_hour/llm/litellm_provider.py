"""LiteLLM provider for multi-provider LLM support."""

from typing import Optional
import litellm

from ..exceptions import ConfigurationError, UpstreamError
from .provider import LLMProvider, LLMResponse


class LiteLLMProvider(LLMProvider):
    """LLM provider using LiteLLM for multi-provider support."""

    def __init__(
        self,
        model_name: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        max_retries: int = 3,
        timeout: int = 60,
        max_output_tokens: Optional[int] = None,
    ):
        self.model_name = model_name
        self.api_key = api_key
        self.base_url = base_url
        self.max_retries = max_retries
        self.timeout = timeout
        self.max_output_tokens = max_output_tokens

    def generate(
        self, prompt: str, system: Optional[str] = None, max_tokens: Optional[int] = None
    ) -> LLMResponse:
        """Generate response using LiteLLM.

        Raises:
            ConfigurationError: If the provider rejects the credentials
            UpstreamError: If generation fails for any other reason
        """
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs = {
            "model": self.model_name,
            "messages": messages,
            "max_retries": self.max_retries,
            "timeout": self.timeout,
        }

        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.base_url:
            kwargs["api_base"] = self.base_url
        if max_tokens or self.max_output_tokens:
            kwargs["max_tokens"] = max_tokens or self.max_output_tokens

        try:
            response = litellm.completion(**kwargs)
        except litellm.AuthenticationError as e:
            provider = self._detect_provider(self.model_name)
            raise ConfigurationError(
                f"{provider} authentication failed. "
                f"Set LLM_API_KEY in your .env file"
            ) from e
        except litellm.RateLimitError as e:
            raise UpstreamError(f"Rate limit exceeded for {self.model_name}", operation="llm") from e
        except Exception as e:
            raise UpstreamError(f"LLM generation failed: {str(e)}", operation="llm") from e

        usage = getattr(response, "usage", None)
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            tokens_used=getattr(usage, "total_tokens", None),
        )

    def _detect_provider(self, model_name: str) -> str:
        """Detect provider from model name for error messages."""
        if model_name.startswith("gpt-") or model_name.startswith("o1"):
            return "OpenAI"
        elif model_name.startswith("claude"):
            return "Anthropic"
        elif model_name.startswith("gemini"):
            return "Google"
        elif model_name.startswith("ollama"):
            return "Ollama"
        else:
            return "LLM Provider"
