"""Configuration management for the Learning Hour generator."""

import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


DEFAULT_MODEL_NAME = "claude-3-5-sonnet-20241022"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_MIRO_API_URL = "https://api.miro.com/v2"


class Config(BaseModel):
    """Application configuration."""

    # LLM Settings
    llm_provider: str = Field(default="anthropic")
    model_name: str = Field(default=DEFAULT_MODEL_NAME)
    api_key: Optional[str] = Field(default=None)
    llm_api_key: Optional[str] = Field(default=None)
    llm_base_url: Optional[str] = Field(default=None)
    max_retries: int = Field(default=3)
    timeout: int = Field(default=60)
    max_output_tokens: int = Field(default=4000)

    # Code host
    github_token: Optional[str] = Field(default=None)
    github_api_url: str = Field(default=DEFAULT_GITHUB_API_URL)

    # Whiteboard
    miro_access_token: Optional[str] = Field(default=None)
    miro_api_url: str = Field(default=DEFAULT_MIRO_API_URL)
    miro_client_id: Optional[str] = Field(default=None)
    code_images: bool = Field(default=False)

    # Misc
    http_timeout: int = Field(default=30)
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        def _parse_int(value: Optional[str], fallback: int) -> int:
            try:
                return int(value) if value is not None else fallback
            except ValueError:
                return fallback

        def _parse_bool(value: Optional[str], fallback: bool) -> bool:
            if value is None:
                return fallback
            return value.strip().lower() in ("1", "true", "yes", "on")

        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "anthropic"),
            model_name=os.getenv("MODEL_NAME", DEFAULT_MODEL_NAME),
            api_key=os.getenv("ANTHROPIC_API_KEY"),
            llm_api_key=os.getenv("LLM_API_KEY"),
            llm_base_url=os.getenv("LLM_BASE_URL"),
            max_retries=_parse_int(os.getenv("LLM_MAX_RETRIES"), 3),
            timeout=_parse_int(os.getenv("LLM_TIMEOUT"), 60),
            max_output_tokens=_parse_int(os.getenv("LLM_MAX_TOKENS"), 4000),
            github_token=os.getenv("GITHUB_TOKEN"),
            github_api_url=os.getenv("GITHUB_API_URL", DEFAULT_GITHUB_API_URL),
            miro_access_token=os.getenv("MIRO_ACCESS_TOKEN"),
            miro_api_url=os.getenv("MIRO_API_URL", DEFAULT_MIRO_API_URL),
            miro_client_id=os.getenv("MIRO_CLIENT_ID"),
            code_images=_parse_bool(os.getenv("CODE_IMAGES"), False),
            http_timeout=_parse_int(os.getenv("HTTP_TIMEOUT"), 30),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
