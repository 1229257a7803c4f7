"""LangSmith tracing configuration."""

import logging
import os
from functools import wraps
from typing import Optional
from langsmith import traceable

logger = logging.getLogger(__name__)

DEFAULT_PROJECT = "learning-hour-generator"


def configure_tracing(
    project_name: str = DEFAULT_PROJECT,
    api_key: Optional[str] = None,
    enabled: Optional[bool] = None,
) -> bool:
    """Configure LangSmith tracing for the application.

    Call once at startup. Without a LangSmith API key tracing stays off and
    every traced function runs undecorated.

    Args:
        project_name: LangSmith project name
        api_key: LangSmith API key (if not in environment)
        enabled: Explicitly enable/disable tracing (if not in environment)

    Environment Variables:
        LANGSMITH_API_KEY: API key for LangSmith (required for tracing)
        LANGSMITH_TRACING: Set to "true" to enable tracing
        LANGSMITH_PROJECT: Project name for organizing traces

    Returns:
        Whether tracing ended up enabled
    """
    if api_key:
        os.environ["LANGSMITH_API_KEY"] = api_key

    if not os.getenv("LANGSMITH_API_KEY"):
        logger.debug("LangSmith API key not found, tracing disabled")
        os.environ["LANGSMITH_TRACING"] = "false"
        return False

    os.environ.setdefault("LANGSMITH_PROJECT", project_name)

    if enabled is not None:
        os.environ["LANGSMITH_TRACING"] = "true" if enabled else "false"
    elif "LANGSMITH_TRACING" not in os.environ:
        os.environ["LANGSMITH_TRACING"] = "true"

    if is_tracing_enabled():
        logger.info("LangSmith tracing enabled (project: %s)", os.environ["LANGSMITH_PROJECT"])
    return is_tracing_enabled()


def is_tracing_enabled() -> bool:
    """Check if LangSmith tracing is currently enabled."""
    return os.getenv("LANGSMITH_TRACING", "").lower() == "true"


def trace_function(name: Optional[str] = None, **trace_kwargs):
    """Decorator to trace a function with LangSmith.

    Thin wrapper around ``langsmith.traceable``; the check happens per call so
    tracing can be switched on after import.

    Args:
        name: Custom name for the trace (default: function name)
        **trace_kwargs: Additional arguments passed to @traceable
    """

    def decorator(func):
        traced_func = traceable(name=name or func.__name__, **trace_kwargs)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            if is_tracing_enabled():
                return traced_func(*args, **kwargs)
            return func(*args, **kwargs)

        return wrapper

    return decorator
