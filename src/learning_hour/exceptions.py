"""Exception taxonomy for the Learning Hour generator."""

from typing import Optional


class LearningHourError(Exception):
    """Base exception for all Learning Hour errors."""
    pass


class InputValidationError(LearningHourError, ValueError):
    """Raised when an argument is missing or malformed. Never retried."""
    pass


class ConfigurationError(LearningHourError):
    """Raised when a credential is absent or a client is used before connecting."""
    pass


class UpstreamError(LearningHourError, RuntimeError):
    """Raised when the LLM, GitHub or Miro returns an error or an unusable payload."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class NotFoundError(LearningHourError):
    """Raised when a valid search completes without finding anything."""
    pass
