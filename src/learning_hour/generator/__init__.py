"""Session content generation."""

from .post_processor import ContentPostProcessor
from .schemas import (
    BoardSection,
    CodeExampleContent,
    SessionContent,
    validate_code_example,
    validate_session_content,
)
from .session_generator import LearningHourGenerator

__all__ = [
    "ContentPostProcessor",
    "BoardSection",
    "CodeExampleContent",
    "SessionContent",
    "validate_code_example",
    "validate_session_content",
    "LearningHourGenerator",
]
