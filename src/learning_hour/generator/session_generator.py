"""Learning Hour session and code example generation."""

import logging
from typing import Optional

from ..exceptions import LearningHourError, UpstreamError
from ..llm.parsing import parse_json_reply
from ..llm.prompts import (
    SESSION_SYSTEM_PROMPT,
    build_code_example_prompt,
    build_session_prompt,
)
from ..llm.provider import LLMProvider
from ..observability import trace_function
from .post_processor import ContentPostProcessor
from .schemas import (
    CodeExampleContent,
    SessionContent,
    validate_code_example,
    validate_session_content,
)

logger = logging.getLogger(__name__)

SESSION_MAX_TOKENS = 3000
CODE_EXAMPLE_MAX_TOKENS = 4000


class LearningHourGenerator:
    """Produces validated session plans and code examples from an LLM."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        post_processor: Optional[ContentPostProcessor] = None,
    ):
        """Initialize generator.

        Args:
            llm_provider: LLM provider for text generation
            post_processor: Placeholder resolver applied to sessions
        """
        self.llm = llm_provider
        self.post_processor = post_processor or ContentPostProcessor()

    def build_session_prompt(self, topic: str, style: str = "slide") -> str:
        return build_session_prompt(topic, style)

    def build_code_example_prompt(self, topic: str, language: str = "java") -> str:
        return build_code_example_prompt(topic, language)

    @trace_function(name="generate_session_content", tags=["llm"])
    def generate_session_content(self, topic: str, style: str = "slide") -> SessionContent:
        """Generate a session plan for a topic.

        Args:
            topic: Practice topic, e.g. "Feature Envy"
            style: Board layout the session targets

        Returns:
            Validated SessionContent with placeholders resolved

        Raises:
            UpstreamError: LLM failure, unparsable reply or schema violation
        """
        try:
            response = self.llm.generate(
                prompt=self.build_session_prompt(topic, style),
                system=SESSION_SYSTEM_PROMPT,
                max_tokens=SESSION_MAX_TOKENS,
            )
            data = parse_json_reply(response.content)
            session = validate_session_content(data)
        except (LearningHourError, ValueError) as e:
            raise UpstreamError(
                f"Failed to generate session for '{topic}': {e}", operation="generate-session"
            ) from e

        logger.info(
            "Generated session for %r with %d board section(s)",
            topic,
            len(session.miro_content.sections),
        )
        return self.post_processor.process_session_content(session)

    @trace_function(name="generate_code_example", tags=["llm"])
    def generate_code_example(self, topic: str, language: str = "java") -> CodeExampleContent:
        """Generate a multi-step refactoring example.

        Raises:
            UpstreamError: LLM failure, unparsable reply or schema violation
        """
        try:
            response = self.llm.generate(
                prompt=self.build_code_example_prompt(topic, language),
                system=SESSION_SYSTEM_PROMPT,
                max_tokens=CODE_EXAMPLE_MAX_TOKENS,
            )
            logger.debug("Raw code example response: %.200s", response.content)
            data = parse_json_reply(response.content)
            example = validate_code_example(data)
        except (LearningHourError, ValueError) as e:
            raise UpstreamError(
                f"Failed to generate code example for '{topic}': {e}",
                operation="generate-code-example",
            ) from e

        logger.info("Generated %d refactoring step(s) for %r", len(example.refactoring_steps), topic)
        return example
