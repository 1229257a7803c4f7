"""Fill in placeholder text the LLM copies verbatim from the prompt skeleton."""

import logging
from typing import List

from .schemas import BoardSection, SessionContent

logger = logging.getLogger(__name__)

OVERVIEW_PLACEHOLDER = "[Session overview from above]"
TOPIC_PLACEHOLDERS = ("${topic}", "{topic}")
ITEM_PLACEHOLDER_MARKERS = ("[Each", "[specific")
BEFORE_CODE_MARKER = "[Realistic example"
AFTER_CODE_MARKER = "[Clean, testable code"

DEFAULT_ITEMS = {
    "Learning Objectives": [
        "Understand the key concepts",
        "Practice applying the technique",
        "Gain confidence through hands-on exercise",
    ],
    "Discussion Questions": [
        "What was most challenging?",
        "How might you apply this in your work?",
        "What questions do you still have?",
    ],
    "Key Takeaways": [
        "Small, incremental changes are safer",
        "Tests provide confidence when refactoring",
        "Practice makes these techniques second nature",
    ],
}
FALLBACK_ITEMS = ["Item 1", "Item 2", "Item 3"]


class ContentPostProcessor:
    """Resolves template placeholders left in generated sessions."""

    def process_session_content(self, session: SessionContent) -> SessionContent:
        """Return a copy of the session with board placeholders resolved.

        The input model is not mutated.
        """
        processed = session.model_copy(deep=True)
        processed.miro_content.sections = [
            self._process_section(section, processed)
            for section in processed.miro_content.sections
        ]
        return processed

    def _process_section(self, section: BoardSection, session: SessionContent) -> BoardSection:
        if section.type == "text_frame" and section.content:
            section.content = self._replace_placeholders(section.content, session)

        if section.type == "sticky_notes" and section.items is not None:
            kept = [
                self._replace_placeholders(item, session)
                for item in section.items
                if not any(marker in item for marker in ITEM_PLACEHOLDER_MARKERS)
            ]
            if not kept:
                kept = self._items_from_session(section.title, session)
                logger.debug("Refilled placeholder items for section %r", section.title)
            section.items = kept

        if section.type == "code_examples":
            if section.before_code and BEFORE_CODE_MARKER in section.before_code:
                section.before_code = default_before_code(session.topic)
            if section.after_code and AFTER_CODE_MARKER in section.after_code:
                section.after_code = default_after_code(session.topic)

        return section

    def _replace_placeholders(self, text: str, session: SessionContent) -> str:
        if OVERVIEW_PLACEHOLDER in text and session.session_overview:
            text = text.replace(OVERVIEW_PLACEHOLDER, session.session_overview, 1)
        for placeholder in TOPIC_PLACEHOLDERS:
            text = text.replace(placeholder, session.topic)
        return text

    def _items_from_session(self, title: str, session: SessionContent) -> List[str]:
        """Prefer the session's own lists over canned defaults."""
        lowered = title.lower()
        if "objective" in lowered and session.learning_objectives:
            return list(session.learning_objectives)
        if ("discussion" in lowered or "question" in lowered) and session.discussion_prompts:
            return list(session.discussion_prompts)
        if "takeaway" in lowered and session.key_takeaways:
            return list(session.key_takeaways)
        return list(DEFAULT_ITEMS.get(title, FALLBACK_ITEMS))


def default_before_code(topic: str) -> str:
    return (
        f"// Example code demonstrating {topic or 'the concept'}\n"
        "public class Example {\n"
        "    // This method shows common issues\n"
        "    public void process(String data) {\n"
        "        // Implementation here\n"
        "    }\n"
        "}"
    )


def default_after_code(topic: str) -> str:
    return (
        f"// Refactored code addressing {topic or 'the issue'}\n"
        "public class Example {\n"
        "    // Improved implementation\n"
        "    public void process(String data) {\n"
        "        // Cleaner implementation\n"
        "    }\n"
        "}"
    )
