"""Recover JSON objects from free-form LLM replies."""

import json
from typing import Any, Optional


def extract_json_object(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` object in text, or None.

    Braces inside JSON string literals (including escaped quotes) are ignored
    when balancing, so prose or Markdown fences around the object are skipped.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for index in range(start, len(text)):
            char = text[index]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue

            if char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return text[start : index + 1]
        # Unbalanced from this brace; try the next opening brace.
        start = text.find("{", start + 1)
    return None


def parse_json_reply(text: str) -> Any:
    """Parse the first JSON object in an LLM reply.

    Raises:
        ValueError: If no object is present or it is not valid JSON
    """
    candidate = extract_json_object(text)
    if candidate is None:
        raise ValueError("No valid JSON found in response")
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in response: {e}") from e
