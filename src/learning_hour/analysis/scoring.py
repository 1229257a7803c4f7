"""Heuristic confidence and complexity scoring for matched snippets."""

import re

from .patterns import normalize_smell_name

BASE_CONFIDENCE = 0.7
MAX_CONFIDENCE = 0.95
FEATURE_ENVY_BONUS = 0.2
LONG_METHOD_BONUS = 0.15
LONG_METHOD_LINES = 30

CHAINED_CALL = re.compile(r"\.\w+\([^()\n]*\)\.")
BRANCH_KEYWORDS = re.compile(r"\b(?:if|else|for|while|switch)\b")

EXPERIENCE_BY_COMPLEXITY = {
    "high": "advanced",
    "medium": "intermediate",
    "low": "beginner",
}


def _line_count(snippet: str) -> int:
    return len(snippet.split("\n"))


def calculate_confidence(snippet: str, smell: str) -> float:
    """Score how strongly a snippet exemplifies the smell, between 0.7 and 0.95."""
    key = normalize_smell_name(smell)
    score = BASE_CONFIDENCE
    if key == "feature envy" and len(CHAINED_CALL.findall(snippet)) >= 2:
        score += FEATURE_ENVY_BONUS
    if key == "long method" and _line_count(snippet) > LONG_METHOD_LINES:
        score += LONG_METHOD_BONUS
    return round(min(score, MAX_CONFIDENCE), 2)


def rate_complexity(snippet: str) -> str:
    """Bucket a snippet into low, medium or high complexity."""
    lines = _line_count(snippet)
    keywords = len(BRANCH_KEYWORDS.findall(snippet))
    if lines > 50 or keywords > 10:
        return "high"
    if lines > 20 or keywords > 5:
        return "medium"
    return "low"


def experience_level_for(complexity: str) -> str:
    """Map a complexity rating to the audience it suits."""
    return EXPERIENCE_BY_COMPLEXITY.get(complexity, "beginner")
