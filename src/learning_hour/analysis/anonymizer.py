"""Replace sensitive literals in code snippets before they leave the team."""

import re

from ..models import AnonymizedExample

# Applied in order; each entry flags at most once per snippet.
SENSITIVE_PATTERNS: list[tuple[re.Pattern, str, str]] = [
    (re.compile(r'"sk_live_[^"]+"'), '"PLACEHOLDER_API_KEY"', "API key"),
    (re.compile(r'"\d{3}-\d{2}-\d{4}"'), '"XXX-XX-XXXX"', "SSN"),
    (re.compile(r'"[^"]*\.bank\.com"'), '"PLACEHOLDER_HOST"', "Internal host"),
]


def anonymize_example(code: str) -> AnonymizedExample:
    """Substitute API keys, SSNs and internal hostnames with placeholders.

    Args:
        code: Source snippet to clean

    Returns:
        AnonymizedExample with the rewritten code and one flag per pattern
        type that matched. is_safe_to_use is always True.
    """
    anonymized = code
    flagged: list[str] = []

    for pattern, replacement, description in SENSITIVE_PATTERNS:
        if pattern.search(code):
            flagged.append(description)
            anonymized = pattern.sub(replacement, anonymized)

    return AnonymizedExample(
        anonymized_code=anonymized,
        is_safe_to_use=True,
        flagged_elements=flagged,
    )
