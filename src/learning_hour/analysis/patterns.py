"""Search queries and matching regexes for known code smells."""

import re
from typing import Optional

SMELL_QUERIES: dict[str, list[str]] = {
    "feature envy": [
        "getCustomer().get",
        "getAccount().get",
        "getOrder().get",
    ],
    "long method": [
        "public void",
        "def ",
        "function",
    ],
    "god class": [
        "class Manager",
        "class Service",
        "class Controller",
    ],
    "primitive obsession": [
        "String phoneNumber",
        "String email",
        "int zipCode",
    ],
}

SMELL_PATTERNS: dict[str, list[str]] = {
    "feature envy": [
        r"\w+\.get\w*\([^()\n]*\)\.get\w*\([^()\n]*\)[^\n]*",
        r"\w+\.\w+\(\)\.\w+\(\)\.\w+\([^\n]*",
        r"(\w+)\.\w+\([^\n]*\n[^\n]*\1\.\w+\([^\n]*\n[^\n]*\1\.\w+\([^\n]*",
    ],
    "long method": [
        r"(?:public|private|protected)[^\n;{]*\([^)]*\)[^\n;{]*\{[^\n]*\n(?:[^\n]*\n){30,}?[ \t]*\}",
        r"def \w+\([^)]*\)[^\n]*:[^\n]*\n(?:(?:[ \t][^\n]*)?\n){30,}?",
        r"function\s+\w+\s*\([^)]*\)\s*\{[^\n]*\n(?:[^\n]*\n){30,}?[ \t]*\}",
    ],
    "god class": [
        r"class\s+\w*(?:Manager|Service|Controller|Handler|Processor)\b[^\n]*\n(?:[^\n]*\n){100,}?",
        r"class\s+\w+[^\n]*\{[^\n]*\n(?:[^\n]*\n){200,}?",
        r"class\s+\w+[^\n]*:[^\n]*\n(?:(?:[ \t][^\n]*)?\n){200,}?",
    ],
    "primitive obsession": [
        r"\b(?:String|string|str|int|long)\s+\w*(?:[Pp]hone|[Ee]mail|[Zz]ip|[Pp]ostal|[Cc]urrency|[Aa]mount)\w*",
        r"\w*(?:phone|email|zip|postal|currency)\w*\s*:\s*(?:str|string|String|number|int)\b",
        r"\(\s*(?:String|string|str|int)\s+\w+\s*,\s*(?:String|string|str|int)\s+\w+\s*,\s*(?:String|string|str|int)\s+\w+[^)]*\)",
    ],
}


def normalize_smell_name(smell: str) -> str:
    """Lowercase a smell name and collapse internal whitespace."""
    return " ".join(smell.lower().split())


def get_search_queries(smell: str) -> list[str]:
    """Return code search queries for a smell, most specific first.

    Unknown smells get a single query made of the normalized name.
    """
    key = normalize_smell_name(smell)
    if key in SMELL_QUERIES:
        return list(SMELL_QUERIES[key])
    return [key or smell]


def get_smell_patterns(smell: str) -> list[str]:
    """Return regexes that locate a smell inside one file's text.

    Unknown smells get one case-insensitive pattern joining the name's tokens
    with ``.*`` so "Data Clumps" becomes ``(?i)data.*clumps``.
    """
    key = normalize_smell_name(smell)
    if key in SMELL_PATTERNS:
        return list(SMELL_PATTERNS[key])
    tokens = key.split()
    if not tokens:
        return [re.escape(smell)]
    return ["(?i)" + ".*".join(re.escape(token) for token in tokens)]


def find_first_match(text: str, patterns: list[str]) -> Optional[re.Match]:
    """Return the match of the first pattern that matches anywhere in text.

    Patterns are tried in order; later patterns are not consulted once one
    matches, even if they would produce a better match.
    """
    for pattern in patterns:
        match = re.search(pattern, text, re.MULTILINE)
        if match:
            return match
    return None
