"""Repository analysis: smell patterns, scoring, anonymization, stack profiling."""

from .anonymizer import anonymize_example
from .patterns import get_search_queries, get_smell_patterns, find_first_match
from .repository_analyzer import RepositoryAnalyzer
from .scoring import calculate_confidence, rate_complexity, experience_level_for
from .tech_stack import TechStackAnalyzer

__all__ = [
    "anonymize_example",
    "get_search_queries",
    "get_smell_patterns",
    "find_first_match",
    "RepositoryAnalyzer",
    "calculate_confidence",
    "rate_complexity",
    "experience_level_for",
    "TechStackAnalyzer",
]
