"""Mine a GitHub repository for real examples of a code smell."""

import logging
import re

from ..exceptions import InputValidationError, NotFoundError, UpstreamError
from ..github.client import GitHubClient
from ..models import AnalysisResult, AnonymizedExample, CodeExample, LineRange
from ..repo_resolver import parse_repository_url
from .anonymizer import anonymize_example
from .patterns import find_first_match, get_search_queries, get_smell_patterns
from .scoring import calculate_confidence, experience_level_for, rate_complexity

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 5
FILES_PER_QUERY = 3


class RepositoryAnalyzer:
    """Finds code smell occurrences in a repository via code search."""

    def __init__(self, client: GitHubClient):
        """Initialize analyzer.

        Args:
            client: Code host client used for search and file retrieval
        """
        self.client = client

    def analyze_repository(self, repository_url: str, code_smell: str) -> AnalysisResult:
        """Collect up to five examples of a code smell.

        Queries run in priority order and examples are kept in the order they
        are found; a later, higher-confidence match never evicts an earlier one.

        Args:
            repository_url: host/owner/repo or host:owner/repo
            code_smell: Human-readable smell name, e.g. "Feature Envy"

        Returns:
            AnalysisResult echoing the inputs

        Raises:
            InputValidationError: Malformed URL or empty smell name (before any I/O)
            ConfigurationError: No token, or the client could not connect
            NotFoundError: No query produced a match
        """
        owner, repo = parse_repository_url(repository_url)
        if not code_smell or not code_smell.strip():
            raise InputValidationError("codeSmell is required")

        self.client.connect()

        patterns = get_smell_patterns(code_smell)
        examples: list[CodeExample] = []

        for query in get_search_queries(code_smell):
            if len(examples) >= MAX_EXAMPLES:
                break
            try:
                items = self.client.search_code(owner, repo, query)
            except UpstreamError as e:
                logger.warning("Search for %r in %s/%s failed, skipping: %s", query, owner, repo, e)
                continue

            for item in items[:FILES_PER_QUERY]:
                if len(examples) >= MAX_EXAMPLES:
                    break
                path = item.get("path")
                if not path:
                    continue
                try:
                    content = self.client.get_file_content(owner, repo, path)
                except UpstreamError as e:
                    logger.warning("Could not fetch %s, skipping: %s", path, e)
                    continue

                example = self._build_example(path, content, patterns, code_smell)
                if example is not None:
                    logger.debug("Matched %s in %s lines %s", code_smell, path, example.line_numbers)
                    examples.append(example)

        if not examples:
            raise NotFoundError(f"No examples of {code_smell} found in {repository_url}")

        logger.info("Found %d example(s) of %s in %s", len(examples), code_smell, repository_url)
        return AnalysisResult(
            examples=examples,
            code_smell=code_smell,
            repository_url=repository_url,
        )

    def anonymize_example(self, code: str) -> AnonymizedExample:
        """Strip sensitive literals from a snippet before sharing it."""
        return anonymize_example(code)

    def _build_example(
        self, path: str, content: str, patterns: list[str], code_smell: str
    ) -> CodeExample | None:
        match = find_first_match(content, patterns)
        if match is None:
            return None

        start, end = line_span(content, match)
        lines = content.split("\n")
        snippet = "\n".join(lines[start - 1 : end])
        complexity = rate_complexity(snippet)

        return CodeExample(
            file_path=path,
            line_numbers=LineRange(start=start, end=end),
            confidence_score=calculate_confidence(snippet, code_smell),
            complexity_rating=complexity,
            experience_level=experience_level_for(complexity),
            code_snippet=snippet,
        )


def line_span(content: str, match: re.Match) -> tuple[int, int]:
    """Return 1-based (start, end) lines covered by a match.

    A match ending on a newline does not spill onto the following line.
    """
    start = content.count("\n", 0, match.start()) + 1
    matched = match.group(0)
    if matched.endswith("\n"):
        matched = matched[:-1]
    return start, start + matched.count("\n")
