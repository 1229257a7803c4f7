"""Resolve repository identifiers into (owner, repo) pairs."""

import re

from .exceptions import InputValidationError

# host/owner/repo or host:owner/repo, optional scheme, user@ and .git suffix.
REPOSITORY_URL_PATTERN = re.compile(
    r"^(?:[a-z][a-z0-9+.\-]*://)?"
    r"(?:[\w.\-]+@)?"
    r"(?P<host>[\w\-]+(?:\.[\w\-]+)+)(?::\d+)?"
    r"[/:]"
    r"(?P<owner>[\w.\-]+)/(?P<repo>[\w.\-]+?)"
    r"(?:\.git)?/?$",
    re.IGNORECASE,
)


def is_repository_url(source: str) -> bool:
    """Check if source looks like host/owner/repo or host:owner/repo."""
    return bool(REPOSITORY_URL_PATTERN.match(source.strip()))


def parse_repository_url(url: str) -> tuple[str, str]:
    """Split a repository URL into owner and repo name.

    Examples:
        https://github.com/owner/repo -> ("owner", "repo")
        git@github.com:owner/repo.git -> ("owner", "repo")
        github.com/owner/repo/ -> ("owner", "repo")

    Raises:
        InputValidationError: If the URL has no recognizable owner/repo shape
    """
    match = REPOSITORY_URL_PATTERN.match(url.strip()) if url else None
    if not match:
        raise InputValidationError(
            f"Invalid repository URL format: {url!r}. Expected host/owner/repo or host:owner/repo"
        )
    return match.group("owner"), match.group("repo")


def extract_repo_name(url: str) -> str:
    """Extract the repository name from a repository URL."""
    return parse_repository_url(url)[1]
