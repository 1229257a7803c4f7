"""LangChain tool wrappers for the Learning Hour operations.

Every tool returns the rendered CommandResult text: a status line, a blank
line, then JSON. Failures come back as text naming the failed operation so an
orchestrating agent can relay them.
"""

import json
from typing import Any, Optional, Union
from langchain_core.tools import BaseTool, tool

from ..commands import LearningHourCommands

_commands: Optional[LearningHourCommands] = None


def _get_commands() -> LearningHourCommands:
    """Shared command context, built from the environment on first use."""
    global _commands
    if _commands is None:
        _commands = LearningHourCommands()
    return _commands


def _guard(purpose: str, call) -> str:
    try:
        return call().render()
    except Exception as e:
        return f"❌ Failed to {purpose}: {str(e)}"


@tool
def analyze_repository(repository_url: str, code_smell: str, anonymize: bool = False) -> str:
    """Find real examples of a code smell in a GitHub repository.

    Searches the repository for the smell, scores each match and returns up to
    five examples with file paths, line ranges and snippets.

    Args:
        repository_url: Repository as github.com/owner/repo or git@github.com:owner/repo.git
        code_smell: Smell name such as "Feature Envy", "Long Method", "God Class"
        anonymize: Also return snippets with API keys, SSNs and internal hosts masked
    """
    return _guard(
        "analyze repository",
        lambda: _get_commands().analyze_repository(repository_url, code_smell, anonymize),
    )


@tool
def analyze_tech_stack(repository_url: str, topic: Optional[str] = None) -> str:
    """Profile the languages, frameworks, test tools and build tools a repository uses.

    Args:
        repository_url: Repository as github.com/owner/repo
        topic: Optional Learning Hour topic to phrase stack-specific guidance for
    """
    return _guard(
        "analyze tech stack",
        lambda: _get_commands().analyze_tech_stack(repository_url, topic),
    )


@tool
def generate_session(topic: str, style: str = "slide") -> str:
    """Generate a complete Learning Hour session plan following the 4C model.

    Args:
        topic: Practice topic, e.g. "Feature Envy" or "Extract Method"
        style: Board layout the session targets: "slide" or "vertical"
    """
    return _guard("generate session", lambda: _get_commands().generate_session(topic, style))


@tool
def generate_code_example(topic: str, language: str = "java") -> str:
    """Generate a multi-step refactoring example with tests and facilitation notes.

    Args:
        topic: Practice topic the example illustrates
        language: Programming language of the example
    """
    return _guard(
        "generate code example",
        lambda: _get_commands().generate_code_example(topic, language),
    )


@tool
def create_board(
    session_content: Union[str, dict[str, Any]],
    style: Optional[str] = None,
    board_id: Optional[str] = None,
    access_token: Optional[str] = None,
) -> str:
    """Render a generated session onto a Miro board.

    Pass the JSON produced by generate_session. Without board_id a new board is
    created; with it, the sections are added to that board.

    Args:
        session_content: Session JSON from generate_session, as a string or an object
        style: "slide" (left to right) or "vertical" (top to bottom)
        board_id: Existing board to add the sections to
        access_token: Miro access token overriding MIRO_ACCESS_TOKEN
    """
    return _guard(
        "create Miro board",
        lambda: _get_commands().create_board(session_content, style, board_id, access_token),
    )


@tool
def list_boards(limit: int = 10) -> str:
    """List Miro boards visible to the configured access token.

    Args:
        limit: Maximum number of boards to return
    """
    return _guard("list Miro boards", lambda: _get_commands().list_boards(limit))


@tool
def get_board(board_id: str) -> str:
    """Fetch details of one Miro board, including its view link.

    Args:
        board_id: Miro board identifier
    """
    return _guard("get Miro board", lambda: _get_commands().get_board(board_id))


@tool
def get_miro_auth_url(redirect_uri: str, state: Optional[str] = None) -> str:
    """Build the Miro OAuth URL a user opens to grant board access.

    Args:
        redirect_uri: Callback URL registered for the Miro app
        state: Opaque value echoed back to the callback
    """
    return _guard(
        "build Miro authorization URL",
        lambda: _get_commands().get_miro_auth_url(redirect_uri, state),
    )


def get_learning_hour_tools() -> list[BaseTool]:
    """All Learning Hour tools, ready to bind to an agent."""
    return [
        analyze_repository,
        analyze_tech_stack,
        generate_session,
        generate_code_example,
        create_board,
        list_boards,
        get_board,
        get_miro_auth_url,
    ]


def parse_tool_output(output: str) -> tuple[str, Any]:
    """Split a tool's text output into (status, payload) for callers that need the JSON."""
    status, _, body = output.partition("\n\n")
    return status, json.loads(body) if body else None
