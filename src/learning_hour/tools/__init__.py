"""LangChain tools for Learning Hour generation."""

from .learning_hour_tools import (
    analyze_repository,
    analyze_tech_stack,
    generate_session,
    generate_code_example,
    create_board,
    list_boards,
    get_board,
    get_miro_auth_url,
    get_learning_hour_tools,
    parse_tool_output,
)

__all__ = [
    "analyze_repository",
    "analyze_tech_stack",
    "generate_session",
    "generate_code_example",
    "create_board",
    "list_boards",
    "get_board",
    "get_miro_auth_url",
    "get_learning_hour_tools",
    "parse_tool_output",
]
