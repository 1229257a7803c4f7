"""Agent factory wiring the Learning Hour tools to a chat model."""

from typing import Optional
from langchain.agents import create_agent
from langchain.chat_models import init_chat_model

from .tools.learning_hour_tools import get_learning_hour_tools


AGENT_SYSTEM_PROMPT = """You are a Technical Coach's assistant. You help prepare Learning Hours: short practice sessions following the 4C model (Connect, Concept, Concrete, Conclusion).

## Available Tools

1. **generate_session** - Builds a full session plan for a topic (1 LLM call)
2. **generate_code_example** - Builds a multi-step refactoring example (1 LLM call)
3. **analyze_repository** - Finds real examples of a code smell in a GitHub repository
4. **analyze_tech_stack** - Profiles a repository's languages and frameworks
5. **create_board** - Renders a generated session onto a Miro board
6. **list_boards** / **get_board** - Inspect existing Miro boards
7. **get_miro_auth_url** - Builds the OAuth URL when no Miro token is configured

## Workflow Guidelines

- Generate the session first, then pass its JSON unchanged to create_board
- Use analyze_repository when the user names a repository, so examples come from their own code
- Each tool returns a status line, a blank line, then JSON

## Error Handling

- A tool result starting with "❌ Failed to" is an error; report it clearly
- Missing credentials are configuration problems; tell the user which variable to set
- Don't retry failed operations unless explicitly requested
"""


def create_learning_hour_agent(
    model_name: str = "anthropic:claude-3-5-sonnet-20241022",
    checkpointer: Optional[object] = None,
    debug: bool = False,
):
    """Create an agent that plans Learning Hours with the package tools.

    Args:
        model_name: ``provider:model`` identifier understood by init_chat_model
        checkpointer: Optional checkpointer for conversation state
        debug: Enable verbose logging for graph execution

    Returns:
        Compiled agent graph ready for ``invoke``
    """
    model = init_chat_model(model_name)

    return create_agent(
        model=model,
        tools=get_learning_hour_tools(),
        system_prompt=AGENT_SYSTEM_PROMPT,
        checkpointer=checkpointer,
        debug=debug,
    )
