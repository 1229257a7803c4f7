"""Main CLI entry point for the Learning Hour generator."""

import json
import sys
from pathlib import Path

import click

from .commands import CommandResult, LearningHourCommands
from .config import Config
from .llm.provider import coerce_content
from .logging_config import configure_logging
from .observability import configure_tracing


def _emit(result: CommandResult) -> None:
    """Print a result; error results go to stderr and exit non-zero."""
    click.echo(result.render(), err=result.is_error)
    if result.is_error:
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Learning Hour generator - practice sessions, code examples and Miro boards."""
    config = Config.from_env()
    configure_logging("DEBUG" if verbose else config.log_level)
    configure_tracing()
    if ctx.obj is None:
        ctx.obj = LearningHourCommands(config)


@cli.command("analyze-repository")
@click.argument("repository_url")
@click.argument("code_smell")
@click.option("--anonymize", is_flag=True, help="Also return snippets with sensitive literals masked")
@click.pass_obj
def analyze_repository(commands: LearningHourCommands, repository_url: str, code_smell: str, anonymize: bool):
    """Find examples of CODE_SMELL in a GitHub repository.

    Examples:
        learning-hour analyze-repository github.com/acme/shop "Feature Envy"
    """
    click.echo(f"🔍 Searching {repository_url} for {code_smell}...", err=True)
    _emit(commands.analyze_repository(repository_url, code_smell, anonymize))


@cli.command("analyze-tech-stack")
@click.argument("repository_url")
@click.option("--topic", "-t", help="Phrase stack-specific guidance for this topic")
@click.pass_obj
def analyze_tech_stack(commands: LearningHourCommands, repository_url: str, topic: str | None):
    """Profile the technology stack of a GitHub repository."""
    _emit(commands.analyze_tech_stack(repository_url, topic))


@cli.command("generate-session")
@click.argument("topic")
@click.option(
    "--style",
    "-s",
    type=click.Choice(["slide", "vertical"]),
    default="slide",
    help="Board layout the session targets",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Also write the session JSON here")
@click.pass_obj
def generate_session(commands: LearningHourCommands, topic: str, style: str, output: str | None):
    """Generate a Learning Hour session plan for TOPIC.

    Examples:
        learning-hour generate-session "Feature Envy" -o session.json
        learning-hour create-board session.json
    """
    click.echo(f"🤖 Generating session for {topic}...", err=True)
    result = commands.generate_session(topic, style)
    if output and not result.is_error:
        Path(output).write_text(json.dumps(result.payload, indent=2, ensure_ascii=False), encoding="utf-8")
        click.echo(f"📝 Session written to {output}", err=True)
    _emit(result)


@cli.command("generate-code-example")
@click.argument("topic")
@click.option("--language", "-l", default="java", help="Programming language of the example")
@click.pass_obj
def generate_code_example(commands: LearningHourCommands, topic: str, language: str):
    """Generate a multi-step refactoring example for TOPIC."""
    click.echo(f"🤖 Generating {language} code example for {topic}...", err=True)
    _emit(commands.generate_code_example(topic, language))


@cli.command("create-board")
@click.argument("session_file", type=click.File("r", encoding="utf-8"))
@click.option("--style", "-s", type=click.Choice(["slide", "vertical"]), help="Override the session's layout style")
@click.option("--board-id", "-b", help="Add sections to this existing board instead of creating one")
@click.option("--access-token", help="Miro access token (defaults to MIRO_ACCESS_TOKEN)")
@click.pass_obj
def create_board(
    commands: LearningHourCommands,
    session_file,
    style: str | None,
    board_id: str | None,
    access_token: str | None,
):
    """Render a session JSON file (or - for stdin) onto a Miro board."""
    _emit(commands.create_board(session_file.read(), style, board_id, access_token))


@cli.command("list-boards")
@click.option("--limit", "-n", type=int, default=10, show_default=True, help="Maximum boards to list")
@click.pass_obj
def list_boards(commands: LearningHourCommands, limit: int):
    """List Miro boards visible to the access token."""
    _emit(commands.list_boards(limit))


@cli.command("get-board")
@click.argument("board_id")
@click.pass_obj
def get_board(commands: LearningHourCommands, board_id: str):
    """Show details of one Miro board."""
    _emit(commands.get_board(board_id))


@cli.command("get-miro-auth-url")
@click.argument("redirect_uri")
@click.option("--state", help="Opaque value echoed back to the callback")
@click.pass_obj
def get_miro_auth_url(commands: LearningHourCommands, redirect_uri: str, state: str | None):
    """Print the Miro OAuth authorization URL."""
    _emit(commands.get_miro_auth_url(redirect_uri, state))


@cli.command("ask")
@click.argument("request")
@click.option("--debug", is_flag=True, help="Enable debug output for agent execution")
@click.pass_obj
def ask(commands: LearningHourCommands, request: str, debug: bool):
    """Let the Learning Hour agent handle a free-form REQUEST.

    Examples:
        learning-hour ask "Plan a Learning Hour on Feature Envy and put it on a Miro board"
    """
    from .factory import create_learning_hour_agent

    config = commands.config
    if not config.api_key:
        click.echo("❌ ANTHROPIC_API_KEY not set in environment", err=True)
        sys.exit(1)

    agent = create_learning_hour_agent(model_name=f"anthropic:{config.model_name}", debug=debug)

    click.echo("🔄 Agent executing...", err=True)
    try:
        result = agent.invoke({"messages": [{"role": "user", "content": request}]})
    except Exception as e:
        click.echo(f"❌ Agent execution failed: {e}", err=True)
        sys.exit(1)

    final_message = result.get("messages", [])[-1]
    click.echo(coerce_content(getattr(final_message, "content", final_message)))


if __name__ == "__main__":
    cli()
