"""Operations exposed to agents and the command line.

Each operation takes flat keyword arguments and returns a CommandResult whose
rendered form is a status line, a blank line, then a JSON payload. Domain
errors never escape: they become a result reading
"❌ Failed to <purpose>: <message>".
"""

import json
import logging
from typing import Any, Callable, Optional
from pydantic import BaseModel

from .analysis.repository_analyzer import RepositoryAnalyzer
from .analysis.tech_stack import TechStackAnalyzer
from .config import Config
from .exceptions import ConfigurationError, InputValidationError, LearningHourError, UpstreamError
from .generator.schemas import SessionContent, validate_session_content
from .generator.session_generator import LearningHourGenerator
from .github.client import GitHubClient
from .llm.provider import LLMProvider, create_llm_provider
from .miro.builder import BoardBuilder
from .miro.client import MiroClient
from .rendering.code_image import CodeImageGenerator

logger = logging.getLogger(__name__)

DEFAULT_BOARD_LIMIT = 10


class CommandResult(BaseModel):
    """Outcome of one operation."""

    status: str
    payload: Optional[Any] = None
    is_error: bool = False

    def render(self) -> str:
        if self.payload is None:
            return self.status
        return f"{self.status}\n\n{json.dumps(self.payload, indent=2, ensure_ascii=False)}"


def failure(purpose: str, error: Exception) -> CommandResult:
    return CommandResult(status=f"❌ Failed to {purpose}: {error}", is_error=True)


def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise InputValidationError(f"{name} is required")
    return str(value).strip()


class LearningHourCommands:
    """Wires configuration to the analyzers, generator and board builder.

    Collaborators are built on demand so an operation only needs the
    credentials it actually uses. Factories can be replaced for testing.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        llm_factory: Optional[Callable[[Config], LLMProvider]] = None,
        github_factory: Optional[Callable[[Config], GitHubClient]] = None,
        miro_factory: Optional[Callable[[Config, Optional[str]], MiroClient]] = None,
        image_generator: Optional[CodeImageGenerator] = None,
    ):
        self.config = config or Config.from_env()
        self._llm_factory = llm_factory or create_llm_provider
        self._github_factory = github_factory or _default_github_client
        self._miro_factory = miro_factory or _default_miro_client
        self._image_generator = image_generator

    def analyze_repository(
        self, repository_url: str, code_smell: str, anonymize: bool = False
    ) -> CommandResult:
        purpose = "analyze repository"
        try:
            url = _require(repository_url, "repositoryUrl")
            smell = _require(code_smell, "codeSmell")
            analyzer = RepositoryAnalyzer(self._github_factory(self.config))
            try:
                result = analyzer.analyze_repository(url, smell)
            finally:
                analyzer.client.disconnect()

            payload = result.to_payload()
            if anonymize:
                payload["anonymizedExamples"] = [
                    analyzer.anonymize_example(example.code_snippet).to_payload()
                    for example in result.examples
                ]
        except LearningHourError as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        return CommandResult(
            status=f"🔍 Found {len(result.examples)} example(s) of {result.code_smell} in {result.repository_url}",
            payload=payload,
        )

    def analyze_tech_stack(self, repository_url: str, topic: Optional[str] = None) -> CommandResult:
        purpose = "analyze tech stack"
        try:
            url = _require(repository_url, "repositoryUrl")
            analyzer = TechStackAnalyzer(self._github_factory(self.config))
            try:
                profile = analyzer.analyze_tech_stack(url)
            finally:
                analyzer.client.disconnect()

            payload: dict[str, Any] = {"techStack": profile.to_payload()}
            if topic:
                content = analyzer.generate_stack_specific_content(topic, profile)
                payload["stackSpecificContent"] = content.to_payload()
        except LearningHourError as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        summary = ", ".join(profile.frameworks + profile.primary_languages) or "no recognizable stack"
        return CommandResult(status=f"🧰 Tech stack for {url}: {summary}", payload=payload)

    def generate_session(self, topic: str, style: Optional[str] = None) -> CommandResult:
        purpose = "generate session"
        try:
            topic = _require(topic, "topic")
            generator = LearningHourGenerator(self._llm_factory(self.config))
            session = generator.generate_session_content(topic, style or "slide")
        except LearningHourError as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        return CommandResult(
            status=f"✅ Generated Learning Hour session for '{topic}'",
            payload=session.to_payload(),
        )

    def generate_code_example(self, topic: str, language: Optional[str] = None) -> CommandResult:
        purpose = "generate code example"
        try:
            topic = _require(topic, "topic")
            generator = LearningHourGenerator(self._llm_factory(self.config))
            example = generator.generate_code_example(topic, language or "java")
        except LearningHourError as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        return CommandResult(
            status=f"✅ Generated {example.language} code example for '{topic}'",
            payload=example.to_payload(),
        )

    def create_board(
        self,
        session_content: Any,
        style: Optional[str] = None,
        board_id: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> CommandResult:
        purpose = "create Miro board"
        try:
            session = parse_session_argument(session_content)
            with self._miro_factory(self.config, access_token) as client:
                builder = BoardBuilder(client, image_generator=self._board_image_generator())
                if board_id:
                    layout = builder.add_sections_to_board(board_id, session, style)
                else:
                    layout = builder.create_learning_hour_board(session, style)
        except LearningHourError as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        where = layout.view_link or layout.board_id
        verb = "Updated" if board_id else "Created"
        return CommandResult(
            status=f"🎨 {verb} Miro board with {len(layout.sections)} section(s): {where}",
            payload=layout.to_payload(),
        )

    def list_boards(self, limit: Optional[int] = None) -> CommandResult:
        purpose = "list Miro boards"
        try:
            limit = DEFAULT_BOARD_LIMIT if limit is None else int(limit)
            if limit < 1:
                raise InputValidationError("limit must be a positive integer")
            with self._miro_factory(self.config, None) as client:
                boards = client.list_boards(limit)
        except (LearningHourError, ValueError) as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        payload = {
            "boards": [
                {"id": b.get("id"), "name": b.get("name"), "viewLink": b.get("viewLink")}
                for b in boards
            ]
        }
        return CommandResult(status=f"📋 Found {len(boards)} Miro board(s)", payload=payload)

    def get_board(self, board_id: str) -> CommandResult:
        purpose = "get Miro board"
        try:
            board_id = _require(board_id, "boardId")
            with self._miro_factory(self.config, None) as client:
                board = client.get_board(board_id)
        except LearningHourError as e:
            logger.warning("%s failed: %s", purpose, e)
            return failure(purpose, e)

        return CommandResult(status=f"📋 Miro board {board.get('name', board_id)}", payload=board)

    def get_miro_auth_url(self, redirect_uri: str, state: Optional[str] = None) -> CommandResult:
        purpose = "build Miro authorization URL"
        try:
            redirect_uri = _require(redirect_uri, "redirectUri")
            if not self.config.miro_client_id:
                raise ConfigurationError("MIRO_CLIENT_ID is not set")
            url = MiroClient.get_authorization_url(self.config.miro_client_id, redirect_uri, state)
        except LearningHourError as e:
            return failure(purpose, e)

        return CommandResult(status="🔑 Open this URL to authorize Miro access", payload={"authUrl": url})

    def _board_image_generator(self) -> Optional[CodeImageGenerator]:
        if self._image_generator is None and self.config.code_images:
            self._image_generator = CodeImageGenerator()
        return self._image_generator


# command name -> (method, {argument name: parameter}, required arguments)
COMMANDS: dict[str, tuple[str, dict[str, str], tuple[str, ...]]] = {
    "analyze-repository": (
        "analyze_repository",
        {"repositoryUrl": "repository_url", "codeSmell": "code_smell", "anonymize": "anonymize"},
        ("repositoryUrl", "codeSmell"),
    ),
    "analyze-tech-stack": (
        "analyze_tech_stack",
        {"repositoryUrl": "repository_url", "topic": "topic"},
        ("repositoryUrl",),
    ),
    "generate-session": ("generate_session", {"topic": "topic", "style": "style"}, ("topic",)),
    "generate-code-example": (
        "generate_code_example",
        {"topic": "topic", "language": "language"},
        ("topic",),
    ),
    "create-board": (
        "create_board",
        {
            "sessionContent": "session_content",
            "style": "style",
            "boardId": "board_id",
            "accessToken": "access_token",
        },
        ("sessionContent",),
    ),
    "list-boards": ("list_boards", {"limit": "limit"}, ()),
    "get-board": ("get_board", {"boardId": "board_id"}, ("boardId",)),
    "get-miro-auth-url": (
        "get_miro_auth_url",
        {"redirectUri": "redirect_uri", "state": "state"},
        ("redirectUri",),
    ),
}


def run_command(commands: LearningHourCommands, name: str, arguments: Optional[dict] = None) -> CommandResult:
    """Dispatch a named command with a flat camelCase argument dict."""
    if name not in COMMANDS:
        return CommandResult(status=f"❌ Unknown command: {name}", is_error=True)

    method, parameters, required = COMMANDS[name]
    arguments = arguments or {}
    missing = [arg for arg in required if arguments.get(arg) in (None, "")]
    if missing:
        return failure(name.replace("-", " "), InputValidationError(f"{', '.join(missing)} is required"))

    kwargs = {parameters[key]: value for key, value in arguments.items() if key in parameters}
    return getattr(commands, method)(**kwargs)


def parse_session_argument(session_content: Any) -> SessionContent:
    """Accept a session as a model, a dict or a JSON string.

    Raises:
        InputValidationError: Missing, unparsable or schema-invalid session
    """
    if isinstance(session_content, SessionContent):
        return session_content
    if session_content is None or session_content == "":
        raise InputValidationError("sessionContent is required")
    if isinstance(session_content, str):
        try:
            session_content = json.loads(session_content)
        except json.JSONDecodeError as e:
            raise InputValidationError(f"sessionContent is not valid JSON: {e}") from e
    try:
        return validate_session_content(session_content)
    except UpstreamError as e:
        raise InputValidationError(str(e)) from e


def _default_github_client(config: Config) -> GitHubClient:
    return GitHubClient(config.github_token, base_url=config.github_api_url, timeout=config.http_timeout)


def _default_miro_client(config: Config, access_token: Optional[str]) -> MiroClient:
    return MiroClient(
        access_token or config.miro_access_token,
        base_url=config.miro_api_url,
        timeout=config.http_timeout,
    )
