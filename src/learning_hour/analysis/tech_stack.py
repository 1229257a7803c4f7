"""Repository technology profiling."""

import json
import logging
import re
import tomllib

from ..exceptions import UpstreamError
from ..github.client import GitHubClient
from ..models import StackSpecificContent, TechStackProfile
from ..repo_resolver import parse_repository_url

logger = logging.getLogger(__name__)

# Manifest file -> (language, build tool)
MANIFEST_FILES: dict[str, tuple[str | None, str]] = {
    "package.json": ("JavaScript", "npm"),
    "yarn.lock": (None, "yarn"),
    "pnpm-lock.yaml": (None, "pnpm"),
    "tsconfig.json": ("TypeScript", "tsc"),
    "webpack.config.js": (None, "webpack"),
    "vite.config.ts": (None, "vite"),
    "pyproject.toml": ("Python", "pip"),
    "requirements.txt": ("Python", "pip"),
    "poetry.lock": (None, "poetry"),
    "pom.xml": ("Java", "Maven"),
    "build.gradle": ("Java", "Gradle"),
    "build.gradle.kts": ("Kotlin", "Gradle"),
    "Cargo.toml": ("Rust", "cargo"),
    "go.mod": ("Go", "go modules"),
    "Gemfile": ("Ruby", "bundler"),
    "composer.json": ("PHP", "composer"),
}

FRAMEWORKS = {
    "express": "Express",
    "react": "React",
    "vue": "Vue",
    "@angular/core": "Angular",
    "next": "Next.js",
    "nestjs": "NestJS",
    "@nestjs/core": "NestJS",
    "django": "Django",
    "flask": "Flask",
    "fastapi": "FastAPI",
    "spring-boot": "Spring Boot",
    "rails": "Rails",
}

TESTING_FRAMEWORKS = {
    "jest": "Jest",
    "vitest": "Vitest",
    "mocha": "Mocha",
    "@testing-library/react": "React Testing Library",
    "cypress": "Cypress",
    "pytest": "pytest",
    "junit": "JUnit",
    "rspec": "RSpec",
}

REST_FRAMEWORKS = {"Express", "NestJS", "Django", "Flask", "FastAPI", "Spring Boot", "Rails"}
UI_FRAMEWORKS = {"React", "Vue", "Angular", "Next.js"}

REQUIREMENT_NAME = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._\-]*)")


class TechStackAnalyzer:
    """Builds a TechStackProfile from repository metadata and manifests."""

    def __init__(self, client: GitHubClient):
        self.client = client

    def analyze_tech_stack(self, repository_url: str) -> TechStackProfile:
        """Profile the languages, frameworks and tools a repository uses.

        Raises:
            InputValidationError: Malformed URL
            ConfigurationError: No token
            UpstreamError: Repository metadata could not be read
        """
        owner, repo = parse_repository_url(repository_url)
        self.client.connect()

        info = self.client.get_repository_info(owner, repo)
        languages: list[str] = []
        if info.get("language"):
            languages.append(info["language"])

        entries = self.client.list_directory(owner, repo)
        names = {entry.get("name") for entry in entries if entry.get("type") == "file"}

        build_tools: list[str] = []
        for manifest, (language, tool) in MANIFEST_FILES.items():
            if manifest not in names:
                continue
            if language and language not in languages:
                languages.append(language)
            if tool not in build_tools:
                build_tools.append(tool)

        dependencies = self._collect_dependencies(owner, repo, names)

        frameworks = _lookup(dependencies, FRAMEWORKS)
        testing = _lookup(dependencies, TESTING_FRAMEWORKS)

        patterns: list[str] = []
        if any(f in REST_FRAMEWORKS for f in frameworks):
            patterns.append("REST API")
        if any(f in UI_FRAMEWORKS for f in frameworks):
            patterns.append("Component-based UI")

        return TechStackProfile(
            primary_languages=languages,
            frameworks=frameworks,
            testing_frameworks=testing,
            build_tools=build_tools,
            architectural_patterns=patterns,
            package_dependencies=dependencies,
        )

    def generate_stack_specific_content(
        self, topic: str, profile: TechStackProfile
    ) -> StackSpecificContent:
        """Phrase topic guidance in terms of the team's stack."""
        framework = profile.frameworks[0] if profile.frameworks else (
            profile.primary_languages[0] if profile.primary_languages else "your codebase"
        )
        testing = profile.testing_frameworks[0] if profile.testing_frameworks else "unit test"
        runtime = ", ".join(profile.frameworks + profile.primary_languages) or "your stack"
        package = profile.package_dependencies[0] if profile.package_dependencies else "standard library"
        idiom = "middleware patterns" if "Express" in profile.frameworks else "idiomatic patterns"

        return StackSpecificContent(
            examples=f"{framework} code demonstrating {topic} principles with {idiom}",
            test_examples=f"{testing} examples that match existing test structure for {topic}",
            refactoring_opportunities=f"{runtime}-specific {topic} refactoring opportunities",
            package_references=f"Using {package} for {topic} implementations",
        )

    def _collect_dependencies(self, owner: str, repo: str, names: set) -> list[str]:
        deps: list[str] = []
        readers = {
            "package.json": _package_json_dependencies,
            "requirements.txt": _requirements_dependencies,
            "pyproject.toml": _pyproject_dependencies,
        }
        for manifest, reader in readers.items():
            if manifest not in names:
                continue
            try:
                content = self.client.get_file_content(owner, repo, manifest)
            except UpstreamError as e:
                logger.warning("Could not read %s: %s", manifest, e)
                continue
            for dep in reader(content):
                if dep not in deps:
                    deps.append(dep)
        return deps


def _lookup(dependencies: list[str], table: dict[str, str]) -> list[str]:
    found: list[str] = []
    for dep in dependencies:
        name = table.get(dep.lower())
        if name and name not in found:
            found.append(name)
    return found


def _package_json_dependencies(content: str) -> list[str]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return []
    if not isinstance(data, dict):
        return []
    deps = []
    for key in ("dependencies", "devDependencies"):
        table = data.get(key)
        if isinstance(table, dict):
            deps.extend(table)
    return deps


def _requirements_dependencies(content: str) -> list[str]:
    deps = []
    for line in content.splitlines():
        if line.strip().startswith(("#", "-")):
            continue
        match = REQUIREMENT_NAME.match(line)
        if match:
            deps.append(match.group(1))
    return deps


def _pyproject_dependencies(content: str) -> list[str]:
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError:
        return []
    project = data.get("project")
    if not isinstance(project, dict):
        return []
    groups = [project.get("dependencies")]
    optional = project.get("optional-dependencies")
    if isinstance(optional, dict):
        groups.extend(optional.values())
    specs = [spec for group in groups if isinstance(group, list) for spec in group if isinstance(spec, str)]
    deps = []
    for spec in specs:
        match = REQUIREMENT_NAME.match(spec)
        if match:
            deps.append(match.group(1))
    return deps
