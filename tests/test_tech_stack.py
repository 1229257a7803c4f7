"""Tests for the tech stack analyzer."""

import json
import pytest
from unittest.mock import Mock

from learning_hour.analysis.tech_stack import TechStackAnalyzer
from learning_hour.exceptions import InputValidationError, UpstreamError
from learning_hour.github.client import GitHubClient
from learning_hour.models import TechStackProfile


@pytest.fixture
def client():
    client = Mock(spec=GitHubClient)
    client.get_repository_info.return_value = {"language": "TypeScript"}
    client.list_directory.return_value = [
        {"name": "package.json", "type": "file"},
        {"name": "tsconfig.json", "type": "file"},
        {"name": "src", "type": "dir"},
    ]
    client.get_file_content.return_value = json.dumps(
        {
            "dependencies": {"express": "^4.18.0"},
            "devDependencies": {"jest": "^29.0.0", "typescript": "^5.0.0"},
        }
    )
    return client


def test_node_project_profile(client):
    profile = TechStackAnalyzer(client).analyze_tech_stack("github.com/acme/api")

    client.connect.assert_called_once()
    assert profile.primary_languages == ["TypeScript", "JavaScript"]
    assert profile.frameworks == ["Express"]
    assert profile.testing_frameworks == ["Jest"]
    assert profile.build_tools == ["npm", "tsc"]
    assert profile.architectural_patterns == ["REST API"]
    assert "typescript" in profile.package_dependencies


def test_python_project_profile(client):
    client.get_repository_info.return_value = {"language": "Python"}
    client.list_directory.return_value = [{"name": "pyproject.toml", "type": "file"}]
    client.get_file_content.return_value = (
        '[project]\nname = "svc"\ndependencies = ["fastapi>=0.100", "httpx"]\n'
        '[project.optional-dependencies]\ntest = ["pytest>=8"]\n'
    )

    profile = TechStackAnalyzer(client).analyze_tech_stack("github.com/acme/svc")

    assert profile.primary_languages == ["Python"]
    assert profile.frameworks == ["FastAPI"]
    assert profile.testing_frameworks == ["pytest"]
    assert profile.package_dependencies == ["fastapi", "httpx", "pytest"]


def test_unreadable_manifest_is_skipped(client):
    client.get_file_content.side_effect = UpstreamError("403")

    profile = TechStackAnalyzer(client).analyze_tech_stack("github.com/acme/api")

    assert profile.package_dependencies == []
    assert profile.build_tools == ["npm", "tsc"]


def test_invalid_url(client):
    with pytest.raises(InputValidationError):
        TechStackAnalyzer(client).analyze_tech_stack("acme/api")
    client.connect.assert_not_called()


def test_stack_specific_content_mentions_stack(client):
    profile = TechStackProfile(
        primary_languages=["JavaScript"],
        frameworks=["Express"],
        testing_frameworks=["Jest"],
        package_dependencies=["express"],
    )

    content = TechStackAnalyzer(client).generate_stack_specific_content("Feature Envy", profile)

    assert content.examples == "Express code demonstrating Feature Envy principles with middleware patterns"
    assert content.test_examples.startswith("Jest examples")
    assert content.package_references == "Using express for Feature Envy implementations"


def test_stack_specific_content_with_empty_profile(client):
    content = TechStackAnalyzer(client).generate_stack_specific_content("TDD", TechStackProfile())

    assert "your codebase" in content.examples
    assert "unit test" in content.test_examples


@pytest.mark.parametrize(
    "manifest",
    [
        '{"name": "shop", "dependencies": null}',
        '{"dependencies": ["express"], "devDependencies": "jest"}',
        '["express", "jest"]',
        '"express"',
    ],
)
def test_malformed_package_json_yields_no_dependencies(client, manifest):
    client.get_file_content.return_value = manifest

    profile = TechStackAnalyzer(client).analyze_tech_stack("github.com/acme/api")

    assert profile.package_dependencies == []
    assert profile.frameworks == []
    assert profile.build_tools == ["npm", "tsc"]


def test_package_json_keeps_valid_table_beside_null_one(client):
    client.get_file_content.return_value = '{"dependencies": null, "devDependencies": {"jest": "^29"}}'

    profile = TechStackAnalyzer(client).analyze_tech_stack("github.com/acme/api")

    assert profile.package_dependencies == ["jest"]
    assert profile.testing_frameworks == ["Jest"]


@pytest.mark.parametrize(
    "manifest",
    [
        'project = "svc"\n',
        '[project]\ndependencies = "fastapi"\n',
        '[project]\noptional-dependencies = ["pytest"]\n',
        '[tool.poetry]\nname = "svc"\n',
    ],
)
def test_malformed_pyproject_yields_no_dependencies(client, manifest):
    client.get_repository_info.return_value = {"language": "Python"}
    client.list_directory.return_value = [{"name": "pyproject.toml", "type": "file"}]
    client.get_file_content.return_value = manifest

    profile = TechStackAnalyzer(client).analyze_tech_stack("github.com/acme/svc")

    assert profile.primary_languages == ["Python"]
    assert profile.package_dependencies == []
