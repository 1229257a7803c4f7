"""Pytest configuration and shared fixtures."""

import copy
import pytest

from learning_hour.config import Config
from learning_hour.llm.provider import LLMProvider, LLMResponse


SESSION_DATA = {
    "topic": "Feature Envy",
    "sessionOverview": "Practice moving behaviour to the data it uses.",
    "learningObjectives": [
        "Define Feature Envy and related terms",
        "Identify Feature Envy in our codebase",
        "Apply Move Method safely under tests",
    ],
    "activities": [
        {
            "title": "Connect: Feature Envy in Our Codebase",
            "duration": "8 minutes",
            "description": "Pairs share real examples",
            "instructions": ["Form pairs", "Share one example"],
        },
        {
            "title": "Concrete: Refactoring Exercise",
            "duration": "25 minutes",
            "description": "Hands-on Move Method practice",
            "instructions": ["Write a characterization test", "Move the method"],
        },
    ],
    "discussionPrompts": [
        "Where would fixing Feature Envy help most?",
        "What stops us from fixing it?",
    ],
    "keyTakeaways": ["Small steps are safer", "Tests enable refactoring"],
    "miroContent": {
        "boardTitle": "Learning Hour: Feature Envy",
        "style": "slide",
        "sections": [
            {
                "title": "Welcome & Session Overview",
                "type": "text_frame",
                "content": "Today's Learning Hour: Feature Envy\n\n[Session overview from above]",
            },
            {
                "title": "Learning Objectives",
                "type": "sticky_notes",
                "color": "light_blue",
                "items": ["[Each learning objective from above on separate sticky]"],
            },
            {
                "title": "Code Exercise Setup",
                "type": "code_examples",
                "language": "java",
                "beforeCode": "// Starting code\n// [Realistic example that participants might see in their work]",
                "afterCode": "// Refactored\n// [Clean, testable code following SOLID principles]",
            },
        ],
    },
}


CODE_EXAMPLE_DATA = {
    "topic": "Feature Envy",
    "language": "java",
    "context": "Checkout computing discounts from customer data",
    "problemStatement": "OrderProcessor reaches into Customer for everything",
    "learningHourConnection": "Moving behaviour is a daily refactoring",
    "refactoringSteps": [
        {
            "stepNumber": 1,
            "description": "Extract Method",
            "code": "class OrderProcessor {}",
            "testCode": "@Test void discount() {}",
            "codeSmells": ["Feature Envy"],
            "improvements": ["Cohesion"],
            "facilitationTip": "Ask what moved",
        },
        {
            "stepNumber": 2,
            "description": "Move Method",
            "code": "class Customer { double discount() { return 0; } }",
            "codeSmells": ["Feature Envy"],
            "improvements": ["Tell, don't ask"],
            "facilitationTip": "Ask who owns the data",
        },
    ],
    "additionalExercises": ["Move the tax calculation too"],
    "facilitationNotes": {
        "timeAllocation": "5/15/5 minutes",
        "commonMistakes": ["Big-bang moves"],
        "discussionPoints": ["Which step helped most?"],
        "pairProgrammingTips": ["Switch every 5 minutes"],
    },
}


class MockLLMProvider(LLMProvider):
    """LLM stand-in returning a fixed reply and recording prompts."""

    def __init__(self, content: str = "{}"):
        self.model_name = "mock-model"
        self.content = content
        self.calls = []

    def generate(self, prompt, system=None, max_tokens=None) -> LLMResponse:
        self.calls.append({"prompt": prompt, "system": system, "max_tokens": max_tokens})
        return LLMResponse(content=self.content, model=self.model_name)


@pytest.fixture
def config() -> Config:
    """Provide a test configuration."""
    return Config(
        llm_provider="anthropic",
        model_name="claude-3-5-sonnet-20241022",
        api_key="test-key",
        github_token="gh-test-token",
        miro_access_token="miro-test-token",
        miro_client_id="client-123",
    )


@pytest.fixture
def session_data() -> dict:
    """A valid, camelCase session payload as an LLM would return it."""
    return copy.deepcopy(SESSION_DATA)


@pytest.fixture
def code_example_data() -> dict:
    return copy.deepcopy(CODE_EXAMPLE_DATA)
