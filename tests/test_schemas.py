"""Tests for generated content schemas."""

import pytest

from learning_hour.exceptions import UpstreamError
from learning_hour.generator.schemas import (
    SessionContent,
    validate_code_example,
    validate_session_content,
)


def test_valid_session(session_data):
    session = validate_session_content(session_data)

    assert session.topic == "Feature Envy"
    assert len(session.learning_objectives) == 3
    assert session.miro_content.sections[2].before_code.startswith("// Starting code")


def test_session_payload_keeps_camel_case(session_data):
    payload = validate_session_content(session_data).to_payload()

    assert payload == session_data


def test_snake_case_accepted(session_data):
    session = validate_session_content(session_data)
    rebuilt = SessionContent(
        topic=session.topic,
        session_overview=session.session_overview,
        learning_objectives=session.learning_objectives,
        activities=session.activities,
        discussion_prompts=session.discussion_prompts,
        key_takeaways=session.key_takeaways,
        miro_content=session.miro_content,
    )
    assert rebuilt == session


def test_missing_field_reported(session_data):
    del session_data["sessionOverview"]

    with pytest.raises(UpstreamError, match="Invalid session content: sessionOverview"):
        validate_session_content(session_data)


def test_too_few_objectives(session_data):
    session_data["learningObjectives"] = ["only one"]

    with pytest.raises(UpstreamError, match="learningObjectives"):
        validate_session_content(session_data)


def test_too_few_activities(session_data):
    session_data["activities"] = session_data["activities"][:1]

    with pytest.raises(UpstreamError, match="activities"):
        validate_session_content(session_data)


def test_unknown_section_type(session_data):
    session_data["miroContent"]["sections"][0]["type"] = "mind_map"

    with pytest.raises(UpstreamError, match="miroContent.sections.0.type"):
        validate_session_content(session_data)


def test_valid_code_example(code_example_data):
    example = validate_code_example(code_example_data)

    assert example.refactoring_steps[0].test_code == "@Test void discount() {}"
    assert example.refactoring_steps[1].test_code is None
    assert example.facilitation_notes.time_allocation == "5/15/5 minutes"
    assert example.to_payload() == code_example_data


def test_code_example_needs_two_steps(code_example_data):
    code_example_data["refactoringSteps"] = code_example_data["refactoringSteps"][:1]

    with pytest.raises(UpstreamError, match="Invalid code example: refactoringSteps"):
        validate_code_example(code_example_data)


def test_non_object_rejected():
    with pytest.raises(UpstreamError, match="Invalid session content"):
        validate_session_content(["not", "an", "object"])
