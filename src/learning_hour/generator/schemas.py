"""Pydantic schemas for LLM-generated Learning Hour content."""

from typing import Any, List, Literal, Optional
from pydantic import Field, ValidationError

from ..exceptions import UpstreamError
from ..models import CamelModel


SectionType = Literal["text_frame", "sticky_notes", "code_block", "code_examples"]


class Activity(CamelModel):
    """One timed activity in the session plan."""

    title: str = Field(min_length=1)
    duration: str = Field(min_length=1)
    description: str = Field(min_length=1)
    instructions: List[str] = Field(min_length=1)


class BoardSection(CamelModel):
    """A titled region of the whiteboard."""

    title: str = Field(min_length=1)
    type: SectionType
    content: Optional[str] = None
    color: Optional[str] = None
    items: Optional[List[str]] = None
    language: Optional[str] = None
    code: Optional[str] = None
    before_code: Optional[str] = None
    after_code: Optional[str] = None


class BoardContent(CamelModel):
    """Whiteboard rendering instructions embedded in a session."""

    board_title: str = Field(min_length=1)
    style: Optional[str] = None
    sections: List[BoardSection] = Field(default_factory=list)


class SessionContent(CamelModel):
    """A complete Learning Hour session plan."""

    topic: str = Field(min_length=1)
    session_overview: str = Field(min_length=1)
    learning_objectives: List[str] = Field(min_length=3)
    activities: List[Activity] = Field(min_length=2)
    discussion_prompts: List[str]
    key_takeaways: List[str]
    miro_content: BoardContent


class RefactoringStep(CamelModel):
    step_number: int
    description: str = Field(min_length=1)
    code: str = Field(min_length=1)
    test_code: Optional[str] = None
    code_smells: List[str]
    improvements: List[str]
    facilitation_tip: str = Field(min_length=1)


class FacilitationNotes(CamelModel):
    time_allocation: str = Field(min_length=1)
    common_mistakes: List[str]
    discussion_points: List[str]
    pair_programming_tips: List[str]


class CodeExampleContent(CamelModel):
    """A multi-step refactoring walkthrough for the Concrete phase."""

    topic: str = Field(min_length=1)
    language: str = Field(min_length=1)
    context: str = Field(min_length=1)
    problem_statement: str = Field(min_length=1)
    learning_hour_connection: str = Field(min_length=1)
    refactoring_steps: List[RefactoringStep] = Field(min_length=2)
    additional_exercises: List[str]
    facilitation_notes: FacilitationNotes


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def validate_session_content(data: Any) -> SessionContent:
    """Validate raw JSON as a session.

    Raises:
        UpstreamError: Listing every validation failure
    """
    try:
        return SessionContent.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(f"Invalid session content: {_describe(e)}") from e


def validate_code_example(data: Any) -> CodeExampleContent:
    """Validate raw JSON as a code example.

    Raises:
        UpstreamError: Listing every validation failure
    """
    try:
        return CodeExampleContent.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(f"Invalid code example: {_describe(e)}") from e
