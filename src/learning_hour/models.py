"""Core data models for the Learning Hour generator.

JSON payloads use camelCase keys; attributes stay snake_case. Models accept
either form on construction.
"""

import base64
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


ComplexityRating = Literal["low", "medium", "high"]
ExperienceLevel = Literal["beginner", "intermediate", "advanced"]


class CamelModel(BaseModel):
    """Base model serializing to camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """Dump as a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LineRange(CamelModel):
    """1-based inclusive line span inside a file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    start: int = Field(ge=1)
    end: int = Field(ge=1)


class CodeExample(CamelModel):
    """A code smell occurrence found in a real repository."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    file_path: str
    line_numbers: LineRange
    confidence_score: float = Field(ge=0.0, le=1.0)
    complexity_rating: ComplexityRating
    experience_level: ExperienceLevel
    code_snippet: str


class AnalysisResult(CamelModel):
    """Outcome of one repository scan."""

    examples: List[CodeExample] = Field(min_length=1, max_length=5)
    code_smell: str
    repository_url: str


class AnonymizedExample(CamelModel):
    """A snippet with sensitive literals replaced.

    is_safe_to_use is always True; callers should look at flagged_elements.
    """

    anonymized_code: str
    is_safe_to_use: bool = True
    flagged_elements: List[str] = Field(default_factory=list)


class Dimensions(CamelModel):
    """Pixel size of a canvas element."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    width: int
    height: int


class TechStackProfile(CamelModel):
    """Technology profile of a repository."""

    primary_languages: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    testing_frameworks: List[str] = Field(default_factory=list)
    build_tools: List[str] = Field(default_factory=list)
    architectural_patterns: List[str] = Field(default_factory=list)
    package_dependencies: List[str] = Field(default_factory=list)


class StackSpecificContent(CamelModel):
    """Topic guidance phrased in terms of a team's own stack."""

    examples: str
    test_examples: str
    refactoring_opportunities: str
    package_references: str


class CodeImage(CamelModel):
    """A rendered code snippet."""

    data: bytes = Field(repr=False)
    width: int
    height: int
    mime_type: str = "image/png"

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{base64.b64encode(self.data).decode('ascii')}"


class SectionPlacement(CamelModel):
    """Where a session section ended up on the board."""

    title: str
    type: str
    x: float
    y: float
    width: int
    height: int
    item_ids: List[str] = Field(default_factory=list)


class BoardLayout(CamelModel):
    """Result of rendering a session onto a board."""

    board_id: str
    style: str
    view_link: Optional[str] = None
    sections: List[SectionPlacement] = Field(default_factory=list)
