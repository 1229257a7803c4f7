"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from learning_hour.models import (
    AnalysisResult,
    CodeExample,
    LineRange,
    SectionPlacement,
    TechStackProfile,
)


def _example(**overrides) -> CodeExample:
    fields = {
        "file_path": "src/A.java",
        "line_numbers": LineRange(start=3, end=4),
        "confidence_score": 0.7,
        "complexity_rating": "low",
        "experience_level": "beginner",
        "code_snippet": "a.getB().getC();",
    }
    fields.update(overrides)
    return CodeExample(**fields)


def test_payload_uses_camel_case():
    payload = _example().to_payload()

    assert payload == {
        "filePath": "src/A.java",
        "lineNumbers": {"start": 3, "end": 4},
        "confidenceScore": 0.7,
        "complexityRating": "low",
        "experienceLevel": "beginner",
        "codeSnippet": "a.getB().getC();",
    }


def test_camel_case_input_accepted():
    example = CodeExample.model_validate(_example().to_payload())
    assert example == _example()


def test_confidence_bounds():
    with pytest.raises(ValidationError):
        _example(confidence_score=1.5)


def test_line_numbers_are_one_based():
    with pytest.raises(ValidationError):
        LineRange(start=0, end=1)


def test_unknown_complexity_rejected():
    with pytest.raises(ValidationError):
        _example(complexity_rating="extreme")


def test_analysis_result_holds_one_to_five_examples():
    AnalysisResult(examples=[_example()] * 5, code_smell="Feature Envy", repository_url="github.com/a/b")

    with pytest.raises(ValidationError):
        AnalysisResult(examples=[], code_smell="Feature Envy", repository_url="github.com/a/b")
    with pytest.raises(ValidationError):
        AnalysisResult(examples=[_example()] * 6, code_smell="Feature Envy", repository_url="github.com/a/b")


def test_empty_profile_payload():
    assert TechStackProfile().to_payload()["primaryLanguages"] == []


def test_section_placement_payload():
    placement = SectionPlacement(title="T", type="text_frame", x=0, y=10, width=400, height=300, item_ids=["f"])
    assert placement.to_payload()["itemIds"] == ["f"]
