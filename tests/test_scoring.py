"""Tests for confidence and complexity heuristics."""

import pytest

from learning_hour.analysis.scoring import (
    calculate_confidence,
    experience_level_for,
    rate_complexity,
)


def test_base_confidence():
    assert calculate_confidence("x = 1", "God Class") == 0.7


def test_feature_envy_with_chained_calls():
    snippet = "a = order.getCustomer().getName();\nb = order.getCustomer().getEmail();"
    score = calculate_confidence(snippet, "Feature Envy")
    assert 0.9 <= score <= 0.95


def test_feature_envy_single_chain_gets_no_bonus():
    assert calculate_confidence("order.getCustomer().getName();", "Feature Envy") == 0.7


def test_long_method_bonus():
    snippet = "\n".join(f"line {i}" for i in range(31))
    assert calculate_confidence(snippet, "Long Method") == 0.85


def test_long_method_at_threshold_gets_no_bonus():
    snippet = "\n".join(f"line {i}" for i in range(30))
    assert calculate_confidence(snippet, "Long Method") == 0.7


@pytest.mark.parametrize(
    "snippet,expected",
    [
        ("return 1", "low"),
        ("\n".join(["x"] * 21), "medium"),
        ("\n".join(["x"] * 51), "high"),
        ("if a: if b: if c: if d: if e: if f:", "medium"),
        (" ".join(["if"] * 11), "high"),
    ],
)
def test_rate_complexity(snippet, expected):
    assert rate_complexity(snippet) == expected


def test_keywords_match_whole_words_only():
    assert rate_complexity("elsewhere iffy format whileloop " * 5) == "low"


@pytest.mark.parametrize(
    "complexity,level",
    [("high", "advanced"), ("medium", "intermediate"), ("low", "beginner")],
)
def test_experience_level(complexity, level):
    assert experience_level_for(complexity) == level


@pytest.mark.parametrize("smell", ["feature envy", "FEATURE ENVY", "  Feature   Envy "])
def test_feature_envy_bonus_ignores_case_and_spacing(smell):
    snippet = "a = order.getCustomer().getName();\nb = order.getCustomer().getEmail();"
    assert calculate_confidence(snippet, smell) == calculate_confidence(snippet, "Feature Envy")


def test_long_method_bonus_ignores_case():
    snippet = "\n".join(f"line {i}" for i in range(31))
    assert calculate_confidence(snippet, "long method") == 0.85
