"""Tests for question complexity classification."""

import pytest

from docqa.core.complexity import (
    COMPLEX_INDICATORS,
    MAX_SIMPLE_QUESTION_LENGTH,
    classify_question,
)
from docqa.models.generation import QuestionComplexity


class TestClassifyQuestion:
    """Tests for classify_question."""

    def test_keyword_makes_question_complex(self) -> None:
        """Indicator keyword selects the complex tier."""
        result = classify_question("Compare the revenue trends across Q1 and Q2")
        assert result == QuestionComplexity.COMPLEX

    def test_short_plain_question_is_simple(self) -> None:
        """Short question without indicators is simple."""
        assert classify_question("What is the invoice total?") == QuestionComplexity.SIMPLE

    def test_long_question_without_keyword_is_complex(self) -> None:
        """Length rule applies without any keyword."""
        question = ("What is the total amount listed on the invoice " * 4)[:149] + "?"
        assert len(question) == 150

        assert classify_question(question) == QuestionComplexity.COMPLEX

    def test_length_boundary(self) -> None:
        """Exactly the maximum simple length stays simple."""
        question = "a" * MAX_SIMPLE_QUESTION_LENGTH
        assert classify_question(question) == QuestionComplexity.SIMPLE
        assert classify_question(question + "a") == QuestionComplexity.COMPLEX

    def test_keyword_match_is_case_insensitive(self) -> None:
        """Upper-case indicators still match."""
        assert classify_question("EXPLAIN WHY costs rose") == QuestionComplexity.COMPLEX

    @pytest.mark.parametrize("indicator", COMPLEX_INDICATORS)
    def test_every_indicator_matches(self, indicator: str) -> None:
        """Each indicator on its own triggers the complex tier."""
        assert classify_question(f"Please {indicator} this") == QuestionComplexity.COMPLEX

    def test_substring_match(self) -> None:
        """Indicators match inside longer words."""
        assert classify_question("Any relationships here?") == QuestionComplexity.COMPLEX
