"""Tests for text utilities."""

import uuid

import pytest

from ordabok.core.exceptions import ValidationError
from ordabok.utils.text_utils import blank_to_none, normalize_word_form, parse_identifier


class TestNormalizeWordForm:
    """Tests for word form normalization."""

    def test_strips_dots_and_whitespace(self) -> None:
        assert normalize_word_form("  ...hestr.  ") == "hestr"

    def test_collapses_inner_whitespace(self) -> None:
        assert normalize_word_form("good   \t morning") == "good morning"

    def test_composes_unicode(self) -> None:
        assert normalize_word_form("jo\u0301r") == "j\u00f3r"

    def test_keeps_other_symbols(self) -> None:
        assert normalize_word_form("isn't?") == "isn't?"

    def test_empty(self) -> None:
        assert normalize_word_form("") == ""
        assert normalize_word_form(" . ") == ""


class TestParseIdentifier:
    """Tests for identifier parsing."""

    def test_valid(self) -> None:
        ident = uuid.uuid4()
        assert parse_identifier(f" {ident} ") == ident

    @pytest.mark.parametrize("value", ["", "hestr", "1234", None])
    def test_invalid(self, value) -> None:
        with pytest.raises(ValidationError):
            parse_identifier(value, "language")


def test_blank_to_none() -> None:
    assert blank_to_none(None) is None
    assert blank_to_none("   ") is None
    assert blank_to_none(" x ") == "x"
