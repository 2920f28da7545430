"""Tests for the exception hierarchy."""

from __future__ import annotations

from query_translator.exceptions import (
    BuilderError,
    InvalidValueError,
    TranslatorError,
    UnknownColumnError,
    UnsupportedComparatorError,
)


def test_unknown_column_suggestions() -> None:
    error = UnknownColumnError("stauts", "orders", ["id", "status", "total"])
    assert error.suggestions == ["status"]
    assert "Did you mean: status?" in str(error)
    assert error.to_dict() == {
        "error": "UNKNOWN_COLUMN",
        "column": "stauts",
        "source": "orders",
        "suggestions": ["status"],
        "available_columns": ["id", "status", "total"],
    }


def test_unknown_column_without_suggestions() -> None:
    error = UnknownColumnError("zzz", "orders", ["id"])
    assert error.suggestions == []
    assert "Did you mean" not in str(error)


def test_unsupported_comparator() -> None:
    error = UnsupportedComparatorError("==", ["=", "<>"])
    assert error.suggestions == ["="]
    assert error.to_dict()["valid_comparators"] == ["<>", "="]


def test_invalid_value_message() -> None:
    error = InvalidValueError("tags", "a list of values", 5)
    assert str(error) == "Invalid value for 'tags': expected a list of values, got int"


def test_hierarchy() -> None:
    assert issubclass(UnknownColumnError, BuilderError)
    assert issubclass(BuilderError, TranslatorError)
    assert TranslatorError("boom").to_dict() == {
        "error": "TranslatorError",
        "message": "boom",
    }
