"""
Translator exception hierarchy with fuzzy-match suggestions.

The translator itself never raises while walking a specification; these
exceptions come from configuration validation and from the bundled
builders.  All of them provide ``to_dict()`` for API-friendly responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class TranslatorError(Exception):
    """Base exception for all query-translator errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(TranslatorError):
    """A ``TranslatorConfig`` value is out of range."""

    def __init__(self, setting: str, value: Any, reason: str) -> None:
        self.setting = setting
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {setting}={value!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "setting": self.setting,
            "value": self.value,
            "message": self.reason,
        }


class BuilderError(TranslatorError):
    """Base class for errors raised by query builder implementations."""


class UnknownColumnError(BuilderError):
    """
    Column name not present on the builder's table or model.

    Example error message::

        Unknown column 'stauts' on 'orders'. Did you mean: status?
    """

    def __init__(
        self,
        column: str,
        source: str,
        available_columns: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.column = column
        self.source = source
        self.available_columns = available_columns
        self.suggestions = get_close_matches(
            column, available_columns, n=3, cutoff=cutoff
        )

        message = f"Unknown column '{column}' on '{source}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_COLUMN",
            "column": self.column,
            "source": self.source,
            "suggestions": self.suggestions,
            "available_columns": sorted(self.available_columns),
        }


class UnsupportedComparatorError(BuilderError):
    """Comparator token the builder has no implementation for."""

    def __init__(self, comparator: str, valid_comparators: list[str]) -> None:
        self.comparator = comparator
        self.valid_comparators = valid_comparators
        self.suggestions = get_close_matches(
            comparator, valid_comparators, n=3, cutoff=0.6
        )

        message = f"Unsupported comparator: '{comparator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid comparators: {', '.join(sorted(valid_comparators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_COMPARATOR",
            "comparator": self.comparator,
            "suggestions": self.suggestions,
            "valid_comparators": sorted(self.valid_comparators),
        }


class InvalidValueError(BuilderError):
    """Predicate value has the wrong shape for its operator."""

    def __init__(self, column: str, expected: str, value: Any) -> None:
        self.column = column
        self.expected = expected
        self.value = value
        super().__init__(
            f"Invalid value for '{column}': expected {expected}, "
            f"got {type(value).__name__}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_VALUE",
            "column": self.column,
            "expected": self.expected,
            "message": str(self),
        }
