"""Pattern tokens: like, ilike and regular expressions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..strategy import ComparisonFunction


def _like(column: Any, value: Any) -> Any:
    return column.like(value)


def _ilike(column: Any, value: Any) -> Any:
    return column.ilike(value)


def _regex(column: Any, value: Any) -> Any:
    return column.regexp_match(str(value))


def _iregex(column: Any, value: Any) -> Any:
    return column.regexp_match(str(value), flags="i")


PATTERN_COMPARISONS: dict[str, ComparisonFunction] = {
    "like": _like,
    "ilike": _ilike,
    "re": _regex,
    "ire": _iregex,
}
