"""Comparison tokens that map onto Python's rich comparison operators."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..strategy import ComparisonFunction

# SQLAlchemy columns overload the rich comparisons, so the ``operator``
# functions build SQL expressions directly.
STANDARD_COMPARISONS: dict[str, ComparisonFunction] = {
    "=": operator.eq,
    "<>": operator.ne,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}
