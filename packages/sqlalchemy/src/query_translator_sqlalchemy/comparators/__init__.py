"""
Built-in comparison tokens and the default registry.

Usage::

    from query_translator_sqlalchemy.comparators import DEFAULT_COMPARATORS

    expr = DEFAULT_COMPARATORS.apply(">=", column, value)
"""

from __future__ import annotations

from ..strategy import ComparatorRegistry, FunctionComparator
from .standard import STANDARD_COMPARISONS
from .string import PATTERN_COMPARISONS


def build_default_comparators() -> ComparatorRegistry:
    """Create a registry with all built-in comparators."""
    registry = ComparatorRegistry()
    for table in (STANDARD_COMPARISONS, PATTERN_COMPARISONS):
        registry.register_all(
            *(FunctionComparator(token, fn) for token, fn in table.items())
        )
    return registry


DEFAULT_COMPARATORS: ComparatorRegistry = build_default_comparators()

__all__ = [
    "DEFAULT_COMPARATORS",
    "PATTERN_COMPARISONS",
    "STANDARD_COMPARISONS",
    "build_default_comparators",
]
