"""
SQLAlchemy query builder for query-translator.

Public API:
    - ``SelectQueryBuilder`` — ``IQueryBuilder`` over a ``Table`` or mapped
      model, producing a ``Select``
    - ``DEFAULT_COMPARATORS`` — the default comparator registry
    - ``SQLAlchemyComparator`` / ``ComparatorRegistry`` — extension points
      for custom comparator tokens
    - ``FunctionComparator`` / ``ComparatorRegistry.register_function`` for
      tokens backed by a plain ``(column, value)`` function
"""

from .builder import SelectQueryBuilder
from .comparators import DEFAULT_COMPARATORS, build_default_comparators
from .strategy import ComparatorRegistry, FunctionComparator, SQLAlchemyComparator

__all__ = [
    "SelectQueryBuilder",
    "DEFAULT_COMPARATORS",
    "build_default_comparators",
    "SQLAlchemyComparator",
    "FunctionComparator",
    "ComparatorRegistry",
]
