"""
Query builder protocols consumed by the translator.

Any object with these methods can be driven by the translator; the
bundled implementations are
:class:`~query_translator.adapters.memory.InMemoryQueryBuilder` and
``query_translator_sqlalchemy.SelectQueryBuilder``.  Methods may return
anything (usually the builder itself); the translator ignores the result
and always hands back the builder it was given.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

GroupCallback = Callable[[Any], Any]


@runtime_checkable
class IFilterQueryBuilder(Protocol):
    """Predicate registration, in AND- and OR-combined variants."""

    # Comparison predicates: (column, comparator token, value)
    def where(self, column: str, comparator: str, value: Any) -> Any: ...

    def where_not(self, column: str, comparator: str, value: Any) -> Any: ...

    def or_where(self, column: str, comparator: str, value: Any) -> Any: ...

    def or_where_not(self, column: str, comparator: str, value: Any) -> Any: ...

    # Groups: the callback receives a fresh scoped builder whose predicates
    # are combined into this builder as one parenthesised condition.
    def where_group(self, callback: GroupCallback) -> Any: ...

    def or_where_group(self, callback: GroupCallback) -> Any: ...

    def where_not_group(self, callback: GroupCallback) -> Any: ...

    def or_where_not_group(self, callback: GroupCallback) -> Any: ...

    # Membership
    def where_in(self, column: str, values: Sequence[Any]) -> Any: ...

    def or_where_in(self, column: str, values: Sequence[Any]) -> Any: ...

    def where_not_in(self, column: str, values: Sequence[Any]) -> Any: ...

    def or_where_not_in(self, column: str, values: Sequence[Any]) -> Any: ...

    # Range: bounds is a (lower, upper) pair
    def where_between(self, column: str, bounds: Sequence[Any]) -> Any: ...

    def or_where_between(self, column: str, bounds: Sequence[Any]) -> Any: ...

    def where_not_between(self, column: str, bounds: Sequence[Any]) -> Any: ...

    def or_where_not_between(self, column: str, bounds: Sequence[Any]) -> Any: ...

    # Null checks
    def where_null(self, column: str) -> Any: ...

    def or_where_null(self, column: str) -> Any: ...

    def where_not_null(self, column: str) -> Any: ...

    def or_where_not_null(self, column: str) -> Any: ...


@runtime_checkable
class IOrderQueryBuilder(Protocol):
    """Ordering registration; repeated calls add secondary sort keys."""

    def order_by(self, column: str, direction: str) -> Any: ...


@runtime_checkable
class IPaginationQueryBuilder(Protocol):
    """Result window primitives."""

    def limit(self, limit: int) -> Any: ...

    def offset(self, offset: int) -> Any: ...


@runtime_checkable
class IQueryBuilder(
    IFilterQueryBuilder, IOrderQueryBuilder, IPaginationQueryBuilder, Protocol
):
    """Full capability set: filtering, ordering and pagination."""
