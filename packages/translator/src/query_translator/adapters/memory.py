"""InMemoryQueryBuilder — recording implementation of IQueryBuilder.

Records every call it receives and renders the accumulated state as
knex-style SQL text (values inlined, identifiers unquoted).  Used for
testing translations and for previewing what a specification does without
a database.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidValueError
from ..operators import Combinator, OrderDirection

if TYPE_CHECKING:
    from ..ports import GroupCallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuilderCall:
    """One recorded builder invocation.

    Group calls carry the calls recorded by their scoped builder as their
    single argument.
    """

    method: str
    args: tuple[Any, ...]


def render_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return f"'{value.isoformat()}'"
    if isinstance(value, str):
        escaped = value.replace("'", "''")
        return f"'{escaped}'"
    return str(value)


class InMemoryQueryBuilder:
    """
    Query builder that keeps predicates as rendered text fragments.

    Clauses are joined left to right with their own combinator, exactly as
    written, so ``a = 1 or b = 2 and c = 3`` keeps SQL precedence.

    Example::

        builder = InMemoryQueryBuilder("users")
        builder.where("age", ">=", 18).or_where_null("age")
        builder.to_sql()
        # "select * from users where age >= 18 or age is null"
    """

    def __init__(self, table: str = "table") -> None:
        self.table = table
        self.calls: list[BuilderCall] = []
        self.orders: list[tuple[str, str]] = []
        self.limit_value: int | None = None
        self.offset_value: int | None = None
        self._clauses: list[tuple[Combinator, str]] = []

    # ------------------------------------------------------------------
    # Comparison predicates
    # ------------------------------------------------------------------

    def where(self, column: str, comparator: str, value: Any) -> InMemoryQueryBuilder:
        self._record("where", column, comparator, value)
        return self._add(Combinator.AND, _comparison(column, comparator, value))

    def where_not(
        self, column: str, comparator: str, value: Any
    ) -> InMemoryQueryBuilder:
        self._record("where_not", column, comparator, value)
        return self._add(
            Combinator.AND, "not " + _comparison(column, comparator, value)
        )

    def or_where(
        self, column: str, comparator: str, value: Any
    ) -> InMemoryQueryBuilder:
        self._record("or_where", column, comparator, value)
        return self._add(Combinator.OR, _comparison(column, comparator, value))

    def or_where_not(
        self, column: str, comparator: str, value: Any
    ) -> InMemoryQueryBuilder:
        self._record("or_where_not", column, comparator, value)
        return self._add(Combinator.OR, "not " + _comparison(column, comparator, value))

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def where_group(self, callback: GroupCallback) -> InMemoryQueryBuilder:
        return self._group("where_group", Combinator.AND, callback, negated=False)

    def or_where_group(self, callback: GroupCallback) -> InMemoryQueryBuilder:
        return self._group("or_where_group", Combinator.OR, callback, negated=False)

    def where_not_group(self, callback: GroupCallback) -> InMemoryQueryBuilder:
        return self._group("where_not_group", Combinator.AND, callback, negated=True)

    def or_where_not_group(self, callback: GroupCallback) -> InMemoryQueryBuilder:
        return self._group("or_where_not_group", Combinator.OR, callback, negated=True)

    # ------------------------------------------------------------------
    # Membership and range
    # ------------------------------------------------------------------

    def where_in(self, column: str, values: Sequence[Any]) -> InMemoryQueryBuilder:
        self._record("where_in", column, values)
        return self._add(Combinator.AND, _membership(column, values, negated=False))

    def or_where_in(self, column: str, values: Sequence[Any]) -> InMemoryQueryBuilder:
        self._record("or_where_in", column, values)
        return self._add(Combinator.OR, _membership(column, values, negated=False))

    def where_not_in(
        self, column: str, values: Sequence[Any]
    ) -> InMemoryQueryBuilder:
        self._record("where_not_in", column, values)
        return self._add(Combinator.AND, _membership(column, values, negated=True))

    def or_where_not_in(
        self, column: str, values: Sequence[Any]
    ) -> InMemoryQueryBuilder:
        self._record("or_where_not_in", column, values)
        return self._add(Combinator.OR, _membership(column, values, negated=True))

    def where_between(
        self, column: str, bounds: Sequence[Any]
    ) -> InMemoryQueryBuilder:
        self._record("where_between", column, bounds)
        return self._add(Combinator.AND, _range(column, bounds, negated=False))

    def or_where_between(
        self, column: str, bounds: Sequence[Any]
    ) -> InMemoryQueryBuilder:
        self._record("or_where_between", column, bounds)
        return self._add(Combinator.OR, _range(column, bounds, negated=False))

    def where_not_between(
        self, column: str, bounds: Sequence[Any]
    ) -> InMemoryQueryBuilder:
        self._record("where_not_between", column, bounds)
        return self._add(Combinator.AND, _range(column, bounds, negated=True))

    def or_where_not_between(
        self, column: str, bounds: Sequence[Any]
    ) -> InMemoryQueryBuilder:
        self._record("or_where_not_between", column, bounds)
        return self._add(Combinator.OR, _range(column, bounds, negated=True))

    # ------------------------------------------------------------------
    # Null checks
    # ------------------------------------------------------------------

    def where_null(self, column: str) -> InMemoryQueryBuilder:
        self._record("where_null", column)
        return self._add(Combinator.AND, f"{column} is null")

    def or_where_null(self, column: str) -> InMemoryQueryBuilder:
        self._record("or_where_null", column)
        return self._add(Combinator.OR, f"{column} is null")

    def where_not_null(self, column: str) -> InMemoryQueryBuilder:
        self._record("where_not_null", column)
        return self._add(Combinator.AND, f"{column} is not null")

    def or_where_not_null(self, column: str) -> InMemoryQueryBuilder:
        self._record("or_where_not_null", column)
        return self._add(Combinator.OR, f"{column} is not null")

    # ------------------------------------------------------------------
    # Ordering and pagination
    # ------------------------------------------------------------------

    def order_by(self, column: str, direction: str) -> InMemoryQueryBuilder:
        self._record("order_by", column, direction)
        try:
            normalised = OrderDirection(direction.lower()).value
        except ValueError:
            raise InvalidValueError(column, "'asc' or 'desc'", direction) from None
        self.orders.append((column, normalised))
        return self

    def limit(self, limit: int) -> InMemoryQueryBuilder:
        self._record("limit", limit)
        self.limit_value = limit
        return self

    def offset(self, offset: int) -> InMemoryQueryBuilder:
        self._record("offset", offset)
        self.offset_value = offset
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def where_sql(self) -> str:
        """The accumulated predicate, without the ``where`` keyword."""
        parts: list[str] = []
        for combinator, clause in self._clauses:
            if parts:
                parts.append(combinator.value)
            parts.append(clause)
        return " ".join(parts)

    @property
    def method_names(self) -> list[str]:
        return [call.method for call in self.calls]

    def to_sql(self) -> str:
        sql = f"select * from {self.table}"
        if self._clauses:
            sql += f" where {self.where_sql}"
        if self.orders:
            sql += " order by " + ", ".join(f"{c} {d}" for c, d in self.orders)
        if self.limit_value is not None:
            sql += f" limit {self.limit_value}"
        if self.offset_value is not None:
            sql += f" offset {self.offset_value}"
        return sql

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append(BuilderCall(method, args))

    def _add(self, combinator: Combinator, clause: str) -> InMemoryQueryBuilder:
        self._clauses.append((combinator, clause))
        return self

    def _group(
        self,
        method: str,
        combinator: Combinator,
        callback: GroupCallback,
        *,
        negated: bool,
    ) -> InMemoryQueryBuilder:
        scoped = InMemoryQueryBuilder(self.table)
        callback(scoped)
        self._record(method, tuple(scoped.calls))
        if not scoped._clauses:
            logger.debug("Empty %s group dropped", method)
            return self
        clause = f"({scoped.where_sql})"
        if negated:
            clause = "not " + clause
        return self._add(combinator, clause)


def _comparison(column: str, comparator: str, value: Any) -> str:
    return f"{column} {comparator} {render_value(value)}"


def _membership(column: str, values: Sequence[Any], *, negated: bool) -> str:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidValueError(column, "a list of values", values)
    if not values:
        # nothing matches an empty list
        return "1 = 1" if negated else "1 = 0"
    rendered = ", ".join(render_value(v) for v in values)
    keyword = "not in" if negated else "in"
    return f"{column} {keyword} ({rendered})"


def _range(column: str, bounds: Sequence[Any], *, negated: bool) -> str:
    if (
        isinstance(bounds, (str, bytes))
        or not isinstance(bounds, Sequence)
        or len(bounds) != 2
    ):
        raise InvalidValueError(column, "a (lower, upper) pair", bounds)
    lower, upper = bounds
    keyword = "not between" if negated else "between"
    return f"{column} {keyword} {render_value(lower)} and {render_value(upper)}"
