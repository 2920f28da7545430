"""
SelectQueryBuilder — SQLAlchemy Core implementation of ``IQueryBuilder``.

Accumulates predicates, ordering and a result window over a ``Table``
(or any ``FromClause``) or a declarative model, and produces a
``Select``.  Statements are only built, never executed::

    builder = SelectQueryBuilder(users)
    apply_filter(builder, {"status__eq": "active", "or__age__gte": 18})
    stmt = builder.statement
    # SELECT ... FROM users WHERE users.status = :status_1 OR users.age >= :age_1

Predicates are combined in the order they were added with SQL precedence
(AND binds tighter than OR), the same result a textual builder gives
for ``a OR b AND c``.  Groups are parenthesised explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, and_, asc, desc, inspect, not_, or_, select
from sqlalchemy.sql import operators
from sqlalchemy.sql.elements import Grouping
from sqlalchemy.sql.expression import FromClause, UnaryExpression

from query_translator.exceptions import InvalidValueError, UnknownColumnError
from query_translator.operators import Combinator, OrderDirection

from .comparators import DEFAULT_COMPARATORS

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from query_translator.ports import GroupCallback

    from .strategy import ComparatorRegistry

logger = logging.getLogger(__name__)


class PredicateGroup(Grouping[bool]):
    """
    Parenthesised group that stays one operand of its parent.

    A plain ``Grouping`` proxies ``operator`` to its element, so ``and_()``
    and ``or_()`` splice a same-operator group into the parent list and the
    parentheses disappear.
    """

    inherit_cache = True
    operator = None


class SelectQueryBuilder:
    """Builds a SQLAlchemy ``Select`` from translator calls."""

    def __init__(
        self,
        source: Any,
        *,
        statement: Select[Any] | None = None,
        comparators: ComparatorRegistry | None = None,
    ) -> None:
        """
        Args:
            source: A ``Table``/``FromClause`` or a mapped model class.
                Column names are resolved against it.
            statement: Optional base ``Select``.  Defaults to
                ``select(source)``.
            comparators: Comparator registry for ``where``-style calls.
                Falls back to ``DEFAULT_COMPARATORS``.
        """
        self._source = source
        self._columns, self._source_name = _column_collection(source)
        self._statement = statement
        self._comparators = comparators or DEFAULT_COMPARATORS
        self._clauses: list[tuple[Combinator, ColumnElement[bool]]] = []
        self._order_by: list[Any] = []
        self._limit: int | None = None
        self._offset: int | None = None

    # ------------------------------------------------------------------
    # Comparison predicates
    # ------------------------------------------------------------------

    def where(self, column: str, comparator: str, value: Any) -> SelectQueryBuilder:
        return self._add(Combinator.AND, self._compare(column, comparator, value))

    def where_not(
        self, column: str, comparator: str, value: Any
    ) -> SelectQueryBuilder:
        return self._add(
            Combinator.AND, _negate(self._compare(column, comparator, value))
        )

    def or_where(
        self, column: str, comparator: str, value: Any
    ) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self._compare(column, comparator, value))

    def or_where_not(
        self, column: str, comparator: str, value: Any
    ) -> SelectQueryBuilder:
        return self._add(
            Combinator.OR, _negate(self._compare(column, comparator, value))
        )

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def where_group(self, callback: GroupCallback) -> SelectQueryBuilder:
        return self._group(Combinator.AND, callback, negated=False)

    def or_where_group(self, callback: GroupCallback) -> SelectQueryBuilder:
        return self._group(Combinator.OR, callback, negated=False)

    def where_not_group(self, callback: GroupCallback) -> SelectQueryBuilder:
        return self._group(Combinator.AND, callback, negated=True)

    def or_where_not_group(self, callback: GroupCallback) -> SelectQueryBuilder:
        return self._group(Combinator.OR, callback, negated=True)

    # ------------------------------------------------------------------
    # Membership and range
    # ------------------------------------------------------------------

    def where_in(self, column: str, values: Sequence[Any]) -> SelectQueryBuilder:
        return self._add(Combinator.AND, self._in(column, values))

    def or_where_in(self, column: str, values: Sequence[Any]) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self._in(column, values))

    def where_not_in(
        self, column: str, values: Sequence[Any]
    ) -> SelectQueryBuilder:
        return self._add(Combinator.AND, self._in(column, values, negated=True))

    def or_where_not_in(
        self, column: str, values: Sequence[Any]
    ) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self._in(column, values, negated=True))

    def where_between(
        self, column: str, bounds: Sequence[Any]
    ) -> SelectQueryBuilder:
        return self._add(Combinator.AND, self._between(column, bounds))

    def or_where_between(
        self, column: str, bounds: Sequence[Any]
    ) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self._between(column, bounds))

    def where_not_between(
        self, column: str, bounds: Sequence[Any]
    ) -> SelectQueryBuilder:
        return self._add(
            Combinator.AND, self._between(column, bounds, negated=True)
        )

    def or_where_not_between(
        self, column: str, bounds: Sequence[Any]
    ) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self._between(column, bounds, negated=True))

    # ------------------------------------------------------------------
    # Null checks
    # ------------------------------------------------------------------

    def where_null(self, column: str) -> SelectQueryBuilder:
        return self._add(Combinator.AND, self.column(column).is_(None))

    def or_where_null(self, column: str) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self.column(column).is_(None))

    def where_not_null(self, column: str) -> SelectQueryBuilder:
        return self._add(Combinator.AND, self.column(column).is_not(None))

    def or_where_not_null(self, column: str) -> SelectQueryBuilder:
        return self._add(Combinator.OR, self.column(column).is_not(None))

    # ------------------------------------------------------------------
    # Ordering and pagination
    # ------------------------------------------------------------------

    def order_by(self, column: str, direction: str) -> SelectQueryBuilder:
        col = self.column(column)
        try:
            normalised = OrderDirection(direction.lower())
        except ValueError:
            raise InvalidValueError(column, "'asc' or 'desc'", direction) from None
        self._order_by.append(
            desc(col) if normalised is OrderDirection.DESC else asc(col)
        )
        return self

    def limit(self, limit: int) -> SelectQueryBuilder:
        self._limit = limit
        return self

    def offset(self, offset: int) -> SelectQueryBuilder:
        self._offset = offset
        return self

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def column(self, name: str) -> Any:
        """Resolve a column name against the source."""
        try:
            return self._columns[name]
        except KeyError:
            raise UnknownColumnError(
                name, self._source_name, list(self._columns.keys())
            ) from None

    @property
    def where_clause(self) -> ColumnElement[bool] | None:
        """
        The accumulated predicate, or ``None`` when nothing was added.

        Consecutive AND-joined clauses form one conjunction; each OR starts
        a new disjunct.
        """
        if not self._clauses:
            return None
        runs: list[list[ColumnElement[bool]]] = []
        for combinator, clause in self._clauses:
            if not runs or combinator is Combinator.OR:
                runs.append([clause])
            else:
                runs[-1].append(clause)
        terms = [run[0] if len(run) == 1 else and_(*run) for run in runs]
        return terms[0] if len(terms) == 1 else or_(*terms)

    def build(self, statement: Select[Any] | None = None) -> Select[Any]:
        """Apply the accumulated state to ``statement`` (or the base select)."""
        stmt = statement if statement is not None else self._statement
        if stmt is None:
            stmt = select(self._source)
        where_clause = self.where_clause
        if where_clause is not None:
            stmt = stmt.where(where_clause)
        if self._order_by:
            stmt = stmt.order_by(*self._order_by)
        if self._limit is not None:
            stmt = stmt.limit(self._limit)
        if self._offset is not None:
            stmt = stmt.offset(self._offset)
        return stmt

    @property
    def statement(self) -> Select[Any]:
        return self.build()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add(
        self, combinator: Combinator, clause: ColumnElement[bool]
    ) -> SelectQueryBuilder:
        self._clauses.append((combinator, clause))
        return self

    def _compare(
        self, column: str, comparator: str, value: Any
    ) -> ColumnElement[bool]:
        return self._comparators.apply(comparator, self.column(column), value)

    def _in(
        self, column: str, values: Sequence[Any], *, negated: bool = False
    ) -> ColumnElement[bool]:
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidValueError(column, "a list of values", values)
        col = self.column(column)
        return col.not_in(list(values)) if negated else col.in_(list(values))

    def _between(
        self, column: str, bounds: Sequence[Any], *, negated: bool = False
    ) -> ColumnElement[bool]:
        if (
            isinstance(bounds, (str, bytes))
            or not isinstance(bounds, Sequence)
            or len(bounds) != 2
        ):
            raise InvalidValueError(column, "a (lower, upper) pair", bounds)
        lower, upper = bounds
        clause = self.column(column).between(lower, upper)
        return not_(clause) if negated else clause

    def _group(
        self, combinator: Combinator, callback: GroupCallback, *, negated: bool
    ) -> SelectQueryBuilder:
        scoped = SelectQueryBuilder(self._source, comparators=self._comparators)
        callback(scoped)
        inner = scoped.where_clause
        if inner is None:
            logger.debug("Empty predicate group on %s dropped", self._source_name)
            return self
        grouped = PredicateGroup(inner)
        return self._add(combinator, _negate(grouped) if negated else grouped)


def _negate(clause: ColumnElement[bool]) -> ColumnElement[bool]:
    # NOT (a = 1), never rewritten to a != 1
    if not isinstance(clause, Grouping):
        clause = Grouping(clause)
    return UnaryExpression(clause, operator=operators.inv, type_=Boolean())


def _column_collection(source: Any) -> tuple[Any, str]:
    if isinstance(source, FromClause):
        return source.c, getattr(source, "name", None) or str(source)
    mapper = inspect(source, raiseerr=False)
    columns = getattr(mapper, "columns", None)
    if columns is None:
        raise TypeError(
            f"Expected a Table, FromClause or mapped class, got {source!r}"
        )
    return columns, mapper.class_.__name__
