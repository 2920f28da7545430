"""
Operator vocabulary and builder dispatch tables.

Every table maps an enum member (plus a :class:`Combinator` where the
builder exposes AND/OR variants) to a *selector*: a function that takes a
builder and returns the bound builder method to call.  Dispatch is a
dictionary lookup, never a ``getattr`` on a computed method name.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from .ports import IFilterQueryBuilder

KEY_DELIMITER = "__"
NEGATION_PREFIX = "not_"


class GroupKey(str, Enum):
    """Keys that open a nested, parenthesised boolean group."""

    OR = "or"
    AND = "and"
    NOT = "not"
    AND_NOT = "and_not"
    OR_NOT = "or_not"


class Combinator(str, Enum):
    """How a predicate joins its siblings at the same nesting level."""

    AND = "and"
    OR = "or"


class ComparisonOperator(str, Enum):
    """Short comparison names and the comparator token they resolve to."""

    EQ = "eq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    NE = "ne"


class RangeOperator(str, Enum):
    """Membership / range operators with a dedicated builder method."""

    IN = "in"
    BTW = "btw"


class NullOperator(str, Enum):
    """Operators recognised when the leaf value is ``None``."""

    IS = "is"
    IS_NOT = "is_not"
    EQ = "eq"
    NE = "ne"


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


COMPARATOR_BY_OPERATOR: dict[ComparisonOperator, str] = {
    ComparisonOperator.EQ: "=",
    ComparisonOperator.GT: ">",
    ComparisonOperator.GTE: ">=",
    ComparisonOperator.LT: "<",
    ComparisonOperator.LTE: "<=",
    ComparisonOperator.NE: "<>",
}

DIRECTION_BY_SIGN: dict[str, OrderDirection] = {
    "+": OrderDirection.ASC,
    "-": OrderDirection.DESC,
}

# Null operators that select IS NOT NULL; everything else selects IS NULL.
NOT_NULL_OPERATORS: frozenset[NullOperator] = frozenset(
    {NullOperator.IS_NOT, NullOperator.NE}
)

Selector: TypeAlias = "Callable[[IFilterQueryBuilder], Callable[..., Any]]"

GROUP_METHODS: dict[GroupKey, Selector] = {
    GroupKey.OR: lambda b: b.or_where_group,
    GroupKey.AND: lambda b: b.where_group,
    GroupKey.NOT: lambda b: b.where_not_group,
    GroupKey.AND_NOT: lambda b: b.where_not_group,
    GroupKey.OR_NOT: lambda b: b.or_where_not_group,
}

# (combinator, negated) -> predicate method
PREDICATE_METHODS: dict[tuple[Combinator, bool], Selector] = {
    (Combinator.AND, False): lambda b: b.where,
    (Combinator.AND, True): lambda b: b.where_not,
    (Combinator.OR, False): lambda b: b.or_where,
    (Combinator.OR, True): lambda b: b.or_where_not,
}

RANGE_METHODS: dict[tuple[RangeOperator, Combinator, bool], Selector] = {
    (RangeOperator.IN, Combinator.AND, False): lambda b: b.where_in,
    (RangeOperator.IN, Combinator.AND, True): lambda b: b.where_not_in,
    (RangeOperator.IN, Combinator.OR, False): lambda b: b.or_where_in,
    (RangeOperator.IN, Combinator.OR, True): lambda b: b.or_where_not_in,
    (RangeOperator.BTW, Combinator.AND, False): lambda b: b.where_between,
    (RangeOperator.BTW, Combinator.AND, True): lambda b: b.where_not_between,
    (RangeOperator.BTW, Combinator.OR, False): lambda b: b.or_where_between,
    (RangeOperator.BTW, Combinator.OR, True): lambda b: b.or_where_not_between,
}

# (combinator, is_not_null) -> null-check method
NULL_METHODS: dict[tuple[Combinator, bool], Selector] = {
    (Combinator.AND, False): lambda b: b.where_null,
    (Combinator.AND, True): lambda b: b.where_not_null,
    (Combinator.OR, False): lambda b: b.or_where_null,
    (Combinator.OR, True): lambda b: b.or_where_not_null,
}


def split_negation(operator: str) -> tuple[str, bool]:
    """Strip one leading ``not_`` and report whether it was present."""
    if operator.startswith(NEGATION_PREFIX):
        return operator[len(NEGATION_PREFIX) :], True
    return operator, False


def resolve_comparator(base: str) -> str:
    """Map a short comparison name to its token; pass anything else through."""
    try:
        return COMPARATOR_BY_OPERATOR[ComparisonOperator(base)]
    except ValueError:
        return base
