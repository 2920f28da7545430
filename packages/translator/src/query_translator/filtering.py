"""
Filter translation — nested dict specification -> builder predicate calls.

A filter specification is a mapping of keys to values::

    {
        "status__eq": "active",              # status = 'active'
        "or__deleted_at__is": None,          # or deleted_at is null
        "not": {"role__in": ["guest"]},      # and not (role in ('guest'))
    }

Keys are handled in iteration order.  Boolean-group keys recurse into a
scoped sub-builder supplied by the builder; leaf keys are resolved to one
builder call each.  Keys with the wrong number of segments are skipped.
Errors raised by the builder propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

from .keys import BooleanGroup, Leaf, parse_key
from .operators import (
    GROUP_METHODS,
    NOT_NULL_OPERATORS,
    NULL_METHODS,
    PREDICATE_METHODS,
    RANGE_METHODS,
    Combinator,
    NullOperator,
    RangeOperator,
    resolve_comparator,
    split_negation,
)

if TYPE_CHECKING:
    from .ports import IFilterQueryBuilder

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="IFilterQueryBuilder")

FilterSpec: TypeAlias = Mapping[str, Any]


def apply_filter(builder: B, filter_spec: FilterSpec | None = None) -> B:
    """
    Apply a filter specification to ``builder`` and return ``builder``.

    ``None`` and non-mapping specifications leave the builder untouched.

    Example::

        apply_filter(builder, {"a__eq": 1, "or__b__eq": 2})
        # -> where a = 1 or b = 2
    """
    if not isinstance(filter_spec, Mapping):
        if filter_spec is not None:
            logger.debug(
                "Ignoring non-mapping filter specification of type %s",
                type(filter_spec).__name__,
            )
        return builder

    for key, value in filter_spec.items():
        parsed = parse_key(key)
        if isinstance(parsed, BooleanGroup):
            _apply_group(builder, parsed, value)
        elif isinstance(parsed, Leaf):
            apply_predicate(
                builder, parsed.column, parsed.operator, value, parsed.combinator
            )
        else:
            logger.debug(
                "Skipping filter key %r: expected 2 or 3 segments, got %d",
                parsed.key,
                parsed.segments,
            )
    return builder


def _apply_group(
    builder: IFilterQueryBuilder, parsed: BooleanGroup, value: Any
) -> None:
    method = GROUP_METHODS[parsed.group](builder)
    method(lambda scoped: apply_filter(scoped, value))


def apply_predicate(
    builder: B,
    column: str,
    operator: str,
    value: Any,
    combinator: Combinator = Combinator.AND,
) -> B:
    """
    Resolve a single leaf ``(column, operator, value)`` to one builder call.

    Resolution order:

    1. ``value is None`` -> ``where_null`` / ``where_not_null``.  ``is_not``
       and ``ne`` select IS NOT NULL, anything else IS NULL; a ``not_``
       prefix flips the choice.
    2. ``in`` / ``btw`` (optionally ``not_``-prefixed) -> membership or
       range method.
    3. Anything else -> ``where`` / ``where_not`` with the comparator token
       (``eq`` -> ``=``, ``ne`` -> ``<>``, ..., unknown names verbatim).
    """
    base, negated = split_negation(operator)

    if value is None:
        try:
            is_not_null = NullOperator(base) in NOT_NULL_OPERATORS
        except ValueError:
            is_not_null = False
        NULL_METHODS[(combinator, is_not_null != negated)](builder)(column)
        return builder

    try:
        range_operator = RangeOperator(base)
    except ValueError:
        range_operator = None
    if range_operator is not None:
        RANGE_METHODS[(range_operator, combinator, negated)](builder)(column, value)
        return builder

    PREDICATE_METHODS[(combinator, negated)](builder)(
        column, resolve_comparator(base), value
    )
    return builder
