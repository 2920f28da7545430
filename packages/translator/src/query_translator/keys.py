"""Filter key parsing — one string key in, one tagged result out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeAlias

from .operators import KEY_DELIMITER, Combinator, GroupKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BooleanGroup:
    """Key that opens a nested group (``or``, ``and``, ``not``, ...)."""

    group: GroupKey


@dataclass(frozen=True)
class Leaf:
    """Single-column predicate key, ``[prefix__]column__operator``."""

    combinator: Combinator
    column: str
    operator: str


@dataclass(frozen=True)
class Malformed:
    """Key with an unsupported number of segments; translates to nothing."""

    key: str
    segments: int


ParsedKey: TypeAlias = "BooleanGroup | Leaf | Malformed"


def parse_key(key: Any) -> ParsedKey:
    """
    Classify a filter specification key.

    Examples::

        parse_key("or")              # BooleanGroup(GroupKey.OR)
        parse_key("age__gte")        # Leaf(AND, "age", "gte")
        parse_key("or__age__gte")    # Leaf(OR, "age", "gte")
        parse_key("age")             # Malformed("age", 1)

    Only the exact prefix ``or`` selects OR.  Any other three-segment prefix
    conjoins, ``and`` included.
    """
    if not isinstance(key, str):
        return Malformed(str(key), 0)

    try:
        return BooleanGroup(GroupKey(key))
    except ValueError:
        pass

    parts = key.split(KEY_DELIMITER)
    if len(parts) == 2:
        column, operator = parts
        return Leaf(Combinator.AND, column, operator)
    if len(parts) == 3:
        prefix, column, operator = parts
        if prefix not in (Combinator.AND.value, Combinator.OR.value):
            logger.debug(
                "Filter key %r has prefix %r; treating it as 'and'", key, prefix
            )
        combinator = Combinator.OR if prefix == Combinator.OR.value else Combinator.AND
        return Leaf(combinator, column, operator)
    return Malformed(key, len(parts))
