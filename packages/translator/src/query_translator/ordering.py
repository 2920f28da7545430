"""Order translation — order strings -> ``order_by`` calls."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, TypeAlias, TypeVar

from .config import DEFAULT_CONFIG, TranslatorConfig
from .operators import DIRECTION_BY_SIGN, KEY_DELIMITER

if TYPE_CHECKING:
    from .ports import IOrderQueryBuilder

B = TypeVar("B", bound="IOrderQueryBuilder")

OrderSpec: TypeAlias = "str | Iterable[str]"


def parse_order(
    order_string: str, config: TranslatorConfig = DEFAULT_CONFIG
) -> tuple[str, str]:
    """
    Split one order string into ``(column, direction)``.

    Accepted forms::

        "name__desc"  -> ("name", "desc")
        "-name"       -> ("name", "desc")
        "+name"       -> ("name", "asc")
        "name"        -> ("name", config.default_direction)

    A ``__direction`` suffix is passed through as written; the builder
    decides whether it is valid.
    """
    if KEY_DELIMITER in order_string:
        column, direction = order_string.rsplit(KEY_DELIMITER, 1)
        return column, direction
    sign = order_string[:1]
    if sign in DIRECTION_BY_SIGN:
        return order_string[1:], DIRECTION_BY_SIGN[sign].value
    return order_string, config.default_direction.value


def _flatten(order_specs: Iterable[OrderSpec]) -> Iterator[str]:
    for spec in order_specs:
        if isinstance(spec, str):
            yield spec
        else:
            yield from spec


def apply_order(
    builder: B, *order_specs: OrderSpec, config: TranslatorConfig = DEFAULT_CONFIG
) -> B:
    """
    Call ``builder.order_by`` once per order string, in input order.

    Strings may be passed variadically, as lists, or both::

        apply_order(builder, "+a", "-b")        # a asc, b desc
        apply_order(builder, ["a__asc", "b"])   # a asc, b asc
    """
    for order_string in _flatten(order_specs):
        column, direction = parse_order(order_string, config)
        builder.order_by(column, direction)
    return builder
