"""Tests for apply_order / parse_order."""

from __future__ import annotations

import pytest

from query_translator.adapters.memory import BuilderCall, InMemoryQueryBuilder
from query_translator.config import TranslatorConfig
from query_translator.exceptions import InvalidValueError
from query_translator.operators import OrderDirection
from query_translator.ordering import apply_order, parse_order


@pytest.mark.parametrize(
    ("order_string", "expected"),
    [
        ("name__desc", ("name", "desc")),
        ("created_at__asc", ("created_at", "asc")),
        ("-name", ("name", "desc")),
        ("+name", ("name", "asc")),
        ("name", ("name", "asc")),
        ("-name__asc", ("-name", "asc")),
    ],
)
def test_parse_order(order_string: str, expected: tuple[str, str]) -> None:
    assert parse_order(order_string) == expected


def test_signed_variadic(builder: InMemoryQueryBuilder) -> None:
    assert apply_order(builder, "+a", "-b") is builder
    assert builder.orders == [("a", "asc"), ("b", "desc")]


def test_unsigned_defaults_to_ascending(builder: InMemoryQueryBuilder) -> None:
    apply_order(builder, "a")
    assert builder.calls == [BuilderCall("order_by", ("a", "asc"))]


def test_list_form(builder: InMemoryQueryBuilder) -> None:
    apply_order(builder, ["hello__asc", "hey__desc"])
    assert builder.to_sql().endswith("order by hello asc, hey desc")


def test_mixed_forms_keep_input_order(builder: InMemoryQueryBuilder) -> None:
    apply_order(builder, "a", ["-b", "c__desc"], "+d")
    assert builder.orders == [
        ("a", "asc"),
        ("b", "desc"),
        ("c", "desc"),
        ("d", "asc"),
    ]


def test_no_order_strings(builder: InMemoryQueryBuilder) -> None:
    apply_order(builder)
    apply_order(builder, [])
    assert builder.calls == []


def test_configured_default_direction(builder: InMemoryQueryBuilder) -> None:
    config = TranslatorConfig(default_direction=OrderDirection.DESC)
    apply_order(builder, "a", "+b", config=config)
    assert builder.orders == [("a", "desc"), ("b", "asc")]


def test_suffix_direction_is_passed_through(builder: InMemoryQueryBuilder) -> None:
    with pytest.raises(InvalidValueError):
        apply_order(builder, "a__sideways")
    assert builder.calls == [BuilderCall("order_by", ("a", "sideways"))]
