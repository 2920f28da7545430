"""Tests for InMemoryQueryBuilder."""

from __future__ import annotations

from datetime import date

import pytest

from query_translator.adapters.memory import InMemoryQueryBuilder, render_value
from query_translator.exceptions import InvalidValueError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (2.5, "2.5"),
        ("it's", "'it''s'"),
        (date(2024, 2, 29), "'2024-02-29'"),
    ],
)
def test_render_value(value: object, expected: str) -> None:
    assert render_value(value) == expected


def test_methods_chain() -> None:
    builder = InMemoryQueryBuilder("users")
    builder.where("age", ">=", 18).or_where_null("age").order_by("age", "DESC")
    assert builder.to_sql() == (
        "select * from users where age >= 18 or age is null order by age desc"
    )


def test_clauses_keep_written_order() -> None:
    builder = InMemoryQueryBuilder()
    builder.where("a", "=", 1).or_where("b", "=", 2).where("c", "=", 3)
    assert builder.where_sql == "a = 1 or b = 2 and c = 3"


def test_first_clause_drops_its_combinator() -> None:
    builder = InMemoryQueryBuilder()
    builder.or_where_not("a", "=", 1)
    assert builder.where_sql == "not a = 1"


def test_group_scopes_are_independent() -> None:
    builder = InMemoryQueryBuilder()
    builder.where_group(lambda qb: qb.where("a", "=", 1).or_where("b", "=", 2))
    builder.or_where_not_group(lambda qb: qb.where_in("c", [1]))
    assert builder.where_sql == "(a = 1 or b = 2) or not (c in (1))"


def test_empty_membership_renders_constant_predicate() -> None:
    builder = InMemoryQueryBuilder()
    builder.where_in("a", []).or_where_not_in("b", ())
    assert builder.where_sql == "1 = 0 or 1 = 1"
    assert builder.method_names == ["where_in", "or_where_not_in"]


def test_package_exports_builder() -> None:
    import query_translator.adapters as adapters

    assert adapters.InMemoryQueryBuilder is InMemoryQueryBuilder
    assert adapters.render_value is render_value


@pytest.mark.parametrize("values", ["abc", 5, {"a": 1}])
def test_membership_requires_sequence(values: object) -> None:
    with pytest.raises(InvalidValueError):
        InMemoryQueryBuilder().where_in("col", values)  # type: ignore[arg-type]


@pytest.mark.parametrize("bounds", [[1], [1, 2, 3], "ab", 7])
def test_range_requires_pair(bounds: object) -> None:
    with pytest.raises(InvalidValueError):
        InMemoryQueryBuilder().where_between("col", bounds)  # type: ignore[arg-type]


def test_order_direction_validated() -> None:
    with pytest.raises(InvalidValueError):
        InMemoryQueryBuilder().order_by("col", "up")
