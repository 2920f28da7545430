"""Tests for PredicateTranslator and the builder protocols."""

from __future__ import annotations

from query_translator import (
    IFilterQueryBuilder,
    IOrderQueryBuilder,
    IPaginationQueryBuilder,
    IQueryBuilder,
    PredicateTranslator,
    TranslatorConfig,
    apply_filter,
    apply_order,
    apply_pagination,
)
from query_translator.adapters.memory import InMemoryQueryBuilder


def test_apply_runs_filter_order_paginate(builder: InMemoryQueryBuilder) -> None:
    translator = PredicateTranslator()
    result = translator.apply(
        builder,
        filter_spec={"status__eq": "active", "or__deleted_at__is": None},
        order=["-created_at", "id"],
        page=2,
        page_size=10,
    )
    assert result is builder
    assert builder.to_sql() == (
        "select * from table where status = 'active' or deleted_at is null "
        "order by created_at desc, id asc limit 10 offset 10"
    )


def test_apply_single_order_string(builder: InMemoryQueryBuilder) -> None:
    PredicateTranslator().apply(builder, order="-created_at")
    assert builder.orders == [("created_at", "desc")]


def test_apply_skips_missing_parts(builder: InMemoryQueryBuilder) -> None:
    PredicateTranslator().apply(builder)
    assert builder.calls == []


def test_config_is_used(builder: InMemoryQueryBuilder) -> None:
    translator = PredicateTranslator(
        TranslatorConfig(default_page_size=5, emit_zero_offset=True)
    )
    translator.order(builder, "name")
    translator.paginate(builder)
    assert builder.to_sql() == "select * from table order by name asc limit 5 offset 0"


def test_functions_compose(builder: InMemoryQueryBuilder) -> None:
    result = apply_pagination(
        apply_order(apply_filter(builder, {"a__gt": 1}), "-a"), 2, 5
    )
    assert result is builder
    assert builder.to_sql() == (
        "select * from table where a > 1 order by a desc limit 5 offset 5"
    )


def test_in_memory_builder_satisfies_protocols(builder: InMemoryQueryBuilder) -> None:
    assert isinstance(builder, IFilterQueryBuilder)
    assert isinstance(builder, IOrderQueryBuilder)
    assert isinstance(builder, IPaginationQueryBuilder)
    assert isinstance(builder, IQueryBuilder)


def test_partial_builder_only_satisfies_its_protocol() -> None:
    class OrderOnly:
        def order_by(self, column: str, direction: str) -> None:
            pass

    assert isinstance(OrderOnly(), IOrderQueryBuilder)
    assert not isinstance(OrderOnly(), IQueryBuilder)
