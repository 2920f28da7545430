"""PredicateTranslator — the three translations bound to one configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from .config import DEFAULT_CONFIG, TranslatorConfig
from .filtering import FilterSpec, apply_filter
from .ordering import OrderSpec, apply_order
from .pagination import apply_pagination

if TYPE_CHECKING:
    from .ports import (
        IFilterQueryBuilder,
        IOrderQueryBuilder,
        IPaginationQueryBuilder,
        IQueryBuilder,
    )

FB = TypeVar("FB", bound="IFilterQueryBuilder")
OB = TypeVar("OB", bound="IOrderQueryBuilder")
PB = TypeVar("PB", bound="IPaginationQueryBuilder")
QB = TypeVar("QB", bound="IQueryBuilder")


class PredicateTranslator:
    """
    Translate filter, order and pagination specifications into builder calls.

    Holds no state besides its configuration, so one instance can be shared
    freely.  Every method returns the builder it was given::

        translator = PredicateTranslator(TranslatorConfig(default_page_size=50))
        translator.apply(
            builder,
            filter_spec={"status__eq": "active"},
            order=["-created_at"],
            page=2,
        )
    """

    def __init__(self, config: TranslatorConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    def filter(self, builder: FB, filter_spec: FilterSpec | None = None) -> FB:
        return apply_filter(builder, filter_spec)

    def order(self, builder: OB, *order_specs: OrderSpec) -> OB:
        return apply_order(builder, *order_specs, config=self._config)

    def paginate(
        self, builder: PB, page: int | None = None, page_size: int | None = None
    ) -> PB:
        return apply_pagination(builder, page, page_size, config=self._config)

    def apply(
        self,
        builder: QB,
        *,
        filter_spec: FilterSpec | None = None,
        order: OrderSpec | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> QB:
        """Filter, then order, then paginate.

        Pagination is skipped when both ``page`` and ``page_size`` are
        ``None``; ordering is skipped when ``order`` is ``None``.
        """
        self.filter(builder, filter_spec)
        if order is not None:
            self.order(builder, order)
        if page is not None or page_size is not None:
            self.paginate(builder, page, page_size)
        return builder
