"""Declarative filter, order and pagination specs -> query builder calls."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, TranslatorConfig
from .exceptions import (
    BuilderError,
    ConfigurationError,
    InvalidValueError,
    TranslatorError,
    UnknownColumnError,
    UnsupportedComparatorError,
)
from .filtering import FilterSpec, apply_filter, apply_predicate
from .keys import BooleanGroup, Leaf, Malformed, ParsedKey, parse_key
from .operators import (
    Combinator,
    ComparisonOperator,
    GroupKey,
    NullOperator,
    OrderDirection,
    RangeOperator,
)
from .ordering import OrderSpec, apply_order, parse_order
from .pagination import PageRequest, apply_pagination, page_offset, parse_page_request
from .ports import (
    IFilterQueryBuilder,
    IOrderQueryBuilder,
    IPaginationQueryBuilder,
    IQueryBuilder,
)
from .translator import PredicateTranslator

__all__ = [
    "DEFAULT_CONFIG",
    "BooleanGroup",
    "BuilderError",
    "Combinator",
    "ComparisonOperator",
    "ConfigurationError",
    "FilterSpec",
    "GroupKey",
    "IFilterQueryBuilder",
    "IOrderQueryBuilder",
    "IPaginationQueryBuilder",
    "IQueryBuilder",
    "InvalidValueError",
    "Leaf",
    "Malformed",
    "NullOperator",
    "OrderDirection",
    "OrderSpec",
    "PageRequest",
    "ParsedKey",
    "PredicateTranslator",
    "RangeOperator",
    "TranslatorConfig",
    "TranslatorError",
    "UnknownColumnError",
    "UnsupportedComparatorError",
    "apply_filter",
    "apply_order",
    "apply_pagination",
    "apply_predicate",
    "page_offset",
    "parse_key",
    "parse_order",
    "parse_page_request",
]
