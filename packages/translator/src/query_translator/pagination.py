"""Pagination translation — page number and size -> ``limit``/``offset`` calls."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple, TypeVar

from .config import DEFAULT_CONFIG, TranslatorConfig

if TYPE_CHECKING:
    from .ports import IPaginationQueryBuilder

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="IPaginationQueryBuilder")


class PageRequest(NamedTuple):
    page: int
    size: int


def page_offset(
    page: int, page_size: int, config: TranslatorConfig = DEFAULT_CONFIG
) -> int:
    """Offset of ``page``; pages at or below ``config.page_delta`` start at 0."""
    delta = config.page_delta
    return (max(delta, page) - delta) * page_size


def apply_pagination(
    builder: B,
    page: int | None = None,
    page_size: int | None = None,
    *,
    config: TranslatorConfig = DEFAULT_CONFIG,
) -> B:
    """
    Apply ``limit``/``offset`` for a page and return ``builder``.

    With the default config (1-based pages, page size 15)::

        apply_pagination(builder, 1, 100)   # limit 100
        apply_pagination(builder, 2, 100)   # limit 100 offset 100
        apply_pagination(builder, -1, 100)  # limit 100

    ``offset`` is only called for a zero offset when
    ``config.emit_zero_offset`` is set.
    """
    if page is None:
        page = config.page_delta
    if page_size is None:
        page_size = config.default_page_size

    builder.limit(page_size)
    offset = page_offset(page, page_size, config)
    if offset or config.emit_zero_offset:
        builder.offset(offset)
    else:
        logger.debug("Page %d maps to offset 0; offset call omitted", page)
    return builder


def parse_page_request(
    params: Mapping[str, Any],
    *,
    page_key: str = "page",
    size_key: str = "size",
    max_size: int | None = None,
    config: TranslatorConfig = DEFAULT_CONFIG,
) -> PageRequest:
    """
    Read a page request from query parameters.

    Missing or unparsable values fall back to the config defaults; sizes
    are clamped to at least 1 and, when given, at most ``max_size``.
    """
    page = _int_param(params.get(page_key))
    if page is None:
        page = config.page_delta
    size = _int_param(params.get(size_key))
    if size is None:
        size = config.default_page_size
    size = max(1, size)
    if max_size is not None:
        size = min(max_size, size)
    return PageRequest(page=page, size=size)


def _int_param(v: Any) -> int | None:
    if v is None:
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None
