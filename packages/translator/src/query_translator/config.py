"""Translator configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .exceptions import ConfigurationError
from .operators import OrderDirection


@dataclass(frozen=True)
class TranslatorConfig:
    """Defaults used by ordering and pagination.

    Attributes:
        default_direction: Direction for order strings with neither a
            ``__direction`` suffix nor a ``+``/``-`` sign.
        default_page_size: Page size when the caller passes none.
        page_delta: Lowest meaningful page number.  ``1`` for 1-based
            paging, ``0`` for 0-based.  Pages at or below it map to offset 0.
        emit_zero_offset: Call ``offset(0)`` on the first page instead of
            omitting the offset call.
    """

    default_direction: OrderDirection = OrderDirection.ASC
    default_page_size: int = 15
    page_delta: int = 1
    emit_zero_offset: bool = False

    def __post_init__(self) -> None:
        try:
            direction = OrderDirection(self.default_direction)
        except ValueError:
            raise ConfigurationError(
                "default_direction",
                self.default_direction,
                "must be 'asc' or 'desc'",
            ) from None
        object.__setattr__(self, "default_direction", direction)

        if self.default_page_size < 1:
            raise ConfigurationError(
                "default_page_size", self.default_page_size, "must be positive"
            )
        if self.page_delta < 0:
            raise ConfigurationError(
                "page_delta", self.page_delta, "must not be negative"
            )

    def replace(self, **changes: Any) -> TranslatorConfig:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = TranslatorConfig()
