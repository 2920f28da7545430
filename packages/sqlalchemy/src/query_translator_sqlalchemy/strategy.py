"""
Comparator compilation strategy.

Provides the ``SQLAlchemyComparator`` interface and a registry keyed by
comparator token (``"="``, ``"<>"``, ``"like"``, ...).  The builder hands
every ``where``/``where_not`` call to the registry, so custom tokens can be
supported by registering another strategy, or a plain function through
``ComparatorRegistry.register_function``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias, cast

from query_translator.exceptions import UnsupportedComparatorError

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

ComparisonFunction: TypeAlias = Callable[[Any, Any], Any]
"""``(column, value) -> ColumnElement[bool]``."""


class SQLAlchemyComparator(ABC):
    """
    Strategy interface for compiling a comparator token into a
    SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def token(self) -> str:
        """The comparator token this strategy handles."""
        ...

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Build a SQLAlchemy comparison clause.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The predicate value.

        Returns:
            A SQLAlchemy boolean expression.
        """
        ...


class FunctionComparator(SQLAlchemyComparator):
    """Comparator backed by a ``(column, value)`` function."""

    def __init__(self, token: str, function: ComparisonFunction) -> None:
        self._token = token
        self._function = function

    @property
    def token(self) -> str:
        return self._token

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", self._function(column, value))


class ComparatorRegistry:
    """Registry of ``SQLAlchemyComparator`` instances keyed by token."""

    def __init__(self) -> None:
        self._comparators: dict[str, SQLAlchemyComparator] = {}

    def register(self, comparator: SQLAlchemyComparator) -> None:
        self._comparators[comparator.token] = comparator

    def register_all(self, *comparators: SQLAlchemyComparator) -> None:
        for comparator in comparators:
            self.register(comparator)

    def register_function(self, token: str, function: ComparisonFunction) -> None:
        self.register(FunctionComparator(token, function))

    def unregister(self, token: str) -> None:
        self._comparators.pop(token, None)

    def get(self, token: str) -> SQLAlchemyComparator | None:
        return self._comparators.get(token)

    def has(self, token: str) -> bool:
        return token in self._comparators

    @property
    def supported_tokens(self) -> set[str]:
        return set(self._comparators.keys())

    def apply(self, token: str, column: Any, value: Any) -> ColumnElement[bool]:
        """
        Look up the comparator and apply.

        Raises:
            UnsupportedComparatorError: If the token is not registered.
        """
        comparator = self.get(token)
        if comparator is None:
            raise UnsupportedComparatorError(token, sorted(self._comparators))
        return comparator.apply(column, value)
