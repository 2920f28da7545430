"""Shared fixtures for translator tests."""

from __future__ import annotations

import pytest

from query_translator.adapters.memory import InMemoryQueryBuilder


@pytest.fixture
def builder() -> InMemoryQueryBuilder:
    """Fresh recording builder over a table named ``table``."""
    return InMemoryQueryBuilder("table")
