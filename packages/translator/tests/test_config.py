"""Tests for TranslatorConfig."""

from __future__ import annotations

import dataclasses

import pytest

from query_translator.config import DEFAULT_CONFIG, TranslatorConfig
from query_translator.exceptions import ConfigurationError
from query_translator.operators import OrderDirection


def test_defaults() -> None:
    assert DEFAULT_CONFIG.default_direction is OrderDirection.ASC
    assert DEFAULT_CONFIG.default_page_size == 15
    assert DEFAULT_CONFIG.page_delta == 1
    assert DEFAULT_CONFIG.emit_zero_offset is False


def test_direction_string_is_normalised() -> None:
    config = TranslatorConfig(default_direction="desc")  # type: ignore[arg-type]
    assert config.default_direction is OrderDirection.DESC


@pytest.mark.parametrize(
    ("changes", "setting"),
    [
        ({"default_direction": "sideways"}, "default_direction"),
        ({"default_page_size": 0}, "default_page_size"),
        ({"page_delta": -1}, "page_delta"),
    ],
)
def test_invalid_values(changes: dict[str, object], setting: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        TranslatorConfig(**changes)  # type: ignore[arg-type]
    assert exc_info.value.setting == setting
    assert exc_info.value.to_dict()["error"] == "CONFIGURATION_ERROR"


def test_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.page_delta = 0  # type: ignore[misc]


def test_replace_returns_copy() -> None:
    config = DEFAULT_CONFIG.replace(default_page_size=50)
    assert config.default_page_size == 50
    assert DEFAULT_CONFIG.default_page_size == 15


def test_replace_validates() -> None:
    with pytest.raises(ConfigurationError):
        DEFAULT_CONFIG.replace(default_page_size=-3)
