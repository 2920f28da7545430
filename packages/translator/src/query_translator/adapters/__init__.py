"""Bundled query builder implementations."""

from .memory import BuilderCall, InMemoryQueryBuilder, render_value

__all__ = ["BuilderCall", "InMemoryQueryBuilder", "render_value"]
