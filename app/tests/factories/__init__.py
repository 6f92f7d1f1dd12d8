"""Test data factories for deterministic test data generation."""

from tests.factories.localizer import (
    make_catalog,
    make_exception,
    make_locale_context,
    make_response,
)

__all__ = [
    "make_catalog",
    "make_exception",
    "make_locale_context",
    "make_response",
]
