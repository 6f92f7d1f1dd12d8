"""Fixtures for localizer.adapters tests."""

import pytest

from localizer.adapters import Localizer
from tests.factories.localizer import EN_US, make_catalog


@pytest.fixture
def catalog():
    """Single catalog shared by every partition."""
    return make_catalog()


@pytest.fixture
def localizer(catalog):
    """Single-catalog Localizer defaulting to en-US."""
    return Localizer(catalog, default_locale=EN_US)


@pytest.fixture
def partitioned_catalogs():
    """Separate general, response and error catalogs using the same keys."""
    return {
        "catalog": make_catalog({"en-US": {"shared.key": "General {0}"}}),
        "response_catalog": make_catalog({"en-US": {"shared.key": "Response {0}"}}),
        "error_catalog": make_catalog({"en-US": {"shared.key": "Error {0}"}}),
    }


@pytest.fixture
def partitioned_localizer(partitioned_catalogs):
    """Localizer with dedicated response and error catalogs."""
    return Localizer(**partitioned_catalogs)
