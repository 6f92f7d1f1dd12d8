"""Fixtures for localizer.i18n tests."""

import pytest

from tests.factories.localizer import EN_US, make_catalog


@pytest.fixture
def catalog():
    """Catalog with en-US and fr-FR messages and no fallback locale."""
    return make_catalog()


@pytest.fixture
def catalog_with_fallback():
    """Catalog falling back to en-US for missing keys."""
    return make_catalog(fallback_locale=EN_US)
