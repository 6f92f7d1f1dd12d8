"""Tests for localizer.adapters.factory and localizer.services.providers."""

from unittest.mock import Mock

import pytest

from localizer.adapters import Localizer, create_localizer
from localizer.configuration import LocalizationSettings, Settings
from localizer.i18n import MessageCatalog, StaticMessageCatalog
from localizer.services import get_localizer, get_settings
from tests.factories.localizer import EN_US, FR_FR


@pytest.fixture
def french_settings():
    """Settings defaulting to fr-FR with an en-US fallback."""
    return Settings(
        localization=LocalizationSettings(
            LOCALIZER_DEFAULT_LOCALE="fr-FR",
            LOCALIZER_FALLBACK_LOCALE="en-US",
        )
    )


@pytest.mark.unit
class TestCreateLocalizer:
    """Tests for create_localizer()."""

    def test_creates_empty_static_catalog(self, french_settings):
        """Without a catalog an empty StaticMessageCatalog is created."""
        localizer = create_localizer(settings=french_settings)

        assert isinstance(localizer, Localizer)
        assert isinstance(localizer.catalog, StaticMessageCatalog)
        assert localizer.catalog.templates == {}
        assert localizer.catalog.fallback_locale == EN_US
        assert localizer.default_locale == FR_FR

    def test_default_catalog_uses_fallback(self, french_settings):
        """The created catalog falls back to the configured locale."""
        localizer = create_localizer(settings=french_settings)
        localizer.catalog.add_message("welcome", EN_US, "Welcome {0}")

        assert localizer.get_message("welcome", "Ada") == "Welcome Ada"

    def test_uses_given_catalogs(self, french_settings):
        """Given catalogs are wired into their partitions."""
        general = Mock(spec=MessageCatalog)
        errors = Mock(spec=MessageCatalog)

        localizer = create_localizer(
            catalog=general, error_catalog=errors, settings=french_settings
        )

        assert localizer.catalog is general
        assert localizer.response_catalog is general
        assert localizer.error_catalog is errors

    def test_use_code_as_default_message_setting(self, monkeypatch):
        """LOCALIZER_USE_CODE_AS_DEFAULT_MESSAGE reaches the catalog."""
        monkeypatch.setenv("LOCALIZER_USE_CODE_AS_DEFAULT_MESSAGE", "true")

        localizer = create_localizer(settings=Settings())

        assert localizer.get_message("missing.key") == "missing.key"

    def test_loads_settings_when_not_given(self, monkeypatch):
        """Settings are read from the environment by default."""
        monkeypatch.setenv("LOCALIZER_DEFAULT_LOCALE", "fr_FR")

        assert create_localizer().default_locale == FR_FR

    def test_numeric_region_default_locale(self, monkeypatch):
        """BCP 47 tags with numeric regions are valid defaults."""
        monkeypatch.setenv("LOCALIZER_DEFAULT_LOCALE", "es-419")

        assert str(create_localizer().default_locale) == "es-419"


@pytest.mark.unit
class TestProviders:
    """Tests for application-scoped providers."""

    def test_get_settings_singleton(self):
        """get_settings() returns the same instance."""
        assert get_settings() is get_settings()

    def test_get_localizer_singleton(self):
        """get_localizer() returns the same instance."""
        get_localizer.cache_clear()
        try:
            assert get_localizer() is get_localizer()
            assert isinstance(get_localizer(), Localizer)
        finally:
            get_localizer.cache_clear()
