"""Configuration module - public API.

Centralized configuration management for the localizer using Pydantic
BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Locale and catalog settings section

Example:
    ```python
    from localizer.services import get_settings

    settings = get_settings()
    default_locale = settings.localization.default_locale
    ```
"""

from localizer.configuration.settings import Settings
from localizer.configuration.localization import LocalizationSettings

__all__ = ["Settings", "LocalizationSettings"]
