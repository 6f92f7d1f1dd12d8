"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the localizer.
"""

from functools import lru_cache

from localizer.adapters import Localizer, create_localizer
from localizer.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_localizer() -> Localizer:
    """
    Get application-scoped Localizer singleton.

    Returns:
        Localizer: Cached localizer with an empty general catalog, configured
        from application settings. Populate ``get_localizer().catalog`` at
        startup before serving requests.
    """
    return create_localizer(settings=get_settings())
