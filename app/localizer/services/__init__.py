"""Application-scoped service providers."""

from localizer.services.providers import get_localizer, get_settings

__all__ = ["get_localizer", "get_settings"]
