"""Factory functions for creating localizers.

Provides a convenience function for initializing a Localizer with the
configured default and fallback locales.
"""

from typing import Optional

import structlog
from localizer.adapters.localizer import Localizer
from localizer.configuration import Settings
from localizer.i18n.catalog import MessageCatalog, StaticMessageCatalog
from localizer.i18n.models import Locale

logger = structlog.get_logger()


def create_localizer(
    catalog: Optional[MessageCatalog] = None,
    response_catalog: Optional[MessageCatalog] = None,
    error_catalog: Optional[MessageCatalog] = None,
    settings: Optional[Settings] = None,
) -> Localizer:
    """Create and configure a Localizer instance.

    If no general catalog is provided, an empty StaticMessageCatalog is
    created using the configured fallback locale, ready to be populated.

    Args:
        catalog: General catalog (default: new StaticMessageCatalog)
        response_catalog: Optional catalog for responses
        error_catalog: Optional catalog for errors
        settings: Settings to read locales from (default: loaded from env)

    Returns:
        Localizer: Configured localizer instance

    Usage:
        # Single catalog
        localizer = create_localizer(catalog=messages)

        # Separate general, response and error catalogs
        localizer = create_localizer(
            catalog=messages,
            response_catalog=responses,
            error_catalog=errors,
        )
    """
    settings = settings or Settings()
    localization = settings.localization

    if catalog is None:
        catalog = StaticMessageCatalog(
            fallback_locale=Locale.from_string(localization.fallback_locale),
            use_code_as_default_message=localization.use_code_as_default_message,
        )

    localizer = Localizer(
        catalog,
        response_catalog=response_catalog,
        error_catalog=error_catalog,
        default_locale=Locale.from_string(localization.default_locale),
    )

    logger.info(
        "localizer_created",
        default_locale=localization.default_locale,
        partitioned=localizer.is_partitioned,
    )
    return localizer
