"""Localizer - resolves message codes on API responses and exceptions.

Example:
    from localizer import ApiResponse, Localizer, StaticMessageCatalog

    catalog = StaticMessageCatalog()
    catalog.add_message("response.key", "en-US", "Response Message {0}")

    localizer = Localizer(catalog)
    localizer.resolve(ApiResponse(message_code="response.key", params=["Two"]))
"""

from localizer.adapters import DeferredResolution, Localizer, create_localizer
from localizer.i18n import (
    Locale,
    LocaleContext,
    LocalizationError,
    MessageCatalog,
    MessageFormatError,
    MessageNotFoundError,
    StaticMessageCatalog,
)
from localizer.models import (
    ApiException,
    ApiResponse,
    ErrorPayload,
    Localizable,
    LocalizableKind,
)

__all__ = [
    "ApiException",
    "ApiResponse",
    "DeferredResolution",
    "ErrorPayload",
    "Locale",
    "LocaleContext",
    "Localizable",
    "LocalizableKind",
    "LocalizationError",
    "Localizer",
    "MessageCatalog",
    "MessageFormatError",
    "MessageNotFoundError",
    "StaticMessageCatalog",
    "create_localizer",
]
