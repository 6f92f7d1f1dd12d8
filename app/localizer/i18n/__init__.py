"""i18n system - locales and message catalogs.

Main components:
- models: Locale, LocaleContext
- catalog: MessageCatalog and StaticMessageCatalog with positional substitution
- errors: LocalizationError, MessageNotFoundError, MessageFormatError
"""

from localizer.i18n.catalog import (
    MessageCatalog,
    StaticMessageCatalog,
    format_message,
)
from localizer.i18n.errors import (
    LocalizationError,
    MessageFormatError,
    MessageNotFoundError,
)
from localizer.i18n.models import DEFAULT_LOCALE, Locale, LocaleContext

__all__ = [
    "DEFAULT_LOCALE",
    "Locale",
    "LocaleContext",
    "MessageCatalog",
    "StaticMessageCatalog",
    "format_message",
    "LocalizationError",
    "MessageFormatError",
    "MessageNotFoundError",
]
