"""Message catalog interface and in-memory implementation.

A catalog maps a message code and locale to a template and substitutes
positional parameters (``{0}``, ``{1}``...) into it.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from localizer.i18n.errors import MessageFormatError, MessageNotFoundError
from localizer.i18n.models import Locale
from localizer.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def format_message(template: str, params: Sequence[Any]) -> str:
    """Substitute positional parameters into a template.

    Templates are returned verbatim when no parameters are given, so literal
    braces in parameterless messages are left alone. Extra parameters are
    ignored.

    Args:
        template: Message template with ``{n}`` placeholders.
        params: Ordered parameters.

    Returns:
        The substituted message.

    Raises:
        MessageFormatError: If a placeholder index has no parameter.
    """
    if not params:
        return template

    def _substitute(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if index >= len(params):
            raise MessageFormatError(template, index, len(params))
        return str(params[index])

    return _PLACEHOLDER.sub(_substitute, template)


class MessageCatalog(ABC):
    """Abstract base for message catalogs.

    Implementations must be safe to share between threads once populated.
    """

    @abstractmethod
    def lookup(self, key: str, params: Sequence[Any], locale: Locale) -> str:
        """Resolve a message code to substituted text.

        Args:
            key: Message code.
            params: Ordered substitution parameters.
            locale: Locale to resolve for.

        Returns:
            Fully substituted message.

        Raises:
            MessageNotFoundError: If the key has no entry for the locale or
                any fallback the catalog defines.
            MessageFormatError: If the parameters do not fit the template.
        """

    @abstractmethod
    def has_message(self, key: str, locale: Locale) -> bool:
        """Check if the key resolves for the locale."""


class StaticMessageCatalog(MessageCatalog):
    """In-memory catalog populated programmatically.

    Lookup order for a locale such as ``fr-CA``: ``fr-CA``, ``fr``, the
    fallback locale and its less specific forms, then the parent catalog.
    Script tags step down the same way: ``zh-Hant-TW``, ``zh-Hant``, ``zh``.

    Attributes:
        fallback_locale: Locale tried after the requested locale's chain.
        parent: Optional catalog consulted when this one has no entry.
        use_code_as_default_message: Return the key instead of raising.
        templates: Nested dict structure {locale: {key: template}}.
    """

    def __init__(
        self,
        fallback_locale: Optional[Locale] = None,
        parent: Optional[MessageCatalog] = None,
        use_code_as_default_message: bool = False,
    ):
        self.fallback_locale = fallback_locale
        self.parent = parent
        self.use_code_as_default_message = use_code_as_default_message
        self.templates: Dict[Locale, Dict[str, str]] = {}

    def add_message(
        self, key: str, locale: Union[Locale, str], template: str
    ) -> None:
        """Register a template for a key and locale."""
        self.templates.setdefault(Locale.of(locale), {})[key] = template

    def add_messages(
        self, messages: Mapping[str, str], locale: Union[Locale, str]
    ) -> None:
        """Register several templates for one locale."""
        self.templates.setdefault(Locale.of(locale), {}).update(messages)

    def has_message(self, key: str, locale: Locale) -> bool:
        if self._find_template(key, locale) is not None:
            return True
        return self.parent is not None and self.parent.has_message(key, locale)

    def lookup(self, key: str, params: Sequence[Any], locale: Locale) -> str:
        template = self._find_template(key, locale)

        if template is None:
            if self.parent is not None and self.parent.has_message(key, locale):
                return self.parent.lookup(key, params, locale)

            if self.use_code_as_default_message:
                logger.info("used_code_as_message", key=key, locale=str(locale))
                return key

            logger.error(
                "message_not_found",
                key=key,
                locale=str(locale),
                fallback_locale=str(self.fallback_locale),
            )
            raise MessageNotFoundError(key, locale)

        return format_message(template, params)

    def _candidate_locales(self, locale: Locale) -> List[Locale]:
        candidates: List[Locale] = []
        for start in (locale, self.fallback_locale):
            candidate = start
            while candidate is not None:
                if candidate not in candidates:
                    candidates.append(candidate)
                candidate = candidate.parent
        return candidates

    def _find_template(self, key: str, locale: Locale) -> Optional[str]:
        for candidate in self._candidate_locales(locale):
            template = self.templates.get(candidate, {}).get(key)
            if template is not None:
                if candidate != locale:
                    logger.debug(
                        "used_fallback_message",
                        key=key,
                        requested_locale=str(locale),
                        resolved_locale=str(candidate),
                    )
                return template
        return None
