"""Errors raised by message catalogs."""

from typing import Any


class LocalizationError(Exception):
    """Base class for message resolution failures."""


class MessageNotFoundError(LocalizationError, KeyError):
    """Raised when a message code has no entry along a catalog's fallback chain.

    Attributes:
        key: The message code that could not be resolved.
        locale: The locale the lookup was made for.
    """

    def __init__(self, key: str, locale: Any):
        self.key = key
        self.locale = locale
        super().__init__(f"No message found under code '{key}' for locale '{locale}'")

    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0])


class MessageFormatError(LocalizationError, ValueError):
    """Raised when a template references a parameter that was not supplied.

    Attributes:
        template: The template being formatted.
        index: The placeholder index with no matching parameter.
        param_count: Number of parameters supplied.
    """

    def __init__(self, template: str, index: int, param_count: int):
        self.template = template
        self.index = index
        self.param_count = param_count
        super().__init__(
            f"Placeholder {{{index}}} has no matching parameter "
            f"({param_count} supplied) in template: {template}"
        )
