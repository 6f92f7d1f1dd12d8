"""Capability shared by every object the localizer can fill in."""

from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable


class LocalizableKind(str, Enum):
    """Which catalog partition an entity's message code belongs to."""

    RESPONSE = "response"
    ERROR = "error"


@runtime_checkable
class Localizable(Protocol):
    """Structural contract for responses and exceptions carrying a message code.

    Attributes:
        kind: Catalog partition for the message code.
        message_code: Catalog key, or None when there is nothing to resolve.
        params: Ordered substitution parameters.
        details: Extra context reported alongside errors.
        message: Resolved text, empty until the localizer fills it in.
    """

    kind: LocalizableKind
    message_code: Optional[str]
    params: Sequence[Any]
    details: Mapping[str, Any]
    message: str
