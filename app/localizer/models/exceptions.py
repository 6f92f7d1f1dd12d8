"""Localizable exceptions raised on failure paths."""

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence

from localizer.models.localizable import LocalizableKind


class ApiException(Exception):
    """Exception carrying a message code to be resolved by the localizer.

    Subclasses usually pin ``default_message_code``; the message is filled in
    by ``Localizer.resolve`` and returned by ``str(exc)``.

    Example:
        class UserNotFound(ApiException):
            default_message_code = "user.not_found"

        raise localizer.resolve(UserNotFound("alice"), locale="fr-FR")
    """

    kind: ClassVar[LocalizableKind] = LocalizableKind.ERROR
    default_message_code: ClassVar[Optional[str]] = None

    def __init__(
        self,
        *params: Any,
        message_code: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        field_errors: Optional[Sequence[Mapping[str, Any]]] = None,
    ):
        super().__init__(*params)
        self.message_code: Optional[str] = (
            message_code if message_code is not None else self.default_message_code
        )
        self.params: List[Any] = list(params)
        self.details: Dict[str, Any] = dict(details) if details else {}
        self.field_errors: List[Dict[str, Any]] = [
            dict(error) for error in field_errors or []
        ]
        self.message = ""

    def __str__(self) -> str:
        return self.message
