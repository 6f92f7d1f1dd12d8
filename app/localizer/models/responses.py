"""Response carriers: localizable success responses and error payloads.

Usage:
    from localizer.models import ApiResponse, ErrorPayload

    response = ApiResponse(message_code="user.created", params=["alice"])
    localizer.resolve(response)
    response.model_dump()  # {"message": "User alice created"}

    payload = ErrorPayload.of("Not found", HTTPStatus.NOT_FOUND, {"id": 7})
"""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ConfigDict, Field

from localizer.models.base import LocalizerModel
from localizer.models.localizable import LocalizableKind

DEFAULT_ERROR_MESSAGE = "An error has occurred"

StatusLike = Union[HTTPStatus, int, str]


class ApiResponse(LocalizerModel):
    """Outbound success payload with a localizable message.

    Only ``message`` (and fields added by subclasses) are serialized; the
    message code, parameters and details stay internal.

    Example:
        >>> class UserCreated(ApiResponse):
        ...     user_id: str
        >>> response = UserCreated(user_id="42", message_code="user.created")
    """

    kind: ClassVar[LocalizableKind] = LocalizableKind.RESPONSE

    message_code: Optional[str] = Field(default=None, exclude=True)
    params: List[Any] = Field(default_factory=list, exclude=True)
    details: Dict[str, Any] = Field(default_factory=dict, exclude=True)
    message: str = Field(default="", description="Resolved human-readable message")


def reason_phrase(status: Optional[StatusLike]) -> Optional[str]:
    """Return the HTTP reason phrase for a status, or None if unknown.

    Example:
        >>> reason_phrase(400)
        'Bad Request'
    """
    if status is None:
        return None
    try:
        return HTTPStatus(int(status)).phrase
    except (TypeError, ValueError):
        return None


def _status_value(status: StatusLike) -> Union[int, str]:
    if isinstance(status, HTTPStatus):
        return status.value
    return status


class ErrorPayload(LocalizerModel):
    """Structured error body returned to callers.

    Built fresh for every handled error and immutable afterwards.

    Attributes:
        message: Human-readable (localized) error message
        reason: Reason phrase derived from status
        status: Status code
        timestamp: When the payload was built (UTC)
        details: Additional details explaining the error
        field_errors: Per-field validation errors
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human-readable error message")
    reason: Optional[str] = Field(default=None, description="Status reason phrase")
    status: Optional[Union[int, str]] = Field(default=None, description="Status code")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    details: Optional[Dict[str, Any]] = Field(default_factory=dict)
    field_errors: List[Dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def of(
        cls,
        message: str,
        status: StatusLike,
        details: Optional[Mapping[str, Any]] = None,
        field_errors: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> "ErrorPayload":
        """Create a payload with message, status, reason and details.

        Args:
            message: The error message.
            status: Status code (int, str or HTTPStatus).
            details: Other details that explain the error.
            field_errors: Optional per-field errors.

        Returns:
            ErrorPayload with the current timestamp.
        """
        return cls(
            message=message,
            reason=reason_phrase(status),
            status=_status_value(status),
            timestamp=datetime.now(timezone.utc),
            details=dict(details) if details is not None else {},
            field_errors=[dict(error) for error in field_errors or []],
        )

    @classmethod
    def with_field_errors(
        cls,
        message: str,
        status: StatusLike,
        field_errors: Sequence[Mapping[str, Any]],
    ) -> "ErrorPayload":
        """Create a validation payload carrying per-field errors and no details."""
        return cls(
            message=message,
            reason=reason_phrase(status),
            status=_status_value(status),
            timestamp=datetime.now(timezone.utc),
            details=None,
            field_errors=[dict(error) for error in field_errors],
        )

    @classmethod
    def default(cls) -> "ErrorPayload":
        """Create a payload with the generic message and current timestamp only."""
        return cls(
            message=DEFAULT_ERROR_MESSAGE,
            timestamp=datetime.now(timezone.utc),
        )
