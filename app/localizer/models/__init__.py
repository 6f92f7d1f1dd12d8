"""Localizable entities and error payloads.

Exports:
    Localizable: Capability protocol the localizer operates on
    LocalizableKind: Response or error partition
    ApiResponse: Localizable success response
    ApiException: Localizable exception
    ErrorPayload: Structured error body
    LocalizerModel: Base model configuration
"""

from localizer.models.base import LocalizerModel
from localizer.models.exceptions import ApiException
from localizer.models.localizable import Localizable, LocalizableKind
from localizer.models.responses import (
    DEFAULT_ERROR_MESSAGE,
    ApiResponse,
    ErrorPayload,
    reason_phrase,
)

__all__ = [
    "ApiException",
    "ApiResponse",
    "DEFAULT_ERROR_MESSAGE",
    "ErrorPayload",
    "Localizable",
    "LocalizableKind",
    "LocalizerModel",
    "reason_phrase",
]
