"""Localizer adapters.

Exports:
    Localizer: Resolves message codes on responses and exceptions
    DeferredResolution: Thunk returned by Localizer.resolve_deferred
    create_localizer: Factory building a Localizer from settings
"""

from localizer.adapters.deferred import DeferredResolution
from localizer.adapters.factory import create_localizer
from localizer.adapters.localizer import Localizer

__all__ = [
    "DeferredResolution",
    "Localizer",
    "create_localizer",
]
