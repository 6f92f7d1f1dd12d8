"""Locale models for the i18n system.

Defines the locale value type and the request-scoped locale context the
caller hands to the localizer.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

# language[-Script][-REGION], region is two letters or a UN M.49 code
_LOCALE_TAG = re.compile(
    r"^(?P<language>[A-Za-z]{2,8})"
    r"(?:-(?P<script>[A-Za-z]{4}))?"
    r"(?:-(?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)


@dataclass(frozen=True)
class Locale:
    """A language/script/region identifier.

    Accepts both IETF BCP 47 (``en-US``, ``zh-Hant-TW``, ``es-419``) and
    POSIX style (``en_US``) tags. Frozen to ensure immutability and
    hashability for catalog lookups.

    Attributes:
        language: Lowercase language code (e.g., "en").
        region: Uppercase region code (e.g., "US", "419"), empty if absent.
        script: Title-case script code (e.g., "Hant"), empty if absent.
    """

    language: str
    region: str = ""
    script: str = ""

    def __post_init__(self):
        if not self.language:
            raise ValueError("Locale language must not be empty")
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())
        object.__setattr__(self, "script", self.script.title())

    def __str__(self) -> str:
        """Return the BCP 47 tag (e.g., "en-US", "zh-Hant-TW")."""
        parts = (self.language, self.script, self.region)
        return "-".join(part for part in parts if part)

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse a locale tag.

        Args:
            locale_str: Locale string (e.g., "en-US", "en_US", "fr", "es-419").

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If locale_str is empty or malformed.
        """
        match = _LOCALE_TAG.match((locale_str or "").strip().replace("_", "-"))
        if match is None:
            raise ValueError(f"Unsupported locale: {locale_str!r}")

        return cls(
            language=match.group("language"),
            region=match.group("region") or "",
            script=match.group("script") or "",
        )

    @classmethod
    def of(cls, value: Union["Locale", str]) -> "Locale":
        """Return value as a Locale, parsing strings."""
        if isinstance(value, Locale):
            return value
        return cls.from_string(value)

    @property
    def parent(self) -> Optional["Locale"]:
        """Next less specific locale: drops the region, then the script."""
        if self.region:
            return Locale(language=self.language, script=self.script)
        if self.script:
            return Locale(language=self.language)
        return None


DEFAULT_LOCALE = Locale(language="en", region="US")


@dataclass
class LocaleContext:
    """Request-scoped locale for resolving messages.

    Created by the caller (per request, per command) and passed to the
    localizer explicitly. A context that resolves to None leaves the choice
    to the localizer's configured default locale.

    Attributes:
        locale: Active locale for the current request (if known).
        default_locale: Per-request fallback when no active locale is set.
    """

    locale: Optional[Locale] = None
    default_locale: Optional[Locale] = None

    def resolve(self) -> Optional[Locale]:
        """Return the active locale, else the context default, else None."""
        if self.locale is not None:
            return self.locale
        return self.default_locale
