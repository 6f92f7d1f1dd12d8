"""Message resolution settings."""

from pydantic import Field, field_validator

from localizer.configuration.base import LocalizerBaseSettings


class LocalizationSettings(LocalizerBaseSettings):
    """Locale and catalog configuration for message resolution.

    Environment Variables:
        LOCALIZER_DEFAULT_LOCALE: Locale used when the caller passes neither
            an explicit locale nor a locale context (default: en-US)
        LOCALIZER_FALLBACK_LOCALE: Locale a catalog falls back to when a key
            is missing for the requested locale (default: en-US)
        LOCALIZER_USE_CODE_AS_DEFAULT_MESSAGE: Return the message code itself
            instead of raising when a key cannot be resolved (default: False)

    Example:
        ```python
        from localizer.services import get_settings

        settings = get_settings()
        default_locale = settings.localization.default_locale
        ```
    """

    default_locale: str = Field(
        default="en-US",
        alias="LOCALIZER_DEFAULT_LOCALE",
        description="Locale used when no locale or context is supplied",
    )
    fallback_locale: str = Field(
        default="en-US",
        alias="LOCALIZER_FALLBACK_LOCALE",
        description="Catalog fallback locale for missing keys",
    )
    use_code_as_default_message: bool = Field(
        default=False,
        alias="LOCALIZER_USE_CODE_AS_DEFAULT_MESSAGE",
        description="Return the message code when a key cannot be resolved",
    )

    @field_validator("default_locale", "fallback_locale")
    @classmethod
    def validate_locale_tag(cls, value: str) -> str:
        """Reject empty locale tags early."""
        if not value or not value.strip():
            raise ValueError("Locale tag must not be empty")
        return value.strip()
