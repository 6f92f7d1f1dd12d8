"""Localizer adapter: fills localizable entities from message catalogs.

The Localizer routes response-kind entities to the response catalog and
error-kind entities to the error catalog; anything else goes through the
general catalog. With a single catalog configured all three are the same.

Locale selection is explicit. Every operation takes an optional ``locale``
and an optional request-scoped ``context``; the explicit locale wins, then
``context.resolve()`` when it yields a locale, then the Localizer's default
locale.

Usage:
    from localizer.adapters import Localizer
    from localizer.i18n import LocaleContext, StaticMessageCatalog

    catalog = StaticMessageCatalog()
    catalog.add_message("user.created", "en-US", "User {0} created")

    localizer = Localizer(catalog)
    response = localizer.resolve(
        ApiResponse(message_code="user.created", params=["alice"]),
        context=LocaleContext(locale=Locale.from_string("en-US")),
    )
    response.message  # "User alice created"
"""

from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from localizer.adapters.deferred import DeferredResolution
from localizer.i18n.catalog import MessageCatalog
from localizer.i18n.models import DEFAULT_LOCALE, Locale, LocaleContext
from localizer.logging import get_module_logger
from localizer.models.localizable import Localizable, LocalizableKind
from localizer.models.responses import ErrorPayload, StatusLike

logger = get_module_logger()

T = TypeVar("T", bound=Localizable)

LocaleLike = Union[Locale, str]


class Localizer:
    """Resolves message codes on responses and exceptions.

    Catalog failures (missing keys, malformed parameters) propagate to the
    caller unchanged. Only absent entities and absent codes are handled here.

    Attributes:
        catalog: General catalog.
        response_catalog: Catalog for response-kind entities.
        error_catalog: Catalog for error-kind entities.
        default_locale: Locale used when no locale or context is given.
    """

    def __init__(
        self,
        catalog: MessageCatalog,
        response_catalog: Optional[MessageCatalog] = None,
        error_catalog: Optional[MessageCatalog] = None,
        default_locale: LocaleLike = DEFAULT_LOCALE,
    ):
        """Initialize Localizer.

        Args:
            catalog: General catalog; also used for responses and errors
                when no dedicated catalog is given.
            response_catalog: Optional catalog for response-kind entities.
            error_catalog: Optional catalog for error-kind entities.
            default_locale: Locale for calls without locale or context.
        """
        self.catalog = catalog
        self.response_catalog = (
            response_catalog if response_catalog is not None else catalog
        )
        self.error_catalog = error_catalog if error_catalog is not None else catalog
        self.default_locale = Locale.of(default_locale)
        logger.info(
            "initialized_localizer",
            default_locale=str(self.default_locale),
            partitioned=self.is_partitioned,
        )

    @property
    def is_partitioned(self) -> bool:
        """True when responses or errors use a catalog other than the general one."""
        return (
            self.response_catalog is not self.catalog
            or self.error_catalog is not self.catalog
        )

    def get_message(
        self,
        key: str,
        *params: Any,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> str:
        """Look up a message in the general catalog.

        Args:
            key: Message code.
            *params: Positional substitution parameters.
            locale: Explicit locale, takes precedence over context.
            context: Request-scoped locale context.

        Returns:
            The substituted message.

        Raises:
            MessageNotFoundError: If the catalog cannot resolve the key.
        """
        return self.catalog.lookup(key, params, self._select_locale(locale, context))

    def get_response_message(
        self,
        key: str,
        *params: Any,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> str:
        """Look up a message in the response catalog."""
        return self.response_catalog.lookup(
            key, params, self._select_locale(locale, context)
        )

    def get_error_message(
        self,
        key: str,
        *params: Any,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> str:
        """Look up a message in the error catalog."""
        return self.error_catalog.lookup(
            key, params, self._select_locale(locale, context)
        )

    def resolve(
        self,
        entity: Optional[T],
        message_code: Optional[str] = None,
        *,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> Optional[T]:
        """Fill in the message of a response or exception.

        Args:
            entity: Response or exception to localize.
            message_code: Optional code used instead of the entity's own; None
                or "" means the entity's own code is used.
            locale: Explicit locale, takes precedence over context.
            context: Request-scoped locale context.

        Returns:
            The same entity with ``message`` set, the entity unchanged if it
            has no code, or None if entity is None.

        Raises:
            MessageNotFoundError: If the catalog cannot resolve the code.
            MessageFormatError: If the params do not fit the template.
        """
        if entity is None:
            return None

        code = message_code or entity.message_code
        if not code:
            return entity

        target = self._select_locale(locale, context)
        kind = getattr(entity, "kind", None)
        catalog = self._catalog_for(kind)
        entity.message = catalog.lookup(code, tuple(entity.params or ()), target)

        logger.debug(
            "resolved_message",
            message_code=code,
            kind=kind.value if isinstance(kind, LocalizableKind) else None,
            locale=str(target),
        )
        return entity

    def resolve_code(
        self,
        message_code: Optional[str],
        *params: Any,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> Optional[str]:
        """Look up a bare code in the response catalog.

        Returns:
            The substituted message, or None if message_code is None.
        """
        if message_code is None:
            return None
        return self.get_response_message(
            message_code, *params, locale=locale, context=context
        )

    def resolve_deferred(
        self,
        supplier: Optional[Callable[[], Optional[T]]],
        *,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> DeferredResolution[T]:
        """Wrap an entity supplier so resolution happens when it is consumed.

        The supplier is not called here. The returned thunk calls it once,
        resolves the result like ``resolve`` does, and memoizes it.
        """
        return DeferredResolution(
            supplier,
            lambda entity: self.resolve(entity, locale=locale, context=context),
        )

    def error_message_of(
        self,
        exc: Optional[Localizable],
        *,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> Optional[str]:
        """Resolve an exception's message without modifying it.

        Returns:
            The error message, or None if exc is None or has no code.
        """
        if exc is None or not exc.message_code:
            return None
        return self.get_error_message(
            exc.message_code,
            *(exc.params or ()),
            locale=locale,
            context=context,
        )

    def build_error_payload(
        self,
        exc: Optional[Localizable],
        status: StatusLike,
        *,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> ErrorPayload:
        """Build an ErrorPayload for an exception.

        Resolves the exception's message (and stores it on the exception),
        then returns a payload with status, reason, details and field
        errors. Exceptions without a code produce the default payload.

        Args:
            exc: The exception being handled.
            status: Status code to report.
            locale: Explicit locale, takes precedence over context.
            context: Request-scoped locale context.

        Returns:
            ErrorPayload for the exception.
        """
        message = self.error_message_of(exc, locale=locale, context=context)
        if message is None:
            logger.debug("built_default_error_payload")
            return ErrorPayload.default()

        exc.message = message
        return ErrorPayload.of(
            message,
            status,
            getattr(exc, "details", None),
            field_errors=getattr(exc, "field_errors", None),
        )

    def build_error_payload_for_code(
        self,
        message_code: Optional[str],
        status: StatusLike,
        *params: Any,
        details: Optional[Mapping[str, Any]] = None,
        locale: Optional[LocaleLike] = None,
        context: Optional[LocaleContext] = None,
    ) -> ErrorPayload:
        """Build an ErrorPayload from a bare error code.

        Returns:
            ErrorPayload with the resolved message, or the default payload
            when message_code is empty.
        """
        if not message_code:
            return ErrorPayload.default()

        message = self.get_error_message(
            message_code, *params, locale=locale, context=context
        )
        return ErrorPayload.of(message, status, details)

    def _select_locale(
        self,
        locale: Optional[LocaleLike],
        context: Optional[LocaleContext],
    ) -> Locale:
        if locale is not None:
            return Locale.of(locale)
        if context is not None:
            resolved = context.resolve()
            if resolved is not None:
                return resolved
        return self.default_locale

    def _catalog_for(self, kind: Optional[LocalizableKind]) -> MessageCatalog:
        if kind == LocalizableKind.RESPONSE:
            return self.response_catalog
        if kind == LocalizableKind.ERROR:
            return self.error_catalog
        return self.catalog
