"""Lazily produced, lazily resolved entities."""

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class DeferredResolution(Generic[T]):
    """Thunk that produces and resolves an entity on first call.

    The supplier runs at most once; later calls return the same resolved
    entity. If resolution raises, the produced entity is kept and only the
    resolution step is retried on the next call.

    Example:
        deferred = localizer.resolve_deferred(lambda: build_response())
        ...
        response = deferred()  # supplier runs and the message is filled here
    """

    def __init__(
        self,
        supplier: Optional[Callable[[], Optional[T]]],
        resolve: Callable[[Optional[T]], Optional[T]],
    ):
        self._supplier = supplier
        self._resolve = resolve
        self._entity: Optional[T] = None
        self._produced = False
        self._value: Optional[T] = None
        self._forced = False

    @property
    def forced(self) -> bool:
        """Whether the entity has been produced and resolved."""
        return self._forced

    def __call__(self) -> Optional[T]:
        if self._forced:
            return self._value

        if not self._produced:
            supplier, self._supplier = self._supplier, None
            self._produced = True
            self._entity = supplier() if supplier is not None else None

        self._value = self._resolve(self._entity)
        self._forced = True
        self._entity = None
        return self._value

    def get(self) -> Optional[T]:
        """Alias for calling the thunk."""
        return self()
