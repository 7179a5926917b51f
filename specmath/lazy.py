"""Values computed on first access."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET = object()


class LazyValue(Generic[T]):
    """Holds a value built by ``constructor`` the first time it is needed."""

    __slots__ = ("_constructor", "_value")

    def __init__(self, constructor: Callable[[], T]) -> None:
        self._constructor = constructor
        self._value: object = _UNSET

    def get(self) -> T:
        """Return the value, building it on the first call."""
        if self._value is _UNSET:
            self._value = self._constructor()
        return self._value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self._value is not _UNSET


class LazyPtr(Generic[T]):
    """Holds an object built on first access; the constructor must not return ``None``."""

    __slots__ = ("_constructor", "_value")

    def __init__(self, constructor: Callable[[], Optional[T]]) -> None:
        self._constructor = constructor
        self._value: Optional[T] = None

    def get(self) -> T:
        """Return the object, building it if needed.

        Raises ``RuntimeError`` when the constructor yields ``None``.
        """
        if self._value is None:
            self._value = self._constructor()
            if self._value is None:
                raise RuntimeError("Incorrect constructor in LazyPtr")
        return self._value


def make_lazy(constructor: Callable[[], T]) -> LazyValue[T]:
    """Wrap ``constructor`` in a :class:`LazyValue`."""
    return LazyValue(constructor)


def make_lazy_ptr(constructor: Callable[[], Optional[T]]) -> LazyPtr[T]:
    """Wrap ``constructor`` in a :class:`LazyPtr`."""
    return LazyPtr(constructor)