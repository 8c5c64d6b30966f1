"""Optional values, lazily built single-object storage and type defaults."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


class Placement(Generic[T]):
    """Storage for at most one object, built on demand."""

    def __init__(self) -> None:
        self._obj: Any = _EMPTY

    def emplace(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Build an object with `factory(*args, **kwargs)`, store and return it."""
        self._obj = factory(*args, **kwargs)
        return self._obj

    def get(self) -> T:
        """The stored object; LookupError if nothing has been built."""
        if self._obj is _EMPTY:
            raise LookupError("placement holds no object")
        return self._obj

    def destroy(self) -> None:
        """Drop the stored object."""
        self._obj = _EMPTY

    def __repr__(self) -> str:
        if self._obj is _EMPTY:
            return "Placement()"
        return f"Placement({self._obj!r})"


class Maybe(Generic[T]):
    """A value that may or may not be present."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: T) -> None:
        if len(args) > 1:
            raise TypeError(f"Maybe takes at most one value, got {len(args)}")
        self._value: Any = args[0] if args else _EMPTY

    def update(self, value: T) -> None:
        """Make the value present and set it to `value`."""
        self._value = value

    def force_effective(self, factory: Callable[[], T]) -> None:
        """If absent, make present with a value built by `factory()`."""
        if self._value is _EMPTY:
            self._value = factory()

    def is_present(self) -> bool:
        """True if a value is present."""
        return self._value is not _EMPTY

    def get(self) -> T | None:
        """The value if present, otherwise None."""
        return None if self._value is _EMPTY else self._value

    def reset(self) -> None:
        """Make the value absent."""
        self._value = _EMPTY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.is_present() != other.is_present():
            return False
        if not self.is_present():
            return True
        return bool(self._value == other._value)

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "Maybe()"
        return f"Maybe({self._value!r})"


def default_value(kind: Any) -> Any:
    """The default value of `kind`: `kind()`, or None when `kind` is None."""
    if kind is None or kind is type(None):
        return None
    return kind()