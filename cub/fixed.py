"""Fixed-size containers: arrays and byte buffers."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class FixSizeArray(Generic[T]):
    """Array of `max_size` slots with a usable capacity of at most `max_size`."""

    def __init__(self, max_size: int, size: int | None = None) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._actual = max_size if size is None else min(size, max_size)
        self._items: list[Any] = [0] * max_size

    def capacity(self) -> int:
        """The usable size."""
        return self._actual

    def reset(self) -> None:
        """Zero every slot."""
        self._items = [0] * self._max_size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._max_size:
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._items[index] = value


class FixSizeBuff:
    """A byte buffer of fixed length."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, data: bytes | bytearray | None = None) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._buff = bytearray(size)
        if data is not None:
            self.update(data)

    def __len__(self) -> int:
        return self._size

    def __bytes__(self) -> bytes:
        return bytes(self._buff)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixSizeBuff):
            return NotImplemented
        return self._size == other._size and self._buff == other._buff

    def update(self, data: bytes | bytearray) -> None:
        """Copy the first `len(self)` bytes of `data` into the buffer."""
        if len(data) < self._size:
            raise ValueError(f"need {self._size} bytes, got {len(data)}")
        self._buff[:] = data[: self._size]

    def matches(self, content: bytes | bytearray) -> bool:
        """True if the first `len(self)` bytes of `content` equal the buffer."""
        if len(content) < self._size:
            return False
        return bytes(content[: self._size]) == bytes(self._buff)

    def __repr__(self) -> str:
        return f"FixSizeBuff({self._size}, {bytes(self._buff)!r})"


class Array(Generic[T]):
    """A fixed number of elements, each built by the same factory."""

    def __init__(self, size: int, factory: Callable[..., T], *args: Any) -> None:
        if size <= 0:
            raise ValueError("Array size must be positive")
        self._factory = factory
        self._items: list[T] = [factory(*args) for _ in range(size)]

    def __len__(self) -> int:
        return len(self._items)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def emplace(self, index: int, *args: Any) -> None:
        """Rebuild the element at `index` from `args`; out-of-range is ignored."""
        if not 0 <= index < len(self._items):
            return
        self._items[index] = self._factory(*args)