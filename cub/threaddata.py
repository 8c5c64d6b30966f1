"""Per-thread slots indexed by a thread identifier."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Protocol, TypeVar

from cub.log import log_debug

T = TypeVar("T")


class ThreadInfo(Protocol):
    """Provides the number of threads and the current thread's id."""

    max_thread_num: int

    def current_id(self) -> int: ...


class ThreadData(Generic[T]):
    """One value per thread id, from 0 to `thread_info.max_thread_num - 1`."""

    def __init__(self, thread_info: ThreadInfo, factory: Callable[[], T] = int) -> None:
        self._info = thread_info
        self._slots: list[T] = [factory() for _ in range(thread_info.max_thread_num)]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            log_debug(__file__, 0, "ThreadData: id(%d) overflow!", index)
            raise IndexError(f"thread id {index} out of range")

    def current(self) -> T:
        """The value of the current thread."""
        index = self._info.current_id()
        self._check(index)
        return self._slots[index]

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._slots[index] = value

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots)

    def visit_all(self, visitor: Callable[[T], Any]) -> None:
        """Call `visitor` on every thread's value; an exception stops the walk."""
        for value in self._slots:
            visitor(value)