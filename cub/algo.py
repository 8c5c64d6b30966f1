"""Binary bounds on sorted sequences and small helpers over iterables."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")


def _bound(array: Sequence[T], key: T, low_bound: bool) -> int:
    if not array:
        raise ValueError("bound search on an empty sequence")

    low = 0
    high = len(array) - 1

    if key < array[low]:
        return low
    if key > array[high]:
        return high

    while low <= high:
        mid = (low + high) >> 1
        if key == array[mid]:
            return mid
        if key > array[mid]:
            low = mid + 1
        else:
            high = mid - 1

    return high if low_bound else low


def lower_bound(array: Sequence[T], key: T) -> int:
    """Index of `key` in sorted `array`, or of the last element below it.

    A key below the first element gives 0; a key above the last gives the
    last index.
    """
    return _bound(array, key, True)


def upper_bound(array: Sequence[T], key: T) -> int:
    """Index of `key` in sorted `array`, or of the first element above it.

    A key below the first element gives 0; a key above the last gives the
    last index.
    """
    return _bound(array, key, False)


def all_of(iterable: Iterable[T], pred: Callable[[T], Any]) -> bool:
    """True if `pred` holds for every element."""
    return all(pred(e) for e in iterable)


def any_of(iterable: Iterable[T], pred: Callable[[T], Any]) -> bool:
    """True if `pred` holds for at least one element."""
    return any(pred(e) for e in iterable)


def find_if(iterable: Iterable[T], pred: Callable[[T], Any]) -> T | None:
    """First element satisfying `pred`, or None."""
    return next((e for e in iterable if pred(e)), None)


def find(iterable: Iterable[T], value: T) -> T | None:
    """First element equal to `value`, or None."""
    return find_if(iterable, lambda e: e == value)


def each(iterable: Iterable[T], f: Callable[[T], Any]) -> Callable[[T], Any]:
    """Call `f` on every element and hand `f` back."""
    for e in iterable:
        f(e)
    return f


def transform(iterable: Iterable[T], f: Callable[[T], R]) -> list[R]:
    """List of `f` applied to each element."""
    return [f(e) for e in iterable]


def reduce(iterable: Iterable[T], init: A, f: Callable[[A, T], A]) -> A:
    """Fold the elements into `init` with `f(accumulator, element)`."""
    acc = init
    for e in iterable:
        acc = f(acc, e)
    return acc


def select(iterable: Iterable[T], pred: Callable[[T], Any]) -> list[T]:
    """List of the elements that satisfy `pred`, in order."""
    return [e for e in iterable if pred(e)]