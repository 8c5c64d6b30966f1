"""Fixed-capacity hash map with chained buckets."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MASK64 = (1 << 64) - 1


class MapFullError(Exception):
    """Raised when a new key is added to a map at capacity."""


def hash_string(s: str | bytes) -> int:
    """Classic `h = 5 * h + c` string hash over signed chars, 64-bit."""
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    h = 0
    for byte in data:
        c = byte - 256 if byte >= 128 else byte
        h = (5 * h + c) & _MASK64
    return h


def default_hash(key: Any, hash_size: int) -> int:
    """Bucket index of `key` for a table of `hash_size` buckets."""
    if isinstance(key, (str, bytes, bytearray)):
        return hash_string(key) % hash_size
    if isinstance(key, int):
        return key % hash_size
    return hash(key) % hash_size


def _equal(x: Any, y: Any) -> bool:
    return bool(x == y)


class HashMap(Generic[K, V]):
    """Map of at most `capacity` entries spread over `hash_size` buckets.

    `hash_fn(key)` gives an integer that is reduced modulo `hash_size`;
    `eq_fn(a, b)` compares keys. `default`, when given, builds the value
    inserted by `map[key]` for a missing key.
    """

    def __init__(
        self,
        capacity: int = 1024,
        hash_size: int | None = None,
        hash_fn: Callable[[K], int] | None = None,
        eq_fn: Callable[[K, K], bool] | None = None,
        default: Callable[[], V] | None = None,
    ) -> None:
        if hash_size is None:
            hash_size = capacity
        if capacity <= 0 or hash_size <= 0:
            raise ValueError("capacity and hash_size must be positive")
        self._capacity = capacity
        self._hash_size = hash_size
        self._hash_fn = hash_fn if hash_fn is not None else (lambda k: default_hash(k, hash_size))
        self._eq_fn = eq_fn if eq_fn is not None else _equal
        self._default = default
        self._buckets: list[list[list[Any]]] = [[] for _ in range(hash_size)]
        self._num = 0

    def _bucket(self, key: K) -> list[list[Any]]:
        return self._buckets[self._hash_fn(key) % self._hash_size]

    def _find(self, key: K) -> list[Any] | None:
        return next((n for n in self._bucket(key) if self._eq_fn(n[0], key)), None)

    def _insert(self, key: K, value: V) -> list[Any]:
        if self.full():
            raise MapFullError(f"map is full ({self._capacity} entries)")
        node = [key, value]
        self._bucket(key).append(node)
        self._num += 1
        return node

    def __len__(self) -> int:
        return self._num

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None  # type: ignore[arg-type]

    def items(self) -> Iterator[tuple[K, V]]:
        """(key, value) pairs in bucket order, then insertion order."""
        for bucket in self._buckets:
            for key, value in list(bucket):
                yield key, value

    def __getitem__(self, key: K) -> V:
        node = self._find(key)
        if node is not None:
            return node[1]
        if self._default is None:
            raise KeyError(key)
        return self._insert(key, self._default())[1]

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        self._bucket(key).remove(node)
        self._num -= 1

    def get(self, key: K) -> V | None:
        """The value for `key`, or None if absent."""
        node = self._find(key)
        return None if node is None else node[1]

    def put(self, key: K, value: V) -> None:
        """Set `key` to `value`; MapFullError if `key` is new and map is full."""
        node = self._find(key)
        if node is not None:
            node[1] = value
        else:
            self._insert(key, value)

    def erase(self, key: K) -> None:
        """Remove `key` if present."""
        if self._find(key) is not None:
            del self[key]

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._num = 0

    def max_size(self) -> int:
        """The capacity."""
        return self._capacity

    def empty(self) -> bool:
        """True if the map holds no entry."""
        return self._num == 0

    def full(self) -> bool:
        """True if no new key can be added."""
        return self._num >= self._capacity

    def visit(self, visitor: Callable[[K, V], Any]) -> None:
        """Call `visitor(key, value)` for each entry; an exception stops it."""
        for key, value in self.items():
            visitor(key, value)

    def transform(self, fn: Callable[[K, V], V]) -> None:
        """Replace each value with `fn(key, value)`."""
        for bucket in self._buckets:
            for node in bucket:
                node[1] = fn(node[0], node[1])

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{body}}})"