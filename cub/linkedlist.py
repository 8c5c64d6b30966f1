"""Doubly linked list with element-addressed insertion and removal."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList(Generic[T]):
    """Ordered list whose elements are addressed by identity.

    An element object may be in the list at most once. Iteration remembers
    the following element before yielding, so the yielded element may be
    removed while iterating.
    """

    def __init__(self) -> None:
        self._head = _Node(None)
        self._nodes: dict[int, _Node] = {}

    def _node_of(self, elem: T) -> _Node:
        node = self._nodes.get(id(elem))
        if node is None or node.value is not elem:
            raise ValueError(f"{elem!r} is not in the list")
        return node

    def _link_after(self, node: _Node, elem: T) -> None:
        if id(elem) in self._nodes:
            raise ValueError(f"{elem!r} is already in the list")
        new = _Node(elem)
        new.prev = node
        new.next = node.next
        node.next.prev = new
        node.next = new
        self._nodes[id(elem)] = new

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        del self._nodes[id(node.value)]

    def _walk(self, node: _Node, forward: bool) -> Iterator[T]:
        head = self._head
        while node is not head:
            following = node.next if forward else node.prev
            yield node.value
            node = following

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return self._walk(self._head.next, True)

    def __reversed__(self) -> Iterator[T]:
        return self._walk(self._head.prev, False)

    def __contains__(self, elem: object) -> bool:
        node = self._nodes.get(id(elem))
        return node is not None and node.value is elem

    def push_back(self, elem: T) -> None:
        """Append `elem` at the end."""
        self._link_after(self._head.prev, elem)

    def push_front(self, elem: T) -> None:
        """Insert `elem` at the front."""
        self._link_after(self._head, elem)

    def first(self) -> T | None:
        """The first element, or None when empty."""
        return None if self.is_empty() else self._head.next.value

    def last(self) -> T | None:
        """The last element, or None when empty."""
        return None if self.is_empty() else self._head.prev.value

    def is_first(self, elem: T) -> bool:
        """True if `elem` is the first element."""
        return not self.is_empty() and self._head.next.value is elem

    def is_last(self, elem: T) -> bool:
        """True if `elem` is the last element."""
        return not self.is_empty() and self._head.prev.value is elem

    def insert_after(self, prev: T | None, elem: T) -> None:
        """Insert `elem` after `prev`; at the front when `prev` is None."""
        if prev is None:
            self.push_front(elem)
        else:
            self._link_after(self._node_of(prev), elem)

    def insert_before(self, nxt: T | None, elem: T) -> None:
        """Insert `elem` before `nxt`; at the end when `nxt` is None."""
        if nxt is None:
            self.push_back(elem)
        else:
            self._link_after(self._node_of(nxt).prev, elem)

    def _check_move(self, anchor: T | None, elem: T) -> None:
        self._node_of(elem)
        if anchor is not None:
            self._node_of(anchor)
            if anchor is elem:
                raise ValueError("cannot move an element relative to itself")

    def move_to(self, prev: T, elem: T) -> None:
        """Move `elem`, already in the list, to just after `prev`."""
        if prev is None:
            raise ValueError("move_to needs an element to move after")
        self.move_to_after(prev, elem)

    def move_to_after(self, prev: T | None, elem: T) -> None:
        """Move `elem` after `prev`; to the front when `prev` is None."""
        self._check_move(prev, elem)
        self.remove(elem)
        self.insert_after(prev, elem)

    def move_to_before(self, nxt: T | None, elem: T) -> None:
        """Move `elem` before `nxt`; to the end when `nxt` is None."""
        self._check_move(nxt, elem)
        self.remove(elem)
        self.insert_before(nxt, elem)

    def pop_front(self) -> T | None:
        """Remove and return the first element, or None when empty."""
        if self.is_empty():
            return None
        node = self._head.next
        self._unlink(node)
        return node.value

    def remove(self, elem: T) -> None:
        """Remove `elem`; ValueError if it is not in the list."""
        self._unlink(self._node_of(elem))

    def is_empty(self) -> bool:
        """True if the list holds no element."""
        return not self._nodes

    def clear(self) -> None:
        """Remove every element."""
        self._head.next = self._head.prev = self._head
        self._nodes.clear()

    def search(self, pred: Callable[[T], Any]) -> T | None:
        """First element satisfying `pred`, or None."""
        return next((e for e in self if pred(e)), None)

    def search_from(self, start: T | None, pred: Callable[[T], Any]) -> T | None:
        """First element from `start` onwards satisfying `pred`, or None."""
        if start is None:
            return None
        walk = self._walk(self._node_of(start), True)
        return next((e for e in walk if pred(e)), None)

    def search_from_reverse(self, start: T | None, pred: Callable[[T], Any]) -> T | None:
        """First element from `start` backwards satisfying `pred`, or None."""
        if start is None:
            return None
        walk = self._walk(self._node_of(start), False)
        return next((e for e in walk if pred(e)), None)

    def concat(self, other: LinkedList[T]) -> None:
        """Move all elements of `other` to the end of this list."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        while not other.is_empty():
            self.push_back(other.pop_front())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"