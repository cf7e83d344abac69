"""Doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    data: Any
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A doubly linked list that tracks its first and last node and its length.

    Positions given to :meth:`insert` and :meth:`delete_at` follow one rule:
    0 addresses the front, ``len(self)`` the back, and any other position
    ``p`` addresses index ``max(p - 1, 1)``.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: Optional[_Node] = None
        self._last: Optional[_Node] = None
        self._length = 0
        for item in items:
            self.push_last(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True if the list holds no items."""
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._last
        while node is not None:
            yield node.data
            node = node.prev

    def first(self) -> Any:
        """Return the first item."""
        if self._first is None:
            raise IndexError("list is empty")
        return self._first.data

    def last(self) -> Any:
        """Return the last item."""
        if self._last is None:
            raise IndexError("list is empty")
        return self._last.data

    def _require_items(self) -> None:
        if self._first is None:
            raise IndexError("list already empty")

    def _node_at(self, index: int) -> _Node:
        if index <= self._length // 2:
            node = self._first
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._last
            for _ in range(self._length - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def _link_between(self, data: Any, before: Optional[_Node], after: Optional[_Node]) -> None:
        node = _Node(data, before, after)
        if before is None:
            self._first = node
        else:
            before.next = node
        if after is None:
            self._last = node
        else:
            after.prev = node
        self._length += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._first = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._last = node.prev
        else:
            node.next.prev = node.prev
        self._length -= 1
        return node.data

    def push_first(self, data: Any) -> None:
        """Put *data* at the front."""
        self._link_between(data, None, self._first)

    def push_last(self, data: Any) -> None:
        """Put *data* at the back."""
        self._link_between(data, self._last, None)

    def insert(self, position: int, data: Any) -> None:
        """Insert *data*: 0 puts it first, ``len(self)`` puts it last, and any
        other position ``p`` places it at index ``max(p - 1, 1)``."""
        if position == self._length:
            self.push_last(data)
        elif position < 0 or position > self._length:
            raise IndexError("position out of range")
        elif position == 0:
            self.push_first(data)
        else:
            successor = self._node_at(max(position - 1, 1))
            self._link_between(data, successor.prev, successor)

    def delete_first(self) -> Any:
        """Remove and return the first item."""
        self._require_items()
        assert self._first is not None
        return self._unlink(self._first)

    def delete_last(self) -> Any:
        """Remove and return the last item."""
        self._require_items()
        assert self._last is not None
        return self._unlink(self._last)

    def delete_at(self, position: int) -> Any:
        """Remove and return an item: 0 removes the first, ``len(self)`` the
        last, and any other position ``p`` the one at index ``max(p - 1, 1)``."""
        self._require_items()
        if position == self._length:
            return self.delete_last()
        if position < 0 or position > self._length:
            raise IndexError("position out of range")
        if position == 0:
            return self.delete_first()
        return self._unlink(self._node_at(max(position - 1, 1)))