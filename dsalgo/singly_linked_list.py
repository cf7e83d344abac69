"""Singly linked list with positional insertion, deletion and swapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A singly linked list that tracks its first and last node and its length."""

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

    def count_nodes(self) -> int:
        """Count the nodes by walking the whole chain."""
        return sum(1 for _ in self)

    def _node_at(self, index: int) -> _Node:
        node = self._first
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_first(self, data: Any) -> None:
        """Put *data* at the front."""
        node = _Node(data, self._first)
        if self._first is None:
            self._last = node
        self._first = node
        self._length += 1

    def push_last(self, data: Any) -> None:
        """Put *data* at the back."""
        node = _Node(data)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._length += 1

    def insert(self, position: int, data: Any) -> None:
        """Insert *data* so that it ends up at index *position* (0 to ``len(self)``)."""
        if position < 0 or position > self._length:
            raise IndexError("position out of range")
        if position == self._length:
            self.push_last(data)
        elif position == 0:
            self.push_first(data)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(data, previous.next)
            self._length += 1

    def delete_first(self) -> Any:
        """Remove and return the first item."""
        self._require_items()
        node = self._first
        assert node is not None
        self._first = node.next
        if self._first is None:
            self._last = None
        self._length -= 1
        return node.data

    def delete_last(self) -> Any:
        """Remove and return the last item."""
        self._require_items()
        if self._length == 1:
            return self.delete_first()
        previous = self._node_at(self._length - 2)
        assert previous.next is not None
        removed = previous.next.data
        previous.next = None
        self._last = previous
        self._length -= 1
        return removed

    def delete_at(self, position: int) -> Any:
        """Remove and return the item at index *position*."""
        self._require_items()
        if position < 0 or position > self._length - 1:
            raise IndexError("position out of range")
        if position == self._length - 1:
            return self.delete_last()
        if position == 0:
            return self.delete_first()
        previous = self._node_at(position - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._length -= 1
        return removed.data

    def swap(self, pos_a: int, pos_b: int) -> None:
        """Exchange the items at indices *pos_a* and *pos_b*."""
        low, high = sorted((pos_a, pos_b))
        if self._length < 2:
            raise ValueError("too few elements in list")
        if low == high:
            return
        if low < 0 or high >= self._length:
            raise IndexError("position out of bounds")
        node_a = self._node_at(low)
        node_b = self._node_at(high)
        node_a.data, node_b.data = node_b.data, node_a.data