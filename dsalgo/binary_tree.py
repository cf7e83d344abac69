"""Unbalanced binary search tree of unique values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    data: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """A binary search tree that always has a root; duplicates are ignored."""

    def __init__(self, root: Any) -> None:
        self._root = _Node(root)
        self._size = 1

    def insert(self, data: Any) -> bool:
        """Insert *data*; return True if it was added, False if already present."""
        node = self._root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = _Node(data)
                    break
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = _Node(data)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def preorder(self) -> Iterator[Any]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __contains__(self, data: Any) -> bool:
        node: Optional[_Node] = self._root
        while node is not None:
            if data < node.data:
                node = node.left
            elif data > node.data:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size