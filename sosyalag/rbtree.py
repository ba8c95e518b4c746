"""Red-black tree keyed by integers, used as the user index of a network."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

V = TypeVar("V")


class Color(Enum):
    """Node colour in a red-black tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode(Generic[V]):
    """A tree node holding a key, its value and links to its neighbours."""

    key: int
    value: V
    color: Color = Color.RED
    left: Optional["RBNode[V]"] = field(default=None, repr=False)
    right: Optional["RBNode[V]"] = field(default=None, repr=False)
    parent: Optional["RBNode[V]"] = field(default=None, repr=False)

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED


class RedBlackTree(Generic[V]):
    """Red-black tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: Optional[RBNode[V]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[RBNode[V]]:
        """Yield nodes in ascending key order."""
        stack: list[RBNode[V]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def right_spine(self) -> Iterator[RBNode[V]]:
        """Yield the root and then each successive right child."""
        node = self.root
        while node is not None:
            yield node
            node = node.right

    def preorder(self) -> Iterator[RBNode[V]]:
        """Yield nodes in pre-order: node, left subtree, right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def find(self, key: int) -> Optional[RBNode[V]]:
        """Return the first node with ``key`` on the search path, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def get(self, key: int) -> V:
        """Return the value stored under ``key``; raise KeyError if absent."""
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def insert(self, key: int, value: V) -> RBNode[V]:
        """Insert ``value`` under ``key`` and rebalance; return the new node."""
        new = RBNode(key, value)
        parent: Optional[RBNode[V]] = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if key < current.key else current.right
        new.parent = parent
        if parent is None:
            self.root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._rebalance(new)
        self._size += 1
        return new

    def _rotate_left(self, x: RBNode[V]) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, y: RBNode[V]) -> None:
        x = y.left
        assert x is not None
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self.root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    def _rebalance(self, node: RBNode[V]) -> None:
        while node is not self.root and node.parent.is_red:
            parent = node.parent
            grand = parent.parent
            if parent is grand.right:
                uncle = grand.left
                if uncle is not None and uncle.is_red:
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is parent.left:
                        node = parent
                        self._rotate_right(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)
            else:
                uncle = grand.right
                if uncle is not None and uncle.is_red:
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is parent.right:
                        node = parent
                        self._rotate_left(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
        self.root.color = Color.BLACK