"""Unbalanced binary search tree over caller-supplied nodes."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from dstructs.bintree import (
    BinaryNode,
    DuplicateKeyError,
    KeyCompare,
    NodeCompare,
    TraversalOrder,
    search_link,
)


class BinarySearchTree:
    """An ordered tree of :class:`BinaryNode` objects.

    ``cmp(a, b)`` compares two nodes and returns a negative, zero or
    positive number. Nodes that compare equal are rejected.
    """

    def __init__(self, cmp: NodeCompare) -> None:
        self.root: Optional[BinaryNode] = None
        self.cmp = cmp
        self._size = 0

    def add(self, node: BinaryNode) -> None:
        """Link ``node`` into the tree; raise DuplicateKeyError on a clash."""
        parent, is_left, existing = search_link(self.root, node, self.cmp)
        if existing is not None:
            raise DuplicateKeyError(node.value)
        node.parent = parent
        node._left = node._right = None
        if parent is None:
            self.root = node
        elif is_left:
            parent._left = node
        else:
            parent._right = node
        self._size += 1

    def remove(self, node: BinaryNode) -> None:
        """Unlink ``node``, which must be in this tree."""
        if node._left is not None and node._right is not None:
            successor = node._right.first_inorder()
            node.swap(successor)
            if self.root is node:
                self.root = successor
        child = node._left if node._left is not None else node._right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent._left is node:
            parent._left = child
        else:
            parent._right = child
        node.parent = node._left = node._right = None
        self._size -= 1

    def search(self, key: Any, cmp: KeyCompare) -> Optional[BinaryNode]:
        """Return the node matching ``key`` under ``cmp(key, node)``, or None."""
        if self.root is None:
            return None
        return self.root.search(key, cmp)

    def clear(self, deinit: Optional[Callable[[BinaryNode], Any]] = None) -> None:
        """Empty the tree, handing every node to ``deinit`` in post-order."""
        if self.root is not None:
            self.root.clear(deinit)
            self.root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[BinaryNode]:
        """Yield the nodes in ascending order."""
        if self.root is None:
            return iter(())
        return self.root.traverse(TraversalOrder.INORDER)