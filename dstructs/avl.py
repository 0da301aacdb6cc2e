"""Height-balanced binary search tree over caller-supplied nodes."""

from __future__ import annotations

import enum
from typing import Any, Callable, Iterator, Optional

from dstructs.bintree import (
    BinaryNode,
    DuplicateKeyError,
    KeyCompare,
    NodeCompare,
    TraversalOrder,
    search_link,
)


class Balance(enum.Enum):
    """Which subtree of a node is taller, if either."""

    EVEN = 0
    LEFT_HIGH = 1
    RIGHT_HIGH = 3


class AVLNode(BinaryNode):
    """A binary node that also records its balance state."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(value)
        self.balance = Balance.EVEN


class AVLTree:
    """An ordered, self-balancing tree of :class:`AVLNode` objects.

    ``cmp(a, b)`` compares two nodes and returns a negative, zero or
    positive number. Nodes that compare equal are rejected.
    """

    def __init__(self, cmp: NodeCompare) -> None:
        self.root: Optional[AVLNode] = None
        self.cmp = cmp
        self._size = 0

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, node: AVLNode) -> None:
        """Link ``node`` into the tree; raise DuplicateKeyError on a clash."""
        parent, is_left, existing = search_link(self.root, node, self.cmp)
        if existing is not None:
            raise DuplicateKeyError(node.value)
        node.parent = parent
        node._left = node._right = None
        node.balance = Balance.EVEN
        if parent is None:
            self.root = node
        elif is_left:
            parent._left = node
        else:
            parent._right = node
        self._size += 1

        curr: AVLNode = node
        parent = curr.parent
        while parent is not None:
            if parent._left is curr:
                if parent.balance is Balance.LEFT_HIGH:
                    self._insert_balance_left(parent)
                    return
                if parent.balance is Balance.EVEN:
                    parent.balance = Balance.LEFT_HIGH
                else:
                    parent.balance = Balance.EVEN
                    return
            else:
                if parent.balance is Balance.LEFT_HIGH:
                    parent.balance = Balance.EVEN
                    return
                if parent.balance is Balance.EVEN:
                    parent.balance = Balance.RIGHT_HIGH
                else:
                    self._insert_balance_right(parent)
                    return
            curr = parent
            parent = curr.parent

    def remove(self, node: AVLNode) -> None:
        """Unlink ``node``, which must be in this tree, and rebalance."""
        if node._left is not None and node._right is not None:
            successor = node._right.first_inorder()
            node.swap(successor)
            node.balance, successor.balance = successor.balance, node.balance
            if self.root is node:
                self.root = successor

        child = node._left if node._left is not None else node._right
        parent = node.parent
        from_left = parent is not None and parent._left is node
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif from_left:
            parent._left = child
        else:
            parent._right = child

        self._size -= 1
        node.parent = node._left = node._right = None
        node.balance = Balance.EVEN

        curr = parent
        while curr is not None:
            nxt = curr.parent
            next_from_left = nxt is not None and nxt._left is curr
            stop = False
            if from_left:
                if curr.balance is Balance.LEFT_HIGH:
                    curr.balance = Balance.EVEN
                elif curr.balance is Balance.EVEN:
                    curr.balance = Balance.RIGHT_HIGH
                    stop = True
                else:
                    self._remove_balance_left(curr)
                    stop = self._subtree_root(nxt, next_from_left).balance is not Balance.EVEN
            else:
                if curr.balance is Balance.RIGHT_HIGH:
                    curr.balance = Balance.EVEN
                elif curr.balance is Balance.EVEN:
                    curr.balance = Balance.LEFT_HIGH
                    stop = True
                else:
                    self._remove_balance_right(curr)
                    stop = self._subtree_root(nxt, next_from_left).balance is not Balance.EVEN
            if stop:
                break
            curr = nxt
            from_left = next_from_left

    def search(self, key: Any, cmp: KeyCompare) -> Optional[AVLNode]:
        """Return the node matching ``key`` under ``cmp(key, node)``, or None."""
        if self.root is None:
            return None
        return self.root.search(key, cmp)

    def clear(self, deinit: Optional[Callable[[AVLNode], Any]] = None) -> None:
        """Empty the tree, handing every node to ``deinit`` in post-order."""
        if self.root is not None:

            def release(node: AVLNode) -> None:
                node.balance = Balance.EVEN
                if deinit is not None:
                    deinit(node)

            self.root.clear(release)
            self.root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[AVLNode]:
        """Yield the nodes in ascending order."""
        if self.root is None:
            return iter(())
        return self.root.traverse(TraversalOrder.INORDER)

    # ------------------------------------------------------------------
    # Rebalancing
    # ------------------------------------------------------------------

    def _subtree_root(self, parent: Optional[AVLNode], is_left: bool) -> AVLNode:
        if parent is None:
            return self.root
        return parent._left if is_left else parent._right

    def _insert_balance_left(self, root: AVLNode) -> None:
        left = root._left
        if left.balance is Balance.LEFT_HIGH:
            self._rotate_right(root)
            return
        sub_balance = left._right.balance
        self._rotate_left(left)
        self._rotate_right(root)
        if sub_balance is Balance.LEFT_HIGH:
            root.balance = Balance.RIGHT_HIGH
        elif sub_balance is Balance.RIGHT_HIGH:
            left.balance = Balance.LEFT_HIGH

    def _insert_balance_right(self, root: AVLNode) -> None:
        right = root._right
        if right.balance is Balance.RIGHT_HIGH:
            self._rotate_left(root)
            return
        sub_balance = right._left.balance
        self._rotate_right(right)
        self._rotate_left(root)
        if sub_balance is Balance.RIGHT_HIGH:
            root.balance = Balance.LEFT_HIGH
        elif sub_balance is Balance.LEFT_HIGH:
            right.balance = Balance.RIGHT_HIGH

    def _remove_balance_left(self, root: AVLNode) -> None:
        right = root._right
        if right.balance is Balance.RIGHT_HIGH:
            self._rotate_left(root)
        elif right.balance is Balance.EVEN:
            self._rotate_left(root)
            root.balance = Balance.RIGHT_HIGH
            right.balance = Balance.LEFT_HIGH
        else:
            sub_balance = right._left.balance
            self._rotate_right(right)
            self._rotate_left(root)
            if sub_balance is Balance.RIGHT_HIGH:
                root.balance = Balance.LEFT_HIGH
            elif sub_balance is Balance.LEFT_HIGH:
                right.balance = Balance.RIGHT_HIGH

    def _remove_balance_right(self, root: AVLNode) -> None:
        left = root._left
        if left.balance is Balance.LEFT_HIGH:
            self._rotate_right(root)
        elif left.balance is Balance.EVEN:
            self._rotate_right(root)
            root.balance = Balance.LEFT_HIGH
            left.balance = Balance.RIGHT_HIGH
        else:
            sub_balance = left._right.balance
            self._rotate_left(left)
            self._rotate_right(root)
            if sub_balance is Balance.LEFT_HIGH:
                root.balance = Balance.RIGHT_HIGH
            elif sub_balance is Balance.RIGHT_HIGH:
                left.balance = Balance.LEFT_HIGH

    def _relink(self, grandparent: Optional[AVLNode], old: AVLNode, new: AVLNode) -> None:
        new.parent = grandparent
        if grandparent is None:
            self.root = new
        elif grandparent._left is old:
            grandparent._left = new
        else:
            grandparent._right = new

    def _rotate_left(self, root: AVLNode) -> None:
        """Lift the right child over ``root``; both end up EVEN."""
        new_root = root._right
        grandparent = root.parent
        transfer = new_root._left
        root._right = transfer
        if transfer is not None:
            transfer.parent = root
        new_root._left = root
        root.parent = new_root
        self._relink(grandparent, root, new_root)
        root.balance = new_root.balance = Balance.EVEN

    def _rotate_right(self, root: AVLNode) -> None:
        """Lift the left child over ``root``; both end up EVEN."""
        new_root = root._left
        grandparent = root.parent
        transfer = new_root._right
        root._left = transfer
        if transfer is not None:
            transfer.parent = root
        new_root._right = root
        root.parent = new_root
        self._relink(grandparent, root, new_root)
        root.balance = new_root.balance = Balance.EVEN