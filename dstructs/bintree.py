"""Binary tree nodes with parent links, iterators and structural operations."""

from __future__ import annotations

import enum
from collections import deque
from typing import Any, Callable, Iterator, Optional, Tuple

KeyCompare = Callable[[Any, "BinaryNode"], int]
NodeCompare = Callable[["BinaryNode", "BinaryNode"], int]


class DuplicateKeyError(KeyError):
    """Raised when a tree already holds a node that compares equal."""


class TraversalOrder(enum.Enum):
    """Depth-first visiting orders."""

    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"


class BinaryNode:
    """A binary tree node that knows its parent and both children.

    Assigning ``left`` or ``right`` also points the new child's parent
    back at this node.
    """

    def __init__(
        self,
        value: Any = None,
        parent: Optional[BinaryNode] = None,
        left: Optional[BinaryNode] = None,
        right: Optional[BinaryNode] = None,
    ) -> None:
        self.value = value
        self.parent = parent
        self._left: Optional[BinaryNode] = None
        self._right: Optional[BinaryNode] = None
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    @property
    def left(self) -> Optional[BinaryNode]:
        return self._left

    @left.setter
    def left(self, node: Optional[BinaryNode]) -> None:
        self._left = node
        if node is not None:
            node.parent = self

    @property
    def right(self) -> Optional[BinaryNode]:
        return self._right

    @right.setter
    def right(self, node: Optional[BinaryNode]) -> None:
        self._right = node
        if node is not None:
            node.parent = self

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def root(self) -> BinaryNode:
        """Return the topmost ancestor of this node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def is_root(self) -> bool:
        return self.parent is None

    def detach(self) -> None:
        """Cut this node, with its subtree, away from its parent."""
        parent = self.parent
        if parent is None:
            return
        if parent._left is self:
            parent._left = None
        else:
            parent._right = None
        self.parent = None

    def replace(self, new_node: BinaryNode) -> None:
        """Put ``new_node`` in this node's place; this node is left unlinked."""
        parent, left, right = self.parent, self._left, self._right
        new_node.parent, new_node._left, new_node._right = parent, left, right
        if parent is not None:
            if parent._left is self:
                parent._left = new_node
            else:
                parent._right = new_node
        if left is not None:
            left.parent = new_node
        if right is not None:
            right.parent = new_node
        self.parent = self._left = self._right = None

    def swap(self, other: BinaryNode) -> None:
        """Exchange the tree positions of two nodes, adjacent ones included."""
        if self is other:
            return
        a, b = self, other
        pa, pb = a.parent, b.parent
        a_was_left = pa is not None and pa._left is a
        b_was_left = pb is not None and pb._left is b
        al, ar, bl, br = a._left, a._right, b._left, b._right

        def sub(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
            if node is a:
                return b
            if node is b:
                return a
            return node

        a.parent, a._left, a._right = sub(pb), sub(bl), sub(br)
        b.parent, b._left, b._right = sub(pa), sub(al), sub(ar)

        if pa is not None and pa is not b:
            if a_was_left:
                pa._left = b
            else:
                pa._right = b
        if pb is not None and pb is not a:
            if b_was_left:
                pb._left = a
            else:
                pb._right = a

        for node in (a, b):
            for child in (node._left, node._right):
                if child is not None:
                    child.parent = node

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, key: Any, cmp: KeyCompare) -> Optional[BinaryNode]:
        """Find a node by ``key`` in an ordered subtree.

        ``cmp(key, node)`` returns a negative, zero or positive number.
        """
        node: Optional[BinaryNode] = self
        while node is not None:
            result = cmp(key, node)
            if result < 0:
                node = node._left
            elif result > 0:
                node = node._right
            else:
                return node
        return None

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def first_inorder(self) -> BinaryNode:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def first_preorder(self) -> BinaryNode:
        return self

    def first_postorder(self) -> BinaryNode:
        node = self
        while node._left is not None or node._right is not None:
            node = node._left if node._left is not None else node._right
        return node

    def inorder_next(self) -> Optional[BinaryNode]:
        node = self
        if node._right is not None:
            node = node._right
            while node._left is not None:
                node = node._left
            return node
        while node.parent is not None and node is node.parent._right:
            node = node.parent
        return node.parent

    def inorder_prev(self) -> Optional[BinaryNode]:
        node = self
        if node._left is not None:
            node = node._left
            while node._right is not None:
                node = node._right
            return node
        while node.parent is not None and node is node.parent._left:
            node = node.parent
        return node.parent

    def preorder_next(self) -> Optional[BinaryNode]:
        if self._left is not None:
            return self._left
        if self._right is not None:
            return self._right
        node = self
        parent = node.parent
        while parent is not None and (parent._right is node or parent._right is None):
            node = parent
            parent = parent.parent
        return parent._right if parent is not None else None

    def preorder_prev(self) -> Optional[BinaryNode]:
        parent = self.parent
        if parent is None:
            return None
        if self is parent._left or parent._left is None:
            return parent
        node = parent._left
        while node._right is not None or node._left is not None:
            node = node._right if node._right is not None else node._left
        return node

    def postorder_next(self) -> Optional[BinaryNode]:
        parent = self.parent
        if parent is None:
            return None
        if parent._right is not None and parent._left is self:
            return parent._right.first_postorder()
        return parent

    def postorder_prev(self) -> Optional[BinaryNode]:
        if self._right is not None:
            return self._right
        if self._left is not None:
            return self._left
        node = self
        parent = node.parent
        while parent is not None and (node is parent._left or parent._left is None):
            node = parent
            parent = parent.parent
        return parent._left if parent is not None else None

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def _last_preorder(self) -> BinaryNode:
        node = self
        while node._right is not None or node._left is not None:
            node = node._right if node._right is not None else node._left
        return node

    def traverse(self, order: TraversalOrder = TraversalOrder.INORDER) -> Iterator[BinaryNode]:
        """Yield the nodes of this subtree in the given depth-first order."""
        if order is TraversalOrder.INORDER:
            node, last, step = self.first_inorder(), self._last_inorder(), BinaryNode.inorder_next
        elif order is TraversalOrder.PREORDER:
            node, last, step = self, self._last_preorder(), BinaryNode.preorder_next
        elif order is TraversalOrder.POSTORDER:
            node, last, step = self.first_postorder(), self, BinaryNode.postorder_next
        else:
            raise ValueError(f"unknown traversal order: {order!r}")
        while node is not None:
            yield node
            if node is last:
                return
            node = step(node)

    def _last_inorder(self) -> BinaryNode:
        node = self
        while node._right is not None:
            node = node._right
        return node

    def bfs(self) -> Iterator[BinaryNode]:
        """Yield the nodes of this subtree level by level, left to right."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            if node._left is not None:
                queue.append(node._left)
            if node._right is not None:
                queue.append(node._right)

    def dfs(self) -> Iterator[BinaryNode]:
        """Yield the nodes of this subtree depth first, left before right."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node._right is not None:
                stack.append(node._right)
            if node._left is not None:
                stack.append(node._left)

    # ------------------------------------------------------------------
    # Properties & teardown
    # ------------------------------------------------------------------

    def level(self) -> int:
        """Return the number of edges between this node and its root."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def clear(self, deinit: Optional[Callable[[BinaryNode], Any]] = None) -> None:
        """Dismantle this subtree in post-order, handing each node to ``deinit``."""
        self.detach()
        for node in list(self.traverse(TraversalOrder.POSTORDER)):
            if deinit is not None:
                deinit(node)
            node.parent = node._left = node._right = None


def size(tree: Optional[BinaryNode]) -> int:
    """Return the number of nodes in ``tree``; an empty tree has none."""
    if tree is None:
        return 0
    return sum(1 for _ in tree.traverse(TraversalOrder.INORDER))


def height(tree: Optional[BinaryNode]) -> int:
    """Return the height of ``tree``: -1 when empty, 0 for a single node."""
    if tree is None:
        return -1
    best = -1
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node._left, node._right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


def balance_factor(tree: Optional[BinaryNode]) -> int:
    """Return the left height minus the right height of ``tree``."""
    if tree is None:
        return 0
    return height(tree._left) - height(tree._right)


def search_link(
    root: Optional[BinaryNode], node: BinaryNode, cmp: NodeCompare
) -> Tuple[Optional[BinaryNode], bool, Optional[BinaryNode]]:
    """Find where ``node`` belongs in the ordered tree under ``root``.

    Returns ``(parent, is_left, existing)``: the node that would hold it,
    whether it would be that node's left child, and the node already there
    that compares equal, if any.
    """
    parent = root.parent if root is not None else None
    is_left = False
    curr = root
    while curr is not None:
        result = cmp(node, curr)
        if result < 0:
            parent, is_left, curr = curr, True, curr._left
        elif result > 0:
            parent, is_left, curr = curr, False, curr._right
        else:
            return parent, is_left, curr
    return parent, is_left, None