"""Intrusive circular doubly linked list anchored by a sentinel item."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Predicate = Callable[["ClistItem"], Any]


class ClistItem:
    """A link hook that objects inherit from to be placed in a CircularList.

    An unlinked item points to itself in both directions.
    """

    def __init__(self) -> None:
        self.prev: ClistItem = self
        self.next: ClistItem = self

    def is_linked(self) -> bool:
        """Return True while the item sits in some list."""
        return self.next is not self


class CircularList:
    """A circular list of caller-owned :class:`ClistItem` objects.

    A permanent sentinel closes the circle: ``sentinel.next`` is the front
    and ``sentinel.prev`` the back. The list never creates or copies items.
    """

    def __init__(self) -> None:
        self.sentinel = ClistItem()
        self._size = 0

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def _link(self, prev: ClistItem, nxt: ClistItem, item: ClistItem) -> None:
        if item is self.sentinel:
            raise ValueError("the sentinel cannot be inserted")
        if item.is_linked():
            raise ValueError("item is already linked into a list")
        item.prev = prev
        item.next = nxt
        prev.next = item
        nxt.prev = item
        self._size += 1

    def insert_before(self, pos: ClistItem, item: ClistItem) -> None:
        """Link ``item`` right before ``pos``; before the sentinel means the back."""
        self._link(pos.prev, pos, item)

    def insert_after(self, pos: ClistItem, item: ClistItem) -> None:
        """Link ``item`` right after ``pos``; after the sentinel means the front."""
        self._link(pos, pos.next, item)

    def push_front(self, item: ClistItem) -> None:
        self.insert_after(self.sentinel, item)

    def push_back(self, item: ClistItem) -> None:
        self.insert_before(self.sentinel, item)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, item: ClistItem) -> None:
        """Unlink ``item`` in constant time; it is left pointing to itself."""
        if item is self.sentinel:
            raise ValueError("the sentinel cannot be removed")
        if not item.is_linked():
            raise ValueError("item is not linked into a list")
        item.prev.next = item.next
        item.next.prev = item.prev
        item.prev = item.next = item
        self._size -= 1

    def pop_front(self) -> Optional[ClistItem]:
        """Unlink and return the first item, or None when the list is empty."""
        first = self.sentinel.next
        if first is self.sentinel:
            return None
        self.remove(first)
        return first

    def pop_back(self) -> Optional[ClistItem]:
        """Unlink and return the last item, or None when the list is empty."""
        last = self.sentinel.prev
        if last is self.sentinel:
            return None
        self.remove(last)
        return last

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find(self, predicate: Predicate) -> Optional[ClistItem]:
        """Return the first item, front to back, for which ``predicate`` is true."""
        return next((item for item in self if predicate(item)), None)

    def rfind(self, predicate: Predicate) -> Optional[ClistItem]:
        """Return the first item, back to front, for which ``predicate`` is true."""
        return next((item for item in reversed(self) if predicate(item)), None)

    # ------------------------------------------------------------------
    # Inspection & iteration
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[ClistItem]:
        """Yield the items front to back; the current item may be removed."""
        curr = self.sentinel.next
        while curr is not self.sentinel:
            following = curr.next
            yield curr
            curr = following

    def __reversed__(self) -> Iterator[ClistItem]:
        """Yield the items back to front; the current item may be removed."""
        curr = self.sentinel.prev
        while curr is not self.sentinel:
            preceding = curr.prev
            yield curr
            curr = preceding