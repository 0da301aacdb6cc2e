"""Singly linked list of references with constant-time front operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Predicate = Callable[[Any], Any]


@dataclass(eq=False)
class SListItem:
    """One link of a singly linked list: a stored value and the next link."""

    data: Any
    next: Optional["SListItem"] = field(default=None, repr=False)


class SinglyLinkedList:
    """A forward-only linked list that stores references to caller objects."""

    def __init__(self) -> None:
        self._head: Optional[SListItem] = None
        self._size = 0

    def head(self) -> Optional[SListItem]:
        """Return the first link, or None when the list is empty."""
        return self._head

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def push_front(self, data: Any) -> SListItem:
        """Insert ``data`` at the front and return its link."""
        item = SListItem(data, self._head)
        self._head = item
        self._size += 1
        return item

    def insert_after(self, item: SListItem, data: Any) -> SListItem:
        """Insert ``data`` right after ``item`` and return the new link."""
        new_item = SListItem(data, item.next)
        item.next = new_item
        self._size += 1
        return new_item

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove_front(self) -> Any:
        """Remove the first link and return its value; raise IndexError if empty."""
        victim = self._head
        if victim is None:
            raise IndexError("remove from an empty list")
        self._head = victim.next
        victim.next = None
        self._size -= 1
        return victim.data

    def remove_after(self, item: SListItem) -> Any:
        """Remove the link following ``item`` and return its value."""
        victim = item.next
        if victim is None:
            raise IndexError("no item follows the given one")
        item.next = victim.next
        victim.next = None
        self._size -= 1
        return victim.data

    def remove_if(self, predicate: Predicate) -> int:
        """Remove every value for which ``predicate`` is true; return how many."""
        removed = 0
        prev: Optional[SListItem] = None
        curr = self._head
        while curr is not None:
            following = curr.next
            if predicate(curr.data):
                if prev is None:
                    self._head = following
                else:
                    prev.next = following
                curr.next = None
                self._size -= 1
                removed += 1
            else:
                prev = curr
            curr = following
        return removed

    # ------------------------------------------------------------------
    # Search & teardown
    # ------------------------------------------------------------------

    def find(self, predicate: Predicate) -> Optional[SListItem]:
        """Return the first link whose value satisfies ``predicate``, or None."""
        curr = self._head
        while curr is not None:
            if predicate(curr.data):
                return curr
            curr = curr.next
        return None

    def clear(self, deinit: Optional[Callable[[Any], Any]] = None) -> None:
        """Drop every link, front to back, handing each value to ``deinit``."""
        curr = self._head
        while curr is not None:
            following = curr.next
            if deinit is not None:
                deinit(curr.data)
            curr.next = None
            curr = following
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored values from front to back."""
        curr = self._head
        while curr is not None:
            yield curr.data
            curr = curr.next