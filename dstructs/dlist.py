"""Doubly linked list of references with constant-time insertion and removal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Predicate = Callable[[Any], Any]


@dataclass(eq=False)
class DListItem:
    """One link of a doubly linked list: a stored value and both neighbours."""

    data: Any
    prev: Optional["DListItem"] = field(default=None, repr=False)
    next: Optional["DListItem"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A linked list that can be walked and edited from either end."""

    def __init__(self) -> None:
        self._head: Optional[DListItem] = None
        self._tail: Optional[DListItem] = None
        self._size = 0

    def head(self) -> Optional[DListItem]:
        """Return the first link, or None when the list is empty."""
        return self._head

    def tail(self) -> Optional[DListItem]:
        """Return the last link, or None when the list is empty."""
        return self._tail

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_between(
        self,
        prev_item: Optional[DListItem],
        next_item: Optional[DListItem],
        data: Any,
    ) -> DListItem:
        """Insert ``data`` between two adjacent links and return its link.

        None stands for the front (as ``prev_item``) or the back (as
        ``next_item``) of the list.
        """
        after_prev = prev_item.next if prev_item is not None else self._head
        if after_prev is not next_item:
            raise ValueError("items are not adjacent in this list")
        item = DListItem(data, prev_item, next_item)
        if prev_item is None:
            self._head = item
        else:
            prev_item.next = item
        if next_item is None:
            self._tail = item
        else:
            next_item.prev = item
        self._size += 1
        return item

    def push_front(self, data: Any) -> DListItem:
        return self.insert_between(None, self._head, data)

    def push_back(self, data: Any) -> DListItem:
        return self.insert_between(self._tail, None, data)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, item: DListItem) -> Any:
        """Unlink ``item`` and return its value."""
        if (item.prev is None and self._head is not item) or (
            item.next is None and self._tail is not item
        ):
            raise ValueError("item is not in this list")
        if item.prev is None:
            self._head = item.next
        else:
            item.prev.next = item.next
        if item.next is None:
            self._tail = item.prev
        else:
            item.next.prev = item.prev
        item.prev = item.next = None
        self._size -= 1
        return item.data

    def remove_front(self) -> Any:
        """Remove the first link and return its value; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("remove from an empty list")
        return self.remove(self._head)

    def remove_back(self) -> Any:
        """Remove the last link and return its value; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("remove from an empty list")
        return self.remove(self._tail)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _items(self) -> Iterator[DListItem]:
        curr = self._head
        while curr is not None:
            following = curr.next
            yield curr
            curr = following

    def _items_reversed(self) -> Iterator[DListItem]:
        curr = self._tail
        while curr is not None:
            preceding = curr.prev
            yield curr
            curr = preceding

    def find(self, predicate: Predicate) -> Optional[DListItem]:
        """Return the first link, front to back, whose value satisfies ``predicate``."""
        return next((item for item in self._items() if predicate(item.data)), None)

    def rfind(self, predicate: Predicate) -> Optional[DListItem]:
        """Return the first link, back to front, whose value satisfies ``predicate``."""
        return next(
            (item for item in self._items_reversed() if predicate(item.data)), None
        )

    # ------------------------------------------------------------------
    # Whole-list operations
    # ------------------------------------------------------------------

    def reverse(self) -> None:
        """Reverse the order of the links in place."""
        for item in self._items():
            item.prev, item.next = item.next, item.prev
        self._head, self._tail = self._tail, self._head

    def clear(self, deinit: Optional[Callable[[Any], Any]] = None) -> None:
        """Drop every link, front to back, handing each value to ``deinit``."""
        for item in self._items():
            if deinit is not None:
                deinit(item.data)
            item.prev = item.next = None
        self._head = self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored values from front to back."""
        return (item.data for item in self._items())

    def __reversed__(self) -> Iterator[Any]:
        """Yield the stored values from back to front."""
        return (item.data for item in self._items_reversed())