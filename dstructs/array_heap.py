"""Binary heap stored in a Python list, ordered by a comparison function."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List

Compare = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class ArrayHeap:
    """A heap whose top item is the greatest under ``cmp``.

    ``cmp(a, b)`` returns a negative, zero or positive number. With the
    default comparison this is a max-heap; reverse it for a min-heap.
    """

    def __init__(self, cmp: Compare = _natural) -> None:
        self.cmp = cmp
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        """Add ``item`` and restore the heap order."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        top = items[0]
        items[0] = items[-1]
        items.pop()
        self._sift_down(0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items in storage order, top item first."""
        return iter(list(self._items))

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if self.cmp(items[parent], items[index]) >= 0:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        count = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < count and self.cmp(items[largest], items[child]) < 0:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest