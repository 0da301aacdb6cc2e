"""Fixed-width tree nodes holding a child link and a value per slot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional


@dataclass
class MwayEntry:
    """One slot of an m-way node: a child node and a value, either optional."""

    child: Optional["MwayNode"] = None
    data: Any = None


class MwayNode:
    """A node with ``capacity`` slots, all empty at first."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.entries: List[MwayEntry] = [MwayEntry() for _ in range(capacity)]

    def entry(self, index: int) -> MwayEntry:
        """Return the slot at ``index``."""
        return self.entries[index]

    def child(self, index: int) -> Optional[MwayNode]:
        return self.entries[index].child

    def data(self, index: int) -> Any:
        return self.entries[index].data

    def __len__(self) -> int:
        return len(self.entries)

    def clear(self, deinit: Optional[Callable[[Any], Any]] = None) -> None:
        """Tear down every subtree, then hand each stored value to ``deinit``."""
        for entry in self.entries:
            if entry.child is not None:
                entry.child.clear(deinit)
        for entry in self.entries:
            if deinit is not None and entry.data is not None:
                deinit(entry.data)
            entry.child = None
            entry.data = None