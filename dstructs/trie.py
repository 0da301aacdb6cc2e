"""Prefix tree mapping strings to values over a fixed alphabet."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Tuple

from dstructs.mwaytree import MwayEntry, MwayNode


class UnknownSymbolError(KeyError):
    """Raised when a key holds a character outside the trie's alphabet."""


class Trie:
    """A trie whose nodes have one slot per symbol of the alphabet.

    ``mapper`` turns a character into a slot index and ``unmapper`` turns
    an index back into a character. Stored values must not be None.
    """

    def __init__(
        self,
        alphabet_size: int = 256,
        mapper: Callable[[str], int] = ord,
        unmapper: Callable[[int], str] = chr,
    ) -> None:
        self.alphabet_size = alphabet_size
        self.mapper = mapper
        self.unmapper = unmapper
        self._root = MwayEntry()
        self._count = 0

    def _index(self, char: str) -> int:
        index = self.mapper(char)
        if not 0 <= index < self.alphabet_size:
            raise UnknownSymbolError(char)
        return index

    def _find(self, key: str) -> Optional[MwayEntry]:
        entry = self._root
        for char in key:
            if entry.child is None:
                return None
            entry = entry.child.entry(self._index(char))
        return entry

    def put(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key``; return the value it replaced, or None."""
        if value is None:
            raise ValueError("trie values must not be None")
        entry = self._root
        for char in key:
            if entry.child is None:
                entry.child = MwayNode(self.alphabet_size)
            entry = entry.child.entry(self._index(char))
        old = entry.data
        if old is None:
            self._count += 1
        entry.data = value
        return old

    def get(self, key: str) -> Any:
        """Return the value under ``key``; raise KeyError if there is none."""
        entry = self._find(key)
        if entry is None or entry.data is None:
            raise KeyError(key)
        return entry.data

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        entry = self._find(key)
        if entry is None or entry.data is None:
            raise KeyError(key)
        value, entry.data = entry.data, None
        self._count -= 1
        return value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.get(key)
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def prefix_items(self, prefix: str = "") -> Iterator[Tuple[str, Any]]:
        """Yield ``(key, value)`` for every key starting with ``prefix``.

        Keys come depth first, in slot order; stop early by leaving the loop.
        """
        try:
            entry = self._find(prefix)
        except UnknownSymbolError:
            return
        if entry is None:
            return
        if entry.data is not None:
            yield prefix, entry.data
        if entry.child is not None:
            yield from self._walk(entry.child, prefix)

    def _walk(self, node: MwayNode, path: str) -> Iterator[Tuple[str, Any]]:
        for index, entry in enumerate(node.entries):
            key = path + self.unmapper(index)
            if entry.data is not None:
                yield key, entry.data
            if entry.child is not None:
                yield from self._walk(entry.child, key)

    def longest_prefix(self, key: str) -> int:
        """Return the length of the longest stored key that begins ``key``."""
        entry = self._root
        longest = 0
        for length, char in enumerate(key, start=1):
            if entry.child is None:
                break
            index = self.mapper(char)
            if not 0 <= index < self.alphabet_size:
                break
            entry = entry.child.entry(index)
            if entry.data is not None:
                longest = length
        return longest

    def clear(self, deinit: Optional[Callable[[Any], Any]] = None) -> None:
        """Drop every key, handing each stored value to ``deinit``."""
        if self._root.child is not None:
            self._root.child.clear(deinit)
            self._root.child = None
        if deinit is not None and self._root.data is not None:
            deinit(self._root.data)
        self._root.data = None
        self._count = 0