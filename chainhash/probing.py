"""A fixed-size hash table that resolves collisions by linear probing."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, List, Optional, TextIO, Union

from chainhash.chained import Entry
from chainhash.hashing import hash_name_stepwise

Hasher = Callable[[str, int], int]


class TableFullError(RuntimeError):
    """Raised when no free or deleted slot is left for an insertion."""


class _Deleted:
    """Marker for a slot whose entry was removed."""

    def __repr__(self) -> str:
        return "<DELETED>"


_DELETED = _Deleted()

_Slot = Union[None, _Deleted, Entry]


class LinearProbeHashTable:
    """Open-addressing hash table of ``Entry`` objects.

    Deleted slots keep a tombstone, so lookups continue past them while
    insertions may reuse them.
    """

    def __init__(self, table_size: int = 34, hasher: Hasher = hash_name_stepwise) -> None:
        if table_size < 1:
            raise ValueError(f"table size must be positive, got {table_size}")
        self.table_size = table_size
        self._hasher = hasher
        self._slots: List[_Slot] = [None] * table_size

    def _probe(self, name: str) -> Iterator[int]:
        start = self._hasher(name, self.table_size)
        for step in range(self.table_size):
            yield (start + step) % self.table_size

    def _find(self, name: str) -> Optional[int]:
        if name is None:
            raise ValueError("name must not be None")
        for index in self._probe(name):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is _DELETED:
                continue
            if slot.name == name:
                return index
        return None

    def insert(self, entry: Entry) -> None:
        """Place ``entry`` in the first empty or deleted slot along its probe path."""
        if entry is None:
            raise ValueError("cannot insert None")
        for index in self._probe(entry.name):
            if self._slots[index] is None or self._slots[index] is _DELETED:
                self._slots[index] = entry
                return
        raise TableFullError(f"no free slot for {entry.name!r}")

    def lookup(self, name: str) -> Optional[Entry]:
        """Return the entry called ``name``, or None if absent."""
        index = self._find(name)
        return None if index is None else self._slots[index]

    def delete(self, name: str) -> Optional[Entry]:
        """Replace the entry called ``name`` with a tombstone and return it."""
        index = self._find(name)
        if index is None:
            return None
        found = self._slots[index]
        self._slots[index] = _DELETED
        return found

    def render(self) -> str:
        """Return the table as text: one line per slot."""
        lines = []
        for index, slot in enumerate(self._slots):
            if slot is None:
                lines.append(f"\t{index}\t---\n")
            elif slot is _DELETED:
                lines.append(f"\t{index}\t-<DELETED>-\n")
            else:
                lines.append(f"\t{index}\t{slot.name}\n")
        return "".join(lines)

    def print_table(self, file: Optional[TextIO] = None) -> None:
        """Write :meth:`render` output to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def __len__(self) -> int:
        return sum(isinstance(slot, Entry) for slot in self._slots)