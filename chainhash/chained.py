"""A fixed-size hash table that resolves collisions by chaining."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterator, List, Optional, TextIO, Tuple

from chainhash.hashing import hash_name

Hasher = Callable[[str, int], int]


@dataclass(eq=False)
class Entry:
    """A named value stored in a hash table."""

    name: str
    val: int = 0


class ChainedHashTable:
    """Hash table of ``Entry`` objects; each bucket is a chain, newest first."""

    def __init__(
        self,
        table_size: int,
        destroy: Optional[Callable[[Entry], None]] = None,
        hasher: Hasher = hash_name,
    ) -> None:
        if table_size < 1:
            raise ValueError(f"table size must be positive, got {table_size}")
        self.table_size = table_size
        self._destroy = destroy
        self._hasher = hasher
        self._buckets: List[Deque[Entry]] = [deque() for _ in range(table_size)]
        self._closed = False

    def _bucket(self, name: str) -> Deque[Entry]:
        if self._closed:
            raise RuntimeError("hash table is closed")
        return self._buckets[self._hasher(name, self.table_size)]

    def insert(self, entry: Entry) -> None:
        """Put ``entry`` at the head of its bucket's chain."""
        if entry is None:
            raise ValueError("cannot insert None")
        self._bucket(entry.name).appendleft(entry)

    def lookup(self, name: str) -> Optional[Entry]:
        """Return the most recently inserted entry called ``name``, or None."""
        if name is None:
            raise ValueError("name must not be None")
        return next((e for e in self._bucket(name) if e.name == name), None)

    def delete(self, name: str) -> Optional[Entry]:
        """Unlink and return the first entry called ``name``, or None if absent."""
        found = self.lookup(name)
        if found is not None:
            self._bucket(name).remove(found)
        return found

    def buckets(self) -> Iterator[Tuple[Entry, ...]]:
        """Yield each bucket's chain, head first, in index order."""
        if self._closed:
            raise RuntimeError("hash table is closed")
        for chain in self._buckets:
            yield tuple(chain)

    def render(self) -> str:
        """Return the table as text: one line per bucket."""
        lines = []
        for index, chain in enumerate(self.buckets()):
            if chain:
                names = "".join(f"{entry.name} - " for entry in chain)
                lines.append(f"\t{index}\t{names}\n")
            else:
                lines.append(f"\t{index}\t---\n")
        return "".join(lines)

    def print_table(self, file: Optional[TextIO] = None) -> None:
        """Write :meth:`render` output to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())

    def close(self) -> None:
        """Pass every entry to the destructor, if any, and empty the table."""
        if self._closed:
            return
        for chain in self._buckets:
            while chain:
                entry = chain.popleft()
                if self._destroy is not None:
                    self._destroy(entry)
        self._closed = True

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __enter__(self) -> "ChainedHashTable":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()