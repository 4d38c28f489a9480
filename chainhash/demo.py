"""Demonstration: fill a table with operator and keyword names and look one up."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Union

from chainhash.chained import ChainedHashTable, Entry
from chainhash.hashing import hash_name, hash_name_stepwise
from chainhash.probing import LinearProbeHashTable, TableFullError

Table = Union[ChainedHashTable, LinearProbeHashTable]

_DEMO_DATA = (
    ("+", 13), ("-", 23), ("/", 43), ("*", 32), ("%", 13), ("=", 23),
    ("!=", 43), ("<", 32), ("<=", 13), (">", 23), (">=", 43), ("!", 32),
    (":=", 1), ("and", 13), ("cell", 23), ("chr", 43), ("cons", 32),
    ("def", 13), ("do", 23), ("error", 43), ("fn", 32), ("get-file", 13),
    ("head", 23), ("if", 43), ("input", 32), ("let", 13), ("list", 23),
    ("load", 43), ("loop", 32), ("macro", 13), ("not", 23),
    ("new-symbol", 43), ("or", 32), ("ord", 13), ("output", 23),
    ("parse", 43), ("print", 32), ("put-file", 13), ("quit", 23),
    ("quote", 43), ("read", 32), ("str", 13), ("tail", 23), ("try", 43),
    ("type", 32),
)


class TableKind(Enum):
    """The table variants the demo can build."""

    HASH = "hash"
    CHAINING = "chaining"
    PROBING = "probing"


def demo_entries() -> List[Entry]:
    """Return fresh entries for every name the demo inserts, in insertion order."""
    return [Entry(name, val) for name, val in _DEMO_DATA]


def _new_table(kind: Union[str, TableKind]) -> Table:
    try:
        kind = TableKind(kind)
    except ValueError:
        raise ValueError(f"unknown table kind: {kind!r}") from None
    if kind is TableKind.HASH:
        return ChainedHashTable(44, None, hash_name)
    if kind is TableKind.CHAINING:
        return ChainedHashTable(34, None, hash_name_stepwise)
    return LinearProbeHashTable(34, hash_name_stepwise)


def _populate(table: Table) -> Iterator[Entry]:
    """Insert every demo entry, yielding those for which no slot was free."""
    for entry in demo_entries():
        try:
            table.insert(entry)
        except TableFullError:
            yield entry


def build_table(kind: Union[str, TableKind]) -> Table:
    """Build a table of the given kind filled with the demo entries.

    Entries that do not fit into a linear-probing table are left out.
    """
    table = _new_table(kind)
    for _ in _populate(table):
        pass
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fill a table, print it and look up ``+``."""
    parser = argparse.ArgumentParser(description="Hash table demonstration.")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in TableKind],
        default=TableKind.HASH.value,
        help="which table to build (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    table = _new_table(args.kind)
    for _ in _populate(table):
        print("Collision!")

    table.print_table(sys.stdout)

    found = table.lookup("+")
    if found is not None:
        print(f"Found {found.name} (val={found.val})")
    else:
        print("Did not find +")

    if isinstance(table, ChainedHashTable):
        table.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())