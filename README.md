# chainhash

Small fixed-size hash tables that map string names to `Entry` objects
(a `name` and an integer `val`). There are two kinds:

- `chainhash.chained.ChainedHashTable` resolves collisions by separate
  chaining. A new entry goes to the front of its bucket's chain, so
  `lookup` finds the most recently inserted entry with a given name.
- `chainhash.probing.LinearProbeHashTable` resolves collisions by linear
  probing. Deleted slots are kept as tombstones, so lookups still reach
  entries that sit after them, and inserts may reuse them. An insert
  into a table with no free or deleted slot raises `TableFullError`.

Both tables map a name to a bucket with the hash functions in
`chainhash.hashing`. They work on the name's UTF-8 bytes, each taken as
a signed 8-bit value:

- `hash_name(name, table_size)` adds and then multiplies each byte into
  a 32-bit unsigned value and reduces modulo the table size once, at the
  end. It is the default for `ChainedHashTable`.
- `hash_name_stepwise(name, table_size)` does the same but reduces
  modulo the table size after every byte. It is the default for
  `LinearProbeHashTable`.

Both raise `ValueError` for a table size below 1. Either table takes a
`hasher` argument to use another function with the same signature.

## Installation

```
pip install chainhash
```

## Usage

```python
from chainhash.chained import ChainedHashTable, Entry

with ChainedHashTable(44) as table:
    table.insert(Entry("+", 13))
    table.insert(Entry("cons", 32))

    found = table.lookup("+")
    print(found.name, found.val)   # + 13
    print("cons" in table)         # True
    print(len(table))              # 2

    table.delete("cons")
    table.print_table()            # one line per bucket; empty buckets show ---
```

`lookup` and `delete` return the entry, or `None` when the name is not
present. Passing `None` as the name, or inserting `None`, raises
`ValueError`.

`ChainedHashTable` also offers:

- `buckets()`, which yields each bucket's chain as a tuple, head first,
  in index order;
- `render()`, which returns the text that `print_table(file=None)`
  writes (to standard output by default);
- `close()`, which passes every entry to the optional `destroy` callback
  and empties the table. Leaving a `with` block calls it. Once closed,
  inserts, lookups, deletes and `buckets()` raise `RuntimeError`.

```python
from chainhash.chained import Entry
from chainhash.probing import LinearProbeHashTable

table = LinearProbeHashTable(34)   # 34 slots is also the default
table.insert(Entry("if", 43))
table.delete("if")
print(table.render())              # the freed slot shows -<DELETED>-
```

`LinearProbeHashTable.render()` prints one line per slot: `---` for an
empty slot, `-<DELETED>-` for a tombstone, otherwise the entry's name.
`len()` counts only live entries.

## Demo

The demo loads a fixed set of 45 operator and keyword names into a
table, prints the table and then looks up `+`.

```
chainhash-demo
chainhash-demo --kind chaining
chainhash-demo --kind probing
```

`--kind` chooses the table:

- `hash` (default): a `ChainedHashTable` of 44 buckets using `hash_name`;
- `chaining`: a `ChainedHashTable` of 34 buckets using
  `hash_name_stepwise`;
- `probing`: a `LinearProbeHashTable` of 34 slots. The names that do not
  fit are left out, and `Collision!` is printed once for each.

From Python, `chainhash.demo.demo_entries()` returns the demo's entries
and `chainhash.demo.build_table(kind)` returns a filled table of the
given kind.

## Limits

The tables have a fixed number of buckets chosen at construction; they
never grow or rehash, and they keep entries in memory only.