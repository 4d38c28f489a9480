"""Hash functions that map a name to a bucket index."""

from __future__ import annotations

_UINT_MASK = 0xFFFFFFFF


def _signed_bytes(name: str):
    """Yield the name's UTF-8 bytes as signed 8-bit values."""
    for byte in name.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def _check_size(table_size: int) -> None:
    if table_size < 1:
        raise ValueError(f"table size must be positive, got {table_size}")


def hash_name(name: str, table_size: int) -> int:
    """Hash ``name`` with 32-bit unsigned arithmetic, reducing once at the end.

    Each byte is added to the running value and then multiplies it; the
    result is taken modulo ``table_size``.
    """
    _check_size(table_size)
    value = 0
    for char in _signed_bytes(name):
        value = (value + char) & _UINT_MASK
        value = (value * char) & _UINT_MASK
    return value % table_size


def hash_name_stepwise(name: str, table_size: int) -> int:
    """Hash ``name`` like :func:`hash_name` but reduce modulo the size at every step."""
    _check_size(table_size)
    value = 0
    for char in _signed_bytes(name):
        value = (value + char) & _UINT_MASK
        value = (value * char) & _UINT_MASK
        value %= table_size
    return value