"""Byte-buffer helpers: zeroing, filling, copying, searching and comparing."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _require_length(buf: Buffer, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise IndexError(f"{what} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buf`` to ``value`` (low 8 bits)."""
    _require_length(buf, count)
    buf[:count] = bytes([value & 0xFF]) * count
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(num: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``num`` elements of ``size`` bytes."""
    if num < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and num > SIZE_MAX // size:
        raise MemoryError("requested size overflows")
    return bytearray(num * size)


def memchr(block: Buffer, value: int, size: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``size`` bytes, or None."""
    _require_length(block, size, "block")
    index = bytes(memoryview(block)[:size]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, size: int) -> int:
    """Compare ``size`` bytes; return the difference at the first mismatch or 0."""
    _require_length(first, size, "first")
    _require_length(second, size, "second")
    for a, b in zip(memoryview(first)[:size], memoryview(second)[:size]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _require_length(dest, n, "dest")
    _require_length(src, n, "src")
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest, src) + n > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    if dest != src and n:
        buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf