"""Byte-buffer search, comparison, copy and fill helpers."""

from __future__ import annotations


def _check_span(name: str, buffer, offset: int, n: int) -> None:
    if n < 0 or offset < 0 or offset + n > len(buffer):
        raise ValueError(
            f"{name}: range [{offset}, {offset + n}) outside buffer of {len(buffer)} bytes"
        )


def find_byte(data: bytes, value: int, n: int) -> int | None:
    """Return the index of ``value`` (as a byte) in the first ``n`` bytes, or None."""
    index = bytes(data[: max(n, 0)]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Return the difference of the first unequal bytes within ``n``, else 0."""
    _check_span("a", a, 0, n)
    _check_span("b", b, 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def copy_bytes(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    _check_span("dest", dest, 0, n)
    _check_span("src", src, 0, n)
    dest[:n] = src[:n]
    return dest


def move_bytes(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``; ranges may overlap."""
    _check_span("src", buffer, src, n)
    _check_span("dest", buffer, dest, n)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def fill_bytes(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (as a byte)."""
    _check_span("buffer", buffer, 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer