"""Character search and comparison helpers for scene-file text."""

from __future__ import annotations

from itertools import islice, zip_longest

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def find_char(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def _difference(pairs) -> int:
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch."""
    return _difference(zip_longest(s1, s2, fillvalue=_NUL))


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return _difference(islice(zip_longest(s1, s2, fillvalue=_NUL), n))


def find_within(big: str, little: str, length: int) -> int | None:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if not little:
        return 0
    index = big[: max(length, 0)].find(little)
    return None if index < 0 else index


def to_lower(c: str) -> str:
    """Lower-case an ASCII capital letter; anything else is returned unchanged."""
    _check_char(c)
    if "A" <= c <= "Z":
        return chr(ord(c) + 32)
    return c


def to_upper(c: str) -> str:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    _check_char(c)
    if "a" <= c <= "z":
        return chr(ord(c) - 32)
    return c