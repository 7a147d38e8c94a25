"""String slicing, trimming, splitting and bounded-copy helpers."""

from __future__ import annotations

import copy
from typing import Callable, Iterable, Optional, Sequence


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def trim(s: str, charset: Optional[str]) -> str:
    """Strip characters of ``charset`` from both ends of ``s``.

    With no charset the string is returned unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def trim_tail(s: str, charset: Optional[str]) -> str:
    """Strip characters of ``charset`` from the end of ``s``.

    The first character always survives: a non-empty string made only of
    charset characters is cut down to its first character, never to nothing.
    """
    if charset is None:
        return s
    stripped = s.rstrip(charset)
    if not stripped and s:
        return s[0]
    return stripped


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def join(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    if s1 is None or s2 is None:
        raise TypeError("join needs two strings")
    return s1 + s2


def prefix_copy(s: str, length: int) -> str:
    """Copy ``s`` into a buffer of ``length`` slots, one of them the terminator.

    At most ``length - 1`` characters are kept.
    """
    _check_non_negative("length", length)
    if length == 0:
        return ""
    return s[:length - 1]


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so that truncation shows as ``len(text) < length``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When the
    buffer is no larger than ``dst`` nothing is appended and the length
    reported is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def each_indexed(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character.

    A string returned by ``func`` replaces the character; None leaves it.
    """
    result = []
    for index, char in enumerate(s):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def copy_rows(rows: Sequence, height: int) -> list:
    """Return independent copies of the first ``height`` rows."""
    _check_non_negative("height", height)
    if height > len(rows):
        raise ValueError(f"asked for {height} rows, only {len(rows)} present")
    return [copy.copy(row) for row in _first(rows, height)]


def _first(rows: Sequence, count: int) -> Iterable:
    return rows[:count]