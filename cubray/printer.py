"""A small printf: the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from .numfmt import DECIMAL, format_base

CONVERSIONS = "cspdiuxX%"
NULL_POINTER = "(nil)"
NULL_STRING = "(null)"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"


class PrintfError(ValueError):
    """A format string could not be rendered."""


def _wrap(value: Any, bits: int, signed: bool) -> int:
    number = int(value) & ((1 << bits) - 1)
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise PrintfError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return NULL_POINTER
    return "0x" + format_base(_wrap(value, 64, signed=False), LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise PrintfError(f"no argument left for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return NULL_STRING if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return format_base(_wrap(value, 32, signed=True), DECIMAL)
    if spec == "u":
        return format_base(_wrap(value, 32, signed=False), DECIMAL)
    if spec == "x":
        return format_base(_wrap(value, 32, signed=False), LOWER_HEX)
    return format_base(_wrap(value, 32, signed=False), UPPER_HEX)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A ``%`` followed by an unknown conversion is kept as written; a ``%``
    at the very end of the format is an error.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise PrintfError("format ends with a lone '%'")
        if spec in CONVERSIONS:
            pieces.append(_convert(spec, values))
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Render ``fmt`` to ``stream`` (standard output by default); return the length written."""
    text = render(fmt, *args)
    _target(stream).write(text)
    return len(text)


def write_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write one character; return 1."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def write_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string; None writes nothing. Return the length written."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def write_line(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string and a newline; None writes nothing. Return the length written."""
    if s is None:
        return 0
    _target(stream).write(s + "\n")
    return len(s) + 1