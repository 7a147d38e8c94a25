"""Integer formatting in arbitrary digit alphabets."""

from __future__ import annotations

DECIMAL = "0123456789"
_UNSIGNED_WRAP = 1 << 64


def _check_radix(base: int) -> None:
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")


def _magnitude_digits(m: int, base: int) -> int:
    count = 0
    while m:
        m //= base
        count += 1
    return count


def digit_count(n: int, base: int) -> int:
    """Characters needed to write ``n`` in ``base``, counting a minus sign."""
    _check_radix(base)
    if n == 0:
        return 1
    if n < 0:
        return 1 + _magnitude_digits(-n, base)
    return _magnitude_digits(n, base)


def unsigned_digit_count(n: int, base: int) -> int:
    """Digits needed to write the non-negative ``n`` in ``base``."""
    _check_radix(base)
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")
    return max(1, _magnitude_digits(n, base))


def _check_alphabet(base: str) -> None:
    if not base or len(base) <= 1:
        raise ValueError("digit alphabet needs at least two characters")
    if "+" in base or "-" in base:
        raise ValueError("digit alphabet may not contain '+' or '-'")
    if len(set(base)) != len(base):
        raise ValueError("digit alphabet has repeated characters")


def format_base(n: int, base: str) -> str:
    """Write ``n`` using the characters of ``base`` as digits.

    Negative numbers get a leading minus, except in a sixteen-digit alphabet,
    where they are written as their 64-bit two's complement.
    """
    _check_alphabet(base)
    radix = len(base)
    sign = ""
    if n < 0:
        if radix == 16:
            n %= _UNSIGNED_WRAP
        else:
            sign = "-"
            n = -n
    digits = []
    while True:
        n, r = divmod(n, radix)
        digits.append(base[r])
        if n == 0:
            break
    return sign + "".join(reversed(digits))


def format_int(n: int) -> str:
    """Write ``n`` in decimal with a leading minus when negative."""
    return format_base(n, DECIMAL)