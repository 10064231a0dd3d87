"""Conversions between integers and their text forms."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_HEX_DIGITS = "0123456789ABCDEF"
_UINT_MODULUS = 1 << 32


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit
    and an absent number yields 0.
    """
    i = 0
    length = len(s)
    while i < length and (9 <= ord(s[i]) <= 13 or s[i] == " "):
        i += 1
    sign = 1
    if i < length and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < length and "0" <= s[i] <= "9":
        value = value * 10 + (ord(s[i]) - ord("0"))
        i += 1
    return value * sign


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{int(n):d}"


def dec_to_hex(number: int, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit value in upper-case hexadecimal.

    Negative values are taken as their unsigned 32-bit counterpart.
    Returns the number of characters written.
    """
    out = sys.stdout if stream is None else stream
    value = int(number) % _UINT_MODULUS
    digits = []
    while True:
        value, rem = divmod(value, 16)
        digits.append(_HEX_DIGITS[rem])
        if value == 0:
            break
    text = "".join(reversed(digits))
    out.write(text)
    return len(text)