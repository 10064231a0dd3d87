"""Character classification and case conversion over ASCII codes.

Every function accepts either an integer character code or a
one-character string.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def is_lower(c: CharLike) -> bool:
    """True for 'a' to 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c: CharLike) -> bool:
    """True for 'A' to 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c: CharLike) -> bool:
    """True for '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable codes 32 to 126."""
    return 32 <= _code(c) <= 126


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Return the upper-case form of a lower-case letter, anything else unchanged."""
    code = _code(c)
    if is_lower(code):
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Return the lower-case form of an upper-case letter, anything else unchanged."""
    code = _code(c)
    if is_upper(code):
        code += _CASE_OFFSET
    return _same_kind(c, code)