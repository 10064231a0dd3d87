"""String helpers: searching, comparing, slicing, splitting and bounded copies.

Functions that work on plain Python strings take and return ``str``.
The bounded copy functions ``strlcpy`` and ``strlcat`` write NUL-terminated
text into a writable byte buffer such as a ``bytearray``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]
TextOrBytes = Union[str, bytes, bytearray, memoryview]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _terminated(data: TextOrBytes) -> TextOrBytes:
    """Return data cut at its first NUL, if it holds one."""
    if isinstance(data, str):
        end = data.find("\0")
    else:
        data = bytes(data)
        end = data.find(0)
    return data if end < 0 else data[:end]


def _as_c_bytes(src: TextOrBytes) -> bytes:
    raw = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    return bytes(_terminated(raw))


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: TextOrBytes) -> int:
    """Return the length of s up to (not including) its first NUL."""
    if s is None:
        raise TypeError("strlen() needs a string, not None")
    return len(_terminated(s))


def strnlen(s: TextOrBytes, maxlen: int) -> int:
    """Return the length of s up to its first NUL, but at most maxlen."""
    _check_size("maxlen", maxlen)
    return min(strlen(s), maxlen)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns 0 when equal, otherwise the code difference of the first
    differing pair, with the end of a string counting as code 0.
    """
    _check_size("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where needle starts within the first length characters, or None.

    An empty needle is found at index 0.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    if s is None:
        raise TypeError("strdup() needs a string, not None")
    return str(s)


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first n characters of s."""
    _check_size("n", n)
    return s[:n]


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start at or past the end gives an empty string.
    """
    if s is None:
        raise TypeError("substr() needs a string, not None")
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character in charset from both ends of s."""
    if s is None or charset is None:
        raise TypeError("strtrim() needs two strings")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on sep, dropping empty words."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call func(index, item) on every item of buffer, in place.

    A result other than None replaces the item.
    """
    for index, item in enumerate(list(buffer)):
        result = func(index, item)
        if result is not None:
            buffer[index] = result


def strlcpy(dst: Union[bytearray, memoryview], src: TextOrBytes, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    _check_size("size", size)
    if size > len(dst):
        raise ValueError(f"dst holds {len(dst)} bytes, fewer than {size}")
    data = _as_c_bytes(src)
    if size == 0:
        return len(data)
    copied = data[: size - 1]
    dst[: len(copied)] = copied
    dst[len(copied)] = 0
    return len(data)


def strlcat(dst: Union[bytearray, memoryview], src: TextOrBytes, size: int) -> int:
    """Append src to the NUL-terminated text in dst within size bytes.

    Returns the length dst had (bounded by size) plus the length of src.
    """
    _check_size("size", size)
    data = _as_c_bytes(src)
    if size == 0:
        return len(data)
    if size > len(dst):
        raise ValueError(f"dst holds {len(dst)} bytes, fewer than {size}")
    dst_len = strnlen(bytes(dst[:size]), size)
    if dst_len != size:
        to_copy = min(size - dst_len - 1, len(data))
        dst[dst_len:dst_len + to_copy] = data[:to_copy]
        dst[dst_len + to_copy] = 0
    return dst_len + len(data)