"""Byte-buffer operations over bytearray and writable memoryview objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadBuffer = Union[bytes, bytearray, memoryview]


def _check_room(name: str, buf, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, fewer than {n}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buffer with value (truncated to a byte)."""
    _check_room("buffer", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Buffer, src: ReadBuffer, n: int) -> Buffer:
    """Copy n bytes from src into the start of dst."""
    _check_room("src", src, n)
    _check_room("dst", dst, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer, src: ReadBuffer, n: int) -> Buffer:
    """Copy n bytes from src into dst; the two may share memory."""
    _check_room("src", src, n)
    _check_room("dst", dst, n)
    snapshot = bytes(src[:n])
    dst[:n] = snapshot
    return dst


def memchr(data: ReadBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of byte c in the first n bytes of data, or None."""
    if n <= 0:
        return None
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadBuffer, b: ReadBuffer, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair."""
    if n == 0:
        return 0
    _check_room("a", a, n)
    _check_room("b", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0