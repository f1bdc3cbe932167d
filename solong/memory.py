"""Byte-buffer helpers over bytes and bytearray objects."""

from __future__ import annotations


def _check_length(buf_len: int, length: int, what: str = "buffer") -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if length > buf_len:
        raise ValueError(f"length {length} exceeds {what} size {buf_len}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken mod 256)."""
    _check_length(len(buf), length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(len(data), length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare ``length`` bytes as unsigned values.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(len(first), length, "first buffer")
    _check_length(len(second), length, "second buffer")
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(len(dst), length, "destination")
    _check_length(len(src), length, "source")
    dst[:length] = src[:length]
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(len(buf) - dst, length, "destination region")
    _check_length(len(buf) - src, length, "source region")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf