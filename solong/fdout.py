"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str | int, fd: int) -> None:
    """Write one character (or one byte value) to ``fd``."""
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if len(c) != 1:
        raise TypeError(f"expected a single character, got {len(c)} characters")
    _write_all(fd, c.encode("utf-8"))


def put_str_fd(s: str, fd: int) -> None:
    """Write a string to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str, fd: int) -> None:
    """Write a string followed by a newline to ``fd``."""
    put_str_fd(s, fd)
    _write_all(fd, b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write an integer in decimal to ``fd``."""
    put_str_fd(str(n), fd)