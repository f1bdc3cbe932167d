"""String helpers: bounded copy and concatenation, searching, slicing and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence

_NUL = "\0"


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``. When the
    returned length is ``size`` or more, the copy was truncated.
    """
    _check_non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had: ``min(len(dst), size) + len(src)``. If ``dst`` already fills the
    buffer, nothing is appended.
    """
    _check_non_negative(size, "size")
    used = min(len(dst), size)
    appended, src_len = strlcpy(src, size - used)
    return dst + appended, src_len + used


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives ``len(s)``, the terminator's place.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives ``len(s)``.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0; 0 when the compared parts are equal.
    """
    _check_non_negative(n, "n")
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly within ``haystack[:length]``.

    An empty needle is found at 0. Returns None when there is no match.
    """
    _check_non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return first + second


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [part for part in s.split(sep) if part]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place by ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)