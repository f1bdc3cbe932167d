"""A small printf with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_CONVERSIONS = frozenset("cspdiuxX")
_UINT32 = 0xFFFF_FFFF
_UINT64 = 0xFFFF_FFFF_FFFF_FFFF


def _as_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c needs a single character")
            return value
        return chr(value & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = value & _UINT64
        return "(nil)" if address == 0 else "0x" + format(address, "x")
    if spec in ("d", "i"):
        return str(_as_int32(value))
    if spec == "u":
        return str(value & _UINT32)
    if spec == "x":
        return format(value & _UINT32, "x")
    return format(value & _UINT32, "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and take no argument; a lone
    trailing '%' is dropped. Missing arguments raise TypeError.
    """
    values: Iterator[Any] = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            parts.append(_convert(spec, value))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)