"""Minimal printf-style formatting with a fixed set of conversions.

Supported conversions are ``%s``, ``%c``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``.  Integers wrap the way C ``int``, ``unsigned int``
and ``unsigned long`` values do.  A ``%`` followed by any other character is
dropped and the character is kept; a trailing ``%`` is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_hex(value: int, digits: str) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(value: int, upper: bool) -> str:
    """Render ``value`` as a 32-bit unsigned hexadecimal number."""
    return _to_hex(value & _UINT32_MASK, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def format_unsigned(value: int) -> str:
    """Render ``value`` as a 32-bit unsigned decimal number."""
    return str(value & _UINT32_MASK)


def format_pointer(value: int) -> str:
    """Render ``value`` as a 64-bit address with a ``0x`` prefix."""
    return "0x" + _to_hex(value & _UINT64_MASK, _LOWER_DIGITS)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_signed(value: Any) -> str:
    return str(_to_int32(int(value)))


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _format_string,
    "c": _format_char,
    "d": _format_signed,
    "i": _format_signed,
    "u": lambda v: format_unsigned(int(v)),
    "x": lambda v: format_hex(int(v), False),
    "X": lambda v: format_hex(int(v), True),
    "p": lambda v: format_pointer(int(v)),
}


def format_message(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` using ``args`` in order."""
    values: Iterator[Any] = iter(args)
    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            out.append(_CONVERSIONS[spec](value))
        elif spec:
            out.append(spec)
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted message to standard output; return its length."""
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)