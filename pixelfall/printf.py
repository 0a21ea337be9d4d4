"""A small printf: %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

DECIMAL_DIGITS = "0123456789"
LOWER_HEX_DIGITS = "0123456789abcdef"
UPPER_HEX_DIGITS = "0123456789ABCDEF"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_ULONG_LONG_MASK = 0xFFFFFFFFFFFFFFFF
_BYTE_MASK = 0xFF


def put_base(number: int, digits: str) -> str:
    """Render ``number`` using ``digits`` as the digit alphabet.

    Negative numbers get a leading minus sign.
    """
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        return "-" + put_base(-number, digits)
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & _BYTE_MASK)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return NULL_POINTER
    address = _as_int(value, "p") & _ULONG_LONG_MASK
    return "0x" + put_base(address, LOWER_HEX_DIGITS)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string(value)
    if conversion == "p":
        return _format_pointer(value)
    number = _as_int(value, conversion)
    if conversion in "di":
        return put_base(_to_int32(number), DECIMAL_DIGITS)
    if conversion == "u":
        return put_base(number & _UINT_MASK, DECIMAL_DIGITS)
    if conversion == "x":
        return put_base(number & _UINT_MASK, LOWER_HEX_DIGITS)
    return put_base(number & _UINT_MASK, UPPER_HEX_DIGITS)


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown conversions produce nothing; a lone ``%`` at the end is dropped.
    Surplus arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    remaining = iter(args)
    pieces = []
    position = 0
    while position < len(fmt):
        ch = fmt[position]
        if ch == "%":
            conversion = fmt[position + 1 : position + 2]
            if conversion:
                pieces.append(_convert(conversion, remaining))
            position += 2
        else:
            pieces.append(ch)
            position += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)