"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code.
The case converters give back the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int):
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else comes back unchanged."""
    code = _code(c)
    if _is_lower(code):
        code -= ord("a") - ord("A")
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else comes back unchanged."""
    code = _code(c)
    if _is_upper(code):
        code += ord("a") - ord("A")
    return _convert(c, code)