"""String helpers: number conversion, splitting, trimming and bounded copies."""

from __future__ import annotations

from typing import Optional

_SPACE_CHARS = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_SPACE_CHARS)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError("separator must be a single character")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters in ``charset`` from both ends of ``text``.

    With no charset the text comes back unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (first or "") + (second or "")


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when absent.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have
    had. When ``size`` does not exceed the length of ``dst``, ``dst`` is left
    as it is and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copy, truncated to ``size - 1`` characters, and ``len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)