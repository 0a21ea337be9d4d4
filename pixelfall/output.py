"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    stream.write(c)


def putstr_fd(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` to ``stream``; a missing string writes nothing."""
    if text is None:
        return
    stream.write(text)


def putendl_fd(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` and a newline; a missing string writes nothing."""
    if text is None:
        return
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    stream.write(str(n))


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal to ``stream``, standard output by default."""
    putnbr_fd(n, sys.stdout if stream is None else stream)