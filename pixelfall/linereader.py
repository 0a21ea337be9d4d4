"""Incremental line reading from a text stream, one buffered chunk at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, TextIO

DEFAULT_BUFFER_SIZE = 1


def split_first_line(text: str) -> tuple[Optional[str], str]:
    """Split ``text`` into its first line (newline kept) and the remainder.

    Returns ``(None, "")`` when ``text`` is empty. Text without a newline is
    returned whole as the line, with nothing left over.
    """
    if not text:
        return None, ""
    end = text.find("\n")
    if end < 0:
        return text, ""
    return text[: end + 1], text[end + 1 :]


class LineReader:
    """Reads lines from a stream, pulling ``buffer_size`` characters at a time."""

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def next_line(self) -> Optional[str]:
        """Return the next line including its newline, or None at end of input."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        line, self._pending = split_first_line(self._pending)
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield every line of ``stream``, newlines kept."""
    yield from LineReader(stream, buffer_size)