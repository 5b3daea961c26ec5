"""Lazy, closable line streams.

Lines end at ``\\n``, ``\\r`` or ``\\r\\n``. The terminator is not part of
the line and a final terminator does not start an empty trailing line.
Unlike ``str.splitlines`` no other characters (form feed, vertical tab,
unicode separators) break lines.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import IO, BinaryIO


class LineStream(Iterator[str]):
    """Forward-only iterator over the lines of a text source.

    Close it when done, preferably with a ``with`` block:

        with reader.as_stream("input.txt") as lines:
            for line in lines:
                ...
    """

    def __init__(self, source: IO[str]):
        self._source = source

    def __enter__(self) -> LineStream:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def __iter__(self) -> LineStream:
        return self

    def __next__(self) -> str:
        if self._source.closed:
            raise ValueError("I/O operation on closed line stream")

        line = self._source.readline()
        if not line:
            raise StopIteration
        # Universal newline mode has already translated \r and \r\n.
        if line.endswith("\n"):
            return line[:-1]
        return line

    @property
    def closed(self) -> bool:
        return self._source.closed

    def close(self) -> None:
        self._source.close()


def open_line_stream(stream: BinaryIO, encoding: str = "utf-8") -> LineStream:
    """Wrap a binary stream; closing the line stream closes ``stream`` too."""
    return LineStream(io.TextIOWrapper(stream, encoding=encoding, newline=None))


def text_lines(text: str) -> LineStream:
    """Get the lines of an in-memory string."""
    return LineStream(io.StringIO(text, newline=None))
