"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE", "MAX_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 1
MAX_BUFFER_SIZE = 2147483646


class LineReader(Generic[AnyStr]):
    """Return one line at a time from ``stream``, newline included.

    The stream is read ``buffer_size`` characters (or bytes) at a time, and
    whatever follows a newline in a read is kept for the next call. Works
    with text and binary streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if stream is None:
            raise TypeError("stream must not be None")
        self.stream = stream
        self.buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._pending: AnyStr | None = None

    def next_line(self) -> AnyStr | None:
        """Next line with its newline, the unterminated last line, or None at end of input.

        A read error discards any text held back and is raised again.
        """
        pending = self._pending
        searched = 0
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                index = pending.find(newline, searched)
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[: index + 1]
                searched = len(pending)
            try:
                chunk = self.stream.read(self.buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                self._pending = None
                return pending if pending else None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, newlines included."""
    yield from LineReader(stream)