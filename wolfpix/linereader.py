"""Read newline-separated lines from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline removed.

    The stream is read ``buffer_size`` units at a time. A final line without
    a terminating newline is still returned; an empty tail is not.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._buffer, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> bool:
        """Read one more chunk; False once the stream is exhausted."""
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return False
        self._buffer = chunk if self._buffer is None else self._buffer + chunk
        return True

    def readline(self) -> Optional[AnyStr]:
        """The next line without its newline, or None at end of stream."""
        while True:
            if self._buffer is not None:
                cut = self._buffer.find(self._newline())
                if cut >= 0:
                    line = self._buffer[:cut]
                    self._buffer = self._buffer[cut + 1 :]
                    return line
            if not self._fill():
                break
        if not self._buffer:
            return None
        line = self._buffer
        self._buffer = line[:0]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Every line of ``stream``, newlines removed."""
    return list(LineReader(stream))