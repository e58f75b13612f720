"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 10


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ...) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of the stream
    may lack one. Data read past the end of a line is kept for the next
    call.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when no data is left."""
        chunks = [self._pending] if self._pending else []
        newline = self._newline(chunks[0]) if chunks else None
        while newline is None or newline not in chunks[-1]:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            if newline is None:
                newline = self._newline(chunk)
            chunks.append(chunk)
        if not chunks:
            self._pending = None
            return None
        data = chunks[0][:0].join(chunks)
        end = data.find(newline)
        if end < 0:
            self._pending = None
            return data
        self._pending = data[end + 1 :] or None
        return data[: end + 1]

    def __iter__(self) -> "LineReader[AnyStr]":
        return self

    def __next__(self) -> AnyStr:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line


def read_lines(stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)