"""Line-by-line reading from a stream using fixed-size reads."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1


def _find_newline(data: Optional[AnyStr]) -> int:
    """Return the index of the first newline in ``data``, or -1."""
    if data is None:
        return -1
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream`` in chunks of ``buffer_size``.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        data = self._pending
        while _find_newline(data) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            data = chunk if data is None else data + chunk
        if not data:
            self._pending = None
            return None
        end = _find_newline(data)
        if end < 0:
            self._pending = None
            return data
        self._pending = data[end + 1:]
        return data[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)