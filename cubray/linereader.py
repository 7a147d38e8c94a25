"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._cache: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._cache, bytes) else "\n"  # type: ignore[return-value]

    def _take(self) -> Optional[AnyStr]:
        cache = self._cache
        if cache is None:
            return None
        index = cache.find(self._newline())
        if index < 0:
            line, rest = cache, cache[:0]
        else:
            line, rest = cache[: index + 1], cache[index + 1:]
        if not line:
            self._cache = None
            return None
        self._cache = rest
        return line

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._cache is not None and self._newline() in self._cache:
                return self._take()
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._cache = None
                raise
            if chunk is None:
                chunk = self._cache[:0] if self._cache is not None else ""
            self._cache = chunk if self._cache is None else self._cache + chunk
            if not chunk:
                return self._take()

    def reset(self) -> None:
        """Drop anything read ahead but not yet returned."""
        self._cache = None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> List[AnyStr]:
    """Return every line of ``stream``, newlines included."""
    return list(LineReader(stream, buffer_size))