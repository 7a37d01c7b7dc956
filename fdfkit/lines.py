"""Reading a stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["BUFFER_SIZE", "LineReader", "iter_lines"]

BUFFER_SIZE = 100_000


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line of a stream that does
    not end in a newline is returned without one. Data is read in chunks of
    ``buffer_size`` and whatever follows a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"

    def _has_newline(self) -> bool:
        pending = self._pending
        return pending is not None and self._newline(pending) in pending

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing left."""
        while not self._has_newline():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline(pending))
        if index < 0:
            self._pending = None
            return pending
        line = pending[: index + 1]
        self._pending = pending[index + 1:] or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order, newlines included."""
    yield from LineReader(stream)