"""Reading a stream line by line in small chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

_CHUNK = 5


class LineReader(Generic[AnyStr]):
    """Splits a text or binary stream into lines, each keeping its newline."""

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream
        self._pending: AnyStr | None = None

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            pending = self._pending
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    line, rest = pending[: index + 1], pending[index + 1 :]
                    self._pending = rest or None
                    return line
            chunk = self._stream.read(_CHUNK)
            if not chunk:
                self._pending = None
                return pending
            self._pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """All lines of ``stream``, newlines kept."""
    return list(LineReader(stream))