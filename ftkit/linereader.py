"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 3


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline kept.

    The stream is read in chunks of ``buffer_size`` and only as far as the
    next newline; what is left over is kept for the following call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(
                f"buffer_size must be an int, got {type(buffer_size).__name__}"
            )
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._leftover: Optional[AnyStr] = None
        self._nl: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        """Read until the pending data holds a newline or the stream ends."""
        pending = self._leftover
        while pending is None or self._nl not in pending:
            chunk = self._stream.read(self._buffer_size)
            if chunk is None:
                break
            if pending is None:
                pending = chunk[:0]
                self._nl = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            if not chunk:
                break
            pending += chunk
        return pending

    def read_line(self) -> Optional[AnyStr]:
        """The next line, ending in a newline unless it is the last; None at the end."""
        pending = self._fill()
        if not pending:
            self._leftover = None
            return None
        index = pending.find(self._nl)  # type: ignore[arg-type]
        if index < 0:
            self._leftover = None
            return pending
        line = pending[: index + 1]
        rest = pending[index + 1:]
        self._leftover = rest if rest else None
        return line

    def __iter__(self) -> "LineReader[AnyStr]":
        return self

    def __next__(self) -> AnyStr:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line