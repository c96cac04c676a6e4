"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import operator
import os
from collections.abc import Iterator
from typing import Any

BUFFER_SIZE = 5


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the last line of the input is
    returned even without one. Lines are decoded as UTF-8, with undecodable
    bytes kept as surrogate escapes.
    """

    def __init__(self, fd: int | Any, buffer_size: int = BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd if isinstance(fd, int) else fd.fileno()
        self._buffer_size = buffer_size
        self._pending = b""

    def _read(self, size: int) -> bytes:
        try:
            return os.read(self._fd, size)
        except OSError:
            self._pending = b""
            raise

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` once the input is exhausted.

        Raises ``OSError`` if the descriptor cannot be read.
        """
        self._read(0)
        while b"\n" not in self._pending:
            chunk = self._read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        cut = len(self._pending) if newline < 0 else newline + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line