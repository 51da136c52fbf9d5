"""Line-by-line reading from a file descriptor."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 42
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class LineReader:
    """Read lines from a file descriptor, one line per call.

    Data is read in fixed-size chunks and whatever follows a newline is
    kept for the next call, so the descriptor may be shared with nothing
    else while a reader is in use. The reader does not own or close the
    descriptor.
    """

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        self.fd = fd
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, BUFFER_SIZE)
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line with its newline, or ``None`` at end of input.

        The last line is returned without a newline if the input does not
        end with one. Read errors are raised as ``OSError``; text already
        buffered is discarded when that happens.
        """
        try:
            self._fill()
        except OSError:
            self._pending = b""
            raise
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition(b"\n")
        self._pending = rest
        return (line + newline).decode(ENCODING, ERRORS)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line