"""Reading a file descriptor or binary stream one line at a time."""

from __future__ import annotations

import os
from typing import Any, Dict, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 100
MAX_FD = 4096


class LineReader:
    """Reads newline-terminated lines from a descriptor or a file object.

    Each line keeps its trailing newline; a final line without one is
    returned as it is. read_line gives None once nothing is left.
    """

    def __init__(self, fd: Union[int, Any], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(fd, int) and fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self.fd, int):
            return os.read(self.fd, self.buffer_size)
        chunk = self.fd.read(self.buffer_size)
        if chunk is None:
            return b""
        if isinstance(chunk, str):
            return chunk.encode("utf-8")
        return bytes(chunk)

    def read_line(self) -> Optional[str]:
        """The next line, or None at the end of input."""
        if isinstance(self.fd, int):
            os.read(self.fd, 0)
        while b"\n" not in self._pending:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending.extend(chunk)
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line = bytes(self._pending)
            self._pending.clear()
        else:
            line = bytes(self._pending[: end + 1])
            del self._pending[: end + 1]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line from descriptor fd, keeping separate state for each descriptor."""
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"expected a file descriptor, got {type(fd).__name__}")
    if fd < 0 or fd > MAX_FD:
        raise ValueError(f"file descriptor {fd} is out of range")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line