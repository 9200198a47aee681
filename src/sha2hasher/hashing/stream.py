"""Chunked streaming of a file into a SHA-2 state.

Both execution modes drive the same two pieces: :func:`open_source` to obtain
a validated read handle, and :class:`StreamingDigest` to pull fixed-size
chunks into a reusable buffer and feed them to the running hash.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import BinaryIO, Final

from .errors import SourceNotAFileError, wrap_os_error
from .variants import HashVariant

DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024


def open_source(path: str | os.PathLike[str]) -> BinaryIO:
    """Open ``path`` for binary reading after checking it is a regular file."""

    target = Path(path)
    try:
        mode = target.stat().st_mode
    except OSError as exc:
        raise wrap_os_error(exc, target) from exc
    if not stat.S_ISREG(mode):
        raise SourceNotAFileError(target)

    try:
        return target.open("rb")
    except OSError as exc:
        raise wrap_os_error(exc, target) from exc


def validate_chunk_size(chunk_size: int) -> int:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ValueError(f"chunk_size must be an integer, got {chunk_size!r}")
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    return chunk_size


class StreamingDigest:
    """Running hash state plus the read buffer of one in-flight computation."""

    def __init__(self, variant: HashVariant, path: str | os.PathLike[str], *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self.variant = variant
        self.path = Path(path)
        self.bytes_read = 0
        self._state = variant.new()
        self._buffer = bytearray(validate_chunk_size(chunk_size))
        self._view = memoryview(self._buffer)

    @property
    def chunk_size(self) -> int:
        return len(self._buffer)

    def fill(self, handle: BinaryIO) -> int:
        """Read the next chunk into the buffer; return its length (0 at EOF)."""
        try:
            count = handle.readinto(self._buffer)
        except OSError as exc:
            raise wrap_os_error(exc, self.path) from exc
        return count or 0

    def update(self, count: int) -> None:
        """Feed the first ``count`` buffered bytes into the hash state."""
        self._state.update(self._view[:count])
        self.bytes_read += count

    def hexdigest(self) -> str:
        return self._state.hexdigest()


__all__ = ["DEFAULT_CHUNK_SIZE", "StreamingDigest", "open_source", "validate_chunk_size"]
