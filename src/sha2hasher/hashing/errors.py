"""Typed failures raised while hashing a file.

Every error subclasses :class:`OSError`, names the offending path and keeps
the originating ``OSError`` as ``__cause__``.
"""

from __future__ import annotations

import os
from pathlib import Path


class FileDigestError(OSError):
    """Base class for failures while producing a file digest."""

    kind = "io_failure"
    reason = "I/O failure"

    def __init__(self, path: str | os.PathLike[str], detail: str | None = None) -> None:
        self.path = Path(path)
        self.detail = detail
        message = f"{self.reason}: {self.path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SourceNotFoundError(FileDigestError):
    """The path does not exist."""

    kind = "not_found"
    reason = "No such file"


class SourceAccessDeniedError(FileDigestError):
    """Permission was refused while opening or reading the path."""

    kind = "access_denied"
    reason = "Permission denied"


class SourceNotAFileError(FileDigestError):
    """The path exists but is not a regular file (directory, FIFO, device...)."""

    kind = "not_a_file"
    reason = "Not a regular file"


class SourceReadError(FileDigestError):
    """Any other open or read failure."""


def wrap_os_error(exc: OSError, path: str | os.PathLike[str]) -> FileDigestError:
    """Map a raw ``OSError`` onto the digest error taxonomy.

    The caller is expected to ``raise wrap_os_error(exc, path) from exc``.
    """

    if isinstance(exc, FileDigestError):
        return exc

    detail = exc.strerror or str(exc) or None
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return SourceNotFoundError(path, detail)
    if isinstance(exc, IsADirectoryError):
        return SourceNotAFileError(path, detail)
    if isinstance(exc, PermissionError):
        return SourceAccessDeniedError(path, detail)
    return SourceReadError(path, detail)


__all__ = [
    "FileDigestError",
    "SourceAccessDeniedError",
    "SourceNotAFileError",
    "SourceNotFoundError",
    "SourceReadError",
    "wrap_os_error",
]
