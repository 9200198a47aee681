"""SHA-2 file hashing in blocking and asyncio flavours."""

from .aio import file_digest_async
from .blocking import file_digest
from .errors import (
    FileDigestError,
    SourceAccessDeniedError,
    SourceNotAFileError,
    SourceNotFoundError,
    SourceReadError,
    wrap_os_error,
)
from .hasher import MODES, AsyncSha2Hasher, Mode, Sha2Hasher, hasher_for
from .stream import DEFAULT_CHUNK_SIZE, StreamingDigest, open_source
from .variants import HashVariant

__all__ = [
    "AsyncSha2Hasher",
    "DEFAULT_CHUNK_SIZE",
    "FileDigestError",
    "HashVariant",
    "MODES",
    "Mode",
    "Sha2Hasher",
    "SourceAccessDeniedError",
    "SourceNotAFileError",
    "SourceNotFoundError",
    "SourceReadError",
    "StreamingDigest",
    "file_digest",
    "file_digest_async",
    "hasher_for",
    "open_source",
    "wrap_os_error",
]
