"""Blocking file digests: the calling thread does all of the I/O."""

from __future__ import annotations

import logging
import os
from typing import Any

from .stream import DEFAULT_CHUNK_SIZE, StreamingDigest, open_source
from .variants import HashVariant

_log = logging.getLogger(__name__)


def file_digest(
    path: str | os.PathLike[str],
    variant: HashVariant | Any = HashVariant.SHA256,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Return the lowercase hex digest of the file at ``path``.

    Raises a :class:`~sha2hasher.hashing.errors.FileDigestError` subclass when
    the path is missing, unreadable, not a regular file, or a read fails.
    """

    digest = StreamingDigest(HashVariant.parse(variant), path, chunk_size=chunk_size)
    _log.debug("Hashing %s with %s (chunk_size=%d)", digest.path, digest.variant.label, digest.chunk_size)

    with open_source(digest.path) as handle:
        for count in iter(lambda: digest.fill(handle), 0):
            digest.update(count)

    _log.debug("Hashed %s: %d bytes", digest.path, digest.bytes_read)
    return digest.hexdigest()


__all__ = ["file_digest"]
