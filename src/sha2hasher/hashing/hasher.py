"""Path-bound hashers exposing one method per SHA-2 variant."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from .aio import file_digest_async
from .blocking import file_digest
from .stream import DEFAULT_CHUNK_SIZE, validate_chunk_size
from .variants import HashVariant

Mode = Literal["blocking", "async"]
MODES: tuple[str, ...] = ("blocking", "async")


class _BoundPath:
    def __init__(self, path: str | os.PathLike[str], *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self.path = Path(path)
        self.chunk_size = validate_chunk_size(chunk_size)

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r}, chunk_size={self.chunk_size})"


class Sha2Hasher(_BoundPath):
    """Hash the file at ``path`` on the calling thread.

    >>> Sha2Hasher("archive.tar").sha256()  # doctest: +SKIP
    """

    def digest(self, variant: HashVariant | Any) -> str:
        return file_digest(self.path, variant, chunk_size=self.chunk_size)

    def sha224(self) -> str:
        """Hashes with the SHA-224 algorithm."""
        return self.digest(HashVariant.SHA224)

    def sha256(self) -> str:
        """Hashes with the SHA-256 algorithm."""
        return self.digest(HashVariant.SHA256)

    def sha384(self) -> str:
        """Hashes with the SHA-384 algorithm."""
        return self.digest(HashVariant.SHA384)

    def sha512(self) -> str:
        """Hashes with the SHA-512 algorithm."""
        return self.digest(HashVariant.SHA512)


class AsyncSha2Hasher(_BoundPath):
    """Hash the file at ``path`` without blocking the event loop.

    >>> await AsyncSha2Hasher("archive.tar").sha256()  # doctest: +SKIP
    """

    async def digest(self, variant: HashVariant | Any) -> str:
        return await file_digest_async(self.path, variant, chunk_size=self.chunk_size)

    async def sha224(self) -> str:
        """Hashes with the SHA-224 algorithm."""
        return await self.digest(HashVariant.SHA224)

    async def sha256(self) -> str:
        """Hashes with the SHA-256 algorithm."""
        return await self.digest(HashVariant.SHA256)

    async def sha384(self) -> str:
        """Hashes with the SHA-384 algorithm."""
        return await self.digest(HashVariant.SHA384)

    async def sha512(self) -> str:
        """Hashes with the SHA-512 algorithm."""
        return await self.digest(HashVariant.SHA512)


def hasher_for(
    path: str | os.PathLike[str],
    *,
    mode: Mode = "blocking",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Sha2Hasher | AsyncSha2Hasher:
    """Return the hasher for the requested execution ``mode``.

    Both strategies are stateless and may be mixed freely in one process.
    """

    if mode == "blocking":
        return Sha2Hasher(path, chunk_size=chunk_size)
    if mode == "async":
        return AsyncSha2Hasher(path, chunk_size=chunk_size)
    raise ValueError(f"Unknown mode {mode!r}; expected one of: {', '.join(MODES)}")


__all__ = ["AsyncSha2Hasher", "MODES", "Mode", "Sha2Hasher", "hasher_for"]
