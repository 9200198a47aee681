"""Suspending file digests for asyncio.

Opening and each chunk read run in the default executor through
:func:`asyncio.to_thread`, so the awaiting task yields while the kernel does
the I/O. Hash updates stay on the event-loop thread.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, BinaryIO, Callable

from .stream import DEFAULT_CHUNK_SIZE, StreamingDigest, open_source
from .variants import HashVariant

_log = logging.getLogger(__name__)


async def file_digest_async(
    path: str | os.PathLike[str],
    variant: HashVariant | Any = HashVariant.SHA256,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Awaitable counterpart of :func:`~sha2hasher.hashing.blocking.file_digest`.

    Produces the same digest for the same file and variant. The file handle
    is closed on every exit path, task cancellation included. A task cancelled
    mid-read leaves the handle to be closed when that read returns, so the
    event loop never waits on the worker thread.
    """

    digest = StreamingDigest(HashVariant.parse(variant), path, chunk_size=chunk_size)
    _log.debug("Hashing %s with %s (chunk_size=%d, async)", digest.path, digest.variant.label, digest.chunk_size)

    handle = await _open_async(digest)
    reader: asyncio.Future[int] | None = None
    try:
        while True:
            reader = asyncio.ensure_future(asyncio.to_thread(digest.fill, handle))
            count = await asyncio.shield(reader)
            if not count:
                break
            digest.update(count)
    finally:
        if reader is not None and not reader.done():
            # a worker thread is still inside readinto; close once it returns
            reader.add_done_callback(_closing(handle))
        else:
            handle.close()

    _log.debug("Hashed %s: %d bytes", digest.path, digest.bytes_read)
    return digest.hexdigest()


async def _open_async(digest: StreamingDigest) -> BinaryIO:
    opener = asyncio.ensure_future(asyncio.to_thread(open_source, digest.path))
    try:
        return await asyncio.shield(opener)
    except asyncio.CancelledError:
        # the open keeps running in its worker thread; close whatever it yields
        opener.add_done_callback(_close_orphan)
        raise


def _closing(handle: BinaryIO) -> Callable[[asyncio.Future[int]], None]:
    def close(reader: asyncio.Future[int]) -> None:
        if not reader.cancelled():
            reader.exception()
        handle.close()

    return close


def _close_orphan(opener: asyncio.Future[BinaryIO]) -> None:
    if opener.cancelled() or opener.exception() is not None:
        return
    opener.result().close()


__all__ = ["file_digest_async"]
