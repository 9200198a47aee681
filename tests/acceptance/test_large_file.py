from __future__ import annotations

import asyncio
import tracemalloc
from pathlib import Path

from sha2hasher.hashing import DEFAULT_CHUNK_SIZE, HashVariant, file_digest, file_digest_async
from tests.helpers import write_pattern_file

LARGE_FILE_SIZE = 48 * 1024 * 1024 + 123


def _traced(call):
    tracemalloc.start()
    try:
        result = call()
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return result, peak


def test_large_file_digest_with_bounded_memory(tmp_path: Path) -> None:
    path = tmp_path / "large.bin"
    expected = write_pattern_file(path, LARGE_FILE_SIZE)
    assert path.stat().st_size == LARGE_FILE_SIZE

    digest, peak = _traced(lambda: file_digest(path, HashVariant.SHA256))

    assert digest == expected
    assert peak < 16 * DEFAULT_CHUNK_SIZE
    assert peak < LARGE_FILE_SIZE // 32


def test_large_file_async_matches_reference(tmp_path: Path) -> None:
    path = tmp_path / "large.bin"
    expected = write_pattern_file(path, LARGE_FILE_SIZE)

    digest, peak = _traced(lambda: asyncio.run(file_digest_async(path, HashVariant.SHA256)))

    assert digest == expected
    assert peak < LARGE_FILE_SIZE // 32
