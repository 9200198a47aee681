from __future__ import annotations

import errno
import hashlib
import io
from pathlib import Path
from typing import Iterator

from sha2hasher.hashing import HashVariant

# FIPS 180-2 example digests for the empty message and "abc".
EMPTY_VECTORS: dict[HashVariant, str] = {
    HashVariant.SHA224: "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    HashVariant.SHA256: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    HashVariant.SHA384: (
        "38b060a751ac96384cd9327eb1b1e36a21fdb71114be07434c0cc7bf63f6e1da"
        "274edebfe76f65fbd51ad2f14898b95b"
    ),
    HashVariant.SHA512: (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
}

ABC_VECTORS: dict[HashVariant, str] = {
    HashVariant.SHA224: "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
    HashVariant.SHA256: "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    HashVariant.SHA384: (
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
        "8086072ba1e7cc2358baeca134c825a7"
    ),
    HashVariant.SHA512: (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    ),
}

# Odd-sized so chunk boundaries never line up with the pattern.
PATTERN = bytes(range(251))


def write_bytes(directory: Path, name: str, payload: bytes) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    return path


def pattern_blocks(total_size: int, block_size: int = 1 << 20) -> Iterator[bytes]:
    """Yield ``total_size`` bytes of the repeating test pattern in blocks."""

    repeated = PATTERN * (block_size // len(PATTERN) + 2)
    offset = 0
    while offset < total_size:
        length = min(block_size, total_size - offset)
        start = offset % len(PATTERN)
        yield repeated[start : start + length]
        offset += length


def write_pattern_file(path: Path, total_size: int) -> str:
    """Write the pattern file and return its SHA-256 computed independently."""

    reference = hashlib.sha256()
    with path.open("wb") as handle:
        for block in pattern_blocks(total_size):
            handle.write(block)
            reference.update(block)
    return reference.hexdigest()


class FlakyReader(io.BytesIO):
    """In-memory handle whose ``readinto`` fails on the n-th call."""

    def __init__(self, payload: bytes, *, fail_on_call: int) -> None:
        super().__init__(payload)
        self.fail_on_call = fail_on_call
        self.calls = 0

    def readinto(self, buffer) -> int:  # type: ignore[override]
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise OSError(errno.EIO, "Input/output error")
        return super().readinto(buffer)
