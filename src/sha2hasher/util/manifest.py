"""Checksum list helpers in the coreutils ``sha256sum`` format."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from sha2hasher.hashing.variants import HashVariant

_LINE = re.compile(r"^(?P<digest>[0-9A-Fa-f]+) (?P<marker>[ *])(?P<path>.+)$")


class ChecksumFormatError(ValueError):
    """Raised when a checksum list line cannot be parsed."""

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        super().__init__(f"line {line_number}: {message}")


@dataclass(frozen=True)
class ChecksumEntry:
    digest: str
    path: Path
    line_number: int = 0

    @property
    def variant(self) -> HashVariant:
        """Variant implied by the digest length."""
        return HashVariant.from_hex_length(len(self.digest))


def format_checksum_line(digest: str, path: str | os.PathLike[str]) -> str:
    """Return ``"<digest>  <path>"``."""
    return f"{digest}  {os.fspath(path)}"


def parse_checksum_lines(text: str) -> list[ChecksumEntry]:
    """Parse a checksum list, skipping blank lines and ``#`` comments.

    Digests are normalised to lowercase and must have the length of one of the
    SHA-2 variants.
    """

    entries: list[ChecksumEntry] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip("\r")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        match = _LINE.match(line)
        if match is None:
            raise ChecksumFormatError(line_number, "expected '<hex digest>  <path>'")
        digest = match.group("digest").lower()
        try:
            HashVariant.from_hex_length(len(digest))
        except ValueError as exc:
            raise ChecksumFormatError(line_number, str(exc)) from exc
        entries.append(ChecksumEntry(digest=digest, path=Path(match.group("path")), line_number=line_number))
    return entries


def write_checksum_file(entries: Iterable[tuple[str, str | os.PathLike[str]]], dest: Path) -> Path:
    """Write ``(digest, path)`` pairs to ``dest`` as a checksum list."""

    dest.parent.mkdir(parents=True, exist_ok=True)
    lines = [format_checksum_line(digest, path) for digest, path in entries]
    dest.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return dest


def write_sidecar(path: Path, digest: str, *, extension: str) -> Path:
    """Write ``<path><extension>`` holding the checksum line for ``path``."""

    dest = path.with_name(path.name + extension)
    dest.write_text(f"{format_checksum_line(digest, path.name)}\n", encoding="utf-8")
    return dest


__all__ = [
    "ChecksumEntry",
    "ChecksumFormatError",
    "format_checksum_line",
    "parse_checksum_lines",
    "write_checksum_file",
    "write_sidecar",
]
