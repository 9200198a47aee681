"""Command-line entry points for sha2hasher."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Optional, Sequence

import typer

from sha2hasher.config import ConfigError, HasherSettings, dump_example_config, load_config
from sha2hasher.hashing import FileDigestError, HashVariant, file_digest, file_digest_async
from sha2hasher.util.logging import configure_logging
from sha2hasher.util.manifest import (
    ChecksumFormatError,
    format_checksum_line,
    parse_checksum_lines,
    write_checksum_file,
    write_sidecar,
)
from sha2hasher.util.paths import listed_path_for, resolve_listed_path

app = typer.Typer(add_completion=False, help="SHA-2 file hashing CLI")

Job = tuple[Path, HashVariant]
Outcome = str | FileDigestError

# Same ceiling as the default executor, which runs every open and read.
MAX_CONCURRENT_DIGESTS = min(32, (os.cpu_count() or 1) + 4)


def _settings(config: Optional[Path], overrides: dict[str, Any]) -> HasherSettings:
    try:
        return load_config(config, overrides={key: value for key, value in overrides.items() if value is not None})
    except ConfigError as exc:
        typer.echo(f"sha2hasher: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _logger(settings: HasherSettings, log_file: Optional[Path]) -> logging.Logger:
    return configure_logging(level=settings.logging.level, log_path=log_file or settings.logging.log_path)


def _digest_many(jobs: Sequence[Job], *, mode: str, chunk_size: int) -> list[Outcome]:
    """Hash every job, returning a digest or the typed failure per job."""

    if mode == "async":
        return asyncio.run(_digest_many_async(jobs, chunk_size=chunk_size))

    outcomes: list[Outcome] = []
    for path, variant in jobs:
        try:
            outcomes.append(file_digest(path, variant, chunk_size=chunk_size))
        except FileDigestError as exc:
            outcomes.append(exc)
    return outcomes


async def _digest_many_async(jobs: Sequence[Job], *, chunk_size: int) -> list[Outcome]:
    # each running digest holds a file handle open between reads
    slots = asyncio.Semaphore(MAX_CONCURRENT_DIGESTS)

    async def bounded(path: Path, variant: HashVariant) -> str:
        async with slots:
            return await file_digest_async(path, variant, chunk_size=chunk_size)

    results = await asyncio.gather(
        *(bounded(path, variant) for path, variant in jobs),
        return_exceptions=True,
    )
    outcomes: list[Outcome] = []
    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, FileDigestError):
            raise result
        outcomes.append(result)
    return outcomes


@app.command("hash")
def hash_files(
    paths: list[Path] = typer.Argument(..., help="Files to hash"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="sha224, sha256, sha384 or sha512"),
    mode: Optional[str] = typer.Option(None, help="Execution mode: blocking or async"),
    chunk_size: Optional[int] = typer.Option(None, min=1, help="Read buffer size in bytes"),
    sidecar: Optional[bool] = typer.Option(None, "--sidecar/--no-sidecar", help="Write <file>.<algorithm> next to each file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the digests to this checksum list"),
    config: Optional[Path] = typer.Option(None, help="Config file (YAML/TOML/JSON)"),
    log_file: Optional[Path] = typer.Option(None, help="Also write logs to this file"),
) -> None:
    """Print '<digest>  <path>' for each file."""

    settings = _settings(
        config,
        {
            "hashing.algorithm": algorithm,
            "hashing.mode": mode,
            "hashing.chunk_size": chunk_size,
            "sidecar.enabled": sidecar,
        },
    )
    logger = _logger(settings, log_file)
    variant = settings.hashing.algorithm

    outcomes = _digest_many(
        [(path, variant) for path in paths],
        mode=settings.hashing.mode,
        chunk_size=settings.hashing.chunk_size,
    )

    failures = 0
    written: list[tuple[str, Path]] = []
    for path, outcome in zip(paths, outcomes):
        if isinstance(outcome, FileDigestError):
            failures += 1
            typer.echo(f"sha2hasher: {outcome}", err=True)
            continue
        typer.echo(format_checksum_line(outcome, path))
        if output is not None:
            written.append((outcome, listed_path_for(path, base_dir=output.parent)))
        if settings.sidecar.enabled:
            dest = write_sidecar(path, outcome, extension=settings.sidecar.extension_for(variant))
            logger.info("Wrote sidecar %s", dest)

    if output is not None:
        write_checksum_file(written, output)
        logger.info("Wrote checksum list %s", output)
    logger.info("Hashed %d file(s) with %s, %d failed", len(paths), variant.label, failures)
    if failures:
        raise typer.Exit(code=1)


@app.command()
def check(
    checksum_file: Path = typer.Argument(..., help="Checksum list in '<digest>  <path>' format"),
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="Force one algorithm instead of inferring it from digest length"
    ),
    mode: Optional[str] = typer.Option(None, help="Execution mode: blocking or async"),
    chunk_size: Optional[int] = typer.Option(None, min=1, help="Read buffer size in bytes"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report failures"),
    config: Optional[Path] = typer.Option(None, help="Config file (YAML/TOML/JSON)"),
    log_file: Optional[Path] = typer.Option(None, help="Also write logs to this file"),
) -> None:
    """Verify the files listed in CHECKSUM_FILE."""

    settings = _settings(
        config,
        {
            "hashing.algorithm": algorithm,
            "hashing.mode": mode,
            "hashing.chunk_size": chunk_size,
        },
    )
    logger = _logger(settings, log_file)

    try:
        entries = parse_checksum_lines(checksum_file.read_text(encoding="utf-8"))
    except (OSError, ChecksumFormatError) as exc:
        typer.echo(f"sha2hasher: {checksum_file}: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    forced = settings.hashing.algorithm if algorithm else None
    for entry in entries:
        if forced is not None and entry.variant is not forced:
            typer.echo(
                f"sha2hasher: {checksum_file}: line {entry.line_number}: digest is not {forced.label}",
                err=True,
            )
            raise typer.Exit(code=2)

    base_dir = checksum_file.parent
    outcomes = _digest_many(
        [(resolve_listed_path(entry.path, base_dir=base_dir), entry.variant) for entry in entries],
        mode=settings.hashing.mode,
        chunk_size=settings.hashing.chunk_size,
    )

    mismatched = unreadable = 0
    for entry, outcome in zip(entries, outcomes):
        if isinstance(outcome, FileDigestError):
            unreadable += 1
            logger.info("Could not read %s: %s", entry.path, outcome)
            typer.echo(f"{entry.path}: FAILED open or read")
        elif outcome != entry.digest:
            mismatched += 1
            typer.echo(f"{entry.path}: FAILED")
        elif not quiet:
            typer.echo(f"{entry.path}: OK")

    if unreadable:
        typer.echo(f"sha2hasher: WARNING: {unreadable} listed file(s) could not be read", err=True)
    if mismatched:
        typer.echo(f"sha2hasher: WARNING: {mismatched} computed checksum(s) did NOT match", err=True)
    logger.info("Checked %d file(s): %d mismatched, %d unreadable", len(entries), mismatched, unreadable)
    if mismatched or unreadable:
        raise typer.Exit(code=1)


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination (.yaml or .json)")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"sha2hasher: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
