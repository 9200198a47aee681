"""Path utilities for files named in checksum lists."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_listed_path(listed: str | Path, *, base_dir: Path) -> Path:
    """Return ``listed`` as-is when absolute, else relative to ``base_dir``."""
    candidate = Path(listed).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def listed_path_for(path: str | Path, *, base_dir: Path) -> Path:
    """Return how a checksum list in ``base_dir`` should name ``path``.

    The inverse of :func:`resolve_listed_path`: relative to the list's
    directory where one exists (it does not across Windows drives), absolute
    otherwise.
    """

    target = os.path.abspath(path)
    try:
        return Path(os.path.relpath(target, os.path.abspath(base_dir)))
    except ValueError:
        return Path(target)


__all__ = ["listed_path_for", "resolve_listed_path"]
