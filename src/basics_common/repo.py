"""Repository root detection."""

import os
from pathlib import Path

REPO_MARKERS = ("pyproject.toml", ".git")


def detect_repo_root(start: Path | None = None) -> Path:
    """Find the repository root.

    ``BASICS_REPO_ROOT`` wins when set. Otherwise walk up from ``start`` (default: the
    current directory) to the first directory holding one of ``REPO_MARKERS``; the
    starting directory is returned when none is found.
    """
    override = os.environ.get("BASICS_REPO_ROOT")
    if override:
        return Path(override).expanduser()

    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in REPO_MARKERS):
            return candidate
    return origin
