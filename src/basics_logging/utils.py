"""Environment helpers for basics logging."""

import os
from pathlib import Path

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = {"1", "true", "yes", "on"}


def _read_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def get_log_level(default: str = "INFO") -> str:
    """Get the log level from ``BASICS_LOG_LEVEL``.

    Parameters
    ----------
    default : str
        Level returned when the variable is unset or invalid

    Returns
    -------
    str
        Upper-cased log level name
    """
    level = os.environ.get("BASICS_LOG_LEVEL", "").strip().upper()
    if level in VALID_LOG_LEVELS:
        return level
    return default


def get_log_file_path(
    name: str,
    filename: str | None = None,
    log_dir: str | None = None,
) -> str:
    """Get the path of a named log file, creating its directory.

    Parameters
    ----------
    name : str
        Log name, used as ``<name>.log`` when no filename is given
    filename : str, optional
        Explicit file name
    log_dir : str, optional
        Directory override; falls back to ``BASICS_LOG_DIR`` then ``~/.basics/log``

    Returns
    -------
    str
        Absolute path of the log file
    """
    directory = Path(
        log_dir
        or os.environ.get("BASICS_LOG_DIR")
        or Path.home() / ".basics" / "log",
    )
    directory.mkdir(parents=True, exist_ok=True)
    return str(directory / (filename or f"{name}.log"))


def should_use_file_logging() -> bool:
    """Whether log records should be written to a file."""
    return not _read_flag("BASICS_NO_FILE_LOGGING")


def should_use_console_logging() -> bool:
    """Whether log records should be mirrored to stderr."""
    return _read_flag("BASICS_CONSOLE_LOGGING")
