"""Logger configuration profiles for basics.

Profiles
--------
cli
    File logging (when enabled) plus optional stderr mirroring. Never writes to
    stdout, so program output stays line-exact.
test
    stderr only, no file.
"""

import logging
import sys

from basics_logging.formatters import CallerFilter, SafeFormatter
from basics_logging.utils import (
    get_log_file_path,
    get_log_level,
    should_use_console_logging,
    should_use_file_logging,
)

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

PROFILES = ("cli", "test")


def _resolve_level(level: str | None) -> int:
    name = (level or get_log_level()).upper()
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def _reset(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.filters.clear()


def configure_logger(
    name: str,
    profile: str = "cli",
    level: str | None = None,
    log_file: str | None = None,
    to_console: bool | None = None,
) -> logging.Logger:
    """Configure a named logger according to a profile.

    Parameters
    ----------
    name : str
        Logger name, usually a top-level package
    profile : str
        One of ``PROFILES``
    level : str, optional
        Level name; defaults to ``BASICS_LOG_LEVEL`` or INFO
    log_file : str, optional
        Explicit log file path for the cli profile
    to_console : bool, optional
        Mirror to stderr; defaults to ``BASICS_CONSOLE_LOGGING``

    Returns
    -------
    logging.Logger
        The configured logger

    Raises
    ------
    ValueError
        If the profile is unknown
    """
    if profile not in PROFILES:
        msg = f"Unknown profile: {profile}"
        raise ValueError(msg)

    logger = logging.getLogger(name)
    _reset(logger)
    logger.setLevel(_resolve_level(level))
    logger.addFilter(CallerFilter())
    logger.propagate = False

    formatter = SafeFormatter()

    if profile == "cli" and should_use_file_logging():
        file_handler = logging.FileHandler(
            log_file or get_log_file_path("cli"),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if to_console is None:
        to_console = should_use_console_logging()
    if profile == "test" or to_console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_cli_logger(name: str) -> logging.Logger:
    """Get a logger for CLI modules.

    Handlers are attached to the package logger by ``configure_logger``; until then
    records propagate to the root logger and are dropped by default.
    """
    return logging.getLogger(name)
