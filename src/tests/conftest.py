"""Root pytest configuration and shared fixtures for the basics test suite."""

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

BASICS_LOGGERS = ("basics_cli", "basics_common")

EXPECTED_PROGRAM_LINES = [
    "Hello, world!",
    "--------------",
    "x: 5, y: 15",
    "--------------",
    "Single digit",
    "--------------",
    "Number: 1",
    "Number: 2",
    "Number: 3",
    "Number: 4",
    "Number: 5",
    "--------------",
    "Hello, Rustacean!",
]


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """Keep config, log files and repo detection inside a temporary directory.

    Yields
    ------
    Path
        Temporary home/repository directory
    """
    home = tmp_path / "home"
    repo = tmp_path / "repo"
    home.mkdir()
    repo.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("BASICS_REPO_ROOT", str(repo))
    monkeypatch.setenv("BASICS_LOG_DIR", str(tmp_path / "log"))
    for var in ("BASICS_LOG_LEVEL", "BASICS_CONSOLE_LOGGING", "BASICS_NO_FILE_LOGGING"):
        monkeypatch.delenv(var, raising=False)

    yield repo

    for name in BASICS_LOGGERS:
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
        logger.filters.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def expected_program_lines() -> list[str]:
    """The exact stdout lines of one program run."""
    return list(EXPECTED_PROGRAM_LINES)


@pytest.fixture
def clean_logger(request) -> Generator[logging.Logger, None, None]:
    """Create a clean logger for testing.

    Yields
    ------
    logging.Logger
        Clean logger instance
    """
    logger_name = f"test.unit.{request.node.name}.{id(request)}"
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.filters.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    yield logger

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.filters.clear()
    logger.propagate = False
