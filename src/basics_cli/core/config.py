"""Configuration management for the basics CLI."""

from pathlib import Path
from typing import Any

from basics_cli.core.constants import LogLevel
from basics_common.config import load_merged_config
from basics_common.config.project import get_project_config_path
from basics_common.repo import detect_repo_root


class CliConfig:
    """Read-only view of the merged user and project configuration."""

    def __init__(self, repo_root: Path | None = None) -> None:
        """Initialize CLI configuration.

        Parameters
        ----------
        repo_root : Path, optional
            Repository root holding ``.basics.yaml``. Auto-detected if omitted.
        """
        self.repo_root: Path = repo_root or detect_repo_root()
        self.config_file: Path = get_project_config_path(self.repo_root)
        self._config_data: dict[str, Any] = load_merged_config(self.repo_root)

    @property
    def verbose(self) -> bool:
        """Get verbose mode setting."""
        return self._config_data.get("defaults", {}).get("verbose") is True

    @property
    def log_level(self) -> LogLevel | None:
        """Get the configured log level, or None when unset or invalid."""
        level = self._config_data.get("defaults", {}).get("log_level")
        if not isinstance(level, str):
            return None
        try:
            return LogLevel(level.upper())
        except ValueError:
            return None
