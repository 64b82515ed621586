"""Safe file operations for basics common."""

from pathlib import Path
from typing import Any

import yaml


class FileOperationError(Exception):
    """Raised when file operations fail."""


def safe_read_yaml(path: Path) -> dict[str, Any]:
    """Safely read YAML file with error handling.

    Parameters
    ----------
    path : Path
        Path to YAML file

    Returns
    -------
    dict[str, Any]
        Parsed YAML data, empty for an empty document

    Raises
    ------
    FileOperationError
        If file cannot be read or parsed
    """
    try:
        if not path.exists():
            msg = f"YAML file does not exist: {path}"
            raise FileOperationError(msg)

        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if data is not None else {}

    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise FileOperationError(msg) from e
    except OSError as e:
        msg = f"Cannot read YAML file {path}: {e}"
        raise FileOperationError(msg) from e
