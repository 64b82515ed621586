"""Project/user YAML configuration loading for basics.

This module provides shared helpers to locate, load, and deep-merge configuration from
user (~/.config/basics/config.yaml) and project (.basics.yaml) files over the built-in
defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from basics_common.io import FileOperationError, safe_read_yaml


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dictionaries in place and return ``base``.

    Values from ``override`` take precedence. Nested dicts are merged
    recursively; other values are replaced.
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def default_config() -> dict[str, Any]:
    """Return the default configuration structure."""
    return {
        "defaults": {
            "verbose": False,
            "log_level": None,
        },
    }


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping, returning an empty dict on any problem.

    Missing, unreadable and non-mapping files all count as "no configuration".
    """
    try:
        if not path.exists():
            return {}
        data = safe_read_yaml(path) or {}
        return data if isinstance(data, dict) else {}
    except FileOperationError:
        return {}


def get_user_config_path() -> Path:
    """Get path to user-level configuration file."""
    return Path.home() / ".config" / "basics" / "config.yaml"


def get_project_config_path(repo_root: Path) -> Path:
    """Get path to project-level configuration file."""
    return repo_root / ".basics.yaml"


def drop_malformed_sections(
    file_cfg: dict[str, Any],
    base: dict[str, Any],
) -> dict[str, Any]:
    """Remove keys whose value is not a mapping where ``base`` holds a mapping.

    A file containing ``defaults: quiet`` must not replace the defaults section.
    """
    return {
        key: value
        for key, value in file_cfg.items()
        if not isinstance(base.get(key), dict) or isinstance(value, dict)
    }


def load_merged_config(repo_root: Path) -> dict[str, Any]:
    """Load default + user + project YAML config into a single dict."""
    cfg = default_config()

    for path in (get_user_config_path(), get_project_config_path(repo_root)):
        file_cfg = drop_malformed_sections(load_yaml(path), cfg)
        if file_cfg:
            deep_merge(cfg, file_cfg)

    return cfg
