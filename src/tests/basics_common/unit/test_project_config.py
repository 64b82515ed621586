"""Tests for basics_common.config.project module."""

from pathlib import Path

import pytest
import yaml

from basics_common.config.project import (
    deep_merge,
    default_config,
    get_project_config_path,
    get_user_config_path,
    load_merged_config,
    load_yaml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merges_flat_dictionaries(self):
        """Test merging of flat dictionaries."""
        base = {"a": 1, "b": 2}
        override = {"b": 3, "c": 4}

        result = deep_merge(base, override)

        assert result == {"a": 1, "b": 3, "c": 4}
        assert result is base

    def test_merges_nested_dictionaries(self):
        """Test recursive merging of nested dictionaries."""
        base = {"level1": {"level2": {"a": 1, "b": 2}, "other": "value"}}
        override = {"level1": {"level2": {"b": 3, "c": 4}}}

        result = deep_merge(base, override)

        assert result == {
            "level1": {"level2": {"a": 1, "b": 3, "c": 4}, "other": "value"},
        }

    def test_overrides_non_dict_values(self):
        """Test that non-dict values are completely replaced."""
        base = {"key": {"nested": True}}
        deep_merge(base, {"key": [4, 5]})
        assert base == {"key": [4, 5]}


class TestLoadYaml:
    """Tests for load_yaml function."""

    def test_missing_file_is_empty(self, tmp_path: Path):
        """Test a missing file yields an empty dict."""
        assert load_yaml(tmp_path / "missing.yaml") == {}

    def test_loads_mapping(self, tmp_path: Path):
        """Test a mapping document is returned."""
        path = tmp_path / "cfg.yaml"
        path.write_text(yaml.safe_dump({"defaults": {"verbose": True}}))
        assert load_yaml(path) == {"defaults": {"verbose": True}}

    @pytest.mark.parametrize(
        "content",
        ["- just\n- a list\n", "key: [unclosed\n", ""],
    )
    def test_tolerates_bad_documents(self, tmp_path: Path, content: str):
        """Test lists, invalid YAML and empty files read as empty."""
        path = tmp_path / "cfg.yaml"
        path.write_text(content)
        assert load_yaml(path) == {}


class TestConfigPaths:
    """Tests for config file locations."""

    def test_user_config_path(self):
        """Test the user config lives under ~/.config/basics."""
        assert get_user_config_path() == Path.home() / ".config/basics/config.yaml"

    def test_project_config_path(self, tmp_path: Path):
        """Test the project config lives at the repo root."""
        assert get_project_config_path(tmp_path) == tmp_path / ".basics.yaml"


class TestLoadMergedConfig:
    """Tests for load_merged_config function."""

    def test_defaults_only(self, tmp_path: Path):
        """Test defaults are returned without files."""
        assert load_merged_config(tmp_path) == default_config()

    def test_precedence(self, tmp_path: Path):
        """Test project overrides user overrides defaults."""
        user_path = get_user_config_path()
        user_path.parent.mkdir(parents=True)
        user_path.write_text("defaults:\n  verbose: true\n  log_level: INFO\n")
        (tmp_path / ".basics.yaml").write_text("defaults:\n  log_level: ERROR\n")

        cfg = load_merged_config(tmp_path)

        assert cfg["defaults"] == {"verbose": True, "log_level": "ERROR"}

    @pytest.mark.parametrize("content", ["defaults: quiet\n", "defaults: [1, 2]\n"])
    def test_non_mapping_defaults_ignored(self, tmp_path: Path, content: str):
        """Test a scalar or list `defaults` keeps the built-in section."""
        (tmp_path / ".basics.yaml").write_text(content)
        assert load_merged_config(tmp_path) == default_config()

    def test_malformed_project_keeps_user_defaults(self, tmp_path: Path):
        """Test a bad project section does not discard user settings."""
        user_path = get_user_config_path()
        user_path.parent.mkdir(parents=True)
        user_path.write_text("defaults:\n  verbose: true\n")
        (tmp_path / ".basics.yaml").write_text("defaults: quiet\nextra: 1\n")

        cfg = load_merged_config(tmp_path)

        assert cfg["defaults"]["verbose"] is True
        assert cfg["extra"] == 1

    def test_default_config_is_fresh(self):
        """Test each call returns an independent structure."""
        first = default_config()
        first["defaults"]["verbose"] = True
        assert default_config()["defaults"]["verbose"] is False
