"""Tests for configuration loading."""

import pytest

from snapshot_tree.config import HierarchyConfig, load_hierarchy_config
from snapshot_tree.constants import ENV_REMOVE_APP_PREFIX
from snapshot_tree.errors import ConfigError


def write_config(root, text):
    cfg_dir = root / ".snapshot-tree"
    cfg_dir.mkdir(exist_ok=True)
    (cfg_dir / "config.yaml").write_text(text)


class TestLoadHierarchyConfig:
    """Test config file and environment handling."""

    def test_defaults_without_file(self, tmp_path):
        assert load_hierarchy_config(tmp_path) == HierarchyConfig()

    def test_hierarchy_section(self, tmp_path):
        write_config(tmp_path, "hierarchy:\n  remove_app_tree_prefix: true\n")

        assert load_hierarchy_config(tmp_path).remove_app_tree_prefix is True

    def test_top_level_keys(self, tmp_path):
        write_config(tmp_path, "remove_app_tree_prefix: true\n")

        assert load_hierarchy_config(tmp_path).remove_app_tree_prefix is True

    def test_empty_file(self, tmp_path):
        write_config(tmp_path, "")

        assert load_hierarchy_config(tmp_path) == HierarchyConfig()

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("1", True),
        ("YES", True),
        ("false", False),
        ("0", False),
    ])
    def test_env_override(self, tmp_path, monkeypatch, value, expected):
        write_config(tmp_path, "remove_app_tree_prefix: true\n")
        monkeypatch.setenv(ENV_REMOVE_APP_PREFIX, value)

        assert load_hierarchy_config(tmp_path).remove_app_tree_prefix is expected

    def test_invalid_yaml(self, tmp_path):
        write_config(tmp_path, "hierarchy: [unclosed\n")

        with pytest.raises(ConfigError):
            load_hierarchy_config(tmp_path)

    def test_non_mapping(self, tmp_path):
        write_config(tmp_path, "- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_hierarchy_config(tmp_path)

    @pytest.mark.parametrize("text,expected", [
        ('remove_app_tree_prefix: "false"\n', False),
        ('remove_app_tree_prefix: "true"\n', True),
        ("remove_app_tree_prefix: 'no'\n", False),
        ("remove_app_tree_prefix: false\n", False),
    ])
    def test_quoted_flags(self, tmp_path, text, expected):
        """Quoted strings are read as flags, not by truthiness."""
        write_config(tmp_path, text)

        assert load_hierarchy_config(tmp_path).remove_app_tree_prefix is expected

    @pytest.mark.parametrize("text", [
        'remove_app_tree_prefix: "maybe"\n',
        "remove_app_tree_prefix: 1\n",
        "remove_app_tree_prefix: [true]\n",
    ])
    def test_invalid_flag(self, tmp_path, text):
        write_config(tmp_path, text)

        with pytest.raises(ConfigError, match="remove_app_tree_prefix must be a boolean"):
            load_hierarchy_config(tmp_path)

    def test_hierarchy_section_not_mapping(self, tmp_path):
        write_config(tmp_path, "hierarchy: [a]\n")

        with pytest.raises(ConfigError, match="hierarchy must be a mapping"):
            load_hierarchy_config(tmp_path)
