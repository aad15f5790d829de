"""Hierarchy builder configuration helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .constants import CONFIG_FILE, ENV_REMOVE_APP_PREFIX, SNAPSHOT_TREE_DIR
from .errors import ConfigError


@dataclass
class HierarchyConfig:
    """Defaults applied when the caller does not pass explicit options."""

    remove_app_tree_prefix: bool = False


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _env_flag(name: str):
    raw = os.environ.get(name)
    if raw is None:
        return None
    return raw.strip().lower() in _TRUE


def _config_flag(cfg_path: Path, key: str, value) -> bool:
    """Accept YAML booleans, and strings spelled like the env flags."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ConfigError(cfg_path, f"{key} must be a boolean, got {value!r}")


def load_hierarchy_config(root: Path) -> HierarchyConfig:
    """Load configuration from .snapshot-tree/config.yaml if present.

    The environment variable SNAPSHOT_TREE_REMOVE_APP_PREFIX overrides the
    file's remove_app_tree_prefix.
    """

    cfg_path = root / SNAPSHOT_TREE_DIR / CONFIG_FILE
    data = {}
    if cfg_path.exists():
        try:
            data = yaml.safe_load(cfg_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(cfg_path, str(e)) from e
        if not isinstance(data, dict):
            raise ConfigError(cfg_path, "expected a mapping at top level")

    section = data.get("hierarchy", data) or {}
    if not isinstance(section, dict):
        raise ConfigError(cfg_path, "hierarchy must be a mapping")
    config = HierarchyConfig(
        remove_app_tree_prefix=_config_flag(
            cfg_path, "remove_app_tree_prefix", section.get("remove_app_tree_prefix", False)
        ),
    )

    override = _env_flag(ENV_REMOVE_APP_PREFIX)
    if override is not None:
        config.remove_app_tree_prefix = override
    return config
