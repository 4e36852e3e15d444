"""YAML seed-data loader.

# ─── CONFIGURATION HIERARCHY ───────────────────────────────────────────
#
#   1. src/config/seed_data.py  - built-in demo users and forms
#   2. config/config.yaml       - optional ``seed:`` section, deep-merged on top
#
# Lists are replaced, not concatenated: a YAML ``seed.users`` list is the
# complete user list.  Dicts are merged key by key via _deep_merge.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from src.config.seed_data import DEFAULT_SEED
from src.utils.errors import ConfigurationError


def load_seed_config(path: str | Path = "config/config.yaml") -> dict[str, Any]:
    """Return the seed data: built-in defaults overlaid with the YAML file.

    A missing file is not an error; the defaults are returned unchanged.

    Raises:
        ConfigurationError: If the file exists but is not valid YAML or its
            ``seed`` section is not a mapping.
    """
    seed = copy.deepcopy(DEFAULT_SEED)

    config_path = Path(path)
    if not config_path.exists():
        return seed

    try:
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            message=f"Could not parse {config_path}: {exc}",
            component="config",
        ) from exc

    overrides = yaml_config.get("seed") if isinstance(yaml_config, dict) else None
    if overrides is None:
        return seed
    if not isinstance(overrides, dict):
        raise ConfigurationError(
            message=f"'seed' in {config_path} must be a mapping",
            component="config",
        )

    _deep_merge(seed, overrides)
    return seed


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
