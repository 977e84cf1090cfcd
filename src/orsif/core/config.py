"""Preset configuration files.

Additional presets (or overrides of the built-in ones) can be loaded from
YAML or JSON files, for example to model a different year or country.

File format::

    presets:
      "2030":
        base: "2025"            # optional, inherit every value from a preset
        vsl: 15000000
        nurses: 14500

Without ``base``, a preset must list every input parameter.

Configuration directory is resolved in order:
1. ORSIF_CONFIG_DIR environment variable
2. ./config/presets
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from orsif.core.inputs import InputSet
from orsif.core.presets import PRESETS

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "ORSIF_CONFIG_DIR"
SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


class PresetConfigError(ValueError):
    """Raised when a preset file is malformed."""


def _read_config(config_path: Path) -> Dict[str, Any]:
    with open(config_path) as f:
        if config_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif config_path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )
    return data or {}


def load_presets_file(
    config_path: Path,
    known_presets: Optional[Dict[str, InputSet]] = None,
) -> Dict[str, InputSet]:
    """Load presets from a YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json).
        known_presets: Presets that ``base`` may refer to (default: built-ins).
            Presets defined earlier in the same file may also be used.

    Returns:
        Dictionary of preset name -> InputSet defined by the file.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If file format is not supported.
        PresetConfigError: If the file content is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    data = _read_config(config_path)
    entries = data.get("presets") if isinstance(data, dict) else None
    if not isinstance(entries, dict):
        raise PresetConfigError(f"{config_path}: expected a 'presets' mapping")

    available = dict(PRESETS if known_presets is None else known_presets)
    loaded: Dict[str, InputSet] = {}

    for name, entry in entries.items():
        name = str(name)
        if not isinstance(entry, dict):
            raise PresetConfigError(f"{config_path}: preset '{name}' must be a mapping")

        values = dict(entry)
        base_name = values.pop("base", None)
        if base_name is not None:
            base = available.get(str(base_name))
            if base is None:
                raise PresetConfigError(
                    f"{config_path}: preset '{name}' extends unknown preset '{base_name}'"
                )
            values = {**base.to_dict(), **values}

        try:
            preset = InputSet.from_dict(values)
        except ValueError as e:
            raise PresetConfigError(f"{config_path}: preset '{name}': {e}") from e

        loaded[name] = preset
        available[name] = preset

    logger.info(f"Loaded {len(loaded)} preset(s) from {config_path}")
    return loaded


def save_presets_file(presets: Dict[str, InputSet], config_path: Path) -> None:
    """Save presets (as complete value sets) to a YAML or JSON file.

    Raises:
        ValueError: If file format is not supported.
    """
    data = {"presets": {name: preset.to_dict() for name, preset in presets.items()}}

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        if config_path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        elif config_path.suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )


def get_default_config_dir() -> Path:
    """Get default preset configuration directory.

    Checks ORSIF_CONFIG_DIR first, then ./config/presets.
    """
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.cwd() / "config" / "presets"


def load_all_presets(config_dir: Optional[Path] = None) -> Dict[str, InputSet]:
    """Built-in presets merged with every preset file in the config directory.

    Files are read in name order; later definitions replace earlier ones.
    A missing directory simply yields the built-in presets.
    """
    presets = dict(PRESETS)
    directory = config_dir if config_dir is not None else get_default_config_dir()

    if not directory.is_dir():
        return presets

    for path in sorted(directory.iterdir()):
        if path.suffix in SUPPORTED_SUFFIXES:
            presets.update(load_presets_file(path, known_presets=presets))

    return presets
