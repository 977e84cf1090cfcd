"""Core foundation layer: input parameters, presets, preset files."""

from orsif.core.inputs import (
    InputKey,
    InputSet,
    ParsedValue,
    DEFAULT_INPUTS,
    parse_input_value,
)
from orsif.core.presets import (
    PRESETS,
    BASELINE_PRESET,
    CURRENT_PRESET,
    CUSTOM_PRESET,
    get_preset,
    list_presets,
)
from orsif.core.config import (
    PresetConfigError,
    load_presets_file,
    save_presets_file,
    load_all_presets,
)

__all__ = [
    "InputKey",
    "InputSet",
    "ParsedValue",
    "DEFAULT_INPUTS",
    "parse_input_value",
    "PRESETS",
    "BASELINE_PRESET",
    "CURRENT_PRESET",
    "CUSTOM_PRESET",
    "get_preset",
    "list_presets",
    "PresetConfigError",
    "load_presets_file",
    "save_presets_file",
    "load_all_presets",
]
