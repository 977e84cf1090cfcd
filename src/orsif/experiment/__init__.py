"""Experimentation layer: baseline comparison and sensitivity analysis."""

from orsif.experiment.comparison import (
    ComparisonResult,
    compare_results,
    compare_inputs,
    compare_presets_table,
    percent_change,
)
from orsif.experiment.sensitivity import (
    SensitivityPoint,
    SweepResult,
    VSL_SWEEP_VALUES,
    sensitivity_sweep,
    vsl_sensitivity,
    sweep_values,
)

__all__ = [
    "ComparisonResult",
    "compare_results",
    "compare_inputs",
    "compare_presets_table",
    "percent_change",
    "SensitivityPoint",
    "SweepResult",
    "VSL_SWEEP_VALUES",
    "sensitivity_sweep",
    "vsl_sensitivity",
    "sweep_values",
]
