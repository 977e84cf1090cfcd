"""Economic calculator engine.

EconomicCalculator owns one live InputSet and the table of presets, and
exposes every operation the pages need. Create one engine per session
(or per test); engines share no state.

Public methods are split into two kinds:
- Typed core methods (set_input, calculate, ...) that raise on bad input.
- Boundary adapters (load_preset, update_input, sensitivity_analysis) for
  UI and URL input, which ignore unknown names instead of raising.

Example usage:
    engine = EconomicCalculator()
    engine.load_preset("2018")
    engine.update_input("vsl", "11000000")
    result = engine.calculate()
    comparison = engine.compare_to_baseline()
    print(format_currency(result.grand_total), comparison.formatted)
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from orsif.core.inputs import DEFAULT_INPUTS, InputKey, InputSet, parse_input_value
from orsif.core.presets import BASELINE_PRESET, CURRENT_PRESET, CUSTOM_PRESET, PRESETS
from orsif.experiment.comparison import ComparisonResult, compare_presets_table, compare_results
from orsif.experiment.sensitivity import (
    VSL_SWEEP_VALUES,
    SensitivityPoint,
    sensitivity_sweep,
)
from orsif.model.calculator import CalculationResult, calculate
from orsif.results.charts import ChartBundle, get_chart_data
from orsif.results.export import format_results_text
from orsif.results.formatting import format_currency, format_number
from orsif.results.tables import TableRow, generate_table_data

logger = logging.getLogger(__name__)


class EconomicCalculator:
    """Calculation engine holding the live inputs for one session.

    Args:
        presets: Available presets (default: built-in presets).
        inputs: Initial inputs (default: the 2025 values).
        baseline_preset: Preset used by compare_to_baseline.
    """

    format_currency = staticmethod(format_currency)
    format_number = staticmethod(format_number)

    def __init__(
        self,
        presets: Optional[Dict[str, InputSet]] = None,
        inputs: Optional[InputSet] = None,
        baseline_preset: str = BASELINE_PRESET,
    ):
        self._presets = dict(PRESETS if presets is None else presets)
        self._inputs = DEFAULT_INPUTS if inputs is None else inputs
        self._current_preset = CURRENT_PRESET if inputs is None else CUSTOM_PRESET
        self.baseline_preset = baseline_preset

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def inputs(self) -> InputSet:
        """The live inputs (immutable; use set_input/update_input to change)."""
        return self._inputs

    @property
    def current_preset(self) -> str:
        """Name of the last loaded preset, or 'custom' after any edit."""
        return self._current_preset

    @property
    def presets(self) -> Dict[str, InputSet]:
        return dict(self._presets)

    def snapshot(self) -> InputSet:
        return self._inputs

    def restore(self, snapshot: InputSet) -> None:
        """Replace the live inputs with a snapshot (overwrite, not merge)."""
        self._inputs = snapshot

    def mark_custom(self) -> None:
        self._current_preset = CUSTOM_PRESET

    def load_preset(self, name: str) -> bool:
        """Replace the live inputs with a preset.

        Returns:
            True if loaded, False (state unchanged) if the preset is unknown.
        """
        preset = self._presets.get(str(name))
        if preset is None:
            logger.debug(f"Unknown preset ignored: {name}")
            return False

        self._inputs = preset
        self._current_preset = str(name)
        return True

    def set_input(self, key: Union[InputKey, str], value: float) -> None:
        """Set one input parameter.

        Raises:
            KeyError: If key is not a known input parameter.
            ValueError: If career_duration is not positive.
        """
        input_key = InputKey.lookup(key)
        if input_key is None:
            raise KeyError(f"Unknown input parameter: {key}")
        if input_key is InputKey.CAREER_DURATION and value <= 0:
            raise ValueError("career_duration must be positive")

        self._inputs = self._inputs.with_value(input_key, float(value))
        self.mark_custom()

    def update_input(self, key: str, raw_value: Any) -> bool:
        """Parse and set one input from UI or URL text.

        Unknown keys and unparseable values are ignored and leave the
        inputs unchanged.

        Returns:
            True if the input was updated.
        """
        input_key = InputKey.lookup(key)
        if input_key is None:
            logger.debug(f"Unknown input ignored: {key}")
            return False

        parsed = parse_input_value(raw_value)
        if not parsed.ok:
            logger.warning(f"Rejected value for {input_key.value}: {parsed.error}")
            return False

        try:
            self.set_input(input_key, parsed.value)
        except ValueError as e:
            logger.warning(f"Rejected value for {input_key.value}: {e}")
            return False
        return True

    def get_total_physicians(self) -> float:
        return self._inputs.total_physicians

    def get_total_support(self) -> float:
        return self._inputs.total_support

    # ------------------------------------------------------------------
    # Calculation
    # ------------------------------------------------------------------

    def calculate(self) -> CalculationResult:
        return calculate(self._inputs)

    def compare_to_baseline(self) -> ComparisonResult:
        """Compare the live inputs with the baseline preset.

        The baseline preset is loaded temporarily; the live inputs and
        preset name are restored before returning.

        Raises:
            ValueError: If the baseline preset is not available.
        """
        current = self.calculate()

        saved_inputs = self.snapshot()
        saved_preset = self._current_preset
        try:
            if not self.load_preset(self.baseline_preset):
                raise ValueError(f"Baseline preset '{self.baseline_preset}' is not available")
            baseline = self.calculate()
        finally:
            self.restore(saved_inputs)
            self._current_preset = saved_preset

        return compare_results(current, baseline)

    def compare_presets(
        self,
        baseline_name: Optional[str] = None,
        current_name: str = CURRENT_PRESET,
    ) -> pd.DataFrame:
        """Row-by-row comparison table of two presets (live inputs untouched).

        Raises:
            ValueError: If either preset is unknown.
        """
        baseline_name = self.baseline_preset if baseline_name is None else baseline_name
        for name in (baseline_name, current_name):
            if name not in self._presets:
                raise ValueError(f"Unknown preset: {name}")

        return compare_presets_table(self._presets[baseline_name], self._presets[current_name])

    # ------------------------------------------------------------------
    # Presentation projections
    # ------------------------------------------------------------------

    def generate_table_data(self) -> List[TableRow]:
        return generate_table_data(self._inputs)

    def get_chart_data(self) -> ChartBundle:
        return get_chart_data(self.calculate())

    def sensitivity_analysis(
        self,
        param: Union[InputKey, str],
        values: Iterable[float],
    ) -> List[SensitivityPoint]:
        """Grand total for each value of one parameter, others held fixed.

        Unknown parameters give an empty list. The live inputs are never
        changed, so the swept parameter keeps its original value.
        """
        if InputKey.lookup(param) is None:
            logger.warning(f"Sensitivity analysis skipped, unknown parameter: {param}")
            return []

        return sensitivity_sweep(self._inputs, param, values).points

    def get_vsl_sensitivity(self) -> List[SensitivityPoint]:
        return self.sensitivity_analysis(InputKey.VSL, VSL_SWEEP_VALUES)

    def results_text(self) -> str:
        """Plain-text summary of the current results."""
        result = self.calculate()
        return format_results_text(result, generate_table_data(self._inputs, result))
