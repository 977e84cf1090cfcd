"""One-parameter sensitivity analysis.

Sweeps a single input across a sequence of values with every other input
held fixed, recording the grand total at each value.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union

import numpy as np
import pandas as pd

from orsif.core.inputs import InputKey, InputSet
from orsif.model.calculator import calculate


# VSL range from the low regulatory estimate to the upper literature value
VSL_SWEEP_VALUES = (
    6_300_000,
    9_000_000,
    11_000_000,
    13_600_000,
    16_000_000,
    18_000_000,
    20_700_000,
)


@dataclass(frozen=True)
class SensitivityPoint:
    value: float
    grand_total: float


@dataclass
class SweepResult:
    """Result of a sensitivity sweep.

    Attributes:
        parameter: Name of the parameter that was varied.
        points: One point per swept value, in input order.
    """
    parameter: str
    points: List[SensitivityPoint]

    @property
    def values(self) -> List[float]:
        return [point.value for point in self.points]

    @property
    def grand_totals(self) -> List[float]:
        return [point.grand_total for point in self.points]

    def to_dataframe(self) -> pd.DataFrame:
        """Return results as DataFrame with columns: value, grand_total."""
        return pd.DataFrame(
            {"value": self.values, "grand_total": self.grand_totals},
            columns=["value", "grand_total"],
        )


def sensitivity_sweep(
    inputs: InputSet,
    param: Union[InputKey, str],
    values: Iterable[float],
) -> SweepResult:
    """Vary one parameter across values, measuring the grand total.

    The given InputSet is not modified.

    Args:
        inputs: Base inputs.
        param: Parameter to vary (e.g. 'vsl', 'career_duration').
        values: Values to test, processed in order.

    Returns:
        SweepResult with one point per value.

    Raises:
        ValueError: If param is not a known input parameter.
    """
    key = InputKey.lookup(param)
    if key is None:
        raise ValueError(f"Unknown input parameter: {param}")

    points = [
        SensitivityPoint(
            value=value,
            grand_total=calculate(inputs.with_value(key, value)).grand_total,
        )
        for value in values
    ]
    return SweepResult(parameter=key.value, points=points)


def vsl_sensitivity(inputs: InputSet) -> SweepResult:
    """Sensitivity of the grand total to the VSL over VSL_SWEEP_VALUES."""
    return sensitivity_sweep(inputs, InputKey.VSL, VSL_SWEEP_VALUES)


def sweep_values(minimum: float, maximum: float, steps: int) -> List[float]:
    """Evenly spaced sweep values, both ends included."""
    return [float(v) for v in np.linspace(minimum, maximum, int(steps))]
