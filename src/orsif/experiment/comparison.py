"""Baseline comparison tools.

Compares two calculation results (usually the live inputs against the
2018 baseline) and builds the row-by-row preset comparison table shown on
the home page.

Zero-baseline policy: when the baseline total is zero the percent change
is undefined and reported as NaN, never as infinity. Formatting helpers
render NaN as "n/a".
"""

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np
import pandas as pd

from orsif.core.inputs import InputSet
from orsif.model.calculator import CalculationResult, calculate
from orsif.results.formatting import format_currency, format_percent
from orsif.results.tables import generate_table_data


def percent_change(current: float, baseline: float) -> float:
    """(current - baseline) / baseline * 100, or NaN if baseline is zero."""
    if baseline == 0:
        return float(np.nan)
    return (current - baseline) / baseline * 100


@dataclass(frozen=True)
class ComparisonResult:
    """Current result against a baseline result.

    Attributes:
        current: Result for the inputs being compared.
        baseline: Result for the baseline inputs.
        change: current.grand_total - baseline.grand_total.
        percent_change: change as a percentage of the baseline total
            (NaN when the baseline total is zero).
    """

    current: CalculationResult
    baseline: CalculationResult
    change: float
    percent_change: float

    @property
    def has_percent_change(self) -> bool:
        return not np.isnan(self.percent_change)

    @property
    def formatted(self) -> Dict[str, str]:
        """Display strings for change and percent change."""
        return {
            "change": format_currency(self.change),
            "percent_change": format_percent(self.percent_change, decimals=1),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "current": self.current.to_dict(),
            "baseline": self.baseline.to_dict(),
            "change": self.change,
            "percent_change": self.percent_change,
            "formatted": self.formatted,
        }


def compare_results(current: CalculationResult, baseline: CalculationResult) -> ComparisonResult:
    """Build a ComparisonResult from two calculation results."""
    return ComparisonResult(
        current=current,
        baseline=baseline,
        change=current.grand_total - baseline.grand_total,
        percent_change=percent_change(current.grand_total, baseline.grand_total),
    )


def compare_inputs(current: InputSet, baseline: InputSet) -> ComparisonResult:
    """Calculate both input sets and compare them."""
    return compare_results(calculate(current), calculate(baseline))


def compare_presets_table(baseline: InputSet, current: InputSet) -> pd.DataFrame:
    """Row-by-row comparison of two input sets' results tables.

    Rows follow the fixed results-table order, followed by a TOTAL row.

    Args:
        baseline: Baseline inputs (e.g. the 2018 preset).
        current: Inputs to compare against the baseline.

    Returns:
        DataFrame with columns: category, group, baseline_total,
        current_total, change_pct (NaN where the baseline total is zero).
    """
    baseline_result = calculate(baseline)
    current_result = calculate(current)
    baseline_rows = generate_table_data(baseline, baseline_result)
    current_rows = generate_table_data(current, current_result)

    records = []
    for baseline_row, current_row in zip(baseline_rows, current_rows):
        records.append({
            "category": current_row.category.label,
            "group": current_row.group.label,
            "baseline_total": baseline_row.total,
            "current_total": current_row.total,
            "change_pct": percent_change(current_row.total, baseline_row.total),
        })

    records.append({
        "category": "TOTAL",
        "group": "",
        "baseline_total": baseline_result.grand_total,
        "current_total": current_result.grand_total,
        "change_pct": percent_change(current_result.grand_total, baseline_result.grand_total),
    })

    return pd.DataFrame(records)
