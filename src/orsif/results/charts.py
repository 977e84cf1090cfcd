"""Chart-ready projections of a calculation result.

Colours come from fixed palettes keyed by position, never by value, so
each slice keeps its colour as the inputs change.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from orsif.model.calculator import CalculationResult


CATEGORY_LABELS = ["Fatal Cancer", "Non-Fatal Cancer", "MSDs"]
CATEGORY_COLORS = ["#c0392b", "#e74c3c", "#2980b9"]

GROUP_LABELS = ["Physicians", "Support Staff"]
GROUP_COLORS = ["#8e44ad", "#16a085"]

BREAKDOWN_LABELS = [
    "Fatal Cancer (Physicians)",
    "Fatal Cancer (Support)",
    "Non-Fatal Cancer (Physicians)",
    "Non-Fatal Cancer (Support)",
    "MSDs (Physicians)",
    "MSDs (Support)",
]
BREAKDOWN_COLORS = ["#c0392b", "#e74c3c", "#9b59b6", "#8e44ad", "#2980b9", "#3498db"]


@dataclass(frozen=True)
class ChartSeries:
    """Labels, values and colours for one chart, aligned by position."""

    labels: List[str]
    values: List[float]
    colors: List[str]

    @property
    def total(self) -> float:
        return sum(self.values)

    def shares(self) -> List[float]:
        """Each value as a percentage of the series total (0 if total is 0)."""
        total = self.total
        if total == 0:
            return [0.0 for _ in self.values]
        return [value / total * 100 for value in self.values]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": list(self.labels),
            "values": list(self.values),
            "colors": list(self.colors),
        }


@dataclass(frozen=True)
class ChartBundle:
    """The three standard chart projections."""

    by_category: ChartSeries
    by_group: ChartSeries
    breakdown: ChartSeries

    def to_dict(self) -> Dict[str, Any]:
        return {
            "by_category": self.by_category.to_dict(),
            "by_group": self.by_group.to_dict(),
            "breakdown": self.breakdown.to_dict(),
        }


def get_chart_data(result: CalculationResult) -> ChartBundle:
    """Derive category, staff-group and six-way chart series."""
    cancer = result.cancer
    msd = result.msd

    by_category = ChartSeries(
        labels=list(CATEGORY_LABELS),
        values=[
            cancer.total.fatal_cost,
            cancer.total.non_fatal_cost,
            msd.total.cost,
        ],
        colors=list(CATEGORY_COLORS),
    )

    by_group = ChartSeries(
        labels=list(GROUP_LABELS),
        values=[
            cancer.physicians.total_cost + msd.physicians.cost,
            cancer.support.total_cost + msd.support.cost,
        ],
        colors=list(GROUP_COLORS),
    )

    breakdown = ChartSeries(
        labels=list(BREAKDOWN_LABELS),
        values=[
            cancer.physicians.fatal.cost,
            cancer.support.fatal.cost,
            cancer.physicians.non_fatal.cost,
            cancer.support.non_fatal.cost,
            msd.physicians.cost,
            msd.support.cost,
        ],
        colors=list(BREAKDOWN_COLORS),
    )

    return ChartBundle(by_category=by_category, by_group=by_group, breakdown=breakdown)
