"""Model layer: cancer and MSD cost models and their aggregation."""

from orsif.model.cancer import CancerResult, calculate_cancer
from orsif.model.msd import MSDResult, calculate_msd
from orsif.model.calculator import (
    CalculationResult,
    CostBreakdown,
    WorkforceTotals,
    calculate,
)

__all__ = [
    "CancerResult",
    "calculate_cancer",
    "MSDResult",
    "calculate_msd",
    "CalculationResult",
    "CostBreakdown",
    "WorkforceTotals",
    "calculate",
]
