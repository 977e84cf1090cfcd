"""Aggregation of the cancer and MSD models into a single result."""

from dataclasses import dataclass
from typing import Any, Dict

from orsif.core.inputs import InputSet
from orsif.model.cancer import CancerResult, calculate_cancer
from orsif.model.msd import MSDResult, calculate_msd


@dataclass(frozen=True)
class WorkforceTotals:
    """Headcounts by staff group."""

    physicians: float
    support: float
    total: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "physicians": self.physicians,
            "support": self.support,
            "total": self.total,
        }


@dataclass(frozen=True)
class CostBreakdown:
    """Annual cost by category and staff group."""

    fatal_cancer_physicians: float
    fatal_cancer_support: float
    non_fatal_cancer_physicians: float
    non_fatal_cancer_support: float
    msd_physicians: float
    msd_support: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "fatal_cancer_physicians": self.fatal_cancer_physicians,
            "fatal_cancer_support": self.fatal_cancer_support,
            "non_fatal_cancer_physicians": self.non_fatal_cancer_physicians,
            "non_fatal_cancer_support": self.non_fatal_cancer_support,
            "msd_physicians": self.msd_physicians,
            "msd_support": self.msd_support,
        }


@dataclass(frozen=True)
class CalculationResult:
    """Complete model output for one InputSet.

    Attributes:
        cancer: Cancer model output.
        msd: MSD model output.
        grand_total: cancer.total.total_cost + msd.total.cost.
        workforce: Headcounts used in the calculation.
        breakdown: Cost by category and staff group.
    """

    cancer: CancerResult
    msd: MSDResult
    grand_total: float
    workforce: WorkforceTotals
    breakdown: CostBreakdown

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "cancer": self.cancer.to_dict(),
            "msd": self.msd.to_dict(),
            "grand_total": self.grand_total,
            "workforce": self.workforce.to_dict(),
            "breakdown": self.breakdown.to_dict(),
        }


def calculate(inputs: InputSet) -> CalculationResult:
    """Calculate all annual cases and costs for a set of inputs.

    Pure function: the same InputSet always gives an identical result.
    """
    cancer = calculate_cancer(inputs)
    msd = calculate_msd(inputs)

    physicians = inputs.total_physicians
    support = inputs.total_support

    return CalculationResult(
        cancer=cancer,
        msd=msd,
        grand_total=cancer.total.total_cost + msd.total.cost,
        workforce=WorkforceTotals(
            physicians=physicians,
            support=support,
            total=physicians + support,
        ),
        breakdown=CostBreakdown(
            fatal_cancer_physicians=cancer.physicians.fatal.cost,
            fatal_cancer_support=cancer.support.fatal.cost,
            non_fatal_cancer_physicians=cancer.physicians.non_fatal.cost,
            non_fatal_cancer_support=cancer.support.non_fatal.cost,
            msd_physicians=msd.physicians.cost,
            msd_support=msd.support.cost,
        ),
    )
