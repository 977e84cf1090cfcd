"""Occupational cancer cost model.

Lifetime cancer risk is amortised over a working career to give an
expected annual incidence, which is then split into fatal and non-fatal
cases. Fatal cases are valued at the VSL, non-fatal cases at a fixed
treatment cost. No rounding is applied.
"""

from dataclasses import dataclass
from typing import Any, Dict

from orsif.core.inputs import InputSet


@dataclass(frozen=True)
class CaseCost:
    """Expected annual cases and their cost."""

    cases: float
    cost: float

    def to_dict(self) -> Dict[str, float]:
        return {"cases": self.cases, "cost": self.cost}


@dataclass(frozen=True)
class CancerGroupResult:
    """Cancer cases and costs for one staff group."""

    fatal: CaseCost
    non_fatal: CaseCost
    total_cases: float
    total_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fatal": self.fatal.to_dict(),
            "non_fatal": self.non_fatal.to_dict(),
            "total_cases": self.total_cases,
            "total_cost": self.total_cost,
        }


@dataclass(frozen=True)
class CancerTotals:
    """Cancer cases and costs summed across both staff groups."""

    fatal_cases: float
    fatal_cost: float
    non_fatal_cases: float
    non_fatal_cost: float
    total_cases: float
    total_cost: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "fatal_cases": self.fatal_cases,
            "fatal_cost": self.fatal_cost,
            "non_fatal_cases": self.non_fatal_cases,
            "non_fatal_cost": self.non_fatal_cost,
            "total_cases": self.total_cases,
            "total_cost": self.total_cost,
        }


@dataclass(frozen=True)
class CancerResult:
    """Cancer model output for physicians, support staff and combined."""

    physicians: CancerGroupResult
    support: CancerGroupResult
    total: CancerTotals

    def to_dict(self) -> Dict[str, Any]:
        return {
            "physicians": self.physicians.to_dict(),
            "support": self.support.to_dict(),
            "total": self.total.to_dict(),
        }


def annual_cancer_cases(headcount: float, lifetime_risk: float, career_duration: float) -> float:
    """Expected annual cancers: lifetime cases spread over a career.

    Raises:
        ValueError: If career_duration is not positive.
    """
    if career_duration <= 0:
        raise ValueError("career_duration must be positive")
    lifetime_cancers = headcount * lifetime_risk
    return lifetime_cancers / career_duration


def _group_result(annual_cases: float, inputs: InputSet) -> CancerGroupResult:
    fatal_cases = annual_cases * inputs.cancer_fatality_rate
    non_fatal_cases = annual_cases * (1 - inputs.cancer_fatality_rate)

    fatal_cost = fatal_cases * inputs.vsl
    non_fatal_cost = non_fatal_cases * inputs.non_fatal_cancer_cost

    return CancerGroupResult(
        fatal=CaseCost(cases=fatal_cases, cost=fatal_cost),
        non_fatal=CaseCost(cases=non_fatal_cases, cost=non_fatal_cost),
        total_cases=annual_cases,
        total_cost=fatal_cost + non_fatal_cost,
    )


def calculate_cancer(inputs: InputSet) -> CancerResult:
    """Calculate annual cancer cases and costs.

    Args:
        inputs: Model inputs.

    Returns:
        CancerResult with per-group and combined fatal/non-fatal figures.
    """
    physicians = _group_result(
        annual_cancer_cases(
            inputs.total_physicians,
            inputs.physician_cancer_risk,
            inputs.career_duration,
        ),
        inputs,
    )
    support = _group_result(
        annual_cancer_cases(
            inputs.total_support,
            inputs.support_cancer_risk,
            inputs.career_duration,
        ),
        inputs,
    )

    total = CancerTotals(
        fatal_cases=physicians.fatal.cases + support.fatal.cases,
        fatal_cost=physicians.fatal.cost + support.fatal.cost,
        non_fatal_cases=physicians.non_fatal.cases + support.non_fatal.cases,
        non_fatal_cost=physicians.non_fatal.cost + support.non_fatal.cost,
        total_cases=physicians.total_cases + support.total_cases,
        total_cost=(
            physicians.fatal.cost
            + support.fatal.cost
            + physicians.non_fatal.cost
            + support.non_fatal.cost
        ),
    )

    return CancerResult(physicians=physicians, support=support, total=total)
