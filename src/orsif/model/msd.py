"""Musculoskeletal disorder (MSD) cost model.

MSDs are modelled as non-fatal and annually incident. Both staff groups
share the same incidence; only the cost per case differs.
"""

from dataclasses import dataclass
from typing import Any, Dict

from orsif.core.inputs import InputSet


@dataclass(frozen=True)
class MSDGroupResult:
    """Annual MSD cases and costs for one staff group."""

    cases: float
    cost_per_case: float
    cost: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "cases": self.cases,
            "cost_per_case": self.cost_per_case,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class MSDTotals:
    cases: float
    cost: float

    def to_dict(self) -> Dict[str, float]:
        return {"cases": self.cases, "cost": self.cost}


@dataclass(frozen=True)
class MSDResult:
    """MSD model output for physicians, support staff and combined."""

    physicians: MSDGroupResult
    support: MSDGroupResult
    total: MSDTotals

    def to_dict(self) -> Dict[str, Any]:
        return {
            "physicians": self.physicians.to_dict(),
            "support": self.support.to_dict(),
            "total": self.total.to_dict(),
        }


def _group_result(headcount: float, incidence: float, cost_per_case: float) -> MSDGroupResult:
    cases = headcount * incidence
    return MSDGroupResult(cases=cases, cost_per_case=cost_per_case, cost=cases * cost_per_case)


def calculate_msd(inputs: InputSet) -> MSDResult:
    """Calculate annual MSD cases and costs."""
    physicians = _group_result(
        inputs.total_physicians,
        inputs.msd_annual_incidence,
        inputs.msd_physician_cost,
    )
    support = _group_result(
        inputs.total_support,
        inputs.msd_annual_incidence,
        inputs.msd_support_cost,
    )

    return MSDResult(
        physicians=physicians,
        support=support,
        total=MSDTotals(
            cases=physicians.cases + support.cases,
            cost=physicians.cost + support.cost,
        ),
    )
