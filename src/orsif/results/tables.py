"""Tabular projection of a calculation result.

The results table always has six rows in a fixed order, so two tables
built from different presets can be compared row by row:

    0-1  Fatal Cancer       (Physicians, Nurses and Techs)
    2-3  Non-Fatal Cancer   (Physicians, Nurses and Techs)
    4-5  MSDs               (Physicians, Nurses and Techs)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import pandas as pd

from orsif.core.inputs import InputSet
from orsif.model.calculator import CalculationResult, calculate


class CostCategory(Enum):
    FATAL_CANCER = "fatal_cancer"
    NON_FATAL_CANCER = "non_fatal_cancer"
    MSD = "msd"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


class StaffGroup(Enum):
    PHYSICIANS = "physicians"
    SUPPORT = "support"

    @property
    def label(self) -> str:
        return GROUP_LABELS[self]


CATEGORY_LABELS = {
    CostCategory.FATAL_CANCER: "Fatal Cancer",
    CostCategory.NON_FATAL_CANCER: "Non-Fatal Cancer",
    CostCategory.MSD: "Musculoskeletal Disorders",
}

GROUP_LABELS = {
    StaffGroup.PHYSICIANS: "Physicians",
    StaffGroup.SUPPORT: "Nurses and Techs",
}

TABLE_COLUMNS = ["category", "group", "cases", "cost_per_case", "total"]


@dataclass(frozen=True)
class TableRow:
    """One category x group row of the results table."""

    category: CostCategory
    group: StaffGroup
    cases: float
    cost_per_case: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.label,
            "group": self.group.label,
            "cases": self.cases,
            "cost_per_case": self.cost_per_case,
            "total": self.total,
        }


def generate_table_data(
    inputs: InputSet,
    result: Optional[CalculationResult] = None,
) -> List[TableRow]:
    """Build the six results-table rows.

    Args:
        inputs: Inputs supplying the per-case costs.
        result: Calculation for these inputs (computed if not given).

    Returns:
        Rows in fixed category-then-group order.
    """
    if result is None:
        result = calculate(inputs)
    cancer = result.cancer
    msd = result.msd

    return [
        TableRow(
            category=CostCategory.FATAL_CANCER,
            group=StaffGroup.PHYSICIANS,
            cases=cancer.physicians.fatal.cases,
            cost_per_case=inputs.vsl,
            total=cancer.physicians.fatal.cost,
        ),
        TableRow(
            category=CostCategory.FATAL_CANCER,
            group=StaffGroup.SUPPORT,
            cases=cancer.support.fatal.cases,
            cost_per_case=inputs.vsl,
            total=cancer.support.fatal.cost,
        ),
        TableRow(
            category=CostCategory.NON_FATAL_CANCER,
            group=StaffGroup.PHYSICIANS,
            cases=cancer.physicians.non_fatal.cases,
            cost_per_case=inputs.non_fatal_cancer_cost,
            total=cancer.physicians.non_fatal.cost,
        ),
        TableRow(
            category=CostCategory.NON_FATAL_CANCER,
            group=StaffGroup.SUPPORT,
            cases=cancer.support.non_fatal.cases,
            cost_per_case=inputs.non_fatal_cancer_cost,
            total=cancer.support.non_fatal.cost,
        ),
        TableRow(
            category=CostCategory.MSD,
            group=StaffGroup.PHYSICIANS,
            cases=msd.physicians.cases,
            cost_per_case=inputs.msd_physician_cost,
            total=msd.physicians.cost,
        ),
        TableRow(
            category=CostCategory.MSD,
            group=StaffGroup.SUPPORT,
            cases=msd.support.cases,
            cost_per_case=inputs.msd_support_cost,
            total=msd.support.cost,
        ),
    ]


def table_to_dataframe(rows: List[TableRow]) -> pd.DataFrame:
    """Convert table rows to a DataFrame with display labels."""
    return pd.DataFrame([row.to_dict() for row in rows], columns=TABLE_COLUMNS)
