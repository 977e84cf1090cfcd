"""Key findings cards for the home page."""

from dataclasses import dataclass
from typing import List

from orsif.core.inputs import InputSet
from orsif.experiment.comparison import percent_change
from orsif.results.formatting import format_currency, format_number, format_percent

# Share of interventionalists reporting MSDs (survey figures, not model inputs)
MSD_PREVALENCE_BASELINE = 0.53
MSD_PREVALENCE_CURRENT = 0.66


@dataclass(frozen=True)
class Finding:
    key: str
    title: str
    value: str
    comparison: str


def _change(current: float, baseline: float) -> str:
    return format_percent(percent_change(current, baseline), decimals=0, signed=True)


def key_findings(baseline: InputSet, current: InputSet) -> List[Finding]:
    """Headline input changes between the baseline and current presets."""
    baseline_workforce = baseline.total_physicians + baseline.total_support
    current_workforce = current.total_physicians + current.total_support
    prevalence_pts = round((MSD_PREVALENCE_CURRENT - MSD_PREVALENCE_BASELINE) * 100)

    return [
        Finding(
            key="vsl-value",
            title="Value of Statistical Life",
            value=format_currency(current.vsl),
            comparison=f"{_change(current.vsl, baseline.vsl)} from {format_currency(baseline.vsl)}",
        ),
        Finding(
            key="msd-physician",
            title="Physician MSD Cost per Case",
            value="$" + format_number(current.msd_physician_cost),
            comparison=(
                f"{_change(current.msd_physician_cost, baseline.msd_physician_cost)} "
                f"from ${format_number(baseline.msd_physician_cost)}"
            ),
        ),
        Finding(
            key="workforce",
            title="Interventional Workforce",
            value=format_number(current_workforce),
            comparison=f"{_change(current_workforce, baseline_workforce)} from {format_number(baseline_workforce)}",
        ),
        Finding(
            key="msd-prevalence",
            title="MSD Prevalence",
            value=f"{MSD_PREVALENCE_CURRENT * 100:.0f}%",
            comparison=f"+{prevalence_pts} pts from {MSD_PREVALENCE_BASELINE * 100:.0f}%",
        ),
    ]
