"""Built-in preset configurations.

Each preset is a complete InputSet snapshot for a point in time. The 2018
preset is the fixed baseline for percent-change reporting.
"""

from typing import Dict, List, Optional

from orsif.core.inputs import InputSet


BASELINE_PRESET = "2018"
CURRENT_PRESET = "2025"
CUSTOM_PRESET = "custom"


PRESETS: Dict[str, InputSet] = {
    "2018": InputSet(
        interventional_cardiologists=3255,
        interventional_radiologists=3358,
        electrophysiologists=1925,
        nurses=13000,
        technicians=11300,
        physician_cancer_risk=0.01,
        support_cancer_risk=0.005,
        cancer_fatality_rate=0.5,
        msd_annual_incidence=0.018,
        career_duration=25,
        vsl=9_000_000,
        non_fatal_cancer_cost=200_000,
        msd_physician_cost=45_000,
        msd_support_cost=12_000,
    ),
    "2025": InputSet(
        interventional_cardiologists=5639,
        interventional_radiologists=3358,
        electrophysiologists=2629,
        nurses=13000,
        technicians=11300,
        physician_cancer_risk=0.01,
        support_cancer_risk=0.005,
        cancer_fatality_rate=0.5,
        msd_annual_incidence=0.018,
        career_duration=25,
        vsl=13_600_000,
        non_fatal_cancer_cost=250_000,
        msd_physician_cost=94_285,
        msd_support_cost=47_316,
    ),
}


def get_preset(name: str, presets: Optional[Dict[str, InputSet]] = None) -> Optional[InputSet]:
    """Look up a preset by name, returning None if it does not exist."""
    table = PRESETS if presets is None else presets
    return table.get(str(name))


def list_presets(presets: Optional[Dict[str, InputSet]] = None) -> List[str]:
    """Preset names in display order."""
    table = PRESETS if presets is None else presets
    return sorted(table)
