"""Input parameter model.

An InputSet is an immutable value holding every named parameter of the
economic model. Updates return a new InputSet, so a snapshot taken before
a temporary change can always be restored without aliasing.

Parameter groups:
- Workforce counts (three physician specialties, nurses, technicians)
- Risk and rate parameters (fractions, plus career duration in years)
- Valuations (USD per case / per statistical life)
"""

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class InputKey(str, Enum):
    """Valid input parameter names (also used as URL query keys)."""

    # Workforce
    INTERVENTIONAL_CARDIOLOGISTS = "interventional_cardiologists"
    INTERVENTIONAL_RADIOLOGISTS = "interventional_radiologists"
    ELECTROPHYSIOLOGISTS = "electrophysiologists"
    NURSES = "nurses"
    TECHNICIANS = "technicians"

    # Risk parameters
    PHYSICIAN_CANCER_RISK = "physician_cancer_risk"
    SUPPORT_CANCER_RISK = "support_cancer_risk"
    CANCER_FATALITY_RATE = "cancer_fatality_rate"
    MSD_ANNUAL_INCIDENCE = "msd_annual_incidence"
    CAREER_DURATION = "career_duration"

    # Valuations
    VSL = "vsl"
    NON_FATAL_CANCER_COST = "non_fatal_cancer_cost"
    MSD_PHYSICIAN_COST = "msd_physician_cost"
    MSD_SUPPORT_COST = "msd_support_cost"

    @classmethod
    def lookup(cls, name: str) -> Optional["InputKey"]:
        """Return the key for a name, or None if it is not recognised."""
        try:
            return cls(name)
        except ValueError:
            return None


PHYSICIAN_KEYS = (
    InputKey.INTERVENTIONAL_CARDIOLOGISTS,
    InputKey.INTERVENTIONAL_RADIOLOGISTS,
    InputKey.ELECTROPHYSIOLOGISTS,
)

SUPPORT_KEYS = (
    InputKey.NURSES,
    InputKey.TECHNICIANS,
)


@dataclass(frozen=True)
class InputSet:
    """Complete set of model inputs.

    Defaults are the 2025 figures. Every field maps one-to-one onto an
    InputKey, so an InputSet always carries every parameter.
    """

    # === WORKFORCE ===
    interventional_cardiologists: float = 5639
    interventional_radiologists: float = 3358
    electrophysiologists: float = 2629
    nurses: float = 13000
    technicians: float = 11300

    # === RISK ===
    physician_cancer_risk: float = 0.01
    # 1% lifetime at 100 mSv

    support_cancer_risk: float = 0.005
    # 0.5% lifetime at 50 mSv

    cancer_fatality_rate: float = 0.5
    msd_annual_incidence: float = 0.018
    career_duration: float = 25

    # === VALUATIONS ===
    vsl: float = 13_600_000
    non_fatal_cancer_cost: float = 250_000
    msd_physician_cost: float = 94_285
    # Spine injury cost

    msd_support_cost: float = 47_316
    # General MSD cost

    def __getitem__(self, key: Union[InputKey, str]) -> float:
        return getattr(self, InputKey(key).value)

    def with_value(self, key: Union[InputKey, str], value: float) -> "InputSet":
        """Return a copy with one parameter replaced.

        Raises:
            ValueError: If key is not a valid InputKey.
        """
        return dataclasses.replace(self, **{InputKey(key).value: value})

    @property
    def total_physicians(self) -> float:
        """Interventional cardiologists + radiologists + electrophysiologists."""
        return (
            self.interventional_cardiologists
            + self.interventional_radiologists
            + self.electrophysiologists
        )

    @property
    def total_support(self) -> float:
        """Nurses + technicians."""
        return self.nurses + self.technicians

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary keyed by parameter name."""
        return {key.value: self[key] for key in InputKey}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InputSet":
        """Build an InputSet from a complete mapping.

        Raises:
            ValueError: If a parameter is missing, unknown or non-numeric,
                or career_duration is not positive.
        """
        missing = [key.value for key in InputKey if key.value not in data]
        if missing:
            raise ValueError(f"Missing input parameters: {', '.join(missing)}")

        unknown = [name for name in data if InputKey.lookup(name) is None]
        if unknown:
            raise ValueError(f"Unknown input parameters: {', '.join(unknown)}")

        values = {}
        for key in InputKey:
            parsed = parse_input_value(data[key.value])
            if not parsed.ok:
                raise ValueError(f"Invalid value for {key.value}: {parsed.error}")
            values[key.value] = parsed.value
        if values[InputKey.CAREER_DURATION.value] <= 0:
            raise ValueError("career_duration must be positive")
        return cls(**values)


DEFAULT_INPUTS = InputSet()


@dataclass(frozen=True)
class ParsedValue:
    """Outcome of parsing a raw input value."""

    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_input_value(raw: Any) -> ParsedValue:
    """Strictly parse a raw value (slider text, query string) to a float.

    Accepts ints, floats and numeric strings. Surrounding whitespace and
    ``,``/``_`` digit grouping are allowed in strings. Anything else,
    including trailing text ("12abc"), booleans, NaN and infinities, is
    rejected.

    Args:
        raw: The value to parse.

    Returns:
        ParsedValue with either value or error set.
    """
    if isinstance(raw, bool):
        return ParsedValue(error=f"boolean is not a number: {raw!r}")

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(",", "").replace("_", "")
        if not text:
            return ParsedValue(error="empty value")
        try:
            value = float(text)
        except ValueError:
            return ParsedValue(error=f"not a number: {raw!r}")
    else:
        return ParsedValue(error=f"unsupported type: {type(raw).__name__}")

    if not math.isfinite(value):
        return ParsedValue(error=f"not a finite number: {raw!r}")

    return ParsedValue(value=value)
