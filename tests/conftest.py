"""Pytest fixtures for ORSIF calculator tests."""

import pytest

from orsif.core.inputs import InputSet
from orsif.core.presets import PRESETS
from orsif.engine import EconomicCalculator


@pytest.fixture
def engine() -> EconomicCalculator:
    """Fresh engine with the built-in presets (2025 inputs loaded)."""
    return EconomicCalculator()


@pytest.fixture
def inputs_2018() -> InputSet:
    return PRESETS["2018"]


@pytest.fixture
def inputs_2025() -> InputSet:
    return PRESETS["2025"]


@pytest.fixture
def zero_inputs() -> InputSet:
    """Inputs with no workforce, so every cost is zero."""
    return InputSet(
        interventional_cardiologists=0,
        interventional_radiologists=0,
        electrophysiologists=0,
        nurses=0,
        technicians=0,
    )
