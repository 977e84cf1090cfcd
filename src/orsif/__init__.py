"""
ORSIF Economic Impact Calculator.

Models the annual cost of occupational cancer and musculoskeletal
disorders in the interventional medical workforce, with a Streamlit
front end.
"""

__version__ = "0.1.0"

from orsif.core.inputs import InputKey, InputSet
from orsif.engine import EconomicCalculator

__all__ = ["InputKey", "InputSet", "EconomicCalculator", "__version__"]
