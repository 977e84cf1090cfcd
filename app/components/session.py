"""Per-session engine access.

Each browser session gets its own EconomicCalculator in st.session_state.
URL overrides (share links) are applied once, when the engine is created.
"""

import streamlit as st

from orsif.core.config import load_all_presets
from orsif.engine import EconomicCalculator
from orsif.share import apply_query_params


def get_engine() -> EconomicCalculator:
    """Return this session's engine, creating it on first use."""
    if "engine" not in st.session_state:
        engine = EconomicCalculator(presets=load_all_presets())
        apply_query_params(engine, st.query_params.to_dict())
        st.session_state.engine = engine
    return st.session_state.engine
