"""Comparison Page - baseline estimate against the current assumptions."""

import streamlit as st

from components.charts import comparison_bar_chart
from components.session import get_engine
from orsif.core.presets import BASELINE_PRESET, CUSTOM_PRESET
from orsif.results.formatting import format_currency, format_number

st.set_page_config(page_title="Comparison - ORSIF", page_icon="⚖️", layout="wide")

st.title("⚖️ 2018 vs Updated Estimates")

engine = get_engine()
comparison = engine.compare_to_baseline()

current_label = "Current (custom)" if engine.current_preset == CUSTOM_PRESET else engine.current_preset

col_a, col_b = st.columns(2)

with col_a:
    st.subheader(f"{BASELINE_PRESET} Baseline")
    st.metric("Total Annual Cost", format_currency(comparison.baseline.grand_total))
    st.caption(f"Workforce: {format_number(comparison.baseline.workforce.total)}")

with col_b:
    st.subheader(current_label)
    st.metric(
        "Total Annual Cost",
        format_currency(comparison.current.grand_total),
        delta=f"{comparison.formatted['change']} ({comparison.formatted['percent_change']})",
        delta_color="inverse",
    )
    st.caption(f"Workforce: {format_number(comparison.current.workforce.total)}")

st.divider()

st.subheader("Cost by Category")
st.plotly_chart(
    comparison_bar_chart(comparison, baseline_label=BASELINE_PRESET, current_label=current_label),
    use_container_width=True,
)

with st.expander("View Data"):
    st.json(comparison.to_dict(), expanded=False)
