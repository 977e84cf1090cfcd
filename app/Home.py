"""ORSIF Economic Impact Study - Home page."""

import streamlit as st

from components.findings import key_findings
from components.session import get_engine
from orsif.core.presets import BASELINE_PRESET, CURRENT_PRESET
from orsif.results.formatting import format_currency, format_percent

st.set_page_config(
    page_title="ORSIF Economic Impact",
    page_icon="",
    layout="wide",
)

engine = get_engine()
presets = engine.presets

st.title("The Economic Cost of Occupational Hazards in Interventional Medicine")

# Hero figure: 2025 preset against the 2018 baseline
current = presets[CURRENT_PRESET]
baseline = presets[BASELINE_PRESET]
summary = engine.compare_presets(BASELINE_PRESET, CURRENT_PRESET)
total_row = summary.iloc[-1]

hero_col, badge_col = st.columns([2, 1])
with hero_col:
    st.metric(
        "Estimated Annual Economic Cost (2025)",
        format_currency(total_row["current_total"]),
        delta=f"{format_percent(total_row['change_pct'], signed=True)} from {BASELINE_PRESET}",
        delta_color="inverse",
    )
with badge_col:
    st.markdown("""
    Radiation-induced cancer and musculoskeletal disorders among
    interventional cardiologists, radiologists, electrophysiologists,
    nurses and technologists.
    """)

st.divider()

# ============ KEY FINDINGS ============
st.subheader("Key Findings")

cols = st.columns(4)
for col, finding in zip(cols, key_findings(baseline, current)):
    with col:
        st.metric(finding.title, finding.value)
        st.caption(finding.comparison)

st.divider()

# ============ SUMMARY TABLE ============
st.subheader(f"{BASELINE_PRESET} vs {CURRENT_PRESET}")

display = summary.copy()
display["baseline_total"] = display["baseline_total"].map(format_currency)
display["current_total"] = display["current_total"].map(format_currency)
display["change_pct"] = display["change_pct"].map(
    lambda v: format_percent(v, decimals=0, signed=True)
)
display.columns = ["Category", "Group", BASELINE_PRESET, CURRENT_PRESET, "Change"]
st.dataframe(display, hide_index=True, use_container_width=True)

st.markdown("""
---

**Use the sidebar** to navigate:
1. **Calculator** - Adjust assumptions and see the cost update
2. **Comparison** - Baseline and current estimates side by side
""")
