"""Calculator Page - adjust assumptions and see annual costs update."""

from typing import Dict, List, Tuple

import streamlit as st

from components.charts import category_bar_chart, group_donut_chart, sensitivity_line_chart
from components.session import get_engine
from components.sliders import slider_caption
from orsif.core.inputs import InputKey
from orsif.core.presets import BASELINE_PRESET, CUSTOM_PRESET, list_presets
from orsif.experiment.sensitivity import sweep_values
from orsif.results.formatting import format_currency, format_number, format_percent
from orsif.results.tables import table_to_dataframe
from orsif.share import build_share_query

st.set_page_config(page_title="Calculator - ORSIF", page_icon="🧮", layout="wide")

st.title("🧮 Economic Impact Calculator")

engine = get_engine()

# (key, label, min, max, step, display format)
SliderSpec = Tuple[InputKey, str, float, float, float, str]

SLIDERS: Dict[str, List[SliderSpec]] = {
    "Workforce": [
        (InputKey.INTERVENTIONAL_CARDIOLOGISTS, "Interventional Cardiologists", 0.0, 15000.0, 50.0, "number"),
        (InputKey.INTERVENTIONAL_RADIOLOGISTS, "Interventional Radiologists", 0.0, 10000.0, 50.0, "number"),
        (InputKey.ELECTROPHYSIOLOGISTS, "Electrophysiologists", 0.0, 8000.0, 25.0, "number"),
        (InputKey.NURSES, "Nurses", 0.0, 40000.0, 100.0, "number"),
        (InputKey.TECHNICIANS, "Technologists", 0.0, 40000.0, 100.0, "number"),
    ],
    "Risk Parameters": [
        (InputKey.PHYSICIAN_CANCER_RISK, "Physician Lifetime Cancer Risk", 0.0, 0.05, 0.001, "percent"),
        (InputKey.SUPPORT_CANCER_RISK, "Support Staff Lifetime Cancer Risk", 0.0, 0.05, 0.001, "percent"),
        (InputKey.CANCER_FATALITY_RATE, "Cancer Fatality Rate", 0.0, 1.0, 0.05, "percent"),
        (InputKey.MSD_ANNUAL_INCIDENCE, "Annual MSD Incidence", 0.0, 0.1, 0.001, "percent"),
        (InputKey.CAREER_DURATION, "Career Duration", 5.0, 45.0, 1.0, "years"),
    ],
    "Valuations": [
        (InputKey.VSL, "Value of Statistical Life", 1_000_000.0, 25_000_000.0, 100_000.0, "currency"),
        (InputKey.NON_FATAL_CANCER_COST, "Non-Fatal Cancer Cost", 50_000.0, 1_000_000.0, 5_000.0, "currency"),
        (InputKey.MSD_PHYSICIAN_COST, "MSD Cost per Physician Case", 5_000.0, 250_000.0, 1_000.0, "currency"),
        (InputKey.MSD_SUPPORT_COST, "MSD Cost per Support Case", 5_000.0, 150_000.0, 1_000.0, "currency"),
    ],
}

ALL_SLIDERS = [spec for specs in SLIDERS.values() for spec in specs]


def widget_key(key: InputKey) -> str:
    return f"input_{key.value}"


def sync_widgets() -> None:
    """Copy the engine's inputs into the slider widget state (clamped to range)."""
    for key, _, min_val, max_val, *_ in ALL_SLIDERS:
        st.session_state[widget_key(key)] = min(max(float(engine.inputs[key]), min_val), max_val)


def on_preset_change() -> None:
    preset = st.session_state.preset_selector
    if preset != CUSTOM_PRESET and engine.load_preset(preset):
        sync_widgets()


def on_slider_change(key: InputKey) -> None:
    engine.update_input(key.value, st.session_state[widget_key(key)])
    st.session_state.preset_selector = CUSTOM_PRESET


# Initialize widget state from the engine on first render
if "preset_selector" not in st.session_state:
    st.session_state.preset_selector = engine.current_preset
    sync_widgets()

preset_options = list_presets(engine.presets) + [CUSTOM_PRESET]

# ============ INPUTS ============
with st.sidebar:
    st.selectbox(
        "Preset",
        options=preset_options,
        key="preset_selector",
        on_change=on_preset_change,
        format_func=lambda p: "Custom" if p == CUSTOM_PRESET else f"{p} estimates",
    )

    for tab, (group, specs) in zip(st.tabs(list(SLIDERS)), SLIDERS.items()):
        with tab:
            for key, label, min_val, max_val, step, fmt in specs:
                st.slider(
                    label,
                    min_value=min_val,
                    max_value=max_val,
                    step=step,
                    key=widget_key(key),
                    on_change=on_slider_change,
                    args=(key,),
                )
                st.caption(slider_caption(float(engine.inputs[key]), min_val, max_val, fmt))

# ============ RESULTS ============
result = engine.calculate()
comparison = engine.compare_to_baseline()

total_col, comp_col = st.columns([2, 1])
with total_col:
    st.metric("Total Annual Economic Cost", format_currency(result.grand_total))
with comp_col:
    if comparison.has_percent_change:
        st.metric(
            f"Change from {BASELINE_PRESET} baseline",
            format_percent(comparison.percent_change, signed=True),
            delta=comparison.formatted["change"],
            delta_color="inverse",
        )
        st.caption(f"{BASELINE_PRESET} baseline: {format_currency(comparison.baseline.grand_total)}")
    else:
        st.metric(f"Change from {BASELINE_PRESET} baseline", comparison.formatted["percent_change"])

st.subheader("Cost Breakdown")

rows = engine.generate_table_data()
table = table_to_dataframe(rows)
display = table.copy()
display["cases"] = display["cases"].map(lambda v: format_number(v, decimals=1))
display["cost_per_case"] = display["cost_per_case"].map(format_currency)
display["total"] = display["total"].map(format_currency)
display.columns = ["Category", "Group", "Annual Cases", "Cost per Case", "Annual Cost"]
st.dataframe(display, hide_index=True, use_container_width=True)
st.markdown(f"**TOTAL: {format_currency(result.grand_total)}**")

chart_data = engine.get_chart_data()

chart_col1, chart_col2 = st.columns(2)
with chart_col1:
    st.markdown("#### Cost by Category")
    st.plotly_chart(category_bar_chart(chart_data.by_category), use_container_width=True)
with chart_col2:
    st.markdown("#### Cost by Staff Group")
    st.plotly_chart(group_donut_chart(chart_data.by_group), use_container_width=True)

# ============ SENSITIVITY ============
st.subheader("Sensitivity Analysis")

st.plotly_chart(sensitivity_line_chart(engine.get_vsl_sensitivity()), use_container_width=True)

with st.expander("Sweep another parameter"):
    labels = {key: label for key, label, *_ in ALL_SLIDERS}
    param = st.selectbox("Parameter", options=list(labels), format_func=lambda k: labels[k])
    spec = next(s for s in ALL_SLIDERS if s[0] == param)

    col1, col2, col3 = st.columns(3)
    with col1:
        min_val = st.number_input("Minimum", value=spec[2], key=f"sweep_min_{param.value}")
    with col2:
        max_val = st.number_input("Maximum", value=spec[3], key=f"sweep_max_{param.value}")
    with col3:
        steps = st.number_input("Steps", value=7, min_value=2, max_value=25, key="sweep_steps")

    try:
        points = engine.sensitivity_analysis(param, sweep_values(min_val, max_val, steps))
    except ValueError as e:
        st.error(f"Cannot run sweep: {e}")
    else:
        st.line_chart(
            {"value": [p.value for p in points], "grand_total": [p.grand_total for p in points]},
            x="value",
            y="grand_total",
        )

# ============ EXPORT ============
st.subheader("Export")

export_col1, export_col2 = st.columns(2)
with export_col1:
    results_text = engine.results_text()
    st.download_button(
        "📋 Download results summary",
        data=results_text,
        file_name="orsif_results.txt",
        mime="text/plain",
    )
    st.code(results_text, language=None)
with export_col2:
    st.markdown("**Share these assumptions**")
    st.code("?" + build_share_query(engine.inputs), language=None)
    st.download_button(
        "Download table (CSV)",
        data=table.to_csv(index=False),
        file_name="orsif_breakdown.csv",
        mime="text/csv",
    )
