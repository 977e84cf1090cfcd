"""Plotly figure builders for the calculator and comparison pages.

Each builder takes engine output and returns a go.Figure; pages only call
st.plotly_chart on the result.
"""

from typing import List

import plotly.graph_objects as go

from orsif.experiment.comparison import ComparisonResult
from orsif.experiment.sensitivity import SensitivityPoint
from orsif.results.charts import CATEGORY_LABELS, ChartSeries, get_chart_data
from orsif.results.formatting import format_currency

BASELINE_COLOR = "rgba(127, 140, 141, 0.7)"
CURRENT_COLOR = "rgba(13, 77, 95, 0.7)"
SENSITIVITY_LINE_COLOR = "#0d4d5f"
SENSITIVITY_FILL_COLOR = "rgba(13, 77, 95, 0.1)"


def category_bar_chart(series: ChartSeries) -> go.Figure:
    """Annual cost by category."""
    fig = go.Figure(go.Bar(
        x=series.labels,
        y=series.values,
        marker_color=series.colors,
        text=[format_currency(v) for v in series.values],
        textposition="outside",
        name="Annual Cost",
    ))
    fig.update_layout(
        showlegend=False,
        yaxis_title="Annual Cost (USD)",
        yaxis_rangemode="tozero",
    )
    return fig


def group_donut_chart(series: ChartSeries) -> go.Figure:
    """Share of annual cost by staff group."""
    fig = go.Figure(go.Pie(
        labels=series.labels,
        values=series.values,
        marker=dict(colors=series.colors),
        hole=0.5,
        customdata=[format_currency(v) for v in series.values],
        hovertemplate="%{label}: %{customdata} (%{percent})<extra></extra>",
        sort=False,
    ))
    return fig


def sensitivity_line_chart(points: List[SensitivityPoint]) -> go.Figure:
    """Grand total across the VSL sweep."""
    fig = go.Figure(go.Scatter(
        x=[format_currency(p.value) for p in points],
        y=[p.grand_total for p in points],
        mode="lines+markers",
        line=dict(color=SENSITIVITY_LINE_COLOR, shape="spline"),
        fill="tozeroy",
        fillcolor=SENSITIVITY_FILL_COLOR,
        name="Total Annual Cost",
    ))
    fig.update_layout(
        title="Impact of VSL on Total Economic Cost",
        xaxis_title="Value of Statistical Life (VSL)",
        yaxis_title="Total Annual Cost",
    )
    return fig


def comparison_bar_chart(
    comparison: ComparisonResult,
    baseline_label: str = "2018",
    current_label: str = "2025",
) -> go.Figure:
    """Grouped bars of category costs, baseline against current."""
    baseline = get_chart_data(comparison.baseline).by_category
    current = get_chart_data(comparison.current).by_category

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=CATEGORY_LABELS,
        y=baseline.values,
        name=baseline_label,
        marker_color=BASELINE_COLOR,
    ))
    fig.add_trace(go.Bar(
        x=CATEGORY_LABELS,
        y=current.values,
        name=current_label,
        marker_color=CURRENT_COLOR,
    ))
    fig.update_layout(barmode="group", yaxis_rangemode="tozero")
    return fig
