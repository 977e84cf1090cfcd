"""Tests for Streamlit page components (findings cards, Plotly figures)."""

import sys
from pathlib import Path

import plotly.graph_objects as go
import pytest

# Add app directory to path
app_dir = Path(__file__).parent.parent / "app"
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from orsif.engine import EconomicCalculator


class TestKeyFindings:
    """Tests for home page key findings."""

    def test_findings_2018_to_2025(self, inputs_2018, inputs_2025):
        from components.findings import key_findings

        findings = {f.key: f for f in key_findings(inputs_2018, inputs_2025)}

        assert findings["vsl-value"].value == "$13.6M"
        assert findings["vsl-value"].comparison == "+51% from $9.0M"
        assert findings["msd-physician"].value == "$94,285"
        assert findings["msd-physician"].comparison == "+110% from $45,000"
        assert findings["workforce"].value == "35,926"
        assert findings["workforce"].comparison == "+9% from 32,838"
        assert findings["msd-prevalence"].value == "66%"
        assert findings["msd-prevalence"].comparison == "+13 pts from 53%"

    def test_four_cards(self, inputs_2018, inputs_2025):
        from components.findings import key_findings

        assert len(key_findings(inputs_2018, inputs_2025)) == 4


class TestChartFigures:
    """Tests for Plotly figure builders."""

    @pytest.fixture
    def engine(self):
        return EconomicCalculator()

    def test_category_bar(self, engine):
        from components.charts import category_bar_chart

        series = engine.get_chart_data().by_category
        fig = category_bar_chart(series)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert list(fig.data[0].x) == series.labels

    def test_group_donut(self, engine):
        from components.charts import group_donut_chart

        fig = group_donut_chart(engine.get_chart_data().by_group)

        assert fig.data[0].type == "pie"
        assert list(fig.data[0].labels) == ["Physicians", "Support Staff"]

    def test_sensitivity_line(self, engine):
        from components.charts import sensitivity_line_chart

        fig = sensitivity_line_chart(engine.get_vsl_sensitivity())

        assert len(fig.data[0].y) == 7
        assert fig.data[0].x[0] == "$6.3M"

    def test_comparison_bars(self, engine):
        from components.charts import comparison_bar_chart

        fig = comparison_bar_chart(engine.compare_to_baseline())

        assert [trace.name for trace in fig.data] == ["2018", "2025"]
        assert fig.layout.barmode == "group"


class TestSliderCaption:
    """Tests for calculator slider captions."""

    def test_in_range_value(self):
        from components.sliders import slider_caption

        assert slider_caption(13_600_000, 1_000_000, 25_000_000, "currency") == "$13.6M"

    def test_share_link_value_beyond_range(self):
        """The caption reports the engine's value, not the clamped slider position."""
        from components.sliders import slider_caption

        engine = EconomicCalculator()
        engine.update_input("vsl", "50000000")

        caption = slider_caption(engine.inputs.vsl, 1_000_000, 25_000_000, "currency")
        assert caption == "$50.0M (outside slider range)"

    def test_formats(self):
        from components.sliders import display_value

        assert display_value(0.012, "percent") == "1.2%"
        assert display_value(25, "years") == "25 years"
        assert display_value(13_000, "number") == "13,000"
