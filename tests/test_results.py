"""Tests for formatting, table, chart and text projections."""

import math

import pandas as pd
import pytest

from orsif.model.calculator import calculate
from orsif.results.charts import get_chart_data
from orsif.results.export import format_results_text
from orsif.results.formatting import format_currency, format_number, format_percent
from orsif.results.tables import (
    CostCategory,
    StaffGroup,
    generate_table_data,
    table_to_dataframe,
)


class TestFormatCurrency:
    """Tests for magnitude-bucketed currency formatting."""

    @pytest.mark.parametrize("value, expected", [
        (1_000_000, "$1.0M"),
        (999, "$999"),
        (1_500_000_000, "$1.50B"),
        (1_000_000_000, "$1.00B"),
        (1_000, "$1K"),
        (250_000, "$250K"),
        (13_600_000, "$13.6M"),
        (106_286_371.78, "$106.3M"),
        (0, "$0"),
        (12.4, "$12"),
    ])
    def test_buckets(self, value, expected):
        assert format_currency(value) == expected

    def test_negative(self):
        assert format_currency(-1_200_000) == "-$1.2M"
        assert format_currency(-500) == "-$500"

    def test_nan(self):
        assert format_currency(math.nan) == "n/a"

    def test_custom_symbol(self):
        assert format_currency(2_500_000, symbol="£") == "£2.5M"

    @pytest.mark.parametrize("value, expected", [
        (2_500, "$3K"),
        (1_250_000, "$1.3M"),
        (0.5, "$1"),
        (2.5, "$3"),
    ])
    def test_ties_round_up(self, value, expected):
        """Exact ties round away from zero, not to the even digit."""
        assert format_currency(value) == expected

    def test_negative_tie(self):
        assert format_currency(-2_500) == "-$3K"


class TestFormatNumber:
    def test_grouping(self):
        assert format_number(32838) == "32,838"
        assert format_number(1_234_567.891, decimals=2) == "1,234,567.89"

    def test_rounding(self):
        assert format_number(4.6504, decimals=1) == "4.7"
        assert format_number(999.6) == "1,000"

    def test_ties_round_up(self):
        assert format_number(2.5) == "3"
        assert format_number(0.5) == "1"
        assert format_number(1_234.5) == "1,235"
        assert format_number(0.25, decimals=1) == "0.3"

    def test_nan(self):
        assert format_number(float("nan")) == "n/a"


class TestFormatPercent:
    def test_default(self):
        assert format_percent(111.597) == "111.6%"

    def test_signed(self):
        assert format_percent(9.4, decimals=0, signed=True) == "+9%"
        assert format_percent(-3.24, signed=True) == "-3.2%"
        assert format_percent(0, signed=True) == "+0.0%"

    def test_nan(self):
        assert format_percent(float("nan")) == "n/a"


class TestTableData:
    """Tests for the six-row results table."""

    def test_fixed_row_order(self, inputs_2025):
        rows = generate_table_data(inputs_2025)

        expected = [
            (CostCategory.FATAL_CANCER, StaffGroup.PHYSICIANS),
            (CostCategory.FATAL_CANCER, StaffGroup.SUPPORT),
            (CostCategory.NON_FATAL_CANCER, StaffGroup.PHYSICIANS),
            (CostCategory.NON_FATAL_CANCER, StaffGroup.SUPPORT),
            (CostCategory.MSD, StaffGroup.PHYSICIANS),
            (CostCategory.MSD, StaffGroup.SUPPORT),
        ]
        assert [(r.category, r.group) for r in rows] == expected

    def test_order_stable_across_presets(self, inputs_2018, inputs_2025):
        a = generate_table_data(inputs_2018)
        b = generate_table_data(inputs_2025)

        assert [(r.category, r.group) for r in a] == [(r.category, r.group) for r in b]

    def test_cost_per_case(self, inputs_2025):
        rows = generate_table_data(inputs_2025)

        assert [r.cost_per_case for r in rows] == [
            13_600_000, 13_600_000, 250_000, 250_000, 94_285, 47_316
        ]

    def test_row_totals(self, inputs_2025):
        rows = generate_table_data(inputs_2025)

        assert rows[0].cases == pytest.approx(2.3252)
        assert rows[0].total == pytest.approx(31_622_720)
        assert rows[5].total == pytest.approx(20_696_018.4)
        assert sum(r.total for r in rows) == pytest.approx(calculate(inputs_2025).grand_total)

    def test_labels(self):
        assert CostCategory.MSD.label == "Musculoskeletal Disorders"
        assert StaffGroup.SUPPORT.label == "Nurses and Techs"

    def test_dataframe(self, inputs_2025):
        df = table_to_dataframe(generate_table_data(inputs_2025))

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["category", "group", "cases", "cost_per_case", "total"]
        assert df.iloc[2]["category"] == "Non-Fatal Cancer"
        assert df.iloc[3]["group"] == "Nurses and Techs"


class TestChartData:
    """Tests for chart series."""

    def test_by_category(self, inputs_2025):
        result = calculate(inputs_2025)
        series = get_chart_data(result).by_category

        assert series.labels == ["Fatal Cancer", "Non-Fatal Cancer", "MSDs"]
        assert series.values == [
            result.cancer.total.fatal_cost,
            result.cancer.total.non_fatal_cost,
            result.msd.total.cost,
        ]
        assert series.colors == ["#c0392b", "#e74c3c", "#2980b9"]

    def test_by_group(self, inputs_2025):
        result = calculate(inputs_2025)
        series = get_chart_data(result).by_group

        assert series.labels == ["Physicians", "Support Staff"]
        assert series.values[0] == pytest.approx(
            result.cancer.physicians.total_cost + result.msd.physicians.cost
        )
        assert series.total == pytest.approx(result.grand_total)

    def test_breakdown_matches_result_breakdown(self, inputs_2025):
        result = calculate(inputs_2025)
        series = get_chart_data(result).breakdown

        assert len(series.labels) == len(series.values) == len(series.colors) == 6
        assert series.values == list(result.breakdown.to_dict().values())

    def test_colors_independent_of_values(self, inputs_2018, inputs_2025):
        a = get_chart_data(calculate(inputs_2018))
        b = get_chart_data(calculate(inputs_2025))

        assert a.breakdown.colors == b.breakdown.colors
        assert a.by_group.colors == b.by_group.colors

    def test_shares(self, inputs_2025):
        shares = get_chart_data(calculate(inputs_2025)).by_group.shares()
        assert sum(shares) == pytest.approx(100.0)

    def test_shares_zero_total(self, zero_inputs):
        assert get_chart_data(calculate(zero_inputs)).by_category.shares() == [0.0, 0.0, 0.0]


class TestResultsText:
    def test_layout(self, inputs_2025):
        result = calculate(inputs_2025)
        text = format_results_text(result, generate_table_data(inputs_2025, result))
        lines = text.splitlines()

        assert lines[0] == "ORSIF Economic Impact Study Results"
        assert lines[1] == "=" * 40
        assert "- Musculoskeletal Disorders (Nurses and Techs): $20.7M" in lines
        assert lines[-1] == "https://orsif.org"
