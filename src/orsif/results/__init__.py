"""Results layer: formatting, table and chart projections, text export."""

from orsif.results.formatting import format_currency, format_number, format_percent
from orsif.results.tables import (
    CostCategory,
    StaffGroup,
    TableRow,
    generate_table_data,
    table_to_dataframe,
)
from orsif.results.charts import ChartBundle, ChartSeries, get_chart_data
from orsif.results.export import format_results_text

__all__ = [
    "format_currency",
    "format_number",
    "format_percent",
    "CostCategory",
    "StaffGroup",
    "TableRow",
    "generate_table_data",
    "table_to_dataframe",
    "ChartBundle",
    "ChartSeries",
    "get_chart_data",
    "format_results_text",
]
