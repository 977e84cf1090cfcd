"""Plain-text results summary for the "copy results" action."""

from typing import List

from orsif.model.calculator import CalculationResult
from orsif.results.formatting import format_currency
from orsif.results.tables import TableRow

TITLE = "ORSIF Economic Impact Study Results"
FOOTER = "Generated by ORSIF Economic Impact Calculator\nhttps://orsif.org"


def format_results_text(result: CalculationResult, rows: List[TableRow]) -> str:
    """Render the grand total and per-row breakdown as plain text."""
    lines = [
        TITLE,
        "=" * 40,
        "",
        f"Total Annual Economic Cost: {format_currency(result.grand_total)}",
        "",
        "Breakdown:",
    ]
    for row in rows:
        lines.append(
            f"- {row.category.label} ({row.group.label}): {format_currency(row.total)}"
        )
    lines.append("")
    lines.append(FOOTER)
    return "\n".join(lines)
