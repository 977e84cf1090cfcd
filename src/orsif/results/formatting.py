"""Display formatting for currency, counts and percentages.

Single currency (USD) and en-US digit grouping. NaN values, such as a
percent change against a zero baseline, render as "n/a". Ties round half
away from zero ("$2,500" -> "$3K"), not to the even digit.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

NOT_AVAILABLE = "n/a"


def round_half_up(value: float, decimals: int = 0) -> Decimal:
    """Round to a fixed number of decimals, ties away from zero.

    The shortest repr of the float is rounded, so 2.675 becomes 2.68.
    """
    exact = Decimal(repr(value))
    if not exact.is_finite():
        return exact
    return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(value: float, symbol: str = "$") -> str:
    """Format a value as an abbreviated currency string.

    Magnitude buckets:
    - >= 1e9: billions, 2 decimals ("$1.50B")
    - >= 1e6: millions, 1 decimal ("$1.0M")
    - >= 1e3: thousands, no decimals ("$250K")
    - otherwise whole units ("$999")

    Negative values use the bucket of their magnitude with a leading
    minus ("-$1.2M").

    Args:
        value: The monetary value.
        symbol: Currency symbol (default $).

    Returns:
        Formatted currency string.
    """
    if math.isnan(value):
        return NOT_AVAILABLE
    if value < 0:
        return "-" + format_currency(-value, symbol)

    if value >= 1_000_000_000:
        return f"{symbol}{round_half_up(value / 1_000_000_000, 2)}B"
    elif value >= 1_000_000:
        return f"{symbol}{round_half_up(value / 1_000_000, 1)}M"
    elif value >= 1_000:
        return f"{symbol}{round_half_up(value / 1_000)}K"
    return f"{symbol}{round_half_up(value)}"


def format_number(value: float, decimals: int = 0) -> str:
    """Format a number with comma digit grouping (e.g. "32,838")."""
    if math.isnan(value):
        return NOT_AVAILABLE
    return f"{round_half_up(value, decimals):,.{decimals}f}"


def format_percent(value: float, decimals: int = 1, signed: bool = False) -> str:
    """Format a percentage value (already scaled by 100), e.g. "111.6%".

    Args:
        value: Percentage value.
        decimals: Decimal places.
        signed: Prefix non-negative values with "+".
    """
    if math.isnan(value):
        return NOT_AVAILABLE
    sign = "+" if signed and value >= 0 else ""
    return f"{sign}{round_half_up(value, decimals):.{decimals}f}%"
