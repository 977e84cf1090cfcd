"""Caption text for the calculator's input sliders."""

from orsif.results.formatting import format_currency, format_number, format_percent


def display_value(value: float, fmt: str) -> str:
    if fmt == "currency":
        return format_currency(value)
    if fmt == "percent":
        return format_percent(value * 100)
    if fmt == "years":
        return f"{value:g} years"
    return format_number(value)


def slider_caption(value: float, min_val: float, max_val: float, fmt: str) -> str:
    """Caption showing the engine's value, which a share link may push past the slider."""
    caption = display_value(value, fmt)
    if not min_val <= value <= max_val:
        caption += " (outside slider range)"
    return caption
