"""Unit conversion and number formatting."""

POINTS_PER_INCH = 72


def to_points(inches: float) -> float:
    return inches * POINTS_PER_INCH


def fmt_number(value: float) -> str:
    """Format a measurement without float noise or a trailing ".0"."""
    return f"{round(value, 3):g}"
