"""Themes, trim sizes and cover geometry."""

from bookpress.typography.cover import calculate_cover_dimensions, calculate_spine_width, inches_to_mm
from bookpress.typography.themes import (
    BOOK_THEMES,
    TRIM_SIZES,
    BookTheme,
    TrimSize,
    lookup_theme,
    lookup_trim_size,
)

__all__ = [
    "BOOK_THEMES",
    "TRIM_SIZES",
    "BookTheme",
    "TrimSize",
    "calculate_cover_dimensions",
    "calculate_spine_width",
    "inches_to_mm",
    "lookup_theme",
    "lookup_trim_size",
]
