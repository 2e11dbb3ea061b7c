"""Tests for themes, trim sizes and cover geometry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bookpress.typography.cover import (
    calculate_cover_dimensions,
    calculate_spine_width,
    inches_to_mm,
)
from bookpress.typography.themes import (
    BOOK_THEMES,
    TRIM_SIZES,
    lookup_theme,
    lookup_trim_size,
    primary_family,
)
from bookpress.typography.units import fmt_number, to_points

# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------


class TestThemes:
    """Test the theme registry."""

    def test_registry_ids(self) -> None:
        assert set(BOOK_THEMES) == {"classic-fiction", "modern-business", "academic"}

    def test_classic_fiction(self) -> None:
        theme = lookup_theme("classic-fiction")
        assert theme.font_size == 11
        assert theme.chapter_style.drop_cap is True
        assert theme.chapter_style.drop_cap_lines == 3
        assert theme.chapter_style.chapter_start_page == "recto"
        assert theme.margins.inner == 0.875

    def test_unknown_theme_falls_back(self) -> None:
        assert lookup_theme("nope") is BOOK_THEMES["classic-fiction"]
        assert lookup_theme("") is BOOK_THEMES["classic-fiction"]

    def test_primary_fonts(self) -> None:
        assert BOOK_THEMES["modern-business"].primary_font == "Helvetica Neue"
        assert BOOK_THEMES["academic"].primary_title_font == "Times New Roman"

    def test_primary_family(self) -> None:
        assert primary_family("'Playfair Display', serif") == "Playfair Display"
        assert primary_family("Georgia") == "Georgia"

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            BOOK_THEMES["custom"] = BOOK_THEMES["academic"]  # type: ignore[index]

    def test_theme_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            BOOK_THEMES["academic"].font_size = 14  # type: ignore[misc]


class TestTrimSizes:
    """Test the trim size registry."""

    def test_keys(self) -> None:
        assert list(TRIM_SIZES) == [
            "5x8",
            "5.25x8",
            "5.5x8.5",
            "6x9",
            "6.14x9.21",
            "6.69x9.61",
            "7x10",
            "7.5x9.25",
            "8x10",
            "8.5x11",
        ]

    def test_lookup(self) -> None:
        size = lookup_trim_size("5.5x8.5")
        assert (size.width, size.height) == (5.5, 8.5)

    def test_unknown_falls_back_to_6x9(self) -> None:
        size = lookup_trim_size("4x6")
        assert (size.width, size.height) == (6, 9)


# ---------------------------------------------------------------------------
# Cover geometry
# ---------------------------------------------------------------------------


class TestSpine:
    """Test spine width calculation."""

    def test_white(self) -> None:
        assert calculate_spine_width(200, "white") == pytest.approx(0.4504)

    def test_cream(self) -> None:
        assert calculate_spine_width(200, "cream") == 0.5

    def test_color(self) -> None:
        assert calculate_spine_width(300, "color") == pytest.approx(0.7041)

    def test_unknown_paper(self) -> None:
        with pytest.raises(ValueError, match="paper"):
            calculate_spine_width(100, "glossy")  # type: ignore[arg-type]

    def test_inches_to_mm(self) -> None:
        assert inches_to_mm(0.5) == pytest.approx(12.7)


class TestCoverDimensions:
    """Test full cover layout."""

    def test_6x9_cream(self) -> None:
        cover = calculate_cover_dimensions(TRIM_SIZES["6x9"], 200, "cream")
        assert cover.spine_width == pytest.approx(0.5)
        assert cover.full_width == pytest.approx(12.75)
        assert cover.full_height == pytest.approx(9.25)
        assert cover.back_cover_x == pytest.approx(0.125)
        assert cover.spine_x == pytest.approx(6.125)
        assert cover.front_cover_x == pytest.approx(6.625)

    def test_no_bleed(self) -> None:
        cover = calculate_cover_dimensions(TRIM_SIZES["5x8"], 100, "white", bleed=0)
        assert cover.back_cover_x == 0
        assert cover.full_height == 8


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------


class TestUnits:
    """Test unit conversion helpers."""

    def test_to_points(self) -> None:
        assert to_points(6) == 432

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(432.0, "432"), (442.08, "442.08"), (0.1 + 0.2, "0.3"), (33.0, "33"), (16.5, "16.5")],
    )
    def test_fmt_number(self, value: float, expected: str) -> None:
        assert fmt_number(value) == expected
