"""Typesetting theme and trim size registries."""

import logging
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_THEME_ID = "classic-fiction"
DEFAULT_TRIM_SIZE = "6x9"


class Margins(BaseModel):
    """Page margins in inches."""

    model_config = ConfigDict(frozen=True)

    top: float
    bottom: float
    inner: float  # Gutter for binding
    outer: float


class ChapterStyle(BaseModel):
    """How chapters open."""

    model_config = ConfigDict(frozen=True)

    title_alignment: Literal["left", "center", "right"] = "center"
    drop_cap: bool = False
    drop_cap_lines: int = 0
    chapter_start_page: Literal["recto", "any"] = "any"


class BookTheme(BaseModel):
    """A named set of typesetting rules."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    font_family: str  # CSS font stack
    title_font_family: str
    font_size: float  # pt
    line_height: float  # ratio
    margins: Margins
    chapter_style: ChapterStyle

    @property
    def primary_font(self) -> str:
        return primary_family(self.font_family)

    @property
    def primary_title_font(self) -> str:
        return primary_family(self.title_font_family)


class TrimSize(BaseModel):
    """Final page dimensions in inches."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float


def primary_family(font_stack: str) -> str:
    """First family of a CSS font stack, unquoted."""
    return font_stack.split(",")[0].replace("'", "").replace('"', "").strip()


BOOK_THEMES = MappingProxyType(
    {
        "classic-fiction": BookTheme(
            id="classic-fiction",
            name="Classic Fiction",
            font_family="Georgia, 'Times New Roman', serif",
            title_font_family="Georgia, serif",
            font_size=11,
            line_height=1.5,
            margins=Margins(top=0.75, bottom=0.75, inner=0.875, outer=0.625),
            chapter_style=ChapterStyle(
                title_alignment="center",
                drop_cap=True,
                drop_cap_lines=3,
                chapter_start_page="recto",
            ),
        ),
        "modern-business": BookTheme(
            id="modern-business",
            name="Modern Business",
            font_family="'Helvetica Neue', Arial, sans-serif",
            title_font_family="'Helvetica Neue', Arial, sans-serif",
            font_size=10,
            line_height=1.4,
            margins=Margins(top=0.75, bottom=0.75, inner=0.75, outer=0.75),
            chapter_style=ChapterStyle(
                title_alignment="left",
                drop_cap=False,
                drop_cap_lines=0,
                chapter_start_page="any",
            ),
        ),
        "academic": BookTheme(
            id="academic",
            name="Academic",
            font_family="'Times New Roman', Times, serif",
            title_font_family="'Times New Roman', Times, serif",
            font_size=12,
            line_height=2.0,
            margins=Margins(top=1.0, bottom=1.0, inner=1.25, outer=1.0),
            chapter_style=ChapterStyle(
                title_alignment="center",
                drop_cap=False,
                drop_cap_lines=0,
                chapter_start_page="recto",
            ),
        ),
    }
)

# Standard paperback trim sizes
TRIM_SIZES = MappingProxyType(
    {
        "5x8": TrimSize(width=5, height=8),
        "5.25x8": TrimSize(width=5.25, height=8),
        "5.5x8.5": TrimSize(width=5.5, height=8.5),
        "6x9": TrimSize(width=6, height=9),
        "6.14x9.21": TrimSize(width=6.14, height=9.21),
        "6.69x9.61": TrimSize(width=6.69, height=9.61),
        "7x10": TrimSize(width=7, height=10),
        "7.5x9.25": TrimSize(width=7.5, height=9.25),
        "8x10": TrimSize(width=8, height=10),
        "8.5x11": TrimSize(width=8.5, height=11),
    }
)


def lookup_theme(theme_id: str) -> BookTheme:
    """Return the theme for an id, falling back to Classic Fiction."""
    theme = BOOK_THEMES.get(theme_id)
    if theme is None:
        logger.debug("Unknown theme %r, using %s", theme_id, DEFAULT_THEME_ID)
        return BOOK_THEMES[DEFAULT_THEME_ID]
    return theme


def lookup_trim_size(key: str) -> TrimSize:
    """Return the trim size for a key such as "6x9", falling back to 6x9."""
    trim_size = TRIM_SIZES.get(key)
    if trim_size is None:
        logger.debug("Unknown trim size %r, using %s", key, DEFAULT_TRIM_SIZE)
        return TRIM_SIZES[DEFAULT_TRIM_SIZE]
    return trim_size
