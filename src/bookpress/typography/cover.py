"""Spine and full-cover geometry."""

from typing import Literal

from pydantic import BaseModel

from bookpress.typography.themes import TrimSize

PaperType = Literal["white", "cream", "color"]

# Inches of spine per page
SPINE_MULTIPLIERS: dict[str, float] = {
    "white": 0.002252,
    "cream": 0.0025,
    "color": 0.002347,
}

MM_PER_INCH = 25.4


class CoverDimensions(BaseModel):
    """Flat cover layout in inches, x offsets measured from the left edge."""

    full_width: float
    full_height: float
    spine_width: float
    front_cover_x: float
    spine_x: float
    back_cover_x: float


def calculate_spine_width(page_count: int, paper_type: PaperType) -> float:
    """Spine thickness in inches for a page count on a paper stock."""
    if paper_type not in SPINE_MULTIPLIERS:
        raise ValueError(f"Unknown paper type: {paper_type}")
    return page_count * SPINE_MULTIPLIERS[paper_type]


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def calculate_cover_dimensions(
    trim_size: TrimSize,
    page_count: int,
    paper_type: PaperType,
    bleed: float = 0.125,
) -> CoverDimensions:
    """Lay out back cover, spine and front cover side by side with bleed."""
    spine_width = calculate_spine_width(page_count, paper_type)
    return CoverDimensions(
        full_width=trim_size.width * 2 + spine_width + bleed * 2,
        full_height=trim_size.height + bleed * 2,
        spine_width=spine_width,
        front_cover_x=trim_size.width + spine_width + bleed,
        spine_x=trim_size.width + bleed,
        back_cover_x=bleed,
    )
