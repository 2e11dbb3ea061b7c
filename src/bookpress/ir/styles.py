"""Canonical style taxonomy and source-style mapping."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from bookpress.ir.document import ParsedStyle, StyleType

# Stand-in for real per-document style extraction: every manuscript is assumed
# to carry these nine styles until the parser reads styles.xml itself.
DEFAULT_STYLE_CATALOG: tuple[ParsedStyle, ...] = (
    ParsedStyle(name="Normal"),
    ParsedStyle(name="Heading 1", bold=True, font_size=24),
    ParsedStyle(name="Heading 2", bold=True, font_size=18),
    ParsedStyle(name="Heading 3", bold=True, font_size=14),
    ParsedStyle(name="Title", bold=True, font_size=28, alignment="center"),
    ParsedStyle(name="Subtitle", italic=True, font_size=16, alignment="center"),
    ParsedStyle(name="Body Text", font_size=12),
    ParsedStyle(name="First Paragraph", font_size=12),
    ParsedStyle(name="Block Quote", italic=True, font_size=11),
)

SOURCE_TO_TARGET_STYLE = MappingProxyType(
    {
        "Normal": "Body Text",
        "Heading 1": "Chapter Title",
        "Heading 2": "Section Heading",
        "Heading 3": "Subsection Heading",
        "Title": "Book Title",
        "Subtitle": "Book Subtitle",
        "Body Text": "Body Text",
        "First Paragraph": "First Paragraph (No Indent)",
        "Block Quote": "Block Quotation",
    }
)

CANONICAL_TARGET_STYLES = frozenset(SOURCE_TO_TARGET_STYLE.values())


@dataclass
class StyleMapping:
    """Mapping of one source style onto the book's style taxonomy."""

    source_style_name: str
    source_style_type: StyleType
    target_style_name: str
    is_auto_detected: bool = True
    is_accepted: Optional[bool] = None  # None until reviewed

    @property
    def is_canonical(self) -> bool:
        return is_canonical_target(self.target_style_name)


def is_canonical_target(name: str) -> bool:
    """Check whether a target style name belongs to the taxonomy."""
    return name in CANONICAL_TARGET_STYLES


def generate_style_mappings(styles: list[ParsedStyle]) -> list[StyleMapping]:
    """Map detected styles onto target styles, one mapping per source name.

    Unknown source styles map to themselves.
    """
    mappings: list[StyleMapping] = []
    seen: set[str] = set()

    for style in styles:
        if style.name in seen:
            continue
        seen.add(style.name)
        mappings.append(
            StyleMapping(
                source_style_name=style.name,
                source_style_type=style.type,
                target_style_name=SOURCE_TO_TARGET_STYLE.get(style.name, style.name),
            )
        )

    return mappings
