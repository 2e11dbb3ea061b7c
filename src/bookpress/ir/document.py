"""Parsed manuscript model."""

import math
from dataclasses import dataclass, field
from typing import Literal, Optional

WORDS_PER_PAGE = 250

StyleType = Literal["paragraph", "character"]
Alignment = Literal["left", "center", "right", "justify"]


@dataclass(frozen=True)
class ParsedStyle:
    """A style detected (or assumed) in the source document."""

    name: str
    type: StyleType = "paragraph"
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    alignment: Optional[Alignment] = None


@dataclass
class ParsedChapter:
    """A chapter segmented out of the manuscript."""

    number: int
    title: str
    content: str = ""  # HTML fragment
    word_count: int = 0
    styles: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return f"chapter-{self.number}"


@dataclass
class ParsedDocument:
    """Output of the parsing stage."""

    title: str
    chapters: list[ParsedChapter] = field(default_factory=list)
    styles: list[ParsedStyle] = field(default_factory=list)
    raw_html: str = ""
    messages: list[str] = field(default_factory=list)  # converter warnings

    @property
    def total_word_count(self) -> int:
        return sum(chapter.word_count for chapter in self.chapters)

    @property
    def estimated_page_count(self) -> int:
        return estimate_page_count(self.total_word_count)


def estimate_page_count(word_count: int) -> int:
    """Estimate printed pages at a fixed words-per-page density."""
    return math.ceil(word_count / WORDS_PER_PAGE)
