"""Intermediate representation module."""

from bookpress.ir.document import ParsedChapter, ParsedDocument, ParsedStyle
from bookpress.ir.styles import StyleMapping, generate_style_mappings

__all__ = [
    "ParsedChapter",
    "ParsedDocument",
    "ParsedStyle",
    "StyleMapping",
    "generate_style_mappings",
]
