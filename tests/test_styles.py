"""Tests for style mapping."""

from __future__ import annotations

from bookpress.ir.document import ParsedStyle
from bookpress.ir.styles import (
    DEFAULT_STYLE_CATALOG,
    SOURCE_TO_TARGET_STYLE,
    generate_style_mappings,
    is_canonical_target,
)


class TestGenerateStyleMappings:
    """Test automatic source-to-target style mapping."""

    def test_catalog_maps_completely(self) -> None:
        mappings = generate_style_mappings(list(DEFAULT_STYLE_CATALOG))
        assert len(mappings) == len(DEFAULT_STYLE_CATALOG)
        assert {m.source_style_name: m.target_style_name for m in mappings} == dict(SOURCE_TO_TARGET_STYLE)
        assert all(m.is_canonical for m in mappings)

    def test_known_targets(self) -> None:
        mappings = generate_style_mappings([ParsedStyle(name="Heading 1"), ParsedStyle(name="First Paragraph")])
        assert [m.target_style_name for m in mappings] == ["Chapter Title", "First Paragraph (No Indent)"]

    def test_unknown_style_maps_to_itself(self) -> None:
        (mapping,) = generate_style_mappings([ParsedStyle(name="Epigraph", type="character")])
        assert mapping.target_style_name == "Epigraph"
        assert mapping.source_style_type == "character"
        assert not mapping.is_canonical

    def test_review_defaults(self) -> None:
        (mapping,) = generate_style_mappings([ParsedStyle(name="Normal")])
        assert mapping.is_auto_detected is True
        assert mapping.is_accepted is None

    def test_order_preserved_and_deduplicated(self) -> None:
        styles = [ParsedStyle(name="Title"), ParsedStyle(name="Normal"), ParsedStyle(name="Title", bold=True)]
        mappings = generate_style_mappings(styles)
        assert [m.source_style_name for m in mappings] == ["Title", "Normal"]

    def test_empty(self) -> None:
        assert generate_style_mappings([]) == []


class TestCanonicalTargets:
    """Test the canonical target set."""

    def test_membership(self) -> None:
        assert is_canonical_target("Block Quotation")
        assert is_canonical_target("Book Subtitle")
        assert not is_canonical_target("Block Quote")
