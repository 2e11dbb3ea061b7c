"""Tests for the Word parser and upload checks."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from docx import Document
from docx.enum.style import WD_STYLE_TYPE

from bookpress.config.models import StyleMapConfig
from bookpress.errors import ParseError, ValidationError
from bookpress.parser.docx_parser import DocxParser
from bookpress.parser.upload import ingest, validate_manuscript

# ---------------------------------------------------------------------------
# DocxParser
# ---------------------------------------------------------------------------


class TestDocxParser:
    """Test .docx to ParsedDocument conversion."""

    def test_chapters_from_heading_1(self, two_chapter_docx: bytes) -> None:
        document = DocxParser().parse(two_chapter_docx)
        assert [c.title for c in document.chapters] == ["Chapter 1", "Chapter 2"]
        assert document.chapters[0].word_count == 9
        assert document.chapters[1].word_count == 2
        assert document.total_word_count == 11

    def test_bold_run_becomes_strong(self, two_chapter_docx: bytes) -> None:
        document = DocxParser().parse(two_chapter_docx)
        chapter = document.chapters[0]
        assert "<p>The sea was <strong>restless</strong> that night.</p>" in chapter.content
        assert "Bold" in chapter.styles

    def test_parse_from_path(self, tmp_path: Path, two_chapter_docx: bytes) -> None:
        path = tmp_path / "book.docx"
        path.write_bytes(two_chapter_docx)
        document = DocxParser().parse(path)
        assert len(document.chapters) == 2

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            DocxParser().parse(tmp_path / "nope.docx")

    def test_title_style(self) -> None:
        doc = Document()
        doc.add_heading("The Lighthouse Keeper", level=0)
        doc.add_heading("Chapter 1", level=1)
        doc.add_paragraph("Waves.")
        buffer = io.BytesIO()
        doc.save(buffer)

        document = DocxParser().parse(buffer.getvalue())
        assert document.title == "The Lighthouse Keeper"
        assert '<h1 class="title">The Lighthouse Keeper</h1>' in document.raw_html

    def test_quote_and_list_containers(self, make_docx: Callable[..., bytes]) -> None:
        data = make_docx(
            ("Quote", "To be or not to be."),
            ("List Bullet", "one"),
            ("List Bullet", "two"),
            ("List Number", "first"),
            (None, "After."),
        )
        raw = DocxParser().parse(data).raw_html
        assert "<blockquote><p>To be or not to be.</p></blockquote>" in raw
        assert "<ul><li>one</li><li>two</li></ul>" in raw
        assert "<ol><li>first</li></ol>" in raw
        assert raw.endswith("<p>After.</p>")

    def test_subheadings(self, make_docx: Callable[..., bytes]) -> None:
        data = make_docx(("Heading 1", "Chapter 1"), ("Heading 2", "A Section"), (None, "Body."))
        chapter = DocxParser().parse(data).chapters[0]
        assert "<h2>A Section</h2>" in chapter.content
        assert "Heading 2" in chapter.styles

    def test_text_is_escaped(self, make_docx: Callable[..., bytes]) -> None:
        raw = DocxParser().parse(make_docx((None, "Fish & <chips>"))).raw_html
        assert "<p>Fish &amp; &lt;chips&gt;</p>" in raw

    def test_empty_paragraphs_dropped(self, make_docx: Callable[..., bytes]) -> None:
        raw = DocxParser().parse(make_docx((None, "   "), (None, "Kept."))).raw_html
        assert raw == "<p>Kept.</p>"

    def test_table(self) -> None:
        doc = Document()
        table = doc.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "a"
        table.cell(0, 1).text = "b"
        buffer = io.BytesIO()
        doc.save(buffer)

        raw = DocxParser().parse(buffer.getvalue()).raw_html
        assert "<table><tr><td><p>a</p></td><td><p>b</p></td></tr></table>" in raw

    def test_unrecognised_style_reported_once(self) -> None:
        doc = Document()
        doc.styles.add_style("Fancy", WD_STYLE_TYPE.PARAGRAPH)
        doc.add_paragraph("First.", style="Fancy")
        doc.add_paragraph("Second.", style="Fancy")
        buffer = io.BytesIO()
        doc.save(buffer)

        document = DocxParser().parse(buffer.getvalue())
        assert document.messages.count("Unrecognised paragraph style: 'Fancy'") == 1
        assert "<p>First.</p><p>Second.</p>" in document.raw_html

    def test_custom_style_map(self, make_docx: Callable[..., bytes]) -> None:
        style_map = StyleMapConfig(heading_styles={"Heading 2": 1})
        data = make_docx(("Heading 2", "Part One"), (None, "Text."))
        document = DocxParser(style_map).parse(data)
        assert document.chapters[0].title == "Part One"

    def test_messages_reset_between_parses(self) -> None:
        doc = Document()
        doc.styles.add_style("Fancy", WD_STYLE_TYPE.PARAGRAPH)
        doc.add_paragraph("Text.", style="Fancy")
        buffer = io.BytesIO()
        doc.save(buffer)

        parser = DocxParser()
        parser.parse(buffer.getvalue())
        second = parser.parse(buffer.getvalue())
        assert len(second.messages) == 1

    @pytest.mark.parametrize("data", [b"not a docx", b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1legacy"])
    def test_garbage_raises_parse_error(self, data: bytes) -> None:
        with pytest.raises(ParseError):
            DocxParser().parse(data)


# ---------------------------------------------------------------------------
# Upload validation
# ---------------------------------------------------------------------------


class TestValidateManuscript:
    """Test pre-parse upload checks."""

    def test_accepts_docx(self, two_chapter_docx: bytes) -> None:
        validate_manuscript(two_chapter_docx, "Book.DOCX")

    def test_rejects_extension(self) -> None:
        with pytest.raises(ValidationError, match="Word document"):
            validate_manuscript(b"PK...", "book.pdf")

    def test_rejects_size(self) -> None:
        with pytest.raises(ValidationError, match="less than"):
            validate_manuscript(b"PK" + b"x" * 100, "book.docx", max_bytes=10)

    def test_rejects_non_zip_docx(self) -> None:
        with pytest.raises(ValidationError, match="Invalid DOCX"):
            validate_manuscript(b"hello", "book.docx")

    def test_legacy_doc_skips_magic_check(self) -> None:
        validate_manuscript(b"\xd0\xcf\x11\xe0", "book.doc")


class TestIngest:
    """Test the validate, parse and map entry point."""

    def test_ingest(self, two_chapter_docx: bytes) -> None:
        document, mappings = ingest(two_chapter_docx, "book.docx")
        assert len(document.chapters) == 2
        assert len(mappings) == 9
        assert mappings[0].source_style_name == "Normal"
        assert mappings[0].target_style_name == "Body Text"

    def test_ingest_rejects_before_parsing(self) -> None:
        with pytest.raises(ValidationError):
            ingest(b"garbage", "book.docx")
