"""Word document parser."""

import html
import io
import logging
import zipfile
from itertools import groupby
from pathlib import Path
from typing import Iterator, Optional

from docx import Document as DocxDocument
from docx.document import Document as DocxDocumentType
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table
from docx.text.hyperlink import Hyperlink
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from bookpress.config.models import StyleMapConfig
from bookpress.errors import ParseError
from bookpress.ir.document import ParsedDocument
from bookpress.ir.styles import DEFAULT_STYLE_CATALOG
from bookpress.parser.segmentation import parse_html

logger = logging.getLogger(__name__)

# (bold, italic, underline, superscript, subscript, strike)
RunFormat = tuple[bool, bool, bool, bool, bool, bool]


class DocxParser:
    """Parse Word documents into a ParsedDocument."""

    def __init__(self, style_map: Optional[StyleMapConfig] = None):
        self.style_map = style_map or StyleMapConfig()
        self.messages: list[str] = []
        self._warned_styles: set[str] = set()

    def parse(self, source: bytes | str | Path) -> ParsedDocument:
        """Parse .docx bytes or a .docx file path."""
        self.messages = []
        self._warned_styles = set()

        docx = self._open(source)
        raw_html = self.convert_to_html(docx)
        document = parse_html(raw_html, styles=list(DEFAULT_STYLE_CATALOG), messages=self.messages)

        logger.info(
            "Parsed %r: %d chapters, %d words",
            document.title,
            len(document.chapters),
            document.total_word_count,
        )
        return document

    def _open(self, source: bytes | str | Path) -> DocxDocumentType:
        if isinstance(source, (str, Path)):
            file_path = Path(source)
            if not file_path.exists():
                raise FileNotFoundError(f"File not found: {file_path}")
            stream = io.BytesIO(file_path.read_bytes())
        else:
            stream = io.BytesIO(source)

        try:
            return DocxDocument(stream)
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
            raise ParseError(f"Not a readable Word document: {exc}") from exc

    def convert_to_html(self, docx: DocxDocumentType) -> str:
        """Convert the document body to HTML, mapping paragraph styles to tags."""
        blocks: list[str] = []
        open_container: Optional[str] = None

        for element in docx.element.body:
            if element.tag.endswith("}p"):
                para = Paragraph(element, docx)
                converted = self._convert_paragraph(para)
                if converted is None:
                    continue
                container, block = converted
            elif element.tag.endswith("}tbl"):
                container, block = None, self._convert_table(Table(element, docx))
            else:
                continue

            if container != open_container:
                if open_container:
                    blocks.append(f"</{open_container}>")
                if container:
                    blocks.append(f"<{container}>")
                open_container = container
            blocks.append(block)

        if open_container:
            blocks.append(f"</{open_container}>")

        return "".join(blocks)

    def _convert_paragraph(self, para: Paragraph) -> Optional[tuple[Optional[str], str]]:
        """Return (container tag, block html) or None for empty paragraphs."""
        if not para.text.strip():
            return None
        inner = self._convert_inline(para)

        style_name = para.style.name if para.style is not None else "Normal"
        mapping = self.style_map

        level = mapping.heading_level(style_name)
        if level:
            return None, f"<h{level}>{inner}</h{level}>"
        if mapping.is_title(style_name):
            return None, f'<h1 class="title">{inner}</h1>'
        if mapping.is_subtitle(style_name):
            return None, f'<h2 class="subtitle">{inner}</h2>'
        if mapping.is_blockquote(style_name):
            return "blockquote", f"<p>{inner}</p>"
        if mapping.is_list(style_name):
            container = "ol" if mapping.is_ordered_list(style_name) else "ul"
            return container, f"<li>{inner}</li>"

        if not mapping.is_body(style_name):
            self._warn_unrecognised(style_name)
        return None, f"<p>{inner}</p>"

    def _convert_inline(self, para: Paragraph) -> str:
        parts: list[str] = []
        for item in para.iter_inner_content():
            if isinstance(item, Hyperlink):
                inner = self._convert_runs(item.runs)
                url = item.url
                parts.append(f'<a href="{html.escape(url)}">{inner}</a>' if url else inner)
            else:
                parts.append(self._convert_runs([item]))
        return "".join(parts)

    def _convert_runs(self, runs: list[Run]) -> str:
        """Convert runs to inline HTML, merging neighbours with equal formatting."""
        out: list[str] = []
        for fmt, group in groupby(self._text_runs(runs), key=lambda pair: pair[0]):
            text = "".join(run_text for _, run_text in group)
            out.append(self._wrap(fmt, text))
        return "".join(out)

    def _text_runs(self, runs: list[Run]) -> Iterator[tuple[RunFormat, str]]:
        for run in runs:
            if not run.text:
                continue
            font = run.font
            fmt: RunFormat = (
                bool(run.bold),
                bool(run.italic),
                bool(run.underline),
                bool(font.superscript),
                bool(font.subscript),
                bool(font.strike),
            )
            yield fmt, run.text

    def _wrap(self, fmt: RunFormat, text: str) -> str:
        bold, italic, underline, superscript, subscript, strike = fmt
        node = html.escape(text, quote=False).replace("\n", "<br />")

        # Innermost first
        if underline:
            node = f"<u>{node}</u>"
        if italic:
            node = f"<em>{node}</em>"
        if bold:
            node = f"<strong>{node}</strong>"
        if strike:
            node = f"<s>{node}</s>"
        if superscript:
            node = f"<sup>{node}</sup>"
        if subscript:
            node = f"<sub>{node}</sub>"
        return node

    def _convert_table(self, table: Table) -> str:
        rows: list[str] = []
        for row in table.rows:
            cells: list[str] = []
            for cell in row.cells:
                paragraphs = [
                    f"<p>{self._convert_inline(para)}</p>"
                    for para in cell.paragraphs
                    if para.text.strip()
                ]
                cells.append(f"<td>{''.join(paragraphs)}</td>")
            rows.append(f"<tr>{''.join(cells)}</tr>")
        return f"<table>{''.join(rows)}</table>"

    def _warn_unrecognised(self, style_name: str) -> None:
        if style_name in self._warned_styles:
            return
        self._warned_styles.add(style_name)
        message = f"Unrecognised paragraph style: '{style_name}'"
        self.messages.append(message)
        logger.warning(message)
