"""Shared fixtures for the bookpress test suite."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest
from docx import Document

from bookpress.export.models import CopyrightPage, ExportChapter, ExportInput


def _save(document) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture()
def two_chapter_docx() -> bytes:
    """A manuscript with two Heading 1 chapters and some inline formatting."""
    document = Document()
    document.add_heading("Chapter 1", level=1)
    paragraph = document.add_paragraph("The sea was ")
    paragraph.add_run("restless").bold = True
    paragraph.add_run(" that night.")
    document.add_paragraph("A second paragraph.")
    document.add_heading("Chapter 2", level=1)
    document.add_paragraph("Morning came.")
    return _save(document)


@pytest.fixture()
def make_docx() -> Callable[..., bytes]:
    """Build a .docx from (style, text) pairs; style None means Normal."""

    def build(*blocks: tuple[str | None, str]) -> bytes:
        document = Document()
        for style, text in blocks:
            if style is None:
                document.add_paragraph(text)
            else:
                document.add_paragraph(text, style=style)
        return _save(document)

    return build


@pytest.fixture()
def chapters() -> list[ExportChapter]:
    return [
        ExportChapter(
            number=1,
            title="The Storm",
            content="<p>Rain fell <strong>hard</strong> on the roof.</p><p>Nobody slept.</p>",
        ),
        ExportChapter(number=2, title="Morning", content="<p>The sky cleared.</p>"),
    ]


@pytest.fixture()
def export_input(chapters: list[ExportChapter]) -> ExportInput:
    return ExportInput.build(
        project_id="proj-1",
        title="My Book",
        chapters=chapters,
        theme_id="classic-fiction",
        trim_size_key="6x9",
        copyright_page=CopyrightPage(copyright_holder="Jane Doe", publish_year=2024),
    )


class RecordingStore:
    """In-memory artifact store that remembers every put."""

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put(self, key: str, data: bytes, content_type: str) -> str:
        self.objects[key] = (data, content_type)
        return f"memory://{key}"


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()
