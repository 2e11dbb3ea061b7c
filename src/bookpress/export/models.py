"""Export contract models."""

from typing import Optional

from pydantic import BaseModel, Field

from bookpress.ir.document import ParsedChapter
from bookpress.typography.themes import BookTheme, TrimSize, lookup_theme, lookup_trim_size


class CopyrightPage(BaseModel):
    """Optional copyright page content; unset fields are left off the page."""

    isbn: Optional[str] = None
    publisher_name: Optional[str] = None
    publish_year: Optional[int] = None
    copyright_holder: Optional[str] = None
    legal_text: Optional[str] = None
    additional_credits: Optional[str] = None


class ExportChapter(BaseModel):
    """The part of a chapter the generators need."""

    number: int = Field(ge=1)
    title: str
    content: str = ""

    @classmethod
    def from_parsed(cls, chapter: ParsedChapter) -> "ExportChapter":
        return cls(number=chapter.number, title=chapter.title, content=chapter.content)


class ExportInput(BaseModel):
    """Everything both generators need for one project."""

    project_id: str
    title: str
    author: Optional[str] = None
    theme: BookTheme
    trim_size: TrimSize
    chapters: list[ExportChapter] = Field(default_factory=list)
    copyright_page: Optional[CopyrightPage] = None

    @classmethod
    def build(
        cls,
        project_id: str | int,
        title: str,
        chapters: list[ExportChapter] | list[ParsedChapter],
        theme_id: str = "classic-fiction",
        trim_size_key: str = "6x9",
        author: Optional[str] = None,
        copyright_page: Optional[CopyrightPage] = None,
    ) -> "ExportInput":
        """Resolve theme and trim size keys, falling back to the defaults."""
        return cls(
            project_id=str(project_id),
            title=title,
            author=author,
            theme=lookup_theme(theme_id),
            trim_size=lookup_trim_size(trim_size_key),
            chapters=[
                ExportChapter.from_parsed(ch) if isinstance(ch, ParsedChapter) else ch
                for ch in chapters
            ],
            copyright_page=copyright_page,
        )


class ExportResult(BaseModel):
    """URLs of whichever artifacts were produced."""

    pdf_url: Optional[str] = None
    idml_url: Optional[str] = None
    html_url: Optional[str] = None


class PdfExport(BaseModel):
    """Result of the print export; pdf_url stays empty until a renderer exists."""

    html_url: str
    pdf_url: Optional[str] = None
