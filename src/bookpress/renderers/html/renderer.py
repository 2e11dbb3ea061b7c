"""Print-styled HTML renderer for external PDF engines."""

import html
import re
from typing import Optional

from pydantic import BaseModel, Field

from bookpress.export.models import CopyrightPage, ExportChapter, ExportInput
from bookpress.renderers.base import BaseRenderer
from bookpress.typography.themes import BookTheme, TrimSize
from bookpress.typography.units import fmt_number, to_points

_FIRST_PARAGRAPH = re.compile(r"<p>")


class HtmlOptions(BaseModel):
    """Page setup for the HTML typesetting pass."""

    theme: BookTheme
    trim_size: TrimSize
    include_bleed: bool = True
    bleed_size: float = Field(default=0.125, ge=0)  # inches
    document_title: Optional[str] = None


def generate_book_html(
    chapters: list[ExportChapter],
    copyright_page: Optional[CopyrightPage],
    options: HtmlOptions,
) -> str:
    """Render chapters and an optional copyright page as one HTML document."""
    css = _generate_print_css(options, with_copyright_page=copyright_page is not None)
    copyright_html = _render_copyright_page(copyright_page) if copyright_page else ""
    chapters_html = "\n".join(_render_chapter(chapter) for chapter in chapters)
    title_html = (
        f"<title>{html.escape(options.document_title)}</title>" if options.document_title else ""
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    {title_html}
    <style>{css}</style>
</head>
<body>
    {copyright_html}
    {chapters_html}
</body>
</html>
"""


def _render_copyright_page(page: CopyrightPage) -> str:
    lines: list[str] = []
    if page.copyright_holder:
        year = f"{page.publish_year} " if page.publish_year else ""
        lines.append(f"<p>Copyright &copy; {year}{html.escape(page.copyright_holder)}</p>")
    if page.legal_text:
        lines.append(f"<p>{_multiline(page.legal_text)}</p>")
    if page.isbn:
        lines.append(f"<p>ISBN: {html.escape(page.isbn)}</p>")
    if page.publisher_name:
        lines.append(f"<p>Published by {html.escape(page.publisher_name)}</p>")
    if page.additional_credits:
        lines.append(f"<p>{_multiline(page.additional_credits)}</p>")

    return f"""
    <div class="copyright-page">
        {"".join(lines)}
    </div>
    """


def _multiline(text: str) -> str:
    return html.escape(text).replace("\n", "<br>")


def _render_chapter(chapter: ExportChapter) -> str:
    # First paragraph after the title is set flush
    content = _FIRST_PARAGRAPH.sub('<p class="first-paragraph">', chapter.content, count=1)

    return f"""
    <h1 class="chapter-title" id="chapter-{chapter.number}">
        <span class="chapter-number">Chapter {chapter.number}</span>
        {html.escape(chapter.title)}
    </h1>
    <div class="chapter-content">
        {content}
    </div>
    """


def _generate_print_css(options: HtmlOptions, with_copyright_page: bool = False) -> str:
    """Generate paged-media CSS from the theme and trim size."""
    theme = options.theme
    margins = theme.margins
    chapter_style = theme.chapter_style

    bleed = options.bleed_size * 2 if options.include_bleed else 0
    page_width = to_points(options.trim_size.width + bleed)
    page_height = to_points(options.trim_size.height + bleed)

    chapter_break = "right" if chapter_style.chapter_start_page == "recto" else "always"

    drop_cap_rules = ""
    if chapter_style.drop_cap:
        drop_cap_rules = f"""
p.first-paragraph::first-letter {{
    float: left;
    font-size: {fmt_number(theme.font_size * chapter_style.drop_cap_lines)}pt;
    line-height: 1;
    padding-right: 0.1em;
    font-weight: bold;
}}
"""

    copyright_rules = ""
    if with_copyright_page:
        copyright_rules = f"""
.copyright-page {{
    page-break-before: always;
    font-size: {fmt_number(theme.font_size - 1)}pt;
    text-align: center;
    padding-top: 3in;
}}

.copyright-page p {{
    text-indent: 0;
    margin-bottom: 1em;
}}

"""

    return f"""
@page {{
    size: {fmt_number(page_width)}pt {fmt_number(page_height)}pt;
    margin: {fmt_number(margins.top)}in {fmt_number(margins.outer)}in {fmt_number(margins.bottom)}in {fmt_number(margins.inner)}in;

    @bottom-center {{
        content: counter(page);
        font-family: {theme.font_family};
        font-size: 10pt;
    }}
}}

@page :left {{
    margin-left: {fmt_number(margins.outer)}in;
    margin-right: {fmt_number(margins.inner)}in;
}}

@page :right {{
    margin-left: {fmt_number(margins.inner)}in;
    margin-right: {fmt_number(margins.outer)}in;
}}

@page :first {{
    @bottom-center {{ content: none; }}
}}

body {{
    font-family: {theme.font_family};
    font-size: {fmt_number(theme.font_size)}pt;
    line-height: {fmt_number(theme.line_height)};
    text-align: justify;
    hyphens: auto;
    -webkit-hyphens: auto;
    orphans: 2;
    widows: 2;
}}

h1.chapter-title {{
    font-family: {theme.title_font_family};
    font-size: {fmt_number(theme.font_size * 2)}pt;
    text-align: {chapter_style.title_alignment};
    margin-top: 2in;
    margin-bottom: 0.5in;
    page-break-before: {chapter_break};
    font-weight: normal;
    letter-spacing: 0.1em;
}}

h1.chapter-title .chapter-number {{
    display: block;
    font-size: {fmt_number(theme.font_size)}pt;
    text-transform: uppercase;
    letter-spacing: 0.2em;
    margin-bottom: 0.25in;
}}

p {{
    margin: 0;
    text-indent: 1.5em;
}}

p.first-paragraph {{
    text-indent: 0;
}}
{drop_cap_rules}
{copyright_rules}blockquote {{
    margin: 1em 2em;
    font-style: italic;
}}

.scene-break {{
    text-align: center;
    margin: 1em 0;
}}

.scene-break::before {{
    content: "* * *";
    letter-spacing: 0.5em;
}}
"""


class HtmlRenderer(BaseRenderer):
    """Render an export input to print-styled HTML."""

    content_type = "text/html"

    def __init__(self, include_bleed: bool = True, bleed_size: float = 0.125):
        self.include_bleed = include_bleed
        self.bleed_size = bleed_size

    def get_extension(self) -> str:
        return ".html"

    def render_html(self, export_input: ExportInput) -> str:
        options = HtmlOptions(
            theme=export_input.theme,
            trim_size=export_input.trim_size,
            include_bleed=self.include_bleed,
            bleed_size=self.bleed_size,
            document_title=export_input.title,
        )
        return generate_book_html(export_input.chapters, export_input.copyright_page, options)

    def render(self, export_input: ExportInput) -> bytes:
        return self.render_html(export_input).encode("utf-8")
