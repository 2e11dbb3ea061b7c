"""Chapter markup to IDML story conversion."""

import html
import re

from lxml import etree

from bookpress.export.models import ExportChapter
from bookpress.renderers.idml.xmltree import package_root, serialize, sub, xml_safe

NO_CHARACTER_STYLE = "[No character style]"
FIRST_PARAGRAPH = "First Paragraph"
BODY_TEXT = "Body Text"

# IDML forced line break (Shift+Enter)
LINE_BREAK = "\u2028"

_PARAGRAPH_END = re.compile(r"</p\s*>", re.IGNORECASE)
_PARAGRAPH_START = re.compile(r"<p(\s[^>]*)?>", re.IGNORECASE)
_TAG = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)[^>]*>")

_BOLD_TAGS = frozenset({"b", "strong"})
_ITALIC_TAGS = frozenset({"i", "em"})


def story_id(index: int) -> str:
    """Self id of the story for the chapter at ``index`` (0-based)."""
    return f"u{100 + index}"


def character_style(bold: bool, italic: bool) -> str:
    if bold and italic:
        return "Bold Italic"
    if bold:
        return "Bold"
    if italic:
        return "Italic"
    return NO_CHARACTER_STYLE


def split_runs(markup: str) -> list[tuple[str, str]]:
    """Split paragraph markup into (character style, text) runs.

    Entering a bold or italic span starts a new run; leaving it returns to
    the enclosing style. <br> becomes a forced line break; other tags are
    dropped and entities decoded.
    """
    runs: list[tuple[str, str]] = []
    bold_depth = italic_depth = 0
    style = NO_CHARACTER_STYLE
    buffer: list[str] = []

    def flush() -> None:
        text = html.unescape("".join(buffer))
        buffer.clear()
        if not text:
            return
        if runs and runs[-1][0] == style:
            runs[-1] = (style, runs[-1][1] + text)
        else:
            runs.append((style, text))

    pos = 0
    for match in _TAG.finditer(markup):
        buffer.append(markup[pos : match.start()])
        pos = match.end()

        closing, name = match.group(1) == "/", match.group(2).lower()
        if name in _BOLD_TAGS:
            bold_depth = max(bold_depth + (-1 if closing else 1), 0)
        elif name in _ITALIC_TAGS:
            italic_depth = max(italic_depth + (-1 if closing else 1), 0)
        elif name == "br":
            buffer.append(LINE_BREAK)
            continue
        else:
            continue

        new_style = character_style(bold_depth > 0, italic_depth > 0)
        if new_style != style:
            flush()
            style = new_style

    buffer.append(markup[pos:])
    flush()
    return runs


def paragraph_range(style: str, runs: list[tuple[str, str]]) -> etree._Element:
    """``ParagraphStyleRange`` holding one ``CharacterStyleRange`` per run."""
    para = etree.Element("ParagraphStyleRange", {"AppliedParagraphStyle": f"ParagraphStyle/{style}"})
    for char_style, text in runs:
        char_range = sub(para, "CharacterStyleRange", {"AppliedCharacterStyle": f"CharacterStyle/{char_style}"})
        sub(char_range, "Content", text=text)
    sub(para, "Br")
    return para


def html_to_idml_content(markup: str) -> list[etree._Element]:
    """Convert chapter markup to paragraph ranges.

    The first paragraph takes the First Paragraph style, later ones Body Text.
    """
    paragraphs: list[etree._Element] = []

    for chunk in _PARAGRAPH_END.split(markup):
        chunk = _PARAGRAPH_START.sub("", chunk).strip()
        if not chunk:
            continue
        runs = split_runs(chunk)
        if not any(text.strip() for _, text in runs):
            continue
        style = FIRST_PARAGRAPH if not paragraphs else BODY_TEXT
        paragraphs.append(paragraph_range(style, runs))

    return paragraphs


def build_story(chapter: ExportChapter, index: int) -> str:
    """Stories/Story_u{100+index}.xml for one chapter."""
    root = package_root("Story")
    story = sub(
        root,
        "Story",
        {
            "Self": story_id(index),
            "AppliedTOCStyle": "n",
            "TrackChanges": "false",
            "StoryTitle": xml_safe(chapter.title),
        },
    )
    story.append(paragraph_range("Chapter Number", [(NO_CHARACTER_STYLE, f"CHAPTER {chapter.number}")]))
    story.append(paragraph_range("Chapter Title", [(NO_CHARACTER_STYLE, chapter.title)]))
    for paragraph in html_to_idml_content(chapter.content):
        story.append(paragraph)
    return serialize(root)
