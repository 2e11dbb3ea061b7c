"""Heuristic chapter segmentation over converted manuscript markup."""

import html
import re
from enum import Enum
from typing import Optional

from bookpress.ir.document import ParsedChapter, ParsedDocument, ParsedStyle
from bookpress.ir.styles import DEFAULT_STYLE_CATALOG

SHORT_TITLE_LIMIT = 200
IMPLICIT_CHAPTER_MIN_LENGTH = 100
UNTITLED = "Untitled Document"

# Evaluated in order; first match wins.
CHAPTER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^chapter\s+\d+", re.IGNORECASE),
    re.compile(r"^chapter\s+[ivxlcdm]+", re.IGNORECASE),
    re.compile(r"^part\s+\d+", re.IGNORECASE),
    re.compile(r"^section\s+\d+", re.IGNORECASE),
    re.compile(r"^\d+\.\s+"),
    re.compile(r"^prologue$", re.IGNORECASE),
    re.compile(r"^epilogue$", re.IGNORECASE),
    re.compile(r"^introduction$", re.IGNORECASE),
    re.compile(r"^preface$", re.IGNORECASE),
    re.compile(r"^acknowledgments?$", re.IGNORECASE),
)

GENERIC_CHAPTER_TITLE = re.compile(r"^chapter\s+\d+$", re.IGNORECASE)

H1_SPLIT = re.compile(r"<h1[^>]*>(.*?)</h1>", re.IGNORECASE | re.DOTALL)
TITLE_NODE = re.compile(r"<h1[^>]*class=\"title\"[^>]*>(.*?)</h1>", re.IGNORECASE | re.DOTALL)

# (style name, tag pattern) pairs for secondary style detection
INLINE_STYLE_MARKERS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Bold", re.compile(r"<(strong|b)\b", re.IGNORECASE)),
    ("Italic", re.compile(r"<(em|i)\b", re.IGNORECASE)),
    ("Underline", re.compile(r"<u\b", re.IGNORECASE)),
    ("Block Quote", re.compile(r"<blockquote\b", re.IGNORECASE)),
    ("Heading 2", re.compile(r"<h2\b", re.IGNORECASE)),
    ("Heading 3", re.compile(r"<h3\b", re.IGNORECASE)),
    ("List", re.compile(r"<(ul|ol)\b", re.IGNORECASE)),
)

_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")


class SegmentPosition(Enum):
    """Where a segment came from in the heading split."""

    HEADING = "heading"  # captured <h1> text
    BODY = "body"  # markup between headings


class ChapterSignal(Enum):
    """Outcome of classifying a segment."""

    PATTERN = "pattern"  # text reads like a chapter heading
    HEADING = "heading"  # sits on a heading boundary
    BODY = "body"


def strip_html(markup: str) -> str:
    """Reduce markup to collapsed plain text."""
    text = _TAG.sub(" ", markup)
    text = html.unescape(text).replace("\xa0", " ")
    return _WHITESPACE.sub(" ", text).strip()


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def matches_chapter_pattern(text: str) -> bool:
    return any(pattern.search(text) for pattern in CHAPTER_PATTERNS)


def classify_segment(text: str, position: SegmentPosition) -> ChapterSignal:
    """Decide whether a split segment reads as a chapter heading.

    Heading text is classified by its plain text. Body segments are matched
    as-is, so markup that opens with a tag never reads as a heading.
    """
    candidate = strip_html(text) if position is SegmentPosition.HEADING else text.strip()
    if matches_chapter_pattern(candidate):
        return ChapterSignal.PATTERN
    if position is SegmentPosition.HEADING:
        return ChapterSignal.HEADING
    return ChapterSignal.BODY


def detect_styles_in_content(markup: str) -> list[str]:
    """List secondary styles whose tags appear in the markup."""
    return [name for name, pattern in INLINE_STYLE_MARKERS if pattern.search(markup)]


def build_chapter(number: int, title: str, content: str) -> ParsedChapter:
    return ParsedChapter(
        number=number,
        title=title,
        content=content,
        word_count=count_words(strip_html(content)),
        styles=detect_styles_in_content(content),
    )


def split_chapters(markup: str) -> list[ParsedChapter]:
    """Split markup into chapters on top-level heading boundaries.

    Never returns an empty list: markup without any recognisable structure
    becomes a single "Chapter 1".
    """
    chapters: list[ParsedChapter] = []
    parts = H1_SPLIT.split(markup)
    number = 0

    i = 0
    while i < len(parts):
        part = parts[i].strip()
        if not part:
            i += 1
            continue

        # re.split puts captured heading text at odd indices
        position = SegmentPosition.HEADING if i % 2 == 1 else SegmentPosition.BODY
        signal = classify_segment(part, position)

        if signal is not ChapterSignal.BODY and len(part) < SHORT_TITLE_LIMIT:
            number += 1
            content = parts[i + 1] if i + 1 < len(parts) else ""
            chapters.append(build_chapter(number, strip_html(part), content))
            i += 2
            continue

        if number == 0 and len(part) > IMPLICIT_CHAPTER_MIN_LENGTH:
            number = 1
            chapters.append(build_chapter(number, "Chapter 1", part))
        i += 1

    if not chapters:
        chapters.append(build_chapter(1, "Chapter 1", markup))

    return chapters


def extract_title(markup: str, chapters: list[ParsedChapter]) -> str:
    """Pick the document title from the strongest available signal."""
    match = TITLE_NODE.search(markup)
    if match and strip_html(match.group(1)):
        return strip_html(match.group(1))

    match = H1_SPLIT.search(markup)
    if match:
        title = strip_html(match.group(1))
        if not matches_chapter_pattern(title):
            return title

    if chapters and not GENERIC_CHAPTER_TITLE.match(chapters[0].title):
        return chapters[0].title

    return UNTITLED


def parse_html(
    markup: str,
    styles: Optional[list[ParsedStyle]] = None,
    messages: Optional[list[str]] = None,
) -> ParsedDocument:
    """Build a ParsedDocument from already-converted markup.

    Without per-document style metadata the default catalog is assumed.
    """
    chapters = split_chapters(markup)
    return ParsedDocument(
        title=extract_title(markup, chapters),
        chapters=chapters,
        styles=list(DEFAULT_STYLE_CATALOG if styles is None else styles),
        raw_html=markup,
        messages=list(messages or []),
    )
