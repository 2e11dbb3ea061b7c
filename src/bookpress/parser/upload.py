"""Upload checks and the parse-and-map entry point."""

import logging
from typing import Optional

from bookpress.config.models import StyleMapConfig
from bookpress.errors import ValidationError
from bookpress.ir.document import ParsedDocument
from bookpress.ir.styles import StyleMapping, generate_style_mappings
from bookpress.parser.docx_parser import DocxParser

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 50 * 1024 * 1024
ALLOWED_EXTENSIONS = (".docx", ".doc")
ZIP_MAGIC = b"PK"


def validate_manuscript(data: bytes, filename: str, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Reject files that are obviously not Word manuscripts.

    Only the extension, the size and the zip magic bytes of .docx files are
    checked; anything deeper is the parser's job.
    """
    name = filename.lower()
    if not name.endswith(ALLOWED_EXTENSIONS):
        raise ValidationError("File must be a Word document (.docx or .doc)")

    if len(data) > max_bytes:
        raise ValidationError(f"File size must be less than {max_bytes // (1024 * 1024)}MB")

    if name.endswith(".docx") and not data.startswith(ZIP_MAGIC):
        raise ValidationError("Invalid DOCX file format")


def ingest(
    data: bytes,
    filename: str,
    style_map: Optional[StyleMapConfig] = None,
) -> tuple[ParsedDocument, list[StyleMapping]]:
    """Validate, parse and auto-map styles for an uploaded manuscript."""
    validate_manuscript(data, filename)
    document = DocxParser(style_map).parse(data)
    mappings = generate_style_mappings(document.styles)
    logger.info("Ingested %s: %d style mappings", filename, len(mappings))
    return document, mappings
