"""IDML package renderer."""

import logging

from pydantic import BaseModel

from bookpress.export.models import ExportChapter, ExportInput
from bookpress.renderers.base import BaseRenderer
from bookpress.renderers.idml.builders import (
    FONTS_PATH,
    GRAPHIC_PATH,
    MASTER_SPREAD_PATH,
    PREFERENCES_PATH,
    STYLES_PATH,
    build_container,
    build_designmap,
    build_fonts,
    build_graphic,
    build_master_spread,
    build_preferences,
    build_spread,
    build_styles,
    spread_id,
)
from bookpress.renderers.idml.package import IDML_MIMETYPE, IdmlPackage
from bookpress.renderers.idml.story import build_story, story_id
from bookpress.renderers.idml.validation import validate_package
from bookpress.typography.themes import BookTheme, TrimSize

logger = logging.getLogger(__name__)

# Rough pages-per-chapter guess until real pagination exists
SPREADS_PER_CHAPTER = 10


class IdmlOptions(BaseModel):
    """Inputs for IDML synthesis besides the chapters."""

    theme: BookTheme
    trim_size: TrimSize
    document_title: str


def estimate_spread_count(chapters: list[ExportChapter]) -> int:
    """Number of placeholder spreads to emit."""
    return len(chapters) * SPREADS_PER_CHAPTER


def story_path(index: int) -> str:
    return f"Stories/Story_{story_id(index)}.xml"


def spread_path(index: int) -> str:
    return f"Spreads/Spread_{spread_id(index)}.xml"


def generate_idml_structure(chapters: list[ExportChapter], options: IdmlOptions) -> IdmlPackage:
    """Build every file of the IDML package, in zip order.

    Raises IdmlIntegrityError if a style, font or master reference would
    dangle.
    """
    package = IdmlPackage()
    story_paths = [story_path(i) for i in range(len(chapters))]
    spread_paths = [spread_path(j) for j in range(estimate_spread_count(chapters))]

    package.add("META-INF/container.xml", build_container())
    package.add("designmap.xml", build_designmap(story_paths, spread_paths))

    package.add(FONTS_PATH, build_fonts(options.theme))
    package.add(STYLES_PATH, build_styles(options.theme))
    package.add(PREFERENCES_PATH, build_preferences(options.trim_size))
    package.add(GRAPHIC_PATH, build_graphic())

    package.add(MASTER_SPREAD_PATH, build_master_spread(options.trim_size, options.theme))

    for index, chapter in enumerate(chapters):
        package.add(story_paths[index], build_story(chapter, index))

    for index, path in enumerate(spread_paths):
        package.add(path, build_spread(index, options.trim_size))

    validate_package(package)
    logger.debug(
        "Built IDML package for %r: %d stories, %d spreads",
        options.document_title,
        len(story_paths),
        len(spread_paths),
    )
    return package


class IdmlRenderer(BaseRenderer):
    """Render an export input to a zipped IDML package."""

    content_type = IDML_MIMETYPE

    def get_extension(self) -> str:
        return ".idml"

    def build_package(self, export_input: ExportInput) -> IdmlPackage:
        options = IdmlOptions(
            theme=export_input.theme,
            trim_size=export_input.trim_size,
            document_title=export_input.title,
        )
        return generate_idml_structure(export_input.chapters, options)

    def render(self, export_input: ExportInput) -> bytes:
        return self.build_package(export_input).to_bytes()
