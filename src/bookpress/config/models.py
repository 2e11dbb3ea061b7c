"""Pydantic configuration models."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from bookpress.export.models import CopyrightPage

ExportType = Literal["idml", "pdf", "both"]


class ExportConfig(BaseModel):
    """Export output configuration."""

    theme: str = "classic-fiction"
    trim_size: str = "6x9"
    format: ExportType = "both"

    # HTML page box
    include_bleed: bool = True
    bleed_size: float = Field(default=0.125, ge=0)  # inches

    output_dir: Path = Path("./output")


class MetadataConfig(BaseModel):
    """Book metadata configuration."""

    title: Optional[str] = None  # None: use the title detected in the manuscript
    author: Optional[str] = None


class StyleMapConfig(BaseModel):
    """Map Word paragraph styles to markup elements."""

    heading_styles: dict[str, int] = Field(
        default_factory=lambda: {"Heading 1": 1, "Heading 2": 2, "Heading 3": 3}
    )
    title_styles: list[str] = Field(default_factory=lambda: ["Title"])
    subtitle_styles: list[str] = Field(default_factory=lambda: ["Subtitle"])
    blockquote_styles: list[str] = Field(
        default_factory=lambda: ["Quote", "Intense Quote", "Block Quote", "Block Text"]
    )
    list_styles: list[str] = Field(
        default_factory=lambda: ["List Paragraph", "List Bullet", "List Number"]
    )
    body_styles: list[str] = Field(
        default_factory=lambda: ["Normal", "Body Text", "Body", "First Paragraph", "Default"]
    )

    def heading_level(self, style_name: str) -> Optional[int]:
        wanted = style_name.lower()
        for name, level in self.heading_styles.items():
            if name.lower() == wanted:
                return min(max(level, 1), 6)  # Clamp to 1-6
        return None

    def is_title(self, style_name: str) -> bool:
        return _matches(style_name, self.title_styles)

    def is_subtitle(self, style_name: str) -> bool:
        return _matches(style_name, self.subtitle_styles)

    def is_blockquote(self, style_name: str) -> bool:
        return _matches(style_name, self.blockquote_styles)

    def is_body(self, style_name: str) -> bool:
        return _matches(style_name, self.body_styles)

    def is_list(self, style_name: str) -> bool:
        # "List Bullet 2" is still a bullet list
        style_lower = style_name.lower()
        return any(style_lower.startswith(name.lower()) for name in self.list_styles)

    def is_ordered_list(self, style_name: str) -> bool:
        return "number" in style_name.lower()


class BookpressConfig(BaseModel):
    """Main configuration for bookpress."""

    metadata: MetadataConfig = Field(default_factory=MetadataConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    copyright: Optional[CopyrightPage] = None
    style_map: StyleMapConfig = Field(default_factory=StyleMapConfig)


def _matches(style_name: str, names: list[str]) -> bool:
    style_lower = style_name.lower()
    return any(name.lower() == style_lower for name in names)
