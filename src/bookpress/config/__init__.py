"""Configuration module."""

from bookpress.config.loader import load_config
from bookpress.config.models import BookpressConfig, ExportConfig, MetadataConfig, StyleMapConfig

__all__ = ["BookpressConfig", "ExportConfig", "MetadataConfig", "StyleMapConfig", "load_config"]
