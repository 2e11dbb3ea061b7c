"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from bookpress.config.defaults import DEFAULT_CONFIG_YAML
from bookpress.config.loader import find_config_file, load_config, merge_configs
from bookpress.config.models import BookpressConfig, StyleMapConfig


class TestBookpressConfig:
    """Test configuration models."""

    def test_defaults(self) -> None:
        cfg = BookpressConfig()
        assert cfg.export.theme == "classic-fiction"
        assert cfg.export.trim_size == "6x9"
        assert cfg.export.format == "both"
        assert cfg.export.bleed_size == 0.125
        assert cfg.copyright is None

    def test_default_yaml_is_valid(self) -> None:
        cfg = BookpressConfig(**yaml.safe_load(DEFAULT_CONFIG_YAML))
        assert cfg.copyright is not None
        assert cfg.copyright.copyright_holder == "Author Name"
        assert cfg.copyright.isbn is None
        assert cfg.metadata.title is None

    def test_invalid_format(self) -> None:
        with pytest.raises(ValidationError):
            BookpressConfig(export={"format": "epub"})

    def test_negative_bleed(self) -> None:
        with pytest.raises(ValidationError):
            BookpressConfig(export={"bleed_size": -1})


class TestStyleMapConfig:
    """Test Word style classification."""

    def test_heading_level(self) -> None:
        style_map = StyleMapConfig()
        assert style_map.heading_level("heading 2") == 2
        assert style_map.heading_level("Heading 4") is None

    def test_heading_level_clamped(self) -> None:
        assert StyleMapConfig(heading_styles={"Big": 9}).heading_level("Big") == 6

    def test_lists(self) -> None:
        style_map = StyleMapConfig()
        assert style_map.is_list("List Bullet 2")
        assert style_map.is_ordered_list("List Number")
        assert not style_map.is_ordered_list("List Bullet")

    def test_other_styles(self) -> None:
        style_map = StyleMapConfig()
        assert style_map.is_title("TITLE")
        assert style_map.is_subtitle("Subtitle")
        assert style_map.is_blockquote("Intense Quote")
        assert style_map.is_body("normal")
        assert not style_map.is_body("Fancy")


class TestLoader:
    """Test YAML loading and lookup."""

    def test_load_config(self, tmp_path: Path) -> None:
        path = tmp_path / "bookpress.yaml"
        path.write_text("export:\n  theme: academic\n  format: idml\nmetadata:\n  author: Ann\n")
        cfg = load_config(path)
        assert cfg.export.theme == "academic"
        assert cfg.export.format == "idml"
        assert cfg.export.trim_size == "6x9"
        assert cfg.metadata.author == "Ann"

    def test_load_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bookpress.yaml"
        path.write_text("")
        assert load_config(path) == BookpressConfig()

    def test_load_with_overrides(self, tmp_path: Path) -> None:
        path = tmp_path / "bookpress.yaml"
        path.write_text("export:\n  theme: academic\n  trim_size: 5x8\n")
        cfg = load_config(path, overrides={"export": {"trim_size": "7x10"}})
        assert cfg.export.theme == "academic"
        assert cfg.export.trim_size == "7x10"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_find_config_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / ".bookpress.yml").write_text("{}")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == (tmp_path / ".bookpress.yml").resolve()

    def test_nearest_config_wins(self, tmp_path: Path) -> None:
        (tmp_path / "bookpress.yaml").write_text("{}")
        nested = tmp_path / "book"
        nested.mkdir()
        (nested / "bookpress.yml").write_text("{}")
        assert find_config_file(nested) == (nested / "bookpress.yml").resolve()

    def test_directory_is_not_a_config(self, tmp_path: Path) -> None:
        (tmp_path / "bookpress.yaml").mkdir()
        (tmp_path / "bookpress.yml").write_text("{}")
        assert find_config_file(tmp_path) == (tmp_path / "bookpress.yml").resolve()

    def test_merge_configs(self) -> None:
        base = {"export": {"theme": "a", "format": "both"}, "metadata": {"title": "T"}}
        merged = merge_configs(base, {"export": {"theme": "b"}, "copyright": {"isbn": "1"}})
        assert merged == {
            "export": {"theme": "b", "format": "both"},
            "metadata": {"title": "T"},
            "copyright": {"isbn": "1"},
        }
        assert base["export"]["theme"] == "a"
