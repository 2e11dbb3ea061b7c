"""Artifact storage."""

import logging
import re
import uuid
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ArtifactStore(Protocol):
    """Where finished artifacts go; returns a URL for the stored object."""

    def put(self, key: str, data: bytes, content_type: str) -> str: ...


class LocalArtifactStore:
    """Store artifacts under a local directory and return file:// URLs."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def put(self, key: str, data: bytes, content_type: str) -> str:
        path = (self.root / key).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ValueError(f"Storage key escapes the store root: {key}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info("Stored %s (%s, %d bytes)", path, content_type, len(data))
        return path.as_uri()


def sanitize_filename(name: str) -> str:
    """Lowercase slug of at most 50 characters."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower())
    return slug.strip("-")[:50]


def artifact_key(project_id: str, title: str, extension: str) -> str:
    """``<project>/exports/<random>-<slug><ext>``."""
    return f"{project_id}/exports/{uuid.uuid4().hex[:12]}-{sanitize_filename(title)}{extension}"
