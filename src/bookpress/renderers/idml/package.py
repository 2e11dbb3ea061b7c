"""Ordered IDML package entries and zip writing."""

import io
import zipfile
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

MIMETYPE_PATH = "mimetype"
IDML_MIMETYPE = "application/vnd.adobe.indesign-idml-package"


@dataclass(frozen=True)
class PackageEntry:
    """One file of the package."""

    path: str
    content: str
    store_uncompressed: bool = False


class IdmlPackage:
    """Ordered package entries; the stored mimetype entry is always first.

    Consumers reject packages whose first zip member is not an uncompressed
    ``mimetype``, so the entry is created here and cannot be re-added.
    """

    def __init__(self) -> None:
        self._entries: list[PackageEntry] = [
            PackageEntry(MIMETYPE_PATH, IDML_MIMETYPE, store_uncompressed=True)
        ]
        self._paths: set[str] = {MIMETYPE_PATH}

    def add(self, path: str, content: str) -> None:
        """Append a compressed entry."""
        if path in self._paths:
            raise ValueError(f"Duplicate package entry: {path}")
        self._paths.add(path)
        self._entries.append(PackageEntry(path, content))

    def get(self, path: str) -> Optional[str]:
        for entry in self._entries:
            if entry.path == path:
                return entry.content
        return None

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self._entries]

    def __iter__(self) -> Iterator[PackageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def write(self, fileobj: BinaryIO) -> None:
        """Write the entries as a zip archive, in order."""
        with zipfile.ZipFile(fileobj, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
            for entry in self._entries:
                compress_type = zipfile.ZIP_STORED if entry.store_uncompressed else zipfile.ZIP_DEFLATED
                zf.writestr(entry.path, entry.content, compress_type=compress_type)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()
