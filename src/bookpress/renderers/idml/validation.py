"""Referential integrity check for generated IDML packages."""

from collections import defaultdict
from typing import Iterator

from lxml import etree

from bookpress.errors import IdmlIntegrityError
from bookpress.renderers.idml.package import IdmlPackage
from bookpress.renderers.idml.xmltree import IDPKG_NS

# Attributes whose value must name a declared Self
REFERENCE_ATTRIBUTES = (
    "AppliedFont",
    "AppliedParagraphStyle",
    "AppliedCharacterStyle",
    "BasedOn",
    "AppliedMaster",
)

NULL_REFERENCE = "n"


def _xml_parts(package: IdmlPackage) -> Iterator[tuple[str, etree._Element]]:
    for entry in package:
        if entry.path.endswith(".xml"):
            yield entry.path, etree.fromstring(entry.content.encode("utf-8"))


def find_dangling_references(package: IdmlPackage) -> list[str]:
    """List ``path: Attr=value`` for every reference that resolves nowhere."""
    declared: set[str] = set()
    references: list[tuple[str, str, str]] = []

    for path, root in _xml_parts(package):
        for element in root.iter():
            self_id = element.get("Self")
            if self_id:
                declared.add(self_id)
            for attr in REFERENCE_ATTRIBUTES:
                value = element.get(attr)
                if value and value != NULL_REFERENCE:
                    references.append((path, attr, value))
            if isinstance(element.tag, str) and element.tag.startswith(f"{{{IDPKG_NS}}}"):
                src = element.get("src")
                if src and src not in package:
                    references.append((path, "src", src))

    return [
        f"{path}: {attr}={value}"
        for path, attr, value in references
        if attr == "src" or value not in declared
    ]


def find_duplicate_ids(package: IdmlPackage) -> dict[str, list[str]]:
    """Map each ``Self`` declared more than once to the parts declaring it."""
    owners: dict[str, list[str]] = defaultdict(list)
    for path, root in _xml_parts(package):
        for element in root.iter():
            self_id = element.get("Self")
            if self_id:
                owners[self_id].append(path)
    return {self_id: paths for self_id, paths in owners.items() if len(paths) > 1}


def validate_package(package: IdmlPackage) -> None:
    """Raise IdmlIntegrityError on unresolved references or reused Self ids."""
    problems = find_dangling_references(package)
    problems.extend(
        f"{', '.join(paths)}: duplicate Self={self_id}"
        for self_id, paths in find_duplicate_ids(package).items()
    )
    if problems:
        raise IdmlIntegrityError(problems)
