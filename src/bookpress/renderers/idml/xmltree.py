"""lxml helpers shared by the IDML builders."""

import re
from typing import Optional

from lxml import etree

IDPKG_NS = "http://ns.adobe.com/AdobeInDesign/idml/1.0/packaging"
CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"
DOM_VERSION = "18.0"

_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def xml_safe(text: str) -> str:
    """Drop control characters XML 1.0 cannot carry."""
    return _XML_INVALID.sub("", text)


def package_root(name: str) -> etree._Element:
    """Root element of a package part, e.g. ``idPkg:Styles``."""
    return etree.Element(
        etree.QName(IDPKG_NS, name),
        {"DOMVersion": DOM_VERSION},
        nsmap={"idPkg": IDPKG_NS},
    )


def package_ref(parent: etree._Element, name: str, src: str) -> etree._Element:
    """``<idPkg:name src=...>`` reference from designmap.xml."""
    return etree.SubElement(parent, etree.QName(IDPKG_NS, name), {"src": src})


def sub(
    parent: etree._Element,
    tag: str | etree.QName,
    attrs: Optional[dict[str, str]] = None,
    text: Optional[str] = None,
) -> etree._Element:
    element = etree.SubElement(parent, tag, attrs or {})
    if text is not None:
        element.text = xml_safe(text)
    return element


def serialize(root: etree._Element, standalone: Optional[bool] = True) -> str:
    """Serialize a part with its XML declaration."""
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding="UTF-8",
        standalone=standalone,
        pretty_print=True,
    ).decode("utf-8")
