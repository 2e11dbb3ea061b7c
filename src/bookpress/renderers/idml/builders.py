"""Builders for the fixed parts of an IDML package."""

from lxml import etree

from bookpress.renderers.idml.xmltree import (
    CONTAINER_NS,
    DOM_VERSION,
    IDPKG_NS,
    package_ref,
    package_root,
    serialize,
    sub,
)
from bookpress.typography.themes import BookTheme, TrimSize
from bookpress.typography.units import fmt_number, to_points

MASTER_SPREAD_ID = "udd"
MASTER_SPREAD_PATH = f"MasterSpreads/MasterSpread_{MASTER_SPREAD_ID}.xml"

FONTS_PATH = "Resources/Fonts.xml"
STYLES_PATH = "Resources/Styles.xml"
PREFERENCES_PATH = "Resources/Preferences.xml"
GRAPHIC_PATH = "Resources/Graphic.xml"

_JUSTIFICATION = {"left": "LeftAlign", "center": "CenterAlign", "right": "RightAlign"}


def build_container() -> str:
    """META-INF/container.xml pointing at designmap.xml."""
    root = etree.Element(etree.QName(CONTAINER_NS, "container"), {"version": "1.0"}, nsmap={None: CONTAINER_NS})
    rootfiles = sub(root, etree.QName(CONTAINER_NS, "rootfiles"))
    sub(rootfiles, etree.QName(CONTAINER_NS, "rootfile"), {"full-path": "designmap.xml", "media-type": "text/xml"})
    return serialize(root, standalone=None)


def build_designmap(story_paths: list[str], spread_paths: list[str]) -> str:
    """designmap.xml: resources, master spread, then stories and spreads in order."""
    root = etree.Element("Document", {"DOMVersion": DOM_VERSION, "Self": "d"}, nsmap={"idPkg": IDPKG_NS})
    package_ref(root, "Fonts", FONTS_PATH)
    package_ref(root, "Styles", STYLES_PATH)
    package_ref(root, "Preferences", PREFERENCES_PATH)
    package_ref(root, "Graphic", GRAPHIC_PATH)
    package_ref(root, "MasterSpread", MASTER_SPREAD_PATH)
    for path in story_paths:
        package_ref(root, "Story", path)
    for path in spread_paths:
        package_ref(root, "Spread", path)
    return serialize(root)


def theme_font_families(theme: BookTheme) -> list[str]:
    """Distinct families used by the theme, body font first."""
    families = [theme.primary_font]
    if theme.primary_title_font != theme.primary_font:
        families.append(theme.primary_title_font)
    return families


def build_fonts(theme: BookTheme) -> str:
    """Resources/Fonts.xml with Regular, Bold and Italic faces per family."""
    root = package_root("Fonts")
    for family in theme_font_families(theme):
        family_el = sub(root, "FontFamily", {"Self": f"FontFamily/{family}", "Name": family})
        for face, suffix in (("Regular", ""), ("Bold", "$Bold"), ("Italic", "$Italic")):
            sub(
                family_el,
                "Font",
                {
                    "Self": f"Font/{family}{suffix}",
                    "FontFamily": family,
                    "Name": face,
                    "FontStyleName": face,
                    "FontType": "OpenTypeCFF",
                },
            )
    return serialize(root)


def build_styles(theme: BookTheme) -> str:
    """Resources/Styles.xml: paragraph style hierarchy and character styles."""
    body_font = f"Font/{theme.primary_font}"
    title_font = f"Font/{theme.primary_title_font}"
    size = fmt_number(theme.font_size)
    leading = fmt_number(theme.line_height * 100)
    chapter_style = theme.chapter_style
    justification = _JUSTIFICATION.get(chapter_style.title_alignment, "LeftAlign")

    root = package_root("Styles")
    paragraphs = sub(root, "RootParagraphStyleGroup", {"Self": "RootParagraphStyleGroup"})

    def paragraph_style(name: str, **attrs: str) -> None:
        sub(paragraphs, "ParagraphStyle", {"Self": f"ParagraphStyle/{name}", "Name": name, **attrs})

    paragraph_style("[No paragraph style]")
    paragraph_style(
        "[Basic Paragraph]",
        AppliedFont=body_font,
        PointSize=size,
        AutoLeading=leading,
        Justification="LeftJustified",
        FirstLineIndent="18",
    )
    paragraph_style(
        "Body Text",
        BasedOn="ParagraphStyle/[Basic Paragraph]",
        AppliedFont=body_font,
        PointSize=size,
        AutoLeading=leading,
        Justification="LeftJustified",
        FirstLineIndent="18",
        Hyphenation="true",
    )

    first_paragraph = {"BasedOn": "ParagraphStyle/Body Text", "FirstLineIndent": "0"}
    if chapter_style.drop_cap:
        first_paragraph["DropCapCharacters"] = "1"
        first_paragraph["DropCapLines"] = str(chapter_style.drop_cap_lines)
    paragraph_style("First Paragraph", **first_paragraph)

    paragraph_style(
        "Chapter Title",
        AppliedFont=title_font,
        PointSize=fmt_number(theme.font_size * 2),
        Justification=justification,
        SpaceBefore="144",
        SpaceAfter="36",
        KeepWithNext="1",
    )
    paragraph_style(
        "Chapter Number",
        AppliedFont=title_font,
        PointSize=size,
        Justification=justification,
        Capitalization="AllCaps",
        Tracking="200",
        SpaceAfter="18",
    )
    paragraph_style(
        "Block Quote",
        BasedOn="ParagraphStyle/Body Text",
        LeftIndent="36",
        RightIndent="36",
        FontStyle="Italic",
    )

    characters = sub(root, "RootCharacterStyleGroup", {"Self": "RootCharacterStyleGroup"})
    sub(characters, "CharacterStyle", {"Self": "CharacterStyle/[No character style]", "Name": "[No character style]"})
    for name in ("Bold", "Italic", "Bold Italic"):
        sub(characters, "CharacterStyle", {"Self": f"CharacterStyle/{name}", "Name": name, "FontStyle": name})

    return serialize(root)


def build_preferences(trim_size: TrimSize) -> str:
    """Resources/Preferences.xml with the page geometry in points."""
    root = package_root("Preferences")
    sub(
        root,
        "DocumentPreference",
        {
            "PageWidth": fmt_number(to_points(trim_size.width)),
            "PageHeight": fmt_number(to_points(trim_size.height)),
            "FacingPages": "true",
            "PageBinding": "LeftToRight",
            "ColumnGuideColor": "Enumeration/Violet",
            "MarginGuideColor": "Enumeration/Magenta",
        },
    )
    sub(root, "TextDefault", {"AppliedParagraphStyle": "ParagraphStyle/Body Text"})
    sub(root, "StoryPreference", {"OpticalMarginAlignment": "true", "OpticalMarginSize": "12"})
    return serialize(root)


def build_graphic() -> str:
    """Resources/Graphic.xml with the swatches every document needs."""
    root = package_root("Graphic")
    sub(root, "Color", {"Self": "Color/Black", "Model": "Process", "Space": "CMYK", "ColorValue": "0 0 0 100"})
    sub(root, "Color", {"Self": "Color/Paper", "Model": "Process", "Space": "CMYK", "ColorValue": "0 0 0 0"})
    sub(root, "Swatch", {"Self": "Swatch/None", "Name": "None", "ColorType": "Spot"})
    return serialize(root)


def page_bounds(trim_size: TrimSize, side: int) -> tuple[str, str]:
    """(GeometricBounds, ItemTransform) for page ``side`` (0 left, 1 right) of a spread."""
    width = to_points(trim_size.width)
    height = to_points(trim_size.height)
    left = width * side
    bounds = f"0 {fmt_number(left)} {fmt_number(height)} {fmt_number(left + width)}"
    transform = f"1 0 0 1 {fmt_number(left)} 0"
    return bounds, transform


def build_master_spread(trim_size: TrimSize, theme: BookTheme) -> str:
    """Two-page master with margins mirrored across the spine."""
    margins = theme.margins
    top = fmt_number(to_points(margins.top))
    bottom = fmt_number(to_points(margins.bottom))
    inner = fmt_number(to_points(margins.inner))
    outer = fmt_number(to_points(margins.outer))

    root = package_root("MasterSpread")
    spread = sub(
        root,
        "MasterSpread",
        {
            "Self": MASTER_SPREAD_ID,
            "Name": "A-Master",
            "NamePrefix": "A",
            "BaseName": "Master",
            "PageCount": "2",
            "ItemTransform": "1 0 0 1 0 0",
        },
    )
    # Verso keeps the outer margin on the left, recto on the right
    for side, (left, right) in enumerate(((outer, inner), (inner, outer))):
        bounds, transform = page_bounds(trim_size, side)
        page = sub(
            spread,
            "Page",
            {
                "Self": f"{MASTER_SPREAD_ID}{side + 1}",
                "Name": "A",
                "AppliedMaster": "n",
                "GeometricBounds": bounds,
                "ItemTransform": transform,
            },
        )
        sub(
            page,
            "MarginPreference",
            {
                "ColumnCount": "1",
                "ColumnGutter": "12",
                "Top": top,
                "Left": left,
                "Bottom": bottom,
                "Right": right,
            },
        )
    return serialize(root)


def spread_id(index: int) -> str:
    return f"u{200 + index}"


def build_spread(index: int, trim_size: TrimSize) -> str:
    """Spreads/Spread_u{200+index}.xml: an empty two-page spread on the master."""
    sid = spread_id(index)
    root = package_root("Spread")
    spread = sub(
        root,
        "Spread",
        {
            "Self": sid,
            "PageCount": "2",
            "BindingLocation": "0" if index == 0 else "1",
            "AllowPageShuffle": "true",
            "ItemTransform": "1 0 0 1 0 0",
            "FlattenerOverride": "Default",
        },
    )
    for side in (0, 1):
        bounds, transform = page_bounds(trim_size, side)
        sub(
            spread,
            "Page",
            {
                "Self": f"{sid}p{side + 1}",
                "AppliedMaster": MASTER_SPREAD_ID,
                "GeometricBounds": bounds,
                "ItemTransform": transform,
            },
        )
    return serialize(root)
