"""SVG document writer.

This module builds the SVG element tree for one normalized glyph and
serializes it, with the output file naming convention.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from glyphsvg.domain.glyph import GlyphOutline

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
PATH_STYLE = "path { fill: black; fill-rule: nonzero; }"

# Fixed precision keeps repeated runs byte-identical
_DECIMALS = 6

# Characters that would turn a file name into a path
_UNSAFE_NAME_CHARACTERS = frozenset({"/", "\\"})


def format_number(value: float) -> str:
    """Format a coordinate for SVG output.

    Args:
        value: Number to format

    Returns:
        Shortest fixed-point text with at most six decimals

    Examples:
        >>> format_number(8.0)
        '8'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(-0.0000001)
        '0'
    """
    text = f"{value:.{_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def transform_attribute(offset_x: float, offset_y: float, scale: float, margin: float) -> str:
    """Compose the canvas transform for a glyph path.

    Applied right to left: mirror the Y axis, translate by the offsets,
    scale into the drawing area, then shift past the margin.
    """
    m = format_number(margin)
    return (
        f"translate({m} {m}) "
        f"scale({format_number(scale)}) "
        f"translate({format_number(offset_x)} {format_number(offset_y)}) "
        "scale(1 -1)"
    )


def build_document(outline: GlyphOutline, transform: str, size: float) -> ET.Element:
    """Build a square SVG document holding one filled glyph path.

    Args:
        outline: Glyph outline with path data in font units
        transform: Transform attribute mapping font units to the canvas
        size: Width and height of the document

    Returns:
        Root <svg> element
    """
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": format_number(size),
            "height": format_number(size),
        },
    )
    style = ET.SubElement(root, "style")
    style.text = PATH_STYLE
    ET.SubElement(root, "path", {"d": outline.path_data, "transform": transform})
    return root


def serialize_document(document: ET.Element) -> str:
    """Serialize a document element to SVG markup."""
    return ET.tostring(document, encoding="unicode")


def document_filename(character: str) -> str:
    """Get the file name for a character's document.

    Path separators and non-printable characters are replaced by "_"; the
    hex code point keeps the name unique.

    Example:
        "A" → "A-0x41.svg"
        "/" → "_-0x2f.svg"
    """
    label = character
    if character in _UNSAFE_NAME_CHARACTERS or not character.isprintable():
        label = "_"
    return f"{label}-{ord(character):#x}.svg"


class DocumentWriter:
    """Writes documents for one font under its own directory.

    Example:
        writer = DocumentWriter(Path("out"), Path("fonts/Roboto.ttf"))
        writer.save("A", document)  # out/Roboto/A-0x41.svg
    """

    def __init__(self, destination: Path, font_path: Path) -> None:
        """Initialize the writer.

        Args:
            destination: Output root directory
            font_path: Font the documents belong to
        """
        self.font_dir = destination / font_path.stem

    def get_output_path(self, character: str) -> Path:
        """Get the output path for a character."""
        return self.font_dir / document_filename(character)

    def save(self, character: str, document: ET.Element) -> Path:
        """Write a document, creating the font directory if needed.

        Raises:
            OSError: If the directory or the file cannot be written
        """
        # exist_ok tolerates sibling workers creating the same tree
        self.font_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.get_output_path(character)
        output_path.write_text(serialize_document(document), encoding="utf-8")
        return output_path
