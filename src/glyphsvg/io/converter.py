"""Converters between fonttools and domain models.

This module handles the conversion between fonttools representations
and our domain models (GlyphOutline, FontMetrics).
"""

from typing import Any

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.ttLib import TTFont

from glyphsvg.domain.glyph import BoundingBox, GlyphOutline
from glyphsvg.domain.metrics import FontMetrics
from glyphsvg.exceptions import MetricsError
from glyphsvg.io.writer import format_number


def fonttools_glyph_to_outline(
    character: str,
    name: str,
    glyph_set: Any,
) -> GlyphOutline:
    """Convert a fonttools glyph to a domain GlyphOutline.

    The outline is drawn twice: once through an SVGPathPen to record the
    path data in font units, and once through a BoundsPen to measure the
    exact bounds of the curves (not just the control points). Component
    references are resolved through the glyph set.

    Args:
        character: Character the glyph was looked up for
        name: Name of the glyph
        glyph_set: The fonttools GlyphSet the glyph belongs to

    Returns:
        Domain GlyphOutline model

    Raises:
        Exception: If the glyph cannot be drawn
    """
    fonttools_glyph = glyph_set[name]

    svg_pen = SVGPathPen(glyph_set, ntos=format_number)
    fonttools_glyph.draw(svg_pen)

    bounds_pen = BoundsPen(glyph_set)
    fonttools_glyph.draw(bounds_pen)

    bounds = None
    if bounds_pen.bounds is not None:
        bounds = BoundingBox.from_tuple(bounds_pen.bounds)

    return GlyphOutline(
        character=character,
        name=name,
        path_data=svg_pen.getCommands(),
        bounds=bounds,
    )


def extract_font_metrics(font: TTFont, path: str) -> FontMetrics:
    """Extract font-wide metrics.

    Vertical metrics come from the first source with a positive extent:
    hhea ascent/descent, then OS/2 typographic values, then the head
    bounding box.

    Args:
        font: The TTFont object
        path: Font path, for error messages

    Returns:
        FontMetrics with a positive units-per-em and height

    Raises:
        MetricsError: If no usable metrics are found
    """
    if "head" not in font:
        raise MetricsError(path, "missing 'head' table")

    head = font["head"]
    units_per_em = head.unitsPerEm  # type: ignore[attr-defined]
    if not units_per_em or units_per_em <= 0:
        raise MetricsError(path, f"invalid unitsPerEm {units_per_em}")

    candidates: list[tuple[float, float]] = []
    if "hhea" in font:
        hhea = font["hhea"]
        candidates.append((hhea.ascent, hhea.descent))  # type: ignore[attr-defined]
    if "OS/2" in font:
        os2 = font["OS/2"]
        candidates.append((os2.sTypoAscender, os2.sTypoDescender))  # type: ignore[attr-defined]
    candidates.append((head.yMax, head.yMin))  # type: ignore[attr-defined]

    for ascender, descender in candidates:
        if ascender - descender > 0:
            return FontMetrics(
                units_per_em=units_per_em,
                ascender=ascender,
                descender=descender,
            )

    raise MetricsError(path, "no positive vertical extent in hhea, OS/2 or head")
