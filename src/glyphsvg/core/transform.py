"""Canvas normalization for glyph outlines.

This module maps a glyph from font-unit space into the drawing area of a
square canvas. The mapping for a glyph point (px, py) is

    canvas = (margin + scale * (px + offset_x), margin + scale * (offset_y - py))

which is the SVG transform
``translate(margin margin) scale(s) translate(x y) scale(1 -1)``: font
outlines use an upward-positive Y axis while the canvas grows downward.

Two policies are supported:
- GLOBAL: one scale per font from its vertical metrics; glyphs sit on the
  font baseline, so sizes stay consistent across a typeface.
- LOCAL: scale from the band spanned by the reference glyph and the glyph
  itself, so each glyph fills the canvas relative to the reference.

All functions are pure and deterministic.
"""

import math
from dataclasses import dataclass

from glyphsvg.config.settings import RenderMode
from glyphsvg.domain import BoundingBox, FontMetrics, GlyphOutline
from glyphsvg.exceptions import DegenerateGeometryError

_EMPTY_BOX = BoundingBox(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class TransformParams:
    """Position and scale mapping a glyph onto the canvas.

    Attributes:
        offset_x: Horizontal translation in font units, applied before scaling
        offset_y: Vertical translation in font units, applied after mirroring
        scale: Canvas units per font unit
    """

    offset_x: float
    offset_y: float
    scale: float

    def apply(self, x: float, y: float, margin: float = 0.0) -> tuple[float, float]:
        """Map a font-unit point to canvas coordinates."""
        return (
            margin + self.scale * (x + self.offset_x),
            margin + self.scale * (self.offset_y - y),
        )


def _checked_scale(available_size: float, extent: float) -> float:
    if extent <= 0:
        raise DegenerateGeometryError(f"non-positive extent {extent}")
    scale = available_size / extent
    if not math.isfinite(scale) or scale <= 0:
        raise DegenerateGeometryError(f"scale {scale} from extent {extent}")
    return scale


def _center_x(bounds: BoundingBox, available_size: float, scale: float) -> float:
    return (available_size / scale - bounds.width) / 2 - bounds.x_min


def global_transform(
    glyph: GlyphOutline,
    metrics: FontMetrics,
    available_size: float,
) -> TransformParams:
    """Scale from font metrics, baseline-aligned, centered horizontally.

    The ascender maps to the top of the drawing area and the descender to
    the bottom. Glyphs wider than the line height overflow horizontally.
    """
    scale = _checked_scale(available_size, metrics.height)
    bounds = glyph.bounds or _EMPTY_BOX
    return TransformParams(
        offset_x=_center_x(bounds, available_size, scale),
        offset_y=metrics.ascender,
        scale=scale,
    )


def local_transform(
    glyph: GlyphOutline,
    reference: GlyphOutline,
    available_size: float,
) -> TransformParams:
    """Scale from the band covering the reference and the glyph.

    Args:
        glyph: Glyph to place
        reference: Non-degenerate reference glyph of the same font
        available_size: Side of the drawing area

    Returns:
        TransformParams fitting the glyph and the reference band

    Raises:
        DegenerateGeometryError: If the reference has no usable bounds
    """
    if reference.bounds is None or reference.bounds.is_degenerate:
        raise DegenerateGeometryError(f"reference glyph {reference.name!r} has no area")

    ref = reference.bounds
    low, high = ref.y_min, ref.y_max
    width = 0.0
    bounds = glyph.bounds
    if bounds is not None and not bounds.is_degenerate:
        low = min(low, bounds.y_min)
        high = max(high, bounds.y_max)
        width = bounds.width

    band = high - low
    extent = max(band, width)
    scale = _checked_scale(available_size, extent)

    return TransformParams(
        offset_x=_center_x(bounds or _EMPTY_BOX, available_size, scale),
        offset_y=high + (extent - band) / 2,
        scale=scale,
    )


def transform(
    glyph: GlyphOutline,
    metrics: FontMetrics,
    reference: GlyphOutline | None,
    available_size: float,
    mode: RenderMode,
) -> TransformParams:
    """Compute the canvas mapping for a glyph.

    Local mode without a usable reference falls back to the global policy.

    Args:
        glyph: Glyph to place
        metrics: Metrics of the glyph's font
        reference: Reference glyph of the font, if one was resolved
        available_size: Canvas size minus both margins
        mode: Normalization policy

    Returns:
        TransformParams with a strictly positive, finite scale

    Raises:
        DegenerateGeometryError: If no positive finite scale exists
    """
    if mode is RenderMode.LOCAL and reference is not None and not reference.is_degenerate:
        return local_transform(glyph, reference, available_size)
    return global_transform(glyph, metrics, available_size)
