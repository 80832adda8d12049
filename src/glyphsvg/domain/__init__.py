"""Domain models for glyphsvg.

This module contains the core domain models used throughout glyphsvg:

- BoundingBox: Axis-aligned bounds in font units
- GlyphOutline: One character's outline as SVG path data plus bounds
- FontMetrics: Font-wide measurements used for scale normalization
"""

from glyphsvg.domain.glyph import BoundingBox, GlyphOutline
from glyphsvg.domain.metrics import FontMetrics

__all__ = [
    "BoundingBox",
    "FontMetrics",
    "GlyphOutline",
]
