"""Glyph outline representation.

This module defines the glyph domain model: one character's outline in
font-unit space, kept as SVG path data together with its bounding box.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box in font units.

    Attributes:
        x_min: Left edge
        y_min: Bottom edge
        x_max: Right edge
        y_max: Top edge
    """

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.y_max - self.y_min

    @property
    def is_degenerate(self) -> bool:
        """Check if the box has zero width or zero height.

        Returns:
            True if the box encloses no area, False otherwise
        """
        return self.width <= 0 or self.height <= 0

    @classmethod
    def from_tuple(cls, bounds: tuple[float, float, float, float]) -> "BoundingBox":
        """Build a box from an (x_min, y_min, x_max, y_max) tuple.

        Args:
            bounds: Bounds as reported by fontTools pens

        Returns:
            BoundingBox instance
        """
        x_min, y_min, x_max, y_max = bounds
        return cls(x_min=x_min, y_min=y_min, x_max=x_max, y_max=y_max)


@dataclass
class GlyphOutline:
    """Outline of a single character.

    Attributes:
        character: The character this outline was drawn for
        name: Glyph name in the font (e.g., "A", "zero")
        path_data: SVG path data in font units (upward-positive Y)
        bounds: Bounding box, or None for glyphs without contours
    """

    character: str
    name: str
    path_data: str
    bounds: BoundingBox | None = None

    @property
    def is_degenerate(self) -> bool:
        """Check if the glyph's geometry cannot anchor a scale."""
        return self.bounds is None or self.bounds.is_degenerate
