"""Font-wide metrics."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """Scalar measurements shared by every glyph of a font.

    Attributes:
        units_per_em: Resolution of the font's coordinate system
        ascender: Distance from baseline to the top of the line (positive)
        descender: Distance from baseline to the bottom of the line (negative)
    """

    units_per_em: int
    ascender: float
    descender: float

    @property
    def height(self) -> float:
        """Vertical extent from descender to ascender."""
        return self.ascender - self.descender
