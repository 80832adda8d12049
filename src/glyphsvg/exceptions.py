"""Exception hierarchy for glyphsvg."""


class GlyphSvgError(Exception):
    """Base exception for all glyphsvg errors."""

    pass


class FontError(GlyphSvgError):
    """Errors related to reading a font."""

    pass


class FontOpenError(FontError):
    """Font file is unreadable or cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to open font '{path}': {reason}")


class MetricsError(FontError):
    """Font-wide metrics are missing or unusable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid metrics in font '{path}': {reason}")


class GlyphDrawError(FontError):
    """A glyph present in the font could not be drawn."""

    def __init__(self, character: str, reason: str) -> None:
        self.character = character
        self.reason = reason
        super().__init__(f"Failed to draw glyph for {character!r}: {reason}")


class GeometryError(GlyphSvgError):
    """Errors in geometric calculations."""

    pass


class DegenerateGeometryError(GeometryError):
    """No positive, finite scale can be derived for a glyph."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate glyph geometry: {reason}")


class OutputIOError(GlyphSvgError):
    """Error creating an output directory or writing a document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class ScanError(GlyphSvgError):
    """The scan root cannot be walked."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot scan '{path}': {reason}")
