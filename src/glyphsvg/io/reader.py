"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files
and extracting glyph outlines and metrics into domain models.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from glyphsvg.domain.glyph import GlyphOutline
from glyphsvg.domain.metrics import FontMetrics
from glyphsvg.exceptions import FontOpenError, GlyphDrawError, MetricsError
from glyphsvg.io.converter import extract_font_metrics, fonttools_glyph_to_outline


class FontReader:
    """Loads TTF/OTF fonts and draws glyphs by character.

    The FontReader provides a high-level interface for loading fonts
    and converting fonttools representations to domain models.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            outline = reader.draw("A")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._cmap: dict[int, str] | None = None
        self._metrics: FontMetrics | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontOpenError: If the file does not exist or is not a readable font
        """
        if not self._font_path.exists():
            raise FontOpenError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontOpenError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def metrics(self) -> FontMetrics:
        """Return font-wide metrics, read once.

        Raises:
            RuntimeError: If font has not been loaded yet
            MetricsError: If metrics are missing or unusable
        """
        font = self._require_font()

        if self._metrics is None:
            try:
                self._metrics = extract_font_metrics(font, str(self._font_path))
            except MetricsError:
                raise
            except Exception as e:
                raise MetricsError(str(self._font_path), str(e)) from e

        return self._metrics

    def glyph_name(self, character: str) -> str | None:
        """Map a character to its glyph name through the best cmap.

        Args:
            character: A single character

        Returns:
            Glyph name, or None if the font does not encode the character

        Raises:
            RuntimeError: If font has not been loaded yet
            FontOpenError: If the cmap table cannot be parsed
        """
        font = self._require_font()

        if self._cmap is None:
            try:
                self._cmap = font.getBestCmap() or {}
            except Exception as e:
                raise FontOpenError(str(self._font_path), f"unreadable cmap: {e}") from e

        return self._cmap.get(ord(character))

    def draw(self, character: str) -> GlyphOutline | None:
        """Draw the glyph for a character.

        Args:
            character: A single character

        Returns:
            GlyphOutline, or None if the font has no glyph for the character

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphDrawError: If the glyph exists but cannot be drawn
        """
        name = self.glyph_name(character)
        if name is None:
            return None

        font = self._require_font()
        try:
            return fonttools_glyph_to_outline(
                character=character,
                name=name,
                glyph_set=font.getGlyphSet(),
            )
        except Exception as e:
            raise GlyphDrawError(character, str(e)) from e

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._cmap = None
            self._metrics = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
