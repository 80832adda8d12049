"""Unit tests for the font and document I/O layer.

Tests for FontReader, the converter functions and the SVG writer.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from glyphsvg.domain import BoundingBox, GlyphOutline
from glyphsvg.exceptions import FontOpenError, MetricsError
from glyphsvg.io.converter import extract_font_metrics
from glyphsvg.io.reader import FontReader
from glyphsvg.io.writer import (
    PATH_STYLE,
    DocumentWriter,
    build_document,
    document_filename,
    format_number,
    serialize_document,
    transform_attribute,
)

SVG = "{http://www.w3.org/2000/svg}"


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FontOpenError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FontOpenError, match="file not found"):
            reader.load()

    def test_load_garbage_file(self, tmp_path: Path):
        """Test a file that is not a font raises FontOpenError."""
        path = tmp_path / "broken.ttf"
        path.write_bytes(b"this is not a font at all")

        with pytest.raises(FontOpenError):
            FontReader(path).load()

    def test_metrics_before_load(self):
        """Test accessing metrics before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.metrics

    def test_draw_before_load(self):
        """Test drawing before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.draw("A")

    def test_metrics(self, test_font: Path):
        """Test metrics come from hhea."""
        with FontReader(test_font) as reader:
            metrics = reader.metrics

        assert metrics.units_per_em == 1000
        assert metrics.ascender == 800
        assert metrics.descender == -200
        assert metrics.height == 1000

    def test_draw_present_glyph(self, test_font: Path):
        """Test drawing a glyph yields path data and exact bounds."""
        with FontReader(test_font) as reader:
            outline = reader.draw("A")

        assert outline is not None
        assert outline.name == "A"
        assert outline.character == "A"
        assert outline.bounds == BoundingBox(50, 0, 550, 700)
        assert outline.path_data.startswith("M")
        assert outline.path_data.endswith("Z")

    def test_draw_missing_glyph(self, test_font: Path):
        """Test characters absent from the cmap give None."""
        with FontReader(test_font) as reader:
            assert reader.draw("C") is None
            assert reader.draw("\U0001d518") is None

    def test_draw_empty_glyph(self, make_font):
        """Test an encoded glyph without contours has no bounds."""
        font = make_font("fonts/Space.ttf", characters="X ")

        with FontReader(font) as reader:
            outline = reader.draw(" ")

        assert outline is not None
        assert outline.bounds is None
        assert outline.path_data == ""

    def test_context_manager_closes(self, test_font: Path):
        """Test FontReader releases the font on exit."""
        with FontReader(test_font) as reader:
            assert reader._font is not None
        assert reader._font is None

    @patch("glyphsvg.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_metrics_error_wrapped(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test unexpected table errors surface as MetricsError."""
        mock_font = MagicMock()
        mock_font.__contains__.side_effect = lambda tag: tag == "head"
        mock_font.__getitem__.side_effect = ValueError("bad head table")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        with pytest.raises(MetricsError, match="bad head table"):
            _ = reader.metrics


class TestExtractFontMetrics:
    """Tests for metric source selection."""

    @staticmethod
    def _font(tables: dict[str, object]) -> MagicMock:
        font = MagicMock()
        font.__contains__.side_effect = lambda tag: tag in tables
        font.__getitem__.side_effect = lambda tag: tables[tag]
        return font

    def test_missing_head(self):
        """Test a font without head has no metrics."""
        with pytest.raises(MetricsError, match="head"):
            extract_font_metrics(self._font({}), "x.ttf")

    def test_invalid_units_per_em(self):
        """Test a zero UPM is rejected."""
        head = MagicMock(unitsPerEm=0)
        with pytest.raises(MetricsError, match="unitsPerEm"):
            extract_font_metrics(self._font({"head": head}), "x.ttf")

    def test_falls_back_to_os2(self):
        """Test OS/2 typo metrics are used when hhea is flat."""
        head = MagicMock(unitsPerEm=1000, xMin=0, yMin=-250, xMax=900, yMax=950)
        hhea = MagicMock(ascent=0, descent=0)
        os2 = MagicMock(sTypoAscender=750, sTypoDescender=-250)
        metrics = extract_font_metrics(
            self._font({"head": head, "hhea": hhea, "OS/2": os2}), "x.ttf"
        )
        assert (metrics.ascender, metrics.descender) == (750, -250)

    def test_falls_back_to_head(self):
        """Test the head bounding box is the last resort."""
        head = MagicMock(unitsPerEm=1000, xMin=0, yMin=-250, xMax=900, yMax=950)
        metrics = extract_font_metrics(self._font({"head": head}), "x.ttf")
        assert (metrics.ascender, metrics.descender) == (950, -250)

    def test_no_vertical_extent(self):
        """Test every source being flat raises MetricsError."""
        head = MagicMock(unitsPerEm=1000, xMin=0, yMin=0, xMax=0, yMax=0)
        with pytest.raises(MetricsError, match="vertical extent"):
            extract_font_metrics(self._font({"head": head}), "x.ttf")


class TestWriter:
    """Tests for SVG document building."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (8.0, "8"),
            (512, "512"),
            (0.496, "0.496"),
            (-200.5, "-200.5"),
            (1 / 3, "0.333333"),
            (-0.0000001, "0"),
            (0.0, "0"),
        ],
    )
    def test_format_number(self, value: float, expected: str):
        """Test numbers are written compactly with bounded precision."""
        assert format_number(value) == expected

    def test_transform_attribute(self):
        """Test the composed transform order."""
        assert transform_attribute(200, 800, 0.496, 8) == (
            "translate(8 8) scale(0.496) translate(200 800) scale(1 -1)"
        )

    def test_build_document(self):
        """Test the document holds one style rule and one path."""
        outline = GlyphOutline(character="A", name="A", path_data="M0 0L0 10L10 10Z")
        root = ET.fromstring(serialize_document(build_document(outline, "scale(1)", 512)))

        assert root.tag == f"{SVG}svg"
        assert root.get("width") == "512"
        assert root.get("height") == "512"

        style = root.find(f"{SVG}style")
        assert style is not None
        assert style.text == PATH_STYLE

        paths = root.findall(f"{SVG}path")
        assert len(paths) == 1
        assert paths[0].get("d") == "M0 0L0 10L10 10Z"
        assert paths[0].get("transform") == "scale(1)"

    @pytest.mark.parametrize(
        ("character", "expected"),
        [("A", "A-0x41.svg"), ("0", "0-0x30.svg"), ("é", "é-0xe9.svg")],
    )
    def test_document_filename(self, character: str, expected: str):
        """Test file names carry the character and its hex code point."""
        assert document_filename(character) == expected

    @pytest.mark.parametrize(
        ("character", "expected"),
        [("/", "_-0x2f.svg"), ("\\", "_-0x5c.svg"), ("\0", "_-0x0.svg"), ("\n", "_-0xa.svg")],
    )
    def test_document_filename_unsafe_characters(self, character: str, expected: str):
        """Test separators and control characters never reach the file name."""
        assert document_filename(character) == expected

    def test_document_filename_dot(self):
        """Test a dot stays a plain file name, not a directory reference."""
        assert document_filename(".") == ".-0x2e.svg"

    def test_document_writer_save(self, tmp_path: Path):
        """Test documents land in a directory named after the font stem."""
        writer = DocumentWriter(tmp_path / "out", Path("fonts/Roboto-Regular.ttf"))
        outline = GlyphOutline(character="A", name="A", path_data="M0 0Z")

        path = writer.save("A", build_document(outline, "scale(1)", 512))

        assert path == tmp_path / "out" / "Roboto-Regular" / "A-0x41.svg"
        assert path.read_text(encoding="utf-8").startswith("<svg")

    def test_document_writer_existing_directory(self, tmp_path: Path):
        """Test saving into an existing font directory succeeds."""
        (tmp_path / "Roboto").mkdir()
        writer = DocumentWriter(tmp_path, Path("Roboto.ttf"))
        outline = GlyphOutline(character="B", name="B", path_data="")

        assert writer.save("B", build_document(outline, "", 512)).exists()
