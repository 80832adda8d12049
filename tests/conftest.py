"""Shared fixtures: structlog setup and generated test fonts."""

from collections.abc import Callable
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphsvg.utils import configure_structlog

# Rectangle outlines (x_min, y_min, x_max, y_max) in a 1000 UPM font
GLYPH_SHAPES: dict[str, tuple[int, int, int, int]] = {
    "A": (50, 0, 550, 700),
    "B": (60, 0, 500, 700),
    "X": (40, 0, 560, 700),
    "zero": (50, -10, 450, 710),
    "g": (50, -200, 450, 500),
    "W": (0, 0, 1200, 700),
}

GLYPH_NAMES: dict[str, str] = {
    "A": "A",
    "B": "B",
    "X": "X",
    "0": "zero",
    "g": "g",
    "W": "W",
    " ": "space",
}

FontFactory = Callable[..., Path]


@pytest.fixture(autouse=True, scope="session")
def _structlog_to_stdlib() -> None:
    """Keep library log output off stdout, where documents are printed."""
    configure_structlog()


def _draw_rect(pen: TTGlyphPen, x_min: int, y_min: int, x_max: int, y_max: int) -> None:
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()


def build_font(
    path: Path,
    characters: str = "ABX",
    ascent: int = 800,
    descent: int = -200,
    units_per_em: int = 1000,
) -> Path:
    """Build a TrueType font with rectangle glyphs for the given characters.

    Characters without a shape (such as space) get an empty glyph.
    """
    glyph_order = [".notdef"] + [GLYPH_NAMES[c] for c in characters]
    cmap = {ord(c): GLYPH_NAMES[c] for c in characters}

    glyphs = {}
    metrics = {}
    for name in glyph_order:
        pen = TTGlyphPen(None)
        shape = GLYPH_SHAPES.get(name)
        if shape is not None:
            _draw_rect(pen, *shape)
        glyphs[name] = pen.glyph()
        metrics[name] = (600, shape[0] if shape else 0)

    fb = FontBuilder(units_per_em, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ascent, descent=descent)
    fb.setupNameTable({"familyName": "Glyphsvg Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ascent,
        sTypoDescender=descent,
        usWinAscent=ascent,
        usWinDescent=-descent,
    )
    fb.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


@pytest.fixture
def make_font(tmp_path: Path) -> FontFactory:
    """Factory building test fonts under tmp_path.

    Example:
        font = make_font("fonts/Test.ttf", characters="AB")
    """

    def factory(relative: str = "fonts/Test.ttf", **kwargs: object) -> Path:
        return build_font(tmp_path / relative, **kwargs)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def test_font(make_font: FontFactory) -> Path:
    """Font with glyphs for A, B and X, but not C."""
    return make_font("fonts/Test.ttf", characters="ABX")
