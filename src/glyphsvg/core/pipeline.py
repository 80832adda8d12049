"""Per-font glyph rendering.

This module drives one font: it opens the file, resolves the reference
glyph once, and renders every requested character in request order.

Key functions:
- resolve_reference: First usable glyph among ordered candidates
- render_glyph: Normalize one outline into an SVG document
- render_font: Render all requested characters of one font
"""

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path

import structlog

from glyphsvg.config.settings import DEFAULT_REFERENCE_CHARACTERS, CanvasConfig, RenderMode
from glyphsvg.core.transform import transform
from glyphsvg.domain import FontMetrics, GlyphOutline
from glyphsvg.io import FontReader, build_document, transform_attribute

logger = structlog.get_logger("glyphsvg.pipeline")

DocumentResult = tuple[str, ET.Element | None]


def resolve_reference(
    reader: FontReader,
    candidates: Sequence[str] = DEFAULT_REFERENCE_CHARACTERS,
) -> GlyphOutline | None:
    """Find the reference glyph of a font.

    Candidates are tried in order; the first one present in the font with
    a non-degenerate outline wins.

    Args:
        reader: Loaded font reader
        candidates: Candidate characters in priority order

    Returns:
        Reference outline, or None if no candidate is usable
    """
    for character in candidates:
        outline = reader.draw(character)
        if outline is not None and not outline.is_degenerate:
            return outline
    return None


def render_glyph(
    outline: GlyphOutline,
    metrics: FontMetrics,
    reference: GlyphOutline | None,
    canvas: CanvasConfig,
    mode: RenderMode,
) -> ET.Element:
    """Normalize one outline into a canvas-sized SVG document."""
    params = transform(outline, metrics, reference, canvas.available_size, mode)
    return build_document(
        outline,
        transform_attribute(params.offset_x, params.offset_y, params.scale, canvas.margin),
        canvas.size,
    )


def render_font(
    path: Path,
    characters: str,
    mode: RenderMode,
    canvas: CanvasConfig | None = None,
    references: Sequence[str] = DEFAULT_REFERENCE_CHARACTERS,
) -> list[DocumentResult]:
    """Render the requested characters of one font.

    Args:
        path: Font file
        characters: Characters to render, in order
        mode: Normalization policy
        canvas: Canvas configuration (default 512 with an 8 unit margin)
        references: Reference candidates in priority order

    Returns:
        One (character, document) pair per requested character, in request
        order; the document is None when the font has no glyph for it

    Raises:
        FontOpenError: If the font cannot be opened
        MetricsError: If the font metrics are unusable
        GlyphDrawError: If a present glyph cannot be drawn
    """
    canvas = canvas or CanvasConfig()

    with FontReader(path) as reader:
        metrics = reader.metrics
        reference = resolve_reference(reader, references)

        log = logger.bind(path=str(path), mode=mode.value)
        if reference is None:
            log.warning("No reference glyph found", candidates="".join(references))
        else:
            log.debug("Reference glyph resolved", reference=reference.name)

        results: list[DocumentResult] = []
        for character in characters:
            outline = reader.draw(character)
            if outline is None:
                log.debug("Glyph missing", character=character)
                results.append((character, None))
                continue

            results.append(
                (character, render_glyph(outline, metrics, reference, canvas, mode))
            )

    return results
