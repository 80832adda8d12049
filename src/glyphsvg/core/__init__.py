"""Core processing for glyphsvg.

This module contains the core algorithms for:

- Canvas normalization (global and local scale policies)
- Per-font rendering (reference resolution, per-character documents)
- Output routing (per-font directories or standard output)
- Bounded, fail-soft directory scanning

The transform functions are pure; the pipeline opens one font per call and
shares nothing between calls, so fonts can be rendered on parallel workers.

Key functions:
- transform: Compute the canvas mapping for a glyph
- render_font: Render the requested characters of one font
- scan_summarize: Walk a tree and aggregate per-file outcomes

Key classes:
- TransformParams: Offsets and scale of a canvas mapping
- OutputRouter: Writes or prints documents, returns a RenderOutcome
- FontRenderer: Scanner implementation for font files
"""

from glyphsvg.core.pipeline import render_font, render_glyph, resolve_reference
from glyphsvg.core.processor import FontRenderer
from glyphsvg.core.router import OutputRouter, RenderOutcome
from glyphsvg.core.scanner import Scanner, discover, match_ignore, scan_summarize
from glyphsvg.core.transform import (
    TransformParams,
    global_transform,
    local_transform,
    transform,
)

__all__ = [
    # Processor classes
    "FontRenderer",
    # Router classes
    "OutputRouter",
    "RenderOutcome",
    # Scanner
    "Scanner",
    # Transform
    "TransformParams",
    "discover",
    "global_transform",
    "local_transform",
    "match_ignore",
    # Pipeline functions
    "render_font",
    "render_glyph",
    "resolve_reference",
    "scan_summarize",
    "transform",
]
