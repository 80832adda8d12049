"""Font and document I/O layer for glyphsvg.

This module handles reading font files using fonttools and writing SVG
documents. It provides a clean abstraction layer between fonttools and
the domain models.

Key responsibilities:
- Load TTF/OTF fonts and their metrics
- Draw glyphs by character into domain outlines
- Build and serialize SVG documents
- Output file naming convention

Key classes:
- FontReader: Load fonts and draw glyphs
- DocumentWriter: Save documents under a per-font directory
"""

from glyphsvg.io.reader import FontReader
from glyphsvg.io.writer import (
    DocumentWriter,
    build_document,
    document_filename,
    format_number,
    serialize_document,
    transform_attribute,
)

__all__ = [
    "DocumentWriter",
    "FontReader",
    "build_document",
    "document_filename",
    "format_number",
    "serialize_document",
    "transform_attribute",
]
