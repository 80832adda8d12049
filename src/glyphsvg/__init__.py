"""glyphsvg - Render font glyphs into normalized SVG documents.

glyphsvg is a CLI tool that walks a directory tree for TrueType/OpenType
fonts and draws selected characters of each font onto a fixed-size square
canvas, scaled and positioned consistently across unrelated fonts.

Example:
    $ glyphsvg --path fonts --characters AB --output out

This will create out/<font>/A-0x41.svg and out/<font>/B-0x42.svg for every
font under fonts/ that has glyphs for A and B.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
