"""Command-line interface for glyphsvg.

This module provides the CLI using Typer with rich output on stderr,
keeping stdout free for SVG documents.

Key features:
- One status line per font ([success], [empty], [failure])
- Summary line after the scan
- Descriptive errors for invalid options before any scanning
"""

from glyphsvg.cli.app import cli, main

__all__ = ["cli", "main"]
