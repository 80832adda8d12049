"""CLI application entry point for glyphsvg.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphsvg import __version__
from glyphsvg.cli.output import (
    console,
    print_error,
    print_font_status,
    print_summary,
    print_timing,
)
from glyphsvg.config import (
    CanvasConfig,
    GlyphSvgSettings,
    LoggingConfig,
    RenderConfig,
    RenderMode,
    ScanConfig,
)
from glyphsvg.core import FontRenderer, scan_summarize
from glyphsvg.exceptions import GlyphSvgError
from glyphsvg.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphsvg",
    help="Render characters of every font under a directory into normalized SVG glyphs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphsvg[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def draw(
    path: Annotated[
        Path,
        typer.Option(
            "--path",
            help="Root directory to scan for .otf/.ttf files",
            exists=True,
            file_okay=False,
            dir_okay=True,
            show_default=False,
        ),
    ],
    characters: Annotated[
        str,
        typer.Option(
            "--characters",
            "-c",
            help="Characters to render, in order",
            show_default=False,
        ),
    ],
    mode: Annotated[
        RenderMode,
        typer.Option(
            "--mode",
            "-m",
            help="Scale normalization (global: per font, local: per glyph)",
            case_sensitive=False,
        ),
    ] = RenderMode.GLOBAL,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory (default: print documents to stdout)",
            file_okay=False,
        ),
    ] = None,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Number of fonts processed in parallel",
            min=1,
        ),
    ] = 1,
    ignore: Annotated[
        list[str] | None,
        typer.Option(
            "--ignore",
            help="Glob pattern of paths to skip (repeatable)",
            show_default=False,
        ),
    ] = None,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            help="Width and height of each document",
            min=1.0,
        ),
    ] = 512.0,
    margin: Annotated[
        float,
        typer.Option(
            "--margin",
            help="Blank border on every side of the canvas",
            min=0.0,
        ),
    ] = 8.0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print timing after the summary",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render characters of every font under a directory into SVG glyphs.

    Each document is a square canvas holding one glyph, scaled and
    positioned consistently across fonts.

    Example:
        glyphsvg --path fonts --characters ABC --output out

    This writes out/<font>/A-0x41.svg, B-0x42.svg and C-0x43.svg for every
    font that has those glyphs.
    """
    if not characters:
        print_error("--characters must not be empty")
        raise typer.Exit(code=1)

    try:
        settings = GlyphSvgSettings(
            canvas=CanvasConfig(size=size, margin=margin),
            render=RenderConfig(mode=mode),
            scan=ScanConfig(workers=workers, ignore=tuple(ignore or ())),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
        request = settings.build_request(characters, destination=output)
    except ValidationError as e:
        errors = "; ".join(error["msg"] for error in e.errors())
        print_error("Invalid options", details=errors)
        raise typer.Exit(code=1) from None

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    renderer = FontRenderer(
        extensions=settings.scan.extensions,
        status_callback=print_font_status,
    )

    try:
        stats = scan_summarize(
            path,
            renderer,
            request,
            workers=settings.scan.workers,
            ignore=settings.scan.ignore,
        )
    except KeyboardInterrupt:
        print_error("Cancelled")
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except GlyphSvgError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_summary(stats)
    if verbose:
        print_timing(stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
