"""Rich console output helpers for the CLI.

Status and error messages go to stderr; stdout is reserved for SVG
documents when no output directory is given.
"""

from pathlib import Path

from rich.console import Console

from glyphsvg.core import RenderOutcome
from glyphsvg.utils import ScanStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _print_plain(line: str) -> None:
    # Bracketed tags must not be read as rich markup, and paths must not wrap
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_font_status(
    path: Path,
    outcome: RenderOutcome | None,
    error: Exception | None,
) -> None:
    """Print the one-line status of a processed font.

    Args:
        path: Font file
        outcome: Emitted documents, None if nothing was produced
        error: Failure, if processing failed
    """
    if error is not None:
        _print_plain(f"[failure] {path} ({error})")
    elif outcome is not None:
        _print_plain(f"[success] {path}")
    else:
        _print_plain(f"[empty] {path}")


def print_summary(stats: ScanStats) -> None:
    """Print the scan summary line.

    Args:
        stats: Aggregated scan statistics
    """
    _print_plain(
        f"[summary] {stats.succeeded} succeeded, {stats.empty} empty, {stats.failed} failed"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_timing(stats: ScanStats) -> None:
    """Print scan duration and ignored count (verbose mode)."""
    console.print(
        f"  {stats.processed} fonts {SYM_DOT} {stats.ignored} ignored {SYM_DOT} "
        f"{_format_time(stats.duration_seconds)}",
        highlight=False,
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    _print_plain(message)
    if details:
        _print_plain(f"  {details}")
