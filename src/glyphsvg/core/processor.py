"""Font rendering plugged into the directory scan.

This module connects the scan to the glyph pipeline and the output
router: it selects font files and turns each one into documents.

Key components:
- StatusCallback: Signature of the per-font status reporter
- FontRenderer: Scanner implementation for font files
"""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import ClassVar

import structlog

from glyphsvg.config import RenderRequest
from glyphsvg.core.pipeline import render_font
from glyphsvg.core.router import OutputRouter, RenderOutcome

# callback(font_path, outcome, error); error is set only on failure
StatusCallback = Callable[[Path, RenderOutcome | None, Exception | None], None]

logger = structlog.get_logger("glyphsvg.processor")


class FontRenderer:
    """Renders the requested characters of every scanned font file.

    Example:
        renderer = FontRenderer(status_callback=print_font_status)
        stats = scan_summarize(Path("fonts"), renderer, request, workers=4)
    """

    EXTENSIONS: ClassVar[tuple[str, ...]] = ("otf", "ttf")

    def __init__(
        self,
        extensions: Sequence[str] | None = None,
        status_callback: StatusCallback | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            extensions: Accepted file extensions without the dot (case-sensitive)
            status_callback: Optional callback(font_path, outcome, error)
                invoked once per processed font
        """
        self.extensions = tuple(extensions) if extensions is not None else self.EXTENSIONS
        self.status_callback = status_callback

    def filter(self, path: Path) -> bool:
        """Accept files whose extension is exactly one of the font extensions."""
        return path.suffix[1:] in self.extensions

    def process(self, path: Path, request: RenderRequest) -> RenderOutcome | None:
        """Render one font and route its documents.

        Args:
            path: Font file
            request: Shared, frozen render request

        Returns:
            RenderOutcome if at least one document was emitted, else None

        Raises:
            GlyphSvgError: If the font cannot be read or its output cannot
                be written; reported through the status callback first
        """
        log = logger.bind(path=str(path))
        log.debug("Rendering font", characters=request.characters, mode=request.mode.value)

        try:
            results = render_font(
                path,
                request.characters,
                request.mode,
                canvas=request.canvas,
                references=request.reference_characters,
            )
            outcome = OutputRouter(request.destination).route(path, results)
        except Exception as e:
            log.debug("Font failed", error=str(e), error_type=type(e).__name__)
            self._report(path, None, e)
            raise

        self._report(path, outcome, None)
        return outcome

    def _report(
        self,
        path: Path,
        outcome: RenderOutcome | None,
        error: Exception | None,
    ) -> None:
        if self.status_callback is not None:
            self.status_callback(path, outcome, error)
