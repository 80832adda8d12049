"""Routing of rendered documents to files or standard output."""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog
import typer

from glyphsvg.core.pipeline import DocumentResult
from glyphsvg.exceptions import OutputIOError
from glyphsvg.io import DocumentWriter, serialize_document

logger = structlog.get_logger("glyphsvg.router")


@dataclass(frozen=True)
class RenderOutcome:
    """Documents emitted for one font.

    Attributes:
        font_path: Font the documents were rendered from
        documents: Number of documents emitted
        targets: Files written, empty when documents went to stdout
    """

    font_path: Path
    documents: int
    targets: tuple[Path, ...] = ()


class OutputRouter:
    """Sends each present document to its destination.

    With a destination directory, documents are written to
    ``<destination>/<font stem>/<char>-<hex codepoint>.svg``; otherwise
    each document is printed to standard output in a single write.
    """

    def __init__(self, destination: Path | None = None) -> None:
        self.destination = destination

    def route(self, font_path: Path, results: Iterable[DocumentResult]) -> RenderOutcome | None:
        """Emit the documents of one font.

        Args:
            font_path: Font the results were rendered from
            results: (character, document) pairs, documents may be None

        Returns:
            RenderOutcome if at least one document was emitted, else None

        Raises:
            OutputIOError: On the first directory or file write failure
        """
        writer = DocumentWriter(self.destination, font_path) if self.destination else None
        documents = 0
        targets: list[Path] = []

        for character, document in results:
            if document is None:
                continue

            if writer is None:
                typer.echo(serialize_document(document))
            else:
                target = writer.get_output_path(character)
                try:
                    writer.save(character, document)
                except OSError as e:
                    raise OutputIOError(str(target), e.strerror or str(e)) from e
                logger.debug("Document written", path=str(target), character=character)
                targets.append(target)

            documents += 1

        if documents == 0:
            return None
        return RenderOutcome(font_path=font_path, documents=documents, targets=tuple(targets))
