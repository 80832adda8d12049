"""Logging utilities for glyphsvg."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguration replaces them
_HANDLER_MARK = "_glyphsvg_handler"


@dataclass
class ScanStats:
    """Statistics from a scan run."""

    succeeded: int = 0
    empty: int = 0
    failed: int = 0
    ignored: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def processed(self) -> int:
        """Number of files handed to the processor."""
        return self.succeeded + self.empty + self.failed

    @property
    def duration_seconds(self) -> float:
        """Calculate scan duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_structlog() -> None:
    """Route structlog through stdlib logging with JSON rendering."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def reset_logging() -> None:
    """Remove handlers installed by configure_logging."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so that documents printed on stdout stay
    parseable.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    reset_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    configure_structlog()

    logger = structlog.get_logger("glyphsvg")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class ScanLogger:
    """Logger for tracking scan progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ScanStats()

    def count_ignored(self) -> None:
        """Count a path excluded by an ignore pattern.

        Ignored paths leave no trace in the log, only in the statistics.
        """
        self._stats.ignored += 1

    def log_file_start(self, path: Path) -> None:
        """Log submission of a file."""
        self._logger.debug("Processing file", path=str(path))

    def log_file_complete(self, path: Path, outcome: object) -> None:
        """Log a file that produced an outcome."""
        self._logger.info("File processed", path=str(path), outcome=repr(outcome))
        self._stats.succeeded += 1

    def log_file_empty(self, path: Path) -> None:
        """Log a file processed without any outcome."""
        self._logger.info("File produced no outcome", path=str(path))
        self._stats.empty += 1

    def log_file_error(
        self,
        path: Path,
        error: BaseException,
        traceback: str | None = None,
    ) -> None:
        """Log file processing error."""
        self._logger.info(
            "File processing failed",
            path=str(path),
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.failed += 1
        self._stats.failures.append((str(path), str(error)))

    @property
    def stats(self) -> ScanStats:
        """Get current scan statistics."""
        return self._stats
