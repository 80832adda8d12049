"""Configuration settings for glyphsvg."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_REFERENCE_CHARACTERS: tuple[str, ...] = ("X", "0")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class RenderMode(str, Enum):
    """Scale normalization policy."""

    GLOBAL = "global"
    LOCAL = "local"


class CanvasConfig(BaseModel):
    """Square canvas every document is drawn into.

    The canvas is fixed for a run so that documents from unrelated fonts
    share one coordinate space.
    """

    model_config = ConfigDict(frozen=True)

    size: float = Field(
        default=512.0,
        gt=0.0,
        description="Width and height of each document",
    )
    margin: float = Field(
        default=8.0,
        ge=0.0,
        description="Blank border kept on every side of the canvas",
    )

    @model_validator(mode="after")
    def _check_margin(self) -> "CanvasConfig":
        if 2 * self.margin >= self.size:
            raise ValueError(
                f"margin {self.margin} leaves no drawing area on a {self.size} canvas"
            )
        return self

    @property
    def available_size(self) -> float:
        """Side of the drawing area inside the margins."""
        return self.size - 2 * self.margin


class RenderConfig(BaseModel):
    """Configuration for glyph rendering."""

    mode: RenderMode = Field(
        default=RenderMode.GLOBAL,
        description="Scale normalization policy",
    )
    reference_characters: tuple[str, ...] = Field(
        default=DEFAULT_REFERENCE_CHARACTERS,
        min_length=1,
        description="Candidate reference characters, in priority order",
    )

    @field_validator("reference_characters")
    @classmethod
    def _single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for candidate in value:
            if len(candidate) != 1:
                raise ValueError(f"reference candidate {candidate!r} is not a single character")
        return value


class ScanConfig(BaseModel):
    """Configuration for the directory scan."""

    workers: int = Field(
        default=1,
        ge=1,
        description="Maximum number of fonts processed concurrently",
    )
    ignore: tuple[str, ...] = Field(
        default=(),
        description="Glob patterns of paths excluded from the scan",
    )
    extensions: tuple[str, ...] = Field(
        default=("otf", "ttf"),
        description="Font file extensions (case-sensitive, without dot)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class RenderRequest(BaseModel):
    """Immutable description of what to render for every font of a run."""

    model_config = ConfigDict(frozen=True)

    characters: str = Field(min_length=1)
    mode: RenderMode = RenderMode.GLOBAL
    destination: Path | None = None
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    reference_characters: tuple[str, ...] = DEFAULT_REFERENCE_CHARACTERS

    @field_validator("characters")
    @classmethod
    def _deduplicate(cls, value: str) -> str:
        # dict keeps first-occurrence order
        return "".join(dict.fromkeys(value))


class GlyphSvgSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def build_request(self, characters: str, destination: Path | None = None) -> RenderRequest:
        """Create the request shared by every font of a run.

        Args:
            characters: Characters to render, in order
            destination: Output directory, or None for standard output

        Returns:
            Frozen RenderRequest
        """
        return RenderRequest(
            characters=characters,
            mode=self.render.mode,
            destination=destination,
            canvas=self.canvas,
            reference_characters=self.render.reference_characters,
        )
