"""Pydantic models for grid configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

DEFAULT_WIDTH = 80
DEFAULT_DELIMITER = "-"


class GridStyle(BaseModel):
    """Colors applied when writing a grid to a terminal.

    Each value is a rich style definition such as ``"cyan"`` or
    ``"bold white on black"``. ``None`` leaves that section unstyled.
    """

    model_config = ConfigDict(validate_assignment=True)

    header: str | None = None
    delimiter: str | None = None
    primary: str | None = None
    secondary: str | None = None

    @field_validator("header", "delimiter", "primary", "secondary")
    @classmethod
    def validate_style(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            Style.parse(v)
        except StyleSyntaxError as e:
            raise ValueError(f"invalid style {v!r}: {e}") from e
        return v


class GridConfig(BaseModel):
    """Rendering configuration for a grid.

    Attributes:
        fallback_width: Width budget used when the terminal size is unknown.
        delimiter_char: Character repeated to draw the line under the headers.
        force_terminal: Force (or suppress) ANSI styling when writing.
            ``None`` lets rich detect the stream.
        style: Section colors.
    """

    model_config = ConfigDict(validate_assignment=True)

    fallback_width: int = Field(default=DEFAULT_WIDTH, gt=0)
    delimiter_char: str = DEFAULT_DELIMITER
    force_terminal: bool | None = None
    style: GridStyle = Field(default_factory=GridStyle)

    @field_validator("delimiter_char")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be a single character")
        return v
