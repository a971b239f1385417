"""Pydantic models for logtint."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Color(StrEnum):
    """Foreground color selected by an SGR code."""

    DEFAULT = "default"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"


class SegmentStyle(BaseModel):
    """Style applied to a run of text."""

    model_config = ConfigDict(frozen=True)

    color: Color = Color.DEFAULT
    bold: bool = False


DEFAULT_STYLE = SegmentStyle()


class StyledSegment(BaseModel):
    """A run of text sharing one style."""

    model_config = ConfigDict(frozen=True)

    text: str
    style: SegmentStyle = DEFAULT_STYLE


class LogLine(BaseModel):
    """A single non-empty log line with its decoded segments."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    raw: str
    segments: tuple[StyledSegment, ...]

    @property
    def plain(self) -> str:
        """Line text with escape sequences stripped."""
        return "".join(segment.text for segment in self.segments)


class AppConfig(BaseModel):
    """Application configuration read from disk."""

    theme: str = "textual-dark"
    log_level: str = "INFO"
