"""Single log line rendering from decoded segments."""

from __future__ import annotations

from functools import cache

from rich.segment import Segment
from rich.style import Style
from textual.strip import Strip

from logtint.models import Color, LogLine, SegmentStyle


@cache
def to_rich_style(style: SegmentStyle) -> Style:
    """Convert a decoded segment style to a Rich style."""
    color = None if style.color == Color.DEFAULT else style.color.value
    return Style(color=color, bold=style.bold or None)


def render_segments(line: LogLine, base_style: Style | None = None) -> list[Segment]:
    """Render a log line as Rich segments, one per decoded segment."""
    base = base_style or Style()
    return [Segment(segment.text, base + to_rich_style(segment.style)) for segment in line.segments]


def render_line_strip(line: LogLine, width: int, base_style: Style | None = None) -> Strip:
    """Render a log line as a strip cropped and padded to ``width`` cells."""
    strip = Strip(render_segments(line, base_style))
    return strip.crop(0, width).extend_cell_length(width, base_style)
