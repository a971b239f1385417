"""Tests for pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from logtint.models import DEFAULT_STYLE, AppConfig, Color, LogLine, SegmentStyle, StyledSegment


class TestSegmentStyle:
    def test_default(self) -> None:
        assert DEFAULT_STYLE.color == Color.DEFAULT
        assert DEFAULT_STYLE.bold is False

    def test_hashable_and_equal(self) -> None:
        assert SegmentStyle(color=Color.RED) == SegmentStyle(color=Color.RED)
        assert len({SegmentStyle(bold=True), SegmentStyle(bold=True)}) == 1


class TestLogLine:
    def test_plain_text(self) -> None:
        line = LogLine(
            line_number=1,
            raw="\x1b[31mred\x1b[0m text",
            segments=(
                StyledSegment(text="red", style=SegmentStyle(color=Color.RED)),
                StyledSegment(text=" text"),
            ),
        )
        assert line.plain == "red text"

    def test_frozen(self) -> None:
        line = LogLine(line_number=1, raw="x", segments=(StyledSegment(text="x"),))
        with pytest.raises(ValidationError):
            line.raw = "y"  # type: ignore[misc]


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.theme == "textual-dark"
        assert config.log_level == "INFO"
