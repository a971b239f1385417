"""Tests for file reading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from logtint.models import Color
from logtint.reader import parse_line, parse_lines, read_file

if TYPE_CHECKING:
    from pathlib import Path


class TestParseLine:
    def test_blank_line_skipped(self) -> None:
        assert parse_line(1, "") is None
        assert parse_line(1, " \t ") is None

    def test_decodes_segments(self) -> None:
        line = parse_line(3, "\x1b[31mERROR\x1b[0m done")
        assert line is not None
        assert line.line_number == 3
        assert line.raw == "\x1b[31mERROR\x1b[0m done"
        assert line.plain == "ERROR done"
        assert line.segments[0].style.color == Color.RED


class TestParseLines:
    def test_line_numbers_follow_input(self) -> None:
        lines = parse_lines(["a\n", "\n", "b\r\n"])
        assert [(line.line_number, line.raw) for line in lines] == [(1, "a"), (3, "b")]


class TestReadFile:
    def test_read_sample_file(self, sample_log_file: Path) -> None:
        lines = read_file(sample_log_file)
        assert len(lines) == 6  # 8 lines in sample, 2 blank

    def test_file_order_preserved(self, sample_log_file: Path) -> None:
        lines = read_file(sample_log_file)
        assert [line.line_number for line in lines] == [1, 2, 4, 6, 7, 8]

    def test_empty_file(self, tmp_path: Path) -> None:
        empty_file = tmp_path / "empty.log"
        empty_file.write_text("")
        assert read_file(empty_file) == []

    def test_carriage_return_stays_inside_line(self, tmp_path: Path) -> None:
        log_file = tmp_path / "progress.log"
        log_file.write_bytes(b"progress 10%\rprogress 100%\nnext\r\n")
        lines = read_file(log_file)
        assert [(line.line_number, line.raw) for line in lines] == [(1, "progress 10%\rprogress 100%"), (2, "next")]

    def test_invalid_utf8_replaced(self, tmp_path: Path) -> None:
        log_file = tmp_path / "binary.log"
        log_file.write_bytes(b"ok \xff line\n")
        lines = read_file(log_file)
        assert len(lines) == 1
        assert lines[0].raw == "ok � line"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_file(tmp_path / "missing.log")
