"""Log file reading."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from logtint.ansi import decode
from logtint.models import LogLine

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)


def parse_line(line_number: int, raw: str) -> LogLine | None:
    """Decode a raw line, or return None for blank lines."""
    if not raw.strip():
        return None
    return LogLine(line_number=line_number, raw=raw, segments=decode(raw))


def parse_lines(raw_lines: Iterable[str]) -> list[LogLine]:
    """Decode raw lines, skipping blank ones. Line numbers follow the input."""
    lines: list[LogLine] = []
    for i, raw_line in enumerate(raw_lines, start=1):
        line = parse_line(i, raw_line.rstrip("\r\n"))
        if line is not None:
            lines.append(line)
    return lines


def read_file(path: Path) -> list[LogLine]:
    """Read and decode all non-blank lines of a log file.

    Raises OSError if the file cannot be opened or read.
    """
    with path.open(encoding="utf-8", errors="replace", newline="\n") as f:
        lines = parse_lines(f)
    logger.info("Loaded %d lines from %s", len(lines), path)
    return lines
