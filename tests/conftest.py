"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from logtint.reader import parse_lines

if TYPE_CHECKING:
    from pathlib import Path

    from logtint.models import LogLine

SAMPLE_LINES = [
    "2024-01-15 10:30:00 \x1b[32mINFO\x1b[0m Server started on port 8080",
    "2024-01-15 10:30:01 \x1b[31mERROR\x1b[0m Connection refused",
    "",
    "2024-01-15 10:30:02 \x1b[33mWARN\x1b[0m Slow query (1200ms)",
    "   ",
    "2024-01-15 10:30:03 plain line without color",
    "2024-01-15 10:30:04 \x1b[1mBOLD\x1b[0m \x1b[36mcyan detail\x1b[0m",
    "2024-01-15 10:30:05 \x1b[31mERROR\x1b[0m Timeout after 30s",
]


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Create a temporary log file with sample content."""
    log_file = tmp_path / "test.log"
    log_file.write_text("\n".join(SAMPLE_LINES) + "\n")
    return log_file


@pytest.fixture
def sample_lines() -> list[LogLine]:
    """Decoded sample lines (blank lines dropped)."""
    return parse_lines(SAMPLE_LINES)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config and log files out of the real user directories."""
    monkeypatch.setenv("LOGTINT_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("LOGTINT_LOG_DIR", str(tmp_path / "logs"))
