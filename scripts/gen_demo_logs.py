"""Generate an ANSI-colored demo log file.

Usage:
    uv run python scripts/gen_demo_logs.py [COUNT] > demo.log
"""

# ruff: noqa: S311, PLR2004, T201
from __future__ import annotations

import random
import sys
from datetime import UTC, datetime, timedelta

ESC = "\x1b"

LEVEL_CODES = {
    "DEBUG": "36",
    "INFO": "32",
    "WARN": "33",
    "ERROR": "31",
}

COMPONENTS = ["api", "worker", "scheduler", "cache"]

EVENTS = [
    ("INFO", "Request processed in {ms}ms"),
    ("INFO", "Health check passed"),
    ("DEBUG", "Cache hit for key user:{n}"),
    ("WARN", "Slow query on table orders ({ms}ms)"),
    ("ERROR", "Connection refused to 10.0.0.{n}:5432"),
]


def gen_line(ts: datetime, component: str, level: str, message: str) -> str:
    code = LEVEL_CODES[level]
    return (
        f"{ts.isoformat(timespec='milliseconds')} "
        f"{ESC}[{code}m{level:<5}{ESC}[0m "
        f"{ESC}[1m[{component}]{ESC}[0m "
        f"{ESC}[34m{message}{ESC}[0m"
    )


def main() -> None:
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 500
    base = datetime.now(tz=UTC) - timedelta(hours=1)

    for i in range(count):
        ts = base + timedelta(seconds=i * 2 + random.uniform(0, 1))
        level, template = random.choice(EVENTS)
        message = template.format(ms=random.randint(1, 3000), n=random.randint(1, 254))
        print(gen_line(ts, random.choice(COMPONENTS), level, message))
        if i % 50 == 49:
            print()


if __name__ == "__main__":
    main()
