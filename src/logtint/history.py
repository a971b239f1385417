"""Bounded history of confirmed filter patterns."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

HISTORY_CAPACITY = 10


class PatternHistory:
    """Distinct patterns in confirmation order, oldest evicted first.

    Slots are 1-based: slot 1 is the oldest pattern still kept.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            msg = f"capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._patterns: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._patterns.maxlen or 0

    def add(self, pattern: str) -> bool:
        """Append a pattern unless already present. Returns True if appended."""
        if pattern in self._patterns:
            return False
        self._patterns.append(pattern)
        return True

    def recall(self, slot: int) -> str | None:
        """Get the pattern stored in a 1-based slot, or None if the slot is empty."""
        if 1 <= slot <= len(self._patterns):
            return self._patterns[slot - 1]
        return None

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._patterns
