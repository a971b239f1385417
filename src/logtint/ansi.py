"""ANSI SGR escape decoding into styled segments."""

from __future__ import annotations

from logtint.models import DEFAULT_STYLE, Color, SegmentStyle, StyledSegment

ESC = "\x1b"

# SGR code -> style it switches to. Codes replace the running style.
_SGR_STYLES: dict[str, SegmentStyle] = {
    "31": SegmentStyle(color=Color.RED),
    "32": SegmentStyle(color=Color.GREEN),
    "33": SegmentStyle(color=Color.YELLOW),
    "34": SegmentStyle(color=Color.BLUE),
    "35": SegmentStyle(color=Color.MAGENTA),
    "36": SegmentStyle(color=Color.CYAN),
    "1": SegmentStyle(bold=True),
    "0": DEFAULT_STYLE,
}


def _is_terminator(char: str) -> bool:
    return char.isascii() and char.isalpha()


def decode(line: str) -> tuple[StyledSegment, ...]:
    """Split a raw line into styled segments.

    ``ESC [`` starts a code that runs up to the first ASCII letter. Known codes
    switch the style, anything else leaves it as is. Text between codes is
    emitted with the style in effect when it was read.
    """
    segments: list[StyledSegment] = []
    pending: list[str] = []
    style = DEFAULT_STYLE
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == ESC and i + 1 < length and line[i + 1] == "[":
            if pending:
                segments.append(StyledSegment(text="".join(pending), style=style))
                pending.clear()

            i += 2
            start = i
            while i < length and not _is_terminator(line[i]):
                i += 1
            code = line[start:i]
            i += 1  # skip terminator
            style = _SGR_STYLES.get(code, style)
        else:
            pending.append(char)
            i += 1

    if pending:
        segments.append(StyledSegment(text="".join(pending), style=style))

    return tuple(segments)
