from __future__ import annotations

import re

from ..source.range import join_lines, split_lines

_PADDING = re.compile(r"[ \t\r\n\f\v]*")


def common_padding(text: str) -> str:
    """Shortest leading-whitespace run over non-empty lines."""
    paddings = [_PADDING.match(line).group(0) for line in split_lines(text) if line]
    if not paddings:
        return ""
    return min(paddings, key=len)


def left_shift(text: str) -> str:
    """
    Remove the common leading whitespace from every line.

    Empty lines are ignored when measuring and left alone; lines that do
    not start with the exact common prefix are kept unmodified.
    """
    padding = common_padding(text)
    if not padding:
        return text
    cut = len(padding)
    return join_lines(
        line[cut:] if line.startswith(padding) else line
        for line in split_lines(text)
    )


__all__ = ["common_padding", "left_shift"]
