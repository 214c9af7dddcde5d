"""
Line extraction helpers. All line numbers are 1-indexed and inclusive.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, List, Optional


def split_lines(text: str) -> List[str]:
    """
    Split on `\\n`, dropping a trailing `\\r` from each line.
    A final newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def take_lines(text: str, start: int, end: Optional[int] = None) -> str:
    """
    Lines [start, end] of text (end=None → to the end of text).
    Ranges past the end of the text are silently truncated.
    """
    start = max(start, 1)
    stop = None if end is None else max(end, start - 1)
    return join_lines(islice(split_lines(text), start - 1, stop))


def nth_line(text: str, line: int) -> Optional[str]:
    """The single line at position `line`, None when out of range."""
    if line < 1:
        return None
    lines = split_lines(text)
    if line > len(lines):
        return None
    return lines[line - 1]


@dataclass(frozen=True)
class SourceRange:
    """Inclusive 1-indexed line span found by a structural query."""
    start: int
    end: int

    def fetch_lines(self, text: str) -> str:
        return take_lines(text, self.start, self.end)


__all__ = ["split_lines", "join_lines", "take_lines", "nth_line", "SourceRange"]
