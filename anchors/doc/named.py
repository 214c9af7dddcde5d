"""
Named region markers.

A region opens on a line containing `ANCHOR: <name>` and closes on a line
containing `ANCHOR_END: <name>`. Markers may sit anywhere on the line, e.g.
behind a comment prefix. The name must end at a non-name character.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, List, Pattern, Tuple

START_TAG = "ANCHOR:"
END_TAG = "ANCHOR_END:"


@lru_cache(maxsize=256)
def _markers(name: str) -> Tuple[Pattern[str], Pattern[str]]:
    tail = re.escape(name) + r"(?![A-Za-z0-9_\-])"
    return (
        re.compile(re.escape(START_TAG) + r"\s+" + tail),
        re.compile(re.escape(END_TAG) + r"\s+" + tail),
    )


def opens(name: str, line: str) -> bool:
    return _markers(name)[0].search(line) is not None


def closes(name: str, line: str) -> bool:
    return _markers(name)[1].search(line) is not None


def region_lines(name: str, lines: Iterable[str]) -> List[str]:
    """
    Lines strictly between the first start marker and the next end marker.

    No start marker → empty list. No end marker → runs to the end.
    """
    out: List[str] = []
    inside = False
    for line in lines:
        if not inside:
            inside = opens(name, line)
            continue
        if closes(name, line):
            break
        out.append(line)
    return out


__all__ = ["START_TAG", "END_TAG", "opens", "closes", "region_lines"]
