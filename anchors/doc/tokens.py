"""
Document tokens.

A document is split into an ordered sequence of tokens: plain content,
raw directive bodies found by the scanner, and fully parsed anchors.
Order always follows the order of appearance in the raw text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .anchor import Anchor

# Fixed directive delimiters
OPEN_MARKER = "{{#aa "
CLOSE_MARKER = "}}"


@dataclass(frozen=True)
class Content:
    """Text that contains no directive."""
    text: str
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RawDirective:
    """Body of a `{{#aa ...}}` directive that has not been parsed yet."""
    text: str
    position: int = field(default=0, compare=False)

    def render(self) -> str:
        """Literal directive syntax for an unpromoted directive."""
        return f"{OPEN_MARKER}{self.text} {CLOSE_MARKER}"


@dataclass(frozen=True)
class AnchorToken:
    """Fully parsed directive, ready for linking."""
    anchor: Anchor
    position: int = field(default=0, compare=False)


Token = Union[Content, RawDirective, AnchorToken]


__all__ = ["OPEN_MARKER", "CLOSE_MARKER", "Content", "RawDirective", "AnchorToken", "Token"]
