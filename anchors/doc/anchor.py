"""
Anchor model.

An anchor is a fully parsed directive: a link (path + line selection
strategy) and a decoration applied to the selected text. Strategy and
decoration are closed sets of immutable variants; consumers dispatch on
the concrete variant type (see STRATEGY_TYPES / DECORATION_TYPES).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union


# ---------------------------- Strategy ---------------------------- #

@dataclass(frozen=True)
class Full:
    """Whole file: no `:` or `#` after the path."""
    kind = "full"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class ThisLine:
    """Single line, `:<n>`."""
    line: int
    kind = "this_line"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "line": self.line}


@dataclass(frozen=True)
class HereDown:
    """From line n to the end of the file, `:<n>:`."""
    line: int
    kind = "here_down"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "line": self.line}


@dataclass(frozen=True)
class DownTo:
    """From the first line down to line n, `::<n>`."""
    line: int
    kind = "down_to"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "line": self.line}


@dataclass(frozen=True)
class Between:
    """Inclusive line range, `:<a>:<b>`. Always start <= end."""
    start: int
    end: int
    kind = "between"

    def __post_init__(self) -> None:
        if self.start > self.end:
            lo, hi = self.end, self.start
            object.__setattr__(self, "start", lo)
            object.__setattr__(self, "end", hi)

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "start": self.start, "end": self.end}


@dataclass(frozen=True)
class Named:
    """Region between `ANCHOR: name` and `ANCHOR_END: name` markers, `:<name>`."""
    name: str
    kind = "named"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "name": self.name}


@dataclass(frozen=True)
class QueryAnchor:
    """Named structural query with string bindings, `name?key=value&...`."""
    name: str
    bindings: Dict[str, str] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.bindings.items()))))


@dataclass(frozen=True)
class Query:
    """Structural query selection, `#<query-anchor>`."""
    anchor: QueryAnchor
    kind = "query"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "name": self.anchor.name, "bindings": dict(self.anchor.bindings)}


Strategy = Union[Full, ThisLine, HereDown, DownTo, Between, Named, Query]
STRATEGY_TYPES: Tuple[type, ...] = (Full, ThisLine, HereDown, DownTo, Between, Named, Query)


# ---------------------------- Decoration ---------------------------- #

@dataclass(frozen=True)
class NoDecoration:
    """Leave the selected text alone."""
    kind = "none"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class LeftShift:
    """Strip the common leading whitespace of all lines, `(<)`."""
    kind = "left_shift"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class Template:
    """Render the linkage through a registered template, `(name)`."""
    name: str
    kind = "template"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "name": self.name}


Decoration = Union[NoDecoration, LeftShift, Template]
DECORATION_TYPES: Tuple[type, ...] = (NoDecoration, LeftShift, Template)


# ---------------------------- Anchor ---------------------------- #

@dataclass(frozen=True)
class Link:
    path: Path
    strategy: Strategy


@dataclass(frozen=True)
class Anchor:
    link: Link
    decoration: Decoration = field(default_factory=NoDecoration)

    @classmethod
    def parse(cls, body: str) -> "Anchor":
        """Parse a directive body. Raises DirectiveSyntaxError."""
        from .parser import parse_anchor
        return parse_anchor(body)

    def resolved_against(self, base_dir: Path) -> "Anchor":
        """Copy with a relative link path joined onto base_dir."""
        if self.link.path.is_absolute():
            return self
        link = Link(path=base_dir / self.link.path, strategy=self.link.strategy)
        return Anchor(link=link, decoration=self.decoration)


__all__ = [
    "Full", "ThisLine", "HereDown", "DownTo", "Between", "Named", "Query", "QueryAnchor",
    "Strategy", "STRATEGY_TYPES",
    "NoDecoration", "LeftShift", "Template", "Decoration", "DECORATION_TYPES",
    "Link", "Anchor",
]
