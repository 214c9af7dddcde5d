"""
Directive grammar.

    body     ::= ["(" decoration ")"] ws* path strategy
    strategy ::= <end>                      -> Full
               | "#" query-anchor           -> Query
               | ":" digits ":" digits      -> Between (sorted)
               | ":" digits ":"             -> HereDown
               | "::" digits                -> DownTo
               | ":" digits                 -> ThisLine
               | ":" name                   -> Named

The path runs up to the first `:` or `#` when a strategy suffix follows,
otherwise up to the next whitespace. The whole body must be consumed,
apart from surrounding whitespace.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .anchor import (
    Anchor, Between, Decoration, DownTo, Full, HereDown, LeftShift, Link, Named,
    NoDecoration, Query, Strategy, Template, ThisLine,
)
from .query_anchor import parse_query_anchor
from ..errors import DirectiveSyntaxError

_DECORATION = re.compile(r"\((<|[A-Za-z0-9]+)\)")
_BETWEEN = re.compile(r":([0-9]+):([0-9]+)")
_HERE_DOWN = re.compile(r":([0-9]+):")
_DOWN_TO = re.compile(r"::([0-9]+)")
_THIS_LINE = re.compile(r":([0-9]+)")
_NAMED = re.compile(r":([A-Za-z0-9_\-]+)")

_STRATEGY_MARKERS = ":#"


def _between(m: re.Match) -> Strategy:
    return Between(start=int(m.group(1)), end=int(m.group(2)))


def _here_down(m: re.Match) -> Strategy:
    return HereDown(int(m.group(1)))


def _down_to(m: re.Match) -> Strategy:
    return DownTo(int(m.group(1)))


def _this_line(m: re.Match) -> Strategy:
    return ThisLine(int(m.group(1)))


def _named(m: re.Match) -> Strategy:
    return Named(m.group(1))


# Line-based alternatives in precedence order; each must consume the whole suffix
_LINE_STRATEGIES: List[Tuple[re.Pattern, Callable[[re.Match], Strategy]]] = [
    (_BETWEEN, _between),
    (_HERE_DOWN, _here_down),
    (_DOWN_TO, _down_to),
    (_THIS_LINE, _this_line),
    (_NAMED, _named),
]


class DirectiveParser:
    """Parses one directive body into an Anchor."""

    def __init__(self, source: str):
        self.source = source

    def parse(self) -> Anchor:
        rest = self.source.lstrip()
        decoration, rest = self._parse_decoration(rest)
        rest = rest.strip()
        path, suffix = self._parse_path(rest)
        strategy = self._parse_strategy(suffix)
        return Anchor(link=Link(path=Path(path), strategy=strategy), decoration=decoration)

    # ---------------------------- decoration ---------------------------- #

    @staticmethod
    def _parse_decoration(text: str) -> Tuple[Decoration, str]:
        m = _DECORATION.match(text)
        if m is None:
            return NoDecoration(), text
        value = m.group(1)
        decoration: Decoration = LeftShift() if value == "<" else Template(value)
        return decoration, text[m.end():]

    # ---------------------------- path ---------------------------- #

    def _parse_path(self, text: str) -> Tuple[str, str]:
        cut = self._first_marker(text)
        if cut is not None:
            path, suffix = text[:cut], text[cut:]
        else:
            parts = text.split(None, 1)
            path = parts[0] if parts else ""
            if len(parts) > 1:
                raise self._error(parts[1], "unexpected input after path")
            suffix = ""

        if not path:
            raise self._error(text, "missing path")
        return path, suffix

    @staticmethod
    def _first_marker(text: str) -> Optional[int]:
        positions = [i for i in (text.find(ch) for ch in _STRATEGY_MARKERS) if i >= 0]
        return min(positions) if positions else None

    # ---------------------------- strategy ---------------------------- #

    def _parse_strategy(self, suffix: str) -> Strategy:
        if not suffix:
            return Full()

        if suffix.startswith("#"):
            return Query(parse_query_anchor(suffix[1:]))

        for pattern, build in _LINE_STRATEGIES:
            m = pattern.fullmatch(suffix)
            if m is not None:
                return build(m)

        raise self._error(suffix, "unrecognized line selection")

    def _error(self, remainder: str, message: str) -> DirectiveSyntaxError:
        return DirectiveSyntaxError(self.source, remainder, message)


def parse_anchor(source: str) -> Anchor:
    """Parse a directive body. Raises DirectiveSyntaxError."""
    return DirectiveParser(source).parse()


__all__ = ["DirectiveParser", "parse_anchor"]
