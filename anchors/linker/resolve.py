"""
Strategy resolver: selects the text a strategy points at in a source file.

Resolution never raises for "nothing here" outcomes (line out of range,
missing marker, no query match, unsupported language); those yield None
or empty text. Broken query templates still raise.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..doc.anchor import Between, DownTo, Full, HereDown, Named, Query, Strategy, ThisLine
from ..doc.named import region_lines
from ..source.file import SourceFile
from ..source.query import QueryRegistry
from ..source.range import join_lines, nth_line, split_lines, take_lines

Resolver = Callable[[Strategy, SourceFile, QueryRegistry], Optional[str]]


def _full(strategy: Full, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    return source.contents


def _this_line(strategy: ThisLine, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    return nth_line(source.contents, strategy.line)


def _here_down(strategy: HereDown, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    return take_lines(source.contents, strategy.line)


def _down_to(strategy: DownTo, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    return take_lines(source.contents, 1, strategy.line)


def _between(strategy: Between, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    return take_lines(source.contents, strategy.start, strategy.end)


def _named(strategy: Named, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    return join_lines(region_lines(strategy.name, split_lines(source.contents)))


def _query(strategy: Query, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    found = queries.find(strategy.anchor.name, source, strategy.anchor.bindings)
    if found is None:
        return None
    return found.fetch_lines(source.contents)


RESOLVERS: Dict[type, Resolver] = {
    Full: _full,
    ThisLine: _this_line,
    HereDown: _here_down,
    DownTo: _down_to,
    Between: _between,
    Named: _named,
    Query: _query,
}


def resolve(strategy: Strategy, source: SourceFile, queries: QueryRegistry) -> Optional[str]:
    """Text selected by strategy, or None when nothing applies."""
    handler = RESOLVERS.get(type(strategy))
    if handler is None:
        raise TypeError(f"unsupported strategy: {strategy!r}")
    return handler(strategy, source, queries)


__all__ = ["RESOLVERS", "resolve"]
