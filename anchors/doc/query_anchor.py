"""
Query-anchor grammar.

    query-anchor ::= name ["?" binding ("&" binding)*]
    binding      ::= key "=" value

Keys are ASCII alphanumeric. Values are runs of alphanumerics, blanks,
a fixed punctuation set and backslash escapes; a value ends at an
unescaped `&` or at the end of input. Later duplicates of a key win.
"""

from __future__ import annotations

import string
from typing import Dict

from .anchor import QueryAnchor
from ..errors import QueryAnchorSyntaxError

_ALNUM = frozenset(string.ascii_letters + string.digits)
_BLANK = frozenset(" \t")
_PUNCT = frozenset("@!\"'$%^*_-+()<>[]{}/|;")
_ESCAPABLE = frozenset("\\=&?#:")

_VALUE_CHARS = _ALNUM | _BLANK | _PUNCT


class QueryAnchorParser:
    """Cursor-based parser for a single query anchor."""

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def parse(self) -> QueryAnchor:
        name = self._parse_name()
        bindings: Dict[str, str] = {}

        if self._is_at_end():
            return QueryAnchor(name=name, bindings=bindings)

        self._expect("?")
        while not self._is_at_end():
            key = self._parse_key()
            self._expect("=")
            bindings[key] = self._parse_value()
            if self._is_at_end():
                break
            self._expect("&")

        return QueryAnchor(name=name, bindings=bindings)

    # ---------------------------- pieces ---------------------------- #

    def _parse_name(self) -> str:
        end = self.text.find("?")
        if end < 0:
            end = len(self.text)
        name = self.text[:end]
        if not name:
            raise self._error("missing query name")
        self.position = end
        return name

    def _parse_key(self) -> str:
        start = self.position
        while not self._is_at_end() and self._current() in _ALNUM:
            self.position += 1
        if self.position == start:
            raise self._error("expected binding key")
        return self.text[start:self.position]

    def _parse_value(self) -> str:
        chars = []
        while not self._is_at_end():
            ch = self._current()
            if ch == "&":
                break
            if ch == "\\":
                nxt = self.text[self.position + 1:self.position + 2]
                if nxt not in _ESCAPABLE:
                    raise self._error("invalid escape in binding value")
                chars.append(nxt)
                self.position += 2
                continue
            if ch not in _VALUE_CHARS:
                raise self._error(f"character {ch!r} not allowed in binding value")
            chars.append(ch)
            self.position += 1
        if not chars:
            raise self._error("expected binding value")
        return "".join(chars)

    # ---------------------------- helpers ---------------------------- #

    def _current(self) -> str:
        return self.text[self.position]

    def _is_at_end(self) -> bool:
        return self.position >= len(self.text)

    def _expect(self, literal: str) -> None:
        if not self.text.startswith(literal, self.position):
            raise self._error(f"expected {literal!r}")
        self.position += len(literal)

    def _error(self, message: str) -> QueryAnchorSyntaxError:
        return QueryAnchorSyntaxError(self.text, self.text[self.position:], message)


def parse_query_anchor(text: str) -> QueryAnchor:
    """Parse `name?key=value&...`. Raises QueryAnchorSyntaxError."""
    return QueryAnchorParser(text).parse()


__all__ = ["QueryAnchorParser", "parse_query_anchor"]
