"""
Syntax query engine.

Queries are registered per (language, name) as moustache templates over
tree-sitter query syntax, e.g.

    ((comment)* . (class name: (constant) @name (#eq? @name "{{ name }}"))) @match

At lookup time the template is rendered with the query-anchor bindings,
compiled for the source's language and run against its tree. The first
match in traversal order wins.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Mapping, Optional

import jinja2
from tree_sitter import Node

from .file import SourceFile
from .grammar import Match, grammar_for
from .lang import Language
from .range import SourceRange
from ..errors import TemplateParseError, TemplateRenderError
from ..templating import make_environment

logger = logging.getLogger(__name__)


QUERY_ENV = make_environment()

# Grammars that report these block nodes with an exclusive end row
# (one past the true last line).
EXCLUSIVE_END_KINDS: Dict[Language, FrozenSet[str]] = {
    Language.MARKDOWN: frozenset({
        "section",
        "paragraph",
        "indented_code_block",
        "block_quote",
        "thematic_break",
        "list",
        "fenced_code_block",
        "html_block",
    }),
}


def match_range(match: Match, language: Language) -> Optional[SourceRange]:
    """
    Line span covered by all captures of a match.

    start = smallest start row, end = largest end row; the capture that
    produced the end row decides the exclusive-end correction.
    """
    _, captures = match
    nodes: List[Node] = [node for group in captures.values() for node in group]
    if not nodes:
        return None

    start = min(node.start_point[0] for node in nodes)
    governing = max(nodes, key=lambda node: node.end_point[0])
    end = governing.end_point[0]
    if governing.type in EXCLUSIVE_END_KINDS.get(language, frozenset()):
        end -= 1

    return SourceRange(start=start + 1, end=max(end, start) + 1)


class QueryTemplate:
    """A registered, parameterized structural query for one language."""

    def __init__(self, language: Language, name: str, template: str):
        self.language = language
        self.name = name
        self.text = template
        try:
            self._template = QUERY_ENV.from_string(template)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateParseError(self.qualified_name, e) from e

    @property
    def qualified_name(self) -> str:
        return f"{self.language.value}.{self.name}"

    def render(self, bindings: Mapping[str, str]) -> str:
        try:
            return self._template.render(dict(bindings))
        except jinja2.TemplateError as e:
            raise TemplateRenderError(self.qualified_name, e) from e

    def find(self, source: SourceFile, bindings: Mapping[str, str]) -> Optional[SourceRange]:
        """
        First match of the rendered query in source, as a line span.

        Returns None when the source has no tree or nothing matches.

        Raises:
            TemplateRenderError: bindings could not be rendered into the query
            QuerySyntaxError: rendered query does not compile
        """
        if source.tree is None:
            return None

        raw = self.render(bindings)
        grammar = grammar_for(self.language)
        query = grammar.compile_query(raw)
        matches = grammar.run(query, source.tree)
        if not matches:
            return None
        return match_range(matches[0], self.language)


class QueryRegistry:
    """
    (language, name) → QueryTemplate.

    Must be fully populated before concurrent resolution starts.
    """

    def __init__(self) -> None:
        self._queries: Dict[Language, Dict[str, QueryTemplate]] = {}

    def register(self, language: Language, name: str, template: str) -> QueryTemplate:
        """Compile and register a query template, replacing any previous one."""
        query = QueryTemplate(language, name, template)
        self._queries.setdefault(language, {})[name] = query
        logger.debug("registered query %s", query.qualified_name)
        return query

    def fetch(self, language: Language, name: str) -> Optional[QueryTemplate]:
        return self._queries.get(language, {}).get(name)

    def find(self, name: str, source: SourceFile, bindings: Mapping[str, str]) -> Optional[SourceRange]:
        """Run the query registered under name for the source's language."""
        if source.language is None or source.tree is None:
            return None
        query = self.fetch(source.language, name)
        if query is None:
            return None
        return query.find(source, bindings)

    def names(self, language: Language) -> List[str]:
        return sorted(self._queries.get(language, {}))


__all__ = ["QUERY_ENV", "EXCLUSIVE_END_KINDS", "match_range", "QueryTemplate", "QueryRegistry"]
