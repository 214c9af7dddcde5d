"""
Tree-sitter capability per language.

Each supported language gets one Grammar that can parse text into a tree,
compile a structural query and run it. Grammar packages are imported
lazily on first use; a language whose grammar cannot be constructed
raises LanguageError from here and is treated as "no syntax tree" by
callers.
"""

from __future__ import annotations

import importlib
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tree_sitter import Language as TSLanguage, Node, Parser, Query, QueryCursor, QueryError, Tree

from .lang import Language
from ..errors import LanguageError, QuerySyntaxError

# (pattern_index, {capture_name: [nodes]}) as produced by QueryCursor.matches
Match = Tuple[int, Dict[str, List[Node]]]


@dataclass(frozen=True)
class _GrammarSpec:
    module: str
    function: str = "language"


_SPECS: Dict[Language, _GrammarSpec] = {
    Language.RUBY: _GrammarSpec("tree_sitter_ruby"),
    Language.RUST: _GrammarSpec("tree_sitter_rust"),
    Language.TOML: _GrammarSpec("tree_sitter_toml"),
    Language.JAVASCRIPT: _GrammarSpec("tree_sitter_javascript"),
    Language.ELIXIR: _GrammarSpec("tree_sitter_elixir"),
    Language.JSON: _GrammarSpec("tree_sitter_json"),
    Language.MARKDOWN: _GrammarSpec("tree_sitter_markdown"),
    Language.PYTHON: _GrammarSpec("tree_sitter_python"),
    Language.TYPESCRIPT: _GrammarSpec("tree_sitter_typescript", "language_typescript"),
    Language.TSX: _GrammarSpec("tree_sitter_typescript", "language_tsx"),
}


class Grammar:
    """
    Parse / compile / run for one language.
    """

    def __init__(self, language: Language, spec: _GrammarSpec):
        self.language = language
        self._spec = spec
        self._ts_language: Optional[TSLanguage] = None
        self._query_cache: Dict[str, Query] = {}

    def get_language(self) -> TSLanguage:
        """
        Tree-sitter Language instance, built on first use.

        Raises:
            LanguageError: grammar package missing or ABI-incompatible
        """
        if self._ts_language is None:
            try:
                module = importlib.import_module(self._spec.module)
                self._ts_language = TSLanguage(getattr(module, self._spec.function)())
            except (ImportError, AttributeError, ValueError) as e:
                raise LanguageError(self.language.value, e) from e
        return self._ts_language

    def parse(self, text: str) -> Optional[Tree]:
        parser = Parser(self.get_language())
        return parser.parse(text.encode("utf-8"))

    def compile_query(self, query_string: str) -> Query:
        """
        Compile (or reuse) a structural query.

        Raises:
            QuerySyntaxError: the query does not compile for this language
        """
        query = self._query_cache.get(query_string)
        if query is None:
            try:
                query = Query(self.get_language(), query_string)
            except (QueryError, ValueError) as e:
                raise QuerySyntaxError(self.language.value, query_string, e) from e
            self._query_cache[query_string] = query
        return query

    @staticmethod
    def run(query: Query, tree: Tree) -> List[Match]:
        """All matches in traversal order."""
        cursor = QueryCursor(query)
        return list(cursor.matches(tree.root_node))


_GRAMMARS: Dict[Language, Grammar] = {}
_LOCK = threading.Lock()


def grammar_for(language: Language) -> Grammar:
    """Shared Grammar for a language."""
    with _LOCK:
        grammar = _GRAMMARS.get(language)
        if grammar is None:
            grammar = Grammar(language, _SPECS[language])
            _GRAMMARS[language] = grammar
        return grammar


__all__ = ["Grammar", "Match", "grammar_for"]
