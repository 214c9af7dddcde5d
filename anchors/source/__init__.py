"""
Source files: language detection, syntax trees, the shared source cache
and the structural query engine.
"""

from .cache import SourceCache, canonicalize
from .file import SourceFile, read_source_text
from .grammar import Grammar, grammar_for
from .lang import Language
from .query import QueryRegistry, QueryTemplate
from .range import SourceRange

__all__ = [
    "SourceCache", "canonicalize",
    "SourceFile", "read_source_text",
    "Grammar", "grammar_for",
    "Language",
    "QueryRegistry", "QueryTemplate",
    "SourceRange",
]
