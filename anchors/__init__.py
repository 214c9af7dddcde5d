"""
anchors: pull excerpts of source files into documentation.

Documents embed `{{#aa path[:selection]}}` directives; the linker resolves
each one against a shared source cache, selects lines (whole file, line
numbers, named ANCHOR regions or tree-sitter queries), decorates them and
reassembles the document.
"""

from .book import link_book, link_document
from .config import build_linker
from .doc import Anchor, Document, DocList
from .errors import AnchorsUserError
from .linker import Assembly, Linker
from .source import Language, SourceCache, SourceFile

__all__ = [
    "Anchor", "Document", "DocList",
    "Linker", "Assembly",
    "Language", "SourceCache", "SourceFile",
    "AnchorsUserError",
    "build_linker", "link_document", "link_book",
]
