"""
Linker: ties documents to the source files they reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .assembly import Assembly, LinkNode, Node, TextNode, build_assembly
from .left_shift import left_shift
from .linkage import Linkage
from .resolve import resolve
from .template import TemplateRegistry
from ..doc.file import Document
from ..source.cache import SourceCache
from ..source.query import QueryRegistry


@dataclass
class Linker:
    """
    Source cache plus the query and template registries.

    Registries must be populated before documents are linked; the source
    cache may be shared by concurrent builds.
    """
    sources: SourceCache = field(default_factory=SourceCache)
    queries: QueryRegistry = field(default_factory=QueryRegistry)
    templates: TemplateRegistry = field(default_factory=TemplateRegistry)

    def build_assembly(self, doc: Document) -> Assembly:
        return build_assembly(doc, self.sources, self.queries)

    def compile(self, assembly: Assembly) -> str:
        return assembly.compile(self.templates)

    def link(self, doc: Document) -> str:
        """Assemble and render doc in one step."""
        return self.compile(self.build_assembly(doc))


__all__ = [
    "Linker", "Assembly", "Node", "TextNode", "LinkNode", "Linkage",
    "TemplateRegistry", "build_assembly", "left_shift", "resolve",
]
