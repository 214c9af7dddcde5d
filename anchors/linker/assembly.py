"""
Assembly: the ordered list of resolved nodes for one document, and its
rendering into final text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Union

from .linkage import Linkage
from .resolve import resolve
from .template import TemplateRegistry
from ..doc.file import Document
from ..doc.tokens import AnchorToken, Content, RawDirective
from ..errors import TemplateError
from ..source.cache import SourceCache
from ..source.query import QueryRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextNode:
    text: str

    def estimated_size(self) -> int:
        return len(self.text)

    def render(self, templates: TemplateRegistry) -> str:
        return self.text


@dataclass(frozen=True)
class LinkNode:
    linkage: Linkage

    def estimated_size(self) -> int:
        return len(self.linkage.text)

    def render(self, templates: TemplateRegistry) -> str:
        return self.linkage.render(templates)


Node = Union[TextNode, LinkNode]


@dataclass
class Assembly:
    nodes: List[Node] = field(default_factory=list)

    def estimated_size(self) -> int:
        """Sum of the undecorated content lengths of all nodes."""
        return sum(node.estimated_size() for node in self.nodes)

    def compile(self, templates: TemplateRegistry) -> str:
        """
        Concatenate every node's rendered text.

        A node whose decoration fails is logged and contributes nothing;
        the rest of the document is still produced.
        """
        parts: List[str] = []
        for node in self.nodes:
            try:
                parts.append(node.render(templates))
            except TemplateError as e:
                logger.error("[TemplateError] %s", e)
        out = "".join(parts)
        logger.debug("compiled %d nodes: %d chars (estimated %d)", len(self.nodes), len(out), self.estimated_size())
        return out


def build_assembly(doc: Document, sources: SourceCache, queries: QueryRegistry) -> Assembly:
    """
    Resolve every token of doc into a node.

    Fetch failures abort the whole assembly. A strategy that selects
    nothing yields a linkage without contents.
    """
    nodes: List[Node] = []
    for token in doc.tokens:
        if isinstance(token, Content):
            nodes.append(TextNode(token.text))
        elif isinstance(token, AnchorToken):
            anchor = token.anchor
            source = sources.fetch(anchor.link.path)
            linkage = Linkage(
                source=source,
                strategy=anchor.link.strategy,
                contents=resolve(anchor.link.strategy, source, queries),
                decoration=anchor.decoration,
            )
            nodes.append(LinkNode(linkage))
        elif isinstance(token, RawDirective):
            nodes.append(TextNode(token.render()))
        else:
            raise TypeError(f"unsupported token: {token!r}")
    return Assembly(nodes)


__all__ = ["TextNode", "LinkNode", "Node", "Assembly", "build_assembly"]
