"""
Documents: directive scanning, anchor grammar and parsed document caches.
"""

from .anchor import (
    Anchor, Between, Decoration, DownTo, Full, HereDown, LeftShift, Link, Named,
    NoDecoration, Query, QueryAnchor, Strategy, Template, ThisLine,
)
from .file import Document
from .list import DocList
from .parser import parse_anchor
from .query_anchor import parse_query_anchor
from .scanner import DirectiveScanner, scan
from .tokens import AnchorToken, Content, RawDirective, Token

__all__ = [
    "Anchor", "Link", "Strategy", "Decoration", "QueryAnchor",
    "Full", "ThisLine", "HereDown", "DownTo", "Between", "Named", "Query",
    "NoDecoration", "LeftShift", "Template",
    "Document", "DocList",
    "parse_anchor", "parse_query_anchor",
    "DirectiveScanner", "scan",
    "Token", "Content", "RawDirective", "AnchorToken",
]
