"""
Host integration: link one document or a whole tree of markdown sources.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from .doc.file import Document
from .doc.list import DocList
from .errors import AnchorsUserError
from .linker import Linker

logger = logging.getLogger(__name__)

DOC_SUFFIXES = (".md",)


def link_document(linker: Linker, path: Path, text: str) -> str:
    """
    Linked text of a document.

    Relative anchor paths are resolved against path's directory.
    Raises AnchorsUserError subclasses for malformed directives or
    unreadable sources.
    """
    doc = Document.from_text(path, text)
    assembly = linker.build_assembly(doc)
    logger.debug("assembled %s: %d nodes", path, len(assembly.nodes))
    return linker.compile(assembly)


def link_book(linker: Linker, src_dir: Path, out_dir: Path) -> List[Path]:
    """
    Link every markdown document under src_dir into out_dir.

    Other files are copied unchanged. A document that fails to link is
    logged and copied unchanged as well. Returns the failed documents
    (relative to src_dir).
    """
    docs = DocList(src_dir)
    out_dir = out_dir.resolve()
    failed: List[Path] = []
    linked = 0

    for src in sorted(docs.root.rglob("*")):
        if not src.is_file() or out_dir in src.parents:
            continue
        rel = src.relative_to(docs.root)
        dst = out_dir / rel
        dst.parent.mkdir(parents=True, exist_ok=True)

        if src.suffix.lower() not in DOC_SUFFIXES:
            shutil.copy2(src, dst)
            continue

        try:
            doc = docs.fetch(rel)
            text = linker.link(doc)
        except AnchorsUserError as e:
            logger.error("linking %s: %s", rel, e)
            failed.append(rel)
            shutil.copy2(src, dst)
            continue

        dst.write_text(text, encoding="utf-8")
        linked += 1
        logger.debug("linked %s", rel)

    logger.info("linked %d documents under %s (%d failed)", linked, docs.root, len(failed))
    return failed


__all__ = ["DOC_SUFFIXES", "link_document", "link_book"]
