from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

from .file import Document
from ..errors import MissingDirectoryRootError, NotADirectoryRootError, SourceIOError
from ..rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class DocList:
    """
    Shared collection of parsed documents keyed by canonical path.

    Relative paths handed to fetch() are resolved against the root
    directory given at construction.
    """

    def __init__(self, root: Path | str):
        root = Path(os.path.abspath(root))
        if not root.exists():
            raise MissingDirectoryRootError(root)
        if not root.is_dir():
            raise NotADirectoryRootError(root)
        self.root = root.resolve()
        self._docs: Dict[Path, Document] = {}
        self._lock = ReadWriteLock()

    def fetch(self, path: Path | str) -> Document:
        """Parse (or reuse) the document at path. Raises SourceIOError, DirectiveSyntaxError."""
        path = Path(path)
        if not path.is_absolute():
            path = self.root / path
        try:
            canonical = path.resolve(strict=True)
        except OSError as e:
            raise SourceIOError(path, e) from e

        with self._lock.read():
            doc = self._docs.get(canonical)
        if doc is not None:
            return doc

        doc = Document.from_path(canonical)
        with self._lock.write():
            self._docs[canonical] = doc
        return doc

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._docs)


__all__ = ["DocList"]
