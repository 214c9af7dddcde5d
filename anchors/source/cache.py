from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from .file import Reader, SourceFile, read_source_text
from ..errors import SourceIOError
from ..rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


def canonicalize(path: Path | str) -> Path:
    """Absolute, symlink-free path of an existing file. Raises SourceIOError."""
    try:
        return Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise SourceIOError(path, e) from e


class SourceCache:
    """
    Thread-safe store of parsed source files keyed by canonical path.

    Lookups run under a shared read lock. A miss reads and parses outside
    any lock and then inserts under the write lock, so two concurrent
    misses on the same path may both parse; the last insert wins and both
    callers get a complete SourceFile.
    """

    def __init__(self, reader: Reader = read_source_text):
        self._reader = reader
        self._files: Dict[Path, SourceFile] = {}
        self._lock = ReadWriteLock()

    def fetch(self, path: Path | str) -> SourceFile:
        canonical = canonicalize(path)

        with self._lock.read():
            source = self._files.get(canonical)
        if source is not None:
            logger.debug("source cache hit: %s", canonical)
            return source

        logger.debug("source cache miss: %s", canonical)
        source = SourceFile.open(canonical, self._reader)
        with self._lock.write():
            self._files[canonical] = source
        return source

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        try:
            canonical = canonicalize(path)
        except SourceIOError:
            return False
        with self._lock.read():
            return canonical in self._files

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._files)


__all__ = ["SourceCache", "canonicalize"]
