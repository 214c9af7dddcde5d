from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from tree_sitter import Tree

from .grammar import grammar_for
from .lang import Language
from ..errors import LanguageError, SourceIOError

logger = logging.getLogger(__name__)

Reader = Callable[[Path], str]


def read_source_text(path: Path) -> str:
    """Default reader: UTF-8 text. Raises SourceIOError."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(path, e) from e


@dataclass
class SourceFile:
    """
    A referenced source file.

    `tree` is None whenever the language is unknown or its grammar could
    not be constructed; it can always be rebuilt from `contents`.
    Instances are shared read-only once they are in the cache.
    """
    path: Path
    contents: str
    language: Optional[Language] = None
    tree: Optional[Tree] = field(default=None, repr=False, compare=False)

    @classmethod
    def open(cls, path: Path, reader: Reader = read_source_text) -> "SourceFile":
        """Read and parse a file at an already canonical path."""
        source = cls(path=path, contents=reader(path), language=Language.from_path(path))
        source.rebuild_tree()
        return source

    def rebuild_tree(self) -> None:
        """Recompute the syntax tree from contents."""
        self.tree = None
        if self.language is None:
            return
        try:
            self.tree = grammar_for(self.language).parse(self.contents)
        except LanguageError as e:
            logger.warning("%s: %s; structural queries disabled", self.path, e)

    def as_dict(self) -> dict:
        """Template view of the file."""
        return {
            "path": str(self.path),
            "contents": self.contents,
            "language": self.language.value if self.language else "",
        }


__all__ = ["SourceFile", "Reader", "read_source_text"]
