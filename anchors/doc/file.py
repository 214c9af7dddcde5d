from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

from .anchor import Anchor
from .parser import parse_anchor
from .scanner import scan
from .tokens import AnchorToken, RawDirective, Token
from ..errors import SourceIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """
    A markdown document parsed into tokens.

    Every directive is promoted to an AnchorToken during construction and
    relative anchor paths are joined onto the document's directory. Any
    malformed directive fails the whole construction.
    """
    path: Path
    source: str
    tokens: Tuple[Token, ...]

    @classmethod
    def from_text(cls, path: Path | str, source: str) -> "Document":
        path = Path(path)
        base_dir = Path(os.path.abspath(path)).parent
        tokens: List[Token] = []
        for token in scan(source):
            if isinstance(token, RawDirective):
                anchor = parse_anchor(token.text).resolved_against(base_dir)
                token = AnchorToken(anchor, token.position)
            tokens.append(token)
        logger.debug("parsed %s: %d tokens", path, len(tokens))
        return cls(path=path, source=source, tokens=tuple(tokens))

    @classmethod
    def from_path(cls, path: Path | str) -> "Document":
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(path, e) from e
        return cls.from_text(path, source)

    def anchors(self) -> Iterator[Anchor]:
        for token in self.tokens:
            if isinstance(token, AnchorToken):
                yield token.anchor


__all__ = ["Document"]
