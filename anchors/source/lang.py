"""
Language detection by file extension.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Dict, Optional


class Language(enum.Enum):
    RUBY = "ruby"
    RUST = "rust"
    TOML = "toml"
    JAVASCRIPT = "javascript"
    ELIXIR = "elixir"
    JSON = "json"
    MARKDOWN = "markdown"
    PYTHON = "python"
    TYPESCRIPT = "typescript"
    TSX = "tsx"

    @classmethod
    def from_path(cls, path: Path | str) -> Optional["Language"]:
        """Language for the file's extension, None when unknown."""
        return _BY_EXT.get(Path(path).suffix)

    @classmethod
    def from_name(cls, name: str) -> Optional["Language"]:
        """Language by its lowercase config name, None when unknown."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


_BY_EXT: Dict[str, Language] = {
    ".rb": Language.RUBY,
    ".rs": Language.RUST,
    ".toml": Language.TOML,
    ".js": Language.JAVASCRIPT,
    ".ex": Language.ELIXIR,
    ".exs": Language.ELIXIR,
    ".json": Language.JSON,
    ".md": Language.MARKDOWN,
    ".txt": Language.MARKDOWN,
    ".py": Language.PYTHON,
    ".ts": Language.TYPESCRIPT,
    ".tsx": Language.TSX,
}


__all__ = ["Language"]
