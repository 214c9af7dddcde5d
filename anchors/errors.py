"""
Exception taxonomy.

All expected errors that should be displayed to the user
as clean messages (without stack traces) inherit from AnchorsUserError.

Programming errors and bugs should NOT inherit from AnchorsUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class AnchorsUserError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    malformed directives, missing files, broken templates, etc.
    """
    pass


# ---------------------------- Directives ---------------------------- #

class DirectiveSyntaxError(AnchorsUserError):
    """Malformed directive body. Carries the full body and the failing remainder."""

    def __init__(self, source: str, remainder: str, message: str = "invalid directive"):
        super().__init__(f"{message}: {source!r} (at {remainder!r})")
        self.source = source
        self.remainder = remainder


class QueryAnchorSyntaxError(DirectiveSyntaxError):
    """Malformed `name?key=value&...` query anchor."""
    pass


# ---------------------------- Sources ---------------------------- #

class SourceIOError(AnchorsUserError):
    """Referenced file does not exist or cannot be read."""

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"cannot read {path}{detail}")
        self.path = Path(path)
        self.cause = cause


class LanguageError(AnchorsUserError):
    """Syntax grammar for a language could not be constructed."""

    def __init__(self, language: str, cause: Optional[BaseException] = None):
        super().__init__(f"grammar for {language} is unavailable: {cause}")
        self.language = language
        self.cause = cause


class QuerySyntaxError(AnchorsUserError):
    """Rendered structural query does not compile for its language."""

    def __init__(self, language: str, query: str, cause: Optional[BaseException] = None):
        super().__init__(f"invalid {language} query: {cause}\n{query}")
        self.language = language
        self.query = query
        self.cause = cause


# ---------------------------- Templates ---------------------------- #

class TemplateError(AnchorsUserError):
    """Base for template registration and rendering failures."""
    pass


class TemplateParseError(TemplateError):
    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"cannot parse template {name!r}: {cause}")
        self.name = name
        self.cause = cause


class TemplateRenderError(TemplateError):
    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"cannot render template {name!r}: {cause}")
        self.name = name
        self.cause = cause


class TemplateNameTaken(TemplateError):
    def __init__(self, name: str):
        super().__init__(f"Template name taken {name}")
        self.name = name


class TemplateMissing(TemplateError):
    def __init__(self, name: str):
        super().__init__(f"Template not found {name}")
        self.name = name


# ---------------------------- Caches / config ---------------------------- #

class CacheRootError(AnchorsUserError):
    """Document cache root is not usable."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class NotADirectoryRootError(CacheRootError):
    def __init__(self, path: Path):
        super().__init__(f"expected directory, got {path}", path)


class MissingDirectoryRootError(CacheRootError):
    def __init__(self, path: Path):
        super().__init__(f"directory does not exist: {path}", path)


class ConfigError(AnchorsUserError):
    """Configuration file is unreadable or has the wrong shape."""
    pass


__all__ = [
    "AnchorsUserError",
    "DirectiveSyntaxError",
    "QueryAnchorSyntaxError",
    "SourceIOError",
    "LanguageError",
    "QuerySyntaxError",
    "TemplateError",
    "TemplateParseError",
    "TemplateRenderError",
    "TemplateNameTaken",
    "TemplateMissing",
    "CacheRootError",
    "NotADirectoryRootError",
    "MissingDirectoryRootError",
    "ConfigError",
]
