from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .left_shift import left_shift
from .template import TemplateRegistry
from ..doc.anchor import Decoration, LeftShift, NoDecoration, Strategy, Template
from ..source.file import SourceFile


@dataclass
class Linkage:
    """
    One resolved anchor: the shared source it points at, the strategy used,
    the extracted text (None when nothing was selected) and its decoration.
    """
    source: SourceFile
    strategy: Strategy
    contents: Optional[str]
    decoration: Decoration

    @property
    def text(self) -> str:
        return self.contents if self.contents is not None else ""

    def to_context(self) -> Dict[str, Any]:
        """Data context handed to decoration templates."""
        return {
            "source": self.source.as_dict(),
            "strategy": self.strategy.as_dict(),
            "contents": self.text,
            "decoration": self.decoration.as_dict(),
        }

    def render(self, templates: TemplateRegistry) -> str:
        """
        Decorated text of this linkage.

        Raises:
            TemplateError: template decoration could not be applied
        """
        decorate = _DECORATORS.get(type(self.decoration))
        if decorate is None:
            raise TypeError(f"unsupported decoration: {self.decoration!r}")
        return decorate(self, templates)


def _plain(linkage: Linkage, templates: TemplateRegistry) -> str:
    return linkage.text


def _left_shift(linkage: Linkage, templates: TemplateRegistry) -> str:
    return left_shift(linkage.text)


def _template(linkage: Linkage, templates: TemplateRegistry) -> str:
    name = linkage.decoration.name  # type: ignore[union-attr]
    return templates.render(name, linkage.to_context())


_DECORATORS: Dict[type, Callable[[Linkage, TemplateRegistry], str]] = {
    NoDecoration: _plain,
    LeftShift: _left_shift,
    Template: _template,
}


__all__ = ["Linkage"]
