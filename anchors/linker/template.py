"""
Decoration templates.

Templates are registered by name ahead of linking and rendered with a
linkage as their data context (`source`, `strategy`, `contents`,
`decoration`). Output is not escaped and absent values render as empty.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

import jinja2

from ..errors import TemplateMissing, TemplateNameTaken, TemplateParseError, TemplateRenderError
from ..templating import make_environment

logger = logging.getLogger(__name__)


TEMPLATE_ENV = make_environment()


class RegisteredTemplate:

    def __init__(self, name: str, text: str):
        self.name = name
        self.text = text
        try:
            self._template = TEMPLATE_ENV.from_string(text)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateParseError(name, e) from e

    def render(self, context: Mapping[str, Any]) -> str:
        try:
            return self._template.render(context)
        except Exception as e:
            raise TemplateRenderError(self.name, e) from e


class TemplateRegistry:
    """name → Template. Populate fully before rendering starts."""

    def __init__(self) -> None:
        self._templates: Dict[str, RegisteredTemplate] = {}

    def create(self, name: str, text: str) -> RegisteredTemplate:
        if name in self._templates:
            raise TemplateNameTaken(name)
        template = RegisteredTemplate(name, text)
        self._templates[name] = template
        logger.debug("registered template [%s]", name)
        return template

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        template = self._templates.get(name)
        if template is None:
            raise TemplateMissing(name)
        return template.render(context)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def names(self) -> List[str]:
        return sorted(self._templates)


__all__ = ["TEMPLATE_ENV", "RegisteredTemplate", "TemplateRegistry"]
