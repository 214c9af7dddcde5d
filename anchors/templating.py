"""
Shared Jinja environment settings for query and decoration templates.

Moustache-style `{{ name }}` placeholders; output is plain text (no HTML
escaping) and None renders as an empty string.
"""

from __future__ import annotations

import jinja2


def _none_as_empty(value: object) -> object:
    return "" if value is None else value


def make_environment() -> jinja2.Environment:
    return jinja2.Environment(
        autoescape=False,
        keep_trailing_newline=True,
        finalize=_none_as_empty,
    )


__all__ = ["make_environment"]
