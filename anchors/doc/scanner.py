"""
Directive scanner.

Splits raw document text into an ordered sequence of Content and
RawDirective tokens. A directive is `{{#aa <body>}}` where the body holds
neither `}` nor a newline. Scanning is total: any text that does not form
a complete directive, including a dangling open marker, is kept as Content.
"""

from __future__ import annotations

import re
from typing import List

from .tokens import CLOSE_MARKER, OPEN_MARKER, Content, RawDirective, Token

_DIRECTIVE = re.compile(re.escape(OPEN_MARKER) + r"([^}\n]+)" + re.escape(CLOSE_MARKER))


class DirectiveScanner:
    """
    Single-pass scanner over a document.

    Adjacent content runs are merged, so a document without directives
    yields exactly one Content token equal to the input.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.length = len(text)

    def scan(self) -> List[Token]:
        tokens: List[Token] = []
        content_start = 0

        while self.position < self.length:
            marker = self.text.find(OPEN_MARKER, self.position)
            if marker < 0:
                break

            match = _DIRECTIVE.match(self.text, marker)
            if match is None:
                # Dangling marker: stays in the current content run
                self.position = marker + len(OPEN_MARKER)
                continue

            if marker > content_start:
                tokens.append(Content(self.text[content_start:marker], content_start))
            tokens.append(RawDirective(match.group(1), marker))
            self.position = match.end()
            content_start = self.position

        if content_start < self.length:
            tokens.append(Content(self.text[content_start:], content_start))

        return tokens


def scan(text: str) -> List[Token]:
    """Convenience wrapper for DirectiveScanner(text).scan()."""
    return DirectiveScanner(text).scan()


__all__ = ["DirectiveScanner", "scan"]
