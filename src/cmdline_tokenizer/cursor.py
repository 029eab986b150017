# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Bounds-checked scan cursor over an immutable string.

The cursor never fails on content: reading past the end yields
:data:`END_OF_TEXT` and moving past the end is a no-op. Only
:meth:`ScanCursor.extract` rejects out-of-range indices, since those can
only come from a caller bug.
"""

from __future__ import annotations

from typing import Callable

from .errors import range_error

END_OF_TEXT = "\0"
QUOTE_CHARS = frozenset({'"', "'"})

__all__ = ["END_OF_TEXT", "QUOTE_CHARS", "ScanCursor"]


class ScanCursor:
    __slots__ = ("_text", "_index")

    def __init__(self, text: str):
        self._text = text
        self._index = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def index(self) -> int:
        return self._index

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._text)

    @property
    def remaining(self) -> int:
        return max(0, len(self._text) - self._index)

    def peek(self) -> str:
        if self.at_end:
            return END_OF_TEXT
        return self._text[self._index]

    def advance(self, count: int = 1) -> None:
        self._index = min(len(self._text), self._index + max(0, count))

    def skip_whitespace(self) -> None:
        while not self.at_end and self._text[self._index].isspace():
            self._index += 1

    def extract(self, start: int, end: int) -> str:
        if not 0 <= start <= end <= len(self._text):
            raise range_error(start, end, len(self._text))
        return self._text[start:end]

    def parse_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._index
        while not self.at_end and predicate(self.peek()):
            self._index += 1
        return self.extract(start, self._index)

    def parse_quoted_text(self) -> str:
        """Consume a quoted span and return its inner text.

        The quote character (``"`` or ``'``) under the cursor opens the
        span and its next occurrence closes it. Quotes cannot be escaped.
        An unterminated span runs to the end of the text. When the cursor
        is not on a quote character nothing is consumed and ``""`` is
        returned.
        """
        quote = self.peek()
        if quote not in QUOTE_CHARS:
            return ""
        self.advance()
        start = self._index
        end = self._text.find(quote, start)
        if end < 0:
            self._index = len(self._text)
            return self.extract(start, self._index)
        self._index = end + 1
        return self.extract(start, end)

    def __repr__(self) -> str:
        return f"ScanCursor(index={self._index}, length={len(self._text)})"
