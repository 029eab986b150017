# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line tokenizer.

Splits a raw command-line string into :class:`ArgumentRecord` objects.

An *argument* is any token appearing on its own, for example a file name.
A *flag* is a token immediately preceded by ``-`` or ``/``. A flag prefix
always starts a new record, even in the middle of a word, so ``-a/b`` gives
two flags.

When extended arguments are enabled, a token may carry a second value after
a colon, e.g. ``-log:off`` is the flag ``log`` with extended value ``off``.

Either value may be wrapped in single or double quotes to include
whitespace, flag prefixes or colons. Quotes cannot be escaped, and an
unterminated quote runs to the end of the line.

The tokenizer is total: every string parses, possibly to an empty result.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .cursor import QUOTE_CHARS, ScanCursor
from .logging import get_logger
from .model import ArgumentRecord, ParsedCommandLine
from .options import TokenizerOptions

FLAG_CHARS = frozenset({"-", "/"})
EXTENDED_ARGUMENT_DELIMITER = ":"

__all__ = [
    "FLAG_CHARS",
    "EXTENDED_ARGUMENT_DELIMITER",
    "Tokenizer",
    "parse",
]


class Tokenizer:
    """Reusable tokenizer bound to a set of options.

    Instances keep no per-parse state, so one tokenizer can be shared
    freely; every :meth:`parse` call returns a new immutable result.
    """

    __slots__ = ("options",)

    def __init__(
        self, options: Optional[TokenizerOptions] = None, **overrides: Any
    ):
        options = options or TokenizerOptions()
        if overrides:
            options = options.replace(**overrides)
        self.options = options

    def parse(self, command_line: str) -> ParsedCommandLine:
        if not isinstance(command_line, str):
            raise TypeError(
                f"command line must be str, not {type(command_line).__name__}"
            )
        extended = self.options.support_extended_arguments
        discard_first = self.options.discard_first_token

        cursor = ScanCursor(command_line)
        records: List[ArgumentRecord] = []
        dropped_empty = 0
        dropped_first: Optional[ArgumentRecord] = None

        cursor.skip_whitespace()
        while not cursor.at_end:
            is_flag = cursor.peek() in FLAG_CHARS
            if is_flag:
                cursor.advance()
            value = _parse_token(cursor, stop_at_delimiter=extended)
            extended_value = None
            if extended and cursor.peek() == EXTENDED_ARGUMENT_DELIMITER:
                cursor.advance()
                extended_value = _parse_token(cursor, stop_at_delimiter=False)

            if not value or value.isspace():
                dropped_empty += 1
            elif discard_first and dropped_first is None:
                dropped_first = ArgumentRecord(is_flag, value, extended_value)
            else:
                records.append(ArgumentRecord(is_flag, value, extended_value))
            cursor.skip_whitespace()

        get_logger().debug(
            "Parsed %d argument(s) from %d char(s) (empty=%d first=%r)",
            len(records),
            len(command_line),
            dropped_empty,
            dropped_first.value if dropped_first else None,
        )
        return ParsedCommandLine(tuple(records))

    def __repr__(self) -> str:
        return f"Tokenizer({self.options!r})"


def _parse_token(cursor: ScanCursor, stop_at_delimiter: bool) -> str:
    """Parse one quoted or bare token starting at the cursor.

    A bare token ends at whitespace, a flag prefix, or (when
    ``stop_at_delimiter`` is set) the extended-argument delimiter.
    """
    if cursor.peek() in QUOTE_CHARS:
        return cursor.parse_quoted_text()

    def _in_token(ch: str) -> bool:
        if ch.isspace() or ch in FLAG_CHARS:
            return False
        return not (stop_at_delimiter and ch == EXTENDED_ARGUMENT_DELIMITER)

    return cursor.parse_while(_in_token)


def parse(
    command_line: str,
    support_extended_arguments: bool = False,
    discard_first_token: bool = False,
) -> ParsedCommandLine:
    """Tokenize ``command_line`` with one-off options."""
    options = TokenizerOptions(
        support_extended_arguments=support_extended_arguments,
        discard_first_token=discard_first_token,
    )
    return Tokenizer(options).parse(command_line)
