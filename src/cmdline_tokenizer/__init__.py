# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""cmdline_tokenizer package

Splits a raw command-line string into ordered argument records,
telling plain arguments apart from ``-``/``/`` flags and optionally
splitting ``name:value`` extended arguments.

Typical use::

    from cmdline_tokenizer import parse

    cl = parse('-log:off "my file.txt"', support_extended_arguments=True)
    cl.get_flag_argument("log").extended_value  # 'off'
"""

from ._version import __version__
from .cursor import END_OF_TEXT, ScanCursor
from .errors import CursorRangeError, OptionsError, TokenizerError
from .model import ArgumentRecord, ParsedCommandLine
from .options import TokenizerOptions, load_options
from .tokenizer import Tokenizer, parse

__all__ = [
    "__version__",
    "END_OF_TEXT",
    "ScanCursor",
    "TokenizerError",
    "CursorRangeError",
    "OptionsError",
    "ArgumentRecord",
    "ParsedCommandLine",
    "TokenizerOptions",
    "load_options",
    "Tokenizer",
    "parse",
]
