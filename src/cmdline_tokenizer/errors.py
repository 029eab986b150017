# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Error definitions for the command-line tokenizer.

Tokenizing itself never fails on content. The errors here signal caller
contract violations (bad cursor indices, malformed option data).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_INDEX_OUT_OF_RANGE = "E_INDEX_OUT_OF_RANGE"
E_OPTIONS = "E_OPTIONS"


@dataclass
class TokenizerError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class CursorRangeError(TokenizerError, ValueError):
    pass


class OptionsError(TokenizerError, ValueError):
    pass


def range_error(start: int, end: int, length: int) -> CursorRangeError:
    return CursorRangeError(
        code=E_INDEX_OUT_OF_RANGE,
        message=f"invalid extract range [{start}, {end}) for text of length {length}",
        context={"start": start, "end": end, "length": length},
    )


def options_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> OptionsError:
    return OptionsError(code=E_OPTIONS, message=message, context=context)


__all__ = [
    "TokenizerError",
    "CursorRangeError",
    "OptionsError",
    "range_error",
    "options_error",
    "E_INDEX_OUT_OF_RANGE",
    "E_OPTIONS",
]
