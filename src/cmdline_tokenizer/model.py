# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Immutable records produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from . import query

__all__ = ["ArgumentRecord", "ParsedCommandLine"]


@dataclass(frozen=True, slots=True)
class ArgumentRecord:
    """One parsed command-line token.

    ``extended_value`` is None when no ``:`` suffix was present. An empty
    string means the delimiter was there with nothing after it.
    """

    is_flag: bool
    value: str
    extended_value: Optional[str] = None

    @property
    def has_extended_value(self) -> bool:
        return self.extended_value is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_flag": self.is_flag,
            "value": self.value,
            "extended_value": self.extended_value,
        }


@dataclass(frozen=True, slots=True)
class ParsedCommandLine:
    """Ordered, read-only result of a single parse."""

    arguments: Tuple[ArgumentRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.arguments)

    def __iter__(self) -> Iterator[ArgumentRecord]:
        return iter(self.arguments)

    def __getitem__(self, index: int) -> ArgumentRecord:
        return self.arguments[index]

    def has_argument(self, value: str, ignore_case: bool = False) -> bool:
        return query.has_argument(self.arguments, value, ignore_case)

    def has_flag_argument(self, value: str, ignore_case: bool = False) -> bool:
        return query.has_flag_argument(self.arguments, value, ignore_case)

    def get_argument(
        self, value: str, ignore_case: bool = False
    ) -> Optional[ArgumentRecord]:
        return query.get_argument(self.arguments, value, ignore_case)

    def get_flag_argument(
        self, value: str, ignore_case: bool = False
    ) -> Optional[ArgumentRecord]:
        return query.get_flag_argument(self.arguments, value, ignore_case)

    def get_arguments(self) -> Tuple[ArgumentRecord, ...]:
        return query.get_arguments(self.arguments)

    def get_flag_arguments(self) -> Tuple[ArgumentRecord, ...]:
        return query.get_flag_arguments(self.arguments)

    def to_list(self) -> list[Dict[str, Any]]:
        return [a.to_dict() for a in self.arguments]
