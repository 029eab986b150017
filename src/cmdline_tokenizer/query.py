# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Read-only lookups over a sequence of parsed argument records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Tuple

if TYPE_CHECKING:
    from .model import ArgumentRecord

__all__ = [
    "has_argument",
    "has_flag_argument",
    "get_argument",
    "get_flag_argument",
    "get_arguments",
    "get_flag_arguments",
]


def _matches(record_value: str, value: str, ignore_case: bool) -> bool:
    if ignore_case:
        return record_value.casefold() == value.casefold()
    return record_value == value


def _find(
    records: Iterable["ArgumentRecord"],
    value: str,
    is_flag: bool,
    ignore_case: bool,
) -> Optional["ArgumentRecord"]:
    for record in records:
        if record.is_flag == is_flag and _matches(
            record.value, value, ignore_case
        ):
            return record
    return None


def has_argument(
    records: Iterable["ArgumentRecord"], value: str, ignore_case: bool = False
) -> bool:
    return _find(records, value, False, ignore_case) is not None


def has_flag_argument(
    records: Iterable["ArgumentRecord"], value: str, ignore_case: bool = False
) -> bool:
    return _find(records, value, True, ignore_case) is not None


def get_argument(
    records: Iterable["ArgumentRecord"], value: str, ignore_case: bool = False
) -> Optional["ArgumentRecord"]:
    """Return the first non-flag record whose value matches, or None."""
    return _find(records, value, False, ignore_case)


def get_flag_argument(
    records: Iterable["ArgumentRecord"], value: str, ignore_case: bool = False
) -> Optional["ArgumentRecord"]:
    """Return the first flag record whose value matches, or None."""
    return _find(records, value, True, ignore_case)


def get_arguments(
    records: Iterable["ArgumentRecord"],
) -> Tuple["ArgumentRecord", ...]:
    return tuple(r for r in records if not r.is_flag)


def get_flag_arguments(
    records: Iterable["ArgumentRecord"],
) -> Tuple["ArgumentRecord", ...]:
    return tuple(r for r in records if r.is_flag)
