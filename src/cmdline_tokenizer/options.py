# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Tokenizer options and loading them from YAML or JSON files."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import options_error

__all__ = ["TokenizerOptions", "load_options"]


@dataclass(frozen=True, slots=True)
class TokenizerOptions:
    # Split ``name:value`` into value and extended value
    support_extended_arguments: bool = False
    # Drop the first kept record (usually the program name)
    discard_first_token: bool = False

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise options_error(
                    f"option '{f.name}' must be a boolean",
                    {"option": f.name, "type": type(value).__name__},
                )

    def replace(self, **changes: Any) -> "TokenizerOptions":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TokenizerOptions":
        if not isinstance(data, Mapping):
            raise options_error(
                "options must be a mapping",
                {"type": type(data).__name__},
            )
        known = {f.name for f in dataclasses.fields(cls)}
        # YAML keys need not be strings (``1: true``)
        unknown = sorted((k for k in data if k not in known), key=str)
        if unknown:
            raise options_error(
                "unknown option(s): " + ", ".join(map(str, unknown)),
                {"unknown": unknown, "known": sorted(known)},
            )
        return cls(**dict(data))


def load_options(path: str | Path) -> TokenizerOptions:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        data: Any = yaml.safe_load(text)
    else:
        data = json.loads(text)
    # An empty YAML document means "all defaults"
    if data is None:
        data = {}
    return TokenizerOptions.from_mapping(data)
