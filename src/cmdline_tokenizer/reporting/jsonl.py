# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from __future__ import annotations

import json
import sys
from typing import Any, Dict

from .base import Reporter, get_verbosity


class JsonLinesReporter(Reporter):
    """Machine-readable JSON lines reporter."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def _emit(self, obj: dict):
        self.stream.write(json.dumps(obj, sort_keys=True) + "\n")

    def _maybe_summary(self, message: str, level: str, **fields: Any) -> None:
        # "Parse summary: arguments=3 flags=1" -> structured summary event
        if not message.lower().startswith("parse summary"):
            return
        parts = message.split(":", 1)
        kv_text = parts[1] if len(parts) > 1 else ""
        kv_pairs: Dict[str, str] = {}
        for token in kv_text.strip().split():
            if "=" in token:
                k, v = token.split("=", 1)
                kv_pairs[k] = v
        self._emit(
            {
                "event": "summary",
                "summary_type": "parse",
                "level": level,
                "raw": message,
                **kv_pairs,
                **fields,
            }
        )

    def status(self, message: str, **fields: Any) -> None:
        self._maybe_summary(message, "info", **fields)
        self._emit(
            {"event": "status", "message": message, "level": "info", **fields}
        )

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self._emit(
            {
                "event": "status",
                "message": message,
                "level": f"verbose{level}",
                "vlevel": level,
                **fields,
            }
        )

    def error(self, message: str, **fields: Any) -> None:
        self._emit(
            {"event": "status", "message": message, "level": "error", **fields}
        )

    def warning(self, message: str, **fields: Any) -> None:
        self._emit(
            {
                "event": "status",
                "message": message,
                "level": "warning",
                **fields,
            }
        )

    def section(self, title: str) -> None:
        self._emit({"event": "section", "title": title})

    def records(self, parsed) -> None:
        for i, rec in enumerate(parsed):
            self._emit({"event": "argument", "index": i, **rec.to_dict()})
