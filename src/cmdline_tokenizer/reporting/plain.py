# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from __future__ import annotations

import os
import sys
from typing import Any

from .base import Reporter, get_verbosity


def _supports_color(stream) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except Exception:
        return False


class PlainReporter(Reporter):
    """Plain deterministic reporter with optional color.

    Messages go to ``stream`` (stderr by default). Records go to ``out``
    (stdout by default), one tab-separated line each:
    ``index kind value [extended_value]``.
    """

    def __init__(self, stream=None, out=None, use_color: bool | None = None):
        self.stream = stream or sys.stderr
        self.out = out or sys.stdout
        self.use_color = (
            use_color if use_color is not None else _supports_color(self.stream)
        )

    def _c(self, code: str, text: str):
        if not self.use_color:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def status(self, message: str, **fields: Any) -> None:
        prefix = self._c("32", "INFO")
        self.stream.write(f"{prefix}: {message}\n")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        prefix = self._c("36", f"VERB{level}")
        self.stream.write(f"{prefix}: {message}\n")

    def error(self, message: str, **fields: Any) -> None:
        prefix = self._c("31", "ERROR")
        self.stream.write(f"{prefix}: {message}\n")

    def warning(self, message: str, **fields: Any) -> None:
        prefix = self._c("33", "WARN")
        self.stream.write(f"{prefix}: {message}\n")

    def section(self, title: str) -> None:
        self.stream.write(f"\n[{title}]\n")

    def records(self, parsed) -> None:
        for i, rec in enumerate(parsed):
            kind = "flag" if rec.is_flag else "arg"
            line = f"{i}\t{kind}\t{rec.value}"
            if rec.has_extended_value:
                line += f"\t{rec.extended_value}"
            self.out.write(line + "\n")

    def flush(self) -> None:
        for s in (self.stream, self.out):
            try:
                s.flush()
            except Exception:  # pragma: no cover - closed stream
                pass
