# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .base import Reporter, get_verbosity


class RichReporter(Reporter):
    def __init__(self, console: Console | None = None, out: Console | None = None):
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        self.out = out or Console(highlight=False)

    # Messaging / sections ------------------------------------------------------
    def status(self, message: str, **fields: Any) -> None:
        self.console.print(f"[green]INFO[/]: {escape(message)}")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self.console.print(f"[cyan]VERB{level}[/]: {escape(message)}")

    def error(self, message: str, **fields: Any) -> None:
        self.console.print(f"[bold red]ERROR[/]: {escape(message)}")

    def warning(self, message: str, **fields: Any) -> None:
        self.console.print(f"[yellow]WARN[/]: {escape(message)}")

    def section(self, title: str) -> None:
        self.console.rule(escape(title))

    # Records -------------------------------------------------------------------
    def records(self, parsed) -> None:
        table = Table(title=f"{len(parsed)} argument(s)", title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Value", style="bold")
        table.add_column("Extended")
        for i, rec in enumerate(parsed):
            kind = "[magenta]flag[/]" if rec.is_flag else "arg"
            ext = (
                escape(rec.extended_value)
                if rec.extended_value is not None
                else "[dim]-[/]"
            )
            table.add_row(str(i), kind, escape(rec.value), ext)
        self.out.print(table)
