# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line entry point for cmdline_tokenizer.

Tokenizes a command-line string given as arguments (or read from stdin)
and reports the resulting records. Handy for checking how a given string
will be split before wiring the tokenizer into an application.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from ._version import __version__
from .errors import TokenizerError
from .logging import configure_logging, get_logger
from .options import TokenizerOptions, load_options
from .reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    YamlReporter,
    get_reporter,
    section,
    set_reporter,
    set_verbosity,
)
from .tokenizer import Tokenizer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cmdline-tokenizer",
        description="Split a command-line string into argument records",
    )
    p.add_argument(
        "command_line",
        nargs="*",
        help="Command-line text to tokenize (words are joined with spaces; "
        "read from stdin when omitted)",
    )
    p.add_argument(
        "-e",
        "--extended",
        action="store_true",
        default=None,
        help="Enable name:value extended arguments",
    )
    p.add_argument(
        "-d",
        "--discard-first",
        dest="discard_first",
        action="store_true",
        default=None,
        help="Drop the first token (program name)",
    )
    p.add_argument(
        "--options",
        type=Path,
        help="YAML or JSON file with tokenizer options",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich", "json", "yaml", "silent"],
        default="plain",
        help="Select reporter backend: plain (default), rich, json (JSONL events), yaml, silent",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"cmdline-tokenizer {__version__}",
    )
    return p


def _select_reporter(requested: str) -> None:
    if requested == "json":
        set_reporter(JsonLinesReporter())
    elif requested == "yaml":
        set_reporter(YamlReporter())
    elif requested == "silent":
        set_reporter(SilentReporter())
    elif requested == "rich":
        set_reporter(RichReporter())
    else:  # plain
        set_reporter(PlainReporter())


def _resolve_options(args: argparse.Namespace) -> TokenizerOptions:
    options = (
        load_options(args.options) if args.options else TokenizerOptions()
    )
    changes = {}
    if args.extended is not None:
        changes["support_extended_arguments"] = args.extended
    if args.discard_first is not None:
        changes["discard_first_token"] = args.discard_first
    return options.replace(**changes) if changes else options


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    _select_reporter(args.reporter)
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    logger = get_logger()
    rep = get_reporter()

    try:
        options = _resolve_options(args)
    except (TokenizerError, OSError, ValueError, yaml.YAMLError) as exc:
        rep.error(f"cannot load options: {exc}")
        rep.flush()
        return 2

    if args.command_line:
        text = " ".join(args.command_line)
    else:
        text = sys.stdin.read().rstrip("\r\n")
    logger.info("Tokenizing %d char(s) with %s", len(text), options)

    parsed = Tokenizer(options).parse(text)
    with section("Arguments"):
        rep.records(parsed)
    rep.status(
        "Parse summary: "
        + f"arguments={len(parsed)} flags={len(parsed.get_flag_arguments())}"
    )
    rep.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
