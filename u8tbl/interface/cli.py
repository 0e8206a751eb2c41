#!/usr/bin/env python3
# u8tbl/interface/cli.py
from __future__ import annotations

"""
Command line frontend.

Reads delimited lines from standard input and prints them as a table.

    $ printf 'host id\\nnode-001 2\\n' | u8tbl ' ' style=ascii

Style selection (low → high): config files, TABLE_FORMAT environment
variable, `style=` argument. An unknown TABLE_FORMAT is ignored with a
warning.
"""

import sys
from typing import Optional, Sequence

from u8tbl.interface.parser import bind_args, build_usage
from u8tbl.interface.reader import read_stdin_table
from u8tbl.settings import as_delimiter, load_config
from u8tbl.ui import (
    colorize,
    enable_windows_vt,
    format_table,
    init_logger,
    is_terminal,
    parse_table_type,
    print_line,
    print_text,
    style_names,
)

PROG = "u8tbl"


class UsageError(Exception):
    """Invalid command line, configuration or style; exits with status 2."""


def _error(message: str) -> None:
    text = f"[ERROR] {message}"
    if is_terminal(sys.stderr) and enable_windows_vt():
        text = colorize(text, "red")
    print_line(text, file=sys.stderr)


def run(
    delimiter: str | None = None,
    *,
    style: str | None = None,
    log_level: str | None = None,
) -> int:
    """Read stdin, render it and print the table. Returns the process exit status."""
    try:
        config = load_config()
    except ValueError as exc:
        raise UsageError(f"Invalid configuration: {exc}") from exc

    level = (log_level or config.log_level or "WARNING").upper()
    try:
        log = init_logger(
            PROG,
            level,
            str(config.log_file_path) if config.log_file_path else None,
        )
    except ValueError as exc:
        raise UsageError(f"Invalid log level {level!r}") from exc
    except OSError as exc:
        raise UsageError(f"Cannot open log file {config.log_file_path}: {exc}") from exc

    try:
        table_type = parse_table_type(style) if style is not None else config.table_format
        cell_delimiter = as_delimiter(delimiter) if delimiter else config.delimiter
    except ValueError as exc:
        raise UsageError(str(exc)) from exc

    table = read_stdin_table(cell_delimiter)
    log.debug(
        "Rendering %d rows with delimiter %r as %s",
        len(table), cell_delimiter, table_type.label,
    )
    print_text(format_table(table, table_type))
    return 0


USAGE = (
    f"usage: {build_usage(PROG, run)}\n"
    f"  styles: {', '.join(style_names())}"
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if any(arg in ("-h", "--help") for arg in args):
        print_line(USAGE)
        return 0

    try:
        positional, keywords = bind_args(run, args)
    except TypeError as exc:
        _error(str(exc))
        print_line(USAGE, file=sys.stderr)
        return 2

    try:
        return run(*positional, **keywords)
    except UsageError as exc:
        _error(str(exc))
        return 2
