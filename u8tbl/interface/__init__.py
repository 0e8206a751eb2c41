#!/usr/bin/env python3
# u8tbl/interface/__init__.py
from __future__ import annotations

"""
Package for the command line interface.

Provides:
- Line reader that splits delimited input into a grid.
- Parser utilities for binding argv tokens to the command function.
- The `u8tbl` command entry point.
"""


# Reader / parser first (cli depends on them)
from .reader import split_line, read_table, read_stdin_table
from .parser import bind_args, build_usage

from .cli import main, run, USAGE, UsageError

__all__ = [
    # reader
    "split_line",
    "read_table",
    "read_stdin_table",
    # parser
    "bind_args",
    "build_usage",
    # cli
    "main",
    "run",
    "USAGE",
    "UsageError",
]
