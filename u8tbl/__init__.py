#!/usr/bin/env python3
# u8tbl/__init__.py
from __future__ import annotations
"""
u8tbl: render grids of text as aligned tables.

    >>> from u8tbl import format_table
    >>> print(format_table([["host", "id"], ["node-001", "2"]], "ascii"), end="")
    +----------+----+
    | host     | id |
    +----------+----+
    | node-001 | 2  |
    +----------+----+

Only the rendering API is re-exported here; the command line lives in
`u8tbl.interface` and configuration in `u8tbl.settings`.
"""

from u8tbl.ui import (
    STYLES,
    TableFormat,
    TableType,
    UnknownStyleError,
    column_widths,
    display_width,
    format_table,
    print_table,
    resolve,
    style_names,
)

__all__ = [
    "STYLES",
    "TableFormat",
    "TableType",
    "UnknownStyleError",
    "column_widths",
    "display_width",
    "format_table",
    "print_table",
    "resolve",
    "style_names",
]
