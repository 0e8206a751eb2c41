#!/usr/bin/env python3
# u8tbl/ui/static/styles.py
from __future__ import annotations

"""
Table styles.

Every style is a frozen glyph record. The set is closed:

    ascii     +----+----+      unicode   ┌────┬────┐      fancy   🮣────🮦────🮢
              | a  | b  |                │ a  │ b  │              🮤 a  │ b  🮥
              +----+----+                ├────┼────┤              🮥────┼────🮤
              | c  | d  |                │ c  │ d  │              🮤 c  │ d  🮥
              +----+----+                └────┴────┘              🮡────🮧────🮠

    none      padded columns, no borders
    tsv       tab separated, no padding
    csv       comma separated, no padding
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class TableType(Enum):
    ASCII = 0
    UNICODE = 1
    FANCY = 2
    NONE = 3
    TSV = 4
    CSV = 5

    @property
    def label(self) -> str:
        return self.name.lower()


class UnknownStyleError(ValueError):
    """Raised when a style name is not one of the registered styles."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(
            f"Unknown table style {name!r}; expected one of {', '.join(style_names())}")


@dataclass(frozen=True)
class TableFormat:
    name: str

    top_left: str
    top_horizontal: str
    top_middle: str
    top_right: str

    left_middle: str
    left_vertical: str

    middle_vertical: str
    middle_horizontal: str
    middle_middle: str

    right_middle: str
    right_vertical: str

    bottom_left: str
    bottom_horizontal: str
    bottom_middle: str
    bottom_right: str

    newline: str
    padding: str


def _separated(name: str, separator: str, padding: str) -> TableFormat:
    """A borderless format: every glyph empty except the column separator and padding."""
    return TableFormat(
        name=name,
        top_left="", top_horizontal="", top_middle="", top_right="",
        left_middle="", left_vertical="",
        middle_vertical=separator, middle_horizontal="", middle_middle="",
        right_middle="", right_vertical="",
        bottom_left="", bottom_horizontal="", bottom_middle="", bottom_right="",
        newline="",
        padding=padding,
    )


ASCII_FORMAT = TableFormat(
    name="ascii",
    top_left="+", top_horizontal="-", top_middle="+", top_right="+",
    left_middle="+", left_vertical="|",
    middle_vertical="|", middle_horizontal="-", middle_middle="+",
    right_middle="+", right_vertical="|",
    bottom_left="+", bottom_horizontal="-", bottom_middle="+", bottom_right="+",
    newline="\n",
    padding=" ",
)

UNICODE_FORMAT = TableFormat(
    name="unicode",
    top_left="┌", top_horizontal="─", top_middle="┬", top_right="┐",
    left_middle="├", left_vertical="│",
    middle_vertical="│", middle_horizontal="─", middle_middle="┼",
    right_middle="┤", right_vertical="│",
    bottom_left="└", bottom_horizontal="─", bottom_middle="┴", bottom_right="┘",
    newline="\n",
    padding=" ",
)

FANCY_FORMAT = TableFormat(
    name="fancy",
    top_left="🮣", top_horizontal="─", top_middle="🮦", top_right="🮢",
    left_middle="🮥", left_vertical="🮤",
    middle_vertical="│", middle_horizontal="─", middle_middle="┼",
    right_middle="🮤", right_vertical="🮥",
    bottom_left="🮡", bottom_horizontal="─", bottom_middle="🮧", bottom_right="🮠",
    newline="\n",
    padding=" ",
)

NO_FORMAT = _separated("none", "", " ")
TSV_FORMAT = _separated("tsv", "\t", "")
CSV_FORMAT = _separated("csv", ",", "")

STYLES: Mapping[TableType, TableFormat] = MappingProxyType({
    TableType.ASCII: ASCII_FORMAT,
    TableType.UNICODE: UNICODE_FORMAT,
    TableType.FANCY: FANCY_FORMAT,
    TableType.NONE: NO_FORMAT,
    TableType.TSV: TSV_FORMAT,
    TableType.CSV: CSV_FORMAT,
})

StyleLike = Union[TableFormat, TableType, str]


def style_names() -> tuple[str, ...]:
    return tuple(t.label for t in TableType)


def parse_table_type(value: Union[TableType, str]) -> TableType:
    """Map a style name (any case, surrounding blanks ignored) to its TableType."""
    if isinstance(value, TableType):
        return value
    try:
        return TableType[str(value).strip().upper()]
    except KeyError:
        raise UnknownStyleError(value) from None


def resolve(style: StyleLike) -> TableFormat:
    """Return the glyph record for a style name, TableType or an existing TableFormat."""
    if isinstance(style, TableFormat):
        return style
    return STYLES[parse_table_type(style)]
