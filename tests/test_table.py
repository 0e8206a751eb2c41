# tests/test_table.py
"""Tests for the table renderer."""

import pytest

from u8tbl.ui.static.styles import TableType, UnknownStyleError
from u8tbl.ui.static.table import column_widths, format_table, print_table
from u8tbl.ui.utils import display_width

BOX_STYLES = ["ascii", "unicode", "fancy"]
ALL_STYLES = ["ascii", "unicode", "fancy", "none", "tsv", "csv"]


class TestColumnWidths:
    def test_max_per_column(self):
        assert column_widths([["a", "bbb"], ["cc"], ["", "", "dddd"]]) == [2, 3, 4]

    def test_short_rows_do_not_lower_the_max(self):
        assert column_widths([["abc", "x"], []]) == [3, 1]

    def test_empty_grid(self):
        assert column_widths([]) == []

    def test_uses_display_width(self):
        assert column_widths([["日本"], ["abc"]]) == [4]


class TestBoxStyles:
    def test_unicode(self):
        out = format_table([["host", "id"], ["node-001", "2"]], "unicode")
        assert out == (
            "┌──────────┬────┐\n"
            "│ host     │ id │\n"
            "├──────────┼────┤\n"
            "│ node-001 │ 2  │\n"
            "└──────────┴────┘\n"
        )

    def test_ascii(self):
        out = format_table([["host", "id"], ["node-001", "2"]], TableType.ASCII)
        assert out == (
            "+----------+----+\n"
            "| host     | id |\n"
            "+----------+----+\n"
            "| node-001 | 2  |\n"
            "+----------+----+\n"
        )

    def test_fancy(self):
        out = format_table([["a", "bb"], ["c", "d"]], "fancy")
        assert out == (
            "\U0001FBA3───\U0001FBA6────\U0001FBA2\n"
            "\U0001FBA4 a │ bb \U0001FBA5\n"
            "\U0001FBA5───┼────\U0001FBA4\n"
            "\U0001FBA4 c │ d  \U0001FBA5\n"
            "\U0001FBA1───\U0001FBA7────\U0001FBA0\n"
        )

    def test_default_style_is_unicode(self):
        grid = [["a"]]
        assert format_table(grid) == format_table(grid, "unicode")

    def test_single_row_has_no_separator(self):
        assert format_table([["a"]], "ascii") == "+---+\n| a |\n+---+\n"

    @pytest.mark.parametrize("style", BOX_STYLES)
    def test_border_lines_have_equal_length(self, style):
        out = format_table([["a", "bbb", "日本"], ["cccc"], ["x", "y"]], style)
        lines = out.splitlines()
        top, separator, bottom = lines[0], lines[2], lines[-1]
        assert len(top) == len(separator) == len(bottom)
        # data lines line up with the borders in terminal columns
        widths = {display_width(line) for line in lines}
        assert len(widths) == 1


class TestSeparatorStyles:
    def test_csv(self):
        assert format_table([["a", "b"], ["c", "d"]], "csv") == "a,b\nc,d\n"

    def test_tsv(self):
        assert format_table([["a", "b"], ["c", "d"]], "tsv") == "a\tb\nc\td\n"

    def test_none_pads_columns(self):
        assert format_table([["ab", "c"], ["d", "e"]], "none") == " ab  c \n d   e \n"

    def test_csv_keeps_ragged_rows_as_empty_fields(self):
        assert format_table([["a", "b", "c"], ["x"]], "csv") == "a,b,c\nx,,\n"


class TestEdgeCases:
    @pytest.mark.parametrize("style", ALL_STYLES)
    def test_every_data_line_ends_in_newline(self, style):
        out = format_table([["a", "b"], ["c"], ["d", "e"]], style)
        assert out.endswith("\n")
        assert out.count("\n") >= 3

    def test_separator_styles_emit_only_data_newlines(self):
        for style in ("none", "tsv", "csv"):
            assert format_table([["a"], ["b"], ["c"]], style).count("\n") == 3

    def test_ragged_rows(self):
        out = format_table([["a", "b", "c"], ["x"]], "unicode")
        assert out == (
            "┌───┬───┬───┐\n"
            "│ a │ b │ c │\n"
            "├───┼───┼───┤\n"
            "│ x │   │   │\n"
            "└───┴───┴───┘\n"
        )

    def test_missing_cell_fills_whole_column(self):
        out = format_table([["a", "bbb"], ["x"]], "ascii")
        assert out.splitlines()[3] == "| x |     |"

    def test_longest_row_defines_column_count(self):
        out = format_table([["a"], ["b", "c", "d"]], "ascii")
        assert out.splitlines()[0] == "+---+---+---+"
        assert out.splitlines()[1] == "| a |   |   |"

    @pytest.mark.parametrize("style,expected", [
        ("unicode", "┌┐\n└┘\n"),
        ("ascii", "++\n++\n"),
        ("fancy", "\U0001FBA3\U0001FBA2\n\U0001FBA1\U0001FBA0\n"),
        ("csv", ""),
    ])
    def test_empty_grid(self, style, expected):
        assert format_table([], style) == expected

    def test_row_without_cells(self):
        assert format_table([[]], "unicode") == "┌┐\n││\n└┘\n"

    def test_wide_glyph_alignment(self):
        out = format_table([["日本"], ["ab"]], "unicode")
        assert out == (
            "┌──────┐\n"
            "│ 日本 │\n"
            "├──────┤\n"
            "│ ab   │\n"
            "└──────┘\n"
        )

    def test_no_truncation(self):
        long_cell = "x" * 200
        assert long_cell in format_table([[long_cell], ["y"]], "ascii")

    def test_non_string_cells(self):
        assert format_table([[1, 2.5, None]], "csv") == "1,2.5,None\n"

    def test_bytes_cells(self):
        assert format_table([[b"ab", "c"]], "csv") == "ab,c\n"

    def test_undecodable_bytes_use_byte_width(self):
        out = format_table([[b"\xff\xfe"], ["a"]], "ascii")
        assert out.splitlines()[0] == "+----+"
        assert out.splitlines()[3] == "| a  |"

    def test_undecodable_bytes_come_back_as_surrogates(self):
        out = format_table([[b"x\xff"]], "csv")
        assert out == "x\udcff\n"
        with pytest.raises(UnicodeEncodeError):
            out.encode("utf-8")

    def test_input_is_not_modified(self):
        grid = [["a", "b"], ["c"]]
        format_table(grid, "ascii")
        assert grid == [["a", "b"], ["c"]]

    def test_tuples_are_accepted(self):
        assert format_table((("a", "b"),), "csv") == "a,b\n"

    def test_unknown_style(self):
        with pytest.raises(UnknownStyleError):
            format_table([["a"]], "html")


class TestPrintTable:
    def test_prints_table_and_newline(self, capsys):
        print_table([["a", "b"]], "csv")
        assert capsys.readouterr().out == "a,b\n\n"

    def test_writes_to_given_file(self):
        import io

        buf = io.StringIO()
        print_table([["a"]], "ascii", file=buf)
        assert buf.getvalue() == "+---+\n| a |\n+---+\n\n"

    def test_writes_undecodable_bytes_back_out(self, capsysbinary):
        print_table([[b"x\xff", "y"]], "csv")
        assert capsysbinary.readouterr().out == b"x\xff,y\n\n"
