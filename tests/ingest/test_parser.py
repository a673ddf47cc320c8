"""Tests for ingest/parser.py."""

from __future__ import annotations

import pytest

from trendkit.core.errors import EEmptyInput
from trendkit.core.types import Number, Text
from trendkit.ingest import detect_delimiter, normalize_header, parse, split_lines


class TestSplitLines:
    """Tests for line splitting."""

    def test_drops_blank_lines_and_trims(self):
        assert split_lines("  a,b \n\n   \n1,2\n") == ["a,b", "1,2"]

    def test_crlf(self):
        assert split_lines("a,b\r\n1,2\r\n") == ["a,b", "1,2"]


class TestDetectDelimiter:
    """Tests for delimiter detection."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("a,b,c", ","),
            ("a;b;c", ";"),
            ("a\tb\tc", "\t"),
            ("a|b|c", "|"),
        ],
    )
    def test_single_candidate(self, line, expected):
        assert detect_delimiter(line) == expected

    def test_priority_order(self):
        """Comma beats semicolon when both split the header."""
        assert detect_delimiter("a;b,c") == ","
        assert detect_delimiter("a|b;c") == ";"

    def test_none_found(self):
        assert detect_delimiter("single") is None
        assert detect_delimiter("a b c") is None


class TestNormalizeHeader:
    """Tests for header normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Revenue", "revenue"),
            ("Order Date", "order_date"),
            ("Sales Amount ($)", "sales_amount____"),
            ("units_sold", "units_sold"),
            ("  Q1 ", "q1"),
            ("", "field"),
            ("   ", "field"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_header(raw) == expected


class TestParse:
    """Tests for parse()."""

    def test_semicolon_dataset(self):
        """Header 'a;b;c' selects ';' as delimiter."""
        dataset = parse("a;b;c\n1;2;3\n4;5;6\n")
        assert dataset.delimiter == ";"
        assert dataset.headers == ("a", "b", "c")
        assert dataset.n_rows == 2
        assert dataset.series("b") == (2.0, 5.0)

    def test_tab_and_pipe(self):
        assert parse("x\ty\n1\t2").delimiter == "\t"
        assert parse("x|y\n1|2").delimiter == "|"

    def test_headers_normalized(self):
        dataset = parse("Month,Total Sales\nJan,10\n")
        assert dataset.headers == ("month", "total_sales")

    def test_empty_header_gets_placeholder(self):
        dataset = parse("a,,b\n1,2,3\n")
        assert dataset.headers == ("a", "field", "b")
        assert dataset.series("field") == (2.0,)

    def test_duplicate_headers_made_unique(self):
        dataset = parse("Sales,sales,SALES\n1,2,3\n")
        assert dataset.headers == ("sales", "sales_2", "sales_3")

    def test_fields_trimmed_and_typed(self):
        dataset = parse("name,value\n  widget ,  12.5 \n")
        row = dataset.rows[0]
        assert row["name"] == Text("widget")
        assert row["value"] == Number(12.5)

    def test_partial_number_kept_as_text(self):
        dataset = parse("code,qty\nA,12abc\nB,7\n")
        assert dataset.rows[0]["qty"] == Text("12abc")
        assert dataset.series("qty") == (7.0,)

    def test_short_rows_padded(self):
        """Missing trailing fields map to empty text."""
        dataset = parse("a,b,c\n1,2\n")
        assert dataset.rows[0]["c"] == Text("")

    def test_long_rows_truncated(self):
        dataset = parse("a,b\n1,2,3,4\n")
        assert set(dataset.rows[0]) == {"a", "b"}

    def test_header_only(self):
        dataset = parse("a,b,c\n")
        assert dataset.headers == ("a", "b", "c")
        assert dataset.n_rows == 0

    def test_whitespace_fallback_single_column(self):
        """No delimiter and single-token rows: synthesized headers, first line is data."""
        dataset = parse("10\n20\n30\n")
        assert dataset.delimiter is None
        assert dataset.headers == ("Column_1",)
        assert dataset.series("Column_1") == (10.0, 20.0, 30.0)

    def test_whitespace_fallback_multi_column(self):
        dataset = parse("1 2   3\n4 5 6\n")
        assert dataset.headers == ("Column_1", "Column_2", "Column_3")
        assert dataset.n_rows == 2
        assert dataset.series("Column_3") == (3.0, 6.0)

    def test_whitespace_fallback_field_count_from_first_line(self):
        dataset = parse("1 2\n3 4 5\n6\n")
        assert dataset.headers == ("Column_1", "Column_2")
        assert dataset.rows[2]["Column_2"] == Text("")

    @pytest.mark.parametrize("text", ["", "   ", "\n\n  \n", "\r\n\t\r\n"])
    def test_empty_input(self, text):
        with pytest.raises(EEmptyInput):
            parse(text)

    def test_deterministic(self):
        """Re-parsing identical text yields structurally equal datasets."""
        text = "month;sales;flag\nJan;10;0\nFeb;12;1\nMar;x;0\n"
        first, second = parse(text), parse(text)
        assert first == second
        assert [dict(r) for r in first.rows] == [dict(r) for r in second.rows]
