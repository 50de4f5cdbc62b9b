"""Tests for the CSV tokenizer."""

import pytest

from csv_json_converter.errors import MalformedInputError
from csv_json_converter.tokenizer import parse


class TestBasicRows:
    def test_simple_rows(self):
        assert parse("name,age\nJohn,30\n") == [["name", "age"], ["John", "30"]]

    def test_last_row_without_newline(self):
        assert parse("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_empty_text(self):
        assert parse("") == []

    def test_empty_fields(self):
        assert parse(",a,\n") == [["", "a", ""]]

    def test_trailing_delimiter_at_end_of_input(self):
        assert parse("a,") == [["a", ""]]

    def test_single_delimiter_yields_two_empty_fields(self):
        assert parse(",") == [["", ""]]

    def test_custom_delimiter(self):
        assert parse("a;b,c\n1;2", delimiter=";") == [["a", "b,c"], ["1", "2"]]

    def test_tab_delimiter(self):
        assert parse("a\tb\n1\t2", delimiter="\t") == [["a", "b"], ["1", "2"]]

    def test_whitespace_is_kept(self):
        assert parse(" a , b ") == [[" a ", " b "]]


class TestLineBreaks:
    def test_crlf_is_one_line_break(self):
        assert parse("a,b\r\n1,2\r\n") == [["a", "b"], ["1", "2"]]

    def test_lone_carriage_return_is_literal(self):
        assert parse("a\rb,c") == [["a\rb", "c"]]

    def test_blank_lines_are_skipped(self):
        assert parse("a,b\n\n1,2\n\n\n") == [["a", "b"], ["1", "2"]]

    def test_byte_order_mark_is_stripped(self):
        assert parse("﻿id,name\n1,x") == [["id", "name"], ["1", "x"]]


class TestQuoting:
    def test_delimiter_inside_quotes(self):
        assert parse('"a,b",c') == [["a,b", "c"]]

    def test_escaped_quotes(self):
        assert parse('"He said ""hi""",x') == [['He said "hi"', "x"]]

    def test_multiline_quoted_field(self):
        assert parse('"line1\nline2",x') == [["line1\nline2", "x"]]

    def test_crlf_inside_quotes_becomes_newline(self):
        assert parse('"line1\r\nline2",x\r\n') == [["line1\nline2", "x"]]

    def test_quoted_empty_field(self):
        assert parse('""') == [[""]]

    def test_quoted_field_at_end_of_row(self):
        assert parse('a,"b"\nc,"d"') == [["a", "b"], ["c", "d"]]

    def test_quote_inside_unquoted_field_is_literal(self):
        assert parse('ab"c,d') == [['ab"c', "d"]]

    def test_quoted_blank_line_is_a_row(self):
        assert parse('h\n""\n') == [["h"], [""]]


class TestMalformedInput:
    def test_unterminated_quote(self):
        with pytest.raises(MalformedInputError) as exc:
            parse('a,b\n"never closed,x\n')
        assert exc.value.line == 2
        assert exc.value.column == 1

    def test_character_after_closing_quote(self):
        with pytest.raises(MalformedInputError) as exc:
            parse('"ab"c,d')
        assert exc.value.line == 1
        assert exc.value.column == 5

    def test_error_position_counts_physical_lines(self):
        with pytest.raises(MalformedInputError) as exc:
            parse('x\n"multi\nline"!')
        assert exc.value.line == 3
        assert exc.value.column == 6
