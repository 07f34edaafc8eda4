"""
Tests for the pandas-backed CSV parser.
"""
import pytest

from csv_preview.core.cells import Cell
from csv_preview.core.errors import ParseError
from csv_preview.core.parser import ParseOptions, detect_delimiter, parse


class TestParse:
    """Test parse() results."""

    def test_basic(self, sample_csv):
        result = parse(sample_csv)

        assert result.headers == ["a", "b"]
        assert len(result.rows) == 3
        assert result.errors == []
        assert result.rows[0] == {"a": Cell.number(1), "b": Cell.text("x")}
        assert result.rows[2]["a"] == Cell.number(3)

    def test_empty_field_becomes_null(self):
        result = parse("a,b\n1,\n,y\n")

        assert result.rows[0]["b"].is_null
        assert result.rows[1]["a"].is_null
        assert result.rows[1]["b"] == Cell.text("y")

    def test_per_field_coercion(self):
        result = parse("v\n1\nx\n2.5\n")

        assert [row["v"] for row in result.rows] == [
            Cell.number(1), Cell.text("x"), Cell.number(2.5)
        ]

    def test_semicolon_detected(self):
        result = parse("a;b\n1;2\n")

        assert result.meta["delimiter"] == ";"
        assert result.headers == ["a", "b"]

    def test_quoted_delimiter(self):
        result = parse('a,b\n"x,y",1\n')

        assert result.rows[0]["a"] == Cell.text("x,y")
        assert result.rows[0]["b"] == Cell.number(1)

    def test_blank_lines_skipped(self):
        result = parse("a,b\n1,2\n\n3,4\n")

        assert len(result.rows) == 2

    def test_too_many_fields_reported_and_skipped(self):
        result = parse("a,b\n1,2\n3,4,5\n6,7\n")

        assert [row["a"].value for row in result.rows] == [1, 6]
        assert len(result.errors) == 1
        assert result.first_error.startswith("Too many fields")
        assert result.errors[0].row == 1

    def test_too_few_fields_reported_and_kept(self):
        result = parse("a,b\n1\n2,y\n")

        assert len(result.rows) == 2
        assert result.rows[0]["a"] == Cell.number(1)
        assert result.rows[0]["b"].is_null
        assert len(result.errors) == 1
        assert result.errors[0].message == "Too few fields: expected 2 fields but parsed 1"
        assert result.errors[0].row == 0

    def test_issues_in_record_order(self):
        result = parse("a,b\n1\n2,y\n3,z,extra\n")

        assert [issue.row for issue in result.errors] == [0, 2]
        assert result.first_error.startswith("Too few fields")

    def test_unterminated_quote_keeps_last_record(self):
        result = parse('a,b\n1,x\n2,y\n3,"z\n')

        assert len(result.rows) == 3
        assert result.rows[2] == {"a": Cell.number(3), "b": Cell.text("z")}
        assert result.first_error == "Quoted field unterminated"
        assert result.errors[0].row == 2

    def test_escaped_quotes_are_not_unterminated(self):
        result = parse('a,b\n"say ""hi""",1\n')

        assert result.errors == []
        assert result.rows[0]["a"] == Cell.text('say "hi"')

    def test_quoted_semicolons_do_not_change_delimiter(self):
        result = parse('name,note\nA,"a;b;c"\nB,"d;e;f"\n')

        assert result.meta["delimiter"] == ","
        assert result.headers == ["name", "note"]
        assert result.rows[0]["note"] == Cell.text("a;b;c")

    def test_multi_character_delimiter_reported(self):
        result = parse("a::b\n1::2\n", ParseOptions(delimiter="::"))

        assert result.rows == []
        assert result.first_error.startswith("Delimiter must be a single character")

    def test_empty_input(self):
        result = parse("")

        assert result.rows == []
        assert result.headers == []
        assert result.first_error is not None

    def test_raise_for_errors(self):
        with pytest.raises(ParseError):
            parse("").raise_for_errors()

        parse("a\n1\n").raise_for_errors()

    def test_no_header(self):
        result = parse("1,2\n3,4\n", ParseOptions(header=False))

        assert result.headers == ["0", "1"]
        assert len(result.rows) == 2

    def test_without_dynamic_typing(self):
        result = parse("a\n1\n", ParseOptions(dynamic_typing=False))

        assert result.rows[0]["a"] == Cell.text("1")

    def test_duplicate_headers_are_made_unique(self):
        result = parse("a,a\n1,2\n")

        assert len(set(result.headers)) == 2
        assert result.to_dataset().column_count == 2


class TestDetectDelimiter:
    """Test delimiter sniffing."""

    @pytest.mark.parametrize("text,expected", [
        ("a,b,c\n1,2,3", ","),
        ("a;b;c\n1;2;3", ";"),
        ("a\tb\n1\t2", "\t"),
        ("a|b\n1|2", "|"),
        ("single\nvalue", ","),
        ('name,note\nA,"a;b;c"\nB,"d;e;f"', ","),
        ('a;b\n"1,2,3";x\n"4,5,6";y', ";"),
        ('a|b\n"x\ty"|1', "|"),
    ])
    def test_detect(self, text, expected):
        assert detect_delimiter(text) == expected
