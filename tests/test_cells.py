"""
Tests for Cell values and per-field coercion.
"""
import pytest

from csv_preview.core.cells import Cell, CellKind, cell_from_value, coerce_field, format_number


class TestCoerceField:
    """Test numeric coercion of raw fields."""

    @pytest.mark.parametrize("raw,expected", [
        ("12", 12),
        ("-3", -3),
        (" 7 ", 7),
        ("1.5", 1.5),
        (".5", 0.5),
        ("1e3", 1000.0),
    ])
    def test_numbers(self, raw, expected):
        cell = coerce_field(raw)
        assert cell.kind is CellKind.NUMBER
        assert cell.value == expected

    def test_integer_literal_stays_int(self):
        assert isinstance(coerce_field("42").value, int)
        assert isinstance(coerce_field("4.2").value, float)

    @pytest.mark.parametrize("raw", ["abc", "1.2.3", ".", "12px", "1,000"])
    def test_text(self, raw):
        cell = coerce_field(raw)
        assert cell.kind is CellKind.TEXT
        assert cell.value == raw

    def test_empty_string_is_null(self):
        assert coerce_field("").is_null

    def test_missing_field_is_null(self):
        assert coerce_field(None).is_null

    def test_without_dynamic_typing(self):
        assert coerce_field("12", dynamic_typing=False) == Cell.text("12")
        assert coerce_field("", dynamic_typing=False) == Cell.text("")


class TestCell:
    """Test Cell equality and text form."""

    def test_numbers_compare_by_value(self):
        assert Cell.number(1) == Cell.number(1.0)
        assert hash(Cell.number(1)) == hash(Cell.number(1.0))

    def test_number_differs_from_text(self):
        assert Cell.number(1) != Cell.text("1")

    def test_as_text(self):
        assert Cell.null().as_text() == ""
        assert Cell.number(2).as_text() == "2"
        assert Cell.number(2.0).as_text() == "2"
        assert Cell.number(2.5).as_text() == "2.5"
        assert Cell.text("Paris").as_text() == "Paris"

    def test_format_number(self):
        assert format_number(1000.0) == "1000"
        assert format_number(0.1) == "0.1"
        assert format_number(-7) == "-7"

    def test_cell_from_value(self):
        assert cell_from_value(None).is_null
        assert cell_from_value(float("nan")).is_null
        assert cell_from_value(3) == Cell.number(3)
        assert cell_from_value("x") == Cell.text("x")
        assert cell_from_value(True) == Cell.text("true")
