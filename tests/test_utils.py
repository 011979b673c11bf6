"""Tests for shared formatting helpers."""

from datetime import date

from src.utils import clean, format_currency, format_long_date


class TestFormatCurrency:
    def test_thousands_separator(self):
        assert format_currency(3000) == "$3,000.00"

    def test_two_decimal_places(self):
        assert format_currency(2024) == "$2,024.00"

    def test_rounds_half_up(self):
        assert format_currency(1234.565) == "$1,234.57"

    def test_small_amount(self):
        assert format_currency(0.5) == "$0.50"

    def test_custom_symbol(self):
        assert format_currency(10, symbol="€") == "€10.00"

    def test_negative_amount(self):
        assert format_currency(-12.5) == "-$12.50"

    def test_amount_beyond_default_precision(self):
        assert format_currency(1e30) == "$1,000,000,000,000,000,000,000,000,000,000.00"

    def test_infinite_amount(self):
        assert format_currency(float("inf")) == "$∞"
        assert format_currency(float("-inf")) == "-$∞"


class TestFormatLongDate:
    def test_month_name_day_year(self):
        assert format_long_date(date(2024, 6, 10)) == "June 10, 2024"

    def test_single_digit_day_not_padded(self):
        assert format_long_date(date(2024, 1, 5)) == "January 5, 2024"


class TestClean:
    def test_strips_whitespace(self):
        assert clean("  Jane  ") == "Jane"

    def test_none_is_empty(self):
        assert clean(None) == ""

    def test_number_to_string(self):
        assert clean(12) == "12"
