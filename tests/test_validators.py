"""Tests for input validation helpers."""

import pytest

from stockroom.services.exceptions import ValidationError
from stockroom.utils.constants import MAX_QUANTITY
from stockroom.utils.validators import (
    parse_non_negative_int,
    parse_positive_int,
    parse_whole_number,
    validate_required_string,
    validate_string_length,
)


class TestParseWholeNumber:
    @pytest.mark.parametrize("value,expected", [(7, 7), ("12", 12), (" 3 ", 3), ("4.0", 4), (2.0, 2)])
    def test_accepts(self, value, expected):
        assert parse_whole_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "1.5", 2.5, None, True, "nan", "inf"])
    def test_rejects(self, value):
        with pytest.raises(ValidationError):
            parse_whole_number(value, "Quantity")

    def test_message_names_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_whole_number("x", "Quantity")
        assert exc_info.value.errors == ["Quantity: Please enter a whole number"]


class TestRanges:
    def test_non_negative_accepts_zero(self):
        assert parse_non_negative_int("0") == 0

    def test_non_negative_rejects_negative(self):
        with pytest.raises(ValidationError):
            parse_non_negative_int(-1)

    @pytest.mark.parametrize("value", [0, "0", -3])
    def test_positive_rejects(self, value):
        with pytest.raises(ValidationError):
            parse_positive_int(value)

    def test_upper_limit(self):
        assert parse_positive_int(MAX_QUANTITY) == MAX_QUANTITY
        with pytest.raises(ValidationError):
            parse_positive_int(MAX_QUANTITY + 1)


class TestStrings:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required(self, value):
        with pytest.raises(ValidationError):
            validate_required_string(value, "Name")

    def test_required_passes(self):
        validate_required_string("Garfo", "Name")

    def test_length(self):
        validate_string_length("abc", 3)
        with pytest.raises(ValidationError):
            validate_string_length("abcd", 3)
