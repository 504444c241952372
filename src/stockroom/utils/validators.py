"""
Input validation functions for the Stockroom application.

This module provides validation functions for user inputs entered in the
item form and the quantity adjustment dialog:
- Whole-number parsing (non-negative, strictly positive)
- String validation (required, length)
- Complete form draft validation

All validation functions raise ValidationError on failure.
"""

from typing import Any, Optional

from stockroom.services.exceptions import ValidationError

from .constants import (
    ERROR_INVALID_NON_NEGATIVE,
    ERROR_INVALID_NUMBER,
    ERROR_INVALID_POSITIVE,
    ERROR_QUANTITY_TOO_LARGE,
    ERROR_REQUIRED_FIELD,
    MAX_CATEGORY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_QUANTITY,
)


def validate_required_string(value: Optional[str], field_name: str = "Field") -> None:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Raises:
        ValidationError: If value is None, empty or whitespace only
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise ValidationError([f"{field_name}: {ERROR_REQUIRED_FIELD}"])


def validate_string_length(value: Optional[str], max_length: int, field_name: str = "Field") -> None:
    """
    Validate that a string doesn't exceed maximum length.

    Raises:
        ValidationError: If value is longer than max_length
    """
    if value and len(value) > max_length:
        raise ValidationError([f"{field_name}: Must be {max_length} characters or less"])


def parse_whole_number(value: Any, field_name: str = "Field") -> int:
    """
    Parse a whole number from user input.

    Accepts ints and strings holding an integer ("12", " 12 ", "12.0").
    Booleans, fractional values and non-numeric text are rejected.

    Args:
        value: Raw input value
        field_name: Name of the field for error messages

    Returns:
        The parsed integer

    Raises:
        ValidationError: If the value is not a whole number
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NUMBER}"])

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NUMBER}"])

    text = str(value).strip()
    if not text:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NUMBER}"])

    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NUMBER}"])

    # is_integer() is False for nan and inf as well
    if not number.is_integer():
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NUMBER}"])
    return int(number)


def parse_non_negative_int(value: Any, field_name: str = "Field") -> int:
    """
    Parse a whole number that must be zero or greater.

    Raises:
        ValidationError: If the value is not a whole number, negative or too large
    """
    number = parse_whole_number(value, field_name)
    if number < 0:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NON_NEGATIVE}"])
    if number > MAX_QUANTITY:
        raise ValidationError([f"{field_name}: {ERROR_QUANTITY_TOO_LARGE}"])
    return number


def parse_positive_int(value: Any, field_name: str = "Field") -> int:
    """
    Parse a whole number that must be strictly greater than zero.

    Raises:
        ValidationError: If the value is not a whole number, not positive or too large
    """
    number = parse_whole_number(value, field_name)
    if number <= 0:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_POSITIVE}"])
    if number > MAX_QUANTITY:
        raise ValidationError([f"{field_name}: {ERROR_QUANTITY_TOO_LARGE}"])
    return number


def validate_draft(draft) -> None:
    """
    Validate a form draft before it is submitted.

    Checks the required fields (name, current quantity, reorder point,
    category) and collects every problem into one ValidationError so the
    dialog can show them together.

    Args:
        draft: FormDraft instance

    Raises:
        ValidationError: If any field is missing or invalid
    """
    errors = []

    checks = [
        lambda: validate_required_string(draft.name, "Name"),
        lambda: validate_string_length(draft.name, MAX_NAME_LENGTH, "Name"),
        lambda: parse_non_negative_int(draft.current_quantity, "Current quantity"),
        lambda: parse_non_negative_int(draft.reorder_point, "Reorder point"),
        lambda: validate_required_string(draft.category, "Category"),
        lambda: validate_string_length(draft.category, MAX_CATEGORY_LENGTH, "Category"),
    ]
    for check in checks:
        try:
            check()
        except ValidationError as e:
            errors.extend(e.errors)

    if errors:
        raise ValidationError(errors)


__all__ = [
    "validate_required_string",
    "validate_string_length",
    "parse_whole_number",
    "parse_non_negative_int",
    "parse_positive_int",
    "validate_draft",
]
