"""
Input validation utilities.

Centralized validation logic with clear error messages.
Philosophy: Simple, clear, and reusable validation functions.
"""

from typing import Any, Optional
import re
import logging

import phonenumbers

logger = logging.getLogger(__name__)

EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'


class ValidationResult:
    """Result of a validation check"""

    def __init__(self, is_valid: bool, error: Optional[str] = None):
        self.is_valid = is_valid
        self.error = error

    def __bool__(self):
        return self.is_valid


def validate_string(
    value: Any,
    field_name: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    pattern: Optional[str] = None,
    required: bool = True
) -> ValidationResult:
    """
    Validate string value.

    Whitespace-only values count as missing.

    Args:
        value: Value to validate
        field_name: Field name for error messages
        min_length: Minimum string length
        max_length: Maximum string length
        pattern: Regex pattern to match
        required: Whether field is required

    Returns:
        ValidationResult
    """
    str_value = str(value).strip() if value is not None else ''

    # Check required
    if not str_value and required:
        return ValidationResult(False, f"{field_name} is required")

    if not str_value and not required:
        return ValidationResult(True)

    # Check min length
    if min_length is not None and len(str_value) < min_length:
        return ValidationResult(
            False,
            f"{field_name} must be at least {min_length} characters"
        )

    # Check max length
    if max_length is not None and len(str_value) > max_length:
        return ValidationResult(
            False,
            f"{field_name} must be at most {max_length} characters"
        )

    # Check pattern
    if pattern and not re.match(pattern, str_value):
        return ValidationResult(
            False,
            f"{field_name} format is invalid"
        )

    return ValidationResult(True)


def validate_email(email: Any) -> ValidationResult:
    """
    Validate e-mail address shape (something@domain.tld).

    Args:
        email: Address to validate

    Returns:
        ValidationResult
    """
    result = validate_string(email, "Email", max_length=254)
    if not result:
        return result

    if not re.match(EMAIL_PATTERN, str(email).strip()):
        return ValidationResult(False, "Please enter a valid email address")

    return ValidationResult(True)


def validate_phone(phone: Any, region: Optional[str] = None) -> ValidationResult:
    """
    Validate an optional phone number against libphonenumber's numbering plans.

    Args:
        phone: Number to validate; empty means not provided
        region: ISO country code for numbers written without "+"; when
            None, only international numbers are accepted

    Returns:
        ValidationResult
    """
    if not phone or not str(phone).strip():
        return ValidationResult(True)

    invalid = ValidationResult(False, "Please enter a valid phone number")
    try:
        number = phonenumbers.parse(str(phone).strip(), region)
    except phonenumbers.NumberParseException as e:
        logger.debug(f"Unparseable phone number: {e}")
        return invalid

    if not phonenumbers.is_valid_number(number):
        return invalid

    return ValidationResult(True)


# Composite validators for common use cases

def validate_name(value: Any, field_name: str) -> ValidationResult:
    """Validate a required person name"""
    return validate_string(value, field_name, max_length=100)
