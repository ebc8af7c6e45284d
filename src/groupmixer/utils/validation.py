"""Validation utilities for Group Mixer.

This module provides reusable validation functions with consistent error handling.
"""

import re
from typing import Any, Optional

from groupmixer.constants import (
    MAX_AGE,
    MAX_LEVEL,
    MAX_NAME_LENGTH,
    MIN_AGE,
    MIN_LEVEL,
    MIN_NAME_LENGTH,
)
from groupmixer.exceptions import InvalidPersonDataException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a person's display name.

    Whitespace runs are collapsed and the result must hold between
    ``MIN_NAME_LENGTH`` and ``MAX_NAME_LENGTH`` characters.

    Example:
        >>> validate_name("  Jane   Smith ").sanitized_value
        'Jane Smith'
    """
    if name is None or (isinstance(name, str) and not name.strip()):
        return ValidationResult(is_valid=False, error_message="Name is required")
    if not isinstance(name, str):
        return ValidationResult(
            is_valid=False, error_message=f"Name must be text, got {name!r}"
        )

    name = re.sub(r"\s+", " ", name.strip())

    if len(name) < MIN_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Name too short (minimum {MIN_NAME_LENGTH} characters): {name}"
            ),
        )
    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name too long (maximum {MAX_NAME_LENGTH} characters)",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


# ========== Numeric Validation ==========


def validate_bounded_int(
    value: Any, minimum: int, maximum: int, label: str
) -> ValidationResult:
    """Validate an integer attribute lying in ``[minimum, maximum]``.

    Booleans are rejected even though they are ``int`` subclasses.
    """
    if isinstance(value, bool):
        return ValidationResult(
            is_valid=False, error_message=f"{label} must be an integer, got {value!r}"
        )
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return ValidationResult(
            is_valid=False, error_message=f"{label} must be an integer, got {value!r}"
        )

    if isinstance(value, float) and not value.is_integer():
        return ValidationResult(
            is_valid=False, error_message=f"{label} must be a whole number: {value}"
        )

    if number < minimum or number > maximum:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"{label} must be between {minimum} and {maximum}, got {number}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=number)


def validate_level(value: Any, label: str) -> ValidationResult:
    """Validate a 1-4 ordinal level (French fluency, technical level)."""
    return validate_bounded_int(value, MIN_LEVEL, MAX_LEVEL, label)


def validate_age(value: Any) -> ValidationResult:
    """Validate an age in years."""
    return validate_bounded_int(value, MIN_AGE, MAX_AGE, "Age")


def require_valid(result: ValidationResult) -> Any:
    """Return the sanitized value or raise.

    Raises:
        InvalidPersonDataException: If the result is invalid
    """
    if not result.is_valid:
        raise InvalidPersonDataException(result.error_message)
    return result.sanitized_value
