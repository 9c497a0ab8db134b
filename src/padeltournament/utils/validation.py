"""Validation utilities for Padel Tournament.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Optional

from padeltournament.exceptions import ValidationError


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
        sanitized_value=None,
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

    def raise_if_invalid(self):
        """Return the sanitized value or raise ValidationError."""
        if not self.is_valid:
            raise ValidationError(self.error_message)
        return self.sanitized_value


# ========== Name Validation ==========


def validate_name(
    name: Optional[str], field_name: str = "Name", required: bool = True
) -> ValidationResult:
    """Validate a display name (player or group).

    Args:
        name: Name to validate
        field_name: Name of the field for error messages
        required: Whether name is required

    Returns:
        ValidationResult with the stripped name
    """
    if name is None or not str(name).strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message=f"{field_name} is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


def validate_name_strict(name: Optional[str], field_name: str = "Name") -> str:
    """Validate a required name and return it stripped.

    Raises:
        ValidationError: If the name is missing or blank
    """
    return validate_name(name, field_name, required=True).raise_if_invalid()


# ========== Numeric Validation ==========


def validate_games(value, field_name: str = "Score") -> ValidationResult:
    """Validate a games count: a non-negative integer.

    Booleans and floats are rejected even when they compare equal to an int.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with the integer value
    """
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a whole number: {value!r}",
        )

    if value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be negative: {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_distinct(
    first, second, first_label: str, second_label: str
) -> ValidationResult:
    """Validate that two references are both set and differ.

    Used for a team's two players and for the two sides of a match.
    """
    if first is None:
        return ValidationResult(
            is_valid=False, error_message=f"{first_label} is required"
        )
    if second is None:
        return ValidationResult(
            is_valid=False, error_message=f"{second_label} is required"
        )
    if first == second:
        return ValidationResult(
            is_valid=False,
            error_message=f"{second_label} must be different from {first_label}",
        )
    return ValidationResult(is_valid=True, sanitized_value=(first, second))
