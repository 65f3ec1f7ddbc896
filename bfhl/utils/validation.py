"""
Operand validation for /bfhl operations.
"""

from typing import Any, List
from dataclasses import dataclass


@dataclass
class ValidationResult:
    """Result of validation check."""

    valid: bool
    errors: List[str]

    def __bool__(self) -> bool:
        """Allow using as boolean."""
        return self.valid


def is_integer(value: Any) -> bool:
    """
    Check whether a decoded JSON value is an integer.

    Integral floats (e.g. 7.0) count as integers. Booleans never do.

    Args:
        value: Decoded JSON value

    Returns:
        True if value is an integer
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return False


def validate_fibonacci(value: Any, maximum: int) -> ValidationResult:
    """
    Validate fibonacci operand.

    Args:
        value: Operand from request body
        maximum: Largest accepted term count

    Returns:
        ValidationResult with errors if invalid
    """
    errors = []

    if not is_integer(value) or value < 0:
        errors.append("fibonacci must be a non-negative integer")
    elif value > maximum:
        errors.append(f"fibonacci must not exceed {maximum}")

    return ValidationResult(valid=len(errors) == 0, errors=errors)


def validate_prime(value: Any) -> ValidationResult:
    """
    Validate prime operand. Only the container type is checked.

    Args:
        value: Operand from request body

    Returns:
        ValidationResult with errors if invalid
    """
    errors = []

    if not isinstance(value, list):
        errors.append("prime must be an array of integers")

    return ValidationResult(valid=len(errors) == 0, errors=errors)


def validate_positive_integers(value: Any, name: str) -> ValidationResult:
    """
    Validate a non-empty array of positive integers (lcm / hcf operands).

    Args:
        value: Operand from request body
        name: Operation name used in the error message

    Returns:
        ValidationResult with errors if invalid
    """
    errors = []

    if (
        not isinstance(value, list)
        or len(value) == 0
        or not all(is_integer(n) and n > 0 for n in value)
    ):
        errors.append(f"{name} must be an array of positive integers")

    return ValidationResult(valid=len(errors) == 0, errors=errors)


def validate_question(value: Any) -> ValidationResult:
    """
    Validate AI operand.

    Args:
        value: Operand from request body

    Returns:
        ValidationResult with errors if invalid
    """
    errors = []

    if not isinstance(value, str) or not value.strip():
        errors.append("AI must be a non-empty string")

    return ValidationResult(valid=len(errors) == 0, errors=errors)
