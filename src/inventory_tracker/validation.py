"""
Validators for user-supplied field values.

Each validator returns a ValidationResult instead of looping, so the caller
decides whether to re-prompt (the interactive menu) or reject outright.
"""
from typing import Any, Optional

from pydantic import BaseModel

from .models import CATEGORIES, is_valid_category


SORT_ORDERS = {
    '1': 'ascending',
    'asc': 'ascending',
    'ascending': 'ascending',
    '2': 'descending',
    'desc': 'descending',
    'descending': 'descending',
}


class ValidationResult(BaseModel):
    """Outcome of validating one input value."""
    ok: bool
    value: Optional[Any] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)


# Longer input could exceed int conversion limits or overflow a float
MAX_DIGITS = 18


def is_digits(text: str) -> bool:
    """True for a non-empty string of at most MAX_DIGITS ASCII digits."""
    return 0 < len(text) <= MAX_DIGITS and text.isascii() and text.isdigit()


def _numeric_reason(field: str) -> str:
    return f"Invalid input. Please enter a non-negative numeric value for {field}."


def validate_category(text: str) -> ValidationResult:
    text = text.strip()
    if not is_valid_category(text):
        return ValidationResult.failure(f"Category {text} does not exist!")
    return ValidationResult.success(text.lower())


def validate_quantity(text: str) -> ValidationResult:
    """
    Validate a quantity typed by the user.

    Only plain digits are accepted; a minus sign or decimal point is rejected
    rather than parsed.
    """
    text = text.strip()
    if not is_digits(text):
        return ValidationResult.failure(_numeric_reason("Quantity"))
    return ValidationResult.success(int(text))


def validate_price(text: str) -> ValidationResult:
    """
    Validate a price typed by the user.

    Same digits-only rule as quantities, so prices can only be entered as
    whole numbers. The value is returned as a float.
    """
    text = text.strip()
    if not is_digits(text):
        return ValidationResult.failure(_numeric_reason("Price"))
    return ValidationResult.success(float(text))


def validate_item_id(text: str) -> ValidationResult:
    text = text.strip()
    if not text:
        return ValidationResult.failure("Item ID cannot be empty.")
    return ValidationResult.success(text.upper())


def validate_sort_order(text: str) -> ValidationResult:
    order = SORT_ORDERS.get(text.strip().lower())
    if order is None:
        return ValidationResult.failure("Invalid choice! Sorting will not be performed.")
    return ValidationResult.success(order)


def category_prompt() -> str:
    """Prompt text listing the valid categories."""
    names = ', '.join(c.capitalize() for c in CATEGORIES)
    return f"Enter Category ({names}): "
