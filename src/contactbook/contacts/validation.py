"""
Field validation for contact input.

The same functions back the server-side create path and the client form
controller, so both sides always agree on what is acceptable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Deliberately loose: "something@something.something" with no whitespace.
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Invalid email format"
PHONE_REQUIRED = "Phone is required"
PHONE_INVALID = "Phone must be 10 digits"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a name/email/phone triple."""

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def is_blank(value: str | None) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    """Check that ``value`` looks like ``local@domain.tld`` with no whitespace.

    Examples:
        >>> is_valid_email("a@b.c")
        True
        >>> is_valid_email("a @b.c")
        False
        >>> is_valid_email("a@bc")
        False
    """
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: str) -> bool:
    """Check that ``value`` is exactly ten decimal digits."""
    return PHONE_PATTERN.fullmatch(value) is not None


def validate_contact_input(
    name: str | None,
    email: str | None,
    phone: str | None,
) -> ValidationResult:
    """Validate all three fields and collect one message per failing field.

    Every field is checked even when an earlier one fails, so a form can show
    all problems at once.

    Args:
        name: Display name; must contain a non-whitespace character.
        email: Email address.
        phone: Ten-digit phone number.

    Returns:
        ValidationResult mapping field names to error messages.
    """
    errors: dict[str, str] = {}

    if is_blank(name):
        errors["name"] = NAME_REQUIRED

    if is_blank(email):
        errors["email"] = EMAIL_REQUIRED
    elif not is_valid_email(email):
        errors["email"] = EMAIL_INVALID

    if is_blank(phone):
        errors["phone"] = PHONE_REQUIRED
    elif not is_valid_phone(phone):
        errors["phone"] = PHONE_INVALID

    return ValidationResult(errors=errors)
