"""
Contact directory: validation, pagination, storage and HTTP surface.
"""

from contactbook.contacts.models import Contact
from contactbook.contacts.validation import (
    ValidationResult,
    is_valid_email,
    is_valid_phone,
    validate_contact_input,
)

__all__ = [
    "Contact",
    "ValidationResult",
    "is_valid_email",
    "is_valid_phone",
    "validate_contact_input",
]
