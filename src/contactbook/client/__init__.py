"""
Client side of the contact book: HTTP API client and form controller.
"""

from contactbook.client.api import ApiError, ContactApiClient
from contactbook.client.controller import ContactFormController, FormState, StatusMessage

__all__ = [
    "ApiError",
    "ContactApiClient",
    "ContactFormController",
    "FormState",
    "StatusMessage",
]
