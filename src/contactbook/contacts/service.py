"""
Contact service for business logic.
"""

import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from contactbook.contacts.pagination import (
    MAX_SQL_INTEGER,
    build_page_info,
    resolve_page_request,
)
from contactbook.contacts.repository import ContactRepositoryProtocol
from contactbook.contacts.schemas import (
    ContactCreated,
    ContactListResponse,
    ContactResponse,
    PaginationMeta,
)
from contactbook.contacts.validation import is_blank, is_valid_email, is_valid_phone
from contactbook.shared.exceptions import NotFoundError, StorageError, ValidationError
from contactbook.shared.logging import get_logger

logger = get_logger(__name__)

ALL_FIELDS_REQUIRED = "All fields are required"
INVALID_EMAIL = "Invalid email format"
INVALID_PHONE = "Phone must be 10 digits"
INVALID_CONTACT_ID = "Invalid contact ID"
CONTACT_NOT_FOUND = "Contact not found"
CREATE_FAILED = "Failed to add contact"
LIST_FAILED = "Failed to fetch contacts"
DELETE_FAILED = "Failed to delete contact"

MIN_SQL_INTEGER = -MAX_SQL_INTEGER - 1

_CONTACT_ID = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_contact_id(raw: str | int | None) -> int:
    """Parse a contact ID taken from a URL path.

    Any finite decimal number is accepted ("7", "1.5", "1e3"). A number no
    stored row can carry (fractional, or outside the SQL INTEGER range) is
    reported as not found without touching storage.

    Raises:
        ValidationError: If the value is missing or not a number.
        NotFoundError: If the number cannot be a contact ID.
    """
    if isinstance(raw, bool):
        raise ValidationError(INVALID_CONTACT_ID)
    if isinstance(raw, int):
        number = Decimal(raw)
    elif isinstance(raw, str) and _CONTACT_ID.fullmatch(raw.strip()):
        try:
            number = Decimal(raw.strip())
        except InvalidOperation:
            # Exponent beyond what Decimal can hold.
            raise NotFoundError(CONTACT_NOT_FOUND, details={"contact_id": raw}) from None
    else:
        raise ValidationError(INVALID_CONTACT_ID)

    # Range first: int() on something like 1e999999 would build a huge integer.
    if not MIN_SQL_INTEGER <= number <= MAX_SQL_INTEGER:
        raise NotFoundError(CONTACT_NOT_FOUND, details={"contact_id": str(raw)})
    if number != number.to_integral_value():
        raise NotFoundError(CONTACT_NOT_FOUND, details={"contact_id": str(raw)})
    return int(number)


class ContactService:
    """Service for contact directory operations."""

    def __init__(self, repository: ContactRepositoryProtocol) -> None:
        """Initialize contact service.

        Args:
            repository: Storage handle the service owns for its lifetime.
        """
        self._repo = repository

    @asynccontextmanager
    async def _storage_guard(
        self,
        public_message: str,
        operation: str,
        **context: Any,
    ) -> AsyncIterator[None]:
        """Turn persistence failures into a StorageError with a generic message.

        The underlying exception is logged with full detail; callers only ever
        see ``public_message``.
        """
        try:
            yield
        except SQLAlchemyError as exc:
            logger.exception(
                "Contact storage operation failed",
                extra={"operation": operation, **context},
            )
            try:
                await self._repo.rollback()
            except SQLAlchemyError:
                logger.exception(
                    "Rollback after storage failure also failed",
                    extra={"operation": operation},
                )
            raise StorageError(public_message, details={"cause": str(exc)}) from exc

    async def create_contact(
        self,
        name: str | None,
        email: str | None,
        phone: str | None,
    ) -> ContactCreated:
        """Validate and store a new contact.

        Checks run in order: all fields present, email format, phone format.

        Args:
            name: Display name.
            email: Email address.
            phone: Ten-digit phone number.

        Returns:
            The stored contact without its timestamp.

        Raises:
            ValidationError: If a field is missing or malformed.
            StorageError: If the insert fails.
        """
        if is_blank(name) or is_blank(email) or is_blank(phone):
            raise ValidationError(ALL_FIELDS_REQUIRED)
        if not is_valid_email(email):
            raise ValidationError(INVALID_EMAIL, details={"field": "email"})
        if not is_valid_phone(phone):
            raise ValidationError(INVALID_PHONE, details={"field": "phone"})

        async with self._storage_guard(CREATE_FAILED, "create"):
            contact = await self._repo.create(name=name, email=email, phone=phone)
            created = ContactCreated.model_validate(contact)
            await self._repo.commit()

        logger.info("Contact created", extra={"contact_id": created.id})

        return created

    async def list_contacts(
        self,
        page: str | int | None = None,
        limit: str | int | None = None,
    ) -> ContactListResponse:
        """Get one page of contacts, newest first.

        Malformed or missing ``page``/``limit`` values fall back to the
        defaults rather than failing.

        Args:
            page: Page number (1-indexed), raw from the query string.
            limit: Page size, raw from the query string.

        Returns:
            Contacts on the page plus pagination metadata.

        Raises:
            StorageError: If counting or fetching fails.
        """
        request = resolve_page_request(page, limit)

        async with self._storage_guard(
            LIST_FAILED, "list", page=request.page, limit=request.limit
        ):
            total = await self._repo.count()
            if request.past_storage_range:
                contacts = []
            else:
                contacts = await self._repo.list_page(request.offset, request.limit)

        info = build_page_info(request, total)

        return ContactListResponse(
            contacts=[ContactResponse.model_validate(c) for c in contacts],
            pagination=PaginationMeta.from_page_info(info),
        )

    async def delete_contact(self, contact_id: str | int | None) -> None:
        """Delete a contact by ID.

        Args:
            contact_id: Contact ID, raw from the URL path.

        Raises:
            ValidationError: If the ID is missing or not numeric.
            NotFoundError: If no contact has that ID.
            StorageError: If the delete fails.
        """
        parsed_id = parse_contact_id(contact_id)

        async with self._storage_guard(DELETE_FAILED, "delete", contact_id=parsed_id):
            deleted = await self._repo.delete_by_id(parsed_id)
            await self._repo.commit()

        if deleted == 0:
            raise NotFoundError(CONTACT_NOT_FOUND, details={"contact_id": parsed_id})

        logger.info("Contact deleted", extra={"contact_id": parsed_id})
