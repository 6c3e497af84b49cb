"""
Form controller for the contact book front end.

Holds the state a contact form screen renders from and runs the
submit / delete / paging interactions against a ``ContactApiClient``.
Rendering itself is left to whichever UI drives the controller.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable

from contactbook.client.api import ApiError, ContactApiClient
from contactbook.contacts.schemas import ContactCreated, PaginationMeta
from contactbook.contacts.validation import validate_contact_input
from contactbook.shared.logging import get_logger

logger = get_logger(__name__)

MESSAGE_TTL_SECONDS = 3.0
PAGE_SIZE = 10

FORM_FIELDS = ("name", "email", "phone")

ADDED_MESSAGE = "Contact added successfully!"
DELETED_MESSAGE = "Contact deleted successfully!"
ADD_FAILED_MESSAGE = "Error adding contact"
DELETE_FAILED_MESSAGE = "Error deleting contact"
FETCH_FAILED_MESSAGE = "Error fetching contacts"
CONFIRM_DELETE_PROMPT = "Are you sure you want to delete this contact?"


@dataclass
class StatusMessage:
    text: str
    is_error: bool = False


def _empty_form() -> dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


def _initial_pagination() -> PaginationMeta:
    return PaginationMeta(
        current_page=1,
        total_pages=1,
        total_contacts=0,
        has_next=False,
        has_prev=False,
    )


@dataclass
class FormState:
    """Everything the contact screen displays."""

    values: dict[str, str] = field(default_factory=_empty_form)
    errors: dict[str, str] = field(default_factory=dict)
    contacts: list[ContactCreated] = field(default_factory=list)
    pagination: PaginationMeta = field(default_factory=_initial_pagination)
    message: StatusMessage | None = None
    busy: bool = False


class ContactFormController:
    """Drives the contact form and list against the contacts API.

    Call ``start`` once the screen is shown to load the first page.

    Args:
        api: Client used for every request.
        confirm: Asked before each delete; returning False cancels it.
        message_ttl: Seconds a status message stays visible.
    """

    def __init__(
        self,
        api: ContactApiClient,
        confirm: Callable[[str], bool],
        message_ttl: float = MESSAGE_TTL_SECONDS,
    ) -> None:
        self.api = api
        self.confirm = confirm
        self.message_ttl = message_ttl
        self.state = FormState()
        self._message_timer: asyncio.TimerHandle | None = None

    async def start(self) -> None:
        """Load the first page of contacts for a freshly shown screen."""
        await self.load_page(1)

    def set_field(self, name: str, value: str) -> None:
        """Update one form value and drop any error shown for it."""
        if name not in FORM_FIELDS:
            raise KeyError(name)
        self.state.values[name] = value
        self.state.errors.pop(name, None)

    def validate(self) -> bool:
        values = self.state.values
        result = validate_contact_input(values["name"], values["email"], values["phone"])
        self.state.errors = dict(result.errors)
        return result.valid

    async def submit(self) -> ContactCreated | None:
        """Validate the form and create a contact.

        Returns the created contact, or None when the submit was skipped,
        rejected locally, or failed on the server.
        """
        if self.state.busy:
            return None
        if not self.validate():
            return None

        self.state.busy = True
        try:
            values = self.state.values
            created = await self.api.create_contact(
                name=values["name"],
                email=values["email"],
                phone=values["phone"],
            )
        except ApiError as exc:
            logger.warning("Adding contact failed", extra={"status_code": exc.status_code})
            self._show(exc.message or ADD_FAILED_MESSAGE, is_error=True)
            return None
        finally:
            self.state.busy = False

        self.state.contacts.insert(0, created)
        self.state.values = _empty_form()
        self._show(ADDED_MESSAGE)
        return created

    async def delete(self, contact_id: int) -> bool:
        """Delete a contact after confirmation; True if it was removed."""
        if not self.confirm(CONFIRM_DELETE_PROMPT):
            return False

        try:
            await self.api.delete_contact(contact_id)
        except ApiError as exc:
            logger.warning(
                "Deleting contact failed",
                extra={"contact_id": contact_id, "status_code": exc.status_code},
            )
            self._show(exc.message or DELETE_FAILED_MESSAGE, is_error=True)
            return False

        self.state.contacts = [c for c in self.state.contacts if c.id != contact_id]
        self._show(DELETED_MESSAGE)
        return True

    async def load_page(self, page: int = 1) -> None:
        """Replace the displayed contacts and pagination with ``page``."""
        self.state.busy = True
        try:
            listing = await self.api.list_contacts(page=page, limit=PAGE_SIZE)
        except ApiError:
            logger.warning("Fetching contacts failed", extra={"page": page})
            self._show(FETCH_FAILED_MESSAGE, is_error=True)
            return
        finally:
            self.state.busy = False

        self.state.contacts = list(listing.contacts)
        self.state.pagination = listing.pagination

    async def next_page(self) -> None:
        if self.state.pagination.has_next:
            await self.load_page(self.state.pagination.current_page + 1)

    async def prev_page(self) -> None:
        if self.state.pagination.has_prev:
            await self.load_page(self.state.pagination.current_page - 1)

    def _show(self, text: str, is_error: bool = False) -> None:
        """Display a status message and schedule it to disappear."""
        if self._message_timer is not None:
            self._message_timer.cancel()
        self.state.message = StatusMessage(text=text, is_error=is_error)
        loop = asyncio.get_running_loop()
        self._message_timer = loop.call_later(self.message_ttl, self._clear_message)

    def _clear_message(self) -> None:
        self.state.message = None
        self._message_timer = None
