"""
Pydantic schemas for the contacts API.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from contactbook.contacts.pagination import PageInfo


class ContactCreate(BaseModel):
    """Request body for creating a contact.

    Fields are optional at the schema level: presence and format are
    checked by the service so that every failure yields the same
    ``{"error": ...}`` payload.
    """

    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Email address")
    phone: str | None = Field(default=None, description="Ten-digit phone number")


class ContactCreated(BaseModel):
    """Response for a newly created contact (no timestamp)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str


class ContactResponse(ContactCreated):
    """A stored contact as returned by listings."""

    created_at: datetime


class PaginationMeta(BaseModel):
    """Pagination block of a listing, serialized in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_page: int
    total_pages: int
    total_contacts: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page_info(cls, info: PageInfo) -> "PaginationMeta":
        return cls(
            current_page=info.current_page,
            total_pages=info.total_pages,
            total_contacts=info.total_items,
            has_next=info.has_next,
            has_prev=info.has_prev,
        )


class ContactListResponse(BaseModel):
    """Schema for paginated contact list response."""

    contacts: list[ContactResponse]
    pagination: PaginationMeta


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    message: str
