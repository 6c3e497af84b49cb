"""
Contact API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.contacts.repository import ContactRepository
from contactbook.contacts.schemas import (
    ContactCreate,
    ContactCreated,
    ContactListResponse,
    ErrorResponse,
)
from contactbook.contacts.service import ContactService
from contactbook.shared.database import get_db_session

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


def get_contact_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ContactService:
    """Dependency for contact service."""
    return ContactService(repository=ContactRepository(session))


@router.post(
    "",
    response_model=ContactCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create contact",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_contact(
    service: Annotated[ContactService, Depends(get_contact_service)],
    payload: ContactCreate | None = None,
) -> ContactCreated:
    """Validate and store a contact.

    A request without a body is treated like an empty object.

    Raises:
        400: A field is missing, or email/phone is malformed.
        500: The contact could not be stored.
    """
    payload = payload or ContactCreate()
    return await service.create_contact(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
    )


@router.get(
    "",
    response_model=ContactListResponse,
    summary="List contacts",
    description="Get a page of contacts, newest first.",
    responses={500: {"model": ErrorResponse}},
)
async def list_contacts(
    service: Annotated[ContactService, Depends(get_contact_service)],
    # Kept as raw strings: malformed values fall back to defaults instead of 422.
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
) -> ContactListResponse:
    return await service.list_contacts(page=page, limit=limit)


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete contact",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def delete_contact(
    contact_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> Response:
    """Delete a contact by ID.

    Raises:
        400: The ID is not numeric.
        404: No contact has that ID.
        500: The contact could not be deleted.
    """
    await service.delete_contact(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
