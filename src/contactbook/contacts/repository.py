"""
Contact repository for database operations.
"""

from typing import Protocol, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.contacts.models import Contact


class ContactRepositoryProtocol(Protocol):
    """Storage operations the contact service relies on."""

    async def create(self, name: str, email: str, phone: str) -> Contact:
        """Insert a contact and return it with its assigned ID."""
        ...

    async def count(self) -> int:
        """Count all stored contacts."""
        ...

    async def list_page(self, offset: int, limit: int) -> Sequence[Contact]:
        """Fetch up to ``limit`` contacts, newest first, from ``offset``."""
        ...

    async def delete_by_id(self, contact_id: int) -> int:
        """Delete a contact and return the number of rows removed."""
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...


class ContactRepository:
    """Repository for contact database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session.
        """
        self._session = session

    async def create(self, name: str, email: str, phone: str) -> Contact:
        """Insert a single contact.

        Args:
            name: Display name.
            email: Email address.
            phone: Phone number.

        Returns:
            Created contact with ID and creation timestamp.
        """
        contact = Contact(name=name, email=email, phone=phone)
        self._session.add(contact)
        await self._session.flush()
        await self._session.refresh(contact)
        return contact

    async def count(self) -> int:
        """Count all contacts.

        Returns:
            Number of stored contacts.
        """
        result = await self._session.execute(select(func.count(Contact.id)))
        count = result.scalar()
        return count if count is not None else 0

    async def list_page(self, offset: int, limit: int) -> Sequence[Contact]:
        """Get one page of contacts ordered newest first.

        Rows sharing a timestamp are ordered by descending ID so the most
        recent insert still comes first.

        Args:
            offset: Number of rows to skip.
            limit: Maximum number of rows to return.

        Returns:
            Contacts on the requested page.
        """
        stmt = (
            select(Contact)
            .order_by(Contact.created_at.desc(), Contact.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def delete_by_id(self, contact_id: int) -> int:
        """Delete a contact by ID.

        Args:
            contact_id: Contact ID.

        Returns:
            Number of rows deleted (0 or 1).
        """
        stmt = delete(Contact).where(Contact.id == contact_id)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
