"""
Tests for contact repository.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.contacts.models import Contact
from contactbook.contacts.repository import ContactRepository


class TestContactRepository:
    """Tests for ContactRepository against an in-memory SQLite database."""

    @pytest.mark.asyncio
    async def test_create_contact(
        self,
        contact_repository: ContactRepository,
    ) -> None:
        created = await contact_repository.create(
            name="Ada", email="ada@example.com", phone="1234567890"
        )

        assert created.id is not None
        assert created.name == "Ada"
        assert created.email == "ada@example.com"
        assert created.phone == "1234567890"
        assert created.created_at is not None

    @pytest.mark.asyncio
    async def test_count(self, contact_repository: ContactRepository) -> None:
        assert await contact_repository.count() == 0

        for i in range(3):
            await contact_repository.create(
                name=f"C{i}", email=f"c{i}@example.com", phone="1234567890"
            )

        assert await contact_repository.count() == 3

    @pytest.mark.asyncio
    async def test_list_page_newest_first(
        self,
        contact_repository: ContactRepository,
    ) -> None:
        for i in range(5):
            await contact_repository.create(
                name=f"C{i}", email=f"c{i}@example.com", phone="1234567890"
            )

        first = await contact_repository.list_page(offset=0, limit=2)
        rest = await contact_repository.list_page(offset=2, limit=10)

        assert [c.name for c in first] == ["C4", "C3"]
        assert [c.name for c in rest] == ["C2", "C1", "C0"]

    @pytest.mark.asyncio
    async def test_delete_by_id(
        self,
        contact_repository: ContactRepository,
        db_session: AsyncSession,
    ) -> None:
        created = await contact_repository.create(
            name="Ada", email="ada@example.com", phone="1234567890"
        )

        assert await contact_repository.delete_by_id(created.id) == 1
        remaining = await db_session.execute(
            select(Contact).where(Contact.id == created.id)
        )
        assert remaining.scalar_one_or_none() is None
        assert await contact_repository.delete_by_id(created.id) == 0

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(
        self,
        contact_repository: ContactRepository,
    ) -> None:
        first = await contact_repository.create(
            name="A", email="a@example.com", phone="1234567890"
        )
        second = await contact_repository.create(
            name="B", email="b@example.com", phone="1234567890"
        )
        await contact_repository.delete_by_id(second.id)
        await contact_repository.commit()

        third = await contact_repository.create(
            name="C", email="c@example.com", phone="1234567890"
        )

        assert third.id not in {first.id, second.id}
        assert third.id > second.id

    @pytest.mark.asyncio
    async def test_delete_missing_id(
        self,
        contact_repository: ContactRepository,
    ) -> None:
        assert await contact_repository.delete_by_id(999) == 0
