"""
SQLAlchemy models for contacts.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from contactbook.shared.database import Base


class Contact(Base):
    """One stored contact. Rows are inserted and deleted, never updated."""

    __tablename__ = "contacts"
    # Ids are never handed out twice, even after the highest row is deleted.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    phone: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, name={self.name!r}, email={self.email!r})>"
