"""ORM model for messages submitted through the portfolio contact form."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.utils.dates import utcnow


class Contact(Base):
    """A contact message.

    Attributes:
        id: Auto-incrementing primary key.
        name: Sender name.
        email: Sender email address.
        subject: Optional subject line.
        message: Message body.
        status: One of New, Read, Replied, Archived.
        ip_address: Address the message was submitted from.
        created_at: UTC timestamp set once on insert.
    """

    __tablename__ = "contacts"
    __table_args__ = (
        CheckConstraint(
            "status IN ('New', 'Read', 'Replied', 'Archived')",
            name="ck_contact_status",
        ),
        Index("ix_contact_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    subject: Mapped[str | None] = mapped_column(String(200), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="New")
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
