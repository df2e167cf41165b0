"""Profile model holding the portfolio owner's personal information.

Email uniqueness is enforced by the profile service before writes rather
than by a database constraint.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.data.db import Base
from portfolio_cms.utils.dates import utcnow

if TYPE_CHECKING:
    from portfolio_cms.data.models.education import Certification, Education


class Profile(Base):
    """Personal profile shown on the portfolio.

    Attributes:
        id: Auto-incrementing primary key.
        full_name: Display name.
        email: Contact email address (unique per profile, checked by the service).
        phone: Phone number.
        address: Free-form postal address.
        bio: Short biography.
        photo_url: Link to a profile picture.
        linkedin_url: LinkedIn profile URL.
        github_url: GitHub profile URL.
        website_url: Personal website URL.
        date_of_birth: Date of birth.
        created_at: UTC timestamp when the profile was created.
        updated_at: UTC timestamp when the profile was last updated.
    """

    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    github_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    education_entries: Mapped[list[Education]] = relationship(
        "Education", back_populates="profile", cascade="all, delete-orphan"
    )
    certifications: Mapped[list[Certification]] = relationship(
        "Certification", back_populates="profile", cascade="all, delete-orphan"
    )
