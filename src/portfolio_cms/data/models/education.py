"""Education and certification entries attached to a profile.

These tables are only read by the profile statistics query; no endpoint
writes them.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portfolio_cms.data.db import Base

if TYPE_CHECKING:
    from portfolio_cms.data.models.profile import Profile


class Education(Base):
    """A degree or programme completed by the profile owner."""

    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    institution: Mapped[str] = mapped_column(String(150), nullable=False)
    degree: Mapped[str] = mapped_column(String(150), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    profile: Mapped[Profile] = relationship("Profile", back_populates="education_entries")


class Certification(Base):
    """A certification earned by the profile owner."""

    __tablename__ = "certifications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    certification_name: Mapped[str] = mapped_column(String(150), nullable=False)
    issuing_organization: Mapped[str | None] = mapped_column(String(150), nullable=True)
    issue_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    profile: Mapped[Profile] = relationship("Profile", back_populates="certifications")
