"""ORM model for technical and soft skills listed on the portfolio."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.utils.dates import utcnow


class Skill(Base):
    """A skill with its category and proficiency.

    Attributes:
        id: Auto-incrementing primary key.
        skill_name: Name of the skill (e.g., "Python", "Public Speaking").
        category: Free-form grouping (e.g., "Programming", "Design").
        proficiency_level: One of Beginner, Intermediate, Advanced, Expert.
        years_of_experience: Experience in years, one decimal place.
        description: Optional notes.
        icon_class: CSS icon class used by the frontend.
    """

    __tablename__ = "skills"
    __table_args__ = (
        CheckConstraint(
            "proficiency_level IN ('Beginner', 'Intermediate', 'Advanced', 'Expert')",
            name="ck_skill_proficiency_level",
        ),
        Index("ix_skill_category", "category"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    skill_name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    proficiency_level: Mapped[str] = mapped_column(String(20), nullable=False)
    years_of_experience: Mapped[float | None] = mapped_column(
        Numeric(4, 1, asdecimal=False), nullable=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_class: Mapped[str | None] = mapped_column(String(100), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )
