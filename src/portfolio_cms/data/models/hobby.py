"""ORM model for hobbies."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.data.db import Base
from portfolio_cms.utils.dates import utcnow


class Hobby(Base):
    """A hobby listed on the portfolio."""

    __tablename__ = "hobbies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hobby_name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon_class: Mapped[str | None] = mapped_column(String(100), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
