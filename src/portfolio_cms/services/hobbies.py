"""Hobby service: CRUD store plus name/description search."""

from __future__ import annotations

from typing import Any

from sqlalchemy import or_

from portfolio_cms.data.models import Hobby
from portfolio_cms.services.record_store import EntityDescriptor, RecordStore

__all__ = [
    "hobby_store",
    "count_hobbies",
    "search_hobbies",
]

HOBBY_DESCRIPTOR = EntityDescriptor(
    label="hobby",
    model=Hobby,
    fields=("hobby_name", "description", "icon_class"),
    ordering=(Hobby.hobby_name.asc(),),
)

hobby_store = RecordStore(HOBBY_DESCRIPTOR)


def search_hobbies(keyword: str) -> list[dict[str, Any]]:
    """Case-insensitive substring match over name and description."""
    return hobby_store.find(
        or_(
            Hobby.hobby_name.icontains(keyword, autoescape=True),
            Hobby.description.icontains(keyword, autoescape=True),
        )
    )


def count_hobbies() -> int | None:
    return hobby_store.count()
