"""Contact service: CRUD store, status updates and inbox reporting.

Trailing windows ("last N days") start at midnight UTC of today minus N days,
so a window of 0 days covers today only.
"""

from __future__ import annotations

import logging
from itertools import groupby
from typing import Any

from sqlalchemy import case, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.constants.portfolio_constants import (
    CONTACT_STATUSES,
    DEFAULT_RECENT_DAYS,
    ContactStatus,
)
from portfolio_cms.data.db import get_session
from portfolio_cms.data.models import Contact
from portfolio_cms.services.record_store import EntityDescriptor, RecordStore
from portfolio_cms.utils.dates import start_of_window, utc_today

logger = logging.getLogger(__name__)

__all__ = [
    "contact_store",
    "get_contact_statistics",
    "get_contacts_by_date",
    "get_contacts_by_status",
    "get_recent_contacts",
    "search_contacts",
    "update_contact_status",
]

FORMATTED_DATE = "%B %d, %Y %I:%M %p"

CONTACT_DESCRIPTOR = EntityDescriptor(
    label="contact",
    model=Contact,
    fields=("name", "email", "subject", "message", "status", "ip_address"),
    update_fields=("name", "email", "subject", "message", "status"),
    ordering=(Contact.created_at.desc(), Contact.id.desc()),
    enums={"status": CONTACT_STATUSES},
)

contact_store = RecordStore(CONTACT_DESCRIPTOR)


def update_contact_status(contact_id: int, status: str) -> bool:
    """Change only the status of an existing contact."""
    return contact_store.update_columns(contact_id, {"status": status})


def get_contacts_by_status(status: str) -> list[dict[str, Any]]:
    return contact_store.find(Contact.status == status)


def search_contacts(keyword: str) -> list[dict[str, Any]]:
    """Case-insensitive substring match over name, email and subject."""
    return contact_store.find(
        or_(
            Contact.name.icontains(keyword, autoescape=True),
            Contact.email.icontains(keyword, autoescape=True),
            Contact.subject.icontains(keyword, autoescape=True),
        )
    )


def get_recent_contacts(days: int = DEFAULT_RECENT_DAYS) -> list[dict[str, Any]]:
    """Contacts created within the trailing window, newest first.

    Each row gains ``formatted_date`` (e.g. "March 05, 2025 02:30 PM") and
    ``days_ago`` (whole calendar days since creation).
    """
    today = utc_today()
    records = contact_store.find(Contact.created_at >= start_of_window(days, today))
    for record in records:
        created_at = record["created_at"]
        record["formatted_date"] = created_at.strftime(FORMATTED_DATE)
        record["days_ago"] = (today - created_at.date()).days
    return records


def get_contact_statistics() -> dict[str, Any] | None:
    """Counts by status plus rolling 7-day and 30-day totals.

    Returns:
        Dictionary with ``total_contacts``, one ``<status>_count`` per status,
        ``last_week_count`` and ``last_month_count``; None on failure.
    """
    today = utc_today()

    def _count_where(condition: Any, label: str) -> Any:
        return func.coalesce(func.sum(case((condition, 1), else_=0)), 0).label(label)

    statement = select(
        func.count(Contact.id).label("total_contacts"),
        *[
            _count_where(Contact.status == status.value, f"{status.name.lower()}_count")
            for status in ContactStatus
        ],
        _count_where(Contact.created_at >= start_of_window(7, today), "last_week_count"),
        _count_where(Contact.created_at >= start_of_window(30, today), "last_month_count"),
    )

    try:
        with get_session() as session:
            return dict(session.execute(statement).one()._mapping)
    except SQLAlchemyError:
        logger.exception("Failed to compute contact statistics")
        return None


def get_contacts_by_date() -> list[dict[str, Any]]:
    """One row per calendar day: ``contact_date``, ``count_per_day`` and
    ``contacts_list`` (sender names joined by ", "), newest day first.
    """
    statement = select(Contact.created_at, Contact.name).order_by(
        Contact.created_at.desc(), Contact.id.desc()
    )
    try:
        with get_session() as session:
            rows = session.execute(statement).all()
    except SQLAlchemyError:
        logger.exception("Failed to group contacts by date")
        return []

    days = []
    for contact_date, group in groupby(rows, key=lambda row: row.created_at.date()):
        names = [row.name for row in reversed(list(group))]
        days.append(
            {
                "contact_date": contact_date,
                "count_per_day": len(names),
                "contacts_list": ", ".join(names),
            }
        )
    return days
