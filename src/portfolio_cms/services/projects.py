"""Project service: CRUD store plus search and duration reporting.

Duration is the whole number of days between ``start_date`` and
``end_date``; ongoing projects (no end date) run until today. Projects
without a start date have no duration, are classified short term and are
left out of averages.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any

from sqlalchemy import case, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.constants.portfolio_constants import (
    LONG_TERM,
    LONG_TERM_DAYS,
    MEDIUM_TERM,
    MEDIUM_TERM_DAYS,
    PROJECT_STATUSES,
    SHORT_TERM,
    ProjectStatus,
)
from portfolio_cms.data.db import get_session
from portfolio_cms.data.models import Project
from portfolio_cms.services.record_store import EntityDescriptor, RecordStore
from portfolio_cms.utils.dates import utc_today

logger = logging.getLogger(__name__)

__all__ = [
    "project_store",
    "classify_duration",
    "duration_days",
    "get_featured_projects",
    "get_project_statistics",
    "get_projects_by_status",
    "get_projects_with_duration",
    "search_projects_by_technology",
]

PROJECT_DESCRIPTOR = EntityDescriptor(
    label="project",
    model=Project,
    fields=(
        "project_title",
        "description",
        "technologies_used",
        "project_url",
        "github_url",
        "image_url",
        "start_date",
        "end_date",
        "status",
        "featured",
    ),
    ordering=(Project.featured.desc(), Project.start_date.desc()),
    enums={"status": PROJECT_STATUSES},
)

project_store = RecordStore(PROJECT_DESCRIPTOR)

_TERM_SPLIT = re.compile(r"[\s,;]+")


def duration_days(start: date | None, end: date | None, today: date | None = None) -> int | None:
    """Days from ``start`` to ``end`` (or today when ``end`` is missing)."""
    if start is None:
        return None
    return ((end or today or utc_today()) - start).days


def classify_duration(days: int | None) -> str:
    """Bucket a duration: over 180 days is long term, over 90 medium term."""
    if days is not None and days > LONG_TERM_DAYS:
        return LONG_TERM
    if days is not None and days > MEDIUM_TERM_DAYS:
        return MEDIUM_TERM
    return SHORT_TERM


def _average(values: list[int]) -> float | None:
    return round(sum(values) / len(values), 2) if values else None


def get_featured_projects() -> list[dict[str, Any]]:
    return project_store.find(Project.featured.is_(True), order_by=(Project.start_date.desc(),))


def get_projects_by_status(status: str) -> list[dict[str, Any]]:
    return project_store.find(Project.status == status, order_by=(Project.start_date.desc(),))


def search_projects_by_technology(keyword: str) -> list[dict[str, Any]]:
    """Rank projects by how often the keyword's terms occur.

    The keyword is split into lowercase terms. A project matches if any term
    appears in ``technologies_used`` or ``description``; its ``relevance`` is
    the total number of occurrences. Results are ordered by relevance, then
    featured projects first.
    """
    terms = sorted({term for term in _TERM_SPLIT.split(keyword.lower()) if term})
    if not terms:
        return []

    criteria = [
        column.icontains(term, autoescape=True)
        for term in terms
        for column in (Project.technologies_used, Project.description)
    ]
    matches = project_store.find(or_(*criteria), order_by=(Project.id.asc(),))

    for record in matches:
        haystack = " ".join(
            filter(None, (record["technologies_used"], record["description"]))
        ).lower()
        record["relevance"] = float(sum(haystack.count(term) for term in terms))

    return sorted(matches, key=lambda r: (r["relevance"], r["featured"]), reverse=True)


def get_projects_with_duration() -> list[dict[str, Any]]:
    """Every project with ``duration_days``, ``duration_type`` and the
    portfolio-wide ``avg_project_duration``, longest first.
    """
    today = utc_today()
    records = project_store.find(order_by=(Project.id.asc(),))

    durations = []
    for record in records:
        days = duration_days(record["start_date"], record["end_date"], today)
        record["duration_days"] = days
        record["duration_type"] = classify_duration(days)
        if days is not None:
            durations.append(days)

    average = _average(durations)
    for record in records:
        record["avg_project_duration"] = average

    return sorted(
        records,
        key=lambda r: (r["duration_days"] is not None, r["duration_days"] or 0),
        reverse=True,
    )


def get_project_statistics() -> dict[str, Any] | None:
    """Counts by status plus min/avg/max duration.

    Returns:
        Dictionary of statistics, or None if the database query failed.
    """
    status_counts = [
        func.coalesce(func.sum(case((Project.status == status.value, 1), else_=0)), 0).label(
            f"{status.name.lower()}_count"
        )
        for status in (
            ProjectStatus.COMPLETED,
            ProjectStatus.IN_PROGRESS,
            ProjectStatus.PLANNING,
            ProjectStatus.ARCHIVED,
        )
    ]
    statement = select(
        func.count(Project.id).label("total_projects"),
        *status_counts,
        func.coalesce(func.sum(case((Project.featured.is_(True), 1), else_=0)), 0).label(
            "featured_count"
        ),
    )
    dates = select(Project.start_date, Project.end_date)

    try:
        with get_session() as session:
            stats = dict(session.execute(statement).one()._mapping)
            spans = session.execute(dates).all()
    except SQLAlchemyError:
        logger.exception("Failed to compute project statistics")
        return None

    today = utc_today()
    durations = [
        days
        for days in (duration_days(start, end, today) for start, end in spans)
        if days is not None
    ]
    stats["avg_duration_days"] = _average(durations)
    stats["max_duration_days"] = max(durations, default=None)
    stats["min_duration_days"] = min(durations, default=None)
    return stats
