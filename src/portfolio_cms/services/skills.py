"""Skill service: CRUD store plus category/proficiency reporting.

Proficiency is ordered by enum position (Beginner < ... < Expert), never
alphabetically; ``proficiency_rank`` provides that ordering in SQL.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.constants.portfolio_constants import (
    PROFICIENCY_LEVELS,
    PROFICIENCY_RANK,
    ProficiencyLevel,
)
from portfolio_cms.data.db import get_session
from portfolio_cms.data.models import Skill
from portfolio_cms.services.record_store import EntityDescriptor, RecordStore

logger = logging.getLogger(__name__)

__all__ = [
    "skill_store",
    "get_skills_by_category",
    "get_skills_by_proficiency",
    "get_skills_in_category",
    "get_skill_statistics",
]

proficiency_rank = case(PROFICIENCY_RANK, value=Skill.proficiency_level, else_=0)

SKILL_DESCRIPTOR = EntityDescriptor(
    label="skill",
    model=Skill,
    fields=(
        "skill_name",
        "category",
        "proficiency_level",
        "years_of_experience",
        "description",
        "icon_class",
    ),
    ordering=(
        Skill.category.asc(),
        proficiency_rank.desc(),
        Skill.years_of_experience.desc(),
    ),
    enums={"proficiency_level": PROFICIENCY_LEVELS},
)

skill_store = RecordStore(SKILL_DESCRIPTOR)


def _round(value: float | None) -> float | None:
    return None if value is None else round(float(value), 2)


def get_skills_by_proficiency(level: str) -> list[dict[str, Any]]:
    """Skills at one proficiency level, most experienced first."""
    return skill_store.find(
        Skill.proficiency_level == level,
        order_by=(Skill.years_of_experience.desc(), Skill.skill_name.asc()),
    )


def get_skills_in_category(category: str) -> list[dict[str, Any]]:
    """Skills of one category, strongest first."""
    return skill_store.find(
        Skill.category == category,
        order_by=(proficiency_rank.desc(), Skill.years_of_experience.desc()),
    )


def get_skills_by_category() -> list[dict[str, Any]]:
    """One row per category with experience aggregates and a skill list.

    Returns:
        Rows with ``category``, ``skill_count``, ``avg_experience``,
        ``max_experience``, ``min_experience`` and ``skills_list`` (names
        joined by ", ", strongest proficiency first), ordered by average
        experience then skill count, both descending. Empty on failure.
    """
    avg_experience = func.avg(Skill.years_of_experience)
    skill_count = func.count(Skill.id)
    aggregate = (
        select(
            Skill.category,
            skill_count.label("skill_count"),
            avg_experience.label("avg_experience"),
            func.max(Skill.years_of_experience).label("max_experience"),
            func.min(Skill.years_of_experience).label("min_experience"),
        )
        .group_by(Skill.category)
        .order_by(avg_experience.desc(), skill_count.desc())
    )
    names = select(Skill.category, Skill.skill_name).order_by(
        proficiency_rank.desc(), Skill.id.asc()
    )

    try:
        with get_session() as session:
            grouped = session.execute(aggregate).all()
            members: dict[str, list[str]] = {}
            for category, skill_name in session.execute(names):
                members.setdefault(category, []).append(skill_name)
    except SQLAlchemyError:
        logger.exception("Failed to group skills by category")
        return []

    return [
        {
            "category": row.category,
            "skill_count": row.skill_count,
            "avg_experience": _round(row.avg_experience),
            "max_experience": _round(row.max_experience),
            "min_experience": _round(row.min_experience),
            "skills_list": ", ".join(members.get(row.category, [])),
        }
        for row in grouped
    ]


def get_skill_statistics() -> dict[str, Any] | None:
    """Global skill counts, bucketed by proficiency level.

    Returns:
        Dictionary with totals, experience aggregates and one
        ``<level>_count`` per proficiency level, or None on failure.
    """
    level_counts = [
        func.coalesce(
            func.sum(case((Skill.proficiency_level == level.value, 1), else_=0)), 0
        ).label(f"{level.name.lower()}_count")
        for level in reversed(ProficiencyLevel)
    ]
    statement = select(
        func.count(Skill.id).label("total_skills"),
        func.count(func.distinct(Skill.category)).label("total_categories"),
        func.avg(Skill.years_of_experience).label("avg_years_experience"),
        func.max(Skill.years_of_experience).label("max_years_experience"),
        *level_counts,
    )

    try:
        with get_session() as session:
            row = session.execute(statement).one()
    except SQLAlchemyError:
        logger.exception("Failed to compute skill statistics")
        return None

    stats = dict(row._mapping)
    stats["avg_years_experience"] = _round(stats["avg_years_experience"])
    stats["max_years_experience"] = _round(stats["max_years_experience"])
    return stats
