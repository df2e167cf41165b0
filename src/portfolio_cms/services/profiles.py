"""Profile service for the portfolio owner's personal information.

This service provides the profile record store, the email uniqueness check
used before every write, and the profile statistics summary.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.data.db import get_session
from portfolio_cms.data.models import Certification, Education, Profile, Project, Skill
from portfolio_cms.services.record_store import EntityDescriptor, RecordStore

logger = logging.getLogger(__name__)

__all__ = [
    "profile_store",
    "email_exists",
    "get_profile_with_stats",
    "profile_completion",
]

# Fields that can be written on Profile
_PROFILE_FIELDS = (
    "full_name",
    "email",
    "phone",
    "address",
    "bio",
    "photo_url",
    "linkedin_url",
    "github_url",
    "website_url",
    "date_of_birth",
)

PROFILE_DESCRIPTOR = EntityDescriptor(
    label="profile",
    model=Profile,
    fields=_PROFILE_FIELDS,
    ordering=(Profile.created_at.desc(), Profile.id.desc()),
)

profile_store = RecordStore(PROFILE_DESCRIPTOR)


def email_exists(email: str, exclude_id: int | None = None) -> bool | None:
    """Check whether another profile already uses ``email``, ignoring case.

    Args:
        email: Email address to look up.
        exclude_id: Profile to ignore, so a profile can keep its own email.

    Returns:
        True if a different profile has this email, None if the lookup failed.
    """
    statement = select(func.count(Profile.id)).where(
        func.lower(Profile.email) == email.lower()
    )
    if exclude_id is not None:
        statement = statement.where(Profile.id != exclude_id)

    try:
        with get_session() as session:
            return bool(session.scalar(statement))
    except SQLAlchemyError:
        logger.exception("Failed to check profile email uniqueness")
        return None


def profile_completion(profile: dict[str, Any]) -> int:
    """Percentage of writable profile fields that are filled in."""
    filled = sum(
        1
        for name in _PROFILE_FIELDS
        if profile.get(name) is not None and str(profile[name]).strip()
    )
    return round(filled * 100 / len(_PROFILE_FIELDS))


def get_profile_with_stats(profile_id: int) -> dict[str, Any] | None:
    """Get a profile together with portfolio-wide counts.

    Args:
        profile_id: ID of the profile.

    Returns:
        The profile's fields plus ``total_education``, ``total_certifications``,
        ``degrees``, ``certifications``, ``total_skills``, ``total_projects``,
        ``featured_projects`` and ``completion_percentage``; None if the
        profile does not exist or the query failed.
    """
    try:
        with get_session() as session:
            profile = session.get(Profile, profile_id)
            if profile is None:
                return None

            result = profile_store.to_dict(profile)

            degrees = session.scalars(
                select(Education.degree)
                .where(Education.profile_id == profile_id)
                .order_by(Education.end_date.desc(), Education.id.asc())
            ).all()
            certifications = session.scalars(
                select(Certification.certification_name)
                .where(Certification.profile_id == profile_id)
                .order_by(Certification.issue_date.desc(), Certification.id.asc())
            ).all()

            result["total_education"] = len(degrees)
            result["total_certifications"] = len(certifications)
            result["degrees"] = ", ".join(dict.fromkeys(degrees)) or None
            result["certifications"] = ", ".join(dict.fromkeys(certifications)) or None
            result["total_skills"] = session.scalar(select(func.count(Skill.id)))
            result["total_projects"] = session.scalar(select(func.count(Project.id)))
            result["featured_projects"] = session.scalar(
                select(func.count(Project.id)).where(Project.featured.is_(True))
            )
            result["completion_percentage"] = profile_completion(result)
            return result

    except SQLAlchemyError:
        logger.exception("Failed to get profile statistics for %d", profile_id)
        return None
