from __future__ import annotations

from portfolio_cms.constants.portfolio_constants import (
    CONTACT_STATUSES,
    PROFICIENCY_LEVELS,
    PROJECT_STATUSES,
    ContactStatus,
    ProficiencyLevel,
    ProjectStatus,
    describe_choices,
    human_join,
)

__all__ = [
    "CONTACT_STATUSES",
    "PROFICIENCY_LEVELS",
    "PROJECT_STATUSES",
    "ContactStatus",
    "ProficiencyLevel",
    "ProjectStatus",
    "describe_choices",
    "human_join",
]
