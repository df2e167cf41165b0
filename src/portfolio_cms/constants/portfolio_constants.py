"""
Constants shared by the record stores and the API payload validation.
"""

from enum import Enum


class ProficiencyLevel(str, Enum):
    """Skill proficiency, listed from lowest to highest."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class ProjectStatus(str, Enum):
    """Lifecycle status of a portfolio project."""

    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ARCHIVED = "Archived"


class ContactStatus(str, Enum):
    """Handling status of a contact message."""

    NEW = "New"
    READ = "Read"
    REPLIED = "Replied"
    ARCHIVED = "Archived"


PROFICIENCY_LEVELS = frozenset(level.value for level in ProficiencyLevel)
PROJECT_STATUSES = frozenset(status.value for status in ProjectStatus)
CONTACT_STATUSES = frozenset(status.value for status in ContactStatus)

# Rank used to sort proficiency by enum order instead of alphabetically
PROFICIENCY_RANK = {level.value: rank for rank, level in enumerate(ProficiencyLevel, start=1)}

DEFAULT_PROJECT_STATUS = ProjectStatus.IN_PROGRESS.value
DEFAULT_CONTACT_STATUS = ContactStatus.NEW.value

# Project duration buckets, in days (strictly greater than)
LONG_TERM_DAYS = 180
MEDIUM_TERM_DAYS = 90

LONG_TERM = "Long Term"
MEDIUM_TERM = "Medium Term"
SHORT_TERM = "Short Term"

DEFAULT_RECENT_DAYS = 30
MAX_RECENT_DAYS = 36500

# Largest primary key a signed 64-bit INTEGER column can hold
MAX_RECORD_ID = 2**63 - 1


def human_join(values: list[str], conjunction: str = "and") -> str:
    """Join names as ``"a"``, ``"a and b"`` or ``"a, b, and c"``."""
    if len(values) < 3:
        return f" {conjunction} ".join(values)
    return ", ".join(values[:-1]) + f", {conjunction} " + values[-1]


def describe_choices(enum_cls: type[Enum]) -> str:
    """Render enum values as ``"A, B, C, or D"`` for error messages."""
    return human_join([member.value for member in enum_cls], conjunction="or")
