"""Pydantic schemas for skills API endpoints."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, field_validator

from portfolio_cms.api.schemas.common import WritePayload, check_choice
from portfolio_cms.constants import ProficiencyLevel


class SkillPayload(WritePayload):
    """Request body for creating or replacing a skill."""

    required_fields: ClassVar[tuple[str, ...]] = ("skill_name", "category", "proficiency_level")

    skill_name: str = Field(..., max_length=100)
    category: str = Field(..., max_length=50, description="Grouping such as Programming")
    proficiency_level: str = Field(..., description="Beginner, Intermediate, Advanced or Expert")
    years_of_experience: float | None = Field(None, ge=0, le=999.9)
    description: str | None = None
    icon_class: str | None = Field(None, max_length=100)

    @field_validator("proficiency_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return check_choice(value, ProficiencyLevel, "proficiency level")
