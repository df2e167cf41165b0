"""Pydantic schemas for projects API endpoints."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

from pydantic import Field, field_validator

from portfolio_cms.api.schemas.common import WritePayload, check_choice
from portfolio_cms.constants import ProjectStatus
from portfolio_cms.constants.portfolio_constants import DEFAULT_PROJECT_STATUS


class ProjectPayload(WritePayload):
    """Request body for creating or replacing a project.

    ``status`` defaults to "In Progress" and ``featured`` to False when they
    are omitted or null.
    """

    required_fields: ClassVar[tuple[str, ...]] = ("project_title", "description")

    project_title: str = Field(..., max_length=150)
    description: str
    technologies_used: str | None = Field(None, description="Comma-separated technologies")
    project_url: str | None = Field(None, max_length=255)
    github_url: str | None = Field(None, max_length=255)
    image_url: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = Field(None, description="Null while the project is ongoing")
    status: str | None = DEFAULT_PROJECT_STATUS
    featured: bool | None = False

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str | None) -> str:
        if value is None:
            return DEFAULT_PROJECT_STATUS
        return check_choice(value, ProjectStatus, "status")

    @field_validator("featured")
    @classmethod
    def _featured_flag(cls, value: bool | None) -> bool:
        return bool(value)
