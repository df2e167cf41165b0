"""Pydantic schemas for profile API endpoints."""

from __future__ import annotations

from datetime import date
from typing import ClassVar

from pydantic import Field, field_validator

from portfolio_cms.api.schemas.common import WritePayload, check_email


class ProfilePayload(WritePayload):
    """Request body for creating or replacing the profile."""

    required_fields: ClassVar[tuple[str, ...]] = ("full_name", "email")

    full_name: str = Field(..., max_length=100, description="Display name")
    email: str = Field(..., max_length=100, description="Contact email address")
    phone: str | None = Field(None, max_length=20)
    address: str | None = None
    bio: str | None = Field(None, description="Short biography")
    photo_url: str | None = Field(None, max_length=255)
    linkedin_url: str | None = Field(None, max_length=255)
    github_url: str | None = Field(None, max_length=255)
    website_url: str | None = Field(None, max_length=255)
    date_of_birth: date | None = Field(None, description="Date of birth (ISO format)")

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        return check_email(value)
