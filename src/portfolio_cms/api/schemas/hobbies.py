"""Pydantic schemas for hobbies API endpoints."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from portfolio_cms.api.schemas.common import WritePayload


class HobbyPayload(WritePayload):
    required_fields: ClassVar[tuple[str, ...]] = ("hobby_name",)

    hobby_name: str = Field(..., max_length=100)
    description: str | None = None
    icon_class: str | None = Field(None, max_length=100)
