"""Pydantic schemas for contact message API endpoints."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, field_validator

from portfolio_cms.api.schemas.common import WritePayload, check_choice, check_email
from portfolio_cms.constants import ContactStatus
from portfolio_cms.constants.portfolio_constants import DEFAULT_CONTACT_STATUS, MAX_RECORD_ID


class ContactPayload(WritePayload):
    """Request body for a contact message.

    ``ip_address`` is only stored on creation; when omitted the caller's
    address is recorded instead.
    """

    required_fields: ClassVar[tuple[str, ...]] = ("name", "email", "message")

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=100)
    subject: str | None = Field(None, max_length=200)
    message: str
    status: str | None = DEFAULT_CONTACT_STATUS
    ip_address: str | None = Field(None, max_length=45)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str | None) -> str:
        if value is None:
            return DEFAULT_CONTACT_STATUS
        return check_choice(value, ContactStatus, "status")


class ContactStatusPayload(WritePayload):
    """Request body for the status-only update."""

    required_fields: ClassVar[tuple[str, ...]] = ("id", "status")

    id: int = Field(..., ge=1, le=MAX_RECORD_ID)
    status: str

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str) -> str:
        return check_choice(value, ContactStatus, "status")
