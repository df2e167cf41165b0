"""Shared Pydantic schemas: the response envelope and payload base class."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from portfolio_cms.constants.portfolio_constants import describe_choices


class Envelope(BaseModel):
    """Uniform JSON body returned by every resource endpoint."""

    status: Literal["success", "error"]
    message: str
    count: int | None = Field(None, description="Number of items when data is a list")
    data: Any = None


class WritePayload(BaseModel):
    """Base class for POST/PUT bodies.

    Subclasses list their required fields in ``required_fields``; those are
    checked for blanks before model validation. Empty optional strings are
    stored as null.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _blank_strings_to_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: None if isinstance(value, str) and not value.strip() else value
                for key, value in data.items()
            }
        return data


def check_email(value: str | None) -> str | None:
    """Reject malformed email addresses with a uniform message."""
    if value is None:
        return None
    try:
        validate_email(value)
    except PydanticCustomError:
        raise PydanticCustomError("email_format", "Invalid email format") from None
    return value


def check_choice(value: str, enum_cls: type[Enum], field_label: str) -> str:
    """Reject values outside an enum, listing the allowed ones."""
    if value not in {member.value for member in enum_cls}:
        raise PydanticCustomError(
            "invalid_choice",
            "Invalid {field}. Must be: {choices}",
            {"field": field_label, "choices": describe_choices(enum_cls)},
        )
    return value
