"""Shared dependencies and request helpers for API routes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, TypeVar

from fastapi import Body, Query, status
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from portfolio_cms.api.errors import ApiError
from portfolio_cms.api.schemas.common import WritePayload, check_choice
from portfolio_cms.constants import human_join
from portfolio_cms.constants.portfolio_constants import MAX_RECORD_ID
from portfolio_cms.data.db import check_connection
from portfolio_cms.services.record_store import RecordStore

PayloadT = TypeVar("PayloadT", bound=WritePayload)

JsonBody = Annotated[dict[str, Any], Body(description="JSON object with the writable fields")]

RecordIdQuery = Annotated[
    int | None, Query(alias="id", ge=1, le=MAX_RECORD_ID, description="Record ID")
]

# Error types reported first when a payload has several problems
_ERROR_PRIORITY = ("email_format", "invalid_choice")


def require_database() -> None:
    """Fail the request before any resource logic if the database is unreachable.

    Raises:
        ApiError: 500 when the connectivity probe fails.
    """
    if not check_connection():
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database connection failed")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _describe_payload_error(exc: ValidationError) -> str:
    errors = exc.errors()
    for error_type in _ERROR_PRIORITY:
        for error in errors:
            if error["type"] == error_type:
                return error["msg"]

    first = errors[0]
    location = ".".join(str(part) for part in first["loc"]) or "request body"
    return f"Invalid {location}: {first['msg']}"


def validate_payload(schema: type[PayloadT], body: Mapping[str, Any]) -> PayloadT:
    """Validate a write body against ``schema``.

    Required fields are checked for blanks first, then the model is
    validated; email format problems win over enum problems, which win over
    any other field error.

    Raises:
        ApiError: 400 with a message describing the first failing rule.
    """
    missing = [name for name in schema.required_fields if is_blank(body.get(name))]
    if len(missing) == 1:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, f"Missing required field: {missing[0]} is required"
        )
    if missing:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            f"Missing required fields: {human_join(missing)} are required",
        )

    try:
        return schema.model_validate(dict(body))
    except ValidationError as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, _describe_payload_error(exc)) from None


def require_body_id(body: Mapping[str, Any], label: str) -> int:
    """Return the integer ``id`` from a PUT body.

    Raises:
        ApiError: 400 when the id is missing, not an integer or out of range.
    """
    value = body.get("id")
    if is_blank(value):
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"{label} ID is required")
    if isinstance(value, bool):
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"Invalid {label.lower()} ID")
    try:
        record_id = int(value)
    except (TypeError, ValueError):
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"Invalid {label.lower()} ID") from None
    if not 1 <= record_id <= MAX_RECORD_ID:
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"Invalid {label.lower()} ID")
    return record_id


def require_query_id(record_id: int | None, label: str) -> int:
    if record_id is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"{label} ID is required")
    return record_id


def get_or_404(store: RecordStore, record_id: int, label: str) -> dict[str, Any]:
    """Fetch a record or raise 404 if it does not exist."""
    record = store.get_by_id(record_id)
    if record is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, f"{label} not found")
    return record


def require_param(value: str | None, name: str) -> str:
    """Return a required action companion parameter.

    Raises:
        ApiError: 400 when the parameter is missing or blank.
    """
    if is_blank(value):
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"{name.capitalize()} parameter is required")
    return value.strip()


def ensure_choice(value: str, enum_cls: type[Enum], field_label: str) -> str:
    """Query-parameter counterpart of the payload enum check."""
    try:
        return check_choice(value, enum_cls, field_label)
    except PydanticCustomError as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, exc.message()) from None


def unknown_action(action: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, f"Unknown action '{action}'")
