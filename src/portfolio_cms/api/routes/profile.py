"""Profile routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from portfolio_cms.api.dependencies import (
    JsonBody,
    RecordIdQuery,
    get_or_404,
    require_body_id,
    require_database,
    require_query_id,
    unknown_action,
    validate_payload,
)
from portfolio_cms.api.errors import ApiError
from portfolio_cms.api.responses import envelope, listing
from portfolio_cms.api.schemas.profile import ProfilePayload
from portfolio_cms.services.profiles import email_exists, get_profile_with_stats, profile_store

router = APIRouter(prefix="/profile", tags=["profile"], dependencies=[Depends(require_database)])

LABEL = "Profile"


def _ensure_email_available(email: str, exclude_id: int | None = None) -> None:
    taken = email_exists(email, exclude_id=exclude_id)
    if taken is None:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to verify email")
    if taken:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Email already exists")


@router.get(
    "",
    summary="Get profile",
    description=(
        "List profiles, fetch one by ``id``, or with ``action=stats`` return a "
        "profile with education, skill and project counts."
    ),
)
def get_profile(
    record_id: RecordIdQuery = None,
    action: str | None = Query(None, description="stats"),
) -> JSONResponse:
    if action:
        if action != "stats":
            raise unknown_action(action)
        profile_id = require_query_id(record_id, LABEL)
        stats = get_profile_with_stats(profile_id)
        if stats is None:
            raise ApiError(status.HTTP_404_NOT_FOUND, "Profile not found")
        return envelope("Profile statistics retrieved successfully", data=stats)

    if record_id is not None:
        profile = get_or_404(profile_store, record_id, LABEL)
        return envelope("Profile retrieved successfully", data=profile)

    return listing("Profiles retrieved successfully", profile_store.list_all())


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create profile")
def create_profile(body: JsonBody) -> JSONResponse:
    payload = validate_payload(ProfilePayload, body)
    _ensure_email_available(payload.email)

    if not profile_store.create(payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create profile")
    return envelope("Profile created successfully", status_code=status.HTTP_201_CREATED)


@router.put("", summary="Replace profile")
def update_profile(body: JsonBody) -> JSONResponse:
    profile_id = require_body_id(body, LABEL)
    get_or_404(profile_store, profile_id, LABEL)

    payload = validate_payload(ProfilePayload, body)
    _ensure_email_available(payload.email, exclude_id=profile_id)

    if not profile_store.update(profile_id, payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update profile")
    return envelope("Profile updated successfully")


@router.delete("", summary="Delete profile")
def delete_profile(
    record_id: RecordIdQuery = None,
) -> JSONResponse:
    profile_id = require_query_id(record_id, LABEL)
    get_or_404(profile_store, profile_id, LABEL)

    if not profile_store.delete(profile_id):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete profile")
    return envelope("Profile deleted successfully")
