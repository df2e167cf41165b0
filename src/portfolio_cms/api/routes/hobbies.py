"""Hobbies routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from portfolio_cms.api.dependencies import (
    JsonBody,
    RecordIdQuery,
    get_or_404,
    require_body_id,
    require_database,
    require_param,
    require_query_id,
    unknown_action,
    validate_payload,
)
from portfolio_cms.api.errors import ApiError
from portfolio_cms.api.responses import envelope, listing
from portfolio_cms.api.schemas.hobbies import HobbyPayload
from portfolio_cms.services.hobbies import count_hobbies, hobby_store, search_hobbies

router = APIRouter(prefix="/hobbies", tags=["hobbies"], dependencies=[Depends(require_database)])

LABEL = "Hobby"


@router.get(
    "",
    summary="Get hobbies",
    description="List hobbies, fetch one by ``id``, search by ``keyword`` or count them.",
)
def get_hobbies(
    record_id: RecordIdQuery = None,
    action: str | None = Query(None, description="search or count"),
    keyword: str | None = Query(None, description="Search term for search"),
) -> JSONResponse:
    if action == "search":
        keyword = require_param(keyword, "keyword")
        return listing("Search results retrieved successfully", search_hobbies(keyword))

    if action == "count":
        total = count_hobbies()
        if total is None:
            raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to count hobbies")
        return envelope("Hobby count retrieved successfully", data={"total": total})

    if action:
        raise unknown_action(action)

    if record_id is not None:
        hobby = get_or_404(hobby_store, record_id, LABEL)
        return envelope("Hobby retrieved successfully", data=hobby)

    return listing("Hobbies retrieved successfully", hobby_store.list_all())


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create hobby")
def create_hobby(body: JsonBody) -> JSONResponse:
    payload = validate_payload(HobbyPayload, body)
    if not hobby_store.create(payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create hobby")
    return envelope("Hobby created successfully", status_code=status.HTTP_201_CREATED)


@router.put("", summary="Replace hobby")
def update_hobby(body: JsonBody) -> JSONResponse:
    hobby_id = require_body_id(body, LABEL)
    get_or_404(hobby_store, hobby_id, LABEL)

    payload = validate_payload(HobbyPayload, body)
    if not hobby_store.update(hobby_id, payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update hobby")
    return envelope("Hobby updated successfully")


@router.delete("", summary="Delete hobby")
def delete_hobby(
    record_id: RecordIdQuery = None,
) -> JSONResponse:
    hobby_id = require_query_id(record_id, LABEL)
    get_or_404(hobby_store, hobby_id, LABEL)

    if not hobby_store.delete(hobby_id):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete hobby")
    return envelope("Hobby deleted successfully")
