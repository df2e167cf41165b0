"""Contact message routes for the API.

Visitors create messages with POST; the admin lists, searches and triages
them. ``PUT ?action=update_status`` changes only the status of a message.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from portfolio_cms.api.dependencies import (
    JsonBody,
    RecordIdQuery,
    ensure_choice,
    get_or_404,
    is_blank,
    require_body_id,
    require_database,
    require_param,
    require_query_id,
    unknown_action,
    validate_payload,
)
from portfolio_cms.api.errors import ApiError
from portfolio_cms.api.responses import envelope, listing
from portfolio_cms.api.schemas.contacts import ContactPayload, ContactStatusPayload
from portfolio_cms.constants import ContactStatus
from portfolio_cms.constants.portfolio_constants import DEFAULT_RECENT_DAYS, MAX_RECENT_DAYS
from portfolio_cms.services.contacts import (
    contact_store,
    get_contact_statistics,
    get_contacts_by_date,
    get_contacts_by_status,
    get_recent_contacts,
    search_contacts,
    update_contact_status,
)

router = APIRouter(
    prefix="/contacts", tags=["contacts"], dependencies=[Depends(require_database)]
)

LABEL = "Contact"


def _run_action(
    action: str, contact_status: str | None, keyword: str | None, days: int
) -> JSONResponse:
    if action == "by_status":
        contact_status = ensure_choice(
            require_param(contact_status, "status"), ContactStatus, "status"
        )
        return listing(
            f"{contact_status} contacts retrieved successfully",
            get_contacts_by_status(contact_status),
        )

    if action == "recent":
        return listing(
            f"Contacts from the last {days} days retrieved successfully",
            get_recent_contacts(days),
        )

    if action == "statistics":
        stats = get_contact_statistics()
        if stats is None:
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve contact statistics"
            )
        return envelope("Contact statistics retrieved successfully", data=stats)

    if action == "search":
        keyword = require_param(keyword, "keyword")
        return listing("Search results retrieved successfully", search_contacts(keyword))

    if action == "by_date":
        return listing("Contacts grouped by date", get_contacts_by_date())

    raise unknown_action(action)


@router.get(
    "",
    summary="Get contact messages",
    description=(
        "List messages, fetch one by ``id``, or run a query action: by_status "
        "(``status``), recent (``days``), statistics, search (``keyword``), by_date."
    ),
)
def get_contacts(
    record_id: RecordIdQuery = None,
    action: str | None = Query(None, description="Query action to run"),
    contact_status: str | None = Query(None, alias="status", description="Status for by_status"),
    keyword: str | None = Query(None, description="Search term for search"),
    days: int = Query(
        DEFAULT_RECENT_DAYS, ge=0, le=MAX_RECENT_DAYS, description="Window size for recent"
    ),
) -> JSONResponse:
    if action:
        return _run_action(action, contact_status, keyword, days)

    if record_id is not None:
        contact = get_or_404(contact_store, record_id, LABEL)
        return envelope("Contact retrieved successfully", data=contact)

    return listing("Contacts retrieved successfully", contact_store.list_all())


@router.post("", status_code=status.HTTP_201_CREATED, summary="Submit contact message")
def create_contact(body: JsonBody, request: Request) -> JSONResponse:
    payload = validate_payload(ContactPayload, body)
    values = payload.model_dump()
    if values["ip_address"] is None and request.client is not None:
        values["ip_address"] = request.client.host

    if not contact_store.create(values):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create contact")
    return envelope("Message sent successfully", status_code=status.HTTP_201_CREATED)


def _update_status(body: dict[str, Any]) -> JSONResponse:
    if is_blank(body.get("id")) or is_blank(body.get("status")):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Contact ID and status are required")

    payload = validate_payload(ContactStatusPayload, body)
    get_or_404(contact_store, payload.id, LABEL)

    if not update_contact_status(payload.id, payload.status):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update contact status")
    return envelope("Contact status updated successfully")


@router.put("", summary="Replace contact message or update its status")
def update_contact(
    body: JsonBody,
    action: str | None = Query(None, description="update_status for a status-only change"),
) -> JSONResponse:
    if action == "update_status":
        return _update_status(body)
    if action:
        raise unknown_action(action)

    contact_id = require_body_id(body, LABEL)
    get_or_404(contact_store, contact_id, LABEL)

    payload = validate_payload(ContactPayload, body)
    if not contact_store.update(contact_id, payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update contact")
    return envelope("Contact updated successfully")


@router.delete("", summary="Delete contact message")
def delete_contact(
    record_id: RecordIdQuery = None,
) -> JSONResponse:
    contact_id = require_query_id(record_id, LABEL)
    get_or_404(contact_store, contact_id, LABEL)

    if not contact_store.delete(contact_id):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete contact")
    return envelope("Contact deleted successfully")
