"""Projects routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from portfolio_cms.api.dependencies import (
    JsonBody,
    RecordIdQuery,
    ensure_choice,
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
from portfolio_cms.api.schemas.projects import ProjectPayload
from portfolio_cms.constants import ProjectStatus
from portfolio_cms.services.projects import (
    get_featured_projects,
    get_project_statistics,
    get_projects_by_status,
    get_projects_with_duration,
    project_store,
    search_projects_by_technology,
)

router = APIRouter(
    prefix="/projects", tags=["projects"], dependencies=[Depends(require_database)]
)

LABEL = "Project"


def _run_action(action: str, technology: str | None, project_status: str | None) -> JSONResponse:
    if action == "featured":
        return listing("Featured projects retrieved successfully", get_featured_projects())

    if action == "with_duration":
        return listing(
            "Projects with duration retrieved successfully", get_projects_with_duration()
        )

    if action == "statistics":
        stats = get_project_statistics()
        if stats is None:
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve project statistics"
            )
        return envelope("Project statistics retrieved successfully", data=stats)

    if action == "search":
        technology = require_param(technology, "technology")
        return listing(
            "Search results retrieved successfully", search_projects_by_technology(technology)
        )

    if action == "by_status":
        project_status = ensure_choice(
            require_param(project_status, "status"), ProjectStatus, "status"
        )
        return listing(
            f"{project_status} projects retrieved successfully",
            get_projects_by_status(project_status),
        )

    raise unknown_action(action)


@router.get(
    "",
    summary="Get projects",
    description=(
        "List projects, fetch one by ``id``, or run a query action: featured, "
        "with_duration, statistics, search (``technology``), by_status (``status``)."
    ),
)
def get_projects(
    record_id: RecordIdQuery = None,
    action: str | None = Query(None, description="Query action to run"),
    technology: str | None = Query(None, description="Search keywords for search"),
    project_status: str | None = Query(None, alias="status", description="Status for by_status"),
) -> JSONResponse:
    if action:
        return _run_action(action, technology, project_status)

    if record_id is not None:
        project = get_or_404(project_store, record_id, LABEL)
        return envelope("Project retrieved successfully", data=project)

    return listing("Projects retrieved successfully", project_store.list_all())


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create project")
def create_project(body: JsonBody) -> JSONResponse:
    payload = validate_payload(ProjectPayload, body)
    if not project_store.create(payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create project")
    return envelope("Project created successfully", status_code=status.HTTP_201_CREATED)


@router.put("", summary="Replace project")
def update_project(body: JsonBody) -> JSONResponse:
    project_id = require_body_id(body, LABEL)
    get_or_404(project_store, project_id, LABEL)

    payload = validate_payload(ProjectPayload, body)
    if not project_store.update(project_id, payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update project")
    return envelope("Project updated successfully")


@router.delete("", summary="Delete project")
def delete_project(
    record_id: RecordIdQuery = None,
) -> JSONResponse:
    project_id = require_query_id(record_id, LABEL)
    get_or_404(project_store, project_id, LABEL)

    if not project_store.delete(project_id):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete project")
    return envelope("Project deleted successfully")
