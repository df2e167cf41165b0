"""Skills routes for the API."""

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
from portfolio_cms.api.schemas.skills import SkillPayload
from portfolio_cms.constants import ProficiencyLevel
from portfolio_cms.services.skills import (
    get_skill_statistics,
    get_skills_by_category,
    get_skills_by_proficiency,
    get_skills_in_category,
    skill_store,
)

router = APIRouter(prefix="/skills", tags=["skills"], dependencies=[Depends(require_database)])

LABEL = "Skill"


def _run_action(action: str, level: str | None, category: str | None) -> JSONResponse:
    if action == "by_category":
        return listing("Skills grouped by category", get_skills_by_category())

    if action == "by_proficiency":
        level = ensure_choice(require_param(level, "level"), ProficiencyLevel, "proficiency level")
        return listing(f"{level} skills retrieved successfully", get_skills_by_proficiency(level))

    if action == "in_category":
        category = require_param(category, "category")
        return listing(
            f"Skills in category '{category}' retrieved successfully",
            get_skills_in_category(category),
        )

    if action == "statistics":
        stats = get_skill_statistics()
        if stats is None:
            raise ApiError(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to retrieve skill statistics"
            )
        return envelope("Skill statistics retrieved successfully", data=stats)

    raise unknown_action(action)


@router.get(
    "",
    summary="Get skills",
    description=(
        "List skills, fetch one by ``id``, or run a query action: "
        "by_category, by_proficiency (``level``), in_category (``category``), statistics."
    ),
)
def get_skills(
    record_id: RecordIdQuery = None,
    action: str | None = Query(None, description="Query action to run"),
    level: str | None = Query(None, description="Proficiency level for by_proficiency"),
    category: str | None = Query(None, description="Category for in_category"),
) -> JSONResponse:
    if action:
        return _run_action(action, level, category)

    if record_id is not None:
        skill = get_or_404(skill_store, record_id, LABEL)
        return envelope("Skill retrieved successfully", data=skill)

    return listing("Skills retrieved successfully", skill_store.list_all())


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create skill")
def create_skill(body: JsonBody) -> JSONResponse:
    payload = validate_payload(SkillPayload, body)
    if not skill_store.create(payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create skill")
    return envelope("Skill created successfully", status_code=status.HTTP_201_CREATED)


@router.put("", summary="Replace skill")
def update_skill(body: JsonBody) -> JSONResponse:
    skill_id = require_body_id(body, LABEL)
    get_or_404(skill_store, skill_id, LABEL)

    payload = validate_payload(SkillPayload, body)
    if not skill_store.update(skill_id, payload.model_dump()):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update skill")
    return envelope("Skill updated successfully")


@router.delete("", summary="Delete skill")
def delete_skill(
    record_id: RecordIdQuery = None,
) -> JSONResponse:
    skill_id = require_query_id(record_id, LABEL)
    get_or_404(skill_store, skill_id, LABEL)

    if not skill_store.delete(skill_id):
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to delete skill")
    return envelope("Skill deleted successfully")
