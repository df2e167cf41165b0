"""Tests for request payload validation (no database required)."""

from __future__ import annotations

import pytest

from portfolio_cms.api.dependencies import ensure_choice, require_body_id, validate_payload
from portfolio_cms.api.errors import ApiError
from portfolio_cms.api.schemas.contacts import ContactPayload
from portfolio_cms.api.schemas.profile import ProfilePayload
from portfolio_cms.api.schemas.projects import ProjectPayload
from portfolio_cms.api.schemas.skills import SkillPayload
from portfolio_cms.constants import ProficiencyLevel


def _message(schema, body) -> str:
    with pytest.raises(ApiError) as excinfo:
        validate_payload(schema, body)
    assert excinfo.value.status_code == 400
    return excinfo.value.message


def test_required_fields_checked_before_email():
    assert _message(ProfilePayload, {"full_name": "", "email": "bad"}) == (
        "Missing required field: full_name is required"
    )


def test_email_checked_before_enum():
    body = {"name": "Ana", "email": "bad", "message": "Hi", "status": "Spam"}
    assert _message(ContactPayload, body) == "Invalid email format"


def test_enum_error_lists_choices():
    body = {"skill_name": "Python", "category": "Programming", "proficiency_level": "Master"}
    assert _message(SkillPayload, body) == (
        "Invalid proficiency level. Must be: Beginner, Intermediate, Advanced, or Expert"
    )


def test_whitespace_is_trimmed_and_blanks_become_null():
    payload = validate_payload(
        ProfilePayload,
        {"full_name": "  Maria Santos ", "email": "maria.santos@email.com", "phone": "   "},
    )

    assert payload.full_name == "Maria Santos"
    assert payload.phone is None


def test_unknown_fields_are_ignored():
    payload = validate_payload(
        ProfilePayload,
        {"full_name": "Maria", "email": "maria.santos@email.com", "id": 4, "role": "admin"},
    )

    assert "role" not in payload.model_dump()


def test_project_defaults_for_null_values():
    payload = validate_payload(
        ProjectPayload,
        {"project_title": "Blog", "description": "Static", "status": "", "featured": None},
    )

    assert payload.status == "In Progress"
    assert payload.featured is False


def test_project_dates_are_parsed():
    payload = validate_payload(
        ProjectPayload,
        {"project_title": "Blog", "description": "Static", "start_date": "2024-02-29"},
    )

    assert payload.start_date.isoformat() == "2024-02-29"
    assert _message(
        ProjectPayload,
        {"project_title": "Blog", "description": "Static", "start_date": "2024-02-30"},
    ).startswith("Invalid start_date:")


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ({"id": 7}, 7),
        ({"id": "7"}, 7),
    ],
)
def test_require_body_id(body, expected):
    assert require_body_id(body, "Skill") == expected


@pytest.mark.parametrize("body", [{}, {"id": None}, {"id": " "}, {"id": "seven"}, {"id": True}])
def test_require_body_id_rejects(body):
    with pytest.raises(ApiError) as excinfo:
        require_body_id(body, "Skill")
    assert excinfo.value.status_code == 400


def test_query_enum_check_shares_payload_message():
    body = {"skill_name": "Python", "category": "Programming", "proficiency_level": "Master"}
    with pytest.raises(ApiError) as excinfo:
        ensure_choice("Master", ProficiencyLevel, "proficiency level")

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == _message(SkillPayload, body)
    assert ensure_choice("Expert", ProficiencyLevel, "proficiency level") == "Expert"


@pytest.mark.parametrize("body", [{"id": 0}, {"id": 2**63}, {"id": str(2**63)}])
def test_require_body_id_rejects_out_of_range(body):
    with pytest.raises(ApiError) as excinfo:
        require_body_id(body, "Skill")
    assert excinfo.value.message == "Invalid skill ID"
