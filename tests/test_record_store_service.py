"""Tests for the generic record store."""

from __future__ import annotations

from portfolio_cms.data.db import get_database_url, get_session
from portfolio_cms.data.models import Contact, Hobby
from portfolio_cms.services.contacts import contact_store
from portfolio_cms.services.hobbies import hobby_store
from portfolio_cms.services.projects import project_store


def _only_hobby_id() -> int:
    with get_session() as session:
        return session.query(Hobby.id).one()[0]


def test_create_and_get_round_trip():
    assert hobby_store.create(
        {"hobby_name": "Photography", "description": "Street and travel", "icon_class": "fa-camera"}
    )

    hobby_id = _only_hobby_id()
    record = hobby_store.get_by_id(hobby_id)

    assert record is not None
    assert record["hobby_name"] == "Photography"
    assert record["description"] == "Street and travel"
    assert record["icon_class"] == "fa-camera"
    assert record["created_at"] is not None


def test_get_missing_record_returns_none():
    assert hobby_store.get_by_id(999) is None
    assert hobby_store.exists(999) is False


def test_create_ignores_unknown_and_applies_defaults():
    assert project_store.create(
        {"project_title": "Portfolio", "description": "This site", "not_a_column": "x"}
    )

    [project] = project_store.list_all()
    assert project["status"] == "In Progress"
    assert project["featured"] is False


def test_create_rejects_enum_violation():
    assert not contact_store.create(
        {"name": "Ana", "email": "ana@gmail.com", "message": "Hi", "status": "Spam"}
    )
    assert contact_store.list_all() == []


def test_create_failure_returns_false():
    # hobby_name is NOT NULL
    assert hobby_store.create({"description": "no name"}) is False


def test_update_replaces_every_column():
    hobby_store.create({"hobby_name": "Chess", "description": "Blitz", "icon_class": "fa-chess"})
    hobby_id = _only_hobby_id()

    assert hobby_store.update(hobby_id, {"hobby_name": "Chess960"})

    record = hobby_store.get_by_id(hobby_id)
    assert record["hobby_name"] == "Chess960"
    assert record["description"] is None
    assert record["icon_class"] is None


def test_update_missing_record_returns_false():
    assert hobby_store.update(42, {"hobby_name": "Ghost"}) is False


def test_update_columns_keeps_other_fields():
    contact_store.create(
        {"name": "Ana", "email": "ana@gmail.com", "message": "Hi", "ip_address": "10.0.0.1"}
    )
    [contact] = contact_store.list_all()

    assert contact_store.update_columns(contact["id"], {"status": "Read"})

    updated = contact_store.get_by_id(contact["id"])
    assert updated["status"] == "Read"
    assert updated["message"] == "Hi"
    assert updated["ip_address"] == "10.0.0.1"


def test_contact_update_never_touches_ip_address():
    contact_store.create(
        {"name": "Ana", "email": "ana@gmail.com", "message": "Hi", "ip_address": "10.0.0.1"}
    )
    [contact] = contact_store.list_all()

    assert contact_store.update(
        contact["id"],
        {
            "name": "Ana Lima",
            "email": "ana@gmail.com",
            "message": "Hello",
            "status": "Replied",
            "ip_address": "127.0.0.1",
        },
    )

    with get_session() as session:
        stored = session.get(Contact, contact["id"])
        assert stored.ip_address == "10.0.0.1"
        assert stored.name == "Ana Lima"


def test_delete_twice():
    hobby_store.create({"hobby_name": "Running"})
    hobby_id = _only_hobby_id()

    assert hobby_store.delete(hobby_id) is True
    assert hobby_store.delete(hobby_id) is False
    assert hobby_store.get_by_id(hobby_id) is None


def test_count():
    assert hobby_store.count() == 0
    hobby_store.create({"hobby_name": "Running"})
    hobby_store.create({"hobby_name": "Cooking"})
    assert hobby_store.count() == 2


def test_tests_run_against_a_temporary_database(tmp_path):
    assert get_database_url() == f"sqlite:///{(tmp_path / 'portfolio.db').as_posix()}"
    assert hobby_store.list_all() == []


def test_out_of_range_id_stays_inside_the_store():
    too_big = 2**63

    assert hobby_store.get_by_id(too_big) is None
    assert hobby_store.update(too_big, {"hobby_name": "Chess"}) is False
    assert hobby_store.delete(too_big) is False
