import pytest

from portal import create_app
from portal.application.snapshot import load_snapshot
from portal.domain.exceptions import RecordNotFound

from .fakes import RecordingStore

TABLES = {
    "sections": [
        {"id": "s1", "title": "Test Series", "kind": "flat"},
        {"id": "s2", "title": "Study Material", "kind": "study_material"},
    ],
    "section_content": [
        {"id": "b", "section_id": "s1", "display_order": 2, "is_active": True},
        {"id": "a", "section_id": "s1", "display_order": 1, "is_active": True},
        {"id": "x", "section_id": "s1", "display_order": 3, "is_active": False},
    ],
}


def test_snapshot_holds_section_and_active_items():
    store = RecordingStore(tables=TABLES)

    snapshot = load_snapshot(store, "s1")

    assert snapshot.section["id"] == "s1"
    assert [i["id"] for i in snapshot.items] == ["a", "b"]
    assert store.calls == [("query_one", "sections"), ("query_records", "section_content")]


def test_missing_section_is_not_found_before_items_are_fetched():
    store = RecordingStore(tables=TABLES)

    with pytest.raises(RecordNotFound) as exc:
        load_snapshot(store, "nope")

    assert exc.value.message == "The requested section could not be found."
    assert store.calls == [("query_one", "sections")]


def test_each_view_completes_its_own_fetches():
    store = RecordingStore(tables=TABLES)
    client = create_app("testing", store=store).test_client()

    flat = client.get("/section/s1")
    redirected = client.get("/section/s2")

    assert [i["id"] for i in flat.get_json()["items"]] == ["a", "b"]
    assert redirected.status_code == 302
    assert store.calls == [
        ("query_one", "sections"),
        ("query_records", "section_content"),
        ("query_one", "sections"),
    ]
