import pytest

from portal.domain.exceptions import AuthRequired, QueryFailure, RecordNotFound
from portal.store import eq


class TestSections:

    def test_kind_is_inferred_from_title_on_insert(self, make_section):
        study = make_section("Study Materials")
        flat = make_section("Test Series")

        assert study["kind"] == "study_material"
        assert flat["kind"] == "flat"

    def test_explicit_kind_is_kept(self, make_section):
        section = make_section("Study Material Archive", kind="flat")

        assert section["kind"] == "flat"

    def test_query_records_filters_and_orders(self, store, make_section):
        make_section("Second", display_order=2)
        make_section("First", display_order=1)
        make_section("Hidden", display_order=0, is_active=False)

        rows = store.query_records("sections", [eq("is_active", True)], order_by="display_order")

        assert [r["title"] for r in rows] == ["First", "Second"]

    def test_descending_order_and_in_filter(self, store, make_section):
        for n in (1, 2, 3):
            make_section(f"S{n}", display_order=n)

        rows = store.query_records(
            "sections", [("title", "in", ["S1", "S3"])], order_by="-display_order"
        )

        assert [r["title"] for r in rows] == ["S3", "S1"]


class TestQueryErrors:

    def test_query_one_without_match_is_not_found(self, store):
        with pytest.raises(RecordNotFound):
            store.query_one("sections", [eq("id", "missing")])

    @pytest.mark.parametrize("table, filters", [
        ("pages", []),
        ("sections", [("colour", "eq", "red")]),
        ("sections", [("title", "like", "S%")]),
        ("sections", [("title",)]),
    ])
    def test_bad_queries_fail(self, store, table, filters):
        with pytest.raises(QueryFailure):
            store.query_records(table, filters)

    def test_insert_with_unknown_field_fails(self, store):
        with pytest.raises(QueryFailure):
            store.insert_record("sections", {"title": "X", "colour": "red"})


class TestContent:

    def test_payload_round_trips_as_json(self, store, make_section, make_item):
        section = make_section("Study Material")
        payload = {"category": "IIT", "subject": "Math", "text": "Limits"}
        make_item(section, "Limits", content_data=payload)

        [row] = store.query_records("section_content", [eq("section_id", section["id"])])

        assert row["content_data"] == payload
        assert row["is_active"] is True

    @pytest.mark.parametrize("payload", ["note", ["Math"], 7])
    def test_non_mapping_payload_reads_as_empty(self, store, make_section, make_item, payload):
        section = make_section("Study Material")

        inserted = make_item(section, "Stray", content_data=payload)
        [row] = store.query_records("section_content", [eq("section_id", section["id"])])

        assert inserted["content_data"] == {}
        assert row["content_data"] == {}

    def test_count_and_delete(self, store, make_section, make_item):
        section = make_section("Test Series")
        first = make_item(section, "One")
        make_item(section, "Two")

        store.delete_record("section_content", first["id"])

        assert store.count_records("section_content", [eq("section_id", section["id"])]) == 1

    def test_delete_missing_record_is_not_found(self, store):
        with pytest.raises(RecordNotFound):
            store.delete_record("section_content", "missing")


class TestSignIn:

    def test_valid_credentials_return_token(self, store):
        user = store.insert_record("users", {"email": "a@example.com", "password": "secret-pw"})

        session = store.sign_in("a@example.com", "secret-pw")

        assert session["user_id"] == user["id"]
        assert session["access_token"]
        assert "password_hash" not in user

    def test_wrong_password_is_rejected(self, store):
        store.insert_record("users", {"email": "a@example.com", "password": "secret-pw"})

        with pytest.raises(AuthRequired) as exc:
            store.sign_in("a@example.com", "nope")

        assert exc.value.message == "Invalid credentials"

    def test_disabled_user_is_rejected(self, store):
        store.insert_record(
            "users", {"email": "a@example.com", "password": "secret-pw", "is_active": False}
        )

        with pytest.raises(AuthRequired) as exc:
            store.sign_in("a@example.com", "secret-pw")

        assert exc.value.message == "User account disabled"
