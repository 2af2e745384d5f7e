from portal.store import eq


def test_seed_sections_is_idempotent(app, store):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed-sections"])
    second = runner.invoke(args=["seed-sections"])

    assert first.exit_code == 0
    assert "Study Material (study_material)" in first.output
    assert second.output == ""
    rows = store.query_records("sections", order_by="display_order")
    assert [r["title"] for r in rows] == ["Test Series", "Study Material", "Location & Centre"]


def test_create_admin_grants_role_once(app, store):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["create-admin", "root@example.com", "--password", "s3cret-pw"])
    second = runner.invoke(args=["create-admin", "root@example.com", "--password", "s3cret-pw"])

    assert "is now an admin" in first.output
    assert "already an admin" in second.output
    user = store.query_one("users", [eq("email", "root@example.com")])
    assert store.count_records("user_roles", [eq("user_id", user["id"])]) == 1
