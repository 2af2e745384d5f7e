"""
Shared fixtures for the portal test suite.

The app runs on in-memory SQLite through the real SQLContentStore. Tests that
need to observe or break store calls use the fakes in tests/fakes.py.
"""
import pytest

from portal import create_app
from portal.extensions import db as _db


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["content_store"]


@pytest.fixture
def make_section(store):
    counter = {"order": 0}

    def _make(title, **fields):
        counter["order"] += 1
        fields.setdefault("description", f"{title} description")
        fields.setdefault("display_order", counter["order"])
        return store.insert_record("sections", {"title": title, **fields})

    return _make


@pytest.fixture
def make_item(store):
    counter = {"order": 0}

    def _make(section, title="Item", content_type="text", content_data=None, **fields):
        counter["order"] += 1
        data = {"text": f"{title} body"} if content_data is None else content_data
        fields.setdefault("display_order", counter["order"])
        return store.insert_record("section_content", {
            "section_id": section["id"],
            "title": title,
            "content_type": content_type,
            "content_data": data,
            **fields,
        })

    return _make


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(store):
    user = store.insert_record("users", {"email": "admin@example.com", "password": "Adm1n-pass"})
    store.insert_record("user_roles", {"user_id": user["id"], "role": "admin"})
    session = store.sign_in("admin@example.com", "Adm1n-pass")
    return _bearer(session["access_token"])


@pytest.fixture
def visitor_headers(store):
    store.insert_record("users", {"email": "visitor@example.com", "password": "V1sitor-pass"})
    session = store.sign_in("visitor@example.com", "V1sitor-pass")
    return _bearer(session["access_token"])
