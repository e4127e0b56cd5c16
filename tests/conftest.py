"""
pytest fixtures: a fresh app over in-memory SQLite for every test
"""
import pytest
from sqlalchemy import text

from vetclinic import create_app, db
from vetclinic.config import TestConfig


class FakeStore:
    """Stands in for the database; records statements and replays canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def execute(self, statement, params=None):
        self.calls.append((str(statement), params))
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def run_sql(app):
    """Execute raw SQL outside the API, e.g. to plant rows the API would refuse."""
    def _run(sql, **params):
        with app.app_context():
            result = db.session.execute(text(sql), params)
            rows = [dict(m) for m in result.mappings().all()] if result.returns_rows else []
            db.session.commit()
            return rows
    return _run


@pytest.fixture
def owner_data():
    return {
        "first_name": "Anna",
        "last_name": "Petrova",
        "phone": "+77011234567",
        "email": "anna@example.com"
    }


@pytest.fixture
def cat_data():
    return {
        "name": "Murka",
        "gender": "Female",
        "breed": "Siberian",
        "color": "grey",
        "age": 4
    }


@pytest.fixture
def visit_data():
    return {
        "visit_date": "2024-05-01T10:00:00Z",
        "reason": "Vaccination",
        "notes": "Annual rabies shot"
    }


@pytest.fixture
def owner(client, owner_data):
    resp = client.post("/api/owners", json=owner_data)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture
def cat(client, owner, cat_data):
    resp = client.post("/api/cats", json={**cat_data, "owner_id": owner["id"]})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture
def visit(client, cat, visit_data):
    resp = client.post("/api/visits", json={**visit_data, "cat_id": cat["id"]})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture
def make_client():
    """Test client for an app wired to the given substitute store."""
    def _make(store):
        return create_app(TestConfig, store=store).test_client()
    return _make
