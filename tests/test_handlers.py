"""
Handler behaviour against a substitute store (no database involved)
"""
import pytest

from vetclinic import create_app, db
from vetclinic.config import Config
from vetclinic.store import ForeignKeyViolation
from conftest import FakeStore


def test_failed_validation_never_reaches_store(make_client):
    store = FakeStore()
    client = make_client(store)
    for path in ("/api/owners", "/api/cats", "/api/visits"):
        assert client.post(path, json={"bogus": True}).status_code == 400
    assert client.put("/api/owners/1", json={}).status_code == 400
    assert store.calls == []


def test_owner_params_follow_column_order_with_nulls(make_client):
    store = FakeStore(rows=[{"id": 7}])
    client = make_client(store)
    payload = {"phone": "87011234567", "last_name": "Petrova", "first_name": "Anna"}
    resp = client.post("/api/owners", json=payload)
    assert resp.status_code == 201
    statement, params = store.calls[0]
    assert list(params) == ["first_name", "last_name", "phone", "email"]
    assert params["email"] is None
    assert "Anna" not in statement


def test_update_binds_id_separately(make_client):
    store = FakeStore(rows=[])
    client = make_client(store)
    resp = client.put("/api/cats/12", json={"name": "Tom", "owner_id": 3})
    assert resp.status_code == 404
    _, params = store.calls[0]
    assert params["id"] == 12
    assert params["owner_id"] == 3


def test_non_numeric_id_skips_store(make_client):
    store = FakeStore()
    client = make_client(store)
    assert client.get("/api/owners/x1/cats").get_json() == []
    assert client.delete("/api/visits/x1").status_code == 404
    assert store.calls == []


@pytest.mark.parametrize("method, path, body", [
    ("get", "/api/owners", None),
    ("post", "/api/owners", {"first_name": "Anna", "last_name": "Petrova", "phone": "87011234567"}),
    ("get", "/api/owners/1/cats", None),
    ("post", "/api/cats", {"name": "Tom", "owner_id": 1}),
    ("get", "/api/cats-info", None),
    ("get", "/api/cats/1/discount", None),
    ("post", "/api/visits", {"cat_id": 1, "visit_date": "2024-05-01T10:00:00Z", "reason": "Checkup"}),
    ("delete", "/api/visits/1", None),
    ("get", "/api/visit", None),
])
def test_store_failure_maps_to_500(make_client, method, path, body):
    client = make_client(FakeStore(error=RuntimeError("connection refused")))
    resp = getattr(client, method)(path, json=body) if body else getattr(client, method)(path)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "connection refused"}


def test_foreign_key_violation_from_store_maps_to_400(make_client):
    client = make_client(FakeStore(error=ForeignKeyViolation(Exception("fk"))))
    resp = client.post("/api/cats", json={"name": "Tom", "owner_id": 1})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "The owner with this ID doesn't exist."}


def test_substitute_store_skips_schema_creation(monkeypatch):
    def fail_create_all(*args, **kwargs):
        raise AssertionError("schema creation must not run with a substitute store")

    monkeypatch.setattr(db, "create_all", fail_create_all)
    store = FakeStore(rows=[{"id": 1, "first_name": "Anna"}])
    client = create_app(Config, store=store).test_client()
    resp = client.get("/api/owners")
    assert resp.status_code == 200
    assert resp.get_json() == [{"id": 1, "first_name": "Anna"}]
