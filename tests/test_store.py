from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, text

from vetclinic.store import (
    SqlStore, ForeignKeyViolation, enable_foreign_keys, is_foreign_key_violation, to_row
)
from vetclinic import db


class PgError(Exception):
    def __init__(self, pgcode):
        super().__init__("violates foreign key constraint")
        self.pgcode = pgcode


class Wrapped(Exception):
    def __init__(self, orig):
        super().__init__(str(orig))
        self.orig = orig


def test_postgres_foreign_key_code_detected():
    assert is_foreign_key_violation(Wrapped(PgError("23503")))


def test_other_postgres_codes_not_foreign_key():
    assert not is_foreign_key_violation(Wrapped(PgError("23505")))


def test_sqlite_foreign_key_message_detected():
    assert is_foreign_key_violation(Wrapped(Exception("FOREIGN KEY constraint failed")))


def test_to_row_makes_values_json_friendly():
    row = to_row({
        "id": 1,
        "visit_date": datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        "price": Decimal("12.50"),
        "notes": None,
    })
    assert row == {"id": 1, "visit_date": "2024-05-01T10:00:00+00:00", "price": 12.5, "notes": None}


def test_execute_returns_inserted_row(app):
    store = SqlStore(db)
    with app.app_context():
        rows = store.execute(
            text("INSERT INTO owners (first_name, last_name, phone) VALUES (:f, :l, :p) RETURNING *"),
            {"f": "Anna", "l": "Petrova", "p": "87011234567"},
        )
        assert rows == [{"id": 1, "first_name": "Anna", "last_name": "Petrova",
                         "phone": "87011234567", "email": None}]
        assert store.execute(text("SELECT COUNT(*) AS n FROM owners")) == [{"n": 1}]


def test_execute_raises_foreign_key_violation(app):
    store = SqlStore(db)
    with app.app_context():
        with pytest.raises(ForeignKeyViolation):
            store.execute(
                text("INSERT INTO cats (name, owner_id) VALUES (:name, :owner_id) RETURNING *"),
                {"name": "Murka", "owner_id": 404},
            )
        # session is usable again after the rollback
        assert store.execute(text("SELECT * FROM cats")) == []


def test_execute_propagates_other_errors(app):
    store = SqlStore(db)
    with app.app_context():
        with pytest.raises(Exception) as excinfo:
            store.execute(text("SELECT * FROM no_such_table"))
        assert not isinstance(excinfo.value, ForeignKeyViolation)
        assert "no_such_table" in str(excinfo.value)


def test_foreign_keys_enabled_only_on_app_engine(app):
    with app.app_context():
        assert db.session.execute(text("PRAGMA foreign_keys")).scalar() == 1

    other = create_engine("sqlite://")
    with other.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 0
    other.dispose()


def test_enable_foreign_keys_is_idempotent(app):
    with app.app_context():
        enable_foreign_keys(db.engine)
        enable_foreign_keys(db.engine)
        assert db.session.execute(text("PRAGMA foreign_keys")).scalar() == 1
