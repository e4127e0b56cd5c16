"""Data access: executes one parameterized statement per call."""
import logging
import sqlite3
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

FOREIGN_KEY_VIOLATION = '23503'


class ForeignKeyViolation(Exception):
    """A statement referenced a row that does not exist."""

    def __init__(self, original):
        super().__init__(str(original))
        self.original = original


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def enable_foreign_keys(engine):
    """Turn on FK enforcement for SQLite connections of ``engine``."""
    if not event.contains(engine, 'connect', _enable_sqlite_foreign_keys):
        event.listen(engine, 'connect', _enable_sqlite_foreign_keys)


def is_foreign_key_violation(error):
    orig = getattr(error, 'orig', error)
    code = getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)
    if code == FOREIGN_KEY_VIOLATION:
        return True
    return 'FOREIGN KEY constraint failed' in str(orig)


def _to_json_value(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def to_row(mapping):
    return {key: _to_json_value(value) for key, value in mapping.items()}


class SqlStore:
    """Runs ``text()`` statements through a Flask-SQLAlchemy session.

    Every call is committed on its own; rows are returned as plain dicts.
    Statements that change data are expected to carry ``RETURNING`` so the
    affected rows come back to the caller.
    """

    def __init__(self, db):
        self.db = db

    def execute(self, statement, params=None):
        session = self.db.session
        try:
            result = session.execute(statement, params or {})
            rows = [to_row(m) for m in result.mappings().all()] if result.returns_rows else []
            session.commit()
            return rows
        except IntegrityError as e:
            session.rollback()
            if is_foreign_key_violation(e):
                logger.warning(f"Foreign key violation: {e.orig}")
                raise ForeignKeyViolation(e.orig) from e
            raise
        except Exception:
            session.rollback()
            raise
