# Visit statements and the service functions that run them
from datetime import timezone
from dateutil.parser import isoparse
from sqlalchemy import text
from vetclinic.schemas import VISIT_FIELDS
from vetclinic.utils import parse_id, bind_fields

INSERT_VISIT = text(
    'INSERT INTO visits (cat_id, visit_date, reason, notes) '
    'VALUES (:cat_id, :visit_date, :reason, :notes) RETURNING *'
)

# cat_id is fixed once the visit exists
UPDATE_VISIT = text(
    'UPDATE visits SET visit_date = :visit_date, reason = :reason, notes = :notes '
    'WHERE id = :id RETURNING *'
)

DELETE_VISIT = text('DELETE FROM visits WHERE id = :id RETURNING *')

# INNER JOIN: visits whose cat or owner is missing are left out
LIST_VISITS = text(
    'SELECT visits.id AS visit_id, visits.visit_date, visits.reason, visits.notes, '
    'cats.id AS cat_id, cats.name AS cat_name, cats.breed AS cat_breed, '
    'owners.id AS owner_id, owners.first_name AS owner_name, '
    'owners.last_name AS owner_surname, owners.phone AS owner_contact '
    'FROM visits '
    'JOIN cats ON visits.cat_id = cats.id '
    'JOIN owners ON cats.owner_id = owners.id '
    'ORDER BY visits.visit_date ASC, visits.id ASC'
)


def to_utc(visit_date):
    """Normalize an RFC 3339 timestamp to UTC so stored dates sort by time."""
    return isoparse(visit_date.upper()).astimezone(timezone.utc).isoformat()


def create_visit(store, payload):
    params = bind_fields(payload, VISIT_FIELDS)
    params['visit_date'] = to_utc(params['visit_date'])
    rows = store.execute(INSERT_VISIT, params)
    return rows[0]


def update_visit(store, visit_id, payload):
    row_id = parse_id(visit_id)
    if row_id is None:
        return None
    params = {
        'visit_date': to_utc(payload['visit_date']),
        'reason': payload.get('reason'),
        'notes': payload.get('notes'),
        'id': row_id,
    }
    rows = store.execute(UPDATE_VISIT, params)
    return rows[0] if rows else None


def delete_visit(store, visit_id):
    row_id = parse_id(visit_id)
    if row_id is None:
        return None
    rows = store.execute(DELETE_VISIT, {'id': row_id})
    return rows[0] if rows else None


def get_all_visits(store):
    return store.execute(LIST_VISITS)
