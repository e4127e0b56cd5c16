# Owner statements and the service functions that run them
from sqlalchemy import text
from vetclinic.schemas import OWNER_FIELDS
from vetclinic.utils import parse_id, bind_fields

LIST_OWNERS = text('SELECT * FROM owners ORDER BY id DESC')

INSERT_OWNER = text(
    'INSERT INTO owners (first_name, last_name, phone, email) '
    'VALUES (:first_name, :last_name, :phone, :email) RETURNING *'
)

UPDATE_OWNER = text(
    'UPDATE owners SET first_name = :first_name, last_name = :last_name, '
    'phone = :phone, email = :email WHERE id = :id RETURNING *'
)

LIST_OWNER_CATS = text('SELECT * FROM cats WHERE owner_id = :owner_id ORDER BY id DESC')


def get_all_owners(store):
    return store.execute(LIST_OWNERS)


def create_owner(store, payload):
    rows = store.execute(INSERT_OWNER, bind_fields(payload, OWNER_FIELDS))
    return rows[0]


def update_owner(store, owner_id, payload):
    row_id = parse_id(owner_id)
    if row_id is None:
        return None
    params = bind_fields(payload, OWNER_FIELDS)
    params['id'] = row_id
    rows = store.execute(UPDATE_OWNER, params)
    return rows[0] if rows else None


def get_owner_cats(store, owner_id):
    row_id = parse_id(owner_id)
    if row_id is None:
        return []
    return store.execute(LIST_OWNER_CATS, {'owner_id': row_id})
