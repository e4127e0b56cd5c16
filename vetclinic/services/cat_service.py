# Cat statements and the service functions that run them
from sqlalchemy import text
from vetclinic.schemas import CAT_FIELDS
from vetclinic.utils import parse_id, bind_fields
from .discount_service import procedure_discount

INSERT_CAT = text(
    'INSERT INTO cats (name, gender, breed, color, age, owner_id) '
    'VALUES (:name, :gender, :breed, :color, :age, :owner_id) RETURNING *'
)

UPDATE_CAT = text(
    'UPDATE cats SET name = :name, gender = :gender, breed = :breed, color = :color, '
    'age = :age, owner_id = :owner_id WHERE id = :id RETURNING *'
)

# LEFT JOIN: a cat without an owner still gets a row
LIST_CATS_INFO = text(
    'SELECT cats.id, cats.name AS cat_name, cats.breed, cats.age, '
    'owners.first_name, owners.last_name, owners.phone AS owner_phone '
    'FROM cats LEFT JOIN owners ON cats.owner_id = owners.id '
    'ORDER BY cats.id DESC'
)

COUNT_CAT_VISITS = text('SELECT COUNT(*) AS completed FROM visits WHERE cat_id = :cat_id')


def create_cat(store, payload):
    rows = store.execute(INSERT_CAT, bind_fields(payload, CAT_FIELDS))
    return rows[0]


def update_cat(store, cat_id, payload):
    row_id = parse_id(cat_id)
    if row_id is None:
        return None
    params = bind_fields(payload, CAT_FIELDS)
    params['id'] = row_id
    rows = store.execute(UPDATE_CAT, params)
    return rows[0] if rows else None


def get_cats_info(store):
    return store.execute(LIST_CATS_INFO)


def get_cat_discount(store, cat_id):
    row_id = parse_id(cat_id)
    completed = 0
    if row_id is not None:
        rows = store.execute(COUNT_CAT_VISITS, {'cat_id': row_id})
        completed = int(rows[0]['completed']) if rows else 0
    return {
        'cat_id': row_id,
        'completed_procedures': completed,
        'discount_percent': procedure_discount(completed),
    }
