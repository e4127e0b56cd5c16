# JSON-Schema documents for request bodies. Plain data: the same dicts drive
# validation, the Swagger models and the tests.
from vetclinic.models.cat_model import CatGender

OWNER_SCHEMA = {
    "type": "object",
    "properties": {
        "first_name": {"type": "string", "minLength": 2},
        "last_name": {"type": "string", "minLength": 2},
        "phone": {"type": "string", "minLength": 10, "pattern": "^[0-9+]+$"},
        "email": {"type": "string", "format": "email"},
    },
    "required": ["first_name", "last_name", "phone"],
    "additionalProperties": False,
}

CAT_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "gender": {"type": "string", "enum": [g.value for g in CatGender]},
        "breed": {"type": "string"},
        "color": {"type": "string"},
        "age": {"type": "integer", "minimum": 0, "maximum": 30},
        "owner_id": {"type": "integer"},
    },
    "required": ["name", "owner_id"],
    "additionalProperties": False,
}

VISIT_SCHEMA = {
    "type": "object",
    "properties": {
        "cat_id": {"type": "integer"},
        "visit_date": {"type": "string", "format": "date-time"},
        "reason": {"type": "string", "minLength": 3},
        "notes": {"type": "string"},
    },
    "required": ["cat_id", "visit_date", "reason"],
    "additionalProperties": False,
}

# Column order used when binding statement parameters
OWNER_FIELDS = ("first_name", "last_name", "phone", "email")
CAT_FIELDS = ("name", "gender", "breed", "color", "age", "owner_id")
VISIT_FIELDS = ("cat_id", "visit_date", "reason", "notes")

SCHEMAS = {
    "owner": OWNER_SCHEMA,
    "cat": CAT_SCHEMA,
    "visit": VISIT_SCHEMA,
}
