# vetclinic/utils/util.py
from functools import wraps
from flask import request


def validate_body(check):
    """Reject the request with 400 unless its JSON body passes ``check``."""
    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            body = request.get_json(silent=True)
            result = check(body)
            if not result.valid:
                return {'error': 'Data validation error', 'details': result.errors}, 400
            return fn(*args, payload=body, **kwargs)
        return decorator
    return wrapper


def parse_id(raw):
    """Path ids are plain strings; anything non-numeric matches no row."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def bind_fields(payload, fields):
    return {name: payload.get(name) for name in fields}
