from .util import validate_body, parse_id, bind_fields
from .validation import ValidationResult, compile_schema, compile_schemas

__all__ = [
    'validate_body', 'parse_id', 'bind_fields',
    'ValidationResult', 'compile_schema', 'compile_schemas',
]
