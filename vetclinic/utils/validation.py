"""Request body validation built on jsonschema.

``compile_schema`` turns a schema document into a reusable check function.
The check never raises on odd input: any decoded JSON value (including
``None`` for a missing or malformed body) produces a ``ValidationResult``.
"""
import re
from dataclasses import dataclass, field
from typing import Any, Callable

from jsonschema import Draft7Validator, FormatChecker, validators
from jsonschema.exceptions import ValidationError

_MESSAGES = {
    'type': 'must be {}',
    'minLength': 'must NOT have fewer than {} characters',
    'maxLength': 'must NOT have more than {} characters',
    'pattern': 'must match pattern "{}"',
    'format': 'must match format "{}"',
    'enum': 'must be equal to one of the allowed values',
    'minimum': 'must be >= {}',
    'maximum': 'must be <= {}',
}


@dataclass
class ValidationResult:
    valid: bool
    errors: list[dict] = field(default_factory=list)


def _required(validator, required, instance, schema):
    if not validator.is_type(instance, 'object'):
        return
    for prop in required:
        if prop not in instance:
            yield ValidationError(f"must have required property '{prop}'", path=[prop])


def _additional_properties(validator, additional, instance, schema):
    if not validator.is_type(instance, 'object'):
        return
    if additional is not False:
        yield from Draft7Validator.VALIDATORS['additionalProperties'](
            validator, additional, instance, schema
        )
        return
    known = schema.get('properties', {})
    patterns = schema.get('patternProperties', {})
    for prop in instance:
        if prop in known or any(re.search(p, prop) for p in patterns):
            continue
        yield ValidationError('must NOT have additional properties', path=[prop])


def ecma_pattern(pattern):
    """Rewrite unescaped ``$`` outside character classes as ``\\Z``.

    JSON-Schema patterns follow ECMA-262, where ``$`` only matches at the very
    end of the input; Python's ``$`` also matches before a trailing newline.
    """
    out = []
    escaped = in_class = False
    for char in pattern:
        if escaped:
            out.append(char)
            escaped = False
        elif char == '\\':
            out.append(char)
            escaped = True
        elif char == '[':
            out.append(char)
            in_class = True
        elif char == ']' and in_class:
            out.append(char)
            in_class = False
        elif char == '$' and not in_class:
            out.append(r'\Z')
        else:
            out.append(char)
    return ''.join(out)


def _pattern(validator, pattern, instance, schema):
    if not validator.is_type(instance, 'string'):
        return
    if not re.search(ecma_pattern(pattern), instance):
        yield ValidationError(f"{instance!r} does not match {pattern!r}")


_BodyValidator = validators.extend(
    Draft7Validator,
    {
        'required': _required,
        'additionalProperties': _additional_properties,
        'pattern': _pattern,
    },
)

# Same address rule as ajv-formats' "email" format
EMAIL_RE = re.compile(
    r"^[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\Z",
    re.IGNORECASE,
)


def _format_checker():
    checker = FormatChecker()

    @checker.checks('email')
    def is_email(instance):
        if not isinstance(instance, str):
            return True
        return EMAIL_RE.match(instance) is not None

    return checker


def format_path(path) -> str:
    """Render a jsonschema path as ``owner.pets[0].name``."""
    rendered = ''
    for part in path:
        if isinstance(part, int):
            rendered += f'[{part}]'
        else:
            rendered += f'.{part}'
    return rendered.lstrip('.')


def describe(error: ValidationError) -> str:
    template = _MESSAGES.get(error.validator)
    if template is None:
        return error.message
    value = error.validator_value
    if isinstance(value, list) and error.validator == 'type':
        value = ','.join(value)
    return template.format(value)


def compile_schema(schema: dict) -> Callable[[Any], ValidationResult]:
    Draft7Validator.check_schema(schema)
    validator = _BodyValidator(schema, format_checker=_format_checker())

    def check(value: Any) -> ValidationResult:
        errors = [
            {'field': format_path(error.absolute_path), 'message': describe(error)}
            for error in validator.iter_errors(value)
        ]
        errors.sort(key=lambda e: (e['field'], e['message']))
        return ValidationResult(valid=not errors, errors=errors)

    return check


def compile_schemas(schemas: dict) -> dict:
    return {name: compile_schema(schema) for name, schema in schemas.items()}
