"""JSON Schema validation on top of :mod:`jsonschema` (Draft 4).

Two entry points:

* :func:`validate_structure` -- validates a whole document against the
  bundled Swagger 2.0 meta-schema and returns
  :class:`~swagvet.models.ValidationResults`.
* :func:`validate_against_schema` -- validates an arbitrary value (a
  ``default``, a parameter value, a response body) against a schema and
  returns plain error dicts.

``jsonschema`` errors are translated into ``{code, message, params, path}``
records with stable codes (``INVALID_TYPE``, ``OBJECT_MISSING_REQUIRED_PROPERTY``,
``ENUM_MISMATCH`` ...) and JSON type names (``integer``, ``object``,
``null`` ...) so the output does not depend on Python ``repr`` formatting.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, Optional

from jsonschema import Draft4Validator, ValidationError
from referencing.exceptions import Unresolvable

from swagvet.models import ValidationResults
from swagvet.schemas import SWAGGER_20
from swagvet.validation.formats import FormatRegistry

logger = logging.getLogger(__name__)

_STRUCTURE_VALIDATOR = Draft4Validator(SWAGGER_20)

_UNDEFINED = object()


def js_type_name(value: Any = _UNDEFINED) -> str:
    """Return the JSON type name of *value* (``undefined`` when omitted).

    Python ``int`` values are reported as ``integer`` and ``float`` values
    as ``number``.
    """
    if value is _UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _display(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, default=str, separators=(",", ":"))


def _missing_properties(error: ValidationError) -> list[str]:
    instance = error.instance if isinstance(error.instance, dict) else {}
    return [name for name in error.validator_value if name not in instance]


def _additional_properties(error: ValidationError) -> list[str]:
    properties = error.schema.get("properties") or {}
    patterns = error.schema.get("patternProperties") or {}
    return [
        name
        for name in error.instance
        if name not in properties
        and not any(re.search(pattern, name) for pattern in patterns)
    ]


def _duplicate_indexes(items: list[Any]) -> tuple[int, int]:
    for second, item in enumerate(items):
        for first in range(second):
            if items[first] == item and type(items[first]) is type(item):
                return first, second
    return 0, 0


def expected_type_name(value: Any) -> str:
    """Render a schema ``type`` (a name or a list of names) for messages."""
    if isinstance(value, list):
        return ",".join(value)
    return str(value)


def _translate(error: ValidationError) -> tuple[str, str, list[Any]]:
    """Map a ``jsonschema`` error onto ``(code, message, params)``."""
    validator = error.validator
    value = error.validator_value
    instance = error.instance

    if validator == "type":
        expected = expected_type_name(value)
        actual = js_type_name(instance)
        return "INVALID_TYPE", f"Expected type {expected} but found type {actual}", [expected, actual]
    if validator == "enum":
        return "ENUM_MISMATCH", f"No enum match for: {_display(instance)}", [_display(instance)]
    if validator == "format":
        return (
            "INVALID_FORMAT",
            f"Object didn't pass validation for format {value}: {_display(instance)}",
            [value, instance],
        )
    if validator == "maximum":
        if error.schema.get("exclusiveMaximum"):
            return (
                "MAXIMUM_EXCLUSIVE",
                f"Value {_display(instance)} is equal or greater than exclusive maximum {value}",
                [instance, value],
            )
        return "MAXIMUM", f"Value {_display(instance)} is greater than maximum {value}", [instance, value]
    if validator == "minimum":
        if error.schema.get("exclusiveMinimum"):
            return (
                "MINIMUM_EXCLUSIVE",
                f"Value {_display(instance)} is equal or less than exclusive minimum {value}",
                [instance, value],
            )
        return "MINIMUM", f"Value {_display(instance)} is less than minimum {value}", [instance, value]
    if validator == "maxLength":
        return "MAX_LENGTH", f"String is too long ({len(instance)} chars), maximum {value}", [len(instance), value]
    if validator == "minLength":
        return "MIN_LENGTH", f"String is too short ({len(instance)} chars), minimum {value}", [len(instance), value]
    if validator == "pattern":
        return "PATTERN", f"String does not match pattern {value}: {instance}", [value, instance]
    if validator == "maxItems":
        return "ARRAY_LENGTH_LONG", f"Array is too long ({len(instance)}), maximum {value}", [len(instance), value]
    if validator == "minItems":
        return "ARRAY_LENGTH_SHORT", f"Array is too short ({len(instance)}), minimum {value}", [len(instance), value]
    if validator == "uniqueItems":
        first, second = _duplicate_indexes(list(instance))
        return (
            "ARRAY_UNIQUE",
            f"Array items are not unique (indexes {first} and {second})",
            [first, second],
        )
    if validator == "additionalProperties":
        extra = _additional_properties(error)
        return (
            "OBJECT_ADDITIONAL_PROPERTIES",
            "Additional properties not allowed: " + ",".join(extra),
            [extra],
        )
    if validator == "additionalItems":
        return "ARRAY_ADDITIONAL_ITEMS", "Additional items not allowed", []
    if validator == "multipleOf":
        return "MULTIPLE_OF", f"Value {_display(instance)} is not a multiple of {value}", [instance, value]
    if validator == "maxProperties":
        return (
            "OBJECT_PROPERTIES_MAXIMUM",
            f"Too many properties defined ({len(instance)}), maximum {value}",
            [len(instance), value],
        )
    if validator == "minProperties":
        return (
            "OBJECT_PROPERTIES_MINIMUM",
            f"Too few properties defined ({len(instance)}), minimum {value}",
            [len(instance), value],
        )
    if validator == "not":
        return "NOT_PASSED", "Data matches schema from 'not'", []
    if validator == "dependencies":
        return "OBJECT_DEPENDENCY_KEY", error.message, []
    if validator == "oneOf":
        if error.context:
            return "ONE_OF_MISSING", "Data does not match any schemas from 'oneOf'", []
        return "ONE_OF_MULTIPLE", "Data is valid against more than one schema from 'oneOf'", []
    if validator == "anyOf":
        return "ANY_OF_MISSING", "Data does not match any schemas from 'anyOf'", []
    return str(validator).upper(), error.message, []


def _sort_key(error: ValidationError) -> tuple[tuple[str, ...], tuple[str, ...]]:
    return (
        tuple(str(segment) for segment in error.absolute_path),
        tuple(str(segment) for segment in error.absolute_schema_path),
    )


def _convert_errors(errors: Iterable[ValidationError]) -> list[dict[str, Any]]:
    """Translate ``jsonschema`` errors into sorted record dicts.

    ``required`` failures are expanded into one record per missing property.
    Format failures on a value that already has the wrong type are dropped.
    """
    ordered = sorted(errors, key=_sort_key)
    type_failures = {
        tuple(error.absolute_path) for error in ordered if error.validator == "type"
    }

    records: list[dict[str, Any]] = []
    seen_required: set[tuple[tuple[str, ...], tuple[str, ...]]] = set()
    for error in ordered:
        path = [str(segment) for segment in error.absolute_path]
        description = error.schema.get("description") if isinstance(error.schema, dict) else None

        if error.validator == "required":
            key = _sort_key(error)
            if key in seen_required:
                continue
            seen_required.add(key)
            for name in _missing_properties(error):
                record = {
                    "code": "OBJECT_MISSING_REQUIRED_PROPERTY",
                    "message": f"Missing required property: {name}",
                    "params": [name],
                    "path": path,
                }
                if description:
                    record["description"] = description
                records.append(record)
            continue

        if error.validator == "format" and tuple(error.absolute_path) in type_failures:
            continue

        code, message, params = _translate(error)
        record = {"code": code, "message": message, "params": params, "path": path}
        if description:
            record["description"] = description
        records.append(record)
    return records


def _has_ref(value: Any) -> bool:
    if isinstance(value, dict):
        return isinstance(value.get("$ref"), str) or any(_has_ref(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_ref(item) for item in value)
    return False


def validate_against_schema(
    schema: dict[str, Any],
    value: Any,
    formats: Optional[FormatRegistry] = None,
    root: Optional[dict[str, Any]] = None,
) -> list[dict[str, Any]]:
    """Validate *value* against *schema* and return translated error records.

    Args:
        schema: A (resolved) JSON Schema.
        value: The instance to validate.
        formats: Format predicates to apply; ``None`` disables format checks.
        root: The resolved document.  Circular references left in *schema*
            (``#/definitions/...``) are resolved against its
            ``definitions``.

    Returns:
        A list of ``{code, message, params, path}`` dicts, empty when the
        value is valid.
    """
    if root is not None and "definitions" in root and _has_ref(schema):
        schema = {**schema, "definitions": root["definitions"]}

    checker = formats.format_checker() if formats is not None else None
    validator = Draft4Validator(schema, format_checker=checker)
    try:
        return _convert_errors(validator.iter_errors(value))
    except Unresolvable as exc:
        logger.debug("Unresolvable reference while validating a value: %s", exc)
        return [
            {
                "code": "UNRESOLVABLE_REFERENCE",
                "message": f"Reference could not be resolved: {exc}",
                "params": [],
                "path": [],
            }
        ]


def _definition_kind(path: list[str]) -> Optional[str]:
    if not path:
        return None
    if path[-1] in ("additionalProperties", "items"):
        return f"schema {path[-1]}"
    if len(path) >= 2 and path[-2] == "securityDefinitions":
        return "securityDefinitions"
    if len(path) >= 2 and path[-2] == "parameters":
        return "parameter"
    if len(path) >= 2 and path[-2] == "responses":
        return "response"
    return None


def validate_structure(definition: dict[str, Any]) -> ValidationResults:
    """Validate a resolved document against the Swagger 2.0 schema.

    Unresolvable and circular references remain as ``$ref`` mappings, which
    the schema accepts, so broken references are left to
    :func:`~swagvet.validation.references.validate_references`.

    Failed ``oneOf``/``anyOf`` branches are reported as ``Not a valid <kind>
    definition`` where the location identifies what was being defined.
    """
    results = ValidationResults()
    for record in _convert_errors(_STRUCTURE_VALIDATOR.iter_errors(definition)):
        if record["code"] in ("ONE_OF_MISSING", "ANY_OF_MISSING"):
            kind = _definition_kind(record["path"])
            if kind is not None:
                record["message"] = f"Not a valid {kind} definition"
        code = record.pop("code")
        message = record.pop("message")
        path = record.pop("path")
        results.add_error(code, message, path, **record)

    logger.debug("Structural validation produced %d error(s)", len(results.errors))
    return results
