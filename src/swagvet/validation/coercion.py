"""Convert raw request values into the types declared by Swagger schemas.

Query strings, headers, path segments and form fields arrive as strings (or
lists of strings).  :func:`convert_value` turns them into the Python value
the parameter's schema describes so that it can be validated with JSON
Schema:

======== ===============================================================
type     conversion
======== ===============================================================
array    split by ``collectionFormat`` then convert every element
boolean  ``"true"`` / ``"false"``
integer  ``"42"`` -> ``42`` (``"4.2"`` fails)
number   ``"4.2"`` -> ``4.2``
object   JSON-decoded strings, mappings as-is
string   ``date`` / ``date-time`` formats parsed into :mod:`datetime` values
======== ===============================================================

Failures raise :class:`~swagvet.exceptions.ConversionError`.
"""

from __future__ import annotations

import datetime
import json
import math
from typing import Any, Optional

from swagvet.exceptions import ConversionError
from swagvet.validation.json_schema import js_type_name

# Parameter fields copied into the schema of a non-body parameter
SCHEMA_LIKE_KEYS: tuple[str, ...] = (
    "default",
    "description",
    "enum",
    "exclusiveMaximum",
    "exclusiveMinimum",
    "format",
    "items",
    "maxItems",
    "maxLength",
    "maximum",
    "minItems",
    "minLength",
    "minimum",
    "multipleOf",
    "pattern",
    "type",
    "uniqueItems",
)

COLLECTION_SEPARATORS: dict[str, str] = {
    "csv": ",",
    "pipes": "|",
    "ssv": " ",
    "tsv": "\t",
}


def compute_parameter_schema(definition: dict[str, Any]) -> dict[str, Any]:
    """Return the JSON Schema describing values of a parameter.

    Body parameters carry an explicit ``schema``; every other parameter is
    described by its schema-like fields (see :data:`SCHEMA_LIKE_KEYS`).
    """
    if definition.get("in") == "body" or "schema" in definition:
        return definition.get("schema") or {}
    return {key: definition[key] for key in SCHEMA_LIKE_KEYS if key in definition}


def _type_error(expected: str, value: Any) -> ConversionError:
    return ConversionError(f"Expected type {expected} but found type {js_type_name(value)}")


def _convert_array(schema: dict[str, Any], collection_format: Optional[str], value: Any) -> list[Any]:
    if isinstance(value, str):
        collection_format = collection_format or "csv"
        if collection_format == "multi":
            items = [value]
        elif collection_format in COLLECTION_SEPARATORS:
            items = value.split(COLLECTION_SEPARATORS[collection_format])
        else:
            raise ConversionError(f"Invalid 'collectionFormat' value: {collection_format}")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        items = [value]

    item_schemas = schema.get("items")
    converted = []
    for index, item in enumerate(items):
        if isinstance(item_schemas, list):
            if index >= len(item_schemas):
                converted.append(item)
                continue
            item_schema = item_schemas[index]
        else:
            item_schema = item_schemas or {}
        converted.append(convert_value(item_schema, item_schema.get("collectionFormat"), item))
    return converted


def _convert_boolean(schema: dict[str, Any], collection_format: Optional[str], value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    raise _type_error("boolean", value)


def _convert_number(schema: dict[str, Any], collection_format: Optional[str], value: Any) -> Any:
    expected = schema.get("type", "number")
    if isinstance(value, bool):
        raise _type_error(expected, value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        raise _type_error(expected, value)

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise _type_error(expected, value) from None
    if not math.isfinite(number):
        raise _type_error(expected, value)
    if expected == "integer":
        if not number.is_integer():
            raise _type_error(expected, value)
        return int(number)
    return number


def _convert_object(schema: dict[str, Any], collection_format: Optional[str], value: Any) -> Any:
    if isinstance(value, dict):
        return value
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as exc:
            raise ConversionError(f"Unable to parse JSON value: {exc}") from exc
    raise _type_error("object", value)


def _parse_datetime(value: str) -> datetime.datetime:
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    return datetime.datetime.fromisoformat(value)


def _convert_string(schema: dict[str, Any], collection_format: Optional[str], value: Any) -> Any:
    value_format = schema.get("format")
    if value_format == "date":
        if isinstance(value, datetime.date):
            return value
        if not isinstance(value, str):
            raise _type_error("string", value)
        try:
            return datetime.date.fromisoformat(value)
        except ValueError as exc:
            raise ConversionError(f"Invalid date: {value}", code="INVALID_FORMAT") from exc
    if value_format == "date-time":
        if isinstance(value, datetime.datetime):
            return value
        if not isinstance(value, str):
            raise _type_error("string", value)
        try:
            return _parse_datetime(value)
        except ValueError as exc:
            raise ConversionError(f"Invalid date-time: {value}", code="INVALID_FORMAT") from exc
    if not isinstance(value, str):
        raise _type_error("string", value)
    return value


_CONVERTERS = {
    "array": _convert_array,
    "boolean": _convert_boolean,
    "integer": _convert_number,
    "number": _convert_number,
    "object": _convert_object,
    "string": _convert_string,
}


def convert_value(
    schema: Optional[dict[str, Any]], collection_format: Optional[str], value: Any
) -> Any:
    """Convert *value* to the type declared by *schema*.

    Args:
        schema: The (computed) parameter schema.  A missing ``type`` means
            ``object``.
        collection_format: How array values are encoded in strings
            (``csv``, ``ssv``, ``tsv``, ``pipes`` or ``multi``).  An empty string
            splits into one empty item.
        value: The raw value.  ``None`` is returned unchanged.

    Returns:
        The converted value.

    Raises:
        ConversionError: If the value cannot be converted, or the schema
            declares an unsupported type.

    Example::

        convert_value({"type": "array", "items": {"type": "integer"}}, "pipes", "1|2")
        # [1, 2]
    """
    if value is None:
        return None

    schema = schema or {}
    schema_type = schema.get("type", "object")
    converter = _CONVERTERS.get(schema_type) if isinstance(schema_type, str) else None
    if converter is None:
        raise ConversionError(f"Invalid 'type' value: {schema_type}")
    return converter(schema, collection_format, value)


def default_value(schema: Optional[dict[str, Any]]) -> Any:
    """Return the value to use when a parameter was not provided.

    Arrays take their default from ``items`` (one entry per tuple member, or
    a one-element list for a single ``items`` schema); otherwise, or when
    ``items`` has no default, ``schema.default`` is used.
    """
    schema = schema or {}
    value = None

    if schema.get("type") == "array":
        items = schema.get("items")
        if isinstance(items, list):
            if any("default" in item for item in items):
                value = [item.get("default") for item in items]
        elif isinstance(items, dict) and "default" in items:
            value = [items["default"]]

    if value is None:
        value = schema.get("default")
    return value


def to_json_compatible(value: Any) -> Any:
    """Return *value* with :mod:`datetime` values rendered in ISO 8601 form."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, list):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_compatible(item) for key, item in value.items()}
    return value
