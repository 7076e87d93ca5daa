"""Semantic checks on every Schema Object of a document.

Three walker handlers are applied to definitions, parameters and responses:

* :func:`validate_array_items` -- ``type: array`` without ``items``.
* :func:`validate_default_value` -- a ``default`` that does not satisfy its
  own schema.
* :func:`validate_required_properties` -- ``required`` names with no
  matching property, taking ``allOf`` ancestry into account.
"""

from __future__ import annotations

import logging
from typing import Any

from swagvet.models import HTTPMethod, ValidationResults
from swagvet.pointers import path_to_ptr
from swagvet.validation.coercion import compute_parameter_schema
from swagvet.validation.json_schema import validate_against_schema
from swagvet.validation.walker import SchemaHandler, walk_schema

logger = logging.getLogger(__name__)

SUPPORTED_METHODS: tuple[str, ...] = tuple(method.value for method in HTTPMethod)


def validate_array_items(api: Any, response: ValidationResults, schema: dict[str, Any], path: list[str]) -> None:
    if schema.get("type") == "array" and "items" not in schema:
        response.add_error(
            "OBJECT_MISSING_REQUIRED_PROPERTY",
            "Missing required property: items",
            path,
        )


def validate_default_value(api: Any, response: ValidationResults, schema: dict[str, Any], path: list[str]) -> None:
    """Validate ``default`` against the schema that declares it.

    Errors are reported at ``path + <error path> + ['default']``.
    """
    if "default" not in schema or schema.get("type") == "file":
        return

    formats = api.formats if api is not None else None
    root = api.definition if api is not None else None
    for error in validate_against_schema(schema, schema["default"], formats, root):
        extra = {key: value for key, value in error.items() if key not in ("code", "message", "path")}
        response.add_error(
            error["code"],
            error["message"],
            path + error["path"] + ["default"],
            **extra,
        )


def _effective_properties(schema: dict[str, Any]) -> set[str]:
    properties = set(schema.get("properties") or {})
    for member in schema.get("allOf") or []:
        if isinstance(member, dict):
            properties |= _effective_properties(member)
    return properties


def validate_required_properties(
    api: Any, response: ValidationResults, schema: dict[str, Any], path: list[str]
) -> None:
    required = schema.get("required")
    # Parameters use a boolean ``required``
    if not isinstance(required, list):
        return

    properties = _effective_properties(schema)
    for name in required:
        if name not in properties:
            response.add_error(
                "OBJECT_MISSING_REQUIRED_PROPERTY_DEFINITION",
                f"Missing required property definition: {name}",
                path,
            )


SCHEMA_HANDLERS: tuple[SchemaHandler, ...] = (
    validate_array_items,
    validate_default_value,
    validate_required_properties,
)


def _parameter_schema(definition: dict[str, Any]) -> dict[str, Any]:
    # Body parameters are walked as ``schema`` wrappers so paths end in /schema
    if definition.get("in") == "body":
        return definition
    return compute_parameter_schema(definition)


def validate_schema_objects(api: Any) -> ValidationResults:
    """Run the schema handlers over every Schema Object of *api*'s document.

    Args:
        api: A :class:`~swagvet.api.swagger_api.SwaggerApi`.  Its resolved
            ``definition``, ``references`` (the blacklist) and ``formats``
            are used.
    """
    response = ValidationResults()
    definition = api.definition
    blacklist = set(api.references)

    def walk(schema: Any, path: list[str]) -> None:
        walk_schema(blacklist, schema, path, SCHEMA_HANDLERS, response, api)

    def walk_response(response_def: dict[str, Any], r_path: list[str]) -> None:
        if path_to_ptr(r_path) in blacklist:
            return
        for header_name, header in (response_def.get("headers") or {}).items():
            walk(header, r_path + ["headers", header_name])
        if "schema" in response_def:
            walk(response_def["schema"], r_path + ["schema"])

    for name, schema in (definition.get("definitions") or {}).items():
        walk(schema, ["definitions", name])

    for name, parameter in (definition.get("parameters") or {}).items():
        walk(_parameter_schema(parameter), ["parameters", name])

    for name, response_def in (definition.get("responses") or {}).items():
        walk_response(response_def, ["responses", name])

    for path, path_def in (definition.get("paths") or {}).items():
        p_path = ["paths", path]

        for index, parameter in enumerate(path_def.get("parameters") or []):
            walk(_parameter_schema(parameter), p_path + ["parameters", str(index)])

        for method, operation in path_def.items():
            if method not in SUPPORTED_METHODS:
                continue
            o_path = p_path + [method]

            for index, parameter in enumerate(operation.get("parameters") or []):
                walk(_parameter_schema(parameter), o_path + ["parameters", str(index)])

            for code, response_def in (operation.get("responses") or {}).items():
                walk_response(response_def, o_path + ["responses", str(code)])

    logger.debug(
        "Schema object validation produced %d error(s) and %d warning(s)",
        len(response.errors),
        len(response.warnings),
    )
    return response
