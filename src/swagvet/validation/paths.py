"""Path and operation consistency checks.

A single pass over ``paths`` that tracks the normalized path templates and
``operationId`` values seen so far.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from swagvet.models import ValidationResults
from swagvet.pointers import path_to_ptr
from swagvet.validation.schema_objects import SUPPORTED_METHODS

logger = logging.getLogger(__name__)

PATH_TOKEN = re.compile(r"\{([^{}/]*)\}")


def normalize_path(path: str) -> str:
    """Replace every ``{name}`` token with a positional ``argN`` placeholder.

    Example::

        normalize_path("/pet/{petId}/photos/{photoId}")
        # '/pet/{arg0}/photos/{arg1}'
    """
    counter = iter(range(len(path)))
    return PATH_TOKEN.sub(lambda match: "{arg%d}" % next(counter), path)


def declared_path_parameters(path: str) -> list[str]:
    """Return the parameter names declared in a path template, in order."""
    names: list[str] = []
    for name in PATH_TOKEN.findall(path):
        if name and name not in names:
            names.append(name)
    return names


def _parameter_key(parameter: dict[str, Any]) -> str:
    return f"{parameter.get('in')}:{parameter.get('name')}"


def _check_duplicate_parameters(
    parameters: list[Any], path: list[str], results: ValidationResults
) -> None:
    seen: set[str] = set()
    for index, parameter in enumerate(parameters):
        if not isinstance(parameter, dict) or "name" not in parameter:
            continue
        key = _parameter_key(parameter)
        p_path = path + [str(index)]
        if key in seen:
            results.add_error(
                "DUPLICATE_PARAMETER",
                f"Operation cannot have duplicate parameters: {path_to_ptr(p_path)}",
                p_path,
            )
        else:
            seen.add(key)


def _merged_parameters(
    path_parameters: list[Any], path_prefix: list[str],
    operation_parameters: list[Any], operation_prefix: list[str],
) -> dict[str, tuple[dict[str, Any], list[str]]]:
    merged: dict[str, tuple[dict[str, Any], list[str]]] = {}
    for parameters, prefix in ((path_parameters, path_prefix), (operation_parameters, operation_prefix)):
        for index, parameter in enumerate(parameters):
            if isinstance(parameter, dict) and "name" in parameter:
                merged[_parameter_key(parameter)] = (parameter, prefix + [str(index)])
    return merged


def _check_operation(
    path: str,
    path_def: dict[str, Any],
    method: str,
    operation: dict[str, Any],
    results: ValidationResults,
) -> None:
    p_path = ["paths", path]
    o_path = p_path + [method]

    operation_parameters = operation.get("parameters") or []
    _check_duplicate_parameters(operation_parameters, o_path + ["parameters"], results)

    merged = _merged_parameters(
        path_def.get("parameters") or [], p_path + ["parameters"],
        operation_parameters, o_path + ["parameters"],
    )
    locations = [parameter.get("in") for parameter, _ in merged.values()]
    body_count = locations.count("body")
    if body_count > 1:
        results.add_error(
            "MULTIPLE_BODY_PARAMETERS",
            "Operation cannot have multiple body parameters",
            o_path,
        )
    if body_count > 0 and "formData" in locations:
        results.add_error(
            "INVALID_PARAMETER_COMBINATION",
            "Operation cannot have a body parameter and a formData parameter",
            o_path,
        )

    declared = declared_path_parameters(path)
    defined = {
        parameter["name"]: definition_path
        for parameter, definition_path in merged.values()
        if parameter.get("in") == "path"
    }
    for name in declared:
        if name not in defined:
            results.add_error(
                "MISSING_PATH_PARAMETER_DEFINITION",
                f"Path parameter is declared but is not defined: {name}",
                o_path,
            )
    for name, definition_path in defined.items():
        if name not in declared:
            results.add_error(
                "MISSING_PATH_PARAMETER_DECLARATION",
                f"Path parameter is defined but is not declared: {name}",
                definition_path,
            )


def validate_paths(api: Any) -> ValidationResults:
    """Check path templates, parameters and operationIds of *api*'s document."""
    results = ValidationResults()
    seen_paths: set[str] = set()
    seen_operation_ids: set[str] = set()

    for path, path_def in (api.definition.get("paths") or {}).items():
        p_path = ["paths", path]

        if "{}" in path:
            results.add_error(
                "EMPTY_PATH_PARAMETER_DECLARATION",
                f"Path parameter declaration cannot be empty: {path}",
                p_path,
            )

        normalized = normalize_path(path)
        if normalized in seen_paths:
            results.add_error(
                "EQUIVALENT_PATH",
                f"Equivalent path already exists: {path}",
                p_path,
            )
        else:
            seen_paths.add(normalized)

        _check_duplicate_parameters(path_def.get("parameters") or [], p_path + ["parameters"], results)

        for method, operation in path_def.items():
            if method not in SUPPORTED_METHODS or not isinstance(operation, dict):
                continue

            operation_id = operation.get("operationId")
            if operation_id is not None:
                if operation_id in seen_operation_ids:
                    results.add_error(
                        "DUPLICATE_OPERATIONID",
                        f"Cannot have multiple operations with the same operationId: {operation_id}",
                        p_path + [method, "operationId"],
                    )
                else:
                    seen_operation_ids.add(operation_id)

            _check_operation(path, path_def, method, operation, results)

    logger.debug("Path validation produced %d error(s)", len(results.errors))
    return results
