"""Path entities and request-path matching."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import unquote

from swagvet.api.operation import Operation
from swagvet.api.parameter import Parameter
from swagvet.pointers import get_in, path_to_ptr
from swagvet.validation.paths import PATH_TOKEN
from swagvet.validation.schema_objects import SUPPORTED_METHODS

if TYPE_CHECKING:
    from swagvet.api.swagger_api import SwaggerApi

# Matches nothing; used for templates that cannot be compiled
NEVER_MATCH = re.compile(r"(?!)")


def compile_path_pattern(base_path: Optional[str], template: str) -> tuple[re.Pattern[str], list[str]]:
    """Compile a Swagger path template into a regular expression.

    ``{name}`` segments become capture groups, everything else is matched
    literally.  The base path is prepended (without its trailing slash) and
    a trailing slash on the request path is optional.

    Returns:
        ``(pattern, keys)`` where ``keys`` lists the parameter names in
        group order.  Templates with an empty ``{}`` yield a pattern that
        never matches and no keys.

    Example::

        pattern, keys = compile_path_pattern("/v2", "/pet/{petId}")
        pattern.match("/v2/pet/1").groups()
        # ('1',)
        keys
        # ['petId']
    """
    prefix = (base_path or "/").rstrip("/")
    keys: list[str] = []
    pieces: list[str] = [re.escape(prefix)]
    position = 0
    for match in PATH_TOKEN.finditer(template):
        if not match.group(1):
            return NEVER_MATCH, []
        pieces.append(re.escape(template[position:match.start()]))
        pieces.append(r"([^/]+?)")
        keys.append(match.group(1))
        position = match.end()
    pieces.append(re.escape(template[position:]))
    return re.compile("^" + "".join(pieces) + r"/?$"), keys


class Path:
    """One entry of the document's ``paths``.

    Attributes:
        api: The owning :class:`~swagvet.api.swagger_api.SwaggerApi`.
        path: The path template, e.g. ``/pet/{petId}``.
        definition: The resolved Path Item Object.
        raw_definition: The Path Item Object as written.
        regexp: Compiled pattern matching request paths (base path included).
        keys: Path parameter names, in the order of ``regexp``'s groups.
        parameter_objects: Path-level :class:`~swagvet.api.parameter.Parameter` objects.
        operation_objects: :class:`~swagvet.api.operation.Operation` objects
            in document order.
    """

    def __init__(
        self,
        api: SwaggerApi,
        path: str,
        definition: dict[str, Any],
        raw_definition: Any,
        path_to_definition: list[str],
    ) -> None:
        self.api = api
        self.path = path
        self.definition = definition
        self.raw_definition = raw_definition
        self.path_to_definition = path_to_definition
        self.ptr = path_to_ptr(path_to_definition)
        self.regexp, self.keys = compile_path_pattern(api.base_path, path)

        self.parameter_objects = [
            Parameter(
                self,
                parameter,
                get_in(api.original_definition, path_to_definition + ["parameters", str(index)]),
                path_to_definition + ["parameters", str(index)],
            )
            for index, parameter in enumerate(definition.get("parameters") or [])
        ]

        self.operation_objects = [
            Operation(
                self,
                method,
                operation,
                get_in(api.original_definition, path_to_definition + [method]),
                path_to_definition + [method],
            )
            for method, operation in definition.items()
            if method in SUPPORTED_METHODS and isinstance(operation, dict)
        ]

    def __repr__(self) -> str:
        return f"Path({self.path!r})"

    def match(self, url: str) -> Optional[dict[str, str]]:
        """Match a request URL against this path.

        The query string is ignored and captured values are URL-decoded.

        Returns:
            The path parameter values keyed by name, or ``None`` when the URL
            does not match.
        """
        found = self.regexp.match(url.split("?", 1)[0])
        if found is None:
            return None
        return {key: unquote(value) for key, value in zip(self.keys, found.groups())}

    def get_operation(self, id_or_method: str) -> Optional[Operation]:
        """Return the operation with the given ``operationId`` or HTTP method."""
        for operation in self.operation_objects:
            if operation.operation_id == id_or_method or operation.method == id_or_method.lower():
                return operation
        return None

    def get_operations(self) -> list[Operation]:
        return list(self.operation_objects)

    def get_operations_by_tag(self, tag: str) -> list[Operation]:
        return [operation for operation in self.operation_objects if tag in operation.tags]

    def get_parameters(self) -> list[Parameter]:
        return list(self.parameter_objects)
