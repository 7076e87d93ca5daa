"""Operation entities and request validation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from swagvet.api.checks import (
    FORM_CONTENT_TYPES,
    check_content_type,
    check_target,
    get_header,
    media_type,
    normalize_options,
    run_custom_validators,
)
from swagvet.api.parameter import Parameter
from swagvet.api.response import Response
from swagvet.models import ValidationResults
from swagvet.pointers import get_in, path_to_ptr

if TYPE_CHECKING:
    from swagvet.api.path import Path
    from swagvet.api.swagger_api import SwaggerApi

logger = logging.getLogger(__name__)


class Operation:
    """One HTTP method of a :class:`~swagvet.api.path.Path`.

    Parameters declared on the operation override path-level parameters
    with the same ``name`` and ``in``.  ``security``, ``consumes`` and
    ``produces`` fall back to the document-level values when the operation
    does not declare them.

    Attributes:
        path_object: The owning :class:`~swagvet.api.path.Path`.
        method: Lower-case HTTP method.
        definition: The resolved Operation Object.
        raw_definition: The Operation Object as written.
        parameter_objects: Effective :class:`~swagvet.api.parameter.Parameter` objects.
        response_objects: :class:`~swagvet.api.response.Response` objects.
    """

    def __init__(
        self,
        path_object: Path,
        method: str,
        definition: dict[str, Any],
        raw_definition: Any,
        path_to_definition: list[str],
    ) -> None:
        self.path_object = path_object
        self.method = method
        self.definition = definition
        self.raw_definition = raw_definition
        self.path_to_definition = path_to_definition
        self.ptr = path_to_ptr(path_to_definition)

        document = path_object.api.definition
        self.security: list[dict[str, list[str]]] = definition.get("security", document.get("security") or [])
        declared = document.get("securityDefinitions") or {}
        self.security_definitions: dict[str, Any] = {
            name: declared[name]
            for requirement in self.security
            for name in requirement
            if name in declared
        }
        self.consumes: list[str] = definition.get("consumes", document.get("consumes") or [])
        self.produces: list[str] = definition.get("produces", document.get("produces") or [])

        self.parameter_objects: list[Parameter] = [
            Parameter(
                self,
                parameter,
                get_in(self.api.original_definition, path_to_definition + ["parameters", str(index)]),
                path_to_definition + ["parameters", str(index)],
            )
            for index, parameter in enumerate(definition.get("parameters") or [])
        ]
        overridden = {(parameter.name, parameter.location) for parameter in self.parameter_objects}
        for parameter in path_object.parameter_objects:
            if (parameter.name, parameter.location) not in overridden:
                self.parameter_objects.append(parameter)

        self.response_objects: list[Response] = [
            Response(
                self,
                str(status_code),
                response,
                get_in(self.api.original_definition, path_to_definition + ["responses", str(status_code)]),
                path_to_definition + ["responses", str(status_code)],
            )
            for status_code, response in (definition.get("responses") or {}).items()
        ]

    def __repr__(self) -> str:
        return f"Operation({self.method.upper()} {self.path_object.path})"

    @property
    def api(self) -> SwaggerApi:
        return self.path_object.api

    @property
    def operation_id(self) -> Optional[str]:
        return self.definition.get("operationId")

    @property
    def tags(self) -> list[str]:
        return list(self.definition.get("tags") or [])

    def get_parameter(self, name: Optional[str] = None, location: Optional[str] = None) -> Optional[Parameter]:
        """Return the parameter named *name*, optionally restricted to *location*."""
        if name is None:
            return None
        for parameter in self.parameter_objects:
            if parameter.name == name and (location is None or parameter.location == location):
                return parameter
        return None

    def get_parameters(self) -> list[Parameter]:
        return list(self.parameter_objects)

    def get_response(self, status_code: Union[int, str, None] = None) -> Optional[Response]:
        """Return the response for *status_code*, falling back to ``default``."""
        wanted = "default" if status_code is None else str(status_code)
        fallback = None
        for response in self.response_objects:
            if response.status_code == wanted:
                return response
            if response.status_code == "default":
                fallback = response
        return fallback

    def get_responses(self) -> list[Response]:
        return list(self.response_objects)

    def get_security(self) -> list[dict[str, list[str]]]:
        return self.security

    def validate_request(self, req: Any, options: Optional[Mapping[str, Any]] = None) -> ValidationResults:
        """Validate an HTTP request against this operation.

        Args:
            req: Request mapping (``body``, ``files``, ``headers``, ``query``,
                ``url``).
            options: Optional mapping with ``strict_mode`` (reject query
                parameters, headers and form fields the operation does not
                declare) and ``custom_validators`` (called as
                ``fn(req, operation)``).

        Raises:
            TypeError: If *req* or *options* are malformed.
        """
        check_target(req, "req")
        strict, custom_validators = normalize_options(options)
        results = ValidationResults()

        if req.get("body") is not None:
            check_content_type(req.get("headers"), self.consumes, results)

        for parameter in self.parameter_objects:
            value = parameter.get_value(req)
            if value.valid:
                continue
            error = value.error
            errors = error.errors or [{"code": error.code, "message": error.message, "path": error.path}]
            results.add_error(
                "INVALID_REQUEST_PARAMETER",
                f"Invalid parameter ({parameter.name}): {error.message}",
                error.path,
                errors=errors,
                name=parameter.name,
                **{"in": parameter.location},
            )

        self._check_strict_mode(req, strict, results)
        run_custom_validators(custom_validators, req, self, results)

        logger.debug("Validated request for %r: %d error(s)", self, len(results.errors))
        return results

    def _declared(self, location: str) -> set[str]:
        return {
            parameter.name
            for parameter in self.parameter_objects
            if parameter.location == location and parameter.name is not None
        }

    def _check_strict_mode(self, req: Mapping[str, Any], strict: dict[str, bool], results: ValidationResults) -> None:
        if strict["formData"]:
            content_type = media_type(get_header(req.get("headers"), "content-type") or "")
            if content_type in FORM_CONTENT_TYPES:
                declared = self._declared("formData")
                for source in ("body", "files"):
                    fields = req.get(source)
                    if not isinstance(fields, Mapping):
                        continue
                    for field in fields:
                        if field not in declared:
                            results.add_error(
                                "REQUEST_ADDITIONAL_FORM_DATA",
                                f"Additional form data field not allowed: {field}",
                                [],
                            )

        if strict["header"]:
            declared = {name.lower() for name in self._declared("header")}
            for header in req.get("headers") or {}:
                if str(header).lower() not in declared:
                    results.add_error(
                        "REQUEST_ADDITIONAL_HEADER",
                        f"Additional header not allowed: {header}",
                        [],
                    )

        if strict["query"]:
            declared = self._declared("query")
            for name in req.get("query") or {}:
                if name not in declared:
                    results.add_error(
                        "REQUEST_ADDITIONAL_QUERY",
                        f"Additional query parameter not allowed: {name}",
                        [],
                    )

    def validate_response(self, res: Any, options: Optional[Mapping[str, Any]] = None) -> ValidationResults:
        """Validate an HTTP response against this operation.

        The response definition is chosen by ``res["status_code"]`` (falling
        back to ``default``); see
        :meth:`~swagvet.api.response.Response.validate_response`.
        """
        check_target(res, "res")
        normalize_options(options)

        status_code = res.get("status_code")
        response = self.get_response(status_code)
        if response is None:
            results = ValidationResults()
            results.add_error(
                "INVALID_RESPONSE_CODE",
                f"This operation does not have a defined '{status_code}' or 'default' response code",
                [],
            )
            return results
        return response.validate_response(res, options)
