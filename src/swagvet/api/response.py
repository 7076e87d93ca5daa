"""Response entities and response validation."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from swagvet.api.checks import (
    check_content_type,
    check_target,
    get_header,
    media_type,
    normalize_options,
    run_custom_validators,
)
from swagvet.exceptions import ConversionError
from swagvet.models import ValidationResults
from swagvet.pointers import path_to_ptr
from swagvet.validation.coercion import convert_value, to_json_compatible
from swagvet.validation.json_schema import expected_type_name, validate_against_schema

if TYPE_CHECKING:
    from swagvet.api.operation import Operation
    from swagvet.api.swagger_api import SwaggerApi

logger = logging.getLogger(__name__)


def _is_json(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    parsed = media_type(content_type)
    return parsed == "application/json" or parsed.endswith("+json")


class Response:
    """One entry of an operation's ``responses``.

    Attributes:
        operation: The owning :class:`~swagvet.api.operation.Operation`.
        status_code: The response key (``"200"``, ``"default"`` ...).
        definition: The resolved Response Object.
        raw_definition: The Response Object as written.
    """

    def __init__(
        self,
        operation: Operation,
        status_code: str,
        definition: dict[str, Any],
        raw_definition: Any,
        path_to_definition: list[str],
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        self.definition = definition
        self.raw_definition = raw_definition
        self.path_to_definition = path_to_definition
        self.ptr = path_to_ptr(path_to_definition)

    def __repr__(self) -> str:
        return f"Response({self.status_code!r})"

    @property
    def api(self) -> SwaggerApi:
        return self.operation.api

    @property
    def headers(self) -> dict[str, Any]:
        return self.definition.get("headers") or {}

    @property
    def schema(self) -> Optional[dict[str, Any]]:
        return self.definition.get("schema")

    @property
    def examples(self) -> dict[str, Any]:
        return self.definition.get("examples") or {}

    def get_example(self, mime_type: Optional[str] = None) -> Any:
        """Return the example for *mime_type*, or the only example when omitted."""
        examples = self.examples
        if mime_type is None:
            return next(iter(examples.values()), None) if len(examples) == 1 else None
        return examples.get(mime_type)

    def validate_response(self, res: Any, options: Optional[Mapping[str, Any]] = None) -> ValidationResults:
        """Validate an HTTP response against this response definition.

        Args:
            res: Response mapping with optional ``body``, ``encoding``,
                ``headers`` and ``status_code`` keys.
            options: Same keys as
                :meth:`~swagvet.api.operation.Operation.validate_request`;
                ``strict_mode`` only applies to headers here and custom
                validators are called as ``fn(res, response)``.

        Raises:
            TypeError: If *res* or *options* are malformed.
        """
        check_target(res, "res")
        strict, custom_validators = normalize_options(options)
        results = ValidationResults()
        headers = res.get("headers") or {}
        body = res.get("body")

        if body is not None:
            check_content_type(headers, self.operation.produces, results)

        self._check_headers(headers, results)
        self._check_body(body, get_header(headers, "content-type"), results)

        if strict["header"]:
            declared = {name.lower() for name in self.headers}
            for header in headers:
                if str(header).lower() not in declared:
                    results.add_error(
                        "RESPONSE_ADDITIONAL_HEADER",
                        f"Additional header not allowed: {header}",
                        [],
                    )

        run_custom_validators(custom_validators, res, self, results)

        logger.debug("Validated %r response: %d error(s)", self, len(results.errors))
        return results

    def _check_headers(self, headers: Mapping[str, Any], results: ValidationResults) -> None:
        api = self.api
        for name, schema in self.headers.items():
            try:
                value = convert_value(schema, schema.get("collectionFormat"), get_header(headers, name))
            except ConversionError as exc:
                results.add_error(
                    "INVALID_RESPONSE_HEADER",
                    f"Invalid header ({name}): {exc.message}",
                    [],
                    errors=[{"code": exc.code, "message": exc.message, "path": []}],
                    name=name,
                )
                continue
            if value is None:
                continue
            errors = validate_against_schema(schema, to_json_compatible(value), api.formats, api.definition)
            if errors:
                results.add_error(
                    "INVALID_RESPONSE_HEADER",
                    f"Invalid header ({name}): Value failed JSON Schema validation",
                    [],
                    errors=errors,
                    name=name,
                )

    def _check_body(self, body: Any, content_type: Optional[str], results: ValidationResults) -> None:
        schema = self.schema
        if schema is None:
            return

        if body is None:
            expected = expected_type_name(schema.get("type", "object"))
            message = f"Expected type {expected} but found type undefined"
            results.add_error(
                "INVALID_RESPONSE_BODY",
                f"Invalid body: {message}",
                [],
                errors=[
                    {
                        "code": "INVALID_TYPE",
                        "message": message,
                        "params": [expected, "undefined"],
                        "path": [],
                    }
                ],
            )
            return

        if isinstance(body, (bytes, bytearray)):
            body = body.decode()
        if isinstance(body, str) and schema.get("type") != "string" and _is_json(content_type):
            try:
                body = json.loads(body)
            except json.JSONDecodeError as exc:
                logger.debug("Response body is not JSON, validating the raw string: %s", exc)

        api = self.api
        errors = validate_against_schema(schema, to_json_compatible(body), api.formats, api.definition)
        if errors:
            results.add_error(
                "INVALID_RESPONSE_BODY",
                "Invalid body: Value failed JSON Schema validation",
                [],
                errors=errors,
            )
