"""Parameter entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from swagvet.api.checks import get_header
from swagvet.api.parameter_value import ParameterValue
from swagvet.pointers import path_to_ptr
from swagvet.validation.coercion import compute_parameter_schema

if TYPE_CHECKING:
    from swagvet.api.operation import Operation
    from swagvet.api.path import Path
    from swagvet.api.swagger_api import SwaggerApi


class Parameter:
    """One parameter declared on a path or an operation.

    Args:
        parent: The :class:`~swagvet.api.path.Path` or
            :class:`~swagvet.api.operation.Operation` declaring it.
        definition: The resolved parameter definition.
        raw_definition: The definition as written (possibly a ``$ref``).
        path_to_definition: Path segments of the definition in the document.
    """

    def __init__(
        self,
        parent: Union[Path, Operation],
        definition: dict[str, Any],
        raw_definition: Any,
        path_to_definition: list[str],
    ) -> None:
        self.parent = parent
        self.definition = definition
        self.raw_definition = raw_definition
        self.path_to_definition = path_to_definition
        self.ptr = path_to_ptr(path_to_definition)
        self.schema = compute_parameter_schema(definition)

    def __repr__(self) -> str:
        return f"Parameter(name={self.name!r}, location={self.location!r})"

    @property
    def api(self) -> SwaggerApi:
        return self.parent.api

    @property
    def path_object(self) -> Path:
        parent = self.parent
        return getattr(parent, "path_object", parent)

    @property
    def name(self) -> Optional[str]:
        return self.definition.get("name")

    @property
    def location(self) -> Optional[str]:
        return self.definition.get("in")

    @property
    def type(self) -> Optional[str]:
        if "type" in self.definition:
            return self.definition["type"]
        return self.schema.get("type")

    @property
    def required(self) -> bool:
        return self.definition.get("required") is True

    @property
    def collection_format(self) -> Optional[str]:
        return self.definition.get("collectionFormat")

    @property
    def allow_empty_value(self) -> bool:
        return self.definition.get("allowEmptyValue") is True

    def get_value(self, req: Any) -> ParameterValue:
        """Extract this parameter's raw value from *req* and wrap it.

        Args:
            req: A request mapping with ``body``, ``files``, ``headers``,
                ``query`` and ``url`` (or ``original_url``) keys as needed.

        Raises:
            TypeError: If *req* is not a mapping, or lacks the key this
                parameter's location reads from.
        """
        if req is None:
            raise TypeError("req is required")
        if not isinstance(req, Mapping):
            raise TypeError("req must be an object")

        location = self.location
        if location == "body":
            raw = req.get("body")
        elif location == "formData":
            if self.type == "file":
                if req.get("files") is None:
                    raise TypeError("req.files must be provided for 'formData' parameters of type 'file'")
                raw = req["files"].get(self.name)
            else:
                if req.get("body") is None:
                    raise TypeError("req.body must be provided for 'formData' parameters")
                body = req["body"]
                raw = body.get(self.name) if isinstance(body, Mapping) else None
        elif location == "header":
            if req.get("headers") is None:
                raise TypeError("req.headers must be provided for 'header' parameters")
            raw = get_header(req["headers"], self.name or "")
        elif location == "path":
            url = req.get("original_url") or req.get("url")
            if url is None:
                raise TypeError("req.original_url or req.url must be provided for 'path' parameters")
            raw = (self.path_object.match(url) or {}).get(self.name)
        elif location == "query":
            if req.get("query") is None:
                raise TypeError("req.query must be provided for 'query' parameters")
            raw = req["query"].get(self.name)
        else:
            raise TypeError(f"Unsupported parameter location: {location}")

        return ParameterValue(self, raw)
