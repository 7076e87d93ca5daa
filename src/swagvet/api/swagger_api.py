"""The API model built from one Swagger 2.0 document.

:func:`create` is the entry point: it loads the document (when given a
location), resolves its references and builds a :class:`SwaggerApi` whose
:class:`~swagvet.api.path.Path`, :class:`~swagvet.api.operation.Operation`,
:class:`~swagvet.api.parameter.Parameter` and
:class:`~swagvet.api.response.Response` entities are created eagerly, in
document order.

Typical usage::

    import swagvet

    api = swagvet.create({"definition": "petstore.yaml"})
    results = api.validate()
    for issue in results.errors:
        print(issue.code, issue.message)

    operation = api.get_operation("/pet/{petId}", "get")
    operation.validate_request({"url": "/v2/pet/1", "headers": {}})
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from swagvet.api.operation import Operation
from swagvet.api.path import Path
from swagvet.models import ApiOptions, ReferenceRecord, RefOptions, ValidationResults
from swagvet.parser import load_document, resolve_refs
from swagvet.validation import SEMANTIC_VALIDATORS, validate_structure
from swagvet.validation.formats import FormatRegistry

logger = logging.getLogger(__name__)


class SwaggerApi:
    """Object model and validator of a resolved Swagger 2.0 document.

    Attributes:
        original_definition: The document as loaded, ``$ref`` values intact.
        definition: The resolved document.
        references: Resolution records keyed by the JSON Pointer of each
            ``$ref`` in :attr:`original_definition`.
        options: The :class:`~swagvet.models.ApiOptions` used to build it.
        formats: The :class:`~swagvet.validation.formats.FormatRegistry` used
            for every value validation against this document.
        custom_validators: Document validators run by :meth:`validate` after
            the built-in ones, called as ``fn(api)``.
        path_objects: :class:`~swagvet.api.path.Path` objects in document
            order.
    """

    def __init__(
        self,
        original_definition: dict[str, Any],
        definition: dict[str, Any],
        references: dict[str, ReferenceRecord],
        options: ApiOptions,
    ) -> None:
        self.original_definition = original_definition
        self.definition = definition
        self.references = references
        self.options = options
        self.formats = FormatRegistry(options.custom_formats)
        self.custom_validators: list[Callable[..., Any]] = list(options.custom_validators)

        self.swagger = definition.get("swagger")
        self.info = definition.get("info") or {}
        self.host = definition.get("host")
        self.base_path = definition.get("basePath")
        self.schemes = definition.get("schemes") or []
        self.consumes = definition.get("consumes") or []
        self.produces = definition.get("produces") or []
        self.security = definition.get("security") or []
        self.security_definitions = definition.get("securityDefinitions") or {}
        self.tags = definition.get("tags") or []

        paths = definition.get("paths")
        self.path_objects: list[Path] = [
            Path(self, path, path_definition, (original_definition.get("paths") or {}).get(path), ["paths", path])
            for path, path_definition in (paths.items() if isinstance(paths, dict) else [])
            if isinstance(path_definition, dict)
        ]

    def __repr__(self) -> str:
        title = self.info.get("title") if isinstance(self.info, dict) else None
        return f"SwaggerApi(title={title!r}, paths={len(self.path_objects)})"

    # --- Navigation ---

    def get_paths(self) -> list[Path]:
        return list(self.path_objects)

    def get_path(self, path_or_request: Union[str, Mapping[str, Any]]) -> Optional[Path]:
        """Return a :class:`~swagvet.api.path.Path`.

        A string is looked up as a path template (``/pet/{petId}``).  A
        request mapping is matched by its ``url``: when several paths match,
        the one with the fewest path parameters wins, then document order.
        """
        if isinstance(path_or_request, str):
            for path_object in self.path_objects:
                if path_object.path == path_or_request:
                    return path_object
            return None

        url = path_or_request.get("original_url") or path_or_request.get("url")
        if not isinstance(url, str):
            return None
        matches = [path_object for path_object in self.path_objects if path_object.match(url) is not None]
        if not matches:
            return None
        return min(matches, key=lambda path_object: len(path_object.keys))

    def get_operations(self, path: Union[str, Mapping[str, Any], None] = None) -> list[Operation]:
        """Return every operation, or only those of *path* when given."""
        if path is not None:
            path_object = self.get_path(path)
            return path_object.get_operations() if path_object is not None else []
        return [operation for path_object in self.path_objects for operation in path_object.operation_objects]

    def get_operation(
        self, path_or_request: Union[str, Mapping[str, Any]], method: Optional[str] = None
    ) -> Optional[Operation]:
        """Return one operation.

        Args:
            path_or_request: A path template, a request mapping, or (when
                *method* is omitted) an ``operationId``.
            method: HTTP method.  For request mappings it defaults to the
                request's ``method``.

        Example::

            api.get_operation("/pet/{petId}", "get")
            api.get_operation("getPetById")
            api.get_operation({"url": "/v2/pet/1", "method": "GET"})
        """
        if isinstance(path_or_request, str) and method is None:
            for operation in self.get_operations():
                if operation.operation_id == path_or_request:
                    return operation
            return None

        if isinstance(path_or_request, Mapping) and method is None:
            method = path_or_request.get("method")
        if not isinstance(method, str):
            return None

        path_object = self.get_path(path_or_request)
        if path_object is None:
            return None
        wanted = method.lower()
        for operation in path_object.operation_objects:
            if operation.method == wanted:
                return operation
        return None

    def get_operations_by_tag(self, tag: str) -> list[Operation]:
        return [operation for operation in self.get_operations() if tag in operation.tags]

    # --- Registration ---

    def register_validator(self, validator: Any) -> None:
        """Add a document validator run by :meth:`validate` as ``fn(api)``.

        The validator returns ``None``, a
        :class:`~swagvet.models.ValidationResults`, or a mapping with
        ``errors`` and ``warnings`` lists.

        Raises:
            TypeError: If *validator* is missing or not callable.
        """
        if validator is None:
            raise TypeError("validator is required")
        if not callable(validator):
            raise TypeError("validator must be a function")
        self.custom_validators.append(validator)

    def register_format(self, name: Any, validator: Any) -> None:
        """Register a JSON Schema ``format`` predicate for this API only."""
        self.formats.register(name, validator)

    def unregister_format(self, name: Any) -> None:
        self.formats.unregister(name)

    # --- Validation ---

    def validate(self) -> ValidationResults:
        """Validate the document.

        Structural validation against the Swagger 2.0 schema runs first.
        Only a structurally valid document goes through the reference,
        schema object and path validators and then the custom validators.
        """
        results = validate_structure(self.definition)
        if results.errors:
            logger.info("Document failed structural validation with %d error(s)", len(results.errors))
            return results

        for validator in SEMANTIC_VALIDATORS:
            logger.debug("Running %s", validator.__name__)
            results.extend(validator(self))
        for validator in self.custom_validators:
            results.extend(ValidationResults.from_validator_output(validator(self)))

        logger.info(
            "Validation finished: %d error(s), %d warning(s)", len(results.errors), len(results.warnings)
        )
        return results


def _normalize_options(options: Any) -> ApiOptions:
    if options is None:
        raise TypeError("options is required")
    if isinstance(options, ApiOptions):
        return options
    if not isinstance(options, Mapping):
        raise TypeError("options must be an object")

    definition = options.get("definition")
    if definition is None:
        raise TypeError("options.definition is required")
    if not isinstance(definition, (str, dict)):
        raise TypeError("options.definition must be either an object or a string")

    custom_validators = options.get("custom_validators")
    if custom_validators is not None:
        if not isinstance(custom_validators, (list, tuple)):
            raise TypeError("options.custom_validators must be an array")
        for index, validator in enumerate(custom_validators):
            if not callable(validator):
                raise TypeError(f"options.custom_validators at index {index} must be a function")

    custom_formats = options.get("custom_formats")
    if custom_formats is not None and not isinstance(custom_formats, Mapping):
        raise TypeError("options.custom_formats must be an object")

    json_refs = options.get("json_refs")
    if json_refs is not None and not isinstance(json_refs, (Mapping, RefOptions)):
        raise TypeError("options.json_refs must be an object")

    try:
        return ApiOptions(
            definition=definition,
            json_refs=json_refs if json_refs is not None else RefOptions(),
            custom_validators=list(custom_validators or []),
            custom_formats=dict(custom_formats or {}),
        )
    except ValidationError as exc:
        raise TypeError(f"options are invalid: {exc}") from exc


def create(options: Union[ApiOptions, Mapping[str, Any]]) -> SwaggerApi:
    """Build a :class:`SwaggerApi`.

    Args:
        options: An :class:`~swagvet.models.ApiOptions` or a mapping with
            ``definition`` (a Swagger mapping, or a file path/URL/``-``),
            and optional ``json_refs``, ``custom_validators`` and
            ``custom_formats``.  When ``definition`` is a location it is
            also used as ``json_refs.location`` unless one is given.

    Raises:
        TypeError: If *options* are malformed.
        SpecParseError: If the document cannot be loaded.
        ReferenceResolutionError: If reference resolution fails as a whole.
    """
    api_options = _normalize_options(options)
    ref_options = api_options.json_refs

    if isinstance(api_options.definition, str):
        document = load_document(api_options.definition, timeout=ref_options.timeout)
        if ref_options.location is None and api_options.definition != "-":
            ref_options = ref_options.model_copy(update={"location": api_options.definition})
    else:
        document = copy.deepcopy(api_options.definition)

    resolved = resolve_refs(document, ref_options)
    logger.debug("Resolved %d reference(s)", len(resolved.references))
    return SwaggerApi(document, resolved.definition, resolved.references, api_options)
