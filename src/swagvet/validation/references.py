"""Reference-graph checks.

Builds a reverse index *target pointer -> referencing pointers* from the
resolver's :class:`~swagvet.models.ReferenceRecord` map and from security
requirements, then reports:

* ``UNRESOLVABLE_REFERENCE`` -- missing ``$ref`` targets and unknown
  security schemes/scopes.
* ``INVALID_REFERENCE`` -- malformed ``$ref`` values.
* ``EXTRA_REFERENCE_PROPERTIES`` (warning) -- siblings of ``$ref``.
* ``CIRCULAR_INHERITANCE`` -- ``allOf`` chains that lead back to their
  owner.  Recursive data shapes reached through ``properties`` or ``items``
  are valid.
* ``UNUSED_DEFINITION`` (warning) -- definitions, parameters, responses,
  security definitions and scopes nothing refers to.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from swagvet.models import ReferenceRecord, ValidationResults
from swagvet.pointers import path_to_ptr, ptr_to_path
from swagvet.validation.schema_objects import SUPPORTED_METHODS

logger = logging.getLogger(__name__)

REFERENCEABLE_SECTIONS: tuple[str, ...] = (
    "definitions",
    "parameters",
    "responses",
    "securityDefinitions",
)


def referenceable_pointers(definition: dict[str, Any]) -> list[str]:
    """Return the pointers of everything a document can refer to, in document order."""
    pointers: list[str] = []
    for section in REFERENCEABLE_SECTIONS:
        for name, value in (definition.get(section) or {}).items():
            pointers.append(path_to_ptr([section, name]))
            if section == "securityDefinitions" and isinstance(value, dict):
                for scope in value.get("scopes") or {}:
                    pointers.append(path_to_ptr([section, name, "scopes", scope]))
    return pointers


def _last_all_of(path: list[str]) -> Optional[int]:
    for index in range(len(path) - 1, -1, -1):
        if path[index] == "allOf":
            return index
    return None


class _ReferenceIndex:
    """Reverse reference map plus the ``allOf`` inheritance graph."""

    def __init__(self) -> None:
        self.references: dict[str, list[str]] = {}
        self.parents: dict[str, list[str]] = {}
        self.circular_owners: list[str] = []

    def add_reference(self, target: str, source: str) -> None:
        """Record that *source* refers to *target*.

        A target inside an ``allOf`` also credits the schema owning that
        ``allOf``.
        """
        self.references.setdefault(target, []).append(source)
        target_path = ptr_to_path(target)
        index = _last_all_of(target_path)
        if index is not None:
            self.add_reference(path_to_ptr(target_path[:index]), source)

    def add_parent(self, owner: str, parent: str, circular: bool) -> None:
        self.parents.setdefault(owner, []).append(parent)
        if circular and owner not in self.circular_owners:
            self.circular_owners.append(owner)

    def lineage(self, owner: str) -> Optional[list[str]]:
        """Return the inheritance chain from *owner* back to itself, if any."""
        stack: list[tuple[str, list[str]]] = [(owner, [owner])]
        visited: set[str] = set()
        while stack:
            node, chain = stack.pop()
            for parent in reversed(self.parents.get(node, [])):
                if parent == owner:
                    return chain + [owner]
                if parent not in visited:
                    visited.add(parent)
                    stack.append((parent, chain + [parent]))
        return None


def _check_record(
    source: str, record: ReferenceRecord, index: _ReferenceIndex, results: ValidationResults
) -> None:
    path = ptr_to_path(source)

    if record.missing:
        extra = {"error": record.error} if record.error else {}
        results.add_error(
            "UNRESOLVABLE_REFERENCE",
            f"Reference could not be resolved: {record.ref}",
            path + ["$ref"],
            **extra,
        )
    elif record.type == "invalid":
        results.add_error(
            "INVALID_REFERENCE",
            record.error or f"Invalid JSON Reference: {record.ref}",
            path + ["$ref"],
        )

    if record.warning:
        results.add_warning("EXTRA_REFERENCE_PROPERTIES", record.warning, path)

    if record.type != "local" or record.missing:
        return

    index.add_reference(record.target, source)
    all_of = _last_all_of(path)
    if all_of is not None:
        index.add_parent(path_to_ptr(path[:all_of]), record.target, record.circular)


def _check_security(
    definition: dict[str, Any],
    requirements: Any,
    path: list[str],
    index: _ReferenceIndex,
    results: ValidationResults,
) -> None:
    security_definitions = definition.get("securityDefinitions") or {}
    for req_index, requirement in enumerate(requirements or []):
        for name, scopes in (requirement or {}).items():
            s_path = path + [str(req_index), name]
            if name not in security_definitions:
                results.add_error(
                    "UNRESOLVABLE_REFERENCE",
                    f"Security definition could not be resolved: {name}",
                    s_path,
                )
                continue

            index.add_reference(path_to_ptr(["securityDefinitions", name]), path_to_ptr(s_path))
            declared = security_definitions[name].get("scopes") or {}
            for scope_index, scope in enumerate(scopes or []):
                scope_path = s_path + [str(scope_index)]
                if scope not in declared:
                    results.add_error(
                        "UNRESOLVABLE_REFERENCE",
                        f"Security scope definition could not be resolved: {scope}",
                        scope_path,
                    )
                else:
                    index.add_reference(
                        path_to_ptr(["securityDefinitions", name, "scopes", scope]),
                        path_to_ptr(scope_path),
                    )


def validate_references(api: Any) -> ValidationResults:
    """Check reference integrity, inheritance cycles and unused definitions.

    Args:
        api: A :class:`~swagvet.api.swagger_api.SwaggerApi`.  Its resolved
            ``definition`` and ``references`` map are used.
    """
    results = ValidationResults()
    definition = api.definition
    index = _ReferenceIndex()

    for source, record in api.references.items():
        _check_record(source, record, index, results)

    for owner in index.circular_owners:
        lineage = index.lineage(owner)
        if lineage is None:
            continue
        results.add_error(
            "CIRCULAR_INHERITANCE",
            f"Schema object inherits from itself: {owner}",
            ptr_to_path(owner),
            lineage=lineage,
        )

    _check_security(definition, definition.get("security"), ["security"], index, results)
    for path, path_def in (definition.get("paths") or {}).items():
        p_path = ["paths", path]
        _check_security(definition, path_def.get("security"), p_path + ["security"], index, results)
        for method, operation in path_def.items():
            if method in SUPPORTED_METHODS and isinstance(operation, dict):
                _check_security(
                    definition, operation.get("security"), p_path + [method, "security"], index, results
                )

    for pointer in referenceable_pointers(definition):
        if pointer not in index.references:
            results.add_warning(
                "UNUSED_DEFINITION",
                f"Definition is not used: {pointer}",
                ptr_to_path(pointer),
            )

    logger.debug(
        "Reference validation produced %d error(s) and %d warning(s)",
        len(results.errors),
        len(results.warnings),
    )
    return results
