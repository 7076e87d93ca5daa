"""Swagger document parser -- load documents and resolve ``$ref`` pointers.

This sub-package turns a raw Swagger 2.0 document (JSON or YAML, local file,
remote URL or stdin) into a :class:`~swagvet.models.ResolvedDocument` that
:class:`~swagvet.api.swagger_api.SwaggerApi` builds its entities from.

Typical usage::

    from swagvet.parser import load_document, resolve_refs

    raw = load_document("petstore.json")
    resolved = resolve_refs(raw, RefOptions(location="petstore.json"))

Sub-modules:

* :mod:`~swagvet.parser.loader` -- I/O layer (URL, file, stdin) plus format
  detection and Swagger version validation.
* :mod:`~swagvet.parser.resolver` -- Recursive ``$ref`` resolution with
  circular-reference detection and per-reference records.
"""

from swagvet.parser.loader import load_document, validate_swagger_version
from swagvet.parser.resolver import resolve_refs

__all__ = ["load_document", "validate_swagger_version", "resolve_refs"]
