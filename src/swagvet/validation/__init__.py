"""Document, schema and value validation.

Sub-modules:

* :mod:`~swagvet.validation.json_schema` -- ``jsonschema`` integration and
  structural validation against the Swagger 2.0 schema.
* :mod:`~swagvet.validation.formats` -- per-API format registry.
* :mod:`~swagvet.validation.walker` -- post-order Schema Object traversal.
* :mod:`~swagvet.validation.schema_objects` -- ``items``, ``default`` and
  ``required`` checks on every Schema Object.
* :mod:`~swagvet.validation.references` -- reference graph checks.
* :mod:`~swagvet.validation.paths` -- path and operation consistency.
* :mod:`~swagvet.validation.coercion` -- raw value conversion for parameters.

The semantic validators all share the signature
``validator(api) -> ValidationResults`` and only run once the document is
structurally valid.
"""

from swagvet.validation.json_schema import validate_against_schema, validate_structure
from swagvet.validation.paths import validate_paths
from swagvet.validation.references import validate_references
from swagvet.validation.schema_objects import validate_schema_objects

SEMANTIC_VALIDATORS = (validate_references, validate_schema_objects, validate_paths)

__all__ = [
    "SEMANTIC_VALIDATORS",
    "validate_against_schema",
    "validate_paths",
    "validate_references",
    "validate_schema_objects",
    "validate_structure",
]
