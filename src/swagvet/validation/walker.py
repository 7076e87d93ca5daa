"""Post-order traversal of JSON-Schema-shaped values.

:func:`walk_schema` visits a schema and every nested schema it contains
(``items``, ``additionalProperties``, ``allOf`` entries and ``properties``),
calling each handler on a node after all of its children were visited.

Sub-trees whose path is in the *blacklist* are skipped entirely.  The
blacklist holds the locations of every ``$ref`` in the original document:
the resolved copy of a shared schema is validated once at its canonical
location instead of once per reference site.
"""

from __future__ import annotations

from typing import Any, Callable, Collection, Optional, Sequence

from swagvet.models import ValidationResults
from swagvet.pointers import path_to_ptr

# handler(api, response, schema, path)
SchemaHandler = Callable[[Any, ValidationResults, dict[str, Any], list[str]], None]


def walk_schema(
    blacklist: Collection[str],
    schema: Any,
    path: list[str],
    handlers: Sequence[SchemaHandler],
    response: ValidationResults,
    api: Optional[Any] = None,
) -> None:
    """Walk *schema* and invoke *handlers* on every visited node.

    Args:
        blacklist: JSON Pointers (``#/...``) of sub-trees to skip.
        schema: The schema to walk.  Non-mapping values are ignored.
        path: Path segments of *schema* in the document.
        handlers: Callables invoked as ``handler(api, response, schema, path)``.
        response: Results object handlers append their findings to.
        api: Passed through to the handlers.
    """
    if not isinstance(schema, dict):
        return
    if path_to_ptr(path) in blacklist:
        return

    schema_type = schema.get("type", "object")

    if isinstance(schema.get("schema"), dict):
        walk_schema(blacklist, schema["schema"], path + ["schema"], handlers, response, api)
    elif schema_type == "array" and "items" in schema:
        items = schema["items"]
        if isinstance(items, list):
            for index, item in enumerate(items):
                walk_schema(blacklist, item, path + ["items", str(index)], handlers, response, api)
        else:
            walk_schema(blacklist, items, path + ["items"], handlers, response, api)
    elif schema_type == "object":
        if isinstance(schema.get("additionalProperties"), dict):
            walk_schema(
                blacklist,
                schema["additionalProperties"],
                path + ["additionalProperties"],
                handlers,
                response,
                api,
            )
        for index, member in enumerate(schema.get("allOf") or []):
            walk_schema(blacklist, member, path + ["allOf", str(index)], handlers, response, api)
        for name, member in (schema.get("properties") or {}).items():
            walk_schema(blacklist, member, path + ["properties", name], handlers, response, api)

    for handler in handlers:
        handler(api, response, schema, path)
