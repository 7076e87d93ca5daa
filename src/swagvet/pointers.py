"""JSON Pointer (RFC 6901) helpers.

Validation records carry paths as lists of string segments; messages and
reference metadata use the URI-fragment form (``#/paths/~1pet/get``). These
helpers convert between the two and navigate documents by segment.
"""

from __future__ import annotations

from typing import Any, Iterable

_MISSING = object()


def escape_segment(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_segment(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


def path_to_ptr(path: Iterable[Any]) -> str:
    """Convert path segments into a ``#/``-prefixed JSON Pointer.

    Example::

        path_to_ptr(["paths", "/pet/{petId}", "get"])
        # '#/paths/~1pet~1{petId}/get'
    """
    segments = [escape_segment(str(segment)) for segment in path]
    if not segments:
        return "#"
    return "#/" + "/".join(segments)


def ptr_to_path(ptr: str) -> list[str]:
    """Convert a JSON Pointer (with or without the leading ``#``) into segments.

    Raises:
        ValueError: If the pointer is neither empty nor ``/``-prefixed.
    """
    if ptr.startswith("#"):
        ptr = ptr[1:]
    if ptr == "":
        return []
    if not ptr.startswith("/"):
        raise ValueError("ptr must start with a / or #/")
    return [unescape_segment(segment) for segment in ptr[1:].split("/")]


def is_ancestor_or_self(ancestor: list[str] | tuple[str, ...], path: list[str] | tuple[str, ...]) -> bool:
    """Return True if *ancestor* is a prefix of *path* (or equal to it)."""
    return len(ancestor) <= len(path) and tuple(path[: len(ancestor)]) == tuple(ancestor)


def get_in(document: Any, path: Iterable[str], default: Any = None) -> Any:
    """Return the value at *path* inside *document*, or *default* when absent.

    List segments are interpreted as indices.
    """
    current = document
    for segment in path:
        if isinstance(current, dict):
            current = current.get(segment, _MISSING)
        elif isinstance(current, list):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return default
        else:
            return default
        if current is _MISSING:
            return default
    return current
