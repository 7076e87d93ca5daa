"""Resolve ``$ref`` JSON Reference pointers in Swagger documents.

Swagger documents commonly use ``$ref`` pointers (e.g.,
``{"$ref": "#/definitions/Pet"}``) to avoid repetition.  This module
performs a recursive deep-copy traversal of the document, replacing every
``$ref`` with the object it points to, and records the outcome of every
reference in a :class:`~swagvet.models.ReferenceRecord` keyed by the JSON
Pointer of the referencing location.

Three kinds of references are handled:

* **local** -- ``#/...`` pointers into the same document.
* **remote** -- relative file paths and HTTP(S) URLs, loaded with
  :func:`~swagvet.parser.loader.load_document` and resolved relative to
  :attr:`~swagvet.models.RefOptions.location`.
* **invalid** -- malformed pointers (``#definitions/Pet``) and URIs that
  cannot be fetched by construction (``http://:8080``).

Broken references never raise.  They are left unresolved in the output and
flagged ``missing`` (with the underlying ``error``) on their record, so the
reference-graph validator can report them.

Circular references are detected by tracking the chain of locations being
expanded: a reference whose target is an ancestor of (or equal to) any
location on that chain is flagged ``circular`` and left as a ``$ref`` dict
at the cycle point.

The single public function is :func:`resolve_refs`.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import unquote, urljoin, urlsplit

from swagvet.exceptions import ReferenceResolutionError, SwagvetError
from swagvet.models import ReferenceRecord, RefOptions, ResolvedDocument
from swagvet.parser.loader import is_url, load_document
from swagvet.pointers import get_in, is_ancestor_or_self, path_to_ptr, ptr_to_path

logger = logging.getLogger(__name__)

# Document id of the root document
_ROOT = ""

_MISSING = object()

# (document id, path segments) of a location being expanded
_Location = tuple[str, tuple[str, ...]]


def resolve_refs(
    document: dict[str, Any], options: Optional[RefOptions] = None
) -> ResolvedDocument:
    """Resolve all ``$ref`` JSON Reference pointers in the document.

    Creates a deep copy of the input and recursively replaces every
    ``{"$ref": ...}`` dict with the object it points to.

    Args:
        document: The raw Swagger document, as returned by
            :func:`~swagvet.parser.loader.load_document`.
        options: Resolution options (base location, remote fetching).

    Returns:
        A :class:`~swagvet.models.ResolvedDocument` holding the resolved
        copy and one record per ``$ref`` found in the original document.

    Raises:
        ReferenceResolutionError: If the document is too deeply nested to
            be resolved.

    Example::

        raw = load_document("petstore.yaml")
        resolved = resolve_refs(raw, RefOptions(location="petstore.yaml"))
        resolved.references["#/paths/~1pet/post/parameters/0/schema"].target
        # '#/definitions/Pet'
    """
    resolver = _Resolver(document, options or RefOptions())
    try:
        definition = resolver.resolve()
    except RecursionError as exc:
        raise ReferenceResolutionError(
            "Document is nested too deeply to resolve its references"
        ) from exc
    return ResolvedDocument(definition=definition, references=resolver.records)


class _Resolver:
    """Stateful walker behind :func:`resolve_refs`.

    Holds the cache of loaded remote documents and the reference records
    collected for the root document.
    """

    def __init__(self, document: dict[str, Any], options: RefOptions) -> None:
        self.options = options
        self.root = copy.deepcopy(document)
        self.documents: dict[str, Any] = {_ROOT: self.root}
        self.load_errors: dict[str, str] = {}
        self.records: dict[str, ReferenceRecord] = {}

    def resolve(self) -> Any:
        return self._deep_resolve(self.root, _ROOT, (), ())

    # ------------------------------------------------------------------ #
    # Traversal
    # ------------------------------------------------------------------ #

    def _deep_resolve(
        self,
        obj: Any,
        doc_id: str,
        path: tuple[str, ...],
        chain: tuple[_Location, ...],
    ) -> Any:
        """Recursively resolve all ``$ref`` pointers within *obj*.

        Args:
            obj: The current node.
            doc_id: Id of the document *obj* canonically lives in.
            path: Canonical path of *obj* inside that document.
            chain: Locations of the references currently being expanded.

        Returns:
            The resolved object.  Dicts and lists are new objects; scalars are
            returned as-is.
        """
        if isinstance(obj, dict):
            if isinstance(obj.get("$ref"), str):
                return self._resolve_reference(obj, doc_id, path, chain)
            return {
                key: self._deep_resolve(value, doc_id, path + (str(key),), chain)
                for key, value in obj.items()
            }

        if isinstance(obj, list):
            return [
                self._deep_resolve(item, doc_id, path + (str(index),), chain)
                for index, item in enumerate(obj)
            ]

        return obj

    def _resolve_reference(
        self,
        obj: dict[str, Any],
        doc_id: str,
        path: tuple[str, ...],
        chain: tuple[_Location, ...],
    ) -> Any:
        ref = obj["$ref"]
        record, target = self._locate(ref, doc_id)

        extra = [key for key in obj if key != "$ref"]
        if extra:
            record.warning = (
                "Extra JSON Reference properties will be ignored: " + ", ".join(extra)
            )

        if target is None:
            self._record(doc_id, path, record)
            return dict(obj)

        target_doc, target_path = target
        value = self._lookup(record, target_doc, target_path)
        if value is _MISSING:
            self._record(doc_id, path, record)
            return dict(obj)

        expanding = chain + ((doc_id, path),)
        if any(
            loc_doc == target_doc and is_ancestor_or_self(target_path, loc_path)
            for loc_doc, loc_path in expanding
        ):
            record.circular = True
            self._record(doc_id, path, record)
            return dict(obj)

        self._record(doc_id, path, record)
        return self._deep_resolve(value, target_doc, target_path, expanding)

    def _record(self, doc_id: str, path: tuple[str, ...], record: ReferenceRecord) -> None:
        """Store *record* when the reference lives in the root document.

        The same location can be visited several times (once directly and
        once per expansion that reaches it); the circular flag is sticky.
        """
        if doc_id != _ROOT:
            return
        ptr = path_to_ptr(path)
        existing = self.records.get(ptr)
        if existing is None:
            self.records[ptr] = record
        elif record.circular:
            existing.circular = True

    # ------------------------------------------------------------------ #
    # Reference classification and lookup
    # ------------------------------------------------------------------ #

    def _locate(
        self, ref: str, doc_id: str
    ) -> tuple[ReferenceRecord, Optional[tuple[str, tuple[str, ...]]]]:
        """Classify *ref* and compute its target location.

        Returns:
            The (not yet stored) record and ``(target_doc_id, target_path)``,
            or ``None`` as the target when the reference is invalid.
        """
        if ref.startswith("#"):
            try:
                target_path = tuple(ptr_to_path(unquote(ref)))
            except ValueError as exc:
                return ReferenceRecord(ref=ref, target=ref, type="invalid", error=str(exc)), None
            target_doc = doc_id
            ref_type = "local" if doc_id == _ROOT else "remote"
        else:
            try:
                parts = urlsplit(ref)
                if parts.scheme in ("http", "https") and not parts.hostname:
                    raise ValueError("HTTP URIs must have a host.")
                if parts.scheme and parts.scheme not in ("http", "https", "file") and len(parts.scheme) > 1:
                    raise ValueError(f"Unsupported reference scheme: {parts.scheme}")
                target_path = tuple(ptr_to_path(unquote(parts.fragment)))
            except ValueError as exc:
                return ReferenceRecord(ref=ref, target=ref, type="invalid", error=str(exc)), None
            document_ref = ref.split("#", 1)[0]
            target_doc = self._absolute_location(document_ref, doc_id)
            ref_type = "remote"

        target = path_to_ptr(target_path)
        if target_doc != _ROOT:
            target = target_doc + target
        return ReferenceRecord(ref=ref, target=target, type=ref_type), (target_doc, target_path)

    def _absolute_location(self, document_ref: str, doc_id: str) -> str:
        base = doc_id if doc_id != _ROOT else self.options.location
        if is_url(document_ref):
            return document_ref
        if document_ref.startswith("file://"):
            return str(Path(urlsplit(document_ref).path).resolve())
        if base and is_url(base):
            return urljoin(base, document_ref)
        base_dir = Path(base).parent if base else Path.cwd()
        return str((base_dir / document_ref).resolve())

    def _lookup(self, record: ReferenceRecord, doc_id: str, path: tuple[str, ...]) -> Any:
        """Return the value at *path* in document *doc_id*, flagging *record* on failure."""
        document = self._document(record, doc_id)
        if document is _MISSING:
            return _MISSING

        value = get_in(document, path, _MISSING)
        if value is _MISSING:
            record.missing = True
            record.error = "JSON Pointer points to missing location: " + path_to_ptr(path)
        return value

    def _document(self, record: ReferenceRecord, doc_id: str) -> Any:
        if doc_id in self.documents:
            return self.documents[doc_id]

        if doc_id in self.load_errors:
            error = self.load_errors[doc_id]
        elif not self.options.resolve_remote:
            error = f"Remote reference resolution is disabled: {doc_id}"
        else:
            logger.debug("Fetching remote reference document %s", doc_id)
            try:
                self.documents[doc_id] = load_document(doc_id, timeout=self.options.timeout)
                return self.documents[doc_id]
            except SwagvetError as exc:
                logger.warning("Unable to load referenced document %s: %s", doc_id, exc)
                error = str(exc)
                self.load_errors[doc_id] = error

        record.missing = True
        record.error = error
        return _MISSING
