"""Read Swagger documents (and documents reached through remote ``$ref``).

A *source* is one of:

* ``-`` -- the document is read from stdin;
* an ``http://`` or ``https://`` URL -- fetched with :mod:`httpx`;
* anything else -- a local file path.

Content is decoded as JSON or YAML.  The file extension or the response
``Content-Type`` picks the decoder when it is unambiguous; otherwise JSON is
tried first and YAML second (every JSON document is also YAML, but the JSON
decoder reports clearer errors).  Every failure is raised as
:class:`~swagvet.exceptions.SpecParseError`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import httpx
import yaml

from swagvet.exceptions import SpecParseError

logger = logging.getLogger(__name__)

_JSON = "json"
_YAML = "yaml"

_SUFFIX_FORMATS = {".json": _JSON, ".yaml": _YAML, ".yml": _YAML}


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_document(source: str, timeout: float = 30.0) -> dict[str, Any]:
    """Read and decode the document at *source*.

    Args:
        source: ``-``, an HTTP(S) URL or a file path.
        timeout: Seconds to wait for an HTTP response.

    Returns:
        The decoded top-level mapping.

    Raises:
        SpecParseError: If nothing can be read or the content is not a
            JSON/YAML object.
    """
    logger.debug("Loading document from %s", source)
    if source == "-":
        content, fmt = _read_stdin(), None
    elif is_url(source):
        content, fmt = _fetch(source, timeout)
    else:
        content, fmt = _read_file(source)
    return _parse_content(content, hint=fmt or "")


def _read_stdin() -> str:
    try:
        content = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc
    if not content.strip():
        raise SpecParseError("No input received from stdin")
    return content


def _fetch(url: str, timeout: float) -> tuple[str, Optional[str]]:
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(f"HTTP {exc.response.status_code} fetching document from {url}") from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch document from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "").lower()
    if "json" in content_type:
        return response.text, _JSON
    if "yaml" in content_type or "yml" in content_type:
        return response.text, _YAML
    return response.text, None


def _read_file(path: str) -> tuple[str, Optional[str]]:
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Document file not found: {path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Failed to read document file {path}: {exc}") from exc
    if not content.strip():
        raise SpecParseError(f"Document file is empty: {path}")
    return content, _SUFFIX_FORMATS.get(file_path.suffix.lower())


def _require_object(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    found = "empty document" if value is None else type(value).__name__
    raise SpecParseError(f"Document must be a JSON/YAML object (got {found})")


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Decode *content*; *hint* is ``"json"``, ``"yaml"`` or empty.

    Raises:
        SpecParseError: If the content cannot be decoded, or decodes to
            something other than a mapping.
    """
    errors: list[str] = []

    if hint != _YAML:
        try:
            return _require_object(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == _JSON:
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
            errors.append(f"JSON error: {exc}")

    try:
        return _require_object(yaml.safe_load(content))
    except yaml.YAMLError as exc:
        errors.append(f"YAML error: {exc}")

    raise SpecParseError("\n  ".join(["Failed to parse document as JSON or YAML", *errors]))


def validate_swagger_version(document: dict[str, Any]) -> str:
    """Return ``"2.0"`` for a Swagger 2.0 document.

    Raises:
        SpecParseError: For OpenAPI 3.x documents, a missing ``swagger``
            field, or any other Swagger version.
    """
    if "openapi" in document:
        raise SpecParseError(
            f"OpenAPI {document['openapi']} is not supported. Only Swagger 2.0 documents are supported."
        )
    if "swagger" not in document or document["swagger"] is None:
        raise SpecParseError("Missing 'swagger' field. Is this a Swagger 2.0 document?")

    version = str(document["swagger"])
    if version != "2.0":
        raise SpecParseError(f"Unsupported Swagger version: {version}. Only Swagger 2.0 is supported.")
    return version
