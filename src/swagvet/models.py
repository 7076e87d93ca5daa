"""Canonical Pydantic models shared across all swagvet modules.

The models fall into three groups:

**Validation output** -- :class:`ValidationIssue` and
:class:`ValidationResults`, the wire-visible shape of every error and
warning produced by document, request and response validation.

**Reference metadata** -- :class:`ReferenceRecord` and
:class:`ResolvedDocument`, produced once by
:func:`~swagvet.parser.resolver.resolve_refs` and consumed by the
reference-graph and schema-object validators.

**Options and configuration** -- :class:`RefOptions`, :class:`ApiOptions`
(arguments to :func:`swagvet.create`) and :class:`ValidatorConfig` (the CLI's
merged configuration, see :mod:`swagvet.config`).

All models use Pydantic v2. :class:`ValidationIssue` uses ``extra="allow"``
so that code-specific fields (``lineage``, ``errors``, ``error`` ...) travel
with the record without a dedicated field per code.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Swagger vocabulary ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods allowed as keys of a Swagger 2.0 *Path Item Object*."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"


class ParameterLocation(str, enum.Enum):
    """Locations where a Swagger 2.0 parameter can appear (its ``in`` field)."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    FORM_DATA = "formData"
    BODY = "body"


# --- Validation output ---


class ValidationIssue(BaseModel):
    """A single validation error or warning.

    ``path`` holds the JSON Pointer segments of the offending location in the
    document (or in the validated value). Code-specific details are stored as
    extra fields, e.g. ``lineage`` for ``CIRCULAR_INHERITANCE``, ``error`` for
    ``UNRESOLVABLE_REFERENCE`` and ``errors`` for
    ``INVALID_REQUEST_PARAMETER``.

    Example::

        ValidationIssue(
            code="UNUSED_DEFINITION",
            message="Definition is not used: #/definitions/Missing",
            path=["definitions", "Missing"],
        )
    """

    model_config = ConfigDict(extra="allow")

    code: str
    message: str
    path: list[str] = Field(default_factory=list)


class ValidationResults(BaseModel):
    """Accumulated errors and warnings of one validation run."""

    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)

    def add_error(self, code: str, message: str, path: list[str], **extra: Any) -> None:
        self.errors.append(ValidationIssue(code=code, message=message, path=list(path), **extra))

    def add_warning(self, code: str, message: str, path: list[str], **extra: Any) -> None:
        self.warnings.append(ValidationIssue(code=code, message=message, path=list(path), **extra))

    def extend(self, other: "ValidationResults") -> None:
        """Append all errors and warnings of *other* to this instance."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    @property
    def is_valid(self) -> bool:
        """``True`` when there are no errors (warnings are allowed)."""
        return not self.errors

    @classmethod
    def from_validator_output(cls, output: Any) -> "ValidationResults":
        """Normalise what a custom validator returned.

        Custom validators return a mapping with optional ``errors`` and
        ``warnings`` lists whose items are :class:`ValidationIssue` instances
        or plain dicts. ``None`` means "nothing to report".
        """
        if output is None:
            return cls()
        if isinstance(output, ValidationResults):
            return output
        if not isinstance(output, dict):
            raise TypeError("custom validators must return a mapping or ValidationResults")
        return cls(
            errors=[ValidationIssue.model_validate(e) for e in output.get("errors") or []],
            warnings=[ValidationIssue.model_validate(w) for w in output.get("warnings") or []],
        )


# --- Reference metadata ---


class ReferenceRecord(BaseModel):
    """Resolution outcome of one ``$ref`` in the original document.

    Records are keyed by the JSON Pointer of the mapping that held the
    ``$ref`` (see :attr:`ResolvedDocument.references`).
    """

    ref: str = Field(description="The $ref value as written in the document")
    target: str = Field(
        description="Normalised target: '#/...' for local references, "
        "'<location>#/...' for remote ones"
    )
    type: Literal["local", "remote", "invalid"] = "local"
    missing: bool = False
    circular: bool = False
    error: Optional[str] = None
    warning: Optional[str] = None


class ResolvedDocument(BaseModel):
    """A Swagger document with every resolvable ``$ref`` replaced.

    Circular references are left in place as ``{"$ref": ...}`` mappings so
    the structure stays finite.
    """

    definition: dict[str, Any]
    references: dict[str, ReferenceRecord] = Field(default_factory=dict)


# --- Options and configuration ---


class RefOptions(BaseModel):
    """Options forwarded to :func:`~swagvet.parser.resolver.resolve_refs`."""

    location: Optional[str] = Field(
        default=None,
        description="File path or URL of the root document, used as the base "
        "for relative references",
    )
    resolve_remote: bool = Field(
        default=True, description="Fetch file and HTTP(S) references"
    )
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")


class ApiOptions(BaseModel):
    """Normalised arguments of :func:`swagvet.create`.

    ``definition`` is either an in-memory Swagger mapping or a location
    (file path, URL or ``-`` for stdin) loaded by
    :func:`~swagvet.parser.loader.load_document`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    definition: Union[dict[str, Any], str]
    json_refs: RefOptions = Field(default_factory=RefOptions)
    custom_validators: list[Callable[..., Any]] = Field(default_factory=list)
    custom_formats: dict[str, Callable[[Any], bool]] = Field(default_factory=dict)


class ValidatorConfig(BaseModel):
    """Effective configuration of the ``swagvet`` CLI.

    Persisted as JSON in the global config file or a project-local
    ``swagvet.json``; see :func:`~swagvet.config.resolve_config` for the
    precedence chain.
    """

    fail_on_warnings: bool = Field(
        default=False, description="Exit non-zero when only warnings are reported"
    )
    ignore_codes: list[str] = Field(
        default_factory=list, description="Issue codes to drop from the report"
    )
    resolve_remote: bool = Field(
        default=True, description="Fetch file and HTTP(S) references"
    )
    http_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
