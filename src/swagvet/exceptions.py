"""Exception hierarchy for swagvet.

All exceptions inherit from :class:`SwagvetError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`swagvet.exit_codes`.
The CLI entry point in :func:`swagvet.app.main` catches ``SwagvetError`` and
exits with the appropriate code.

Validation findings about a document are *not* exceptions: they are
collected as :class:`~swagvet.models.ValidationIssue` records. Exceptions
are reserved for documents that cannot be loaded at all, for programmer
errors, and for the per-value failures stored on
:class:`~swagvet.api.parameter_value.ParameterValue`.

Subclass hierarchy::

    SwagvetError (exit 1)
    +-- ConfigError               (exit 1)
    +-- SpecParseError            (exit 7)
    +-- ReferenceResolutionError  (exit 8)
    +-- ConversionError           (exit 1, also a TypeError)
    +-- ParameterValueError       (exit 1)
"""

from __future__ import annotations

from typing import Any, Optional

from swagvet.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_REFERENCE_ERROR,
    EXIT_SPEC_PARSE_ERROR,
)


class SwagvetError(Exception):
    """Base exception for all swagvet errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    @property
    def message(self) -> str:
        """The error message passed to the constructor."""
        return str(self.args[0]) if self.args else ""


class ConfigError(SwagvetError):
    """Raised for configuration problems (unreadable or invalid config files)."""

    exit_code = EXIT_GENERIC_FAILURE


class SpecParseError(SwagvetError):
    """Raised when a Swagger document cannot be loaded or parsed."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ReferenceResolutionError(SwagvetError):
    """Raised when reference resolution fails as a whole.

    Individual broken references never raise; they are recorded on the
    :class:`~swagvet.models.ReferenceRecord` and surface as validation
    errors.
    """

    exit_code = EXIT_REFERENCE_ERROR


class ConversionError(SwagvetError, TypeError):
    """Raised by :func:`~swagvet.validation.coercion.convert_value` when a raw
    value cannot be converted to the schema's type.

    Args:
        message: Human-readable description of the failure.
        code: Machine-readable code (``INVALID_TYPE`` or ``INVALID_FORMAT``).
    """

    def __init__(self, message: str, code: str = "INVALID_TYPE"):
        super().__init__(message)
        self.code = code


class ParameterValueError(SwagvetError):
    """A failure computing or validating a parameter value.

    Instances are stored on :class:`~swagvet.api.parameter_value.ParameterValue`
    rather than propagated to the caller.

    Attributes:
        code: ``INVALID_TYPE``, ``INVALID_FORMAT``, ``REQUIRED`` or
            ``SCHEMA_VALIDATION_FAILED``.
        errors: Underlying JSON Schema errors, if any.
        path: Path segments of the parameter definition (empty for
            conversion failures).
        failed_validation: ``True`` when the failure came from validation
            rather than conversion.
    """

    def __init__(
        self,
        message: str,
        code: str,
        errors: Optional[list[dict[str, Any]]] = None,
        path: Optional[list[str]] = None,
        failed_validation: bool = False,
    ):
        super().__init__(message)
        self.code = code
        self.errors = errors
        self.path = path if path is not None else []
        self.failed_validation = failed_validation
