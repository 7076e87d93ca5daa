"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific failure category and is referenced by the
corresponding :class:`~swagvet.exceptions.SwagvetError` subclass or by the
``validate`` command. CI scripts can inspect the exit code to tell a
document with validation errors apart from one that could not be loaded.

Example::

    $ swagvet validate petstore.yaml
    $ echo $?
    3   # EXIT_VALIDATION_ERRORS -- the document has semantic errors
"""

EXIT_SUCCESS = 0
"""The command completed successfully and the document is valid."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or options (reported by Typer)."""

EXIT_VALIDATION_ERRORS = 3
"""The document was loaded but reported validation errors (or warnings with ``--fail-on-warnings``)."""

EXIT_SPEC_PARSE_ERROR = 7
"""The Swagger document could not be loaded or parsed."""

EXIT_REFERENCE_ERROR = 8
"""JSON References in the document could not be resolved at all."""
