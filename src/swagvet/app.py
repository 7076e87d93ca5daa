"""Typer application and CLI entry point for swagvet.

Two commands are available:

* ``swagvet validate DOCUMENT`` -- load, resolve and validate a Swagger 2.0
  document and print every error and warning.
* ``swagvet operations DOCUMENT`` -- list the operations of a document.

``DOCUMENT`` is a file path, an HTTP(S) URL or ``-`` for stdin.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.

See Also:
    :mod:`swagvet.config`: Configuration precedence for ``validate``.
    :mod:`swagvet.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any, Optional

import typer

from swagvet import __version__
from swagvet.exceptions import SwagvetError
from swagvet.exit_codes import EXIT_GENERIC_FAILURE, EXIT_VALIDATION_ERRORS
from swagvet.models import ValidationResults

app = typer.Typer(
    name="swagvet",
    help="Validate Swagger 2.0 API descriptions.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"swagvet {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~swagvet.output.OutputManager` from CLI
    flags.  ``--verbose`` also routes library logging to stderr at DEBUG
    level.
    """
    from swagvet.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _filter(results: ValidationResults, ignore_codes: list[str]) -> ValidationResults:
    if not ignore_codes:
        return results
    ignored = set(ignore_codes)
    return ValidationResults(
        errors=[issue for issue in results.errors if issue.code not in ignored],
        warnings=[issue for issue in results.warnings if issue.code not in ignored],
    )


def _build_api(source: str, resolve_remote: bool, timeout: float) -> Any:
    """Load *source*, check its version and build the API model."""
    from swagvet.api import create
    from swagvet.parser import load_document, validate_swagger_version

    raw = load_document(source, timeout=timeout)
    validate_swagger_version(raw)
    return create(
        {
            "definition": raw,
            "json_refs": {
                "location": None if source == "-" else source,
                "resolve_remote": resolve_remote,
                "timeout": timeout,
            },
        }
    )


@app.command("validate")
def validate_command(
    source: str = typer.Argument(..., metavar="DOCUMENT", help="Swagger document: file path, URL, or '-' for stdin."),
    fail_on_warnings: bool = typer.Option(
        False, "--fail-on-warnings", help="Exit non-zero when warnings are reported."
    ),
    ignore: Optional[list[str]] = typer.Option(
        None, "--ignore", "-i", help="Issue code to leave out of the report (repeatable)."
    ),
    no_remote_refs: bool = typer.Option(
        False, "--no-remote-refs", help="Do not fetch file or HTTP(S) references."
    ),
) -> None:
    """Validate a Swagger 2.0 document.

    Structural errors (against the Swagger 2.0 schema) are reported first;
    semantic checks only run on structurally valid documents.

    Example::

        swagvet validate petstore.yaml
        swagvet --json validate https://petstore.swagger.io/v2/swagger.json
        swagvet validate api.yaml --ignore UNUSED_DEFINITION --fail-on-warnings
    """
    from swagvet.config import resolve_config
    from swagvet.output import debug, error, get_output, success, warning

    try:
        config = resolve_config(
            cli_fail_on_warnings=fail_on_warnings,
            cli_ignore=ignore,
            cli_no_remote_refs=no_remote_refs,
        )
        debug(f"Effective config: {config.model_dump()}")
        api = _build_api(source, config.resolve_remote, config.http_timeout)
        results = _filter(api.validate(), config.ignore_codes)
    except SwagvetError as exc:
        error(exc.message)
        raise typer.Exit(code=exc.exit_code) from None

    get_output().print_report(results, title=f"Validation report for {source}")

    if results.errors:
        error(f"{len(results.errors)} error(s), {len(results.warnings)} warning(s)")
        raise typer.Exit(code=EXIT_VALIDATION_ERRORS)
    if results.warnings:
        warning(f"Document is valid with {len(results.warnings)} warning(s)")
        if config.fail_on_warnings:
            raise typer.Exit(code=EXIT_VALIDATION_ERRORS)
        return
    success("Document is valid")


@app.command("operations")
def operations_command(
    source: str = typer.Argument(..., metavar="DOCUMENT", help="Swagger document: file path, URL, or '-' for stdin."),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Only list operations with this tag."),
    no_remote_refs: bool = typer.Option(
        False, "--no-remote-refs", help="Do not fetch file or HTTP(S) references."
    ),
) -> None:
    """List the operations of a Swagger 2.0 document.

    Example::

        swagvet operations petstore.yaml
        swagvet --plain operations petstore.yaml --tag pet
    """
    from swagvet.config import resolve_config
    from swagvet.output import error, get_output

    try:
        config = resolve_config(cli_no_remote_refs=no_remote_refs)
        api = _build_api(source, config.resolve_remote, config.http_timeout)
    except SwagvetError as exc:
        error(exc.message)
        raise typer.Exit(code=exc.exit_code) from None

    operations = api.get_operations_by_tag(tag) if tag is not None else api.get_operations()
    rows = [
        [
            operation.method.upper(),
            operation.path_object.path,
            operation.operation_id or "-",
            operation.definition.get("summary") or "-",
        ]
        for operation in operations
    ]
    get_output().print_table(
        ["Method", "Path", "Operation ID", "Summary"], rows, title=f"Operations ({len(rows)})"
    )


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``swagvet`` console script.

    Unhandled :class:`~swagvet.exceptions.SwagvetError` instances cause a
    clean exit with the error's ``exit_code``; any other exception exits
    with a generic failure.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from swagvet.output import error

        if isinstance(exc, SwagvetError):
            error(exc.message)
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
