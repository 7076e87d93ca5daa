"""Report rendering for the ``swagvet`` CLI.

Reports and operation listings are *data* and go to stdout; status lines,
warnings, errors and debug traces are *diagnostics* and go to stderr, so
``swagvet --json validate api.yaml | jq`` always receives clean JSON.

Three data formats are supported (see :class:`OutputFormat`): a Rich table
for interactive terminals, tab-separated plain text for pipes, and JSON.
Colour is disabled by ``--no-color``, ``NO_COLOR`` (any value) and
``TERM=dumb``; without colour, diagnostics fall back to ``print`` with a
textual ``Error:`` / ``Warning:`` prefix.

:func:`~swagvet.app.main_callback` builds one :class:`OutputManager` from
the global flags and installs it with :func:`set_output`; commands reach it
through :func:`get_output` or the module-level :func:`info`, :func:`error`
... helpers.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from swagvet.models import ValidationIssue, ValidationResults
from swagvet.pointers import path_to_ptr

REPORT_HEADERS = ["Level", "Code", "Path", "Message"]

_LEVEL_STYLES = {"error": "red", "warning": "yellow"}


class OutputFormat(str, Enum):
    """Data format selected by ``--json`` / ``--plain``.

    ``AUTO`` becomes ``RICH`` on a colour-capable TTY and ``PLAIN``
    everywhere else.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes report data to stdout and diagnostics to stderr.

    Args:
        format: Requested data format; ``AUTO`` is resolved immediately.
        no_color: Disable colour even on a TTY.
        quiet: Drop ``info`` and ``success`` diagnostics.
        verbose: Emit ``debug`` diagnostics.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._format = _resolve_format(format, self._no_color)

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=self._format == OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    @property
    def is_quiet(self) -> bool:
        return self._quiet

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    # ------------------------------------------------------------------ #
    # stdout
    # ------------------------------------------------------------------ #

    def print_data(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Print rows as a JSON array of objects, TSV with a header line, or a Rich table.

        The title is only shown by the Rich table.
        """
        if self._format == OutputFormat.JSON:
            self._print_json([dict(zip(headers, row)) for row in rows])
        elif self._format == OutputFormat.PLAIN:
            self._print_tsv([headers, *rows])
        else:
            self._stdout.print(_build_table(headers, [[escape(cell) for cell in row] for row in rows], title))

    def print_report(self, results: ValidationResults, title: Optional[str] = None) -> None:
        """Print the errors and warnings of a validation run.

        JSON output is always an object with ``valid``, ``errors`` and
        ``warnings`` (code-specific fields such as ``lineage`` included).
        Plain and Rich output list one issue per row, errors first, and
        print nothing for a clean document.
        """
        if self._format == OutputFormat.JSON:
            self._print_json({"valid": results.is_valid, **results.model_dump(mode="json")})
            return

        rows = [_issue_row("error", issue) for issue in results.errors]
        rows.extend(_issue_row("warning", issue) for issue in results.warnings)
        if not rows:
            return

        if self._format == OutputFormat.PLAIN:
            self._print_tsv(rows)
            return

        styled = [
            [f"[{_LEVEL_STYLES[level]}]{level}[/{_LEVEL_STYLES[level]}]", *(escape(cell) for cell in cells)]
            for level, *cells in rows
        ]
        self._stdout.print(_build_table(REPORT_HEADERS, styled, title))

    def _print_json(self, data: Any) -> None:
        self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))

    def _print_tsv(self, rows: list[list[str]]) -> None:
        for row in rows:
            self.print_data("\t".join(row))

    # ------------------------------------------------------------------ #
    # stderr
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic("", message, None)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic("", message, "green")

    def warning(self, message: str) -> None:
        """Never suppressed by ``--quiet``."""
        self._diagnostic("Warning: ", message, "yellow")

    def error(self, message: str) -> None:
        """Never suppressed by ``--quiet``."""
        self._diagnostic("Error: ", message, "bold red")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._diagnostic("[debug] ", message, "dim")

    def _diagnostic(self, prefix: str, message: str, style: Optional[str]) -> None:
        if self._no_color:
            print(f"{prefix}{message}", file=sys.stderr, flush=True)
            return
        text = escape(prefix) + escape(message)
        self._stderr.print(f"[{style}]{text}[/{style}]" if style else text)


# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #


def _resolve_format(requested: OutputFormat, no_color: bool) -> OutputFormat:
    if requested != OutputFormat.AUTO:
        return requested
    return OutputFormat.RICH if _is_tty() and not no_color else OutputFormat.PLAIN


def _build_table(headers: list[str], rows: list[list[str]], title: Optional[str]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*row)
    return table


def _issue_row(level: str, issue: ValidationIssue) -> list[str]:
    return [level, issue.code, path_to_ptr(issue.path), issue.message]


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """``True`` when ``NO_COLOR`` is set (to anything) or ``TERM`` is ``dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Process-wide manager
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed manager, creating an ``AUTO`` one on first use."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager (used between CLI invocations in tests)."""
    global _output
    _output = None


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
