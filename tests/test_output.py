"""Tests for swagvet.output -- format resolution, stream discipline, reports."""

from __future__ import annotations

import json

import pytest

from swagvet.models import ValidationResults
from swagvet.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    debug,
    error,
    get_output,
    info,
    reset_output,
    set_output,
    success,
    warning,
)


@pytest.fixture()
def non_tty(monkeypatch):
    """Patch stdout.isatty() to return False."""
    monkeypatch.setattr("swagvet.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    """Patch stdout.isatty() to return True."""
    monkeypatch.setattr("swagvet.output._is_tty", lambda: True)


def _results() -> ValidationResults:
    results = ValidationResults()
    results.add_error(
        "UNRESOLVABLE_REFERENCE",
        "Reference could not be resolved: #/definitions/Missing",
        ["paths", "/pets", "get", "responses", "200", "schema"],
        error="JSON Pointer points to missing location: #/definitions/Missing",
    )
    results.add_warning("UNUSED_DEFINITION", "Definition is not used: #/definitions/Tag", ["definitions", "Tag"])
    return results


# ------------------------------------------------------------------ #
# OutputFormat resolution
# ------------------------------------------------------------------ #


class TestOutputFormatResolution:
    """AUTO resolves according to the terminal and colour settings."""

    def test_auto_resolves_to_plain_when_not_tty(self, non_tty):
        mgr = OutputManager(format=OutputFormat.AUTO)
        assert mgr.format == OutputFormat.PLAIN

    def test_auto_resolves_to_rich_when_tty(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        mgr = OutputManager(format=OutputFormat.AUTO)
        assert mgr.format == OutputFormat.RICH

    def test_auto_resolves_to_plain_when_color_disabled(self, tty, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        mgr = OutputManager(format=OutputFormat.AUTO)
        assert mgr.format == OutputFormat.PLAIN

    def test_no_color_flag_forces_plain(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        mgr = OutputManager(format=OutputFormat.AUTO, no_color=True)
        assert mgr.format == OutputFormat.PLAIN

    def test_explicit_formats_are_kept(self, non_tty):
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON
        assert OutputManager(format=OutputFormat.RICH).format == OutputFormat.RICH

    def test_flags(self, non_tty):
        mgr = OutputManager(quiet=True, verbose=True)
        assert mgr.is_quiet
        assert mgr.is_verbose


class TestColorDisabling:
    """NO_COLOR and TERM=dumb are respected."""

    def test_no_color_env_any_value(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_normal_term_keeps_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


# ------------------------------------------------------------------ #
# stdout vs stderr discipline
# ------------------------------------------------------------------ #


class TestStdoutStderrDiscipline:
    """Data goes to stdout, diagnostics go to stderr."""

    def test_print_data_goes_to_stdout(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        mgr.print_data("hello world")
        captured = capfd.readouterr()
        assert captured.out == "hello world\n"
        assert captured.err == ""

    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("info", "loading\n"),
            ("success", "loading\n"),
            ("warning", "Warning: loading\n"),
            ("error", "Error: loading\n"),
        ],
    )
    def test_diagnostics_go_to_stderr(self, capfd, non_tty, method, expected):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        getattr(mgr, method)("loading")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == expected


class TestQuietAndVerbose:
    """--quiet silences status messages, --verbose enables debug output."""

    def test_quiet_suppresses_info_and_success(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        mgr.info("info")
        mgr.success("done")
        assert capfd.readouterr().err == ""

    def test_quiet_keeps_warnings_and_errors(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        mgr.warning("careful")
        mgr.error("broken")
        err = capfd.readouterr().err
        assert "Warning: careful" in err
        assert "Error: broken" in err

    def test_debug_hidden_by_default(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        mgr.debug("details")
        assert capfd.readouterr().err == ""

    def test_debug_shown_when_verbose(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True)
        mgr.debug("details")
        assert capfd.readouterr().err == "[debug] details\n"


# ------------------------------------------------------------------ #
# Tables
# ------------------------------------------------------------------ #


class TestPrintTable:
    """print_table in all three output modes."""

    def test_table_json_mode(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.JSON, no_color=True)
        mgr.print_table(["Method", "Path"], [["GET", "/pet/{petId}"], ["POST", "/pet"]])
        parsed = json.loads(capfd.readouterr().out)
        assert parsed == [
            {"Method": "GET", "Path": "/pet/{petId}"},
            {"Method": "POST", "Path": "/pet"},
        ]

    def test_table_json_mode_empty(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.JSON, no_color=True)
        mgr.print_table(["Method"], [])
        assert json.loads(capfd.readouterr().out) == []

    def test_table_plain_mode_ignores_title(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        mgr.print_table(["Method", "Path"], [["GET", "/pet"]], title="Operations (1)")
        lines = capfd.readouterr().out.strip().split("\n")
        assert lines == ["Method\tPath", "GET\t/pet"]

    def test_table_rich_mode(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.RICH, no_color=True)
        mgr.print_table(["Method", "Path"], [["GET", "/pet"]], title="Operations (1)")
        out = capfd.readouterr().out
        assert "Method" in out
        assert "/pet" in out
        assert "Operations (1)" in out


# ------------------------------------------------------------------ #
# Validation reports
# ------------------------------------------------------------------ #


class TestPrintReport:
    """print_report renders errors and warnings."""

    def test_json_report_keeps_extra_fields(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.JSON, no_color=True)
        mgr.print_report(_results())
        payload = json.loads(capfd.readouterr().out)
        assert payload["valid"] is False
        assert payload["errors"][0]["code"] == "UNRESOLVABLE_REFERENCE"
        assert payload["errors"][0]["error"].startswith("JSON Pointer points to missing location")
        assert payload["warnings"] == [
            {
                "code": "UNUSED_DEFINITION",
                "message": "Definition is not used: #/definitions/Tag",
                "path": ["definitions", "Tag"],
            }
        ]

    def test_json_report_for_valid_document(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.JSON, no_color=True)
        mgr.print_report(ValidationResults())
        assert json.loads(capfd.readouterr().out) == {"valid": True, "errors": [], "warnings": []}

    def test_plain_report_rows(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        mgr.print_report(_results())
        lines = capfd.readouterr().out.strip().split("\n")
        assert lines == [
            "error\tUNRESOLVABLE_REFERENCE\t#/paths/~1pets/get/responses/200/schema\t"
            "Reference could not be resolved: #/definitions/Missing",
            "warning\tUNUSED_DEFINITION\t#/definitions/Tag\tDefinition is not used: #/definitions/Tag",
        ]

    @pytest.mark.parametrize("fmt", [OutputFormat.PLAIN, OutputFormat.RICH])
    def test_empty_report_prints_nothing(self, capfd, non_tty, fmt):
        mgr = OutputManager(format=fmt, no_color=True)
        mgr.print_report(ValidationResults())
        assert capfd.readouterr().out == ""

    def test_rich_report(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.RICH, no_color=True)
        mgr.print_report(_results(), title="Validation report for api.json")
        out = capfd.readouterr().out
        assert "UNUSED_DEFINITION" in out
        assert "Validation report for api.json" in out


# ------------------------------------------------------------------ #
# Global instance
# ------------------------------------------------------------------ #


class TestGlobalOutput:
    """Module-level helpers delegate to the installed manager."""

    def test_get_output_creates_default(self, non_tty):
        reset_output()
        first = get_output()
        assert first is get_output()
        assert first.format == OutputFormat.PLAIN

    def test_set_output(self, non_tty):
        mgr = OutputManager(format=OutputFormat.JSON)
        set_output(mgr)
        assert get_output() is mgr

    def test_convenience_functions(self, capfd, non_tty):
        set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True))
        info("one")
        success("two")
        warning("three")
        error("four")
        debug("five")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err.split("\n")[:-1] == [
            "one",
            "two",
            "Warning: three",
            "Error: four",
            "[debug] five",
        ]
