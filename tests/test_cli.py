"""Tests for the swagvet command line (swagvet.app)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from swagvet.app import app
from swagvet.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERRORS,
)

UNUSED_DEFINITION_DOCUMENT: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Test API", "version": "1.0.0"},
    "paths": {},
    "definitions": {"Unused": {"type": "string"}},
}

INVALID_DOCUMENT: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Test API", "version": "1.0.0"},
    "paths": {"/pets/{id}": {"get": {"responses": {"200": {"description": "OK"}}}}},
}


@pytest.fixture
def write_document(isolated_config: Path):
    """Write a document into the isolated working directory and return its path."""

    def _write(document: dict[str, Any], name: str = "api.json") -> str:
        path = isolated_config / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return _write


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


class TestGlobalOptions:
    def test_version(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "swagvet 0.1.0"

    def test_no_args_shows_help(self, cli_runner) -> None:
        result = cli_runner.invoke(app, [])
        assert "validate" in result.output
        assert "operations" in result.output

    def test_unknown_option_is_a_usage_error(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["validate", "--strict"])
        assert result.exit_code == EXIT_INVALID_USAGE


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    """``swagvet validate``."""

    def test_valid_document(self, cli_runner, isolated_config, petstore_path) -> None:
        result = cli_runner.invoke(app, ["--no-color", "validate", str(petstore_path)])
        assert result.exit_code == EXIT_SUCCESS
        assert "Document is valid" in result.output

    def test_json_report(self, cli_runner, isolated_config, petstore_path) -> None:
        result = cli_runner.invoke(app, ["--json", "--quiet", "validate", str(petstore_path)])
        assert result.exit_code == EXIT_SUCCESS
        assert json.loads(result.stdout) == {"valid": True, "errors": [], "warnings": []}

    def test_document_with_errors(self, cli_runner, write_document) -> None:
        result = cli_runner.invoke(app, ["--plain", "--no-color", "validate", write_document(INVALID_DOCUMENT)])
        assert result.exit_code == EXIT_VALIDATION_ERRORS
        assert "MISSING_PATH_PARAMETER_DEFINITION" in result.output
        assert "Error: 1 error(s), 0 warning(s)" in result.output

    def test_json_report_with_errors(self, cli_runner, write_document) -> None:
        result = cli_runner.invoke(app, ["--json", "--no-color", "validate", write_document(INVALID_DOCUMENT)])
        assert result.exit_code == EXIT_VALIDATION_ERRORS
        payload = json.loads(result.stdout.split("Error:")[0])
        assert payload["valid"] is False
        assert payload["errors"][0]["path"] == ["paths", "/pets/{id}", "get"]

    def test_missing_file(self, cli_runner, isolated_config) -> None:
        result = cli_runner.invoke(app, ["--no-color", "validate", "missing.json"])
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR
        assert "Document file not found: missing.json" in result.output

    def test_unsupported_version(self, cli_runner, write_document) -> None:
        result = cli_runner.invoke(
            app, ["--no-color", "validate", write_document({"openapi": "3.0.0", "info": {}, "paths": {}})]
        )
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR

    def test_warnings_only(self, cli_runner, write_document) -> None:
        result = cli_runner.invoke(app, ["--no-color", "validate", write_document(UNUSED_DEFINITION_DOCUMENT)])
        assert result.exit_code == EXIT_SUCCESS
        assert "UNUSED_DEFINITION" in result.output
        assert "Warning: Document is valid with 1 warning(s)" in result.output

    def test_fail_on_warnings(self, cli_runner, write_document) -> None:
        document_path = write_document(UNUSED_DEFINITION_DOCUMENT)
        result = cli_runner.invoke(app, ["--no-color", "validate", document_path, "--fail-on-warnings"])
        assert result.exit_code == EXIT_VALIDATION_ERRORS

    def test_fail_on_warnings_from_project_config(self, cli_runner, write_document, isolated_config) -> None:
        (isolated_config / "swagvet.json").write_text('{"fail_on_warnings": true}', encoding="utf-8")
        result = cli_runner.invoke(app, ["--no-color", "validate", write_document(UNUSED_DEFINITION_DOCUMENT)])
        assert result.exit_code == EXIT_VALIDATION_ERRORS

    def test_ignore_codes(self, cli_runner, write_document) -> None:
        document_path = write_document(UNUSED_DEFINITION_DOCUMENT)
        result = cli_runner.invoke(app, ["--no-color", "validate", document_path, "--ignore", "UNUSED_DEFINITION"])
        assert result.exit_code == EXIT_SUCCESS
        assert "UNUSED_DEFINITION" not in result.output
        assert "Document is valid" in result.output

    def test_invalid_config(self, cli_runner, isolated_config, petstore_path, monkeypatch) -> None:
        monkeypatch.setenv("SWAGVET_NO_REMOTE_REFS", "sometimes")
        result = cli_runner.invoke(app, ["--no-color", "validate", str(petstore_path)])
        assert result.exit_code == EXIT_GENERIC_FAILURE
        assert "Invalid boolean value for SWAGVET_NO_REMOTE_REFS" in result.output

    def test_remote_references_can_be_disabled(self, cli_runner, write_document) -> None:
        write_document({"type": "object"}, name="pet.json")
        document = {
            "swagger": "2.0",
            "info": {"title": "Test API", "version": "1.0.0"},
            "paths": {
                "/pets": {"get": {"responses": {"200": {"description": "OK", "schema": {"$ref": "pet.json"}}}}}
            },
        }
        document_path = write_document(document)
        assert cli_runner.invoke(app, ["--no-color", "validate", document_path]).exit_code == EXIT_SUCCESS
        result = cli_runner.invoke(app, ["--no-color", "validate", document_path, "--no-remote-refs"])
        assert result.exit_code == EXIT_VALIDATION_ERRORS
        assert "UNRESOLVABLE_REFERENCE" in result.output


# ---------------------------------------------------------------------------
# operations
# ---------------------------------------------------------------------------


class TestOperationsCommand:
    """``swagvet operations``."""

    def test_plain_listing(self, cli_runner, isolated_config, petstore_path) -> None:
        result = cli_runner.invoke(app, ["--plain", "operations", str(petstore_path)])
        assert result.exit_code == EXIT_SUCCESS
        lines = result.stdout.strip().split("\n")
        assert lines[0] == "Method\tPath\tOperation ID\tSummary"
        assert [line.split("\t")[:3] for line in lines[1:]] == [
            ["POST", "/pet", "addPet"],
            ["GET", "/pet/findByStatus", "findPetsByStatus"],
            ["GET", "/pet/{petId}", "getPetById"],
            ["POST", "/pet/{petId}", "updatePetWithForm"],
            ["DELETE", "/pet/{petId}", "deletePet"],
            ["GET", "/store/inventory", "getInventory"],
        ]

    def test_tag_filter(self, cli_runner, isolated_config, petstore_path) -> None:
        result = cli_runner.invoke(app, ["--json", "operations", str(petstore_path), "--tag", "store"])
        assert result.exit_code == EXIT_SUCCESS
        records = json.loads(result.stdout)
        assert [record["Operation ID"] for record in records] == ["getInventory"]

    def test_missing_file(self, cli_runner, isolated_config) -> None:
        result = cli_runner.invoke(app, ["--no-color", "operations", "missing.json"])
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR
