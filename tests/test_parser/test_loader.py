"""Tests for swagvet.parser.loader."""

from __future__ import annotations

import io
import json
import textwrap
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from swagvet.exceptions import SpecParseError
from swagvet.parser.loader import (
    _parse_content,
    is_url,
    load_document,
    validate_swagger_version,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

SWAGGER_YAML = textwrap.dedent("""\
    swagger: "2.0"
    info:
      title: YAML Test
      version: "1.0.0"
    paths:
      /hello:
        get:
          summary: Hello
          responses:
            "200":
              description: OK
""")


# ---------------------------------------------------------------------------
# load_document dispatch
# ---------------------------------------------------------------------------


class TestLoadDocument:
    """load_document routes each source to the right loader."""

    def test_loads_json_file(self) -> None:
        result = load_document(str(FIXTURES_DIR / "petstore.json"))
        assert result["swagger"] == "2.0"
        assert "/pet" in result["paths"]

    def test_loads_yaml_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "api.yaml"
        yaml_file.write_text(SWAGGER_YAML, encoding="utf-8")
        result = load_document(str(yaml_file))
        assert result["paths"]["/hello"]["get"]["summary"] == "Hello"

    def test_unknown_extension_detects_yaml(self, tmp_path: Path) -> None:
        source = tmp_path / "api.swagger"
        source.write_text(SWAGGER_YAML, encoding="utf-8")
        assert load_document(str(source))["info"]["title"] == "YAML Test"

    def test_loads_from_stdin(self) -> None:
        content = json.dumps({"swagger": "2.0", "info": {"title": "stdin", "version": "1"}})
        with patch("swagvet.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO(content)
            result = load_document("-")
        assert result["info"]["title"] == "stdin"

    def test_loads_from_url(self) -> None:
        document = {"swagger": "2.0", "info": {"title": "Remote", "version": "1.0"}}
        mock_response = httpx.Response(
            status_code=200,
            json=document,
            request=httpx.Request("GET", "https://example.com/swagger.json"),
        )
        with patch("swagvet.parser.loader.httpx.get", return_value=mock_response) as mock_get:
            result = load_document("https://example.com/swagger.json", timeout=5.0)
        assert result["info"]["title"] == "Remote"
        assert mock_get.call_args.kwargs["timeout"] == 5.0

    def test_is_url(self) -> None:
        assert is_url("https://example.com/a.json")
        assert is_url("http://example.com/a.json")
        assert not is_url("a.json")
        assert not is_url("file:///tmp/a.json")


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class TestLoadErrors:
    """Unreadable sources raise SpecParseError."""

    def test_file_not_found(self) -> None:
        with pytest.raises(SpecParseError, match="not found"):
            load_document("/nonexistent/path/to/swagger.json")

    def test_empty_file(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.json"
        empty.write_text("", encoding="utf-8")
        with pytest.raises(SpecParseError, match="empty"):
            load_document(str(empty))

    def test_invalid_json_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{invalid json", encoding="utf-8")
        with pytest.raises(SpecParseError, match="Invalid JSON"):
            load_document(str(bad))

    def test_empty_stdin(self) -> None:
        with patch("swagvet.parser.loader.sys") as mock_sys:
            mock_sys.stdin = io.StringIO("  \n")
            with pytest.raises(SpecParseError, match="No input"):
                load_document("-")

    def test_http_error(self) -> None:
        mock_response = httpx.Response(
            status_code=404,
            request=httpx.Request("GET", "https://example.com/missing.json"),
        )
        with patch("swagvet.parser.loader.httpx.get", return_value=mock_response):
            with pytest.raises(SpecParseError, match="HTTP 404"):
                load_document("https://example.com/missing.json")

    def test_connection_error(self) -> None:
        with patch(
            "swagvet.parser.loader.httpx.get",
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            with pytest.raises(SpecParseError, match="Failed to fetch"):
                load_document("https://unreachable.example.com/swagger.json")

    def test_exit_code(self) -> None:
        with pytest.raises(SpecParseError) as exc_info:
            load_document("/nonexistent/swagger.json")
        assert exc_info.value.exit_code == 7


# ---------------------------------------------------------------------------
# _parse_content
# ---------------------------------------------------------------------------


class TestParseContent:
    """Format detection."""

    def test_parses_json(self) -> None:
        assert _parse_content('{"swagger": "2.0"}') == {"swagger": "2.0"}

    def test_falls_back_to_yaml(self) -> None:
        assert _parse_content("swagger: '2.0'\ninfo:\n  title: T") == {"swagger": "2.0", "info": {"title": "T"}}

    def test_json_hint_forces_json_only(self) -> None:
        with pytest.raises(SpecParseError, match="Invalid JSON"):
            _parse_content("swagger: '2.0'", hint="json")

    def test_unparseable_content(self) -> None:
        with pytest.raises(SpecParseError, match="Failed to parse"):
            _parse_content("}{not valid at all][")

    def test_non_object_content(self) -> None:
        with pytest.raises(SpecParseError, match="must be a JSON/YAML object"):
            _parse_content("[1, 2, 3]")

    def test_empty_yaml_document(self) -> None:
        with pytest.raises(SpecParseError, match="empty document"):
            _parse_content("---\n", hint="yaml")


# ---------------------------------------------------------------------------
# validate_swagger_version
# ---------------------------------------------------------------------------


class TestValidateSwaggerVersion:
    """Only Swagger 2.0 documents are accepted."""

    def test_accepts_2_0(self) -> None:
        assert validate_swagger_version({"swagger": "2.0"}) == "2.0"

    def test_accepts_numeric_version(self) -> None:
        assert validate_swagger_version({"swagger": 2.0}) == "2.0"

    def test_rejects_openapi_3(self) -> None:
        with pytest.raises(SpecParseError, match="OpenAPI 3.0.3 is not supported"):
            validate_swagger_version({"openapi": "3.0.3"})

    def test_rejects_missing_field(self) -> None:
        with pytest.raises(SpecParseError, match="Missing 'swagger' field"):
            validate_swagger_version({"info": {"title": "test"}})

    def test_rejects_other_versions(self) -> None:
        with pytest.raises(SpecParseError, match="Unsupported Swagger version: 1.2"):
            validate_swagger_version({"swagger": "1.2"})
