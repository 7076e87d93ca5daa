"""Tests for swagvet.parser.resolver."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx

from swagvet.models import RefOptions
from swagvet.parser.resolver import resolve_refs


def _document(**extra: Any) -> dict[str, Any]:
    document: dict[str, Any] = {
        "swagger": "2.0",
        "info": {"title": "Test API", "version": "1.0.0"},
        "paths": {},
    }
    document.update(extra)
    return document


def _responding(schema: dict[str, Any]) -> dict[str, Any]:
    return {"/pets": {"get": {"responses": {"200": {"description": "OK", "schema": schema}}}}}


RESPONSE_PTR = "#/paths/~1pets/get/responses/200/schema"


# ---------------------------------------------------------------------------
# Local references
# ---------------------------------------------------------------------------


class TestLocalReferences:
    """References into the same document."""

    def test_resolves_simple_ref(self) -> None:
        pet = {"type": "object", "properties": {"name": {"type": "string"}}}
        document = _document(definitions={"Pet": pet}, paths=_responding({"$ref": "#/definitions/Pet"}))

        resolved = resolve_refs(document)

        assert resolved.definition["paths"]["/pets"]["get"]["responses"]["200"]["schema"] == pet
        record = resolved.references[RESPONSE_PTR]
        assert record.ref == "#/definitions/Pet"
        assert record.target == "#/definitions/Pet"
        assert record.type == "local"
        assert not record.missing
        assert not record.circular

    def test_does_not_mutate_original(self) -> None:
        document = _document(
            definitions={"Pet": {"type": "string"}}, paths=_responding({"$ref": "#/definitions/Pet"})
        )
        original = copy.deepcopy(document)
        resolve_refs(document)
        assert document == original

    def test_no_refs_passthrough(self) -> None:
        document = _document(definitions={"Pet": {"type": "string"}})
        resolved = resolve_refs(document)
        assert resolved.definition == document
        assert resolved.references == {}

    def test_nested_refs_are_recorded_at_their_own_location(self) -> None:
        document = _document(
            definitions={
                "Category": {"type": "object", "properties": {"id": {"type": "integer"}}},
                "Pet": {"type": "object", "properties": {"category": {"$ref": "#/definitions/Category"}}},
            },
            paths=_responding({"$ref": "#/definitions/Pet"}),
        )

        resolved = resolve_refs(document)

        schema = resolved.definition["paths"]["/pets"]["get"]["responses"]["200"]["schema"]
        assert schema["properties"]["category"]["properties"]["id"] == {"type": "integer"}
        assert set(resolved.references) == {
            "#/definitions/Pet/properties/category",
            RESPONSE_PTR,
        }

    def test_parallel_branches_same_ref(self) -> None:
        document = _document(
            definitions={
                "Tag": {"type": "string"},
                "Pet": {
                    "type": "object",
                    "properties": {
                        "first": {"$ref": "#/definitions/Tag"},
                        "second": {"$ref": "#/definitions/Tag"},
                    },
                },
            }
        )
        resolved = resolve_refs(document)
        properties = resolved.definition["definitions"]["Pet"]["properties"]
        assert properties["first"] == properties["second"] == {"type": "string"}
        assert not any(record.circular for record in resolved.references.values())

    def test_pointer_escaping(self) -> None:
        document = _document(
            definitions={
                "a/b": {"type": "string"},
                "My Pet": {"type": "integer"},
                "Holder": {
                    "properties": {
                        "slash": {"$ref": "#/definitions/a~1b"},
                        "space": {"$ref": "#/definitions/My%20Pet"},
                    }
                },
            }
        )
        resolved = resolve_refs(document)
        properties = resolved.definition["definitions"]["Holder"]["properties"]
        assert properties["slash"] == {"type": "string"}
        assert properties["space"] == {"type": "integer"}
        assert resolved.references["#/definitions/Holder/properties/space"].target == "#/definitions/My Pet"

    def test_resolved_parameters(self) -> None:
        limit = {"name": "limit", "in": "query", "type": "integer"}
        document = _document(
            parameters={"limit": limit},
            paths={"/pets": {"get": {"parameters": [{"$ref": "#/parameters/limit"}], "responses": {}}}},
        )
        resolved = resolve_refs(document)
        assert resolved.definition["paths"]["/pets"]["get"]["parameters"] == [limit]


# ---------------------------------------------------------------------------
# Circular references
# ---------------------------------------------------------------------------


class TestCircularReferences:
    """Cycles are flagged and left as ``$ref`` mappings."""

    def test_self_reference(self) -> None:
        document = _document(
            definitions={
                "Node": {"type": "object", "properties": {"next": {"$ref": "#/definitions/Node"}}},
            }
        )
        resolved = resolve_refs(document)
        node = resolved.definition["definitions"]["Node"]
        assert node["properties"]["next"] == {"$ref": "#/definitions/Node"}
        assert resolved.references["#/definitions/Node/properties/next"].circular

    def test_cycle_through_expansion(self) -> None:
        document = _document(
            definitions={
                "Node": {"type": "object", "properties": {"next": {"$ref": "#/definitions/Node"}}},
            },
            paths=_responding({"$ref": "#/definitions/Node"}),
        )
        resolved = resolve_refs(document)
        schema = resolved.definition["paths"]["/pets"]["get"]["responses"]["200"]["schema"]
        assert schema["properties"]["next"] == {"$ref": "#/definitions/Node"}
        assert not resolved.references[RESPONSE_PTR].circular

    def test_mutual_inheritance(self) -> None:
        document = _document(
            definitions={
                "A": {"allOf": [{"$ref": "#/definitions/B"}]},
                "B": {"allOf": [{"$ref": "#/definitions/A"}]},
            }
        )
        resolved = resolve_refs(document)
        assert list(resolved.references) == ["#/definitions/A/allOf/0", "#/definitions/B/allOf/0"]
        assert all(record.circular for record in resolved.references.values())

    def test_reference_to_document_root(self) -> None:
        document = _document(definitions={"Everything": {"$ref": "#"}})
        resolved = resolve_refs(document)
        assert resolved.references["#/definitions/Everything"].circular
        assert resolved.definition["definitions"]["Everything"] == {"$ref": "#"}


# ---------------------------------------------------------------------------
# Broken references
# ---------------------------------------------------------------------------


class TestBrokenReferences:
    """Missing and invalid references never raise."""

    def test_missing_target(self) -> None:
        document = _document(paths=_responding({"$ref": "#/definitions/Missing"}))
        resolved = resolve_refs(document)
        record = resolved.references[RESPONSE_PTR]
        assert record.missing
        assert record.error == "JSON Pointer points to missing location: #/definitions/Missing"
        schema = resolved.definition["paths"]["/pets"]["get"]["responses"]["200"]["schema"]
        assert schema == {"$ref": "#/definitions/Missing"}

    def test_malformed_pointer(self) -> None:
        resolved = resolve_refs(_document(paths=_responding({"$ref": "#definitions/Pet"})))
        record = resolved.references[RESPONSE_PTR]
        assert record.type == "invalid"
        assert record.error == "ptr must start with a / or #/"
        assert not record.missing

    def test_extra_properties_are_ignored(self) -> None:
        document = _document(
            definitions={"Pet": {"type": "string"}},
            paths=_responding({"$ref": "#/definitions/Pet", "description": "ignored"}),
        )
        resolved = resolve_refs(document)
        assert resolved.definition["paths"]["/pets"]["get"]["responses"]["200"]["schema"] == {"type": "string"}
        assert resolved.references[RESPONSE_PTR].warning == (
            "Extra JSON Reference properties will be ignored: description"
        )


# ---------------------------------------------------------------------------
# Remote references
# ---------------------------------------------------------------------------


class TestRemoteReferences:
    """File and HTTP(S) references."""

    def test_relative_file(self, tmp_path: Path) -> None:
        (tmp_path / "common.json").write_text(
            json.dumps(
                {
                    "Pet": {"type": "object", "properties": {"tag": {"$ref": "#/Tag"}}},
                    "Tag": {"type": "string"},
                }
            ),
            encoding="utf-8",
        )
        document = _document(definitions={"Pet": {"$ref": "common.json#/Pet"}})

        resolved = resolve_refs(document, RefOptions(location=str(tmp_path / "root.json")))

        assert resolved.definition["definitions"]["Pet"] == {
            "type": "object",
            "properties": {"tag": {"type": "string"}},
        }
        assert list(resolved.references) == ["#/definitions/Pet"]
        record = resolved.references["#/definitions/Pet"]
        assert record.type == "remote"
        assert record.target == str((tmp_path / "common.json").resolve()) + "#/Pet"

    def test_url_relative_to_remote_location(self) -> None:
        mock_response = httpx.Response(
            status_code=200,
            json={"Pet": {"type": "string"}, "Tag": {"type": "integer"}},
            request=httpx.Request("GET", "https://example.com/api/common.json"),
        )
        document = _document(
            definitions={
                "Pet": {"$ref": "common.json#/Pet"},
                "Tag": {"$ref": "common.json#/Tag"},
            }
        )
        with patch("swagvet.parser.loader.httpx.get", return_value=mock_response) as mock_get:
            resolved = resolve_refs(document, RefOptions(location="https://example.com/api/root.json"))

        assert mock_get.call_count == 1
        assert mock_get.call_args.args[0] == "https://example.com/api/common.json"
        assert resolved.definition["definitions"] == {"Pet": {"type": "string"}, "Tag": {"type": "integer"}}

    def test_remote_resolution_disabled(self, tmp_path: Path) -> None:
        (tmp_path / "common.json").write_text('{"Pet": {}}', encoding="utf-8")
        document = _document(definitions={"Pet": {"$ref": "common.json#/Pet"}})

        resolved = resolve_refs(
            document, RefOptions(location=str(tmp_path / "root.json"), resolve_remote=False)
        )

        record = resolved.references["#/definitions/Pet"]
        assert record.missing
        assert record.error.startswith("Remote reference resolution is disabled: ")
        assert resolved.definition["definitions"]["Pet"] == {"$ref": "common.json#/Pet"}

    def test_unloadable_document(self, tmp_path: Path) -> None:
        document = _document(
            definitions={
                "Pet": {"$ref": "missing.json#/Pet"},
                "Tag": {"$ref": "missing.json#/Tag"},
            }
        )
        resolved = resolve_refs(document, RefOptions(location=str(tmp_path / "root.json")))
        errors = [record.error for record in resolved.references.values()]
        assert len(errors) == 2
        assert errors[0] == errors[1]
        assert "Document file not found" in errors[0]

    def test_missing_location_in_remote_document(self, tmp_path: Path) -> None:
        (tmp_path / "common.json").write_text('{"Pet": {}}', encoding="utf-8")
        document = _document(definitions={"Tag": {"$ref": "common.json#/Tag"}})
        resolved = resolve_refs(document, RefOptions(location=str(tmp_path / "root.json")))
        record = resolved.references["#/definitions/Tag"]
        assert record.missing
        assert record.error == "JSON Pointer points to missing location: #/Tag"
