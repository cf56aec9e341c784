"""Unit tests for oas_consolidate.document — JSON/YAML reading and writing."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from oas_consolidate.core.errors import DocumentLoadError
from oas_consolidate.document import (
    dump_document,
    format_for_path,
    load_document,
    parse_document,
)

_DOC = {"openapi": "3.0.0", "paths": {"/": {"get": {"summary": "Grüße"}}}}


class TestFormatForPath:
    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("a.json", "json"), ("a.JSON", "json"), ("a.yaml", "yaml"), ("a.yml", "yaml"), ("a", "yaml")],
    )
    def test_suffix(self, name: str, fmt: str) -> None:
        assert format_for_path(name) == fmt


class TestParseDocument:
    def test_json(self) -> None:
        assert parse_document(json.dumps(_DOC), "json") == _DOC

    def test_yaml(self) -> None:
        assert parse_document("openapi: 3.0.0\npaths: {}\n") == {"openapi": "3.0.0", "paths": {}}

    def test_invalid_json(self) -> None:
        with pytest.raises(DocumentLoadError, match="invalid JSON"):
            parse_document("{", "json", "spec.json")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(DocumentLoadError, match="invalid YAML"):
            parse_document("a: [b\n", "yaml")

    def test_non_mapping_root(self) -> None:
        with pytest.raises(DocumentLoadError, match="mapping"):
            parse_document("[1, 2]", "json")


class TestLoadDocument:
    def test_loads_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "spec.json"
        path.write_text(json.dumps(_DOC), encoding="utf-8")
        assert load_document(path) == _DOC

    def test_loads_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "spec.yaml"
        path.write_text(yaml.safe_dump(_DOC), encoding="utf-8")
        assert load_document(path) == _DOC

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError) as excinfo:
            load_document(tmp_path / "missing.json")
        assert excinfo.value.reason == "file not found"
        assert excinfo.value.path.name == "missing.json"


class TestDumpDocument:
    def test_json_keeps_unicode_and_order(self) -> None:
        text = dump_document({"b": 1, "a": "Grüße"}, "json")
        assert text == '{\n  "b": 1,\n  "a": "Grüße"\n}\n'

    def test_yaml_keeps_order(self) -> None:
        text = dump_document({"b": 1, "a": 2}, "yaml")
        assert text == "b: 1\na: 2\n"

    def test_yaml_round_trips_refs(self) -> None:
        doc = {"schema": {"$ref": "#/components/schemas/Pet"}}
        assert yaml.safe_load(dump_document(doc, "yaml")) == doc

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="toml"):
            dump_document({}, "toml")
