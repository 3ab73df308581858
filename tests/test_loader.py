# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for loading option spec documents from disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from flagschema.errors import SchemaIntegrityError, SchemaValidationError
from flagschema.loader import load_option_specs, load_schema
from flagschema.option import OptionKind


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_option_specs_from_array(tmp_path: Path) -> None:
    source = _write(
        tmp_path / "specs.json",
        [{"longCode": "url", "shortCode": "u"}, {"id": "sep1", "type": "separator", "length": 2}],
    )

    specs = load_option_specs(source)

    assert [spec.get("longCode", spec.get("id")) for spec in specs] == ["url", "sep1"]


def test_load_schema_from_object_document(tmp_path: Path) -> None:
    source = _write(
        tmp_path / "capture.json",
        {
            "program": "shot",
            "options": [
                {"longCode": "url", "value": {"required": True}, "required": "html"},
                {"longCode": "html", "value": {"required": True}, "required": "url"},
                {"longCode": "help", "kind": "help"},
            ],
        },
    )

    schema = load_schema(source)

    assert schema.program == "shot"
    assert [option.id for option in schema] == ["url", "html", "help"]
    assert schema.options[2].kind is OptionKind.HELP
    assert load_schema(source, program="override").program == "override"


def test_program_defaults_to_file_stem(tmp_path: Path) -> None:
    schema = load_schema(_write(tmp_path / "render-page.json", [{"longCode": "url"}]))

    assert schema.program == "render-page"


def test_unknown_kind_fails_validation(tmp_path: Path) -> None:
    source = _write(tmp_path / "bad.json", [{"longCode": "url", "kind": "banner"}])

    with pytest.raises(SchemaValidationError, match="bad.json"):
        load_schema(source)


def test_spec_without_identifier_fails_validation(tmp_path: Path) -> None:
    source = _write(tmp_path / "anon.json", [{"description": "nobody"}])

    with pytest.raises(SchemaValidationError):
        load_option_specs(source)


def test_unexpected_top_level_key_fails_validation(tmp_path: Path) -> None:
    source = _write(tmp_path / "extra.json", {"options": [], "flags": []})

    with pytest.raises(SchemaValidationError):
        load_option_specs(source)


def test_invalid_json_raises_integrity_error(tmp_path: Path) -> None:
    source = tmp_path / "broken.json"
    source.write_text("{not json", encoding="utf-8")

    with pytest.raises(SchemaIntegrityError, match="failed to parse"):
        load_option_specs(source)


def test_missing_document(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_schema(tmp_path / "missing.json")
