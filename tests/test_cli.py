# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the banner, parse and check commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from flagschema.cli.app import app


def _spec_file(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_banner_defaults_to_capture_schema() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["banner"])

    assert result.exit_code == 0
    assert "Usage: html-capture [options]" in result.stdout
    assert "-u, --url[=]: a URL to load" in result.stdout


def test_parse_outputs_json_values() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--", "--url", "http://x", "--output", "shot.png"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["url"] == "http://x"
    assert payload["output"] == "shot.png"
    assert payload["html"] is None


def test_parse_settings_applies_defaults() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--settings", "--", "-h", "<p>x</p>", "-O", "-W", "640", "-H", "480"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["outputBase64"] is True
    assert payload["outputBase64Format"] == "PNG"
    assert payload["width"] == 640


def test_parse_help_prints_banner() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--program", "shot", "--", "--help"])

    assert result.exit_code == 0
    assert "Usage: shot [options]" in result.stdout


def test_parse_error_prints_banner_and_message() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse"])

    assert result.exit_code == 1
    assert "Usage: html-capture [options]" in result.output
    assert "Error: url -OR- html is required" in result.output


def test_parse_collect_policy_lists_every_error() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--policy", "collect", "--", "--bogus"])

    assert result.exit_code == 1
    assert "Error: bogus not found in options" in result.output
    assert "Error: url -OR- html is required" in result.output
    assert "Error: output -OR- output-base64 is required" in result.output


def test_parse_rejects_unknown_policy() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--policy", "sometimes"])

    assert result.exit_code == 2


def test_parse_with_schema_document(tmp_path: Path) -> None:
    runner = CliRunner()
    schema = _spec_file(tmp_path, {"program": "tool", "options": [{"longCode": "dry-run"}]})

    result = runner.invoke(app, ["parse", "--schema", str(schema), "--", "--dry-run"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"dryRun": True}


def test_check_reports_registered_options(tmp_path: Path) -> None:
    runner = CliRunner()
    schema = _spec_file(tmp_path, [{"longCode": "url", "required": "html"}, {"longCode": "html"}])

    result = runner.invoke(app, ["check", str(schema)])

    assert result.exit_code == 0
    assert "--- check schema.json ---" in result.stdout
    assert "2 options registered" in result.stdout


def test_check_flags_dangling_partner(tmp_path: Path) -> None:
    runner = CliRunner()
    schema = _spec_file(tmp_path, [{"longCode": "url", "required": "html"}])

    result = runner.invoke(app, ["check", str(schema)])

    assert result.exit_code == 1
    assert "required partner 'html'" in result.output


def test_check_rejects_invalid_document(tmp_path: Path) -> None:
    runner = CliRunner()
    schema = _spec_file(tmp_path, [{"longCode": "url", "kind": "banner"}])

    result = runner.invoke(app, ["check", str(schema)])

    assert result.exit_code == 2
