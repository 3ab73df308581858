# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the page-capture option schema and settings model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from flagschema.capture import CaptureSettings
from flagschema.parser import ErrorPolicy, parse_args
from flagschema.schema import OptionSchema


def test_banner_lines(capture_schema: OptionSchema) -> None:
    banner = capture_schema.get_banner()

    assert banner.startswith("\nUsage: prog [options]\n\nOptions (case-sensitive):\n\n   -u, --url[=]: a URL to load\n")
    assert "   NOTE: If both url and html are provided url takes precedence)\n" in banner
    assert "   -O, --output-base64: output page image as base64 encoded string\n" in banner
    assert "   -OF, --output-base64-format[=]: output page image base64 format [default: PNG]\n" in banner
    assert "   -S, --scale[=]: zoomFactor of the page [default: 1]\n" in banner
    assert "   -wfi, --waitfor-interval[=]: time (in ms) to run waitFor [default: 150]\n" in banner
    assert "   --enable-xss-auditing: enable page settings XSSAuditingEnabled [default: true]\n" in banner
    assert "\n   " + "-" * 77 + "\n" in banner
    assert banner.endswith("   --help: displays this usage message\n")


def test_missing_source_and_output(capture_schema: OptionSchema) -> None:
    assert parse_args(capture_schema, ["prog"]).error.msg == "url -OR- html is required"  # type: ignore[union-attr]

    outcome = parse_args(capture_schema, ["prog"], policy=ErrorPolicy.COLLECT)

    assert [error.msg for error in outcome.errors] == [
        "url -OR- html is required",
        "output -OR- output-base64 is required",
    ]


def test_settings_from_parsed_options(capture_schema: OptionSchema) -> None:
    outcome = parse_args(
        capture_schema,
        ["prog", "-u", "http://x", "--output-base64", "-W", "800", "-H=600", "--wfi", "50", "--debug"],
    )
    assert outcome.ok, outcome.errors

    settings = CaptureSettings.from_options(outcome.options)

    assert settings.source == ("url", "http://x")
    assert settings.viewport == (800, 600)
    assert settings.output_base64 is True
    assert settings.output_base64_format == "PNG"
    assert settings.scale == 1.0
    assert settings.waitfor_interval == 50
    assert settings.waitfor_timeout == 5000
    assert settings.debug is True
    assert settings.writes_file is False


def test_url_takes_precedence_over_html(capture_schema: OptionSchema) -> None:
    outcome = parse_args(capture_schema, ["prog", "--html", "<p>x</p>", "--url=http://x", "-o", "shot.png"])

    settings = CaptureSettings.from_options(outcome.options)

    assert settings.source == ("url", "http://x")
    assert settings.writes_file is True
    assert settings.viewport is None


def test_explicit_format_overrides_default(capture_schema: OptionSchema) -> None:
    outcome = parse_args(capture_schema, ["prog", "-h", "<p>x</p>", "-O", "--output-base64-format=JPEG"])

    assert CaptureSettings.from_options(outcome.options).output_base64_format == "JPEG"


def test_invalid_dimension_is_rejected(capture_schema: OptionSchema) -> None:
    outcome = parse_args(capture_schema, ["prog", "-u", "http://x", "-O", "--width", "wide"])

    with pytest.raises(ValidationError):
        CaptureSettings.from_options(outcome.options)
