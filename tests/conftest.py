# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from flagschema.capture import build_capture_schema
from flagschema.schema import OptionSchema, create_schema


@pytest.fixture
def pair_schema() -> OptionSchema:
    """Return a schema where ``url`` and ``html`` satisfy each other."""
    return create_schema(
        "prog",
        [
            {"longCode": "url", "shortCode": "u", "value": {"required": True}, "required": "html"},
            {"longCode": "html", "shortCode": "h", "value": {"required": True}, "required": "url"},
        ],
    )


@pytest.fixture
def basic_schema() -> OptionSchema:
    """Return a schema mixing value switches, flags and defaults."""
    return create_schema(
        "prog",
        [
            {"longCode": "width", "shortCode": "W", "value": {"required": True}},
            {"longCode": "debug", "value": {"default": False}},
            {"longCode": "user-agent", "value": {"required": True}},
            {"longCode": "html", "value": {"required": True}},
            {
                "longCode": "output-base64-format",
                "shortCode": "OF",
                "value": {"required": True, "default": "PNG"},
            },
            {"longCode": "help", "kind": "help", "description": "displays this usage message"},
        ],
    )


@pytest.fixture
def capture_schema() -> OptionSchema:
    return build_capture_schema("prog")
