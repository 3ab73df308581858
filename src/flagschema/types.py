# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for option schemas."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

OptionValue: TypeAlias = str | bool | None
DefaultValue: TypeAlias = str | int | float | bool | None
RequiredSpec: TypeAlias = bool | str

DEFAULT_ERROR_CODE: Final[int] = -1
LONG_PREFIX: Final[str] = "--"
SHORT_PREFIX: Final[str] = "-"
INLINE_SEPARATOR: Final[str] = "="

RULE_WIDTH: Final[int] = 80
INDENTED_RULE_WIDTH: Final[int] = 77
BANNER_INDENT: Final[str] = "   "

__all__ = [
    "BANNER_INDENT",
    "DEFAULT_ERROR_CODE",
    "INDENTED_RULE_WIDTH",
    "INLINE_SEPARATOR",
    "LONG_PREFIX",
    "RULE_WIDTH",
    "SHORT_PREFIX",
    "DefaultValue",
    "JSONPrimitive",
    "JSONValue",
    "OptionValue",
    "RequiredSpec",
]
