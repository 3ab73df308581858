# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for validating option specs and normalising identifiers."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

from .errors import SchemaIntegrityError
from .types import DefaultValue, JSONValue, OptionValue, RequiredSpec

_HYPHEN_LOWER: Final[re.Pattern[str]] = re.compile(r"-([a-z])")


def to_camel_case(identifier: str) -> str:
    """Return ``identifier`` with ``-x`` sequences collapsed to ``X``.

    Only a hyphen followed by a lowercase letter is folded, so
    ``"output-base64"`` becomes ``"outputBase64"`` while ``"a-1"`` is kept.

    Args:
        identifier: Raw option id or long code.

    Returns:
        str: camelCase form of ``identifier``.
    """

    return _HYPHEN_LOWER.sub(lambda match: match.group(1).upper(), identifier)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping or raise a schema error.

    Args:
        value: Raw value extracted from an option spec.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: ``value`` unchanged.

    Raises:
        SchemaIntegrityError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise SchemaIntegrityError(f"{context}: expected '{key}' to be an object")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string, treating ``""`` as absent.

    Args:
        value: Raw value extracted from an option spec.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: The string when present and non-empty, otherwise ``None``.

    Raises:
        SchemaIntegrityError: If ``value`` is present but not a string.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise SchemaIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(value: JSONValue | None, *, key: str, context: str, default: bool = False) -> bool:
    """Return ``value`` as a boolean with a default for ``None``.

    Raises:
        SchemaIntegrityError: If ``value`` is neither ``None`` nor a bool.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise SchemaIntegrityError(f"{context}: expected '{key}' to be a boolean")


def current_value(value: JSONValue | None, *, context: str) -> OptionValue:
    """Validate a pre-set ``value.current``."""
    if value is None or isinstance(value, (str, bool)):
        return value
    raise SchemaIntegrityError(f"{context}: expected 'value.current' to be a string or boolean")


def default_value(value: JSONValue | None, *, context: str) -> DefaultValue:
    """Validate ``value.default``; containers are rejected."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise SchemaIntegrityError(f"{context}: expected 'value.default' to be a scalar")


def required_spec(value: JSONValue | None, *, context: str) -> RequiredSpec:
    """Validate the option-level ``required`` flag or partner id."""
    if value is None or value == "":
        return False
    if isinstance(value, (bool, str)):
        return value
    raise SchemaIntegrityError(f"{context}: expected 'required' to be a boolean or option id")


def freeze_json_mapping(value: Mapping[str, JSONValue], *, context: str) -> Mapping[str, JSONValue]:
    """Return an immutable mapping with recursively frozen JSON values.

    Raises:
        SchemaIntegrityError: If any key is not a string or a value is not JSON compatible.
    """
    frozen: dict[str, JSONValue] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise SchemaIntegrityError(f"{context}: expected keys to be strings")
        frozen[key] = freeze_json_value(item, context=f"{context}.{key}")
    return MappingProxyType(frozen)


def freeze_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Return a recursively frozen view of ``value``."""
    if isinstance(value, Mapping):
        return freeze_json_mapping(value, context=context)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(freeze_json_value(item, context=context) for item in value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    raise SchemaIntegrityError(f"{context}: unsupported JSON value type {type(value).__name__}")


def display_value(value: DefaultValue) -> str:
    """Render a scalar the way the usage banner shows it.

    Booleans print lowercase and integral floats drop their fraction,
    so a default of ``1.0`` reads ``1``.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = [
    "current_value",
    "default_value",
    "display_value",
    "expect_mapping",
    "freeze_json_mapping",
    "freeze_json_value",
    "optional_bool",
    "optional_string",
    "required_spec",
    "to_camel_case",
]
