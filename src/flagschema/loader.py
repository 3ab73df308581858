# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load option spec documents from JSON and validate them against the bundled schema."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Final, cast

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .errors import SchemaIntegrityError, SchemaValidationError
from .schema import OptionSchema
from .types import JSONValue
from .utils import expect_mapping, optional_string

LOGGER = logging.getLogger(__name__)

SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "schemas" / "option_specs.schema.json"


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    with SCHEMA_PATH.open("r", encoding="utf-8") as stream:
        schema = json.load(stream)
    return Draft202012Validator(schema)


def load_document(path: Path) -> JSONValue:
    """Load and validate a spec document.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed payload that passed schema validation.

    Raises:
        FileNotFoundError: If the document is missing.
        SchemaIntegrityError: If the document is not valid JSON.
        SchemaValidationError: If the payload does not match the schema.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise SchemaIntegrityError(f"{path}: failed to parse option spec JSON") from exc
    try:
        _validator().validate(payload)
    except JsonSchemaValidationError as exc:
        raise SchemaValidationError(f"{path}: {exc.message}") from exc
    LOGGER.debug("loaded option spec document %s", path)
    return payload


def _split_document(payload: JSONValue, *, context: str) -> tuple[str | None, tuple[Mapping[str, JSONValue], ...]]:
    if isinstance(payload, Mapping):
        program = optional_string(payload.get("program"), key="program", context=context)
        raw_options = payload.get("options") or ()
    else:
        program, raw_options = None, payload or ()
    specs = tuple(
        expect_mapping(item, key=f"options[{index}]", context=context)
        for index, item in enumerate(cast("list[JSONValue]", raw_options))
    )
    return program, specs


def load_option_specs(path: Path) -> tuple[Mapping[str, JSONValue], ...]:
    """Return the option specs declared in ``path`` in document order."""

    _, specs = _split_document(load_document(path), context=str(path))
    return specs


def load_schema(path: Path, *, program: str | None = None) -> OptionSchema:
    """Build an :class:`OptionSchema` from a spec document.

    Args:
        path: JSON document holding an option array or ``{"program", "options"}`` object.
        program: Program name overriding the document's own ``program``.

    Returns:
        OptionSchema: Schema with every spec registered.
    """

    document_program, specs = _split_document(load_document(path), context=str(path))
    schema = OptionSchema(program=program or document_program or path.stem)
    return schema.add_option(specs)


__all__ = ["SCHEMA_PATH", "load_document", "load_option_specs", "load_schema"]
