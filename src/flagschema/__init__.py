# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declarative command-line option schemas with a token parser and usage banners."""

from __future__ import annotations

from importlib import metadata

from .errors import ErrorKind, OptionError, SchemaIntegrityError, SchemaValidationError, generate_error
from .option import Option, OptionKind, OptionValueSpec
from .parser import ErrorPolicy, OptionParser, ParseOutcome, as_config, parse_args
from .schema import OptionSchema, create_schema

__all__ = [
    "ErrorKind",
    "ErrorPolicy",
    "Option",
    "OptionError",
    "OptionKind",
    "OptionParser",
    "OptionSchema",
    "OptionValueSpec",
    "ParseOutcome",
    "SchemaIntegrityError",
    "SchemaValidationError",
    "__version__",
    "as_config",
    "create_schema",
    "generate_error",
    "parse_args",
]

try:
    __version__ = metadata.version("flagschema")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
