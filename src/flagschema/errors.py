# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Error records reported by the parser and exceptions raised for bad schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .types import DEFAULT_ERROR_CODE, JSONValue


class SchemaIntegrityError(RuntimeError):
    """Raised when an option definition violates schema invariants."""


class SchemaValidationError(RuntimeError):
    """Raised when a spec document fails structural schema validation."""


class ErrorKind(str, Enum):
    """Enumerate the failures a parse can report."""

    UNKNOWN_OPTION = "unknown-option"
    MISSING_VALUE = "missing-value"
    MISSING_REQUIRED_OPTION = "missing-required-option"
    MISSING_REQUIRED_PAIR = "missing-required-pair"


@dataclass(frozen=True, slots=True)
class OptionError:
    """Error delivered through the parse result channel."""

    msg: str
    code: int = DEFAULT_ERROR_CODE
    kind: ErrorKind | None = None

    def as_dict(self) -> dict[str, JSONValue]:
        """Return the ``{msg, code}`` payload hosts expect."""

        return {"msg": self.msg, "code": self.code}


def generate_error(msg: str | None = None, code: int | None = None, *, kind: ErrorKind | None = None) -> OptionError:
    """Create an :class:`OptionError`, falling back to ``-1`` for a missing code.

    Args:
        msg: Message text; ``None`` becomes an empty string.
        code: Numeric error code; ``None`` and ``0`` become ``-1``.
        kind: Optional classification of the failure.

    Returns:
        OptionError: Frozen error record.
    """

    return OptionError(msg=msg or "", code=code or DEFAULT_ERROR_CODE, kind=kind)


def unknown_option(code: str) -> OptionError:
    """Return the error for a switch that matches no registered option."""

    return generate_error(f"{code} not found in options", kind=ErrorKind.UNKNOWN_OPTION)


def missing_value(code: str) -> OptionError:
    """Return the error for a value switch given without a value."""

    return generate_error(f"{code} requires a value", kind=ErrorKind.MISSING_VALUE)


def missing_required_option(code: str | None) -> OptionError:
    """Return the error for a required option left unset."""

    return generate_error(f"{code} is required", kind=ErrorKind.MISSING_REQUIRED_OPTION)


def missing_required_pair(first: str | None, second: str | None) -> OptionError:
    """Return the error for a required pair where neither side was set."""

    return generate_error(f"{first} -OR- {second} is required", kind=ErrorKind.MISSING_REQUIRED_PAIR)


__all__ = (
    "ErrorKind",
    "OptionError",
    "SchemaIntegrityError",
    "SchemaValidationError",
    "generate_error",
    "missing_required_option",
    "missing_required_pair",
    "missing_value",
    "unknown_option",
)
