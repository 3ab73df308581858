# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser settings sourced from callers or the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .parser import ErrorPolicy

PROGRAM_ENV: Final[str] = "FLAGSCHEMA_PROGRAM"
POLICY_ENV: Final[str] = "FLAGSCHEMA_ERROR_POLICY"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ParserSettings(BaseModel):
    """Settings controlling how a schema is parsed and presented."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    program: str | None = None
    policy: ErrorPolicy = ErrorPolicy.FAIL_FAST

    @field_validator("policy", mode="before")
    @classmethod
    def _normalise_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower().replace("_", "-")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> ParserSettings:
        """Build settings from ``FLAGSCHEMA_*`` variables, then apply ``overrides``.

        Args:
            environ: Environment mapping; defaults to :data:`os.environ`.
            **overrides: Explicit values that win over the environment when not ``None``.

        Returns:
            ParserSettings: Validated settings.

        Raises:
            ConfigError: If a value fails validation.
        """

        env = os.environ if environ is None else environ
        payload: dict[str, object] = {}
        if env.get(PROGRAM_ENV):
            payload["program"] = env[PROGRAM_ENV]
        if env.get(POLICY_ENV):
            payload["policy"] = env[POLICY_ENV]
        payload.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ConfigError(f"invalid parser settings: {exc}") from exc


__all__ = ["POLICY_ENV", "PROGRAM_ENV", "ConfigError", "ParserSettings"]
