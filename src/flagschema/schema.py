# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered option registry with lookup and banner generation."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from .errors import SchemaIntegrityError
from .formatter import render_banner
from .option import Option
from .types import JSONValue

LOGGER = logging.getLogger(__name__)

OptionSpec: TypeAlias = Option | Mapping[str, JSONValue]


@dataclass(slots=True)
class OptionSchema:
    """Registry of option definitions kept in registration order."""

    program: str = ""
    _options: list[Option] = field(default_factory=list, init=False, repr=False)

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def add_option(self, spec: OptionSpec | Sequence[OptionSpec]) -> OptionSchema:
        """Register one spec or a sequence of specs.

        The first registration of an id, long code or short code wins;
        later specs that collide are dropped without error.

        Args:
            spec: Option, mapping spec, or a sequence of either.

        Returns:
            OptionSchema: ``self`` to allow chaining.

        Raises:
            SchemaIntegrityError: If a mapping spec is malformed.
        """

        if isinstance(spec, (Option, Mapping)):
            self._register(spec, context="option")
            return self
        for index, item in enumerate(spec):
            self._register(item, context=f"options[{index}]")
        return self

    def _register(self, spec: OptionSpec, *, context: str) -> None:
        option = spec if isinstance(spec, Option) else Option.from_mapping(spec, context=context)
        existing = self._collision(option)
        if existing is not None:
            LOGGER.debug("dropping duplicate option %s; %s registered first", option.id, existing.id)
            return
        self._options.append(option)

    def _collision(self, option: Option) -> Option | None:
        found = self.find_option(option.get_id())
        if found is not None:
            return found
        for candidate in self._options:
            if option.long_code and _fold(candidate.long_code) == _fold(option.long_code):
                return candidate
            if option.short_code and candidate.short_code == option.short_code:
                return candidate
        return None

    def find_option(self, token: str | None, *, long_form: bool = False) -> Option | None:
        """Return the first option whose normalised id, long code or short code equals ``token``.

        With ``long_form`` the id and long code are compared case-insensitively,
        as they are for ``--code`` switches. Short codes always match exactly.
        """

        if not token:
            return None
        folded = _fold(token)
        for option in self._options:
            if long_form and folded in (_fold(option.get_id()), _fold(option.long_code)):
                return option
            if option.get_id() == token or option.long_code == token or option.short_code == token:
                return option
        return None

    def validate_references(self) -> None:
        """Check that every string ``required`` names a registered option.

        Raises:
            SchemaIntegrityError: If a partner id cannot be resolved.
        """

        for option in self._options:
            if isinstance(option.required, str) and self.find_option(option.required) is None:
                raise SchemaIntegrityError(
                    f"option[{option.id}]: required partner '{option.required}' is not registered",
                )

    def get_banner(self, program: str | None = None) -> str:
        """Return the usage banner; ``program`` overrides the schema's name."""

        return render_banner(program or self.program, self._options)


def _fold(code: str | None) -> str | None:
    return code.lower() if code else None


def create_schema(program: str = "", specs: Sequence[OptionSpec] = ()) -> OptionSchema:
    """Return a schema named ``program`` with ``specs`` registered."""

    return OptionSchema(program=program).add_option(specs)


__all__ = ["OptionSchema", "OptionSpec", "create_schema"]
