# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option definition models used to declare command-line switches."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Final

from .errors import SchemaIntegrityError
from .types import DefaultValue, JSONValue, OptionValue, RequiredSpec
from .utils import (
    current_value,
    default_value,
    expect_mapping,
    freeze_json_mapping,
    optional_bool,
    optional_string,
    required_spec,
    to_camel_case,
)


class OptionKind(str, Enum):
    """Formatting and parse-time role of an option."""

    NORMAL = "normal"
    HELP = "help"
    SEPARATOR = "separator"
    NOTE = "note"
    FOOTER = "footer"

    @classmethod
    def from_raw(cls, raw: JSONValue | None, *, context: str = "option") -> OptionKind:
        """Return the kind named by ``raw``, defaulting to :attr:`NORMAL`.

        Args:
            raw: Kind name (case-insensitive), an ``OptionKind`` or ``None``.
            context: Human-readable context used in error messages.

        Returns:
            OptionKind: Matching enum member.

        Raises:
            SchemaIntegrityError: If ``raw`` does not name a known kind.
        """

        if raw is None:
            return cls.NORMAL
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.lower())
            except ValueError:
                pass
        raise SchemaIntegrityError(f"{context}: unknown option kind '{raw}'")


_LONG_CODE_KEYS: Final[tuple[str, ...]] = ("longCode", "lCode")
_SHORT_CODE_KEYS: Final[tuple[str, ...]] = ("shortCode", "sCode")
_DESCRIPTION_KEYS: Final[tuple[str, ...]] = ("description", "desc")
_KIND_KEYS: Final[tuple[str, ...]] = ("kind", "type")
_KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    (*_LONG_CODE_KEYS, *_SHORT_CODE_KEYS, *_DESCRIPTION_KEYS, *_KIND_KEYS, "id", "value", "required", "data"),
)


def _first_present(data: Mapping[str, JSONValue], keys: tuple[str, ...]) -> JSONValue | None:
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None


@dataclass(frozen=True, slots=True)
class OptionValueSpec:
    """Value holder declared for an option.

    ``required`` means a value token must follow the switch; it is unrelated
    to :attr:`Option.required`.
    """

    current: OptionValue = None
    default: DefaultValue = None
    required: bool = False

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue] | None, *, context: str) -> OptionValueSpec:
        """Create a value spec from the ``value`` entry of an option spec."""

        if data is None:
            return OptionValueSpec()
        mapping = expect_mapping(data, key="value", context=context)
        return OptionValueSpec(
            current=current_value(mapping.get("current"), context=context),
            default=default_value(mapping.get("default"), context=context),
            required=optional_bool(mapping.get("required"), key="value.required", context=context),
        )


@dataclass(frozen=True, slots=True)
class Option:
    """Declarative command-line switch.

    Instances are immutable; a parse returns copies produced by
    :meth:`with_value` rather than writing into the schema's definitions.
    """

    id: str
    long_code: str | None = None
    short_code: str | None = None
    description: str | None = None
    kind: OptionKind = OptionKind.NORMAL
    value: OptionValueSpec = field(default_factory=OptionValueSpec)
    required: RequiredSpec = False
    data: Mapping[str, JSONValue] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise SchemaIntegrityError("option: expected a non-empty id, longCode or shortCode")

    def get_id(self) -> str:
        """Return the camelCase id used as the configuration key."""

        return to_camel_case(self.id)

    def get_code(self) -> str | None:
        """Return the long code, else the short code, for messages."""

        return self.long_code or self.short_code or None

    def get_value(self) -> OptionValue:
        return self.value.current

    def get_value_or_default(self) -> DefaultValue:
        """Return the current value, falling back to the declared default."""

        if self.value.current is not None:
            return self.value.current
        return self.value.default

    def has_default_value(self) -> bool:
        """Return ``True`` when a default worth displaying is declared.

        ``None``, ``False`` and ``""`` do not count as defaults.
        """

        default = self.value.default
        if default is None or default == "":
            return False
        return not (isinstance(default, bool) and not default)

    def value_is_required(self) -> bool:
        return self.value.required

    def has_data(self) -> bool:
        length = self.data.get("length")
        return isinstance(length, int) and not isinstance(length, bool) and length > 0

    def with_value(self, current: OptionValue) -> Option:
        """Return a copy of the option carrying ``current`` as its value."""

        return replace(self, value=replace(self.value, current=current))

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str = "option") -> Option:
        """Create an ``Option`` from a JSON-like spec.

        Unrecognised keys with truthy values are folded into ``data`` so
        hosts can carry extra metadata (for instance a separator ``length``).

        Args:
            data: Mapping describing a single option.
            context: Human-readable context used in error messages.

        Returns:
            Option: Frozen option definition.

        Raises:
            SchemaIntegrityError: If the spec is malformed or has no usable id.
        """

        long_code = optional_string(_first_present(data, _LONG_CODE_KEYS), key="longCode", context=context)
        short_code = optional_string(_first_present(data, _SHORT_CODE_KEYS), key="shortCode", context=context)
        explicit_id = optional_string(data.get("id"), key="id", context=context)
        option_id = explicit_id or long_code or short_code
        if option_id is None:
            raise SchemaIntegrityError(f"{context}: expected one of 'id', 'longCode' or 'shortCode'")
        scope = f"{context}[{option_id}]"

        raw_data = data.get("data")
        extra: dict[str, JSONValue] = dict(expect_mapping(raw_data, key="data", context=scope)) if raw_data else {}
        for key, item in data.items():
            if key not in _KNOWN_KEYS and item:
                extra[key] = item

        return Option(
            id=option_id,
            long_code=long_code,
            short_code=short_code,
            description=optional_string(_first_present(data, _DESCRIPTION_KEYS), key="description", context=scope),
            kind=OptionKind.from_raw(_first_present(data, _KIND_KEYS), context=scope),
            value=OptionValueSpec.from_mapping(data.get("value"), context=scope),
            required=required_spec(data.get("required"), context=scope),
            data=freeze_json_mapping(extra, context=f"{scope}.data"),
        )


__all__ = ["Option", "OptionKind", "OptionValueSpec"]
