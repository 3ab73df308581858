# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Token parser that resolves switches against an :class:`OptionSchema`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from .errors import (
    OptionError,
    missing_required_option,
    missing_required_pair,
    missing_value,
    unknown_option,
)
from .option import Option, OptionKind
from .schema import OptionSchema
from .types import INLINE_SEPARATOR, LONG_PREFIX, SHORT_PREFIX, OptionValue

LOGGER = logging.getLogger(__name__)

ParseCallback: TypeAlias = Callable[[OptionError | bool | None, tuple[Option, ...] | None], None]


class ErrorPolicy(str, Enum):
    """How the parser reacts once an error has been found."""

    FAIL_FAST = "fail-fast"
    COLLECT = "collect"

    @classmethod
    def from_raw(cls, raw: str | ErrorPolicy) -> ErrorPolicy:
        if isinstance(raw, cls):
            return raw
        return cls(raw.strip().lower().replace("_", "-"))


@dataclass(frozen=True, slots=True)
class Switch:
    """A token recognised as a switch."""

    token: str
    code: str
    inline_value: str | None
    long_form: bool


def classify_token(token: str) -> Switch | None:
    """Split a switch token into its code and optional inline value.

    Long switches (``--code``) are lowercased before the value is split off,
    short switches (``-code``) keep their case. The inline value keeps its
    original case and everything after the first ``=``.

    Args:
        token: Raw argument token.

    Returns:
        Switch | None: Parsed switch, or ``None`` when ``token`` has no dash prefix.
    """

    if token.startswith(LONG_PREFIX):
        body, long_form = token[len(LONG_PREFIX) :], True
    elif token.startswith(SHORT_PREFIX):
        body, long_form = token[len(SHORT_PREFIX) :], False
    else:
        return None

    index = body.find(INLINE_SEPARATOR)
    if index >= 1:
        code, inline_value = body[:index], body[index + 1 :]
    else:
        code, inline_value = body, None
    if long_form:
        code = code.lower()
    return Switch(token=token, code=code, inline_value=inline_value, long_form=long_form)


def _looks_like_switch(token: str | None) -> bool:
    """Return ``True`` when ``token`` cannot serve as a value; an empty token counts as absent."""

    return not token or token.startswith(SHORT_PREFIX)


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of a single parse pass.

    ``options`` are copies of the schema's definitions carrying the parsed
    values; the schema itself is left untouched.
    """

    options: tuple[Option, ...]
    errors: tuple[OptionError, ...] = ()
    help_requested: bool = False
    skipped: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors and not self.help_requested

    @property
    def error(self) -> OptionError | None:
        return self.errors[0] if self.errors else None

    def values(self) -> dict[str, OptionValue]:
        """Return the ``get_id() -> get_value()`` mapping hosts build configuration from."""

        return {option.get_id(): option.get_value() for option in self.options}

    def get(self, option_id: str) -> Option | None:
        for option in self.options:
            if option.get_id() == option_id or option.id == option_id:
                return option
        return None


@dataclass(slots=True)
class _ParseState:
    """Per-call scratch state; discarded once the outcome is built."""

    values: dict[str, OptionValue]
    errors: list[OptionError] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    help_requested: bool = False


@dataclass(slots=True)
class OptionParser:
    """Parse argument tokens against ``schema``.

    Under :attr:`ErrorPolicy.FAIL_FAST` scanning stops at the first unknown
    option or missing value and the required-option pass is skipped. Under
    :attr:`ErrorPolicy.COLLECT` every error is gathered and the required
    pass always runs. A help switch stops parsing under either policy.
    """

    schema: OptionSchema
    policy: ErrorPolicy = ErrorPolicy.FAIL_FAST

    def parse(self, tokens: Sequence[str], callback: ParseCallback | None = None) -> ParseOutcome:
        """Parse ``tokens``; the first token is the program name and is skipped.

        Args:
            tokens: Full argument vector including the program name.
            callback: Optional ``(error, options)`` receiver. It sees
                ``(True, None)`` for a help request, ``(error, None)`` per
                reported error and ``(None, options)`` on success.

        Returns:
            ParseOutcome: Parsed values, errors and help state.
        """

        state = _ParseState(values={option.get_id(): option.get_value() for option in self.schema})
        self._scan(tokens, state)
        if not state.help_requested and (self.policy is ErrorPolicy.COLLECT or not state.errors):
            self._check_required(state)

        outcome = ParseOutcome(
            options=tuple(option.with_value(state.values[option.get_id()]) for option in self.schema),
            errors=tuple(state.errors),
            help_requested=state.help_requested,
            skipped=tuple(state.skipped),
        )
        if callback is not None:
            _deliver(outcome, callback)
        return outcome

    def _scan(self, tokens: Sequence[str], state: _ParseState) -> None:
        index = 1
        while index < len(tokens):
            token = tokens[index]
            index += 1
            switch = classify_token(token)
            if switch is None:
                LOGGER.debug("skipping stray token %r", token)
                state.skipped.append(token)
                continue

            option = self.schema.find_option(switch.code, long_form=switch.long_form)
            if option is None:
                if self._report(state, unknown_option(switch.code)):
                    return
                continue
            if option.kind is OptionKind.HELP:
                LOGGER.debug("help requested via %r", token)
                state.help_requested = True
                return

            key = option.get_id()
            next_token = tokens[index] if index < len(tokens) else None
            if switch.inline_value is not None:
                state.values[key] = switch.inline_value
            elif _looks_like_switch(next_token):
                if option.value_is_required() and state.values[key] is None:
                    if self._report(state, missing_value(switch.code)):
                        return
                    continue
                state.values[key] = True
            else:
                state.values[key] = next_token
                index += 1

    def _check_required(self, state: _ParseState) -> None:
        reported_pairs: set[frozenset[str]] = set()
        for option in self.schema:
            has_value = state.values[option.get_id()] is not None
            if isinstance(option.required, str):
                partner = self.schema.find_option(option.required)
                if partner is None or has_value or state.values[partner.get_id()] is not None:
                    continue
                pair = frozenset((option.get_id(), partner.get_id()))
                if pair in reported_pairs:
                    continue
                reported_pairs.add(pair)
                error = missing_required_pair(option.get_code(), partner.get_code())
            elif option.required and not has_value:
                error = missing_required_option(option.get_code())
            else:
                continue
            if self._report(state, error):
                return

    def _report(self, state: _ParseState, error: OptionError) -> bool:
        """Record ``error``; return ``True`` when parsing should stop."""

        LOGGER.debug("parse error: %s", error.msg)
        state.errors.append(error)
        return self.policy is ErrorPolicy.FAIL_FAST


def _deliver(outcome: ParseOutcome, callback: ParseCallback) -> None:
    if outcome.help_requested:
        callback(True, None)
        return
    for error in outcome.errors:
        callback(error, None)
    if not outcome.errors:
        callback(None, outcome.options)


def parse_args(
    schema: OptionSchema,
    tokens: Sequence[str],
    callback: ParseCallback | None = None,
    *,
    policy: ErrorPolicy = ErrorPolicy.FAIL_FAST,
) -> ParseOutcome:
    """Parse ``tokens`` against ``schema`` with a throwaway :class:`OptionParser`."""

    return OptionParser(schema, policy=policy).parse(tokens, callback)


def as_config(options: Sequence[Option], *, with_defaults: bool = False) -> Mapping[str, object]:
    """Return ``get_id() -> value`` for ``options``.

    Args:
        options: Options returned by a successful parse.
        with_defaults: Fall back to declared defaults for unset options.

    Returns:
        Mapping[str, object]: Configuration keyed by camelCase id.
    """

    if with_defaults:
        return {option.get_id(): option.get_value_or_default() for option in options}
    return {option.get_id(): option.get_value() for option in options}


__all__ = [
    "ErrorPolicy",
    "OptionParser",
    "ParseCallback",
    "ParseOutcome",
    "Switch",
    "as_config",
    "classify_token",
    "parse_args",
]
