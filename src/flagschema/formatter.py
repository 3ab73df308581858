# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Usage banner rendering for option schemas."""

from __future__ import annotations

from collections.abc import Iterable

from .option import Option, OptionKind
from .types import BANNER_INDENT, INDENTED_RULE_WIDTH, LONG_PREFIX, RULE_WIDTH, SHORT_PREFIX
from .utils import display_value


def format_normal(option: Option) -> str:
    """Render a switch line such as ``   -u, --url[=]: a URL to load``."""

    text = BANNER_INDENT
    if option.short_code:
        text += f"{SHORT_PREFIX}{option.short_code}, "
    if option.long_code:
        text += f"{LONG_PREFIX}{option.long_code}"
    if option.value_is_required():
        text += "[=]"
    text += ": "
    if option.description:
        text += option.description
    if option.has_default_value():
        text += f" [default: {display_value(option.value.default)}]"
    return text + "\n"


def format_separator(option: Option) -> str:
    """Render a blank-line block, optionally led by a horizontal rule.

    A description starting with ``--`` draws a full-width rule and one
    starting with `` --`` draws an indented rule. The block ends with
    ``data["length"]`` newlines (one by default).
    """

    text = ""
    description = option.description or ""
    if description.startswith("--"):
        text += "\n" + "-" * RULE_WIDTH
    elif description.startswith(" --"):
        text += "\n" + BANNER_INDENT + "-" * INDENTED_RULE_WIDTH
    length = option.data.get("length") if option.has_data() else 1
    return text + "\n" * (length if isinstance(length, int) else 1)


def format_note(option: Option) -> str:
    if option.description:
        return f"{BANNER_INDENT}NOTE: {option.description})\n"
    return ""


def format_footer(option: Option) -> str:
    if option.description:
        return f"{option.description}\n"
    return ""


def format_option(option: Option) -> str:
    """Dispatch ``option`` to the renderer selected by its kind."""

    match option.kind:
        case OptionKind.SEPARATOR:
            return format_separator(option)
        case OptionKind.NOTE:
            return format_note(option)
        case OptionKind.FOOTER:
            return format_footer(option)
        case OptionKind.NORMAL | OptionKind.HELP | _:
            return format_normal(option)


def banner_header(program: str) -> str:
    return f"\nUsage: {program} [options]\n\nOptions (case-sensitive):\n\n"


def render_banner(program: str, options: Iterable[Option]) -> str:
    """Return the usage banner for ``options`` in registration order.

    Args:
        program: Program name shown in the usage header.
        options: Options to render.

    Returns:
        str: Complete banner text.
    """

    return banner_header(program) + "".join(format_option(option) for option in options)


__all__ = [
    "banner_header",
    "format_footer",
    "format_normal",
    "format_note",
    "format_option",
    "format_separator",
    "render_banner",
]
