# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the banner, parse and check commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from ..capture import CAPTURE_PROGRAM, CaptureSettings, build_capture_schema
from ..config import ConfigError, ParserSettings
from ..console import detect_tty
from ..errors import SchemaIntegrityError, SchemaValidationError
from ..loader import load_schema
from ..logging import configure_logging, echo, fail, info, ok, section, warn
from ..parser import OptionParser
from ..schema import OptionSchema

app = typer.Typer(
    name="flagschema",
    help="Inspect declarative option schemas and parse arguments against them.",
    no_args_is_help=True,
)

SCHEMA_OPTION = typer.Option(
    None,
    "--schema",
    "-s",
    help="JSON option spec document; defaults to the page-capture schema.",
)
PROGRAM_OPTION = typer.Option(None, "--program", "-p", help="Program name shown in the usage banner.")


def _resolve_schema(schema_path: Path | None, program: str | None) -> OptionSchema:
    """Return the requested schema or exit with status 2 when it cannot be loaded."""

    if schema_path is None:
        return build_capture_schema(program or CAPTURE_PROGRAM)
    try:
        return load_schema(schema_path, program=program)
    except FileNotFoundError as exc:
        fail(f"schema document not found: {exc}", use_emoji=False)
        raise typer.Exit(code=2) from exc
    except (SchemaIntegrityError, SchemaValidationError) as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=2) from exc


@app.command("banner")
def banner_command(
    schema_path: Path | None = SCHEMA_OPTION,
    program: str | None = PROGRAM_OPTION,
) -> None:
    """Print the usage banner generated from a schema."""

    echo(_resolve_schema(schema_path, program).get_banner())


@app.command("parse")
def parse_command(
    tokens: list[str] | None = typer.Argument(
        None,
        metavar="[-- TOKENS...]",
        help="Argument tokens to parse; place them after '--'.",
    ),
    schema_path: Path | None = SCHEMA_OPTION,
    program: str | None = PROGRAM_OPTION,
    policy: str | None = typer.Option(None, "--policy", help="Error policy: 'fail-fast' or 'collect'."),
    settings: bool = typer.Option(
        False,
        "--settings",
        help="Emit validated page-capture settings instead of raw values.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser decisions to stderr."),
) -> None:
    """Parse tokens against a schema and print the resulting configuration as JSON."""

    configure_logging(verbose=verbose)
    try:
        parser_settings = ParserSettings.from_env(program=program, policy=policy)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--policy") from exc

    schema = _resolve_schema(schema_path, parser_settings.program)
    argv = [schema.program, *(tokens or [])]
    outcome = OptionParser(schema, policy=parser_settings.policy).parse(argv)

    if outcome.help_requested:
        echo(schema.get_banner())
        raise typer.Exit(code=0)
    if outcome.errors:
        message = schema.get_banner()
        for error in outcome.errors:
            message += f"\nError: {error.msg}"
        echo(message + "\n", stderr=True)
        raise typer.Exit(code=1)
    for token in outcome.skipped:
        warn(f"ignored stray token '{token}'", use_emoji=False)

    if settings:
        try:
            capture = CaptureSettings.from_options(outcome.options)
        except ValidationError as exc:
            fail(f"invalid capture settings: {exc}", use_emoji=False)
            raise typer.Exit(code=1) from exc
        echo(capture.model_dump_json(indent=2, by_alias=True) + "\n")
        return
    echo(json.dumps(outcome.values(), indent=2) + "\n")


@app.command("check")
def check_command(
    schema_path: Path = typer.Argument(..., metavar="FILE", help="JSON option spec document to validate."),
) -> None:
    """Validate a spec document and the option references it declares."""

    schema = _resolve_schema(schema_path, None)
    try:
        schema.validate_references()
    except SchemaIntegrityError as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=1) from exc
    section(f"check {schema_path.name}", use_color=detect_tty())
    info(f"program: {schema.program}", use_emoji=False)
    ok(f"{schema_path}: {len(schema)} options registered", use_emoji=False)


def main() -> None:
    """Run the ``flagschema`` console script."""

    app()


__all__ = ["app", "main"]
