# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option schema and settings model of the page-capture host.

The host renders a URL or HTML string to an image. Only its command-line
surface lives here: the option specs it registers and the settings it builds
from a successful parse.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .option import Option
from .schema import OptionSchema
from .types import JSONValue

CAPTURE_PROGRAM: Final[str] = "html-capture"

CAPTURE_OPTION_SPECS: Final[tuple[Mapping[str, JSONValue], ...]] = (
    {
        "longCode": "url",
        "shortCode": "u",
        "description": "a URL to load",
        "value": {"required": True},
        "required": "html",
    },
    {
        "longCode": "html",
        "shortCode": "h",
        "description": "string of HTML to be loaded (HTML must be valid-ish)",
        "value": {"required": True},
        "required": "url",
    },
    {"id": "note1", "kind": "note", "description": "If both url and html are provided url takes precedence"},
    {
        "longCode": "output",
        "shortCode": "o",
        "description": "the local path of the file to save",
        "value": {"required": True},
        "required": "output-base64",
    },
    {
        "longCode": "output-base64",
        "shortCode": "O",
        "description": "output page image as base64 encoded string",
        "value": {"default": False},
        "required": "output",
    },
    {
        "id": "note2",
        "kind": "note",
        "description": "If both output and output-base64 are provided output takes precedence",
    },
    {
        "longCode": "output-base64-format",
        "shortCode": "OF",
        "description": "output page image base64 format",
        "value": {"required": True, "default": "PNG"},
    },
    {"id": "sep1", "kind": "separator", "description": " --"},
    {"longCode": "width", "shortCode": "W", "description": "width of the page viewport", "value": {"required": True}},
    {
        "longCode": "height",
        "shortCode": "H",
        "description": "height of the page viewport",
        "value": {"required": True},
    },
    {
        "longCode": "scale",
        "shortCode": "S",
        "description": "zoomFactor of the page",
        "value": {"required": True, "default": 1.0},
    },
    {"id": "sep2", "kind": "separator", "description": " --"},
    {
        "longCode": "waitfor-interval",
        "shortCode": "wfi",
        "description": "time (in ms) to run waitFor",
        "value": {"required": True, "default": 150},
    },
    {
        "longCode": "waitfor-timeout",
        "shortCode": "wft",
        "description": "maximum wait time (in ms) for waitFor to run",
        "value": {"required": True, "default": 5000},
    },
    {"id": "sep3", "kind": "separator", "description": " --"},
    {
        "longCode": "disable-javascript",
        "description": "disable page settings javascriptEnabled",
        "value": {"required": True},
    },
    {
        "longCode": "disable-load-images",
        "description": "disable page settings loadImages",
        "value": {"required": True},
    },
    {
        "longCode": "enable-local-to-remote-url-access",
        "description": "enable page settings localToRemoteUrlAccessEnabled",
        "value": {"default": True},
    },
    {"longCode": "user-agent", "description": "set the page settings userAgent", "value": {"required": True}},
    {"longCode": "username", "description": "set the page settings userName", "value": {"required": True}},
    {"longCode": "password", "description": "set the page settings password", "value": {"required": True}},
    {
        "longCode": "enable-xss-auditing",
        "description": "enable page settings XSSAuditingEnabled",
        "value": {"default": True},
    },
    {
        "longCode": "disable-web-security",
        "description": "disables page settings webSecurityEnabled",
        "value": {"default": True},
    },
    {"id": "sep4", "kind": "separator", "description": " --", "length": 1},
    {"longCode": "debug", "description": "prints more verbose output", "value": {"default": False}},
    {"longCode": "help", "kind": "help", "description": "displays this usage message"},
    {"id": "footer1", "kind": "footer", "description": ""},
)


def build_capture_schema(program: str = CAPTURE_PROGRAM) -> OptionSchema:
    """Return a schema holding the capture host's options."""

    return OptionSchema(program=program).add_option(CAPTURE_OPTION_SPECS)


class CaptureSettings(BaseModel):
    """Host configuration assembled from parsed capture options.

    Field names are the snake_case form of the options' camelCase ids.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    url: str | None = None
    html: str | None = None
    output: str | None = None
    output_base64: bool = False
    output_base64_format: str = "PNG"
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    scale: float = Field(default=1.0, gt=0)
    waitfor_interval: int = Field(default=150, ge=0)
    waitfor_timeout: int = Field(default=5000, ge=0)
    disable_javascript: bool = False
    disable_load_images: bool = False
    enable_local_to_remote_url_access: bool = True
    user_agent: str | None = None
    username: str | None = None
    password: str | None = None
    enable_xss_auditing: bool = True
    disable_web_security: bool = True
    debug: bool = False

    @classmethod
    def from_options(cls, options: Sequence[Option]) -> CaptureSettings:
        """Validate settings from parsed options, applying declared defaults.

        Raises:
            pydantic.ValidationError: If a value cannot be coerced.
        """

        payload = {
            option.get_id(): option.get_value_or_default()
            for option in options
            if option.get_value_or_default() is not None
        }
        return cls.model_validate(payload)

    @property
    def source(self) -> tuple[str, str] | None:
        """Return ``("url", ...)`` or ``("html", ...)``; a URL wins over HTML."""

        if self.url:
            return "url", self.url
        if self.html:
            return "html", self.html
        return None

    @property
    def viewport(self) -> tuple[int, int] | None:
        if self.width and self.height:
            return self.width, self.height
        return None

    @property
    def writes_file(self) -> bool:
        """Return ``True`` when output goes to a file rather than base64 on stdout."""

        return bool(self.output)


__all__ = ["CAPTURE_OPTION_SPECS", "CAPTURE_PROGRAM", "CaptureSettings", "build_capture_schema"]
