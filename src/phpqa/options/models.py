# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed raw options and tool selector parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError

OptionValue: TypeAlias = str | bool

OUTPUT_FILE: Final[str] = "file"
OUTPUT_CLI: Final[str] = "cli"
EXECUTION_PARALLEL: Final[str] = "parallel"
DEFAULT_TOOLS: Final[str] = "phploc,phpcpd,phpcs,pdepend,phpmd,phpmetrics"
DEFAULT_ANALYZED_DIRS: Final[str] = "./"
DEFAULT_BUILD_DIR: Final[str] = "build/"
DEFAULT_IGNORED_DIRS: Final[str] = "vendor"
_LIST_SEPARATOR: Final[str] = ","
_THRESHOLD_SEPARATOR: Final[str] = ":"


class OptionsError(ValueError):
    """Raised when raw options carry a value of the wrong type or shape."""


class RawOptions(BaseModel):
    """User supplied settings merged with their defaults.

    Field names are snake_case; the camelCase keys used on the command line
    and in stored presets are accepted as aliases. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    analyzed_dirs: str = Field(default=DEFAULT_ANALYZED_DIRS, alias="analyzedDirs")
    build_dir: str = Field(default=DEFAULT_BUILD_DIR, alias="buildDir")
    ignored_dirs: str = Field(default=DEFAULT_IGNORED_DIRS, alias="ignoredDirs")
    ignored_files: str = Field(default="", alias="ignoredFiles")
    tools: str = DEFAULT_TOOLS
    output: str = OUTPUT_FILE
    config: str = ""
    verbose: bool = True
    report: bool = False
    execution: str = EXECUTION_PARALLEL

    @classmethod
    def from_mapping(cls, raw: Mapping[str, OptionValue]) -> RawOptions:
        """Return validated options built from ``raw``.

        Args:
            raw: Option name to value mapping; camelCase or snake_case keys.

        Returns:
            RawOptions: Options with defaults applied for missing keys.

        Raises:
            OptionsError: If a recognised key holds a value of the wrong type.
        """

        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            raise OptionsError(_describe_validation_error(exc)) from exc


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Single ``tools`` entry: a tool name with an optional error threshold."""

    name: str
    allowed_errors_count: int | None = None

    @classmethod
    def parse(cls, token: str) -> ToolSpec:
        """Return the spec described by ``token`` (``name`` or ``name:N``).

        Args:
            token: Raw entry taken from the ``tools`` option.

        Returns:
            ToolSpec: Parsed tool name and threshold.

        Raises:
            OptionsError: If the threshold suffix is not an integer.
        """

        name, separator, threshold = token.partition(_THRESHOLD_SEPARATOR)
        name = name.strip()
        if not separator:
            return cls(name=name)
        threshold = threshold.strip()
        try:
            count = int(threshold)
        except ValueError as exc:
            raise OptionsError(f"tool '{name}' has a non-integer allowed errors count: {threshold!r}") from exc
        return cls(name=name, allowed_errors_count=count)


def split_list(value: str) -> tuple[str, ...]:
    """Return the trimmed, non-empty entries of a comma separated option."""

    return tuple(item.strip() for item in value.split(_LIST_SEPARATOR) if item.strip())


def parse_tool_specs(value: str) -> tuple[ToolSpec, ...]:
    """Return tool specs in declared order.

    A name declared twice keeps its first position and its last threshold.

    Args:
        value: Raw ``tools`` option.

    Returns:
        tuple[ToolSpec, ...]: Parsed specs with unique names.
    """

    specs: dict[str, ToolSpec] = {}
    for token in split_list(value):
        spec = ToolSpec.parse(token)
        if spec.name:
            specs[spec.name] = spec
    return tuple(specs.values())


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "options"
        problems.append(f"{location}: {error['msg']}")
    return "Invalid options: " + "; ".join(problems)


__all__ = [
    "DEFAULT_ANALYZED_DIRS",
    "DEFAULT_BUILD_DIR",
    "DEFAULT_IGNORED_DIRS",
    "DEFAULT_TOOLS",
    "EXECUTION_PARALLEL",
    "OUTPUT_CLI",
    "OUTPUT_FILE",
    "OptionValue",
    "OptionsError",
    "RawOptions",
    "ToolSpec",
    "parse_tool_specs",
    "split_list",
]
