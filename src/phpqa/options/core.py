# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validated, immutable options for a single analysis run.

:class:`Options` is built once per invocation from the raw option mapping and
answers every question the runner asks afterwards: which directories are
analyzed and where they meet, where artifacts are written, whether output is
printed or saved, whether tools run in parallel, and which tools run with
which error thresholds.
"""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Final

from ..config.models import ConfigError
from ..interfaces.config import ConfigLookupResult, ConfigReader
from ..tools.base import RunningTool, ToolDefinition, ToolDescriptor
from .ignored import IgnoredPaths
from .models import (
    EXECUTION_PARALLEL,
    OUTPUT_CLI,
    OUTPUT_FILE,
    OptionValue,
    RawOptions,
    ToolSpec,
    parse_tool_specs,
    split_list,
)
from .paths import common_root_path, quote

ALLOWED_ERRORS_KEY: Final[str] = "allowedErrorsCount"
_FILE_ONLY_TOOLS: Final[frozenset[str]] = frozenset({"pdepend"})
_ARTIFACT_SEPARATOR: Final[str] = "/"


class Options:
    """Structured configuration derived from user supplied settings."""

    __slots__ = (
        "_analyzed_dirs",
        "_has_report",
        "_ignored_paths",
        "_is_output_printed",
        "_is_parallel",
        "_is_saved_to_files",
        "_raw",
        "_tool_specs",
    )

    def __init__(self, options: Mapping[str, OptionValue] | RawOptions | None = None) -> None:
        """Merge ``options`` with the defaults and derive run policy.

        Args:
            options: Raw option mapping (camelCase or snake_case keys) or an
                already validated :class:`RawOptions`.

        Raises:
            OptionsError: If a recognised option has the wrong type or a tool
                threshold is not an integer.
        """

        if isinstance(options, RawOptions):
            raw = options
        else:
            raw = RawOptions.from_mapping(options or {})
        self._raw = raw
        self._is_saved_to_files = raw.output != OUTPUT_CLI
        self._is_output_printed = raw.verbose if self._is_saved_to_files else True
        self._has_report = raw.report if self._is_saved_to_files else False
        self._is_parallel = raw.execution == EXECUTION_PARALLEL
        self._analyzed_dirs = split_list(raw.analyzed_dirs)
        self._ignored_paths = IgnoredPaths.from_options(raw.ignored_dirs, raw.ignored_files)
        self._tool_specs = parse_tool_specs(raw.tools)

    # ------------------------------------------------------------------
    # Policy flags

    @property
    def raw(self) -> RawOptions:
        return self._raw

    @property
    def is_saved_to_files(self) -> bool:
        return self._is_saved_to_files

    @property
    def is_output_printed(self) -> bool:
        return self._is_output_printed

    @property
    def has_report(self) -> bool:
        return self._has_report

    @property
    def is_parallel(self) -> bool:
        return self._is_parallel

    @property
    def output_mode(self) -> str:
        """Return ``"file"`` or ``"cli"``; unrecognised values count as file output."""

        return OUTPUT_FILE if self._is_saved_to_files else OUTPUT_CLI

    @property
    def build_dir(self) -> str:
        return self._raw.build_dir

    @property
    def analyzed_dirs(self) -> tuple[str, ...]:
        return self._analyzed_dirs

    @property
    def ignored_paths(self) -> IgnoredPaths:
        return self._ignored_paths

    @property
    def tool_specs(self) -> tuple[ToolSpec, ...]:
        return self._tool_specs

    @property
    def config_dir(self) -> str | None:
        """Return the ``config`` option, or ``None`` when it was left blank."""

        return self._raw.config.strip() or None

    # ------------------------------------------------------------------
    # Path helpers

    def get_analyzed_dirs(self, separator: str | None = None) -> list[str] | str:
        """Return analyzed directories wrapped in double quotes.

        Args:
            separator: When given, join the quoted directories with it.

        Returns:
            list[str] | str: One quoted entry per directory, or the joined string.
        """

        quoted = [quote(directory) for directory in self._analyzed_dirs]
        if separator is None:
            return quoted
        return separator.join(quoted)

    def to_file(self, name: str) -> str:
        """Return the quoted artifact path ``build_dir + "/" + name``."""

        return quote(self.raw_file(name))

    def raw_file(self, name: str) -> str:
        """Return ``build_dir + "/" + name``; a trailing slash on ``build_dir`` is kept, giving ``build//name``."""

        return f"{self._raw.build_dir}{_ARTIFACT_SEPARATOR}{name}"

    def get_common_root_path(self, cwd: str | PathLike[str] | Path | None = None) -> str:
        """Return the deepest directory shared by the existing analyzed directories.

        Args:
            cwd: Anchor for relative directories; the working directory by default.

        Returns:
            str: Common root ending with a separator, or ``""`` when no analyzed
            directory exists.
        """

        return common_root_path(self._analyzed_dirs, cwd=cwd)

    # ------------------------------------------------------------------
    # Tool planning

    def build_running_tools(
        self,
        available_tools: Mapping[str, ToolDescriptor],
        config: ConfigReader,
    ) -> dict[str, RunningTool]:
        """Return the tools to run, keyed by name in the order of the ``tools`` option.

        Tools missing from ``available_tools`` are skipped, ``pdepend`` (and any
        tool declaring file-only output) is skipped in cli mode. Every returned
        tool reports whether its backing implementation resolves. An explicit
        ``name:N`` threshold wins over ``<name>.allowedErrorsCount`` from
        ``config``; without either the threshold is ``None`` (unlimited).

        Args:
            available_tools: Known tools mapped to definitions, capability
                objects exposing ``can_load()``, or plain definition mappings.
            config: Collaborator answering ``value("<tool>.allowedErrorsCount")``.

        Returns:
            dict[str, RunningTool]: Ordered run list.

        Raises:
            ConfigError: If a configured threshold is not an integer.
        """

        running: dict[str, RunningTool] = {}
        for spec in self._tool_specs:
            descriptor = available_tools.get(spec.name)
            if descriptor is None:
                continue
            definition = _as_definition(spec.name, descriptor)
            if not self._is_tool_compatible(spec.name, definition):
                continue
            running[spec.name] = RunningTool(
                name=spec.name,
                is_executable=descriptor.can_load() if definition is None else definition.can_load(),
                allowed_errors_count=_resolve_allowed_errors(spec, config),
                errors_type=definition.errors_type if definition is not None else None,
            )
        return running

    def _is_tool_compatible(self, name: str, definition: ToolDefinition | None) -> bool:
        if self._is_saved_to_files:
            return True
        if name in _FILE_ONLY_TOOLS:
            return False
        return definition is None or definition.supports_output(OUTPUT_CLI)

    def __repr__(self) -> str:
        tools = ",".join(spec.name for spec in self._tool_specs)
        return (
            f"Options(output={self.output_mode!r}, parallel={self._is_parallel}, "
            f"analyzed_dirs={list(self._analyzed_dirs)!r}, tools={tools!r})"
        )


def _as_definition(name: str, descriptor: ToolDescriptor) -> ToolDefinition | None:
    if isinstance(descriptor, ToolDefinition):
        return descriptor
    if isinstance(descriptor, Mapping):
        return ToolDefinition.coerce(name, descriptor)
    # capability objects only expose can_load()
    return None


def _resolve_allowed_errors(spec: ToolSpec, config: ConfigReader) -> int | None:
    if spec.allowed_errors_count is not None:
        return spec.allowed_errors_count
    key = f"{spec.name}.{ALLOWED_ERRORS_KEY}"
    return _coerce_threshold(config.value(key), key)


def _coerce_threshold(value: ConfigLookupResult, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ConfigError(f"{key} must be an integer, got {value!r}") from exc
    raise ConfigError(f"{key} must be an integer")


__all__ = ["ALLOWED_ERRORS_KEY", "Options"]
