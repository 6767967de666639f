# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers for the plan CLI implementation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from ....config import Config, ConfigError, load_config
from ....options import Options, OptionsError, OptionValue
from ....tools import CommandArgs, RunningTool, ToolDefinition, ToolRegistry, build_command, render_command
from ...shared import CLIError, CLILogger

INVALID_INPUT_EXIT_CODE: Final[int] = 2


@dataclass(frozen=True, slots=True)
class PlannedTool:
    """Running tool paired with its definition and command line."""

    tool: RunningTool
    definition: ToolDefinition
    command: CommandArgs

    @property
    def name(self) -> str:
        return self.tool.name

    @property
    def command_line(self) -> str:
        return render_command(self.command)


@dataclass(frozen=True, slots=True)
class RunPlan:
    """Everything the external executor needs for one invocation."""

    options: Options
    common_root: str
    tools: tuple[PlannedTool, ...]

    @property
    def executable(self) -> tuple[PlannedTool, ...]:
        return tuple(planned for planned in self.tools if planned.tool.is_executable)

    @property
    def missing(self) -> tuple[PlannedTool, ...]:
        return tuple(planned for planned in self.tools if not planned.tool.is_executable)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable view of the plan."""

        return {
            "output": self.options.output_mode,
            "isParallel": self.options.is_parallel,
            "isSavedToFiles": self.options.is_saved_to_files,
            "isOutputPrinted": self.options.is_output_printed,
            "hasReport": self.options.has_report,
            "buildDir": self.options.build_dir,
            "commonRootPath": self.common_root,
            "tools": [
                {
                    "name": planned.name,
                    "isExecutable": planned.tool.is_executable,
                    "allowedErrorsCount": planned.tool.allowed_errors_count,
                    "errorsType": planned.tool.errors_type,
                    "command": planned.command_line,
                }
                for planned in self.tools
            ],
        }


def build_options(raw: Mapping[str, OptionValue], *, logger: CLILogger) -> Options:
    """Return validated options for ``raw`` CLI values.

    Raises:
        CLIError: When the options are malformed.
    """

    try:
        return Options(raw)
    except OptionsError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=INVALID_INPUT_EXIT_CODE) from exc


def load_project_config(options: Options, *, logger: CLILogger) -> Config:
    """Return the project configuration selected by the ``config`` option.

    Raises:
        CLIError: When the configuration file cannot be loaded.
    """

    logger.debug(config=options.config_dir or ".")
    try:
        return load_config(options.config_dir)
    except ConfigError as exc:
        message = f"Failed to load configuration: {exc}"
        logger.fail(message)
        raise CLIError(message, exit_code=INVALID_INPUT_EXIT_CODE) from exc


def build_run_plan(
    options: Options,
    config: Config,
    registry: ToolRegistry,
    *,
    logger: CLILogger,
) -> RunPlan:
    """Resolve running tools and their commands.

    Args:
        options: Effective options.
        config: Project configuration.
        registry: Known tools.
        logger: Logger receiving debug output.

    Returns:
        RunPlan: Ordered plan.

    Raises:
        CLIError: When a configured threshold is malformed.
    """

    try:
        running = options.build_running_tools(registry, config)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=INVALID_INPUT_EXIT_CODE) from exc

    planned: list[PlannedTool] = []
    for name, tool in running.items():
        definition = registry[name]
        command = build_command(definition, options, config)
        logger.debug(tool=name, executable=tool.is_executable, allowed=tool.allowed_errors_count)
        planned.append(PlannedTool(tool=tool, definition=definition, command=command))
    return RunPlan(options=options, common_root=options.get_common_root_path(), tools=tuple(planned))


__all__ = [
    "INVALID_INPUT_EXIT_CODE",
    "PlannedTool",
    "RunPlan",
    "build_options",
    "build_run_plan",
    "load_project_config",
]
