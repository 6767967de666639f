# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command resolving which tools run and how."""

from __future__ import annotations

import json
from typing import Annotated

import typer

from ....options.models import (
    DEFAULT_ANALYZED_DIRS,
    DEFAULT_BUILD_DIR,
    DEFAULT_IGNORED_DIRS,
    DEFAULT_TOOLS,
    EXECUTION_PARALLEL,
    OUTPUT_FILE,
)
from ....tools import DEFAULT_REGISTRY, initialize_registry
from ...shared import CLIError, build_cli_logger
from .rendering import render_plan
from .services import build_options, build_run_plan, load_project_config


def plan_command(
    analyzed_dirs: Annotated[
        str, typer.Option("--analyzed-dirs", help="Comma separated directories to analyze.")
    ] = DEFAULT_ANALYZED_DIRS,
    build_dir: Annotated[str, typer.Option("--build-dir", help="Directory receiving tool artifacts.")] = DEFAULT_BUILD_DIR,
    ignored_dirs: Annotated[
        str, typer.Option("--ignored-dirs", help="Comma separated directories excluded from analysis.")
    ] = DEFAULT_IGNORED_DIRS,
    ignored_files: Annotated[
        str, typer.Option("--ignored-files", help="Comma separated files excluded from analysis.")
    ] = "",
    tools: Annotated[
        str, typer.Option("--tools", help="Ordered tools to run; append ':N' to allow N errors.")
    ] = DEFAULT_TOOLS,
    output: Annotated[str, typer.Option("--output", help="Result destination: 'file' or 'cli'.")] = OUTPUT_FILE,
    config: Annotated[str, typer.Option("--config", help="Directory containing .phpqa.toml.")] = "",
    verbose: Annotated[bool, typer.Option("--verbose/--quiet", help="Print tool output in file mode.")] = True,
    report: Annotated[bool, typer.Option("--report/--no-report", help="Build the aggregate report.")] = False,
    execution: Annotated[
        str, typer.Option("--execution", help="'parallel' or any other value for serial execution.")
    ] = EXECUTION_PARALLEL,
    as_json: Annotated[bool, typer.Option("--json", help="Emit the plan as JSON.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in log output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log resolution details.")] = False,
) -> None:
    """Show the tools that would run and the policy they run under.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    logger = build_cli_logger(emoji=not no_emoji, debug=debug)
    raw = {
        "analyzedDirs": analyzed_dirs,
        "buildDir": build_dir,
        "ignoredDirs": ignored_dirs,
        "ignoredFiles": ignored_files,
        "tools": tools,
        "output": output,
        "config": config,
        "verbose": verbose,
        "report": report,
        "execution": execution,
    }
    try:
        options = build_options(raw, logger=logger)
        project_config = load_project_config(options, logger=logger)
        plan = build_run_plan(options, project_config, initialize_registry(DEFAULT_REGISTRY), logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    if as_json:
        logger.echo(json.dumps(plan.to_dict(), indent=2))
    else:
        render_plan(plan, logger.console)
        for planned in plan.missing:
            logger.warn(f"{planned.name} is not installed ({planned.definition.command} not found)")

    if not plan.executable:
        if not as_json:
            logger.fail("No executable tools selected")
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


__all__ = ["plan_command"]
