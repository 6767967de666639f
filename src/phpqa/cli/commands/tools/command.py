# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing known tools and whether they are installed."""

from __future__ import annotations

from typing import Annotated

import typer
from rich import box
from rich.table import Table

from ....tools import DEFAULT_REGISTRY, ToolRegistry, initialize_registry
from ...shared import build_cli_logger


def build_tools_table(registry: ToolRegistry) -> Table:
    """Return a table describing every registered tool."""

    table = Table(title="Tools", box=box.SIMPLE, expand=True)
    table.add_column("Tool", style="bold")
    table.add_column("Command")
    table.add_column("Installed")
    table.add_column("Output Modes")
    table.add_column("Description", overflow="fold")
    for tool in registry.tools():
        table.add_row(
            tool.name,
            tool.command,
            "yes" if tool.can_load() else "no",
            ", ".join(tool.output_modes),
            tool.description or "-",
        )
    return table


def tools_command(
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in log output.")] = False,
) -> None:
    """List the analysis tools phpqa knows how to run."""

    logger = build_cli_logger(emoji=not no_emoji)
    registry = initialize_registry(DEFAULT_REGISTRY)
    logger.console.print(build_tools_table(registry))
    installed = sum(1 for tool in registry.tools() if tool.can_load())
    summary = f"{installed} of {len(registry)} tools installed"
    if installed == len(registry):
        logger.ok(summary)
    else:
        logger.info(summary)


__all__ = ["build_tools_table", "tools_command"]
