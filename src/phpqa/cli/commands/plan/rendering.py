# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the plan command."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from .services import RunPlan


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def build_policy_table(plan: RunPlan) -> Table:
    """Return a table summarising output and execution policy."""

    options = plan.options
    table = Table(title="Options", box=box.SIMPLE, expand=True)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Output", options.output_mode)
    table.add_row("Parallel", _yes_no(options.is_parallel))
    table.add_row("Saved To Files", _yes_no(options.is_saved_to_files))
    table.add_row("Output Printed", _yes_no(options.is_output_printed))
    table.add_row("Report", _yes_no(options.has_report))
    table.add_row("Build Dir", options.build_dir)
    table.add_row("Analyzed Dirs", ", ".join(options.analyzed_dirs) or "-")
    table.add_row("Common Root", plan.common_root or "-")
    return table


def build_tools_table(plan: RunPlan) -> Table:
    """Return a table listing the running tools in execution order."""

    table = Table(title="Tools", box=box.SIMPLE, expand=True)
    table.add_column("Tool", style="bold")
    table.add_column("Executable")
    table.add_column("Allowed Errors")
    table.add_column("Command", overflow="fold")
    for planned in plan.tools:
        allowed = planned.tool.allowed_errors_count
        table.add_row(
            planned.name,
            _yes_no(planned.tool.is_executable),
            "-" if allowed is None else str(allowed),
            planned.command_line,
        )
    return table


def render_plan(plan: RunPlan, console: Console) -> None:
    console.print(build_policy_table(plan))
    console.print(build_tools_table(plan))


__all__ = ["build_policy_table", "build_tools_table", "render_plan"]
