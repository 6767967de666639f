# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plan CLI command."""

from __future__ import annotations

import typer

from .command import plan_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the plan command with ``app``.

    Args:
        app: Typer application receiving the plan command registration.
    """

    app.command(name="plan", help="Resolve the tools to run and print the plan.")(plan_command)
