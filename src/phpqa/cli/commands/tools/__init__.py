# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tools listing CLI command."""

from __future__ import annotations

import typer

from .command import tools_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the tools command with ``app``."""

    app.command(name="tools", help="List known tools and their availability.")(tools_command)
