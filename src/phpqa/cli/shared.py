# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from rich.console import Console
from rich.text import Text

from ..logging import status


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Status, result and debug output for one command invocation."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        status("fail", message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        status("warn", message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        status("ok", message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        status("info", message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write machine-readable ``message`` to stdout without Rich markup."""

        typer.echo(message)

    def debug(self, **fields: object) -> None:
        """Print ``fields`` as one ``[debug] key=value ...`` line under ``--debug``."""

        if not self.debug_enabled:
            return
        text = Text("[debug]", style="bold cyan")
        for key, value in fields.items():
            text.append(f" {key}", style="bold magenta")
            text.append("=", style="dim")
            text.append(str(value), style="green")
        self.console.print(text, soft_wrap=True)


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Return a logger for one command.

    Args:
        emoji: Whether status lines carry emoji glyphs.
        debug: Whether ``debug`` lines are printed.

    Returns:
        CLILogger: Logger whose console also renders the command's tables.
    """

    return CLILogger(console=Console(highlight=False), use_emoji=emoji, debug_enabled=debug)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
