# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by phpqa's status lines."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleStyle:
    """Rendering switches a console is built for."""

    color: bool
    emoji: bool
    terminal: bool

    @classmethod
    def for_stdout(cls, *, color: bool | None, emoji: bool) -> ConsoleStyle:
        """Return the style for the current stdout; ``color=None`` follows the terminal."""

        terminal = detect_tty()
        return cls(color=terminal if color is None else color, emoji=emoji, terminal=terminal)

    @property
    def ansi(self) -> bool:
        return self.color and self.terminal


class ConsolePool:
    """One :class:`Console` per :class:`ConsoleStyle`.

    Consoles bind to the stdout that was active when they were built, so the
    pool must be cleared whenever stdout is swapped (``CliRunner`` does this).
    """

    def __init__(self) -> None:
        self._consoles: dict[ConsoleStyle, Console] = {}

    def console(self, style: ConsoleStyle) -> Console:
        console = self._consoles.get(style)
        if console is None:
            console = Console(
                color_system="auto" if style.ansi else None,
                force_terminal=style.terminal,
                no_color=not style.ansi,
                emoji=style.emoji,
                highlight=False,
                soft_wrap=True,
            )
            self._consoles[style] = console
        return console

    def clear(self) -> None:
        self._consoles.clear()


CONSOLES: Final[ConsolePool] = ConsolePool()


__all__ = ["CONSOLES", "ConsolePool", "ConsoleStyle", "detect_tty"]
