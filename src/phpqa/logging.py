# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines printed by phpqa commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from rich.text import Text

from .runtime.console import CONSOLES, ConsoleStyle

StatusLevel: TypeAlias = Literal["info", "ok", "warn", "fail"]


@dataclass(frozen=True, slots=True)
class _Marker:
    glyph: str
    style: str


_MARKERS: Final[dict[str, _Marker]] = {
    "info": _Marker("ℹ️ ", "cyan"),
    "ok": _Marker("✅ ", "green"),
    "warn": _Marker("⚠️ ", "yellow"),
    "fail": _Marker("❌ ", "red"),
}


def status(level: StatusLevel, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` as a ``level`` status line.

    Args:
        level: Severity deciding the glyph and colour.
        msg: Message text.
        use_emoji: Prefix the line with the level's glyph.
        use_color: Force colour on or off; ``None`` colours only on a terminal.
    """

    marker = _MARKERS[level]
    style = ConsoleStyle.for_stdout(color=use_color, emoji=use_emoji)
    text = Text(f"{marker.glyph}{msg}" if use_emoji else msg)
    if style.color:
        text.stylize(marker.style)
    CONSOLES.console(style).print(text)


__all__ = ["StatusLevel", "status"]
