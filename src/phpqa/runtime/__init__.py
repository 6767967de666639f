# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime services shared by the CLI."""

from __future__ import annotations

from .console import CONSOLES, ConsolePool, ConsoleStyle, detect_tty

__all__ = ["CONSOLES", "ConsolePool", "ConsoleStyle", "detect_tty"]
