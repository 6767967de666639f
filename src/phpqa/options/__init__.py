# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option parsing and run policy for analysis invocations."""

from __future__ import annotations

from .core import ALLOWED_ERRORS_KEY, Options
from .ignored import IgnoredPaths
from .models import (
    DEFAULT_TOOLS,
    EXECUTION_PARALLEL,
    OUTPUT_CLI,
    OUTPUT_FILE,
    OptionsError,
    OptionValue,
    RawOptions,
    ToolSpec,
    parse_tool_specs,
)

__all__ = [
    "ALLOWED_ERRORS_KEY",
    "DEFAULT_TOOLS",
    "EXECUTION_PARALLEL",
    "OUTPUT_CLI",
    "OUTPUT_FILE",
    "IgnoredPaths",
    "OptionValue",
    "Options",
    "OptionsError",
    "RawOptions",
    "ToolSpec",
    "parse_tool_specs",
]
