# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool definitions, registry and command builders."""

from __future__ import annotations

from .base import BinaryLocator, RunningTool, ToolDefinition, ToolDescriptor, ToolResult
from .builtins import BUILTIN_TOOLS, initialize_registry
from .commands import CommandArgs, build_command, render_command
from .registry import DEFAULT_REGISTRY, ToolRegistry, register_tool

__all__ = [
    "BUILTIN_TOOLS",
    "BinaryLocator",
    "CommandArgs",
    "DEFAULT_REGISTRY",
    "RunningTool",
    "ToolDefinition",
    "ToolDescriptor",
    "ToolRegistry",
    "ToolResult",
    "build_command",
    "initialize_registry",
    "register_tool",
    "render_command",
]
