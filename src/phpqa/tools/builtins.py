# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in analysis tool definitions."""

from __future__ import annotations

from typing import Final

from .base import ToolDefinition
from .registry import DEFAULT_REGISTRY, ToolRegistry

BUILTIN_TOOLS: Final[tuple[ToolDefinition, ...]] = (
    ToolDefinition(
        name="phploc",
        binary="phploc",
        description="Measures project size (lines of code, classes, complexity).",
    ),
    ToolDefinition(
        name="phpcpd",
        binary="phpcpd",
        errors_type="pmd-cpd",
        description="Copy/paste detector.",
    ),
    ToolDefinition(
        name="phpcs",
        binary="phpcs",
        errors_type="checkstyle",
        description="Coding standard checker.",
    ),
    ToolDefinition(
        name="pdepend",
        binary="pdepend",
        output_modes=("file",),
        description="Dependency and software metrics analyzer; writes XML/SVG artifacts only.",
    ),
    ToolDefinition(
        name="phpmd",
        binary="phpmd",
        errors_type="pmd",
        description="Mess detector.",
    ),
    ToolDefinition(
        name="phpmetrics",
        binary="phpmetrics",
        description="Static metrics and HTML report generator.",
    ),
    ToolDefinition(
        name="phpunit",
        binary="phpunit",
        errors_type="junit",
        description="Unit test runner.",
    ),
    ToolDefinition(
        name="phpstan",
        binary="phpstan",
        errors_type="checkstyle",
        description="Static type analyzer.",
    ),
    ToolDefinition(
        name="psalm",
        binary="psalm",
        errors_type="checkstyle",
        description="Static type analyzer.",
    ),
    ToolDefinition(
        name="php-cs-fixer",
        binary="php-cs-fixer",
        errors_type="junit",
        description="Coding standard fixer (dry run).",
    ),
    ToolDefinition(
        name="parallel-lint",
        binary="parallel-lint",
        errors_type="checkstyle",
        description="Syntax checker.",
    ),
)


def initialize_registry(registry: ToolRegistry = DEFAULT_REGISTRY) -> ToolRegistry:
    """Register every built-in tool missing from ``registry``.

    Args:
        registry: Registry receiving the built-in definitions.

    Returns:
        ToolRegistry: The same registry, for chaining.
    """

    for tool in BUILTIN_TOOLS:
        if tool.name not in registry:
            registry.register(tool)
    return registry


__all__ = ["BUILTIN_TOOLS", "initialize_registry"]
