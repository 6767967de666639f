# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Definitions for analysis tools and their per-run descriptors."""

from __future__ import annotations

import importlib.util
import shutil
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..interfaces.tools import ToolBacking

OutputModeLiteral: TypeAlias = Literal["file", "cli"]
BinaryLocator: TypeAlias = Callable[[str], str | None]


class ToolDefinition(BaseModel):
    """Static description of an external analysis tool.

    A tool is backed by an executable found on ``PATH`` and/or an importable
    module. A definition with neither is assumed to be always runnable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    binary: str | None = None
    internal_module: str | None = Field(
        default=None,
        alias="internalModule",
        validation_alias=AliasChoices("internalModule", "internalClass", "internal_module"),
    )
    errors_type: str | None = Field(default=None, alias="errorsType")
    output_modes: tuple[OutputModeLiteral, ...] = Field(default=("file", "cli"), alias="outputModes")
    description: str = ""

    @field_validator("output_modes", mode="before")
    @classmethod
    def _coerce_modes(cls, value: Any) -> tuple[str, ...]:
        """Accept a single mode string as well as a sequence of modes.

        Args:
            value: Raw ``output_modes`` payload.

        Returns:
            tuple[str, ...]: Modes as a tuple.
        """

        if isinstance(value, str):
            return (value,)
        return tuple(value)

    @classmethod
    def coerce(cls, name: str, descriptor: Mapping[str, Any] | ToolDefinition) -> ToolDefinition:
        """Return ``descriptor`` as a definition named ``name``.

        Args:
            name: Tool name the descriptor is registered under.
            descriptor: Existing definition or a mapping of definition fields.

        Returns:
            ToolDefinition: Validated definition.
        """

        if isinstance(descriptor, ToolDefinition):
            return descriptor
        payload = dict(descriptor)
        payload.setdefault("name", name)
        return cls.model_validate(payload)

    @property
    def command(self) -> str:
        """Return the executable invoked for this tool."""

        return self.binary or self.name

    def supports_output(self, mode: str) -> bool:
        return mode in self.output_modes

    def can_load(self, locator: BinaryLocator | None = None) -> bool:
        """Return ``True`` when the tool's backing implementation resolves.

        Only lookups are performed: the binary is searched on ``PATH`` and the
        module spec is located without importing the module.

        Args:
            locator: Callable resolving a binary name to a path; defaults to
                :func:`shutil.which`.

        Returns:
            bool: ``True`` when every declared backing reference resolves.
        """

        if self.internal_module is not None and not _module_resolves(self.internal_module):
            return False
        find_binary = locator if locator is not None else shutil.which
        if self.binary is not None and find_binary(self.binary) is None:
            return False
        return True


ToolDescriptor: TypeAlias = ToolBacking | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Outcome of comparing a tool's error count with its threshold."""

    passed: bool
    errors_count: int
    allowed_errors_count: int | None
    message: str


class RunningTool(BaseModel):
    """Tool scheduled for the current invocation."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_executable: bool = True
    allowed_errors_count: int | None = None
    errors_type: str | None = None

    def get_allowed_errors_count(self) -> int | None:
        return self.allowed_errors_count

    def analyze_errors(self, errors_count: int) -> ToolResult:
        """Return whether ``errors_count`` stays within the allowed threshold.

        Args:
            errors_count: Number of findings reported by the tool.

        Returns:
            ToolResult: Pass/fail verdict with a human readable message.
        """

        allowed = self.allowed_errors_count
        if allowed is None:
            return ToolResult(True, errors_count, None, f"{self.name}: {errors_count} errors (no limit)")
        passed = errors_count <= allowed
        relation = "<=" if passed else ">"
        message = f"{self.name}: {errors_count} errors {relation} {allowed} allowed"
        return ToolResult(passed, errors_count, allowed, message)


def _module_resolves(module: str) -> bool:
    try:
        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        # parent package missing or invalid module name
        return False


__all__ = [
    "BinaryLocator",
    "OutputModeLiteral",
    "RunningTool",
    "ToolDefinition",
    "ToolDescriptor",
    "ToolResult",
]
