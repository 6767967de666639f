# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool registry providing lookup of known tools by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .base import ToolDefinition


class ToolRegistry(Mapping[str, ToolDefinition]):
    """Central registry for tool definitions.

    ``ToolRegistry`` behaves like a read-only mapping whose keys are tool names
    and whose values are :class:`ToolDefinition` instances, iterated in
    registration order. It is the ``available_tools`` collaborator handed to
    :meth:`phpqa.options.Options.build_running_tools`.
    """

    def __init__(self, tools: Iterable[ToolDefinition] = ()) -> None:
        """Initialise the registry, registering ``tools`` in order."""

        self._tools: dict[str, ToolDefinition] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: ToolDefinition) -> None:
        """Register ``tool`` with the registry enforcing uniqueness by name.

        Args:
            tool: Tool definition to insert into the registry.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool

    def reset(self) -> None:
        """Remove all tools from the registry."""
        self._tools.clear()

    def try_get(self, name: str) -> ToolDefinition | None:
        """Return the tool named ``name`` when registered, otherwise ``None``."""

        return self._tools.get(name)

    def tools(self) -> Iterable[ToolDefinition]:
        return tuple(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __getitem__(self, name: str) -> ToolDefinition:
        """Return the tool identified by ``name``.

        Raises:
            KeyError: If ``name`` does not refer to a registered tool.
        """

        return self._tools[name]


DEFAULT_REGISTRY = ToolRegistry()


def register_tool(tool: ToolDefinition) -> None:
    """Register ``tool`` using the shared global registry."""
    DEFAULT_REGISTRY.register(tool)


__all__ = ["DEFAULT_REGISTRY", "ToolRegistry", "register_tool"]
