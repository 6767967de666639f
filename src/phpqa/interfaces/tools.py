# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing tool descriptors consumed by the run planner."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ToolBacking(Protocol):
    """Descriptor able to report whether its backing implementation resolves."""

    def can_load(self) -> bool:
        """Return ``True`` when the tool's executable or module can be located.

        Returns:
            bool: ``True`` when the tool can be executed in this environment.
        """

        raise NotImplementedError


__all__ = ["ToolBacking"]
