# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration lookup interfaces."""

from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable

from ..config.types import ConfigValue

ConfigLookupResult: TypeAlias = ConfigValue | None


@runtime_checkable
class ConfigReader(Protocol):
    """Read-only view over project configuration keyed by dotted paths."""

    def value(self, key: str) -> ConfigLookupResult:
        """Return the value stored under ``key`` such as ``phpcs.allowedErrorsCount``.

        Args:
            key: Dotted configuration path.

        Returns:
            ConfigLookupResult: Stored value, or ``None`` when nothing is configured.
        """

        raise NotImplementedError


__all__ = ["ConfigLookupResult", "ConfigReader"]
