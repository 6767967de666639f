# SPDX-License-Identifier: MIT
"""Shared typing utilities for configuration payloads."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TypeAlias

ConfigPrimitive: TypeAlias = str | int | float | bool | None
ConfigValue: TypeAlias = ConfigPrimitive | list["ConfigValue"] | dict[str, "ConfigValue"]
ConfigFragment: TypeAlias = Mapping[str, ConfigValue]
MutableConfigFragment: TypeAlias = MutableMapping[str, ConfigValue]

__all__ = [
    "ConfigFragment",
    "ConfigPrimitive",
    "ConfigValue",
    "MutableConfigFragment",
]
