# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project configuration supplying per-tool settings."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from .types import ConfigFragment, ConfigValue

_KEY_SEPARATOR: Final[str] = "."


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class Config:
    """Nested tool settings addressed by dotted keys.

    ``Config`` keeps track of the directory each top-level section was loaded
    from so relative paths (rulesets, phpmetrics config) resolve next to the
    file that declared them.
    """

    def __init__(
        self,
        data: ConfigFragment | None = None,
        *,
        origins: Mapping[str, Path] | None = None,
        base_dir: Path | None = None,
    ) -> None:
        self._data: dict[str, ConfigValue] = copy.deepcopy(dict(data or {}))
        self._origins: dict[str, Path] = dict(origins or {})
        self._base_dir = base_dir if base_dir is not None else Path.cwd()

    def value(self, key: str) -> ConfigValue | None:
        """Return the value stored under the dotted ``key`` or ``None``.

        Args:
            key: Dotted path such as ``phpcs.standard``.

        Returns:
            ConfigValue | None: Stored value; ``None`` when any segment is missing.
        """

        node: ConfigValue = self._data
        for segment in key.split(_KEY_SEPARATOR):
            if not isinstance(node, Mapping) or segment not in node:
                return None
            node = node[segment]
        return copy.deepcopy(node)

    def path(self, key: str) -> str | None:
        """Return the configured path under ``key`` made absolute.

        Relative values resolve against the directory of the file that
        supplied the section, falling back to the base directory.

        Args:
            key: Dotted path naming a file or directory setting.

        Returns:
            str | None: Absolute path, or ``None`` when the key is unset or empty.
        """

        raw = self.value(key)
        if raw is None or raw == "":
            return None
        candidate = Path(str(raw))
        if candidate.is_absolute():
            return str(candidate)
        section = key.split(_KEY_SEPARATOR, 1)[0]
        anchor = self.origin(section) or self._base_dir
        return str(anchor / candidate)

    def origin(self, section: str) -> Path | None:
        """Return the directory the ``section`` table was loaded from, if any."""

        return self._origins.get(section)

    def to_dict(self) -> dict[str, ConfigValue]:
        """Return a deep copy of the underlying configuration data."""

        return copy.deepcopy(self._data)

    def __repr__(self) -> str:
        sections = ", ".join(sorted(self._data))
        return f"Config(sections=[{sections}])"


__all__ = ["Config", "ConfigError"]
