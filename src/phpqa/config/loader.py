# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load project configuration (built-in defaults plus ``.phpqa.toml``)."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from .defaults import default_config_payload
from .models import Config, ConfigError

CONFIG_FILENAME: Final[str] = ".phpqa.toml"
DEFAULT_INCLUDE_KEY: Final[str] = "include"

_ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


class ConfigLoader:
    """Merge the project configuration file over the built-in defaults."""

    def __init__(
        self,
        directory: Path | None = None,
        *,
        filename: str = CONFIG_FILENAME,
        include_key: str = DEFAULT_INCLUDE_KEY,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._directory = directory if directory is not None else Path.cwd()
        self._filename = filename
        self._include_key = include_key
        self._env = env if env is not None else os.environ

    @classmethod
    def for_directory(cls, directory: str | Path | None) -> ConfigLoader:
        """Return a loader reading from ``directory``; blank means the working directory."""

        if directory is None or str(directory).strip() == "":
            return cls()
        return cls(Path(directory))

    @property
    def config_path(self) -> Path:
        return self._directory / self._filename

    def load(self) -> Config:
        """Return the effective configuration.

        Returns:
            Config: Defaults overlaid with the project file when one exists.

        Raises:
            ConfigError: If the project file cannot be parsed, an include is missing,
                or includes recurse.
        """

        document, origins = self._load(self.config_path, (), required=False)
        merged = _deep_merge(default_config_payload(), document)
        return Config(merged, origins=origins, base_dir=self._directory)

    def _load(
        self,
        path: Path,
        stack: tuple[Path, ...],
        *,
        required: bool = True,
    ) -> tuple[dict[str, Any], dict[str, Path]]:
        if not path.exists():
            # only the project file itself is optional
            if required:
                raise ConfigError(f"Included configuration not found: {path}")
            return {}, {}
        resolved = path.resolve()
        if resolved in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, resolved))
            raise ConfigError(f"Circular include detected: {include_chain}")
        try:
            with resolved.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid configuration at {path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc

        document: dict[str, Any] = dict(data)
        includes = document.pop(self._include_key, None)
        merged: dict[str, Any] = {}
        origins: dict[str, Path] = {}
        for include_path in self._coerce_includes(includes, resolved.parent):
            fragment, fragment_origins = self._load(include_path, stack + (resolved,))
            merged = _deep_merge(merged, fragment)
            origins.update(fragment_origins)
        merged = _deep_merge(merged, _expand_env(document, self._env))
        origins.update({section: resolved.parent for section in document})
        return merged, origins

    def _coerce_includes(self, raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, str):
            return [_resolve_path(Path(raw), base_dir)]
        if isinstance(raw, list):
            return [_resolve_path(Path(str(item)), base_dir) for item in raw]
        raise ConfigError(f"Unsupported include declaration: {raw!r}")


def load_config(directory: str | Path | None = None) -> Config:
    """Return the configuration for ``directory`` (the ``config`` option)."""

    return ConfigLoader.for_directory(directory).load()


def _resolve_path(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else (base_dir / path)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_env(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    return {key: _expand_env_value(value, env) for key, value in data.items()}


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _expand_env_string(value, env)
    if isinstance(value, MutableMapping):
        return {k: _expand_env_value(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(v, env) for v in value]
    return value


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key is None:
            return match.group(0)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


__all__ = ["CONFIG_FILENAME", "ConfigLoader", "load_config"]
