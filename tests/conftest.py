# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pytest

from phpqa.config.types import ConfigValue
from phpqa.runtime.console import CONSOLES


class FakeConfig:
    """Config collaborator answering ``value`` from a flat mapping and recording queries."""

    def __init__(self, values: Mapping[str, ConfigValue] | None = None) -> None:
        self._values = dict(values or {})
        self.queries: list[str] = []

    def value(self, key: str) -> ConfigValue | None:
        self.queries.append(key)
        return self._values.get(key)


@pytest.fixture
def make_config() -> type[FakeConfig]:
    """Return the fake config factory: ``make_config({"phpcs.allowedErrorsCount": 1})``."""

    return FakeConfig


@pytest.fixture
def empty_config() -> FakeConfig:
    return FakeConfig()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a working directory holding ``src`` and ``tests`` folders."""

    root = tmp_path.resolve()
    (root / "src").mkdir()
    (root / "tests").mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    # consoles cache the TTY state; CliRunner swaps stdout between tests
    CONSOLES.clear()
