# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols shared between the options core and its collaborators."""

from __future__ import annotations

from .config import ConfigLookupResult, ConfigReader
from .tools import ToolBacking

__all__ = ["ConfigLookupResult", "ConfigReader", "ToolBacking"]
