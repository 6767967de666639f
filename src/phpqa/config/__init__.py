# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project configuration: defaults, loading and dotted lookups."""

from __future__ import annotations

from .defaults import default_config_payload
from .loader import CONFIG_FILENAME, ConfigLoader, load_config
from .models import Config, ConfigError

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoader",
    "default_config_payload",
    "load_config",
]
