# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default configuration factories."""

from __future__ import annotations

import copy
from typing import Final

from .types import ConfigValue

_DEFAULT_PAYLOAD: Final[dict[str, ConfigValue]] = {
    "phpcs": {
        "standard": "PSR2",
        "ignoreWarnings": False,
        "extensions": "php",
    },
    "phpcpd": {
        "minLines": 5,
        "minTokens": 70,
    },
    "phpmd": {
        "standard": "cleancode,codesize,controversial,design,naming,unusedcode",
    },
    "phpstan": {
        "level": 0,
    },
    "phpmetrics": {
        "config": None,
    },
    "phpunit": {
        "config": None,
    },
    "psalm": {
        "config": None,
    },
    "php-cs-fixer": {
        "rules": "@PSR2",
        "allowRiskyRules": False,
    },
}


def default_config_payload() -> dict[str, ConfigValue]:
    """Return a fresh copy of the built-in tool settings."""

    return copy.deepcopy(_DEFAULT_PAYLOAD)


__all__ = ["default_config_payload"]
