# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Path helpers used when deriving options."""

from __future__ import annotations

import os
from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import Final

_Pathish = str | PathLike[str] | Path
_QUOTE: Final[str] = '"'


def quote(value: str) -> str:
    """Return ``value`` wrapped in double quotes for use in a shell command."""

    return f"{_QUOTE}{value}{_QUOTE}"


def existing_absolute_paths(directories: Iterable[str], *, cwd: _Pathish | None = None) -> list[str]:
    """Return resolved absolute paths for the entries of ``directories`` that are directories.

    Args:
        directories: Paths relative to ``cwd`` (or absolute).
        cwd: Anchor for relative entries; the process working directory when omitted.

    Returns:
        list[str]: Resolved paths in input order; entries that are not
            reachable directories are dropped.
    """

    base = Path.cwd() if cwd is None else Path(cwd)
    resolved: list[str] = []
    for directory in directories:
        candidate = base / directory
        try:
            if candidate.is_dir():
                resolved.append(str(candidate.resolve()))
        except OSError:
            continue
    return resolved


def common_root_path(directories: Iterable[str], *, cwd: _Pathish | None = None) -> str:
    """Return the deepest directory shared by every existing entry of ``directories``.

    The result ends with a path separator. An empty string is returned when
    none of the directories exist or they share no root (different drives).

    Args:
        directories: Analyzed directories, relative to ``cwd`` or absolute.
        cwd: Anchor for relative entries; the process working directory when omitted.

    Returns:
        str: Common root with a trailing separator, or ``""``.
    """

    paths = existing_absolute_paths(directories, cwd=cwd)
    if not paths:
        return ""
    try:
        # commonpath compares whole components, so "src" and "src2" share their parent
        common = os.path.commonpath(paths)
    except ValueError:
        return ""
    return common if common.endswith(os.sep) else common + os.sep


__all__ = ["common_root_path", "existing_absolute_paths", "quote"]
