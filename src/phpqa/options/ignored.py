# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate ignored directories and files into per-tool exclusion arguments."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from .models import split_list
from .paths import quote

ArgumentList = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class IgnoredPaths:
    """Directories and files excluded from analysis.

    Every tool spells exclusions differently, so each supported tool gets its
    own argument builder; :meth:`for_tool` dispatches by tool name. Values are
    wrapped in double quotes so globs and spaces survive the shell.
    """

    dirs: tuple[str, ...] = ()
    files: tuple[str, ...] = ()

    @classmethod
    def from_options(cls, ignored_dirs: str, ignored_files: str) -> IgnoredPaths:
        """Return exclusions parsed from the comma separated option values."""

        return cls(dirs=split_list(ignored_dirs), files=split_list(ignored_files))

    @property
    def is_empty(self) -> bool:
        return not self.dirs and not self.files

    def for_tool(self, tool: str) -> ArgumentList:
        """Return exclusion arguments for ``tool``; empty for unsupported tools."""

        builder = _BUILDERS.get(tool)
        if builder is None or self.is_empty:
            return ()
        return builder(self)

    def phpcs(self) -> ArgumentList:
        patterns = [f"*/{path}/*" for path in self.dirs] + [f"*/{path}" for path in self.files]
        return (f"--ignore={quote(','.join(patterns))}",)

    def pdepend(self) -> ArgumentList:
        patterns = [f"/{path}/" for path in self.dirs] + [f"/{path}" for path in self.files]
        return (f"--ignore={quote(','.join(patterns))}",)

    def phpmd(self) -> ArgumentList:
        patterns = [f"*/{path}/*" for path in self.dirs] + [f"*/{path}" for path in self.files]
        return ("--exclude", quote(",".join(patterns)))

    def phpmetrics(self) -> ArgumentList:
        # phpmetrics only understands directory exclusions
        if not self.dirs:
            return ()
        return (f"--excluded-dirs={quote('|'.join(self.dirs))}",)

    def bergmann(self) -> ArgumentList:
        """Return exclusions understood by phploc and phpcpd."""

        return tuple(f"--exclude={quote(path)}" for path in self.dirs) + tuple(
            f"--names-exclude={quote(path)}" for path in self.files
        )

    def parallel_lint(self) -> ArgumentList:
        arguments: list[str] = []
        for path in (*self.dirs, *self.files):
            arguments.extend(("--exclude", quote(path)))
        return tuple(arguments)


_BUILDERS: Final[dict[str, Callable[[IgnoredPaths], ArgumentList]]] = {
    "phpcs": IgnoredPaths.phpcs,
    "pdepend": IgnoredPaths.pdepend,
    "phpmd": IgnoredPaths.phpmd,
    "phpmetrics": IgnoredPaths.phpmetrics,
    "phploc": IgnoredPaths.bergmann,
    "phpcpd": IgnoredPaths.bergmann,
    "parallel-lint": IgnoredPaths.parallel_lint,
}


__all__ = ["ArgumentList", "IgnoredPaths"]
