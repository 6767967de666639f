# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line builders handed to the external executor.

Arguments are shell tokens. Directories, artifact paths and exclusions arrive
already wrapped in double quotes by :class:`~phpqa.options.Options`, and paths
taken from the project configuration are quoted here, so :func:`render_command`
can join them into a single command line.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

from ..options.paths import quote
from .base import ToolDefinition

if TYPE_CHECKING:
    from ..config.models import Config
    from ..options.core import Options

CommandArgs = tuple[str, ...]
CommandBuilder = Callable[["Options", "Config"], list[str]]

_DIR_LIST_SEPARATOR: Final[str] = ","
_SPACE: Final[str] = " "


def _dirs(options: Options) -> list[str]:
    return list(options.get_analyzed_dirs())


def _joined_dirs(options: Options) -> str:
    return str(options.get_analyzed_dirs(_DIR_LIST_SEPARATOR))


def _phploc(options: Options, config: Config) -> list[str]:
    args = list(options.ignored_paths.for_tool("phploc"))
    if options.is_saved_to_files:
        args += ["--log-xml", options.to_file("phploc.xml")]
    return args + _dirs(options)


def _phpcpd(options: Options, config: Config) -> list[str]:
    args = list(options.ignored_paths.for_tool("phpcpd"))
    args += [
        f"--min-lines={config.value('phpcpd.minLines')}",
        f"--min-tokens={config.value('phpcpd.minTokens')}",
    ]
    if options.is_saved_to_files:
        args += ["--log-pmd", options.to_file("phpcpd.xml")]
    return args + _dirs(options)


def _phpcs(options: Options, config: Config) -> list[str]:
    standard = _path_or_value(config, "phpcs.standard")
    args = ["-p", f"--extensions={config.value('phpcs.extensions') or 'php'}", f"--standard={standard}"]
    args += options.ignored_paths.for_tool("phpcs")
    if config.value("phpcs.ignoreWarnings"):
        args.append("--warning-severity=0")
    if options.is_saved_to_files:
        args += ["--report=checkstyle", f"--report-file={options.to_file('checkstyle.xml')}"]
    else:
        args.append("--report=full")
    return args + _dirs(options)


def _pdepend(options: Options, config: Config) -> list[str]:
    args = [
        f"--jdepend-xml={options.to_file('pdepend-jdepend.xml')}",
        f"--summary-xml={options.to_file('pdepend-summary.xml')}",
        f"--dependency-xml={options.to_file('pdepend-dependencies.xml')}",
        f"--jdepend-chart={options.to_file('pdepend-jdepend.svg')}",
        f"--overview-pyramid={options.to_file('pdepend-pyramid.svg')}",
    ]
    args += options.ignored_paths.for_tool("pdepend")
    return args + [_joined_dirs(options)]


def _phpmd(options: Options, config: Config) -> list[str]:
    report_format = "xml" if options.is_saved_to_files else "text"
    args = [_joined_dirs(options), report_format, _path_or_value(config, "phpmd.standard")]
    args += options.ignored_paths.for_tool("phpmd")
    if options.is_saved_to_files:
        args += ["--reportfile", options.to_file("phpmd.xml")]
    return args


def _phpmetrics(options: Options, config: Config) -> list[str]:
    args: list[str] = []
    metrics_config = _config_path(config, "phpmetrics.config")
    if metrics_config:
        args.append(f"--config={metrics_config}")
    args += options.ignored_paths.for_tool("phpmetrics")
    if options.is_saved_to_files:
        args += [
            f"--report-html={options.to_file('phpmetrics/')}",
            f"--report-violations={options.to_file('phpmetrics.xml')}",
        ]
    return args + [_joined_dirs(options)]


def _phpunit(options: Options, config: Config) -> list[str]:
    args: list[str] = []
    phpunit_config = _config_path(config, "phpunit.config")
    if phpunit_config:
        args.append(f"--configuration={phpunit_config}")
    if options.is_saved_to_files:
        args += ["--log-junit", options.to_file("phpunit.xml")]
    return args


def _phpstan(options: Options, config: Config) -> list[str]:
    args = ["analyse", f"--level={config.value('phpstan.level')}", "--no-progress"]
    phpstan_config = _config_path(config, "phpstan.config")
    if phpstan_config:
        args.append(f"--configuration={phpstan_config}")
    if options.is_saved_to_files:
        args.append("--error-format=checkstyle")
    return args + _dirs(options)


def _psalm(options: Options, config: Config) -> list[str]:
    args: list[str] = []
    psalm_config = _config_path(config, "psalm.config")
    if psalm_config:
        args.append(f"--config={psalm_config}")
    if options.is_saved_to_files:
        args.append(f"--report={options.to_file('psalm.xml')}")
    return args + _dirs(options)


def _php_cs_fixer(options: Options, config: Config) -> list[str]:
    args = ["fix", "--dry-run", "--verbose", f"--rules={config.value('php-cs-fixer.rules')}"]
    if config.value("php-cs-fixer.allowRiskyRules"):
        args.append("--allow-risky=yes")
    if options.is_saved_to_files:
        args.append("--format=junit")
    return args + _dirs(options)


def _parallel_lint(options: Options, config: Config) -> list[str]:
    args = list(options.ignored_paths.for_tool("parallel-lint"))
    if options.is_saved_to_files:
        args.append("--checkstyle")
    return args + _dirs(options)


_BUILDERS: Final[dict[str, CommandBuilder]] = {
    "phploc": _phploc,
    "phpcpd": _phpcpd,
    "phpcs": _phpcs,
    "pdepend": _pdepend,
    "phpmd": _phpmd,
    "phpmetrics": _phpmetrics,
    "phpunit": _phpunit,
    "phpstan": _phpstan,
    "psalm": _psalm,
    "php-cs-fixer": _php_cs_fixer,
    "parallel-lint": _parallel_lint,
}


def build_command(tool: ToolDefinition, options: Options, config: Config) -> CommandArgs:
    """Return the command line tokens that run ``tool``.

    Args:
        tool: Definition naming the tool and its executable.
        options: Effective options for this invocation.
        config: Project configuration supplying tool settings.

    Returns:
        CommandArgs: Executable followed by its arguments. Tools without a
        dedicated builder receive the analyzed directories only.
    """

    builder = _BUILDERS.get(tool.name)
    arguments = builder(options, config) if builder is not None else _dirs(options)
    return (tool.command, *arguments)


def render_command(args: Sequence[str]) -> str:
    """Return ``args`` joined into a single shell command line."""

    return _SPACE.join(args)


def _path_or_value(config: Config, key: str) -> str:
    # rulesets may be builtin names or XML files next to the config
    raw = config.value(key)
    if isinstance(raw, str) and raw.endswith(".xml"):
        return _config_path(config, key) or raw
    return "" if raw is None else str(raw)


def _config_path(config: Config, key: str) -> str | None:
    path = config.path(key)
    return None if path is None else quote(path)


__all__ = ["CommandArgs", "build_command", "render_command"]
