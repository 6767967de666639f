# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the command lines handed to the external executor."""

from __future__ import annotations

from pathlib import Path

import pytest

from phpqa.config import Config, ConfigLoader
from phpqa.options import Options
from phpqa.tools import ToolDefinition, ToolRegistry, build_command, initialize_registry, render_command


@pytest.fixture
def registry() -> ToolRegistry:
    return initialize_registry(ToolRegistry())


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return ConfigLoader(tmp_path).load()


def _command(registry: ToolRegistry, name: str, config: Config, **raw: object) -> tuple[str, ...]:
    options = Options({"analyzedDirs": "src,tests", "ignoredDirs": "vendor", **raw})
    return build_command(registry[name], options, config)


def test_phploc_logs_to_build_dir_in_file_mode(registry: ToolRegistry, config: Config) -> None:
    command = _command(registry, "phploc", config)

    assert command == (
        "phploc",
        '--exclude="vendor"',
        "--log-xml",
        '"build//phploc.xml"',
        '"src"',
        '"tests"',
    )


def test_phploc_prints_in_cli_mode(registry: ToolRegistry, config: Config) -> None:
    command = _command(registry, "phploc", config, output="cli")

    assert "--log-xml" not in command
    assert command[-2:] == ('"src"', '"tests"')


def test_phpcpd_uses_configured_thresholds(registry: ToolRegistry, config: Config) -> None:
    command = _command(registry, "phpcpd", config)

    assert "--min-lines=5" in command
    assert "--min-tokens=70" in command
    assert command[command.index("--log-pmd") + 1] == '"build//phpcpd.xml"'


def test_phpcs_reports_checkstyle_to_file(registry: ToolRegistry, config: Config) -> None:
    command = _command(registry, "phpcs", config)

    assert "--standard=PSR2" in command
    assert '--ignore="*/vendor/*"' in command
    assert "--report=checkstyle" in command
    assert '--report-file="build//checkstyle.xml"' in command


def test_phpcs_reports_full_on_console(registry: ToolRegistry, config: Config) -> None:
    command = _command(registry, "phpcs", config, output="cli")

    assert "--report=full" in command
    assert not any(arg.startswith("--report-file") for arg in command)


def test_pdepend_writes_artifacts(registry: ToolRegistry, config: Config) -> None:
    command = _command(registry, "pdepend", config, buildDir="out/")

    assert '--jdepend-xml="out//pdepend-jdepend.xml"' in command
    assert '--overview-pyramid="out//pdepend-pyramid.svg"' in command
    assert command[-1] == '"src","tests"'


def test_phpmd_switches_report_format(registry: ToolRegistry, config: Config) -> None:
    file_command = _command(registry, "phpmd", config)
    cli_command = _command(registry, "phpmd", config, output="cli")

    assert file_command[1:3] == ('"src","tests"', "xml")
    assert file_command[-2:] == ("--reportfile", '"build//phpmd.xml"')
    assert cli_command[2] == "text"
    assert "--reportfile" not in cli_command


def test_phpmd_resolves_ruleset_files(registry: ToolRegistry, tmp_path: Path) -> None:
    config = Config({"phpmd": {"standard": "phpmd.xml"}}, origins={"phpmd": tmp_path})

    command = _command(registry, "phpmd", config)

    assert command[3] == f'"{tmp_path / "phpmd.xml"}"'


def test_phpmetrics_uses_config_path(registry: ToolRegistry, tmp_path: Path) -> None:
    config = Config({"phpmetrics": {"config": "metrics.yml"}}, origins={"phpmetrics": tmp_path})

    command = _command(registry, "phpmetrics", config)

    assert f'--config="{tmp_path / "metrics.yml"}"' in command
    assert '--excluded-dirs="vendor"' in command
    assert '--report-html="build//phpmetrics/"' in command


def test_config_paths_with_spaces_stay_single_shell_words(registry: ToolRegistry, tmp_path: Path) -> None:
    project = tmp_path / "my project"
    config = Config({"phpmetrics": {"config": "metrics cfg.yml"}}, origins={"phpmetrics": project})
    options = Options({"analyzedDirs": "src", "ignoredDirs": "third party"})

    line = render_command(build_command(registry["phpmetrics"], options, config))

    assert f'--config="{project / "metrics cfg.yml"}"' in line
    assert '--excluded-dirs="third party"' in line


def test_unknown_tool_receives_analyzed_dirs(config: Config) -> None:
    options = Options({"analyzedDirs": "src"})

    command = build_command(ToolDefinition(name="deptrac", binary="vendor/bin/deptrac"), options, config)

    assert command == ("vendor/bin/deptrac", '"src"')


def test_render_command_joins_tokens() -> None:
    assert render_command(("phpcs", "-p", '"src"')) == 'phpcs -p "src"'
