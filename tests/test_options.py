# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Behavioural tests for :class:`phpqa.options.Options`."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from phpqa.config import ConfigError
from phpqa.options import Options, OptionsError
from phpqa.tools import ToolDefinition

DEFAULT_OPTIONS = {
    "analyzedDirs": "./",
    "buildDir": "build/",
    "ignoredDirs": "vendor",
    "ignoredFiles": "",
    "tools": "phploc,phpcpd,phpcs,pdepend,phpmd,phpmetrics",
    "output": "file",
    "config": "",
    "verbose": True,
    "report": False,
    "execution": "parallel",
}


def _options(**overrides: object) -> Options:
    return Options({**DEFAULT_OPTIONS, **overrides})


class _Unloadable:
    """Capability object whose backing implementation never resolves."""

    def can_load(self) -> bool:
        return False


def test_escape_paths() -> None:
    options = _options()

    assert options.get_analyzed_dirs(",") == '"./"'
    assert options.get_analyzed_dirs() == ['"./"']
    assert options.to_file("file") == '"build//file"'
    assert options.raw_file("file") == "build//file"


def test_analyzed_dirs_are_quoted_individually_and_joined() -> None:
    options = _options(analyzedDirs="src, tests ,lib")

    assert options.get_analyzed_dirs() == ['"src"', '"tests"', '"lib"']
    assert options.get_analyzed_dirs(" ") == '"src" "tests" "lib"'


def test_artifact_paths_join_build_dir_with_a_slash() -> None:
    options = _options(buildDir="out")

    assert options.raw_file("phpcs.xml") == "out/phpcs.xml"
    assert options.to_file("phpcs.xml") == '"out/phpcs.xml"'


def test_defaults_apply_without_input() -> None:
    options = Options()

    assert options.get_analyzed_dirs() == ['"./"']
    assert options.build_dir == "build/"
    assert [spec.name for spec in options.tool_specs] == [
        "phploc",
        "phpcpd",
        "phpcs",
        "pdepend",
        "phpmd",
        "phpmetrics",
    ]
    assert options.is_saved_to_files is True
    assert options.is_parallel is True


def test_unknown_keys_are_ignored() -> None:
    options = _options(colour="rainbow", tools="phpcs")

    assert [spec.name for spec in options.tool_specs] == ["phpcs"]


def test_snake_case_keys_are_accepted() -> None:
    options = Options({"build_dir": "artifacts/", "analyzed_dirs": "src"})

    assert options.raw_file("x") == "artifacts//x"
    assert options.analyzed_dirs == ("src",)


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"verbose": "yes"}, "verbose"),
        ({"report": 1}, "report"),
        ({"tools": ["phpcs"]}, "tools"),
    ],
)
def test_wrong_value_type_is_rejected(overrides: dict[str, object], field: str) -> None:
    with pytest.raises(OptionsError, match=field):
        _options(**overrides)


def test_non_integer_threshold_is_rejected() -> None:
    with pytest.raises(OptionsError, match="phpcs"):
        _options(tools="phpcs:many")


def test_respect_tools_order_defined_in_option(empty_config) -> None:
    options = _options(output="cli", tools="phpunit,phpmetrics")

    tools = options.build_running_tools({"phpmetrics": {}, "phpunit": {}}, empty_config)

    assert list(tools) == ["phpunit", "phpmetrics"]


def test_ignore_pdepend_in_cli_output(empty_config) -> None:
    file_output = _options()
    cli_output = _options(output="cli")

    assert file_output.build_running_tools({"pdepend": {}}, empty_config) != {}
    assert cli_output.build_running_tools({"pdepend": {}}, empty_config) == {}


def test_cli_output_skips_tools_declaring_file_only_output(empty_config) -> None:
    options = _options(output="cli", tools="phpmetrics,phpcs")
    available = {
        "phpmetrics": ToolDefinition(name="phpmetrics", output_modes=("file",)),
        "phpcs": ToolDefinition(name="phpcs"),
    }

    assert list(options.build_running_tools(available, empty_config)) == ["phpcs"]


def test_ignore_not_installed_tool(empty_config) -> None:
    options = _options()

    tools = options.build_running_tools({"pdepend": {"internalModule": "unknown_tool.unknown_class"}}, empty_config)

    assert tools["pdepend"].is_executable is False


def test_unresolvable_backing_class_marks_tool_not_executable(empty_config) -> None:
    options = _options()

    tools = options.build_running_tools({"pdepend": {"internalClass": "UnknownTool\\UnknownClass"}}, empty_config)

    assert tools["pdepend"].is_executable is False


def test_missing_binary_marks_tool_not_executable(empty_config) -> None:
    options = _options(tools="phpcs")

    tools = options.build_running_tools({"phpcs": {"binary": "phpqa-test-binary-that-does-not-exist"}}, empty_config)

    assert tools["phpcs"].is_executable is False


def test_capability_objects_report_executability(empty_config) -> None:
    options = _options(tools="phpmd")

    tools = options.build_running_tools({"phpmd": _Unloadable()}, empty_config)

    assert tools["phpmd"].is_executable is False
    assert tools["phpmd"].errors_type is None


def test_unknown_tools_are_skipped(empty_config) -> None:
    options = _options(tools="phpcs,psalm,phpmd")

    tools = options.build_running_tools({"phpcs": {}, "phpmd": {}}, empty_config)

    assert list(tools) == ["phpcs", "phpmd"]


@pytest.mark.parametrize(
    ("opts", "is_saved_to_files", "is_output_printed", "has_report"),
    [
        pytest.param(
            {"output": "cli", "verbose": False, "report": True},
            False,
            True,
            False,
            id="ignore verbose and report in CLI output",
        ),
        pytest.param(
            {"output": "file", "verbose": False, "report": True},
            True,
            False,
            True,
            id="respect verbose mode and report in FILE output",
        ),
        pytest.param(
            {"output": "xml", "verbose": False, "report": False},
            True,
            False,
            False,
            id="unknown output falls through to FILE output",
        ),
    ],
)
def test_build_output(opts: dict[str, object], is_saved_to_files: bool, is_output_printed: bool, has_report: bool) -> None:
    options = _options(**opts)

    assert options.is_saved_to_files is is_saved_to_files
    assert options.is_output_printed is is_output_printed
    assert options.has_report is has_report


@pytest.mark.parametrize(
    ("opts", "is_parallel"),
    [
        pytest.param({}, True, id="parallel execution is default mode"),
        pytest.param({"execution": "parallel"}, True, id="parallel execution"),
        pytest.param({"execution": "single"}, False, id="dont use parallelism if execution is other word"),
        pytest.param({"execution": "Parallel"}, False, id="comparison is literal"),
    ],
)
def test_execute(opts: dict[str, object], is_parallel: bool) -> None:
    assert _options(**opts).is_parallel is is_parallel


@pytest.mark.parametrize(
    ("analyzed_dirs", "expected_suffix"),
    [
        pytest.param("src", f"{os.sep}src{os.sep}", id="current dir + analyzed dir + slash"),
        pytest.param("src,tests", os.sep, id="find common root from multiple dirs"),
        pytest.param("./non-existent-directory", None, id="no path when dir is invalid"),
        pytest.param("src,./non-existent-directory", f"{os.sep}src{os.sep}", id="missing dirs are ignored"),
    ],
)
def test_build_root_path(project_dir: Path, analyzed_dirs: str, expected_suffix: str | None) -> None:
    options = _options(analyzedDirs=analyzed_dirs)

    expected = "" if expected_suffix is None else os.getcwd() + expected_suffix
    assert options.get_common_root_path() == expected


def test_common_root_respects_component_boundaries(project_dir: Path) -> None:
    (project_dir / "src2").mkdir()
    options = _options(analyzedDirs="src,src2")

    assert options.get_common_root_path() == os.getcwd() + os.sep


def test_common_root_is_prefix_of_every_existing_dir(project_dir: Path) -> None:
    (project_dir / "src" / "a" / "b").mkdir(parents=True)
    (project_dir / "src" / "a" / "c").mkdir(parents=True)
    options = _options(analyzedDirs="src/a/b,src/a/c")

    root = options.get_common_root_path()

    assert root == str(project_dir / "src" / "a") + os.sep
    for member in ("src/a/b", "src/a/c"):
        assert (str((project_dir / member).resolve()) + os.sep).startswith(root)


def test_common_root_ignores_regular_files(project_dir: Path) -> None:
    (project_dir / "bootstrap.php").write_text("<?php\n", encoding="utf-8")
    options = _options(analyzedDirs="bootstrap.php")

    assert options.get_common_root_path() == ""


def test_common_root_skips_unreadable_dirs(project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    real_is_dir = Path.is_dir

    def guarded_is_dir(self: Path, **kwargs: bool) -> bool:
        if self.name == "tests":
            raise PermissionError(13, "Permission denied", str(self))
        return real_is_dir(self, **kwargs)

    monkeypatch.setattr(Path, "is_dir", guarded_is_dir)
    options = _options(analyzedDirs="src,tests")

    assert options.get_common_root_path() == str(project_dir / "src") + os.sep


def test_common_root_accepts_explicit_cwd(tmp_path: Path) -> None:
    (tmp_path / "lib").mkdir()
    options = _options(analyzedDirs="lib")

    assert options.get_common_root_path(tmp_path) == str((tmp_path / "lib").resolve()) + os.sep


def test_load_allowed_errors_count(empty_config) -> None:
    options = _options(tools="phpcs:1,pdepend")

    tools = options.build_running_tools({"phpcs": {}, "pdepend": {}}, empty_config)

    assert tools["phpcs"].get_allowed_errors_count() == 1
    assert tools["pdepend"].get_allowed_errors_count() is None


def test_load_errors_count_from_config(make_config) -> None:
    config = make_config({"phpcs.allowedErrorsCount": 0, "pdepend.allowedErrorsCount": 2})
    options = _options(tools="phpcs:1,pdepend")

    tools = options.build_running_tools({"phpcs": {}, "pdepend": {}}, config)

    assert tools["phpcs"].get_allowed_errors_count() == 1
    assert tools["pdepend"].get_allowed_errors_count() == 2
    assert config.queries == ["pdepend.allowedErrorsCount"]


def test_zero_threshold_from_config_is_kept(make_config) -> None:
    options = _options(tools="phpmd")

    tools = options.build_running_tools({"phpmd": {}}, make_config({"phpmd.allowedErrorsCount": 0}))

    assert tools["phpmd"].allowed_errors_count == 0


def test_explicit_zero_threshold_wins_over_config(make_config) -> None:
    options = _options(tools="phpmd:0")

    tools = options.build_running_tools({"phpmd": {}}, make_config({"phpmd.allowedErrorsCount": 5}))

    assert tools["phpmd"].allowed_errors_count == 0


def test_string_threshold_from_config_is_coerced(make_config) -> None:
    options = _options(tools="phpcs")

    tools = options.build_running_tools({"phpcs": {}}, make_config({"phpcs.allowedErrorsCount": "3"}))

    assert tools["phpcs"].allowed_errors_count == 3


@pytest.mark.parametrize("value", ["lots", "--3", "\u00b2", "1.5", True, ["3"]])
def test_malformed_threshold_from_config_is_rejected(make_config, value: object) -> None:
    options = _options(tools="phpcs")

    with pytest.raises(ConfigError, match="phpcs.allowedErrorsCount"):
        options.build_running_tools({"phpcs": {}}, make_config({"phpcs.allowedErrorsCount": value}))


def test_build_running_tools_recomputes_each_call(make_config) -> None:
    options = _options(tools="phpcs")
    available = {"phpcs": {}}

    first = options.build_running_tools(available, make_config({"phpcs.allowedErrorsCount": 1}))
    second = options.build_running_tools(available, make_config({"phpcs.allowedErrorsCount": 4}))

    assert first["phpcs"].allowed_errors_count == 1
    assert second["phpcs"].allowed_errors_count == 4


def test_options_are_read_only() -> None:
    options = _options()

    with pytest.raises(AttributeError):
        options.is_parallel = False  # type: ignore[misc]
