"""CLI behaviour coverage matching the rich-click adapter."""

from __future__ import annotations

import re

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_branch import LogLevel, __init__conf__
from lib_log_branch import cli as cli_mod
from lib_log_branch.lib_log_branch import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_BRANCH_SINK", "LOG_BRANCH_USE_DOTENV", "LOG_BRANCH_THEME"):
        monkeypatch.delenv(name, raising=False)


def run_cli(args: list[str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the rich-click command with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert stdout.strip() == f"{__init__conf__.shell_command} version {__init__conf__.version}"


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` should disable verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_demo_reports_success_on_memory_sink() -> None:
    exit_code, stdout, exception = run_cli(["demo", "--sink", "memory"])

    assert exception is None
    assert exit_code == 0
    assert "demo finished: 4 rendered, 0 error(s), 0 deduplicated, failed=False" in strip_ansi(stdout)


def test_cli_demo_failure_renders_error_once() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--sink", "memory", "--fail"])

    assert exit_code == 0
    assert "5 rendered, 1 error(s), 1 deduplicated, failed=True" in strip_ansi(stdout)


def test_cli_demo_prints_through_console_sink() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--sink", "console", "--theme", "classic"])

    assert exit_code == 0
    plain = strip_ansi(stdout)
    assert "starting demo run" in plain
    assert "fetched 3 records" in plain
    assert "demo finished" in plain


def test_cli_demo_icons_flag_prefixes_console_lines() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--sink", "console", "--icons"])

    assert exit_code == 0
    assert f"{LogLevel.INFO.icon} starting demo run" in strip_ansi(stdout)


def test_cli_demo_rejects_unknown_theme() -> None:
    exit_code, _stdout, _ = run_cli(["demo", "--theme", "sunset"])

    assert exit_code != 0
