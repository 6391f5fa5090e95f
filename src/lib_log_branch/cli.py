"""Rich-click command line interface for lib_log_branch.

Purpose
-------
Offer a small operator surface: print package metadata and run the branch
logger demo against any configured sink.

Contents
--------
* :func:`cli` - root group handling ``--traceback`` and ``.env`` loading.
* :func:`cli_info`, :func:`cli_demo` - subcommands.
* :func:`main` - entry point delegating exit-code handling to
  :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as log_config
from .lib_log_branch import logdemo, summary_info

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and printing the banner by default."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--sink",
    type=click.Choice(log_config.SINK_CHOICES),
    default=None,
    help="Override the sink selected by LOG_BRANCH_SINK.",
)
@click.option(
    "--theme",
    type=click.Choice(sorted(log_config.CONSOLE_STYLE_THEMES)),
    default=None,
    help="Console palette used by the Rich sink.",
)
@click.option(
    "--icons/--no-icons",
    default=None,
    help="Prefix console lines with level icons (overrides LOG_BRANCH_SHOW_ICONS).",
)
@click.option("--fail", is_flag=True, default=False, help="Raise inside the child branch.")
def cli_demo(sink: str | None, theme: str | None, icons: bool | None, fail: bool) -> None:
    """Run a parent/child branch scenario and report what was rendered."""

    settings = log_config.with_overrides(log_config.load_settings(), sink=sink, console_theme=theme, show_icons=icons)
    result = logdemo(settings, fail=fail)
    click.echo(
        f"demo finished: {result['rendered']} rendered, {result['errors']} error(s), "
        f"{result['deduplicated']} deduplicated, failed={result['failed']}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the CLI with exit-code and traceback handling."""

    return lib_cli_exit_tools.run_cli(
        cli,
        argv=list(argv) if argv is not None else None,
        prog_name=__init__conf__.shell_command,
    )


__all__ = ["cli", "main"]
