"""Root CLI group for pkg-verify with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from pkgverify import __version__
from pkgverify.commands import register_commands
from pkgverify.commands._base import VerifyGroup
from pkgverify.commands._context import AppContext
from pkgverify.config.settings import PkgVerifySettings


@click.group(
    cls=VerifyGroup,
    invoke_without_command=True,
    examples="""\
  pkg-verify check
  pkg-verify -v check -C path/to/app
  pkg-verify --json resolve left-pad""",
)
@click.version_option(version=__version__, prog_name="pkg-verify")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug traces.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """pkg-verify — check that installed Node dependencies satisfy package.json."""
    ctx.ensure_object(dict)
    settings = PkgVerifySettings.from_cli(
        config_path=config_path,
        root=Path.cwd(),
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, config_pinned=config_path is not None)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
