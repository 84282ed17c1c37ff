"""Command: verify an installed dependency tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgverify.commands._base import VerifyCommand

if TYPE_CHECKING:
    from pkgverify.commands._context import AppContext


@click.command(
    cls=VerifyCommand,
    examples="""\
  pkg-verify check
  pkg-verify check -C path/to/app
  pkg-verify check left-pad -C path/to/app
  pkg-verify --json check --fail-fast""",
)
@click.argument("name", required=False)
@click.option(
    "-C",
    "--directory",
    type=click.Path(file_okay=False),
    default=None,
    help="Start directory (default: current directory).",
)
@click.option("--fail-fast", is_flag=True, help="Stop at the first problem.")
@click.pass_obj
def check(app: AppContext, name: str | None, directory: str | None, fail_fast: bool) -> None:
    """Verify dependencies of NAME, or of the package in the start directory."""
    app.use_directory(directory)
    app.emit(app.service.check(name, directory, fail_fast=fail_fast))
