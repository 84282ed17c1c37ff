"""Commands: module resolution introspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgverify.commands._base import VerifyCommand

if TYPE_CHECKING:
    from pkgverify.commands._context import AppContext

_directory_option = click.option(
    "-C",
    "--directory",
    type=click.Path(file_okay=False),
    default=None,
    help="Resolve as seen from this directory (default: current directory).",
)


@click.command(
    cls=VerifyCommand,
    examples="""\
  pkg-verify resolve left-pad
  pkg-verify -q resolve left-pad -C node_modules/some-dep""",
)
@click.argument("name")
@_directory_option
@click.pass_obj
def resolve(app: AppContext, name: str, directory: str | None) -> None:
    """Print the installed directory of package NAME."""
    app.use_directory(directory)
    app.emit(app.service.resolve(name, directory))


@click.command(
    cls=VerifyCommand,
    examples="""\
  pkg-verify paths
  pkg-verify --json paths -C node_modules/some-dep""",
)
@_directory_option
@click.pass_obj
def paths(app: AppContext, directory: str | None) -> None:
    """List the node_modules search path, in lookup order."""
    app.use_directory(directory)
    app.emit(app.service.search_paths(directory))
