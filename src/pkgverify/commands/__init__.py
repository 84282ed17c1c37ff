"""Subcommand modules for pkg-verify.

Provides register_commands() which uses deferred imports to keep
``pkg-verify --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from pkgverify.commands.check import check
    from pkgverify.commands.resolve import paths, resolve

    cli.add_command(check)
    cli.add_command(resolve)
    cli.add_command(paths)
