"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pkgverify.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pkgverify.config.settings import PkgVerifySettings
    from pkgverify.services.check import CheckService
    from pkgverify.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service (and with it the resolver's global path probe) is built
    on first use so ``--help`` and ``--version`` touch nothing on disk.
    """

    def __init__(self, settings: PkgVerifySettings, *, config_pinned: bool = False) -> None:
        self.settings = settings
        self._config_pinned = config_pinned
        self._service: CheckService | None = None

        from pkgverify.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> CheckService:
        if self._service is None:
            from pkgverify.services.check import CheckService

            self._service = CheckService(self.settings)
        return self._service

    def use_directory(self, directory: str | None) -> None:
        """Re-discover ``pkgverify.toml`` starting from a command's ``-C`` directory.

        Does nothing without a directory or when ``--config`` named the file.
        """
        if directory is None or self._config_pinned:
            return

        from pkgverify.config.settings import PkgVerifySettings

        s = self.settings
        self.settings = PkgVerifySettings.from_cli(
            root=Path(directory).resolve(),
            json_output=s.json_output,
            quiet=s.quiet,
            verbose=s.verbose,
            log_json=s.log_json,
        )
        self._service = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
