"""Error and debug policies for the verifier.

The verifier never decides whether a problem is fatal.  It hands every
:class:`~pkgverify.domain.issues.Issue` to ``policy.on_error`` and every
trace line to ``policy.on_debug``; the presets below cover the usual
library and command-line behaviours:

- :func:`raise_policy` — raise :class:`VerificationError` (default)
- :func:`warn_policy` — print a warning line and continue
- :func:`exit_policy` — print the line and exit with status 1
- :func:`stop_policy` — raise the tagged :class:`PackageVerifyError`
- :func:`collect_policy` — append to a caller-owned list
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import click

from pkgverify.domain.issues import Issue
from pkgverify.errors import PackageVerifyError, VerificationError

PROG_NAME = "pkg-verify"
DEBUG_ENV_VAR = "NODE_DEBUG"

ErrorHook = Callable[[Issue], None]
DebugHook = Callable[[str], None]


def debug_enabled(env: Mapping[str, str] | None = None) -> bool:
    """True if ``NODE_DEBUG`` mentions ``pkg-verify``."""
    value = (env if env is not None else os.environ).get(DEBUG_ENV_VAR, "")
    return re.search(re.escape(PROG_NAME), value) is not None


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------


def stderr_debug(message: str) -> None:
    click.echo(f"{PROG_NAME}: {message}", err=True)


def raise_error(issue: Issue) -> None:
    raise VerificationError(issue)


def raise_tagged(issue: Issue) -> None:
    raise PackageVerifyError(issue)


def warn_error(issue: Issue) -> None:
    click.echo(f"{PROG_NAME}: {issue.message}", err=True)


def exit_error(issue: Issue) -> None:
    click.echo(f"{PROG_NAME}: {issue.message}", err=True)
    raise SystemExit(1)


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VerifyPolicy:
    """The two side-effect hooks a :class:`Verifier` reports through."""

    on_error: ErrorHook = raise_error
    on_debug: DebugHook | None = None


def _debug_hook(debug: bool | None) -> DebugHook | None:
    if debug is None:
        debug = debug_enabled()
    return stderr_debug if debug else None


def raise_policy(debug: bool | None = None) -> VerifyPolicy:
    return VerifyPolicy(on_error=raise_error, on_debug=_debug_hook(debug))


def warn_policy(debug: bool | None = None) -> VerifyPolicy:
    return VerifyPolicy(on_error=warn_error, on_debug=_debug_hook(debug))


def exit_policy(debug: bool | None = None) -> VerifyPolicy:
    return VerifyPolicy(on_error=exit_error, on_debug=_debug_hook(debug))


def stop_policy(debug: bool | None = None) -> VerifyPolicy:
    return VerifyPolicy(on_error=raise_tagged, on_debug=_debug_hook(debug))


def collect_policy(
    issues: list[Issue],
    *,
    fail_fast: bool = False,
    on_debug: DebugHook | None = None,
) -> VerifyPolicy:
    """Append every issue to *issues*; with *fail_fast*, raise after the first."""

    def collect(issue: Issue) -> None:
        issues.append(issue)
        if fail_fast:
            raise VerificationError(issue)

    return VerifyPolicy(on_error=collect, on_debug=on_debug)
