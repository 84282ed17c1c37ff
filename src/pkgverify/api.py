"""Library entry points.

Each function verifies *name* as resolved from *dirname* with one of the
preset error policies.  *debug* forces tracing on or off; by default it
follows ``NODE_DEBUG=pkg-verify``.

Usage::

    import pkgverify

    pkgverify.verify(os.path.dirname(__file__), "my-app")   # raises on problems
    pkgverify.warn(os.path.dirname(__file__), "my-app")     # prints and continues
"""

from __future__ import annotations

from pkgverify.services.policies import (
    VerifyPolicy,
    exit_policy,
    raise_policy,
    stop_policy,
    warn_policy,
)
from pkgverify.services.verifier import VerificationState, Verifier


def _run(dirname: str, name: str, policy: VerifyPolicy) -> VerificationState:
    return Verifier(policy=policy).verify(dirname, name)


def verify(dirname: str, name: str, debug: bool | None = None) -> VerificationState:
    """Raise :class:`~pkgverify.errors.VerificationError` on the first problem."""
    return _run(dirname, name, raise_policy(debug))


def warn(dirname: str, name: str, debug: bool | None = None) -> VerificationState:
    """Print each problem to stderr and keep going."""
    return _run(dirname, name, warn_policy(debug))


def exit(dirname: str, name: str, debug: bool | None = None) -> VerificationState:  # noqa: A001
    """Print the first problem to stderr and exit with status 1."""
    return _run(dirname, name, exit_policy(debug))


def stop(dirname: str, name: str, debug: bool | None = None) -> VerificationState:
    """Raise :class:`~pkgverify.errors.PackageVerifyError` on the first problem."""
    return _run(dirname, name, stop_policy(debug))
