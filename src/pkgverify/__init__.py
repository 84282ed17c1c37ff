"""pkg-verify — check that a package's installed dependency tree is satisfied."""

from __future__ import annotations

from pkgverify.api import exit, stop, verify, warn  # noqa: A004
from pkgverify.errors import PackageVerifyError, VerificationError
from pkgverify.services.verifier import VerificationState, Verifier

__version__ = "0.1.0"

__all__ = [
    "PackageVerifyError",
    "VerificationError",
    "VerificationState",
    "Verifier",
    "__version__",
    "exit",
    "stop",
    "verify",
    "warn",
]
